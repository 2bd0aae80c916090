# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Strategies that write an image artifact to disk.

Both ways of producing a config disk, mastering an ISO from files and
allocating an empty placeholder, implement the same ImageCreator interface so
either can be replaced independently.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel
from ..errors import ImageBuildError, ImageCreationError, ImageResizeError, ProcessError
from ..RUNNERS.process_runner import ProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_VOLUME_ID = "cfgdata"


class ImageRequest(BaseModel):
    """
    Parameters of a single image creation.
    """
    volume_id: str = DEFAULT_VOLUME_ID
    files: List[str] = []
    size: int = 0


class ImageCreator(ABC):
    """
    Writes an image to a path.
    """
    @abstractmethod
    def create(self, output: str, request: ImageRequest) -> None:
        """
        Creates or overwrites the image at ``output``.

        :raises ConfigDiskError: If the image could not be written.
        """


class XorrisoImageCreator(ImageCreator):
    """
    Masters an ISO-9660 image from graft points with xorrisofs.

    Joliet and Rock Ridge are enabled so Windows and Linux guests both see
    the original file names.
    """
    def __init__(self, iso_binary: str = "xorrisofs", runner: Optional[ProcessRunner] = None):
        self.iso_binary = iso_binary
        self.runner = runner or ProcessRunner("iso")

    def build_command(self, output: str, volume_id: str, files: List[str]) -> List[str]:
        args = [
            self.iso_binary,
            "-output", output,
            "-follow-links",
            "-volid", volume_id or DEFAULT_VOLUME_ID,
            "-joliet",
            "-rock",
            "-graft-points",
            "-partition_cyl_align", "on",
        ]
        args.extend(files)
        return args

    def create(self, output: str, request: ImageRequest) -> None:
        command = self.build_command(output, request.volume_id, request.files)
        try:
            self.runner.run(command)
        except ProcessError as e:
            raise ImageBuildError(output, str(e)) from e
        logger.debug("Built iso %s with %d file(s)", output, len(request.files))


class EmptyImageCreator(ImageCreator):
    """
    Allocates a content-less image of a fixed size.

    The file is truncated to its length rather than written, so it is sparse
    on filesystems that support it.
    """
    def create(self, output: str, request: ImageRequest) -> None:
        try:
            f = open(output, "wb")
        except OSError as e:
            raise ImageCreationError(output) from e
        with f:
            try:
                f.truncate(request.size)
            except (OSError, ValueError) as e:
                raise ImageResizeError(output) from e
        logger.debug("Created empty iso %s of %d bytes", output, request.size)
