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
Builds config disk images, choosing between a populated and an empty image.
"""
import logging
from typing import List, Optional
from ..RESOLVERS.layout_resolver import get_files_layout
from ..RESOLVERS.size_resolver import StatusSource, find_iso_size
from .iso_creator import (
    DEFAULT_VOLUME_ID,
    EmptyImageCreator,
    ImageCreator,
    ImageRequest,
    XorrisoImageCreator,
)

logger = logging.getLogger(__name__)


class ConfigImageBuilder:
    """
    Writes the image of one config volume.

    A size of 0 means "populated": the image is mastered from the files of the
    source directory. Any other size produces an empty placeholder of exactly
    that many bytes, used when the volume size was already negotiated.
    """
    def __init__(self,
                 iso_creator: Optional[ImageCreator] = None,
                 empty_creator: Optional[ImageCreator] = None):
        """
        Initializes the builder.

        :param iso_creator: Strategy building populated images. Defaults to xorrisofs.
        :param empty_creator: Strategy allocating empty images.
        """
        self.iso_creator = iso_creator or XorrisoImageCreator()
        self.empty_creator = empty_creator or EmptyImageCreator()

    def build_image(self, output: str, volume_id: str, files: List[str], size: int) -> None:
        """
        Dispatches to the populated or the empty strategy.

        :param output: Path of the image to write.
        :param volume_id: ISO volume label, "cfgdata" when empty.
        :param files: ``name=path`` graft points, ignored for empty images.
        :param size: 0 for a populated image, else the placeholder size in bytes.
        """
        if size == 0:
            logger.info("Building config image %s", output)
            request = ImageRequest(volume_id=volume_id or DEFAULT_VOLUME_ID, files=files)
            self.iso_creator.create(output, request)
        else:
            logger.info("Creating empty config image %s (%d bytes)", output, size)
            self.empty_creator.create(output, ImageRequest(size=size))

    def create_config_image(self, output: str, volume_id: str, source_dir: str, size: int = 0) -> None:
        """
        Builds the image of a mounted config directory.

        The directory is only listed when a populated image is built.
        """
        files: List[str] = []
        if size == 0:
            files = get_files_layout(source_dir)
        self.build_image(output, volume_id, files, size)

    def create_config_image_for_volume(self,
                                       output: str,
                                       volume_id: str,
                                       source_dir: str,
                                       status: StatusSource,
                                       volume_name: str,
                                       empty_iso: bool = False) -> int:
        """
        Builds the image of a volume, sizing it from the recorded volume status.

        :return: The size used, 0 for a populated image.
        :raises VolumeNotFoundError: If ``empty_iso`` is set and the volume has no status.
        """
        size = find_iso_size(status, volume_name, empty_iso)
        self.create_config_image(output, volume_id, source_dir, size)
        return size


def create_config_image(output: str,
                        volume_id: str,
                        source_dir: str,
                        size: int = 0,
                        builder: Optional[ConfigImageBuilder] = None) -> None:
    """
    Builds a config image with the default creators unless a builder is given.
    """
    (builder or ConfigImageBuilder()).create_config_image(output, volume_id, source_dir, size)


def create_config_image_for_volume(output: str,
                                   volume_id: str,
                                   source_dir: str,
                                   status: StatusSource,
                                   volume_name: str,
                                   empty_iso: bool = False,
                                   builder: Optional[ConfigImageBuilder] = None) -> int:
    """
    Status-aware variant of create_config_image.
    """
    return (builder or ConfigImageBuilder()).create_config_image_for_volume(
        output, volume_id, source_dir, status, volume_name, empty_iso)
