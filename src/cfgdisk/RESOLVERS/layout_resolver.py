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
Resolution of the graft points placing mounted files inside an image.
"""
import os
from typing import List
from ..errors import FileSystemAccessError


def get_files_layout(dir_path: str) -> List[str]:
    """
    Lists the immediate entries of a directory as ``name=path`` graft points.

    Entries are sorted by name so rebuilding the same data yields the same image.

    :param dir_path: Directory holding the mounted config data.
    :return: One ``name=path`` string per entry.
    :raises FileSystemAccessError: If the directory cannot be listed.
    """
    try:
        names = sorted(os.listdir(dir_path))
    except OSError as e:
        raise FileSystemAccessError(dir_path, e.strerror or str(e)) from e
    return [f"{name}={os.path.join(dir_path, name)}" for name in names]
