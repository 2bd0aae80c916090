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
Exceptions raised while building configuration disk images.
"""
from typing import List, Optional


class ConfigDiskError(RuntimeError):
    """Base class for configuration disk failures."""


class VolumeNotFoundError(ConfigDiskError):
    """Raised when a volume has no entry in the instance's volume status."""

    def __init__(self, volume_name: str):
        super().__init__(f"failed to find the status of volume {volume_name}")
        self.volume_name = volume_name


class FileSystemAccessError(ConfigDiskError):
    """Raised when a source directory cannot be listed or a disks directory created."""

    def __init__(self, path: str, reason: str, action: str = "read"):
        super().__init__(f"failed to {action} directory '{path}': {reason}")
        self.path = path


class ProcessError(ConfigDiskError):
    """Raised when an external command cannot be started or exits non-zero."""

    def __init__(self, command: List[str], returncode: Optional[int], stderr: str = ""):
        if returncode is None:
            message = f"failed to start '{command[0]}': {stderr}"
        else:
            message = f"'{command[0]}' exited with status {returncode}"
            if stderr:
                message += f": {stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ImageBuildError(ConfigDiskError):
    """Raised when the ISO mastering tool fails to build an image."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to build iso '{path}': {reason}")
        self.path = path


class ImageCreationError(ConfigDiskError):
    """Raised when an empty image file cannot be created."""

    def __init__(self, path: str):
        super().__init__(f"failed to create empty iso: '{path}'")
        self.path = path


class ImageResizeError(ConfigDiskError):
    """Raised when an empty image cannot be inflated to its recorded size."""

    def __init__(self, path: str):
        super().__init__(f"failed to inflate empty iso: '{path}'")
        self.path = path


class ManifestError(ConfigDiskError):
    """Raised when a virtual machine instance manifest cannot be loaded."""


class SettingsError(ConfigDiskError):
    """Raised when a CFGDISK_* setting has an invalid value."""
