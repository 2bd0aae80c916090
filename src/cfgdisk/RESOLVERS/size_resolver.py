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
Resolution of the size of placeholder images from recorded volume status.
"""
from typing import Iterable, Union
from ..errors import VolumeNotFoundError
from ..MODELS.instance import InstanceStatus, VirtualMachineInstance, VolumeStatus

StatusSource = Union[VirtualMachineInstance, InstanceStatus, Iterable[VolumeStatus]]


def _volume_statuses(status: StatusSource) -> Iterable[VolumeStatus]:
    if isinstance(status, VirtualMachineInstance):
        return status.status.volume_status
    if isinstance(status, InstanceStatus):
        return status.volume_status
    return status


def find_iso_size(status: StatusSource, volume_name: str, empty_iso: bool) -> int:
    """
    Determines the size of the image to create for a volume.

    A size of 0 means the image is built from the mounted files. Any other
    value is the size of the empty placeholder image to allocate.

    :param status: The instance, its status, or its list of volume statuses.
    :param volume_name: Name of the volume the image is for.
    :param empty_iso: Whether an empty image was requested.
    :raises VolumeNotFoundError: If an empty image is requested for a volume
        without recorded status.
    """
    if not empty_iso:
        return 0
    for volume_status in _volume_statuses(status):
        if volume_status.name == volume_name:
            return volume_status.size
    raise VolumeNotFoundError(volume_name)
