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
Creation of every config disk of a virtual machine instance.
"""
import logging
import os
from typing import List, Optional
from ..BUILDERS.image_builder import ConfigImageBuilder
from ..CONFIG import paths
from ..errors import FileSystemAccessError
from ..MODELS.config_source import ConfigType
from ..MODELS.instance import VirtualMachineInstance, Volume
from ..RESOLVERS.size_resolver import find_iso_size

logger = logging.getLogger(__name__)


class ConfigDiskManager:
    """
    Renders the ConfigMap, Secret, DownwardAPI and ServiceAccount volumes of an
    instance into images at their registered locations.

    With ``empty_iso`` set, placeholder images sized from the instance's volume
    status are created instead, e.g. on a migration target where the content
    is copied over afterwards.
    """
    def __init__(self, builder: Optional[ConfigImageBuilder] = None):
        """
        Initializes the manager.

        :param builder: Builder used for every disk. Defaults to xorrisofs-backed.
        """
        self.builder = builder or ConfigImageBuilder()

    def create_config_map_disks(self, vmi: VirtualMachineInstance, empty_iso: bool = False) -> List[str]:
        return self._create_disks(vmi, ConfigType.CONFIG_MAP, empty_iso)

    def create_secret_disks(self, vmi: VirtualMachineInstance, empty_iso: bool = False) -> List[str]:
        return self._create_disks(vmi, ConfigType.SECRET, empty_iso)

    def create_downward_api_disks(self, vmi: VirtualMachineInstance, empty_iso: bool = False) -> List[str]:
        return self._create_disks(vmi, ConfigType.DOWNWARD_API, empty_iso)

    def create_service_account_disk(self, vmi: VirtualMachineInstance, empty_iso: bool = False) -> List[str]:
        """
        Creates the service account disk. A pod has a single service account,
        so only the first such volume is rendered.
        """
        volumes = vmi.volumes_of_type(ConfigType.SERVICE_ACCOUNT)
        if not volumes:
            return []
        return [self._create_disk(vmi, ConfigType.SERVICE_ACCOUNT, volumes[0], empty_iso)]

    def create_disks(self, vmi: VirtualMachineInstance, config_type: ConfigType,
                     empty_iso: bool = False) -> List[str]:
        """
        Creates the disks of a single config type.

        :return: Paths of the images written.
        """
        if config_type == ConfigType.SERVICE_ACCOUNT:
            return self.create_service_account_disk(vmi, empty_iso)
        return self._create_disks(vmi, config_type, empty_iso)

    def create_all_disks(self, vmi: VirtualMachineInstance, empty_iso: bool = False) -> List[str]:
        """
        Creates the disks of every config type, stopping at the first failure.

        :return: Paths of the images written.
        """
        created = []
        for config_type in ConfigType:
            created.extend(self.create_disks(vmi, config_type, empty_iso))
        return created

    def _create_disks(self, vmi: VirtualMachineInstance, config_type: ConfigType,
                      empty_iso: bool) -> List[str]:
        return [
            self._create_disk(vmi, config_type, volume, empty_iso)
            for volume in vmi.volumes_of_type(config_type)
        ]

    def _create_disk(self, vmi: VirtualMachineInstance, config_type: ConfigType,
                     volume: Volume, empty_iso: bool) -> str:
        source = paths.source_path(config_type, volume.name)
        disk = paths.disk_path(config_type, volume.name)
        size = find_iso_size(vmi, volume.name, empty_iso)

        try:
            os.makedirs(os.path.dirname(disk), exist_ok=True)
        except OSError as e:
            raise FileSystemAccessError(os.path.dirname(disk), e.strerror or str(e), "create") from e

        logger.debug("Volume %s (%s): %s -> %s", volume.name, config_type.value, source, disk)
        self.builder.create_config_image(disk, volume.volume_label, source, size)
        return disk
