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
Models for the parts of a VirtualMachineInstance read when building config disks.

Only the fields needed here are modelled. Field names accept the camelCase
spelling used by Kubernetes manifests.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from .config_source import ConfigType


class _ManifestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ConfigMapVolumeSource(_ManifestModel):
    name: Optional[str] = None
    volume_label: Optional[str] = Field(default=None, alias="volumeLabel")


class SecretVolumeSource(_ManifestModel):
    secret_name: Optional[str] = Field(default=None, alias="secretName")
    volume_label: Optional[str] = Field(default=None, alias="volumeLabel")


class DownwardAPIVolumeSource(_ManifestModel):
    volume_label: Optional[str] = Field(default=None, alias="volumeLabel")


class ServiceAccountVolumeSource(_ManifestModel):
    service_account_name: Optional[str] = Field(default=None, alias="serviceAccountName")


class Volume(_ManifestModel):
    """
    A volume of the instance spec. At most one source is expected to be set.
    """
    name: str
    config_map: Optional[ConfigMapVolumeSource] = Field(default=None, alias="configMap")
    secret: Optional[SecretVolumeSource] = None
    downward_api: Optional[DownwardAPIVolumeSource] = Field(default=None, alias="downwardAPI")
    service_account: Optional[ServiceAccountVolumeSource] = Field(default=None, alias="serviceAccount")

    @property
    def config_type(self) -> Optional[ConfigType]:
        """
        The config type backing this volume, or None for other volume kinds.
        """
        if self.config_map is not None:
            return ConfigType.CONFIG_MAP
        if self.secret is not None:
            return ConfigType.SECRET
        if self.downward_api is not None:
            return ConfigType.DOWNWARD_API
        if self.service_account is not None:
            return ConfigType.SERVICE_ACCOUNT
        return None

    @property
    def volume_label(self) -> str:
        """
        Label requested for the image, empty when none was given.
        """
        for source in (self.config_map, self.secret, self.downward_api):
            if source is not None and source.volume_label:
                return source.volume_label
        return ""


class VolumeStatus(_ManifestModel):
    """
    Reported state of a volume. Size is in bytes.
    """
    name: str
    size: int = 0


class ObjectMeta(_ManifestModel):
    name: str = ""
    namespace: str = "default"


class InstanceSpec(_ManifestModel):
    volumes: List[Volume] = []


class InstanceStatus(_ManifestModel):
    volume_status: List[VolumeStatus] = Field(default_factory=list, alias="volumeStatus")


class VirtualMachineInstance(_ManifestModel):
    """
    A virtual machine instance as seen by the config disk builder.
    """
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: InstanceSpec = Field(default_factory=InstanceSpec)
    status: InstanceStatus = Field(default_factory=InstanceStatus)

    def volumes_of_type(self, config_type: ConfigType) -> List[Volume]:
        return [v for v in self.spec.volumes if v.config_type == config_type]
