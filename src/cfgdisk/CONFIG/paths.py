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
Fixed locations of mounted config data and of the disk images rendered from it.
"""
import os
from types import MappingProxyType
from typing import Mapping, Union
from ..MODELS.config_source import ConfigPaths, ConfigType

MOUNT_BASE_DIR = "/var/run/kubevirt-private"

CONFIG_MAP_SOURCE_DIR = MOUNT_BASE_DIR + "/config-map"
SECRET_SOURCE_DIR = MOUNT_BASE_DIR + "/secret"
DOWNWARD_API_SOURCE_DIR = MOUNT_BASE_DIR + "/downwardapi"
SERVICE_ACCOUNT_SOURCE_DIR = "/var/run/secrets/kubernetes.io/serviceaccount/"

CONFIG_MAP_DISKS_DIR = MOUNT_BASE_DIR + "/config-map-disks"
SECRET_DISKS_DIR = MOUNT_BASE_DIR + "/secret-disks"
DOWNWARD_API_DISKS_DIR = MOUNT_BASE_DIR + "/downwardapi-disks"
SERVICE_ACCOUNT_DISK_DIR = MOUNT_BASE_DIR + "/service-account-disk"
SERVICE_ACCOUNT_DISK_NAME = "service-account.iso"

PATHS: Mapping[ConfigType, ConfigPaths] = MappingProxyType({
    ConfigType.CONFIG_MAP: ConfigPaths(
        source_dir=CONFIG_MAP_SOURCE_DIR, disks_dir=CONFIG_MAP_DISKS_DIR),
    ConfigType.SECRET: ConfigPaths(
        source_dir=SECRET_SOURCE_DIR, disks_dir=SECRET_DISKS_DIR),
    ConfigType.DOWNWARD_API: ConfigPaths(
        source_dir=DOWNWARD_API_SOURCE_DIR, disks_dir=DOWNWARD_API_DISKS_DIR),
    ConfigType.SERVICE_ACCOUNT: ConfigPaths(
        source_dir=SERVICE_ACCOUNT_SOURCE_DIR,
        disks_dir=SERVICE_ACCOUNT_DISK_DIR,
        disk_name=SERVICE_ACCOUNT_DISK_NAME),
})


def get_paths(config_type: Union[ConfigType, str]) -> ConfigPaths:
    """
    Looks up the registry entry of a config type.

    :param config_type: A ConfigType or its string value, e.g. "secret".
    :raises ValueError: If the type is unknown.
    """
    return PATHS[ConfigType(config_type)]


def source_dir(config_type: Union[ConfigType, str]) -> str:
    return get_paths(config_type).source_dir


def disks_dir(config_type: Union[ConfigType, str]) -> str:
    return get_paths(config_type).disks_dir


def source_path(config_type: Union[ConfigType, str], volume_name: str) -> str:
    """
    Directory holding the mounted data of one volume.

    The service account token is mounted once per pod, so its source does not
    depend on the volume name.
    """
    paths = get_paths(config_type)
    if paths.disk_name:
        return paths.source_dir
    return os.path.join(paths.source_dir, volume_name)


def disk_path(config_type: Union[ConfigType, str], volume_name: str) -> str:
    """
    Path of the ISO image rendered for one volume.
    """
    paths = get_paths(config_type)
    if paths.disk_name:
        return os.path.join(paths.disks_dir, paths.disk_name)
    return os.path.join(paths.disks_dir, volume_name + ".iso")
