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
Models describing where configuration data comes from and where its disk goes.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ConfigType(str, Enum):
    """
    Kinds of configuration data that can be rendered into a disk.
    """
    CONFIG_MAP = "configmap"
    SECRET = "secret"
    DOWNWARD_API = "downwardapi"
    SERVICE_ACCOUNT = "serviceaccount"


class ConfigPaths(BaseModel):
    """
    Where a config type is mounted in the pod and where its images are written.
    """
    model_config = ConfigDict(frozen=True)

    source_dir: str
    disks_dir: str
    # Set only for types that render to a single, fixed image
    disk_name: Optional[str] = None
