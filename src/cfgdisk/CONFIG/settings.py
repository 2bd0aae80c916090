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
Runtime settings, read from the environment and an optional .env file.
"""
import os
from typing import Dict, Optional
from dotenv import dotenv_values
from pydantic import BaseModel, ValidationError
from ..errors import SettingsError

ENV_PREFIX = "CFGDISK_"


class Settings(BaseModel):
    """
    Settings that may differ between hosts.
    """
    iso_binary: str = "xorrisofs"
    verbose: bool = False


def load_settings(env_file: Optional[str] = None,
                  environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Builds the settings from CFGDISK_* variables.

    Values in the process environment override the ones in ``env_file``.

    :param env_file: Optional path to a .env file.
    :param environ: Environment to read instead of os.environ.
    :return: Validated settings.
    :raises SettingsError: If a value does not match its setting's type.
    """
    merged: Dict[str, Optional[str]] = {}
    if env_file and os.path.exists(env_file):
        merged.update(dotenv_values(env_file))
    merged.update(os.environ if environ is None else environ)

    values = {}
    for field in Settings.model_fields:
        value = merged.get(ENV_PREFIX + field.upper())
        if value not in (None, ""):
            values[field] = value
    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        fields = ", ".join(ENV_PREFIX + str(err["loc"][0]).upper() for err in e.errors())
        raise SettingsError(f"invalid setting {fields}") from e
