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
Parsers for VirtualMachineInstance manifests in YAML or JSON.
"""
import yaml
from pydantic import ValidationError
from ..errors import ManifestError
from ..MODELS.instance import VirtualMachineInstance


class ManifestParser:
    """
    Parser for VirtualMachineInstance manifests.

    JSON is accepted as well since it is a subset of YAML.
    """
    def parse(self, manifest_path: str) -> VirtualMachineInstance:
        """
        Parses a manifest from a path.

        :param manifest_path: Path to the manifest.
        :return: The parsed instance.
        :raises ManifestError: If the file cannot be read or is not a valid instance.
        """
        try:
            with open(manifest_path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ManifestError(f"failed to read manifest '{manifest_path}': {e}") from e
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> VirtualMachineInstance:
        """
        Parses a manifest from a string.

        :param content: YAML or JSON content of the manifest.
        :return: The parsed instance.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ManifestError(f"invalid manifest: {e}") from e
        if not data:
            data = {}
        if not isinstance(data, dict):
            raise ManifestError("invalid manifest: expected a mapping at the top level")

        kind = data.get('kind')
        if kind and kind != 'VirtualMachineInstance':
            raise ManifestError(f"unsupported kind '{kind}', expected VirtualMachineInstance")

        try:
            return VirtualMachineInstance.model_validate(data)
        except ValidationError as e:
            raise ManifestError(f"invalid manifest: {e}") from e
