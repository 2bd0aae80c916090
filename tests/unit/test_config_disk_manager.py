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
Unit tests for the config disk manager.
"""
import os
import pytest
from cfgdisk.BUILDERS.image_builder import ConfigImageBuilder
from cfgdisk.CONFIG import paths
from cfgdisk.errors import VolumeNotFoundError
from cfgdisk.MANAGERS.config_disk_manager import ConfigDiskManager
from cfgdisk.MODELS.config_source import ConfigPaths, ConfigType
from cfgdisk.MODELS.instance import VirtualMachineInstance


@pytest.fixture
def registry(tmp_path, monkeypatch):
    """Points every config type at directories below tmp_path."""
    entries = {}
    for config_type in ConfigType:
        source = tmp_path / "src" / config_type.value
        source.mkdir(parents=True)
        entries[config_type] = ConfigPaths(
            source_dir=str(source),
            disks_dir=str(tmp_path / "disks" / config_type.value),
            disk_name=paths.PATHS[config_type].disk_name,
        )
    monkeypatch.setattr(paths, "PATHS", entries)
    return entries


@pytest.fixture
def vmi():
    return VirtualMachineInstance.model_validate({
        "metadata": {"name": "testvmi"},
        "spec": {"volumes": [
            {"name": "cm1", "configMap": {"name": "cm1", "volumeLabel": "CM1"}},
            {"name": "cm2", "configMap": {"name": "cm2"}},
            {"name": "sec", "secret": {"secretName": "sec"}},
            {"name": "sa", "serviceAccount": {"serviceAccountName": "default"}},
        ]},
        "status": {"volumeStatus": [
            {"name": "cm1", "size": 1024},
            {"name": "cm2", "size": 2048},
            {"name": "sec", "size": 4096},
        ]},
    })


def make_manager(iso_creator, empty_creator):
    return ConfigDiskManager(ConfigImageBuilder(iso_creator, empty_creator))


class TestConfigDiskManager:
    """Tests for ConfigDiskManager."""

    def test_config_map_disks(self, registry, vmi, iso_creator, empty_creator):
        """One image per ConfigMap volume, labelled from the volume."""
        for name in ("cm1", "cm2"):
            source = os.path.join(registry[ConfigType.CONFIG_MAP].source_dir, name)
            os.mkdir(source)
            with open(os.path.join(source, "key"), "w") as f:
                f.write(name)

        created = make_manager(iso_creator, empty_creator).create_config_map_disks(vmi)

        disks_dir = registry[ConfigType.CONFIG_MAP].disks_dir
        assert created == [disks_dir + "/cm1.iso", disks_dir + "/cm2.iso"]
        assert [c[0] for c in iso_creator.calls] == created
        assert [c[1].volume_id for c in iso_creator.calls] == ["CM1", "cfgdata"]
        assert iso_creator.calls[0][1].files == [
            "key=" + registry[ConfigType.CONFIG_MAP].source_dir + "/cm1/key"]

    def test_empty_disks_use_status_size(self, registry, vmi, iso_creator, empty_creator):
        created = make_manager(iso_creator, empty_creator).create_secret_disks(vmi, empty_iso=True)
        assert created == [registry[ConfigType.SECRET].disks_dir + "/sec.iso"]
        assert iso_creator.calls == []
        assert empty_creator.calls[0][1].size == 4096

    def test_service_account_disk(self, registry, vmi, iso_creator, empty_creator):
        """The service account image is built from the shared token directory."""
        created = make_manager(iso_creator, empty_creator).create_service_account_disk(vmi)
        assert created == [registry[ConfigType.SERVICE_ACCOUNT].disks_dir + "/service-account.iso"]
        assert iso_creator.calls[0][1].volume_id == "cfgdata"

    def test_empty_service_account_without_status(self, registry, vmi, iso_creator, empty_creator):
        manager = make_manager(iso_creator, empty_creator)
        with pytest.raises(VolumeNotFoundError):
            manager.create_service_account_disk(vmi, empty_iso=True)

    def test_no_matching_volumes(self, registry, vmi, iso_creator, empty_creator):
        assert make_manager(iso_creator, empty_creator).create_downward_api_disks(vmi) == []
        assert iso_creator.calls == []

    def test_create_all_disks(self, registry, vmi, iso_creator, empty_creator):
        vmi.spec.volumes = [v for v in vmi.spec.volumes if v.name != "sa"]
        created = make_manager(iso_creator, empty_creator).create_all_disks(vmi, empty_iso=True)
        assert len(created) == 3
        assert sorted(c[1].size for c in empty_creator.calls) == [1024, 2048, 4096]

    def test_creates_disks_directory(self, registry, vmi, iso_creator, empty_creator):
        make_manager(iso_creator, empty_creator).create_disks(vmi, ConfigType.SECRET, empty_iso=True)
        assert os.path.isdir(registry[ConfigType.SECRET].disks_dir)
