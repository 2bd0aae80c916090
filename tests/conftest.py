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
Shared fixtures for the cfgdisk tests.
"""
import logging
from typing import List, Tuple
import pytest
from cfgdisk.BUILDERS.iso_creator import ImageCreator, ImageRequest
from cfgdisk.UTILS.logging import LOGGER_NAME


class RecordingCreator(ImageCreator):
    """Image creator that records its calls instead of writing images."""

    def __init__(self):
        self.calls: List[Tuple[str, ImageRequest]] = []

    def create(self, output: str, request: ImageRequest) -> None:
        self.calls.append((output, request))


@pytest.fixture
def iso_creator():
    return RecordingCreator()


@pytest.fixture
def empty_creator():
    return RecordingCreator()


@pytest.fixture
def config_dir(tmp_path):
    """A mounted config directory with two keys."""
    source = tmp_path / "config"
    source.mkdir()
    (source / "a").write_text("alpha")
    (source / "b").write_text("beta")
    return source


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Detaches handlers installed by a CLI run once its output stream is gone."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
