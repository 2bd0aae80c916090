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
Execution of external commands that are run to completion.
"""
import logging
import subprocess
from typing import Dict, List, Optional
from ..errors import ProcessError

logger = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs a single external command and waits for it to finish.
    """
    def __init__(self, name: str):
        """
        Initializes the process runner.

        Args:
            name (str): Identifier used in log messages.
        """
        self.name = name

    def run(self,
            command: List[str],
            env: Optional[Dict[str, str]] = None,
            working_dir: Optional[str] = None) -> subprocess.CompletedProcess:
        """
        Runs the command and blocks until it exits. No timeout is applied.

        Args:
            command (List[str]): Command and arguments to execute.
            env (Optional[Dict[str, str]]): Environment for the process, inherited if None.
            working_dir (Optional[str]): Directory to run the process in.

        Returns:
            subprocess.CompletedProcess: The finished process with captured output.

        Raises:
            ProcessError: If the command cannot be started or exits non-zero.
        """
        logger.debug("[%s] Running command: %s", self.name, " ".join(command))

        try:
            result = subprocess.run(
                command,
                env=env,
                cwd=working_dir,
                capture_output=True,
                text=True,
                # Avoid shell=True for security reasons (CWE-78)
                shell=False,
            )
        except OSError as e:
            raise ProcessError(command, None, str(e)) from e

        if result.returncode != 0:
            logger.debug("[%s] Command failed with status %d", self.name, result.returncode)
            raise ProcessError(command, result.returncode, result.stderr or "")
        return result
