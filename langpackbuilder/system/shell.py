# -*- coding: utf-8 -*-
# langpack-builder - Language modules for live system images
# Copyright (C) 2025 langpack-builder authors
#
# This file is part of langpack-builder.
#
# langpack-builder is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# langpack-builder is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with langpack-builder.  If not, see <https://www.gnu.org/licenses/>.

"""Run the os tools that langpacks are built with."""

import os
import subprocess
import sys
from typing import Dict, List, Optional

from langpackbuilder.exceptions import ExternalCommandError
from langpackbuilder.logging.logger import logger


class Shell:
    """Blocking calls to external programs.

    Every failure is raised as ExternalCommandError, so that callers can decide
    whether it is fatal for the current locale.
    """

    def __init__(self, env: Optional[Dict[str, str]] = None):
        self.env = {**os.environ, "DEBIAN_FRONTEND": "noninteractive"}
        if env is not None:
            self.env.update(env)

    def run(self, command: List[str], stdin: Optional[str] = None) -> str:
        """Run the command and return its stdout."""
        logger.command(command)

        # Fix the stdout ordering when the output is piped into a file
        sys.stdout.flush()

        try:
            result = subprocess.run(
                command,
                input=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=self.env,
                text=True,
                check=True,
            )
        except FileNotFoundError as error:
            raise ExternalCommandError(command) from error
        except subprocess.CalledProcessError as error:
            raise ExternalCommandError(
                command, error.returncode, error.stderr or error.stdout
            ) from error

        if result.stderr:
            logger.debug("%s: %s", command[0], result.stderr.strip())

        return result.stdout
