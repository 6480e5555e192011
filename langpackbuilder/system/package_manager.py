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

"""apt and debconf."""

from typing import Iterable, List, NamedTuple

from langpackbuilder.logging.logger import logger
from langpackbuilder.system.shell import Shell


class DebconfSelection(NamedTuple):
    """One answer to a debconf question, so that installing doesn't ask it."""

    owner: str
    question: str
    type: str
    value: str

    def __str__(self):
        return f"{self.owner} {self.question} {self.type} {self.value}"


class PackageManager:
    def __init__(self, shell: Shell):
        self.shell = shell

    def preseed(self, selections: Iterable[DebconfSelection]) -> None:
        """Answer debconf questions before a package is (re)configured."""
        lines = "".join(f"{selection}\n" for selection in selections)
        self.shell.run(["debconf-set-selections"], stdin=lines)

    def install(self, packages: List[str]) -> None:
        logger.info("Installing %s", ", ".join(packages))
        self.shell.run(
            ["apt-get", "install", "-y", "--no-install-recommends", *packages]
        )

    def remove(self, packages: List[str]) -> None:
        logger.info("Removing %s", ", ".join(packages))
        self.shell.run(["apt-get", "remove", "--purge", "-y", *packages])
