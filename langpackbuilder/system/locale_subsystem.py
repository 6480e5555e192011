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

"""Generate locale data and pick the default locale of the system."""

import re
from typing import List

from langpackbuilder.configs.paths import LOCALE_GEN
from langpackbuilder.logging.logger import logger
from langpackbuilder.system.shell import Shell

# present on every system, never worth a langpack
BUILTIN_LOCALES = ("C", "C.utf8", "POSIX")

# "sr_RS.utf8@latin" has its codeset in front of the modifier
CODESET = re.compile(r"\.utf-?8", re.IGNORECASE)


def get_locale_name(code: str) -> str:
    """For example "sr_RS.UTF-8@latin" for "sr_RS@latin"."""
    language, at, modifier = code.partition("@")
    return f"{language}.UTF-8{at}{modifier}"


class LocaleSubsystem:
    def __init__(self, shell: Shell, locale_gen: str = LOCALE_GEN):
        self.shell = shell
        self.locale_gen = locale_gen

    def installed_locales(self) -> List[str]:
        """Locale codes of `locale -a`, without their codeset.

        For example ["de_DE", "en_US", "sr_RS@latin"].
        """
        output = self.shell.run(["locale", "-a"])

        codes: List[str] = []
        for line in output.splitlines():
            line = line.strip()
            if line == "" or line in BUILTIN_LOCALES:
                continue

            line = CODESET.sub("", line)

            if line not in codes:
                codes.append(line)

        return codes

    def generate(self, code: str, host_locale: str) -> None:
        """Compile the locale data of the host locale and `code`, and make
        `code` the default locale.

        Leaves only those two locales in locale.gen and in the locale-archive.
        """
        logger.info('Generating locale "%s"', code)

        lines = [f"{get_locale_name(host_locale)} UTF-8"]
        if code != host_locale:
            lines.append(f"{get_locale_name(code)} UTF-8")

        with open(self.locale_gen, "w") as file:
            file.write("\n".join(lines) + "\n")

        self.shell.run(["locale-gen"])
        self.shell.run(["update-locale", f"LANG={get_locale_name(code)}"])
