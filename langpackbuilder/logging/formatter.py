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

"""Log formatting for langpack-builder."""

import logging
from datetime import datetime


class ColorfulFormatter(logging.Formatter):
    """INFO is printed as it is, everything else gets a colored level.

    In debug mode every line starts with the time and the locale whose langpack
    is being built, and ends its prefix with the file and line of the log call.
    """

    # 8 bit ansi colors, see https://en.wikipedia.org/wiki/ANSI_escape_code#8-bit
    level_colors = {
        logging.DEBUG: 245,
        logging.INFO: 252,
        logging.WARNING: 11,
        logging.ERROR: 9,
        logging.FATAL: 9,
    }
    locale_color = 117

    def __init__(self, debug_mode: bool = False):
        super().__init__()
        self.debug_mode = debug_mode

    def _get_locale_tag(self, record: logging.LogRecord) -> str:
        # set by Logger.building, missing for records of other loggers
        locale = getattr(record, "locale", None)
        if locale is None:
            return ""

        return f"\033[38;5;{self.locale_color}m[{locale}]\033[0m "

    def _get_format(self, record: logging.LogRecord) -> str:
        """Generate a message format string."""
        if record.levelno == logging.INFO and not self.debug_mode:
            # if not launched with --debug, then don't print "INFO:"
            return "%(message)s"

        color = self.level_colors.get(record.levelno, 9)

        if not self.debug_mode:
            return f"\033[38;5;{color}m%(levelname)s\033[0m: %(message)s"

        if record.levelno >= logging.WARNING:
            # underline
            style = f"\033[4;38;5;{color}m"
        else:
            style = f"\033[38;5;{color}m"

        return (
            f'{datetime.now().strftime("%H:%M:%S.%f")} '
            f"{self._get_locale_tag(record).replace('%', '%%')}"
            f"{style}"
            "%(levelname)s "
            "%(filename)s:%(lineno)d: "
            "%(message)s"
            "\033[0m"  # end style
        )

    def format(self, record: logging.LogRecord) -> str:
        """Overwritten format function."""
        # pylint: disable=protected-access
        self._style._fmt = self._get_format(record)
        return super().format(record)
