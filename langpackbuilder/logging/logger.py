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

"""Logging setup for langpack-builder."""

import logging
import shlex
from contextlib import contextmanager
from typing import Iterator, List, Optional, cast

from langpackbuilder.installation_info import VERSION, COMMIT_HASH
from langpackbuilder.logging.formatter import ColorfulFormatter


class Logger(logging.Logger):
    def __init__(self, name: str, level: int = logging.NOTSET):
        super().__init__(name, level)
        # the locale whose langpack is being built, shown in debug logs
        self.locale: Optional[str] = None

    def makeRecord(self, *args, **kwargs) -> logging.LogRecord:
        record = super().makeRecord(*args, **kwargs)
        record.locale = self.locale
        return record

    @contextmanager
    def building(self, locale: str) -> Iterator[None]:
        """Tag all logs inside the with-block with the locale."""
        previous = self.locale
        self.locale = locale
        try:
            yield
        finally:
            self.locale = previous

    def command(self, command: List[str]) -> None:
        """Log an external command the way it could be pasted into a shell."""
        if not self.isEnabledFor(logging.DEBUG):
            return

        msg = "Running " + " ".join(shlex.quote(str(part)) for part in command)
        self._log(logging.DEBUG, msg, args=None, stacklevel=2)

    def is_debug(self) -> bool:
        """True, if the logger is currently in DEBUG mode."""
        return self.level <= logging.DEBUG

    def log_info(self, name: str = "langpack-builder") -> None:
        """Log version and name to the console."""
        logger.info("%s %s %s", name, VERSION, COMMIT_HASH)

    def update_verbosity(self, debug: bool) -> None:
        """Set the logging verbosity according to the settings object."""
        if debug:
            self.setLevel(logging.DEBUG)
        else:
            self.setLevel(logging.INFO)

        for handler in self.handlers:
            handler.setFormatter(ColorfulFormatter(debug))

    @classmethod
    def bootstrap_logger(cls):
        # https://github.com/python/typeshed/issues/1801
        logging.setLoggerClass(cls)
        logger = cast(cls, logging.getLogger("langpack-builder"))
        logging.setLoggerClass(logging.Logger)

        handler = logging.StreamHandler()
        handler.setFormatter(ColorfulFormatter(False))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        return logger


logger = Logger.bootstrap_logger()
