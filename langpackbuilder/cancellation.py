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

"""Stop a build between two steps instead of in the middle of one."""

import signal
import threading
from typing import Optional

from langpackbuilder.exceptions import BuildCancelled
from langpackbuilder.logging.logger import logger


class CancellationToken:
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        if not self._event.is_set():
            logger.warning("Cancelling after the current step")
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, locale: Optional[str] = None) -> None:
        if self._event.is_set():
            raise BuildCancelled(locale)

    def install_signal_handlers(self) -> None:
        """Cancel on ctrl+c and on SIGTERM."""

        def handler(signum, _):
            logger.debug("Received signal %s", signum)
            self.cancel()

        signal.signal(signal.SIGINT, handler)
        signal.signal(signal.SIGTERM, handler)
