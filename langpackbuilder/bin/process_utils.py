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

import os

import psutil


class ProcessUtils:
    @staticmethod
    def count_python_processes(name: str) -> int:
        # This is somewhat complicated, because there might also be a "sudo <name>"
        # process.
        count = 0
        for process in psutil.process_iter(["cmdline"]):
            cmdline = process.info["cmdline"] or []
            if len(cmdline) >= 2 and "python" in cmdline[0] and name in cmdline[1]:
                count += 1

        return count

    @staticmethod
    def is_root() -> bool:
        return os.geteuid() == 0
