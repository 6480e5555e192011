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

"""Compress a staging tree into the module of a locale."""

import os

from langpackbuilder.configs.paths import PathUtils
from langpackbuilder.exceptions import ExternalCommandError, PackagingError
from langpackbuilder.logging.logger import logger
from langpackbuilder.system.compressor import Compressor

ALGORITHM = "xz"
BLOCK_SIZE = "1024K"

# the branch/call/jump filter makes executables in the module a bit smaller
BCJ_FILTERS = {
    "amd64": "x86",
    "i386": "x86",
}


class ModulePackager:
    def __init__(self, compressor: Compressor, output_dir: str, arch: str):
        self.compressor = compressor
        self.output_dir = output_dir
        self.arch = arch

    def _get_options(self):
        bcj = BCJ_FILTERS.get(self.arch)
        if bcj is None:
            return []
        return ["-Xbcj", bcj]

    def package(self, staging: str, locale: str) -> str:
        """Write the module of the locale and return its path.

        The image is first written to a hidden file next to the target, and only
        renamed once it is complete. An existing module is only replaced by a
        complete new one.
        """
        if not os.path.isdir(staging):
            raise PackagingError(staging, "staging directory doesn't exist")

        module_path = PathUtils.get_module_path(self.output_dir, locale)
        PathUtils.mkdir(self.output_dir)

        directory, name = os.path.split(module_path)
        tmp_path = os.path.join(directory, f".{name}.{os.getpid()}.tmp")
        PathUtils.remove(tmp_path)

        logger.info('Packaging "%s"', module_path)

        try:
            self.compressor.compress(
                staging,
                tmp_path,
                ALGORITHM,
                BLOCK_SIZE,
                self._get_options(),
            )
            if not os.path.isfile(tmp_path):
                raise PackagingError(module_path, "mksquashfs didn't write an image")

            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, module_path)
        except (ExternalCommandError, OSError) as error:
            raise PackagingError(module_path, str(error)) from error
        finally:
            PathUtils.remove(tmp_path)

        return module_path
