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


"""Path constants to be used."""


import os
import shutil

from langpackbuilder.logging.logger import logger


LOCALE_GEN = "/etc/locale.gen"
DEFAULT_LOCALE = "/etc/default/locale"
LOCALE_ARCHIVE = "/usr/lib/locale/locale-archive"

# picked up by every new xfce session through /etc/skel
KEYBOARD_LAYOUT_XML = (
    "/etc/skel/.config/xfce4/xfconf/xfce-perchannel-xml/keyboard-layout.xml"
)

KEYBOARD_DEFAULTS = "/etc/default/keyboard"

LIBREOFFICE_DIR = "/usr/lib/libreoffice"


class PathUtils:
    @staticmethod
    def mkdir(path: str, log: bool = True) -> None:
        """Create a folder and all of its parents."""
        if path == "" or path is None:
            return

        if os.path.exists(path):
            return

        if log:
            logger.debug('Creating dir "%s"', path)

        os.makedirs(path, exist_ok=True)

    @staticmethod
    def remove(path: str) -> None:
        """Remove whatever is at the path."""
        if os.path.islink(path):
            os.remove(path)
            return

        if not os.path.exists(path):
            return

        if os.path.isdir(path):
            shutil.rmtree(path)
        else:
            os.remove(path)

    @staticmethod
    def relative_to_root(path: str, root: str = "/") -> str:
        """Strip the root from an absolute path, for example to join it with
        a staging directory.

        relative_to_root("/usr/share/locale/fr") == "usr/share/locale/fr"
        """
        relative = os.path.relpath(os.path.abspath(path), os.path.abspath(root))
        if relative == os.curdir or relative.startswith(os.pardir):
            raise ValueError(f'Expected "{path}" to be inside of "{root}"')

        return relative

    @staticmethod
    def in_staging(staging: str, absolute_path: str) -> str:
        """Where an absolute path of the live system ends up in a staging tree."""
        return os.path.join(staging, PathUtils.relative_to_root(absolute_path))

    @staticmethod
    def get_module_path(output_dir: str, locale: str) -> str:
        """For example ".../99-langpack-pt-br-xz.sb" for the locale "pt_BR"."""
        name = locale.lower().replace("_", "-")
        return os.path.join(output_dir, f"99-langpack-{name}-xz.sb")
