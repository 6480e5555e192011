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

"""Switch the keyboard layout of the host, and describe it for xfce sessions."""

import os
import xml.etree.ElementTree as ET

from langpackbuilder.configs.paths import KEYBOARD_DEFAULTS
from langpackbuilder.logging.logger import logger
from langpackbuilder.system.package_manager import DebconfSelection, PackageManager
from langpackbuilder.system.shell import Shell

# us stays the first layout, so that there is always a latin layout to fall back to
FALLBACK_LAYOUT = "us"

GROUP_TOGGLE = "grp:alt_shift_toggle"


def get_layout_pair(layout: str) -> str:
    """For example "us,de" for "de"."""
    return f"{FALLBACK_LAYOUT},{layout}"


class KeyboardConfigurator:
    def __init__(
        self,
        shell: Shell,
        package_manager: PackageManager,
        keyboard_defaults: str = KEYBOARD_DEFAULTS,
    ):
        self.shell = shell
        self.package_manager = package_manager
        self.keyboard_defaults = keyboard_defaults

    def apply(self, layout: str, description: str) -> None:
        """Make "us,<layout>" the active layout of the console and of X."""
        layouts = get_layout_pair(layout)
        logger.info('Setting keyboard layout "%s" (%s)', layouts, description)

        owner = "keyboard-configuration"
        self.package_manager.preseed(
            [
                DebconfSelection(owner, f"{owner}/layoutcode", "string", layouts),
                DebconfSelection(owner, f"{owner}/xkb-keymap", "select", layout),
                # the variant question takes the name the installer shows, for
                # example "French" or "English (US)", not an xkb variant id
                DebconfSelection(owner, f"{owner}/variant", "select", description),
                DebconfSelection(owner, f"{owner}/toggle", "select", "Alt+Shift"),
            ]
        )

        # dpkg-reconfigure prefers an existing file over the preseeded answers
        variants = "," * layouts.count(",")
        with open(self.keyboard_defaults, "w") as file:
            file.write(
                'XKBMODEL="pc105"\n'
                f'XKBLAYOUT="{layouts}"\n'
                f'XKBVARIANT="{variants}"\n'
                f'XKBOPTIONS="{GROUP_TOGGLE}"\n'
                'BACKSPACE="guess"\n'
            )

        self.shell.run(
            ["dpkg-reconfigure", "-f", "noninteractive", "keyboard-configuration"]
        )


def write_layout_descriptor(path: str, layout: str) -> None:
    """Write an xfconf keyboard-layout channel for "us,<layout>".

    Alt+Shift toggles between the two layouts.
    """
    layouts = get_layout_pair(layout)

    channel = ET.Element("channel", name="keyboard-layout", version="1.0")
    default = ET.SubElement(channel, "property", name="Default", type="empty")
    ET.SubElement(
        default, "property", name="XkbDisable", type="bool", value="false"
    )
    ET.SubElement(
        default, "property", name="XkbLayout", type="string", value=layouts
    )
    ET.SubElement(
        default,
        "property",
        name="XkbVariant",
        type="string",
        value="," * layouts.count(","),
    )
    options = ET.SubElement(default, "property", name="XkbOptions", type="empty")
    ET.SubElement(
        options, "property", name="Group", type="string", value=GROUP_TOGGLE
    )
    ET.indent(channel)

    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as file:
        file.write('<?xml version="1.0" encoding="UTF-8"?>\n\n')
        file.write(ET.tostring(channel, encoding="unicode"))
        file.write("\n")

    logger.debug('Wrote keyboard layout "%s" to "%s"', layouts, path)
