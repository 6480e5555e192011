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
import unittest
import xml.etree.ElementTree as ET

from langpackbuilder.system.keyboard import (
    KeyboardConfigurator,
    get_layout_pair,
    write_layout_descriptor,
)
from langpackbuilder.system.package_manager import PackageManager
from tests.lib.fakes import FakeShell
from tests.lib.test_setup import test_setup
from tests.lib.tmp import tmp


@test_setup
class TestKeyboard(unittest.TestCase):
    def test_layout_pair(self):
        self.assertEqual(get_layout_pair("fr"), "us,fr")
        self.assertEqual(get_layout_pair("us"), "us,us")

    def test_write_layout_descriptor(self):
        path = os.path.join(tmp, "skel", "keyboard-layout.xml")
        write_layout_descriptor(path, "de")

        with open(path, "r") as f:
            self.assertTrue(f.read().startswith('<?xml version="1.0"'))

        channel = ET.parse(path).getroot()
        self.assertEqual(channel.tag, "channel")
        self.assertEqual(channel.get("name"), "keyboard-layout")

        properties = {
            element.get("name"): element.get("value")
            for element in channel.iter("property")
        }
        self.assertEqual(properties["XkbLayout"], "us,de")
        self.assertEqual(properties["XkbVariant"], ",")
        self.assertEqual(properties["XkbDisable"], "false")
        self.assertEqual(properties["Group"], "grp:alt_shift_toggle")

    def test_apply(self):
        shell = FakeShell()
        keyboard_defaults = os.path.join(tmp, "keyboard")
        configurator = KeyboardConfigurator(
            shell, PackageManager(shell), keyboard_defaults
        )
        configurator.apply("fr", "French")

        self.assertEqual(
            shell.commands,
            [
                ["debconf-set-selections"],
                ["dpkg-reconfigure", "-f", "noninteractive", "keyboard-configuration"],
            ],
        )
        selections = shell.stdin[0]
        self.assertIn(
            "keyboard-configuration keyboard-configuration/layoutcode string us,fr\n",
            selections,
        )
        self.assertIn(
            "keyboard-configuration keyboard-configuration/variant select French\n",
            selections,
        )

        with open(keyboard_defaults, "r") as f:
            content = f.read()
        self.assertIn('XKBLAYOUT="us,fr"', content)
        self.assertIn('XKBOPTIONS="grp:alt_shift_toggle"', content)


    def test_apply_fallback_layout(self):
        shell = FakeShell()
        configurator = KeyboardConfigurator(
            shell, PackageManager(shell), os.path.join(tmp, "keyboard")
        )
        configurator.apply("us", "English (US)")

        selections = shell.stdin[0].splitlines()
        self.assertIn(
            "keyboard-configuration keyboard-configuration/variant select English (US)",
            selections,
        )
        self.assertIn(
            "keyboard-configuration keyboard-configuration/xkb-keymap select us",
            selections,
        )

if __name__ == "__main__":
    unittest.main()
