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

import subprocess
import unittest
from unittest import mock

from langpackbuilder.exceptions import ExternalCommandError
from langpackbuilder.system.shell import Shell
from tests.lib.test_setup import test_setup


def _raise(error):
    raise error


@test_setup
class TestShell(unittest.TestCase):
    def test_run(self):
        completed = subprocess.CompletedProcess(["locale", "-a"], 0, "C\nPOSIX\n", "")
        with mock.patch("subprocess.run", return_value=completed) as run:
            output = Shell().run(["locale", "-a"])

        self.assertEqual(output, "C\nPOSIX\n")
        args, kwargs = run.call_args
        self.assertEqual(args[0], ["locale", "-a"])
        self.assertTrue(kwargs["check"])
        self.assertEqual(kwargs["env"]["DEBIAN_FRONTEND"], "noninteractive")

    def test_stdin(self):
        completed = subprocess.CompletedProcess(["cat"], 0, "", "")
        with mock.patch("subprocess.run", return_value=completed) as run:
            Shell().run(["debconf-set-selections"], stdin="a b c d\n")

        self.assertEqual(run.call_args[1]["input"], "a b c d\n")

    def test_env(self):
        self.assertEqual(Shell({"LC_ALL": "C"}).env["LC_ALL"], "C")

    def test_failure(self):
        error = subprocess.CalledProcessError(100, ["apt-get"], "", "E: not found")
        with mock.patch("subprocess.run", lambda *_, **__: _raise(error)):
            with self.assertRaises(ExternalCommandError) as context:
                Shell().run(["apt-get", "install", "foo"])

        self.assertEqual(context.exception.returncode, 100)
        self.assertEqual(context.exception.command, ["apt-get", "install", "foo"])
        self.assertIn("E: not found", str(context.exception))

    def test_not_installed(self):
        with mock.patch(
            "subprocess.run", lambda *_, **__: _raise(FileNotFoundError())
        ):
            with self.assertRaises(ExternalCommandError) as context:
                Shell().run(["mksquashfs"])

        self.assertIsNone(context.exception.returncode)
        self.assertIn("mksquashfs", str(context.exception))


if __name__ == "__main__":
    unittest.main()
