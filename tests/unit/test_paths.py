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
import tempfile
import unittest

from langpackbuilder.configs.paths import PathUtils
from tests.lib.test_setup import test_setup


@test_setup
class TestPaths(unittest.TestCase):
    def test_mkdir(self):
        with tempfile.TemporaryDirectory() as local_tmp:
            path_bcde = os.path.join(local_tmp, "b/c/d/e")
            PathUtils.mkdir(path_bcde)
            self.assertTrue(os.path.exists(path_bcde))
            self.assertTrue(os.path.isdir(path_bcde))

            # already exists
            PathUtils.mkdir(path_bcde)

    def test_remove(self):
        with tempfile.TemporaryDirectory() as local_tmp:
            directory = os.path.join(local_tmp, "a")
            PathUtils.mkdir(os.path.join(directory, "b"))
            link = os.path.join(local_tmp, "link")
            os.symlink(directory, link)

            # removes the link, but not what it points to
            PathUtils.remove(link)
            self.assertFalse(os.path.lexists(link))
            self.assertTrue(os.path.exists(directory))

            PathUtils.remove(directory)
            self.assertFalse(os.path.exists(directory))

            # nothing there anymore
            PathUtils.remove(directory)

    def test_relative_to_root(self):
        self.assertEqual(
            PathUtils.relative_to_root("/usr/share/locale/fr"), "usr/share/locale/fr"
        )
        self.assertEqual(
            PathUtils.relative_to_root("/tmp/root/etc/locale.gen", "/tmp/root"),
            "etc/locale.gen",
        )
        self.assertRaises(
            ValueError, lambda: PathUtils.relative_to_root("/etc", "/tmp/root")
        )
        self.assertRaises(ValueError, lambda: PathUtils.relative_to_root("/"))

    def test_in_staging(self):
        self.assertEqual(
            PathUtils.in_staging("/tmp/stage/fr_FR", "/etc/default/locale"),
            "/tmp/stage/fr_FR/etc/default/locale",
        )

    def test_get_module_path(self):
        self.assertEqual(
            PathUtils.get_module_path("/out", "fr_FR"),
            "/out/99-langpack-fr-fr-xz.sb",
        )
        self.assertEqual(
            PathUtils.get_module_path("/out", "pt_BR"),
            "/out/99-langpack-pt-br-xz.sb",
        )


if __name__ == "__main__":
    unittest.main()
