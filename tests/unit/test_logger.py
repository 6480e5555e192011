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

import logging
import os
import unittest

from langpackbuilder.configs.paths import PathUtils
from langpackbuilder.logging.formatter import ColorfulFormatter
from langpackbuilder.logging.logger import logger
from tests.lib.test_setup import test_setup
from tests.lib.tmp import tmp


def add_filehandler(log_path: str, debug: bool) -> None:
    """Start logging to a file."""
    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(ColorfulFormatter(debug))
    logger.addHandler(file_handler)


@test_setup
class TestLogger(unittest.TestCase):
    def setUp(self):
        self.path = os.path.join(tmp, "logger-test")

    def tearDown(self):
        logger.update_verbosity(debug=True)

        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()

        PathUtils.remove(self.path)

    def read_log(self) -> str:
        with open(self.path, "r") as f:
            return f.read()

    def test_command(self):
        logger.update_verbosity(True)
        add_filehandler(self.path, True)
        logger.command(["update-locale", "LANG=fr_FR.UTF-8", "a b"])
        content = self.read_log()
        self.assertIn("Running update-locale LANG=fr_FR.UTF-8 'a b'", content)
        # the caller is logged, not the logger module
        self.assertIn("test_logger.py", content)

    def test_command_hidden_by_default(self):
        logger.update_verbosity(False)
        add_filehandler(self.path, False)
        logger.command(["locale-gen"])
        self.assertNotIn("locale-gen", self.read_log())

    def test_building_tags_debug_logs(self):
        logger.update_verbosity(True)
        add_filehandler(self.path, True)
        with logger.building("fr_FR"):
            logger.info("inside")
            with logger.building("de_DE"):
                logger.info("nested")
            logger.info("again")
        logger.info("outside")

        lines = self.read_log().splitlines()
        self.assertIn("[fr_FR]", lines[0])
        self.assertIn("[de_DE]", lines[1])
        self.assertIn("[fr_FR]", lines[2])
        self.assertNotIn("[fr_FR]", lines[3])
        self.assertNotIn("[de_DE]", lines[3])
        self.assertIsNone(logger.locale)

    def test_building_is_hidden_by_default(self):
        logger.update_verbosity(False)
        add_filehandler(self.path, False)
        with logger.building("fr_FR"):
            logger.info("123")
            logger.warning("foo")

        self.assertNotIn("fr_FR", self.read_log())

    def test_log_info(self):
        logger.update_verbosity(debug=False)
        add_filehandler(self.path, False)
        logger.log_info()
        self.assertIn("langpack-builder", self.read_log().lower())

    def test_is_debug(self):
        logger.update_verbosity(True)
        self.assertTrue(logger.is_debug())
        logger.update_verbosity(False)
        self.assertFalse(logger.is_debug())

    def test_debug(self):
        logger.update_verbosity(True)
        add_filehandler(self.path, True)
        logger.error("abc")
        logger.warning("foo")
        logger.info("123")
        logger.debug("456")
        content = self.read_log().lower()
        self.assertIn("test_logger.py", content)

        self.assertIn("error", content)
        self.assertIn("abc", content)

        self.assertIn("warn", content)
        self.assertIn("foo", content)

        self.assertIn("info", content)
        self.assertIn("123", content)

        self.assertIn("debug", content)
        self.assertIn("456", content)

    def test_default(self):
        logger.update_verbosity(debug=False)
        add_filehandler(self.path, False)
        logger.error("abc")
        logger.warning("foo")
        logger.info("123")
        logger.debug("456")
        content = self.read_log().lower()
        self.assertNotIn("test_logger.py", content)

        self.assertIn("error", content)
        self.assertIn("abc", content)

        self.assertIn("warn", content)
        self.assertIn("foo", content)

        self.assertNotIn("info", content)
        self.assertIn("123", content)

        self.assertNotIn("debug", content)
        self.assertNotIn("456", content)


if __name__ == "__main__":
    unittest.main()
