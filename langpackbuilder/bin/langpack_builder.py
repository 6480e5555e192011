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

"""Builds a langpack module for every installable locale."""

import os
import sys
import tempfile
from argparse import ArgumentParser

from langpackbuilder.bin.process_utils import ProcessUtils
from langpackbuilder.configs.paths import PathUtils
from langpackbuilder.exceptions import ConfigurationError, Error, PrivilegeError
from langpackbuilder.logging.logger import logger

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ALREADY_RUNNING = 2
EXIT_CANCELLED = 130


class LangpackBuilderBin:
    @staticmethod
    def parse_args(argv):
        parser = ArgumentParser(
            description=(
                "Regenerate the locale data for every installable locale and "
                "pack its translations into a 99-langpack-<locale>-xz.sb module. "
                "Needs to run as root, because it reconfigures the host."
            )
        )
        parser.add_argument(
            "-d",
            "--debug",
            action="store_true",
            dest="debug",
            help="Displays additional debug information",
            default=False,
        )
        parser.add_argument(
            "-c",
            "--config",
            type=str,
            dest="config",
            help="Path to the build configuration",
            default="build.conf",
        )
        parser.add_argument(
            "-o",
            "--output",
            type=str,
            dest="output",
            help="Where the modules are written to",
            default=os.getcwd(),
        )
        parser.add_argument(
            "-w",
            "--work-dir",
            type=str,
            dest="work_dir",
            help="Where the staging directories are created. Defaults to a new "
            "temporary directory",
            default=None,
        )
        parser.add_argument(
            "--keep-staging",
            action="store_true",
            dest="keep_staging",
            help="Don't remove the staging directories after packaging",
            default=False,
        )
        parser.add_argument(
            "locales",
            nargs="*",
            help="Only build those locales, for example fr_FR de_DE",
        )
        return parser.parse_args(argv)

    @staticmethod
    def main(argv=None) -> int:
        options = LangpackBuilderBin.parse_args(
            sys.argv[1:] if argv is None else argv
        )

        logger.update_verbosity(options.debug)
        logger.log_info("langpack-builder")

        # import langpack-builder stuff after setting the log verbosity
        from langpackbuilder.builder import LocalePackBuilder
        from langpackbuilder.cancellation import CancellationToken
        from langpackbuilder.collector import ResourceCollector
        from langpackbuilder.configs.build_config import BuildConfig
        from langpackbuilder.configs.locale_catalog import LocaleCatalog
        from langpackbuilder.packager import ModulePackager
        from langpackbuilder.runner import BuildRunner
        from langpackbuilder.system.compressor import Compressor
        from langpackbuilder.system.keyboard import KeyboardConfigurator
        from langpackbuilder.system.locale_subsystem import LocaleSubsystem
        from langpackbuilder.system.package_manager import PackageManager
        from langpackbuilder.system.shell import Shell

        try:
            if not ProcessUtils.is_root():
                raise PrivilegeError()

            config = BuildConfig.load(options.config)
            family = config.family
            catalog = LocaleCatalog()
        except (ConfigurationError, PrivilegeError) as error:
            logger.error(error)
            return EXIT_FAILED

        if ProcessUtils.count_python_processes("langpack-builder") >= 2:
            logger.error(
                "Another langpack-builder is already running. Both would change "
                "the locale and keyboard layout of this system at the same time"
            )
            return EXIT_ALREADY_RUNNING

        logger.info(
            "Building for %s (%s, %s)",
            config.distribution,
            family.value,
            config.distribution_arch,
        )

        cancellation = CancellationToken()
        cancellation.install_signal_handlers()

        shell = Shell()
        package_manager = PackageManager(shell)
        locale_subsystem = LocaleSubsystem(shell)

        work_dir = options.work_dir
        if work_dir is None:
            work_dir = tempfile.mkdtemp(prefix="langpack-")

        builder = LocalePackBuilder(
            catalog=catalog,
            family=family,
            host_locale=config.locale,
            locale_subsystem=locale_subsystem,
            keyboard=KeyboardConfigurator(shell, package_manager),
            package_manager=package_manager,
            collector=ResourceCollector(),
            packager=ModulePackager(
                Compressor(shell), options.output, config.distribution_arch
            ),
            work_dir=work_dir,
            cancellation=cancellation,
            keep_staging=options.keep_staging,
        )
        runner = BuildRunner(builder, locale_subsystem, config.locale, cancellation)

        try:
            report = runner.run(options.locales)
        except Error as error:
            logger.error(error)
            return EXIT_FAILED
        finally:
            if options.work_dir is None and not options.keep_staging:
                PathUtils.remove(work_dir)

        if report.cancelled:
            return EXIT_CANCELLED

        if not report.ok:
            return EXIT_FAILED

        return EXIT_OK
