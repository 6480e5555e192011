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

"""Build the langpack of a single locale."""

import enum
import os
from typing import List

from langpackbuilder.cancellation import CancellationToken
from langpackbuilder.collector import CollectionResult, ResourceCollector
from langpackbuilder.configs.distribution import DistributionFamily
from langpackbuilder.configs.locale_catalog import LocaleCatalog, LocaleDefinition
from langpackbuilder.configs.paths import KEYBOARD_LAYOUT_XML, PathUtils
from langpackbuilder.exceptions import ExternalCommandError
from langpackbuilder.logging.logger import logger
from langpackbuilder.packager import ModulePackager
from langpackbuilder.resources import (
    artifact_patterns,
    browser_patterns,
    get_browser_package,
    get_office_package,
    office_patterns,
    system_patterns,
)
from langpackbuilder.system.keyboard import (
    KeyboardConfigurator,
    write_layout_descriptor,
)
from langpackbuilder.system.locale_subsystem import LocaleSubsystem
from langpackbuilder.system.package_manager import PackageManager


class BuildState(str, enum.Enum):
    """The steps of a locale build, in the order in which they are reached."""

    START = "start"
    LOCALE_RECONFIGURED = "locale_reconfigured"
    KEYBOARD_DESCRIPTOR_WRITTEN = "keyboard_descriptor_written"
    SYSTEM_COLLECTED = "system_collected"
    BROWSER_COLLECTED = "browser_collected"
    OFFICE_COLLECTED = "office_collected"
    ARTIFACTS_COLLECTED = "artifacts_collected"
    PACKAGED = "packaged"
    DONE = "done"


class LocalePackBuilder:
    """Runs all steps for one locale after another.

    Missing resources and language packages that don't exist for a locale are
    skipped. Failures to reconfigure the locale or the keyboard are raised and
    stop this locale.
    """

    def __init__(
        self,
        catalog: LocaleCatalog,
        family: DistributionFamily,
        host_locale: str,
        locale_subsystem: LocaleSubsystem,
        keyboard: KeyboardConfigurator,
        package_manager: PackageManager,
        collector: ResourceCollector,
        packager: ModulePackager,
        work_dir: str,
        cancellation: CancellationToken,
        keep_staging: bool = False,
    ):
        self.catalog = catalog
        self.family = family
        self.host_locale = host_locale
        self.locale_subsystem = locale_subsystem
        self.keyboard = keyboard
        self.package_manager = package_manager
        self.collector = collector
        self.packager = packager
        self.work_dir = work_dir
        self.cancellation = cancellation
        self.keep_staging = keep_staging

        self.state = BuildState.START
        self._installed_packages: List[str] = []

    def get_staging_path(self, code: str) -> str:
        return os.path.join(self.work_dir, code)

    def _reach(self, code: str, state: BuildState) -> None:
        self.state = state
        logger.debug('"%s" reached %s', code, state.value)

    def _install_optional(self, package: str) -> None:
        """Install a language package, if the distribution has one."""
        try:
            self.package_manager.install([package])
        except ExternalCommandError as error:
            logger.info('Skipping "%s", it is not available', package)
            logger.debug(error)
            return

        self._installed_packages.append(package)

    def _remove_installed_packages(self) -> None:
        if not self._installed_packages:
            return

        try:
            self.package_manager.remove(self._installed_packages)
        except ExternalCommandError as error:
            logger.warning("Failed to remove language packages: %s", error)

        self._installed_packages = []

    def build(self, code: str) -> str:
        """Build the module of a locale and return its path."""
        with logger.building(code):
            return self._build(code)

    def _build(self, code: str) -> str:
        self.state = BuildState.START
        self.cancellation.raise_if_cancelled(code)

        definition = self.catalog.get(code)
        staging = self.get_staging_path(code)
        PathUtils.remove(staging)
        PathUtils.mkdir(staging)

        logger.info('Building langpack "%s"', code)

        try:
            module_path = self._run_steps(definition, staging)
        finally:
            self._remove_installed_packages()
            if not self.keep_staging:
                PathUtils.remove(staging)

        self._reach(code, BuildState.DONE)
        return module_path

    def _run_steps(self, definition: LocaleDefinition, staging: str) -> str:
        code = definition.code
        cancellation = self.cancellation
        result = CollectionResult()

        cancellation.raise_if_cancelled(code)
        self.locale_subsystem.generate(code, self.host_locale)
        self.keyboard.apply(definition.layout, definition.layout_description)
        self._reach(code, BuildState.LOCALE_RECONFIGURED)

        cancellation.raise_if_cancelled(code)
        write_layout_descriptor(
            PathUtils.in_staging(staging, KEYBOARD_LAYOUT_XML),
            definition.layout,
        )
        self._reach(code, BuildState.KEYBOARD_DESCRIPTOR_WRITTEN)

        cancellation.raise_if_cancelled(code)
        result.merge(self.collector.collect(system_patterns(definition), staging))
        self._reach(code, BuildState.SYSTEM_COLLECTED)

        cancellation.raise_if_cancelled(code)
        self._install_optional(get_browser_package(definition, self.family))
        result.merge(
            self.collector.collect(browser_patterns(definition, self.family), staging)
        )
        self._reach(code, BuildState.BROWSER_COLLECTED)

        cancellation.raise_if_cancelled(code)
        self._install_optional(get_office_package(definition))
        result.merge(self.collector.collect(office_patterns(definition), staging))
        self._reach(code, BuildState.OFFICE_COLLECTED)

        cancellation.raise_if_cancelled(code)
        result.merge(self.collector.collect(artifact_patterns(), staging))
        self._reach(code, BuildState.ARTIFACTS_COLLECTED)

        logger.info(
            'Collected %d paths for "%s", %d patterns without matches',
            result.count,
            code,
            len(result.missing()),
        )

        cancellation.raise_if_cancelled(code)
        module_path = self.packager.package(staging, code)
        self._reach(code, BuildState.PACKAGED)

        return module_path
