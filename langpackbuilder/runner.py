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

"""Build the langpacks of all locales, one after another."""

from typing import Dict, List, Optional

from langpackbuilder.builder import LocalePackBuilder
from langpackbuilder.cancellation import CancellationToken
from langpackbuilder.exceptions import BuildCancelled, Error
from langpackbuilder.logging.logger import logger
from langpackbuilder.system.locale_subsystem import LocaleSubsystem


class BuildReport:
    def __init__(self):
        self.modules: Dict[str, str] = {}
        self.failed: Dict[str, Exception] = {}
        self.cancelled = False

    @property
    def ok(self) -> bool:
        return not self.failed and not self.cancelled


class BuildRunner:
    """Each locale is its own unit of failure.

    Locales are never built in parallel, because every build changes the
    locale and keyboard layout of the host.
    """

    def __init__(
        self,
        builder: LocalePackBuilder,
        locale_subsystem: LocaleSubsystem,
        host_locale: str,
        cancellation: CancellationToken,
    ):
        self.builder = builder
        self.locale_subsystem = locale_subsystem
        self.host_locale = host_locale
        self.cancellation = cancellation

    def discover(self, requested: Optional[List[str]] = None) -> List[str]:
        """Installable locales, except the one of the host.

        Parameters
        ----------
        requested
            If set, only those of the installable locales are returned
        """
        installed = self.locale_subsystem.installed_locales()
        codes = [code for code in installed if code != self.host_locale]

        if requested:
            for code in requested:
                if code not in installed:
                    logger.warning('Locale "%s" is not installable, skipping', code)
            codes = [code for code in codes if code in requested]

        return codes

    def run(self, requested: Optional[List[str]] = None) -> BuildReport:
        report = BuildReport()
        codes = self.discover(requested)
        logger.info("Building %d langpacks", len(codes))

        for code in codes:
            try:
                report.modules[code] = self.builder.build(code)
            except BuildCancelled:
                report.cancelled = True
                break
            except (Error, OSError) as error:
                if self.cancellation.cancelled:
                    # the interrupted command of this locale failed
                    report.cancelled = True
                    break

                logger.error('Failed to build "%s": %s', code, error)
                report.failed[code] = error
                continue

            logger.info('Finished "%s"', report.modules[code])

        if report.cancelled:
            logger.error("Cancelled, %d langpacks were finished", len(report.modules))
        elif report.failed:
            logger.error(
                "%d of %d langpacks failed: %s",
                len(report.failed),
                len(codes),
                ", ".join(report.failed),
            )
        else:
            logger.info("Built %d langpacks", len(report.modules))

        return report
