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

"""A fake live system and a builder that only touches it."""

from __future__ import annotations

import os
from typing import Optional

from langpackbuilder.builder import LocalePackBuilder
from langpackbuilder.cancellation import CancellationToken
from langpackbuilder.collector import ResourceCollector
from langpackbuilder.configs.distribution import DistributionFamily
from langpackbuilder.configs.locale_catalog import LocaleCatalog
from langpackbuilder.packager import ModulePackager
from langpackbuilder.system.compressor import Compressor
from langpackbuilder.system.keyboard import KeyboardConfigurator
from langpackbuilder.system.locale_subsystem import LocaleSubsystem
from langpackbuilder.system.package_manager import PackageManager
from tests.lib.fakes import FakeShell, create_file
from tests.lib.tmp import tmp

KEYBOARD_XML = "etc/skel/.config/xfce4/xfconf/xfce-perchannel-xml/keyboard-layout.xml"

MODULES_DIR = os.path.join(tmp, "modules")
WORK_DIR = os.path.join(tmp, "stageX")


def create_system(root: str) -> None:
    """Some of the files a live system with firefox and libreoffice has."""
    for path in [
        "usr/share/locale/fr/LC_MESSAGES/coreutils.mo",
        "usr/share/locale/de/LC_MESSAGES/coreutils.mo",
        "usr/share/i18n/locales/fr_FR",
        "usr/share/man/fr/man1/ls.1.gz",
        "usr/lib/firefox-esr/browser/extensions/langpack-fr@firefox.mozilla.org.xpi",
        "usr/lib/firefox/browser/extensions/langpack-fr@firefox.mozilla.org.xpi",
        "usr/lib/libreoffice/program/resource/fr/LC_MESSAGES/sw.mo",
        "usr/lib/libreoffice/share/autotext/fr/standard.bau",
        "usr/lib/libreoffice/share/registry/res/registry_fr.xcd",
        "usr/lib/locale/locale-archive",
        "etc/default/locale",
    ]:
        create_file(os.path.join(root, path), path)


def create_builder(
    root: str,
    shell: FakeShell,
    family: DistributionFamily = DistributionFamily.DEBIAN,
    keep_staging: bool = False,
    cancellation: Optional[CancellationToken] = None,
) -> LocalePackBuilder:
    """A builder that reads from the fake system in `root`."""
    package_manager = PackageManager(shell)
    locale_subsystem = LocaleSubsystem(shell, os.path.join(root, "etc/locale.gen"))
    return LocalePackBuilder(
        catalog=LocaleCatalog(),
        family=family,
        host_locale="en_US",
        locale_subsystem=locale_subsystem,
        keyboard=KeyboardConfigurator(
            shell, package_manager, os.path.join(root, "etc/default/keyboard")
        ),
        package_manager=package_manager,
        collector=ResourceCollector(root),
        packager=ModulePackager(Compressor(shell), MODULES_DIR, "amd64"),
        work_dir=WORK_DIR,
        cancellation=cancellation or CancellationToken(),
        keep_staging=keep_staging,
    )
