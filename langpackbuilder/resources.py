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

"""Glob patterns of everything that belongs into the langpack of a locale."""

import enum
import os
from typing import List, NamedTuple

from langpackbuilder.configs.distribution import DistributionFamily
from langpackbuilder.configs.locale_catalog import LocaleDefinition
from langpackbuilder.configs.paths import (
    DEFAULT_LOCALE,
    LIBREOFFICE_DIR,
    LOCALE_ARCHIVE,
    LOCALE_GEN,
)


class ResourceCategory(str, enum.Enum):
    SYSTEM = "system"
    BROWSER = "browser"
    OFFICE = "office"
    ARTIFACT = "artifact"


class ResourcePattern(NamedTuple):
    # absolute, may contain glob wildcards
    pattern: str
    category: ResourceCategory


BROWSER_DIRS = {
    DistributionFamily.DEBIAN: "/usr/lib/firefox-esr",
    DistributionFamily.UBUNTU: "/usr/lib/firefox",
}

BROWSER_PACKAGES = {
    DistributionFamily.DEBIAN: "firefox-esr-l10n-{}",
    DistributionFamily.UBUNTU: "firefox-locale-{}",
}


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def system_patterns(definition: LocaleDefinition) -> List[ResourcePattern]:
    """Translations of the base system and the i18n source of the locale."""
    patterns = []
    for name in _unique([definition.language, definition.code]):
        patterns += [
            f"/usr/share/locale/{name}",
            f"/usr/share/man/{name}",
        ]

    patterns.append(f"/usr/share/i18n/locales/{definition.code}")

    return [ResourcePattern(pattern, ResourceCategory.SYSTEM) for pattern in patterns]


def get_browser_package(
    definition: LocaleDefinition, family: DistributionFamily
) -> str:
    """For example "firefox-esr-l10n-pt-br" on debian."""
    return BROWSER_PACKAGES[family].format(definition.browser_locale[family])


def browser_patterns(
    definition: LocaleDefinition, family: DistributionFamily
) -> List[ResourcePattern]:
    """The langpack extension of the browser.

    The extensions are named after the language ("langpack-fr@...") or the
    language and region ("langpack-pt-BR@...").
    """
    extensions = os.path.join(BROWSER_DIRS[family], "browser", "extensions")
    names = _unique(
        [
            definition.language,
            definition.code.split("@")[0].replace("_", "-"),
        ]
    )
    return [
        ResourcePattern(
            os.path.join(extensions, f"langpack-{name}@firefox.mozilla.org.xpi"),
            ResourceCategory.BROWSER,
        )
        for name in names
    ]


def get_office_package(definition: LocaleDefinition) -> str:
    """For example "libreoffice-l10n-pt-br"."""
    return f"libreoffice-l10n-{definition.office_messages.lower()}"


def office_patterns(definition: LocaleDefinition) -> List[ResourcePattern]:
    """UI translations, autotext, templates, wordbooks and registry files."""
    share = os.path.join(LIBREOFFICE_DIR, "share")

    patterns = []
    for office_id in _unique([definition.office_messages, definition.office_locale]):
        patterns += [
            os.path.join(LIBREOFFICE_DIR, "program", "resource", office_id),
            os.path.join(share, "autotext", office_id),
            os.path.join(share, "template", office_id),
            os.path.join(share, "wordbook", office_id),
            os.path.join(share, "registry", "res", f"registry_{office_id}.xcd"),
            os.path.join(share, "registry", f"Langpack-{office_id}.xcd"),
            os.path.join(share, "registry", "res", f"fcfg_langpack_{office_id}.xcd"),
            f"/usr/share/autocorr/acor_{office_id}.dat",
        ]

    return [ResourcePattern(pattern, ResourceCategory.OFFICE) for pattern in patterns]


def artifact_patterns() -> List[ResourcePattern]:
    """Files that locale-gen and update-locale produced for the locale."""
    return [
        ResourcePattern(path, ResourceCategory.ARTIFACT)
        for path in [LOCALE_ARCHIVE, LOCALE_GEN, DEFAULT_LOCALE]
    ]
