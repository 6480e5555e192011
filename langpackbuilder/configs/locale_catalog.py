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

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

try:
    from pydantic.v1 import BaseModel, ValidationError, constr, validator
except ImportError:
    from pydantic import BaseModel, ValidationError, constr, validator

from langpackbuilder.configs.distribution import DistributionFamily
from langpackbuilder.configs.locales import LOCALES
from langpackbuilder.exceptions import ConfigurationError
from langpackbuilder.logging.logger import logger

# used for every locale that the catalog doesn't know
DEFAULT_LAYOUT = "us"
DEFAULT_LAYOUT_DESCRIPTION = "English (US)"

NonEmpty = constr(strip_whitespace=True, min_length=1)


class LocaleDefinition(BaseModel):
    """Everything needed to find the resources of one locale."""

    code: NonEmpty  # type: ignore
    layout: NonEmpty  # type: ignore
    layout_description: NonEmpty  # type: ignore
    # one entry per DistributionFamily, the package names differ between them
    browser_locale: Dict[DistributionFamily, NonEmpty]  # type: ignore
    office_locale: NonEmpty  # type: ignore
    office_messages: NonEmpty  # type: ignore

    class Config:
        allow_mutation = False

    @validator("code")
    def _validate_code(cls, code):
        if "/" in code or code.startswith("."):
            raise ValueError(f'"{code}" can not be used as a directory name')
        return code

    @validator("browser_locale")
    def _one_browser_locale_per_family(cls, browser_locale):
        missing = [
            family.value
            for family in DistributionFamily
            if family not in browser_locale
        ]
        if missing:
            raise ValueError(f"missing browser locale for {', '.join(missing)}")
        return browser_locale

    @property
    def language(self) -> str:
        """For example "pt" for "pt_BR", or "sr" for "sr_RS@latin"."""
        return self.code.split("_")[0].split("@")[0]

    @classmethod
    def fallback(cls, code: str) -> LocaleDefinition:
        """A definition for codes that the catalog doesn't have."""
        language = code.split("_")[0].split("@")[0]
        return cls(
            code=code,
            layout=DEFAULT_LAYOUT,
            layout_description=DEFAULT_LAYOUT_DESCRIPTION,
            browser_locale={family: language for family in DistributionFamily},
            office_locale=code.split("@")[0].replace("_", "-"),
            office_messages=language,
        )

    @classmethod
    def from_row(cls, row: Sequence[str]) -> LocaleDefinition:
        """Create a definition from a row of the LOCALES table."""
        if len(row) != 7:
            raise ValueError(f"Expected 7 columns, got {len(row)}: {row}")

        code, layout, description, debian, ubuntu, office, messages = row
        return cls(
            code=code,
            layout=layout,
            layout_description=description,
            browser_locale={
                DistributionFamily.DEBIAN: debian,
                DistributionFamily.UBUNTU: ubuntu,
            },
            office_locale=office,
            office_messages=messages,
        )


class LocaleCatalog:
    """Read-only lookup of LocaleDefinitions by their locale code."""

    def __init__(self, rows: Optional[List[Tuple[str, ...]]] = None):
        """Validates all rows. Malformed or duplicate rows raise a
        ConfigurationError.

        Parameters
        ----------
        rows
            Defaults to the built-in LOCALES table
        """
        self._definitions: Dict[str, LocaleDefinition] = {}

        for row in LOCALES if rows is None else rows:
            try:
                definition = LocaleDefinition.from_row(row)
            except (ValidationError, ValueError) as error:
                raise ConfigurationError(
                    f"Invalid locale catalog entry {row}: {error}"
                ) from error

            if definition.code in self._definitions:
                raise ConfigurationError(
                    f'Duplicate locale catalog entry "{definition.code}"'
                )

            self._definitions[definition.code] = definition

    def lookup(self, code: str) -> Optional[LocaleDefinition]:
        """Get the definition of a locale, or None if it is unknown."""
        return self._definitions.get(code)

    def get(self, code: str) -> LocaleDefinition:
        """Get the definition of a locale, falling back to the us layout."""
        definition = self.lookup(code)
        if definition is None:
            logger.warning(
                'No catalog entry for "%s", using the "%s" keyboard layout',
                code,
                DEFAULT_LAYOUT,
            )
            return LocaleDefinition.fallback(code)

        return definition

    def __contains__(self, code: str) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[LocaleDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
