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

"""Read the key-value build configuration that is shared with the image build."""

from __future__ import annotations

import os
import shlex
from typing import Dict

try:
    from pydantic.v1 import BaseModel, ValidationError, validator
except ImportError:
    from pydantic import BaseModel, ValidationError, validator

from langpackbuilder.configs.distribution import DistributionFamily, classify
from langpackbuilder.exceptions import ConfigurationError
from langpackbuilder.logging.logger import logger

REQUIRED_KEYS = ("DISTRIBUTION", "DISTRIBUTION_ARCH")

# the locale of the base image, which doesn't need a langpack
DEFAULT_HOST_LOCALE = "en_US"


class BuildConfig(BaseModel):
    """The subset of the build configuration that langpacks depend on."""

    distribution: str
    distribution_arch: str
    locale: str = DEFAULT_HOST_LOCALE

    @validator("distribution", "distribution_arch")
    def _not_empty(cls, value):
        value = value.strip()
        if value == "":
            raise ValueError("must not be empty")
        return value

    @validator("locale")
    def _strip_encoding(cls, value):
        # "en_US.UTF-8" in build.conf means the same as "en_US",
        # and "sr_RS.UTF-8@latin" the same as "sr_RS@latin"
        language, at, modifier = value.strip().partition("@")
        language = language.split(".")[0]
        if language == "":
            raise ValueError("must not be empty")
        return language + at + modifier

    @property
    def family(self) -> DistributionFamily:
        return classify(self.distribution)

    class Config:
        allow_mutation = False

    @staticmethod
    def parse_lines(content: str) -> Dict[str, str]:
        """Parse shell-style KEY=value lines. Comments and other statements
        are ignored."""
        values = {}
        for line in content.splitlines():
            line = line.strip()
            if line == "" or line.startswith("#"):
                continue

            if line.startswith("export "):
                line = line[len("export ") :]

            key, separator, value = line.partition("=")
            key = key.strip()
            if separator == "" or not key.isidentifier():
                logger.debug('Ignoring "%s" in the build config', line)
                continue

            try:
                tokens = shlex.split(value, comments=True)
            except ValueError as error:
                raise ConfigurationError(
                    f'Failed to parse the value of "{key}": {error}'
                ) from error

            values[key] = " ".join(tokens)

        return values

    @classmethod
    def from_dict(cls, values: Dict[str, str]) -> BuildConfig:
        missing = [key for key in REQUIRED_KEYS if not values.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required config keys: {', '.join(missing)}"
            )

        kwargs = {
            "distribution": values["DISTRIBUTION"],
            "distribution_arch": values["DISTRIBUTION_ARCH"],
        }
        if values.get("LOCALE"):
            kwargs["locale"] = values["LOCALE"]

        try:
            return cls(**kwargs)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid build config: {error}") from error

    @classmethod
    def load(cls, path: str) -> BuildConfig:
        """Read the build config from the file system."""
        if not os.path.exists(path):
            raise ConfigurationError(f'Build config "{path}" not found')

        with open(path, "r") as file:
            values = cls.parse_lines(file.read())

        logger.info('Loaded build config from "%s"', path)
        return cls.from_dict(values)
