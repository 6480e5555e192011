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

"""Tell debian- and ubuntu-like distributions apart by their codename."""

import enum

from langpackbuilder.exceptions import UnknownDistributionError


class DistributionFamily(str, enum.Enum):
    DEBIAN = "debian"
    UBUNTU = "ubuntu"


DEBIAN_CODENAMES = ("stretch", "buster", "bullseye", "bookworm", "trixie", "sid")
UBUNTU_CODENAMES = ("bionic", "focal", "jammy", "noble")


def classify(codename: str) -> DistributionFamily:
    """Get the family of the configured DISTRIBUTION.

    Raises UnknownDistributionError for codenames that are in neither list.
    """
    normalized = codename.strip().lower()

    if normalized in DEBIAN_CODENAMES:
        return DistributionFamily.DEBIAN

    if normalized in UBUNTU_CODENAMES:
        return DistributionFamily.UBUNTU

    raise UnknownDistributionError(codename)
