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

"""Copy resources of the live system into a staging tree."""

from __future__ import annotations

import glob
import os
import shutil
from typing import Dict, Iterable, List

from langpackbuilder.configs.paths import PathUtils
from langpackbuilder.logging.logger import logger
from langpackbuilder.resources import ResourcePattern


def _is_real_dir(path: str) -> bool:
    return os.path.isdir(path) and not os.path.islink(path)


class CollectionResult:
    """Which paths each pattern matched and copied.

    A pattern without matches is not an error, most locales don't have
    resources in every subsystem.
    """

    def __init__(self):
        self.matches: Dict[ResourcePattern, List[str]] = {}

    def add(self, pattern: ResourcePattern, paths: List[str]) -> None:
        self.matches.setdefault(pattern, []).extend(paths)

    def merge(self, other: CollectionResult) -> None:
        for pattern, paths in other.matches.items():
            self.add(pattern, paths)

    @property
    def count(self) -> int:
        return sum(len(paths) for paths in self.matches.values())

    def missing(self) -> List[ResourcePattern]:
        """Patterns that didn't match anything."""
        return [pattern for pattern, paths in self.matches.items() if not paths]

    def __repr__(self):
        return f"<CollectionResult {self.count} paths, {len(self.missing())} missing>"


class ResourceCollector:
    """Best-effort copying of glob matches, preserving their absolute paths.

    The destination is the root of a staging tree, /usr/share/locale/fr ends up
    in <destination>/usr/share/locale/fr.
    """

    def __init__(self, root: str = "/"):
        """
        Parameters
        ----------
        root
            Where the absolute paths of the patterns are looked up. Only
            differs from "/" in tests.
        """
        self.root = root

    def _resolve(self, pattern: ResourcePattern) -> List[str]:
        relative = pattern.pattern.lstrip("/")
        return sorted(glob.glob(os.path.join(self.root, relative)))

    def _copy(self, source: str, destination: str) -> None:
        PathUtils.mkdir(os.path.dirname(destination), log=False)

        if _is_real_dir(source):
            if not _is_real_dir(destination):
                PathUtils.remove(destination)
                shutil.copytree(source, destination, symlinks=True)
                return

            # merge, other steps may already have staged files in there
            for name in os.listdir(source):
                self._copy(os.path.join(source, name), os.path.join(destination, name))

            shutil.copystat(source, destination)
            return

        if os.path.islink(destination) or os.path.isdir(destination):
            # copy2 would write through a symlink, and can't replace directories
            PathUtils.remove(destination)

        shutil.copy2(source, destination, follow_symlinks=False)

    def collect(
        self,
        patterns: Iterable[ResourcePattern],
        destination: str,
    ) -> CollectionResult:
        """Copy everything that matches the patterns into the destination."""
        result = CollectionResult()

        for pattern in patterns:
            copied = []
            for source in self._resolve(pattern):
                target = os.path.join(
                    destination, PathUtils.relative_to_root(source, self.root)
                )
                try:
                    self._copy(source, target)
                except OSError as error:
                    logger.warning('Failed to copy "%s": %s', source, error)
                    continue

                logger.debug('Collected "%s"', source)
                copied.append(source)

            if not copied:
                logger.debug('Nothing found for "%s"', pattern.pattern)

            result.add(pattern, copied)

        return result
