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


"""Exceptions specific to langpackbuilder"""

from typing import List, Optional


class Error(Exception):
    """Base class for exceptions in langpackbuilder.

    We can catch all langpackbuilder exceptions with this.
    """


class ConfigurationError(Error):
    """The build can't start because of the build configuration.

    Raised before any locale is processed.
    """

    def __init__(self, msg: str):
        super().__init__(msg)


class UnknownDistributionError(ConfigurationError):
    def __init__(self, codename: str):
        self.codename = codename
        super().__init__(f'Unknown distribution "{codename}"')


class PrivilegeError(Error):
    """Building langpacks reconfigures the host, which requires root."""

    def __init__(self, msg: str = "langpack-builder needs to be run as root"):
        super().__init__(msg)


class ExternalCommandError(Error):
    """A package manager, locale, keyboard or compressor call failed."""

    def __init__(
        self,
        command: List[str],
        returncode: Optional[int] = None,
        output: Optional[str] = None,
    ):
        self.command = command
        self.returncode = returncode
        self.output = output

        if returncode is None:
            msg = f'Could not run "{command[0]}"'
        else:
            msg = f'"{" ".join(command)}" failed with exit code {returncode}'

        if output:
            msg = f"{msg}: {output.strip()}"

        super().__init__(msg)


class PackagingError(Error):
    """The module image of a locale could not be written."""

    def __init__(self, module_path: str, reason: str):
        self.module_path = module_path
        super().__init__(f'Failed to write "{module_path}": {reason}')


class BuildCancelled(Error):
    """A cancellation was requested while a locale was being built."""

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale
        if locale is None:
            super().__init__("Build cancelled")
        else:
            super().__init__(f'Build cancelled while processing "{locale}"')
