#!/usr/bin/python3
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


import os
import re
from setuptools import setup
from setuptools.command.install import install


class Install(install):
    """Add the commit hash to the installation info."""

    def run(self):
        install.run(self)

        try:
            commit = os.popen("git rev-parse HEAD").read().strip()
            if not re.match(r"^([a-z]|[0-9])+$", commit):
                return

            path = os.path.join(
                self.install_lib, "langpackbuilder", "installation_info.py"
            )
            with open(path, "r") as f:
                contents = f.read()

            contents = re.sub(r"COMMIT_HASH\s*=.+", f'COMMIT_HASH = "{commit}"', contents)
            with open(path, "w") as f:
                f.write(contents)
        except Exception as e:
            print("Failed to save the commit hash:", e)


def get_packages(base="langpackbuilder"):
    """Return all modules used in langpack-builder.

    For example 'langpackbuilder.configs' or 'langpackbuilder.system'
    """
    if not os.path.exists(os.path.join(base, "__init__.py")):
        # only python modules
        return []

    result = [base.replace("/", ".")]
    for name in os.listdir(base):
        if not os.path.isdir(os.path.join(base, name)):
            continue

        if name == "__pycache__":
            continue

        # find more python submodules in that directory
        result += get_packages(os.path.join(base, name))

    return result


setup(
    name="langpack-builder",
    version="1.0.0",
    description="Builds language modules for live system images",
    license="GPL-3.0",
    packages=get_packages(),
    scripts=["bin/langpack-builder"],
    python_requires=">=3.9",
    install_requires=["setuptools", "pydantic", "psutil"],
    cmdclass={
        "install": Install,
    },
)
