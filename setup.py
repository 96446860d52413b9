# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import List

from setuptools import find_namespace_packages, setup

with open("requirements.txt") as f:
    install_requires: List[str] = f.read().splitlines()

setup(
    name="building_entry_loss",
    version="1.0.0",
    description="""
Statistical building entry loss of radio signals according to
 Recommendation ITU-R P.2109
""",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    install_requires=install_requires,
    extras_require={"test": ["numpy", "pytest"]},
    include_package_data=True,
    packages=find_namespace_packages(include=["building_entry_loss*"]),
    python_requires=">=3.8",
)
