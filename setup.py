# SPDX-FileCopyrightText: 2025 sharesplit contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="sharesplit",
    version="0.1.0",
    description="Shamir's secret sharing over GF(257) with plain-text shares",
    author="sharesplit contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click<9.0,>=8.1",
    ],
    extras_require={
        # tests
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sharesplit=sharesplit.cli:main",
        ],
    },
)
