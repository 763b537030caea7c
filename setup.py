# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="primeshare",
    version="0.1.0",
    description="Shamir (k, n) threshold secret sharing over a large prime field",
    author="PrimeShare contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "pytest-xdist>=3.5.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "ruff>=0.2.0",
            "black>=23.1.0",
            "isort>=5.10.1",
            "mypy>=1.8.0",
            "bandit>=1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "primeshare=primeshare.cli:main",
        ],
    },
)
