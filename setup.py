# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="sharequorum",
    version="0.1.0",
    description="Majority-vote recovery of k-out-of-n Shamir secrets with corrupted shares",
    author="sharequorum contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "prometheus-client<1.0,>=0.16.0",
        "PyYAML<7.0,>=6.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "ruff>=0.2.0",
            "black>=23.1.0",
            "isort>=5.10.1",
            "mypy>=1.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sharequorum=sharequorum.cli:main",
        ],
    },
)
