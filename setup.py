#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
setup.py

MAIN OBJECTIVE:
---------------
This script provides the setup configuration for the CSVLangDetector package,
including dependencies, entry points, and metadata.

Dependencies:
-------------
- setuptools

MAIN FEATURES:
--------------
1) Package metadata
2) Core dependencies (CSV parsing, language detection, terminal output)
3) Entry point for CLI execution
4) Development dependencies

Author:
-------
Antoine Lemor
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8") if (this_directory / "README.md").exists() else ""

# Version
__version__ = "1.0.0"

CORE_DEPENDENCIES = [
    # Data manipulation
    "pandas>=1.5.0",

    # Language detection
    "lingua-language-detector>=2.0.0",
    "langid>=1.1.6",

    # CLI and interface
    "rich>=13.0.0",
]

DEV_DEPENDENCIES = [
    "pytest>=7.4.0",
    "pytest-cov>=4.1.0",
]

setup(
    name="csv-lang-detector",
    version=__version__,
    author="Antoine Lemor",
    author_email="antoine.lemor@example.com",
    description="Detect the natural language of a CSV text column, row by row",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["csv_lang_detector", "csv_lang_detector.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.9",
    install_requires=CORE_DEPENDENCIES,
    extras_require={
        "dev": DEV_DEPENDENCIES,
        "test": DEV_DEPENDENCIES,
    },
    entry_points={
        "console_scripts": [
            "csv-lang-detector=csv_lang_detector.__main__:run",
        ],
    },
    zip_safe=False,
    keywords=[
        "csv",
        "language-detection",
        "multilingual",
        "natural-language-processing",
    ],
)
