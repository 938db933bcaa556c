#!/usr/bin/env python3
"""
Setup script for NoteLens package.
"""

from setuptools import setup, find_packages

setup(
    name="notelens",
    version="0.1.0",
    description="On-device text analytics for voice-note transcripts",
    author="NoteLens Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "scikit-learn>=1.3",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "notelens=notelens.cli.main:main",
        ],
    },
)
