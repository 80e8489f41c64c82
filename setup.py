#!/usr/bin/env python3
"""
RESP-Client Setup Script
========================
Allows installation of the resp-client package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="resp-client",
    version="1.0.0",
    description="Minimal synchronous client for the REdis Serialization Protocol",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "respclient=respclient.cli:main",
        ],
    },
)
