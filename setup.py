"""Setup the library."""
from __future__ import annotations

from setuptools import setup

setup(
    name="url-tools",
    version="1.0.0",
    description="Compose URLs and edit their query strings",
    packages=["url_tools"],
    python_requires=">=3.9",
    install_requires=[
        "multidict >= 6.0, < 7",
        "yarl >= 1.9.0",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    setup_requires=["wheel"],
)
