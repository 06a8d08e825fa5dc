#!/usr/bin/env python
"""
Setup.py for graphalgebra.

Directed graph construction, graph algebra operators and shortest-path trees.
"""

from setuptools import setup, find_packages

setup(
    name="graphalgebra",
    version="0.1.0",
    description="Directed graph construction, graph algebra operators and shortest-path trees",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
