#!/usr/bin/env python3
"""Setup script for Tasrif Arabic conjugation tables."""

from setuptools import setup, find_packages

setup(
    name="tasrif",
    version="0.1.0",
    description="Arabic verb conjugation tables for learners",
    author="Tasrif Team",
    python_requires=">=3.9",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "uvicorn",
    ],
    extras_require={
        "dev": [
            "pytest",
            "httpx",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "tasrif=tasrif.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
)
