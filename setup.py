#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="probability",
    version="0.1.0",
    description="Univariate probability distributions with pluggable randomness",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",

    # the probability/ package and its subpackages; tests and docs stay out
    packages=find_packages(exclude=["tests*", "docs*", "notebooks*"]),

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
            "scipy>=1.7",
        ],
        "dev": [
            "pytest",
            "hypothesis",
            "scipy>=1.7",
            "black",
            "flake8",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

    include_package_data=False,
)
