#!/usr/bin/env python3
# Copyright (C) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import setup

setup(
    name="treestats",
    version="1.0.0",
    description="Tree Stats",
    packages=["treestats", "treestats._detail", "treestats.walkers"],
    package_data={"treestats": ["schema/*.schema"]},
    entry_points={
        "console_scripts": ["treestats=treestats.__main__:main"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development",
    ],
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26.0",
        "pathspec>=0.12.1",
        "pyyaml>=6.0.1",
        "jsonschema>=4.21.1",
        "tabulate>=0.9.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
