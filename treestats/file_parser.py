# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains classes and functions related to parsing a file,
and building a tree of nodes from it.
"""

import logging
import os

from treestats import loader, pysource
from treestats.source import Format
from treestats.syntax import SyntaxTree

log = logging.getLogger(__name__)


class FileParser:
    """
    Contains methods for building a SyntaxTree from a file, using the
    front end matching the file's format.
    """

    def __init__(self, _filename: str | os.PathLike[str]):
        self._filename = os.path.realpath(_filename)

    def parse_file(self) -> SyntaxTree:
        """
        Parse the file that this parser points at, build a SyntaxTree
        representing this file, and return it.

        Raises
        ------
        ValueError
            If the format of the file is not supported, or the file does
            not describe a valid tree.
        """
        fmt = Format.from_path(self._filename)

        if fmt in [Format.JSON, Format.YAML]:
            return loader.load_tree(self._filename)

        if fmt == Format.PYTHON:
            return pysource.parse_file(self._filename)

        raise ValueError(f"{self._filename} has an unsupported format.")
