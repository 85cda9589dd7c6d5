# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import os
from enum import Enum, auto


class Format(Enum):
    JSON = auto()
    YAML = auto()
    PYTHON = auto()
    UNKNOWN = auto()

    @classmethod
    def from_extension(cls, ext: str) -> "Format":
        if ext == ".json":
            return cls.JSON

        if ext in [".yaml", ".yml"]:
            return cls.YAML

        if ext in [".py", ".pyi"]:
            return cls.PYTHON

        return cls.UNKNOWN

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "Format":
        ext = os.path.splitext(path)[1]
        return cls.from_extension(ext)


def is_source_file(filename: str | os.PathLike[str]) -> bool:
    """
    Parameters
    ----------
    filename: str | os.PathLike[str]
        The filename of a potential input file.

    Returns
    -------
    bool
        True if the file can be turned into a syntax tree.

    Raises
    ------
    TypeError
        If filename is not a string or PathLike.
    """
    if not isinstance(filename, (str, os.PathLike)):
        raise TypeError("filename must be a string or PathLike")

    return Format.from_path(filename) != Format.UNKNOWN
