# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions to build up a configuration object,
defining the options of a specific analysis.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Self

from treestats import util
from treestats.analyzer import DEFAULT_TARGET

log = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """
    Options for an analysis.

    Attributes
    ----------
    target: str, default: "println"
        The macro name to count.

    exclude: list[str]
        Patterns describing files excluded from the analysis.

    reports: list[str]
        The reports to generate.
    """

    target: str = DEFAULT_TARGET
    exclude: list[str] = field(default_factory=list)
    reports: list[str] = field(default_factory=list)

    @classmethod
    def from_toml(cls, instance: dict) -> Self:
        """
        Parameters
        ----------
        instance: dict
            A TOML document, already validated.

        Returns
        -------
        AnalysisConfig
            The configuration described by the [analysis] table, with
            defaults for any missing values.
        """
        table = instance.get("analysis", {})
        return cls(
            target=table.get("target", DEFAULT_TARGET),
            exclude=list(table.get("exclude", [])),
            reports=list(table.get("reports", [])),
        )


def load_config(path: str | os.PathLike[str]) -> AnalysisConfig:
    """
    Load an AnalysisConfig from a TOML file.

    Raises
    ------
    ValueError
        If the file is not a TOML file, or fails validation.

    FileNotFoundError
        If the file with the specified name does not exist.
    """
    util.ensure_ext(path, [".toml"])
    with util.safe_open_read_nofollow(path, "rb") as f:
        instance = util._load_toml(f, "config")
    log.info(f"Loaded configuration from {path}.")
    return AnalysisConfig.from_toml(instance)
