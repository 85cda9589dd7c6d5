# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions that drive a single analysis (one tree, one report)
and analyses of several independent trees.
"""

import logging
from collections.abc import Iterable

from treestats.stats import EmptyInputError, Report, StatsAccumulator
from treestats.syntax import SyntaxTree
from treestats.walkers.stats_collector import StatsCollector

log = logging.getLogger(__name__)

DEFAULT_TARGET = "println"


def _check_target(target: str):
    """
    Raises
    ------
    TypeError
        If `target` is not a string.

    ValueError
        If `target` is an empty string.
    """
    if not isinstance(target, str):
        raise TypeError("'target' must be a string.")
    if not target:
        raise ValueError("'target' must be a non-empty string.")


def collect(tree: SyntaxTree, target: str = DEFAULT_TARGET) -> StatsAccumulator:
    """
    Walk `tree` once, and return the counts gathered along the way.

    Parameters
    ----------
    tree: SyntaxTree
        The tree to walk. It is not modified.

    target: str, default: "println"
        The macro name to count.

    Returns
    -------
    StatsAccumulator
        A new accumulator, owned by the caller.
    """
    _check_target(target)
    collector = StatsCollector(tree, target)
    return collector.walk()


def analyze(tree: SyntaxTree, target: str = DEFAULT_TARGET) -> Report:
    """
    Compute the Report for `tree`.

    Parameters
    ----------
    tree: SyntaxTree
        The tree to analyze. It is not modified.

    target: str, default: "println"
        The macro name to count. Matching is exact and case-sensitive.

    Returns
    -------
    Report
        The summary of the tree.

    Raises
    ------
    EmptyInputError
        If the tree contains no functions.

    ValueError
        If `target` is empty.
    """
    return collect(tree, target).finalize()


def analyze_all(
    trees: Iterable[SyntaxTree],
    target: str = DEFAULT_TARGET,
) -> list[Report | None]:
    """
    Analyze each tree independently.

    Returns
    -------
    list[Report | None]
        One entry per tree, in order. Trees without functions produce None
        (and a warning) instead of a Report.
    """
    _check_target(target)
    reports = []
    for tree in trees:
        try:
            reports.append(analyze(tree, target))
        except EmptyInputError:
            log.warning(f"{tree.name}: no functions found.")
            reports.append(None)
    return reports
