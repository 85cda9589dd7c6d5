# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains the accumulator that turns visitation events into counts, and
the immutable Report computed from those counts.
"""

import logging
from dataclasses import dataclass

import numpy as np

log = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """
    Raised when statistics are requested for a tree without functions.
    Percentages are undefined in that case.
    """


@dataclass(frozen=True)
class Report:
    """
    The summary of a single analysis.

    Attributes
    ----------
    invocation_count: int
        The number of macro invocations matching the target name.

    modal_arity: int
        The most common number of parameters. When several parameter
        counts are equally common, the lowest one.

    modal_arity_percent: float
        The percentage of functions with `modal_arity` parameters.

    four_or_more_percent: float
        The percentage of functions with four or more parameters.

    total: int
        The number of functions observed.

    histogram: tuple[int, ...]
        The number of functions observed for each parameter count.
    """

    invocation_count: int
    modal_arity: int
    modal_arity_percent: float
    four_or_more_percent: float
    total: int = 0
    histogram: tuple[int, ...] = ()


class StatsAccumulator:
    """
    Mutable counts for one analysis.

    `arity_histogram[k]` is the number of functions declaring `k`
    parameters. The histogram grows on demand and is never shrunk.
    """

    def __init__(self):
        self.invocation_count = 0
        self.arity_histogram = []

    @property
    def functions(self) -> int:
        """
        The number of functions recorded so far.
        """
        return sum(self.arity_histogram)

    def record_function(self, parameter_count: int):
        """
        Record a function declaring `parameter_count` parameters.

        Raises
        ------
        ValueError
            If `parameter_count` is negative.
        """
        if parameter_count < 0:
            raise ValueError("'parameter_count' must be non-negative.")

        if len(self.arity_histogram) <= parameter_count:
            growth = parameter_count + 1 - len(self.arity_histogram)
            self.arity_histogram.extend([0] * growth)

        self.arity_histogram[parameter_count] += 1

    def record_macro_match(self):
        """
        Record a macro invocation matching the target name.
        """
        self.invocation_count += 1

    def finalize(self) -> Report:
        """
        Compute the Report for the counts recorded so far.
        The accumulator is not modified.

        Returns
        -------
        Report
            The summary of all recorded events.

        Raises
        ------
        EmptyInputError
            If no functions were recorded.
        """
        counts = np.asarray(self.arity_histogram, dtype=np.int64)
        total = int(counts.sum())
        if total == 0:
            raise EmptyInputError("No functions were observed.")

        # argmax returns the first index holding the maximum.
        modal_arity = int(np.argmax(counts))
        modal_count = float(counts[modal_arity])
        four_or_more = float(counts[4:].sum())

        return Report(
            invocation_count=self.invocation_count,
            modal_arity=modal_arity,
            modal_arity_percent=100.0 * modal_count / float(total),
            four_or_more_percent=100.0 * four_or_more / float(total),
            total=total,
            histogram=tuple(int(c) for c in counts),
        )
