# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging
import unittest

from treestats.stats import EmptyInputError, Report, StatsAccumulator


def _accumulator(histogram, invocations=0):
    stats = StatsAccumulator()
    for arity, count in enumerate(histogram):
        for _ in range(count):
            stats.record_function(arity)
    for _ in range(invocations):
        stats.record_macro_match()
    return stats


class TestStatsAccumulator(unittest.TestCase):
    """
    Test StatsAccumulator class.
    """

    def setUp(self):
        logging.disable()

    def test_constructor(self):
        """Check initial state"""
        stats = StatsAccumulator()
        self.assertEqual(stats.invocation_count, 0)
        self.assertEqual(stats.arity_histogram, [])
        self.assertEqual(stats.functions, 0)

    def test_record_function(self):
        """Check histogram grows with zero-fill"""
        stats = StatsAccumulator()
        stats.record_function(3)
        self.assertEqual(stats.arity_histogram, [0, 0, 0, 1])
        stats.record_function(1)
        stats.record_function(3)
        self.assertEqual(stats.arity_histogram, [0, 1, 0, 2])
        stats.record_function(0)
        self.assertEqual(stats.arity_histogram, [1, 1, 0, 2])
        self.assertEqual(stats.functions, 4)

        stats.record_function(40)
        self.assertEqual(len(stats.arity_histogram), 41)
        self.assertEqual(stats.arity_histogram[40], 1)

        with self.assertRaises(ValueError):
            stats.record_function(-1)

    def test_record_macro_match(self):
        """Check invocation count"""
        stats = StatsAccumulator()
        stats.record_macro_match()
        stats.record_macro_match()
        self.assertEqual(stats.invocation_count, 2)

    def test_empty(self):
        """Check finalize with no functions"""
        with self.assertRaises(EmptyInputError):
            StatsAccumulator().finalize()

        # Matching invocations alone do not define any percentages.
        with self.assertRaises(EmptyInputError):
            _accumulator([], invocations=3).finalize()

    def test_modal_tie_break(self):
        """Check lowest arity wins ties"""
        report = _accumulator([2, 5, 5, 1]).finalize()
        self.assertEqual(report.modal_arity, 1)
        self.assertEqual(report.total, 13)
        self.assertAlmostEqual(report.modal_arity_percent, 100 * 5 / 13)
        self.assertEqual(report.four_or_more_percent, 0.0)

        report = _accumulator([0, 0, 3, 3]).finalize()
        self.assertEqual(report.modal_arity, 2)

    def test_four_or_more(self):
        """Check four or more percentage"""
        report = _accumulator([1, 1, 1, 1, 1, 1]).finalize()
        self.assertEqual(report.total, 6)
        self.assertEqual(report.modal_arity, 0)
        self.assertAlmostEqual(report.four_or_more_percent, 33.333333, 5)
        self.assertAlmostEqual(report.modal_arity_percent, 16.666666, 5)

    def test_report(self):
        """Check report fields"""
        report = _accumulator([0, 2, 1, 0, 1], invocations=7).finalize()
        expected = Report(
            invocation_count=7,
            modal_arity=1,
            modal_arity_percent=50.0,
            four_or_more_percent=25.0,
            total=4,
            histogram=(0, 2, 1, 0, 1),
        )
        self.assertEqual(report, expected)

    def test_finalize_idempotent(self):
        """Check finalize does not modify the accumulator"""
        stats = _accumulator([3, 1, 4, 1, 5], invocations=2)
        first = stats.finalize()
        second = stats.finalize()
        self.assertEqual(first, second)
        self.assertEqual(stats.arity_histogram, [3, 1, 4, 1, 5])
        self.assertEqual(stats.invocation_count, 2)

    def test_report_immutable(self):
        """Check reports cannot be modified"""
        report = _accumulator([1]).finalize()
        with self.assertRaises(AttributeError):
            report.modal_arity = 3


if __name__ == "__main__":
    unittest.main()
