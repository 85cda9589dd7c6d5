# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions for generating command-line reports.
"""

import logging
import sys
from typing import TextIO

from tabulate import tabulate

from treestats.stats import Report
from treestats.syntax import SyntaxTree
from treestats.walkers.tree_printer import TreePrinter

log = logging.getLogger(__name__)


def _heading(text: str, stream: TextIO):
    """
    Parameters
    ----------
    text: str
        The text to use as the heading.

    stream: TextIO
        The stream the heading will eventually be written to.

    Returns
    -------
    str
        A heading string appropriately formatted for the output stream.
    """
    if stream.isatty():
        return f"\033[1m\033[4m{text}\033[0m\n"
    else:
        underline = "=" * len(text)
        return f"{text}\n{underline}"


def summary(
    report: Report,
    target: str = "println",
    name: str = "unknown_crate",
    stream: TextIO = sys.stdout,
):
    """
    Produce a summary report for a single tree: the number of matching
    macro invocations, the most common number of arguments and the share
    of functions with four or more arguments.

    Parameters
    ----------
    report: Report
        The report to summarize.

    target: str, default: "println"
        The macro name that was counted.

    name: str, default: "unknown_crate"
        The name of the analyzed tree.

    stream: TextIO, default: sys.stdout
        The stream to write the report to.
    """
    lines = ["", _heading(f"In crate: {name}", stream)]
    lines += [
        f"Found {report.invocation_count} uses of `{target}!`;",
        "The most common number of arguments is "
        + f"{report.modal_arity} "
        + f"({report.modal_arity_percent:.0f}% of all functions);",
        f"{report.four_or_more_percent:.0f}% of functions have four or "
        + "more arguments.",
    ]
    print("\n".join(lines), file=stream)


def histogram(report: Report, stream: TextIO = sys.stdout):
    """
    Produce a table of the number of functions observed for each number of
    arguments.

    Parameters
    ----------
    report: Report
        The report to tabulate.

    stream: TextIO, default: sys.stdout
        The stream to write the report to.
    """
    lines = ["", _heading("Arguments", stream)]

    data = []
    for arity, count in enumerate(report.histogram):
        if count == 0:
            continue
        percent = (float(count) / float(report.total)) * 100
        data += [[str(arity), str(count), f"{percent:.2f}"]]

    lines += [
        tabulate(
            data,
            headers=["Arguments", "Functions", "% Functions"],
            tablefmt="simple_grid",
            floatfmt=".2f",
            stralign="right",
        ),
        f"Total Functions: {report.total}",
    ]
    print("\n".join(lines), file=stream)


def tree(
    syntax_tree: SyntaxTree,
    target: str = "println",
    stream: TextIO = sys.stdout,
):
    """
    Print the syntax tree, marking each macro invocation matching
    `target`.
    """
    print("", file=stream)
    print(_heading("Tree", stream), file=stream)
    TreePrinter(syntax_tree, target).walk(stream)
