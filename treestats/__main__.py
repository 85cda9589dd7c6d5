#!/usr/bin/env python3
# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
This script is the main executable of Tree Stats.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from treestats import CodeBase, __version__, config, finder, report, util
from treestats._detail.logging import Formatter, WarningAggregator

log = logging.getLogger("treestats")


def _help_string(*lines: str, is_long=False, is_last=False):
    """
    Parameters
    ----------
    *lines: str
        Each line in the help string.

    is_long: bool
        A flag indicating whether the option is long enough to generate an
        initial newline by default.

    is_last: bool
        A flag indicating whether the option is the last in the list.

    Returns
    -------
        An argparse help string formatted as a paragraph.
    """
    result = ""

    # A long option like --exclude will force a newline.
    if not is_long:
        result = "\n"

    # argparse.HelpFormatter indents by 24 characters.
    # We cannot override this directly, but can delete them with backspaces.
    lines = ["\b" * 20 + x for x in lines]

    # The additional space is required for argparse to respect newlines.
    result += "\n".join(lines)

    if not is_last:
        result += "\n "

    return result


def _build_parser() -> argparse.ArgumentParser:
    """
    Build argument parser.
    """
    parser = argparse.ArgumentParser(
        description="Tree Stats " + __version__,
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        help=_help_string("Display help message and exit."),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Tree Stats {__version__}",
        help=_help_string("Display version information and exit."),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        action="count",
        default=0,
        help=_help_string("Increase verbosity level."),
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="count",
        default=0,
        help=_help_string("Decrease verbosity level."),
    )
    parser.add_argument(
        "-t",
        "--target",
        dest="target",
        metavar="<name>",
        default=None,
        help=_help_string(
            "Count invocations of the macro with this name.",
            "Matching is exact and case-sensitive.",
            "If not specified, defaults to 'println'.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        metavar="<config>",
        default=None,
        help=_help_string(
            "TOML file describing the analysis to be performed.",
            "Options on the command line take precedence.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "-R",
        "--report",
        dest="reports",
        metavar="<report>",
        action="append",
        default=[],
        choices=["all", "summary", "histogram", "tree"],
        help=_help_string(
            "Generate a report of the specified type.",
            "May be specified multiple times.",
            "If not specified, the summary report will be generated.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "-x",
        "--exclude",
        dest="excludes",
        metavar="<pattern>",
        action="append",
        default=[],
        help=_help_string(
            "Exclude files matching this pattern from the analysis.",
            "May be specified multiple times.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "-l",
        "--log-file",
        dest="log_file",
        metavar="<log>",
        default="treestats.log",
        help=_help_string(
            "Write all messages to this file.",
            "If not specified, defaults to 'treestats.log'.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "paths",
        metavar="<path>",
        nargs="+",
        help=_help_string(
            "Tree document (.json, .yaml), Python file or directory "
            + "to analyze.",
            "Directories are searched recursively.",
            is_last=True,
        ),
    )

    return parser


def _stats(args: argparse.Namespace) -> int:
    # Set up a default configuration object.
    configuration = config.AnalysisConfig()
    if args.config_file is not None:
        if not util.valid_path(args.config_file):
            raise ValueError(f"{args.config_file} is not a valid path.")
        configuration = config.load_config(args.config_file)

    # Options on the command line take precedence.
    if args.target is not None:
        configuration.target = args.target
    if not configuration.target:
        raise ValueError("Target name must be a non-empty string.")
    configuration.exclude += args.excludes
    if args.reports:
        configuration.reports = args.reports

    # If no specific report was specified, generate the summary.
    # Handled here to prevent "all" always being in the list.
    if len(configuration.reports) == 0:
        configuration.reports = ["summary"]

    directories = []
    files = []
    for path in args.paths:
        if not util.valid_path(path):
            raise ValueError(f"{path} is not a valid path.")
        if os.path.isdir(path):
            directories.append(path)
        elif os.path.exists(path):
            files.append(path)
        else:
            raise FileNotFoundError(f"{path} does not exist.")

    codebase = CodeBase(*directories, exclude_patterns=configuration.exclude)

    # Parse each input, and analyze each tree independently.
    state = finder.find(
        codebase,
        files=files,
        target=configuration.target,
        show_progress=sys.stderr.isatty(),
    )

    def report_enabled(name):
        if "all" in configuration.reports:
            return True
        return name in configuration.reports

    for fn in state.get_filenames():
        tree = state.get_tree(fn)
        stats = state.get_report(fn)
        name = tree.name

        # Print summary report
        if report_enabled("summary") and stats is not None:
            report.summary(stats, configuration.target, name)

        # Print histogram report
        if report_enabled("histogram") and stats is not None:
            report.histogram(stats)

        # Print tree report
        if report_enabled("tree"):
            report.tree(tree, configuration.target)

    return 0


def cli(argv: list[str]) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Configure logging such that:
    # - All messages are written to a log file
    # - Only errors are written to the terminal by default
    # - Messages written to terminal are based on -q and -v flags
    # - Meta-warnings and statistics are generated by a WarningAggregator
    if not util.valid_path(args.log_file):
        raise ValueError(f"{args.log_file} is not a valid path.")

    aggregator = WarningAggregator()
    log.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(args.log_file, mode="w")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(Formatter())
    file_handler.addFilter(aggregator)
    log.addHandler(file_handler)

    # Inform the user that a log file has been created.
    # 'print' instead of 'log' to ensure the message is visible in the output.
    log_path = Path(args.log_file).resolve()
    print(f"Log file created at {log_path}")

    log_level = max(1, logging.ERROR - 10 * (args.verbose - args.quiet))
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(Formatter(colors=sys.stderr.isatty()))
    log.addHandler(stderr_handler)

    try:
        result = _stats(args)

        # Generate meta-warnings and statistics.
        # Temporarily override log_level to ensure they are visible.
        stderr_handler.setLevel(logging.WARNING)
        aggregator.warn(log)
        stderr_handler.setLevel(log_level)
    finally:
        for handler in [file_handler, stderr_handler]:
            log.removeHandler(handler)
            handler.close()

    return result


def main():
    try:
        sys.exit(cli(sys.argv[1:]))
    except Exception as e:
        log.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    sys.argv[0] = "treestats"
    main()
