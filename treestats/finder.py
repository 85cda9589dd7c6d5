# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions and classes related to finding and parsing
input files, and analyzing the resulting trees.
"""

import logging
import os
from collections.abc import Iterable

from tqdm import tqdm

from treestats import CodeBase, analyzer, file_parser
from treestats.stats import EmptyInputError, Report

log = logging.getLogger(__name__)


class AnalysisState:
    """
    Keeps track of the overall state of an analysis.
    Contains all of the SyntaxTree objects created from parsing the
    input files, along with the Report computed for each of them.
    """

    def __init__(self, target: str = analyzer.DEFAULT_TARGET):
        self.target = target
        self.trees = {}
        self.reports = {}
        self._path_cache = {}

    def _get_realpath(self, path: str) -> str:
        """
        Returns
        -------
        str
            Equivalent to os.path.realpath(path).
        """
        if path not in self._path_cache:
            real = os.path.realpath(path)
            self._path_cache[path] = real
        return self._path_cache[path]

    def insert_file(self, fn):
        """
        Build a new tree for an input file.
        """
        fn = self._get_realpath(fn)
        if fn not in self.trees:
            parser = file_parser.FileParser(fn)
            self.trees[fn] = parser.parse_file()

    def analyze(self, fn):
        """
        Compute the Report for a file that has already been inserted.
        Files without functions are recorded as having no Report.
        """
        fn = self._get_realpath(fn)
        tree = self.trees[fn]
        try:
            self.reports[fn] = analyzer.analyze(tree, self.target)
        except EmptyInputError:
            log.warning(f"{fn}: no functions found.")
            self.reports[fn] = None

    def get_filenames(self):
        """
        Return all of the filenames for files parsed so far.
        """
        return self.trees.keys()

    def get_tree(self, fn):
        """
        Return the SyntaxTree associated with a filename
        """
        fn = self._get_realpath(fn)
        if fn not in self.trees:
            return None
        return self.trees[fn]

    def get_report(self, fn) -> Report | None:
        """
        Return the Report associated with a filename, or None if the
        file contained no functions or has not been analyzed.
        """
        fn = self._get_realpath(fn)
        if fn not in self.reports:
            return None
        return self.reports[fn]


def find(
    codebase: CodeBase,
    *,
    files: Iterable[str] = (),
    target: str = analyzer.DEFAULT_TARGET,
    show_progress=False,
):
    """
    Parse every file in the code base, along with any additional `files`,
    and analyze each resulting tree independently.
    """
    state = AnalysisState(target)

    filenames = list(files)
    for fn in codebase:
        if fn not in filenames:
            filenames.append(fn)

    for f in tqdm(
        filenames,
        desc="Parsing",
        unit=" file",
        leave=False,
        disable=not show_progress,
    ):
        state.insert_file(f)

    for f in tqdm(
        state.get_filenames(),
        desc="Analyzing",
        unit=" file",
        leave=False,
        disable=not show_progress,
    ):
        state.analyze(f)

    return state
