# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging
import tempfile
import unittest
from pathlib import Path

from treestats import CodeBase


class TestCodeBase(unittest.TestCase):
    """
    Test CodeBase class.
    """

    def setUp(self):
        logging.disable()

        # Create a temporary code base spread across two directories
        self.tmp1 = tempfile.TemporaryDirectory()
        self.tmp2 = tempfile.TemporaryDirectory()
        self.p1 = Path(self.tmp1.name).resolve()
        self.p2 = Path(self.tmp2.name).resolve()
        (self.p1 / "build").mkdir()
        for path in [
            self.p1 / "foo.py",
            self.p1 / "bar.json",
            self.p1 / "baz.yaml",
            self.p1 / "build" / "generated.py",
            self.p1 / "README.md",
            self.p2 / "qux.yml",
            self.p2 / "quux.rs",
        ]:
            open(path, mode="w").close()

    def tearDown(self):
        self.tmp1.cleanup()
        self.tmp2.cleanup()

    def test_constructor(self):
        """Check directories and exclude_patterns are handled correctly"""
        codebase = CodeBase(self.p1, exclude_patterns=["*.yaml"])
        self.assertEqual(codebase.directories, [str(self.p1)])
        self.assertEqual(codebase.exclude_patterns, ["*.yaml"])

    def test_constructor_validation(self):
        """Check directories and exclude_patterns are valid"""
        with self.assertRaises(TypeError):
            CodeBase(exclude_patterns="*")

        with self.assertRaises(TypeError):
            CodeBase(1, "2", 3)

        with self.assertRaises(TypeError):
            CodeBase(exclude_patterns=[1, "2", 3])

    def test_repr(self):
        """Check implementation of __repr__"""
        codebase = CodeBase(self.p1, exclude_patterns=["*.yaml"])
        self.assertEqual(
            repr(codebase),
            f"CodeBase(directories=['{self.p1}'], "
            + "exclude_patterns=['*.yaml'])",
        )

    def test_contains(self):
        """Check implementation of __contains__"""
        codebase = CodeBase(self.p1, self.p2, exclude_patterns=["build/"])

        # Supported files in the directories are in the code base.
        self.assertTrue(self.p1 / "foo.py" in codebase)
        self.assertTrue(self.p1 / "bar.json" in codebase)
        self.assertTrue(self.p1 / "baz.yaml" in codebase)
        self.assertTrue(self.p2 / "qux.yml" in codebase)

        # Files that match exclude pattern(s) are not in the code base.
        self.assertFalse(self.p1 / "build" / "generated.py" in codebase)

        # Files that don't exist are not in the code base.
        self.assertFalse(self.p1 / "missing.py" in codebase)

        # Directories are not in the code base.
        self.assertFalse(self.p1 in codebase)

        # Unsupported files are not in the code base.
        self.assertFalse(self.p1 / "README.md" in codebase)
        self.assertFalse(self.p2 / "quux.rs" in codebase)

        # Files outside of the directories are not in the code base.
        self.assertFalse(self.p2 / "qux.yml" in CodeBase(self.p1))

    def test_iterator(self):
        """Check implementation of __iter__"""
        codebase = CodeBase(self.p1, self.p2, exclude_patterns=["*.yaml"])
        files = [f for f in codebase]
        expected = [
            str(self.p1 / "bar.json"),
            str(self.p1 / "build" / "generated.py"),
            str(self.p1 / "foo.py"),
            str(self.p2 / "qux.yml"),
        ]
        self.assertEqual(files, expected)


if __name__ == "__main__":
    unittest.main()
