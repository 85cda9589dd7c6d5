# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging
import unittest

from treestats import util
from treestats.source import Format, is_source_file


class TestUtil(unittest.TestCase):
    """
    Test utility functions.
    """

    def setUp(self):
        logging.disable()

    def test_ensure_ext_validation(self):
        """Check ensure_ext raises expected errors"""
        with self.assertRaises(TypeError):
            util.ensure_ext("path.toml", 1)

        with self.assertRaises(TypeError):
            util.ensure_ext("path.toml", [1])

        with self.assertRaises(TypeError):
            not_a_path = 1
            util.ensure_ext(not_a_path, [".toml"])

    def test_ensure_ext(self):
        """Check ensure_ext correctness"""
        with self.assertRaises(ValueError):
            util.ensure_ext("path.json", [".toml"])

        util.ensure_ext("path.toml", ".toml")
        util.ensure_ext("path.toml", [".json", ".toml"])

    def test_valid_path(self):
        """Check valid_path rejects dangerous characters"""
        self.assertTrue(util.valid_path("/valid/path/"))
        self.assertFalse(util.valid_path("/invalid/\x00/path/"))
        self.assertFalse(util.valid_path("/invalid/\r/path/"))
        self.assertFalse(util.valid_path("/invalid/\n/path/"))

    def test_validate_json(self):
        """Check schema names are validated"""
        with self.assertRaises(ValueError):
            util._validate_json({}, "compiledb")

        self.assertTrue(util._validate_json({"nodes": []}, "tree"))
        self.assertTrue(util._validate_json({"kind": "other"}, "tree-node"))
        with self.assertRaises(ValueError):
            util._validate_json({"kind": "fn"}, "tree-node")
        self.assertTrue(util._validate_json({}, "config"))

    def test_format(self):
        """Check input formats are recognized"""
        self.assertEqual(Format.from_path("a.json"), Format.JSON)
        self.assertEqual(Format.from_path("a.yaml"), Format.YAML)
        self.assertEqual(Format.from_path("a.yml"), Format.YAML)
        self.assertEqual(Format.from_path("a/b.py"), Format.PYTHON)
        self.assertEqual(Format.from_path("a.rs"), Format.UNKNOWN)

        self.assertTrue(is_source_file("crate-1.0.json"))
        self.assertFalse(is_source_file("README.md"))
        with self.assertRaises(TypeError):
            is_source_file(1)


if __name__ == "__main__":
    unittest.main()
