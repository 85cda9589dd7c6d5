# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions for building a SyntaxTree from a tree document: a
JSON or YAML description of a parsed source file, as emitted by an
external compiler front end.
"""

import logging
import os
from pathlib import Path

from treestats import util
from treestats.syntax import (
    ItemKind,
    ItemNode,
    MacroNode,
    Node,
    OtherNode,
    RootNode,
    SyntaxTree,
    TreeFormatError,
)

log = logging.getLogger(__name__)


def _node_from_json(instance: dict) -> Node:
    """
    Build a single node from its JSON description. Children are not
    built here.

    Raises
    ------
    ValueError
        If the JSON fails validation.
    """
    util._validate_json(instance, "tree-node")

    kind = instance["kind"]
    if kind == "item":
        item_kind = None
        if "item" in instance:
            item_kind = ItemKind.from_string(instance["item"])
        node = ItemNode(
            item_kind,
            name=instance.get("name", None),
            params=instance.get("params", None),
        )
    elif kind == "macro":
        node = MacroNode(
            instance.get("path", None),
            instance.get("tokens", ""),
            missing="path" not in instance,
        )
    elif kind == "other":
        node = OtherNode(instance.get("label", ""))
    else:
        raise TreeFormatError(f"Unrecognized node kind '{kind}'.")
    return node


def tree_from_json(instance: dict, name: str | None = None) -> SyntaxTree:
    """
    Parameters
    ----------
    instance: dict
        A JSON object describing a syntax tree.

    name: str, optional
        The name to use if the document does not name the tree.

    Returns
    -------
    SyntaxTree
        The tree described by `instance`.

    Raises
    ------
    ValueError
        If the JSON fails validation.
    """
    util._validate_json(instance, "tree")

    if name is None:
        name = "unknown_crate"
    root = RootNode(instance.get("name", name))

    # Nodes are built with an explicit stack, so document depth is not
    # bounded by the interpreter's recursion limit.
    stack = [(root, node) for node in reversed(instance["nodes"])]
    while stack:
        parent, child = stack.pop()
        node = _node_from_json(child)
        parent.add_child(node)
        stack.extend(
            (node, grandchild)
            for grandchild in reversed(child.get("children", []))
        )
    return SyntaxTree(root)


def load_tree(filename: str | os.PathLike[str]) -> SyntaxTree:
    """
    Parameters
    ----------
    filename: str | os.PathLike[str]
        A JSON (.json) or YAML (.yaml, .yml) tree document.

    Returns
    -------
    SyntaxTree
        The tree described by the document. Documents without a name are
        named after the file.

    Raises
    ------
    ValueError
        If the file has an unsupported extension, or fails validation.

    FileNotFoundError
        If the file with the specified name does not exist.
    """
    path = Path(filename)
    if path.suffix not in [".json", ".yaml", ".yml"]:
        raise ValueError(f"{path} is not a tree document.")

    with util.safe_open_read_nofollow(path, "r") as f:
        if path.suffix == ".json":
            instance = util._load_json(f, schema_name="tree")
        else:
            instance = util._load_yaml(f, schema_name="tree")

    log.info(f"Loaded tree document {path}.")
    return tree_from_json(instance, name=path.stem)
