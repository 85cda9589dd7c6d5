# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains a front end that builds a SyntaxTree from Python source code.

Python has no macros, so calls stand in for macro invocations: the
rendered dotted name of the callee (e.g. `print` or `logging.info`) is the
path. Function definitions are function items, and classes are type
items. Every other node is transparent: the nodes found inside it are
attached to the nearest enclosing item or call, in source order.
"""

import ast
import logging
import os
from pathlib import Path

from treestats import util
from treestats.syntax import (
    ItemKind,
    ItemNode,
    MacroNode,
    RootNode,
    SyntaxTree,
    TreeFormatError,
)

log = logging.getLogger(__name__)


def _dotted_name(node: ast.expr) -> str | None:
    """
    Return the dotted name of a Name or of a chain of Attributes ending in
    a Name, or None for any other expression.
    """
    parts = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return ".".join(reversed(parts))


def _parameters(args: ast.arguments) -> list[str]:
    """
    Return the names of all declared parameters, in declaration order.
    """
    names = [a.arg for a in args.posonlyargs + args.args]
    if args.vararg:
        names.append("*" + args.vararg.arg)
    names += [a.arg for a in args.kwonlyargs]
    if args.kwarg:
        names.append("**" + args.kwarg.arg)
    return names


class _TreeBuilder(ast.NodeVisitor):
    def __init__(self, root: RootNode):
        self.parents = [root]

    def _nest(self, node, ast_node):
        self.parents[-1].add_child(node)
        self.parents.append(node)
        self.generic_visit(ast_node)
        self.parents.pop()

    def visit_FunctionDef(self, node):
        item = ItemNode(
            ItemKind.FUNCTION,
            name=node.name,
            params=_parameters(node.args),
        )
        self._nest(item, node)

    visit_AsyncFunctionDef = visit_FunctionDef

    def visit_ClassDef(self, node):
        self._nest(ItemNode(ItemKind.TYPE, name=node.name), node)

    def visit_Call(self, node):
        arguments = [ast.unparse(a) for a in node.args + node.keywords]
        invocation = MacroNode(_dotted_name(node.func), ", ".join(arguments))
        self._nest(invocation, node)


def parse_source(
    source: str | bytes,
    name: str = "unknown_crate",
    filename: str = "<unknown>",
) -> SyntaxTree:
    """
    Parameters
    ----------
    source: str | bytes
        Python source code.

    name: str, default: "unknown_crate"
        The name of the resulting tree.

    filename: str, default: "<unknown>"
        The file the source was read from, used in error messages.

    Returns
    -------
    SyntaxTree
        The tree for `source`.

    Raises
    ------
    TreeFormatError
        If `source` is not valid Python.
    """
    try:
        module = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise TreeFormatError(f"{filename}:{e.lineno}: {e.msg}")

    root = RootNode(name)
    _TreeBuilder(root).visit(module)
    return SyntaxTree(root)


def parse_file(filename: str | os.PathLike[str]) -> SyntaxTree:
    """
    Parameters
    ----------
    filename: str | os.PathLike[str]
        A Python source file.

    Returns
    -------
    SyntaxTree
        The tree for the file, named after the file.

    Raises
    ------
    TreeFormatError
        If the file is not valid Python.
    """
    path = Path(filename)
    with util.safe_open_read_nofollow(path, "rb") as f:
        source = f.read()
    log.info(f"Parsing Python source {path}.")
    return parse_source(source, name=path.stem, filename=str(path))
