# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains classes that define:
- The kinds of node found in a syntax tree
- Nodes of the tree (items, macro invocations and everything else)
- The tree itself, and its pre-order traversal
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum, auto

log = logging.getLogger(__name__)


class TreeFormatError(ValueError):
    """
    Represents a failure to build a syntax tree from some input.
    """


class NodeKind(Enum):
    """
    The tag used to dispatch on a node. Every Node has exactly one kind.
    """

    ROOT = auto()
    ITEM = auto()
    MACRO = auto()
    OTHER = auto()


class ItemKind(Enum):
    """
    The sub-kind of an ItemNode.
    """

    FUNCTION = "fn"
    MODULE = "mod"
    TYPE = "type"
    CONST = "const"
    IMPL = "impl"
    OTHER = "other"

    @classmethod
    def from_string(cls, name: str) -> "ItemKind":
        """
        Map the spelling of an item keyword to an ItemKind.
        Keywords that are not recognized map to OTHER.
        """
        if name in ["fn", "function", "def"]:
            return cls.FUNCTION

        if name in ["mod", "module"]:
            return cls.MODULE

        if name in [
            "struct",
            "enum",
            "union",
            "trait",
            "type",
            "class",
        ]:
            return cls.TYPE

        if name in ["const", "static"]:
            return cls.CONST

        if name == "impl":
            return cls.IMPL

        return cls.OTHER


class Node:
    """
    Base class for all other Node types.
    Contains an ordered list of children.
    """

    kind = NodeKind.OTHER

    def __init__(self):
        self.children = []

    def add_child(self, child: "Node"):
        self.children.append(child)

    def add_children(self, children: Iterable["Node"]):
        for child in children:
            self.add_child(child)


class RootNode(Node):
    """
    The root of a tree. Its children are the top-level nodes, in order.
    """

    kind = NodeKind.ROOT

    def __init__(self, name: str = "unknown_crate"):
        super().__init__()
        self.name = name

    def __repr__(self):
        return f"RootNode(name={self.name!r})"

    def __str__(self):
        return f"Crate {self.name}"


class ItemNode(Node):
    """
    A declaration: a function, type, constant, module, etc.

    Function items carry the ordered sequence of their parameter
    declarations in `params`. A function item whose `params` is None is
    malformed; every other kind of item ignores `params`. An item whose
    `item_kind` is None is malformed too: the input did not say what kind
    of item it was.
    """

    kind = NodeKind.ITEM

    def __init__(
        self,
        item_kind: ItemKind | None,
        name: str | None = None,
        params: Sequence[str] | None = None,
    ):
        super().__init__()
        self.item_kind = item_kind
        self.name = name
        self.params = None if params is None else tuple(params)

    def is_function(self) -> bool:
        return self.item_kind == ItemKind.FUNCTION

    def __repr__(self):
        item_kind = getattr(self.item_kind, "value", None)
        return (
            f"ItemNode(item_kind={item_kind!r},"
            + f"name={self.name!r},params={self.params!r})"
        )

    def __str__(self):
        if self.is_function():
            if self.params is None:
                return f"fn {self.name}(?)"
            return f"fn {self.name}({', '.join(self.params)})"
        if self.item_kind is None:
            return f"item {self.name}"
        return f"{self.item_kind.value} {self.name}"


class MacroNode(Node):
    """
    A macro invocation. `path` is the rendered dotted path of the macro,
    or None if the front end could not resolve it. `tokens` holds the
    unevaluated arguments. Nodes parsed from the arguments (if any) are
    children of this node.
    """

    kind = NodeKind.MACRO

    def __init__(self, path: str | None, tokens: str = "", *, missing=False):
        super().__init__()
        self.path = path
        self.tokens = tokens
        # True when the input did not have a path field at all.
        self.missing = missing

    def __repr__(self):
        return f"MacroNode(path={self.path!r},tokens={self.tokens!r})"

    def __str__(self):
        path = "<unresolved>" if self.path is None else self.path
        return f"{path}!({self.tokens})"


class OtherNode(Node):
    """
    Any other node (statements, expressions, blocks). These only matter
    because of what they contain.
    """

    kind = NodeKind.OTHER

    def __init__(self, label: str = ""):
        super().__init__()
        self.label = label

    def __repr__(self):
        return f"OtherNode(label={self.label!r})"

    def __str__(self):
        return self.label


class SyntaxTree:
    """
    A read-only view of a parsed source file: a root node and,
    beneath it, the ordered forest of top-level nodes.
    """

    def __init__(self, root: RootNode | None = None):
        if root is None:
            root = RootNode()
        self.root = root

    @property
    def name(self) -> str:
        return self.root.name

    def top_level(self) -> list[Node]:
        """
        Return the top-level nodes of the tree, in source order.
        """
        return list(self.root.children)

    def walk(self) -> Iterator[Node]:
        """
        Yield all descendants of the root in pre-order, parent before
        children and children in source order. The root itself is not
        yielded.

        Traversal uses an explicit stack, so depth is not bounded by the
        interpreter's recursion limit.
        """
        stack = list(reversed(self.root.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
