# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging
import sys
from typing import TextIO

from treestats.syntax import MacroNode, NodeKind
from treestats.walkers.tree_walker import TreeWalker

log = logging.getLogger(__name__)


class TreePrinter(TreeWalker):
    """
    Specific TreeWalker that prints the nodes for the tree
    (with appropriate indentation), marking the macro invocations that
    match the target name.
    """

    def __init__(self, _tree, target: str = "println"):
        super().__init__(_tree)
        self.target = target

    def walk(self, stream: TextIO = sys.stdout):
        """
        Walk the tree, printing each node.
        """
        print(f"{self.tree.root}", file=stream)
        for child in self.tree.root.children:
            self.__print_nodes(child, 1, stream)

    def __print_nodes(self, node, level, stream):
        """
        Print this specific node, then descend into its children nodes.
        """
        # Other nodes carry no information of their own.
        if node.kind == NodeKind.OTHER and not str(node):
            for child in node.children:
                self.__print_nodes(child, level, stream)
            return

        spacing = "  " * level
        marker = ""
        if isinstance(node, MacroNode) and node.path == self.target:
            marker = " -- Match"
        print(f"{spacing}{node}{marker}", file=stream)

        for child in node.children:
            self.__print_nodes(child, level + 1, stream)
