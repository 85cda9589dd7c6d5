# Copyright (C) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging

from treestats.syntax import ItemNode, MacroNode, Node, NodeKind

log = logging.getLogger(__name__)


class TreeWalker:
    """
    Generic tree walker class.

    Visits every node of the tree in pre-order and dispatches on the
    node's kind to one of the hooks below. Subclasses override the hooks
    they are interested in. The walker always descends into children.
    """

    def __init__(self, _tree):
        self.tree = _tree
        self._hooks = {
            NodeKind.ROOT: None,
            NodeKind.ITEM: self.on_item,
            NodeKind.MACRO: self.on_macro_invocation,
            NodeKind.OTHER: None,
        }

    def walk(self):
        """
        Walk the tree, calling the hook for each node.
        """
        for node in self.tree.walk():
            self._dispatch(node)

    def _dispatch(self, node: Node):
        hook = self._hooks[node.kind]
        if hook is not None:
            hook(node)

    def on_item(self, item: ItemNode):
        """
        Called for every item, whether or not it is a function.
        """

    def on_macro_invocation(self, invocation: MacroNode):
        """
        Called for every macro invocation, wherever it appears.
        """
