# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging

from treestats.stats import StatsAccumulator
from treestats.syntax import ItemNode, MacroNode
from treestats.walkers.tree_walker import TreeWalker

log = logging.getLogger(__name__)


class StatsCollector(TreeWalker):
    """
    Specific TreeWalker that counts macro invocations matching a target
    name and records the number of parameters of every function.
    """

    def __init__(self, _tree, target: str = "println"):
        super().__init__(_tree)
        self.target = target
        self.stats = StatsAccumulator()

    def walk(self) -> StatsAccumulator:
        """
        Walk the tree, collecting statistics. Returns the accumulator.
        """
        super().walk()
        return self.stats

    def on_item(self, item: ItemNode):
        if item.item_kind is None:
            log.warning(
                f"Skipping malformed item '{item.name}' "
                + f"in {self.tree.name}: missing item kind.",
            )
            return

        # Other items are still walked, but have no arity.
        if not item.is_function():
            return

        if item.params is None:
            log.warning(
                f"Skipping malformed function item '{item.name}' "
                + f"in {self.tree.name}: missing parameter list.",
            )
            return

        self.stats.record_function(len(item.params))

    def on_macro_invocation(self, invocation: MacroNode):
        if invocation.missing:
            log.warning(
                f"Skipping malformed macro invocation in {self.tree.name}: "
                + "missing path.",
            )
            return

        if invocation.path is None:
            log.debug(f"Unresolved macro path in {self.tree.name}.")
            return

        if invocation.path == self.target:
            self.stats.record_macro_match()
