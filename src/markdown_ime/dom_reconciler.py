"""Greedy reconciliation of a rebuilt subtree onto a live node."""

from dataclasses import dataclass
import logging
from typing import List

from dom import DOMNode


@dataclass
class ReconcileResult:
    """Result of reconciling new content onto a live node."""

    preserved: int  # Live children kept in place of an equal new child
    created: int  # New children adopted from the scratch content
    dropped: int  # Live children with no equal new child


class DOMReconciler:
    """
    Applies new content to a live node while keeping unchanged children.

    Matching is a single left-to-right pass: each live child is compared against
    the remaining new children, in order, and the first structurally equal one is
    replaced by the live child.  The scan position only ever moves forward, so
    preserved nodes keep their relative order.  This is not a minimal diff: with
    duplicate equal siblings in a different order some nodes are rebuilt that a
    full tree diff would keep.
    """

    def __init__(self) -> None:
        """Initialize the reconciler."""
        self._logger = logging.getLogger("DOMReconciler")

    def reconcile(self, target: DOMNode, scratch: DOMNode) -> ReconcileResult:
        """
        Replace the children of target with the children of scratch.

        Any live child of target that is structurally equal to a scratch child
        (found by the forward scan) is kept, preserving its identity.  The scratch
        node is emptied by this call.

        Args:
            target: The live node to update
            scratch: A detached node holding the new content

        Returns:
            ReconcileResult with preservation statistics
        """
        new_children: List[DOMNode] = list(scratch.children)
        live_children: List[DOMNode] = list(target.children)

        scan_start = 0
        preserved = 0
        for live_child in live_children:
            for index in range(scan_start, len(new_children)):
                if new_children[index].is_equal_node(live_child):
                    new_children[index] = live_child
                    scan_start = index + 1
                    preserved += 1
                    break

        scratch.remove_children()
        target.remove_children()
        for child in new_children:
            target.add_child(child)

        result = ReconcileResult(
            preserved=preserved,
            created=len(new_children) - preserved,
            dropped=len(live_children) - preserved
        )

        if live_children and preserved == 0:
            self._logger.debug("no reusable children, replaced all %d", len(live_children))

        else:
            self._logger.debug(
                "reconciled: %d preserved, %d created, %d dropped",
                result.preserved, result.created, result.dropped
            )

        return result
