"""
State machine turning a drag gesture (start, over, end) into a single reorder
"""

import enum
import logging
from typing import Optional

from promptdeck.services.collection_utils import T, find_index, move_item

logger = logging.getLogger(__name__)


class DragState(str, enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragReorderTracker:
    """
    Tracks one drag gesture over an id-addressed collection.

    The collection is only reordered when a gesture that was started ends over a
    known drop target. A cancelled or interrupted gesture, or an end event without a
    matching start, leaves the order untouched. Every ``end`` and ``cancel`` returns
    the tracker to IDLE.
    """

    def __init__(self):
        self.state: DragState = DragState.IDLE
        self.origin_id: Optional[str] = None
        self.target_id: Optional[str] = None

    def start(self, origin_id: str) -> None:
        self.state = DragState.DRAGGING
        self.origin_id = origin_id
        self.target_id = None

    def over(self, target_id: Optional[str]) -> None:
        """Record the entry currently under the pointer (None when over nothing)"""
        if self.state is not DragState.DRAGGING:
            return
        self.target_id = target_id

    def cancel(self) -> None:
        self._reset()

    def end(self, items: list[T], target_id: Optional[str] = None) -> list[T]:
        """
        Finish the gesture and apply the move it describes.

        Args:
            items (list[T]): Collection the gesture happened on
            target_id (str, optional): Drop target reported by the end event; falls back
                to the last target recorded by ``over``

        Returns:
            list[T]: Reordered copy, or ``items`` itself when the gesture does not move anything
        """
        if self.state is not DragState.DRAGGING:
            logger.debug("Drag end without a matching start, ignoring")
            self._reset()
            return items

        origin_id = self.origin_id
        target_id = target_id if target_id is not None else self.target_id
        self._reset()

        if origin_id is None or target_id is None or origin_id == target_id:
            return items
        from_index = find_index(items, origin_id)
        to_index = find_index(items, target_id)
        if from_index is None or to_index is None:
            logger.debug(
                "Drag from %s to %s references unknown entries", origin_id, target_id
            )
            return items
        return move_item(items, from_index, to_index)

    def _reset(self) -> None:
        self.state = DragState.IDLE
        self.origin_id = None
        self.target_id = None
