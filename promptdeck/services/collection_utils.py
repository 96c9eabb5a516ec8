"""
Utils for ordered, id-addressed collections
"""

import uuid
from typing import Callable, Optional, Protocol, Sequence, TypeVar


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)


def generate_id(prefix: str) -> str:
    """
    Generate a new identifier such as ``var-3f2a...``.

    Args:
        prefix (str): Entity prefix (var, prompt, set, project)

    Returns:
        str: The identifier
    """
    return f"{prefix}-{uuid.uuid4().hex}"


def find_index(items: Sequence[T], item_id: str) -> Optional[int]:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None


def move_item(items: list[T], from_index: int, to_index: int) -> list[T]:
    """
    Move one entry to a new position, shifting the entries in between.

    Indices outside ``[0, len(items))`` leave the collection untouched and the very
    same list is returned.

    Args:
        items (list[T]): Collection to reorder
        from_index (int): Current position of the entry
        to_index (int): Position the entry ends up at

    Returns:
        list[T]: A reordered copy, or ``items`` itself when nothing moves
    """
    size = len(items)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return items
    if from_index == to_index:
        return items
    moved = list(items)
    item = moved.pop(from_index)
    moved.insert(to_index, item)
    return moved


def replace_item(items: list[T], item_id: str, update: Callable[[T], T]) -> list[T]:
    """
    Replace the entry matching ``item_id`` with ``update(entry)``.

    Returns ``items`` itself when the id is unknown or the update is a no-op.
    """
    index = find_index(items, item_id)
    if index is None:
        return items
    updated = update(items[index])
    if updated is items[index]:
        return items
    replaced = list(items)
    replaced[index] = updated
    return replaced


def remove_item(items: list[T], item_id: str) -> list[T]:
    index = find_index(items, item_id)
    if index is None:
        return items
    return items[:index] + items[index + 1 :]
