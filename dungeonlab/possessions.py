"""Items and a binary search tree of possessions keyed by item name."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

_RULE = "-" * 60


class ItemType(IntEnum):
    """What an item is carried for."""

    BATTLE = 1
    TREASURE = 2


@dataclass
class Item:
    """Something a character can carry."""

    name: str
    description: str = ""
    item_type: int = ItemType.BATTLE
    value: float = 0.0
    weight: float = 0.0


@dataclass
class _Node:
    item: Item
    left: _Node | None = None
    right: _Node | None = None


def _format_item(item: Item) -> str:
    return (
        f"Item Name: {item.name}\n"
        f"{_RULE}\n"
        f"Decription: {item.description}\n"
        f"Value: {item.value:g}GP\t\tWeight: {item.weight:g}lbs\n"
        f"{_RULE}\n"
        " \n"
    )


class Possessions:
    """A collection of items kept in name order.

    Items are stored as copies. Names that compare equal go to the right,
    so duplicates are allowed.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._count = 0

    def add_item(self, item: Item) -> bool:
        """Store a copy of item; always succeeds."""
        new = _Node(dataclasses.replace(item))
        self._count += 1
        if self._root is None:
            self._root = new
            return True
        node = self._root
        while True:
            if item.name < node.item.name:
                if node.left is None:
                    node.left = new
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return True
                node = node.right

    def get_item(self, name: str) -> Item | None:
        """Return the stored item with this name, or None."""
        node = self._root
        while node is not None:
            if name == node.item.name:
                return node.item
            node = node.left if name < node.item.name else node.right
        return None

    def _relink(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def drop_item(self, name: str | None) -> Item | None:
        """Remove the item with this name and return it, or None if absent."""
        if name is None:
            return None
        parent: _Node | None = None
        node = self._root
        while node is not None and node.item.name != name:
            parent = node
            node = node.left if name < node.item.name else node.right
        if node is None:
            return None

        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            self._relink(parent, node, successor)

        self._count -= 1
        return node.item

    def __iter__(self) -> Iterator[Item]:
        """Yield the items in ascending name order."""
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.item
            node = node.right

    def __len__(self) -> int:
        return self._count

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_item(name) is not None

    def format_tree(self) -> str:
        """Return a printable listing of every item in name order."""
        return "".join(_format_item(item) for item in self)