"""A roster of characters kept in name order."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator

from dungeonlab.character import Character
from dungeonlab.possessions import Item


class CharacterList:
    """Characters sorted by name in ascending order.

    A character whose name matches one already held is refused, except
    that a name equal to the first character's is accepted and placed
    directly after it.
    """

    def __init__(self) -> None:
        self._characters: list[Character] = []

    def add_character(self, character: Character) -> bool:
        """Insert the character in name order; False if the name is a duplicate."""
        roster = self._characters
        if not roster or character.name < roster[0].name:
            roster.insert(0, character)
            return True
        position = bisect_left(roster, character.name, lo=1, key=lambda c: c.name)
        if position < len(roster) and roster[position].name == character.name:
            return False
        roster.insert(position, character)
        return True

    def _find(self, name: str) -> Character | None:
        return next((c for c in self._characters if c.name == name), None)

    def delete_character(self, name: str) -> Character | None:
        """Remove and return the first character with this name, or None."""
        for position, character in enumerate(self._characters):
            if character.name == name:
                return self._characters.pop(position)
        return None

    def add_item(self, character_name: str, item: Item) -> bool:
        """Give an item to the named character.

        False if there is no such character or its inventory is full.
        """
        character = self._find(character_name)
        if character is None or character.item_count == character.inventory_size:
            return False
        character.add_item(item)
        return True

    def get_item(self, character_name: str, item_name: str) -> Item | None:
        """Return the named character's item, or None."""
        character = self._find(character_name)
        if character is None:
            return None
        return character.get_item(item_name)

    def drop_item(self, character_name: str, item_name: str) -> Item | None:
        """Remove the named character's item and return it, or None."""
        character = self._find(character_name)
        if character is None:
            return None
        item = character.get_item(item_name)
        character.drop_item(item_name)
        return item

    def __iter__(self) -> Iterator[Character]:
        """Yield the characters in name order."""
        return iter(list(self._characters))

    def __len__(self) -> int:
        return len(self._characters)

    def describe(self) -> str:
        """Return a printable description of every character."""
        if not self._characters:
            return "No Characters Available.\n"
        return "".join(character.describe() for character in self._characters)