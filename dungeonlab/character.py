"""A role-playing character with battle and treasure possessions."""

from __future__ import annotations

from dungeonlab.possessions import Item, ItemType, Possessions


class Character:
    """A character with six traits and two collections of items."""

    def __init__(
        self,
        name: str,
        char_class: int,
        alignment: int,
        hit_points: int,
        strength: int,
        dexterity: int,
        constitution: int,
        intelligence: int,
        wisdom: int,
        charisma: int,
    ) -> None:
        self.name = name
        self.char_class = char_class
        self.alignment = alignment
        self.hit_points = hit_points
        self.strength = strength
        self.dexterity = dexterity
        self.constitution = constitution
        self.intelligence = intelligence
        self.wisdom = wisdom
        self.charisma = charisma
        self.item_count = 0
        self.inventory_size = 10
        self.battle_items = Possessions()
        self.treasure_items = Possessions()

    def add_item(self, item: Item) -> bool:
        """File the item by its type; False if the type is neither battle nor treasure."""
        if item.item_type == ItemType.BATTLE:
            return self.battle_items.add_item(item)
        if item.item_type == ItemType.TREASURE:
            return self.treasure_items.add_item(item)
        return False

    def get_item(self, name: str) -> Item | None:
        """Find an item among battle items first, then treasure items."""
        found = self.battle_items.get_item(name)
        if found is not None:
            return found
        return self.treasure_items.get_item(name)

    def drop_item(self, name: str) -> Item | None:
        """Remove and return an item by name, or None if the character lacks it."""
        if self.battle_items.get_item(name) is not None:
            return self.battle_items.drop_item(name)
        return self.treasure_items.drop_item(name)

    def describe(self) -> str:
        """Return a printable description of the character and its items."""
        fields = [
            ("Name", self.name),
            ("Class", self.char_class),
            ("Alignment", self.alignment),
            ("Hitpoints", self.hit_points),
            ("Strength", self.strength),
            ("Dexterity", self.dexterity),
            ("Constitution", self.constitution),
            ("Intelligence", self.intelligence),
            ("Wisdom", self.wisdom),
            ("Charisma", self.charisma),
        ]
        header = "".join(f"Character's {label}: {value}\n" for label, value in fields)
        return header + self.battle_items.format_tree() + "\n" + self.treasure_items.format_tree()

    def __repr__(self) -> str:
        return f"Character({self.name!r})"