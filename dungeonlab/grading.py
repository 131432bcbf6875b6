"""A scored walk-through of the possessions tree and a character's items."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass

from dungeonlab.character import Character
from dungeonlab.possessions import Item, ItemType, Possessions

_INSERT_ORDER = ("4", "2", "6", "1", "3", "5", "7")
_RULE = "==========================================================================\n"
_KINDS = {
    ItemType.BATTLE: ("Battle", "battle", "B"),
    ItemType.TREASURE: ("Treasure", "treasure", "T"),
}
_POINTS_PER_ITEM = 0.5


def _initials(name: str) -> str:
    if not name:
        raise ValueError("a name is needed to build item names")
    _, sep, rest = name.partition("_")
    return name[0] + (rest[:1] if sep else "")


def build_test_items(name: str, item_type: ItemType) -> list[Item]:
    """Return seven items in the order 4, 2, 6, 1, 3, 5, 7.

    Added in that order they form a balanced tree rooted at item 4. Names
    are the owner's initials, then _BItem_ or _TItem_, then the number.
    """
    try:
        label, _, tag = _KINDS[ItemType(item_type)]
    except ValueError:
        raise ValueError(f"no test items of type {item_type!r}") from None
    initials = _initials(name)
    return [
        Item(
            name=f"{initials}_{tag}Item_{index}",
            description=f"{label} item {index} for {initials}",
            item_type=ItemType(item_type),
            value=float(position * 2),
            weight=float(position * 3),
        )
        for position, index in enumerate(_INSERT_ORDER, start=1)
    ]


def add_items_to_possessions(possessions: Possessions, name: str) -> float:
    """Add the battle test items for name and return the points earned."""
    return sum(
        _POINTS_PER_ITEM
        for item in build_test_items(name, ItemType.BATTLE)
        if possessions.add_item(item)
    )


def add_items_to_player(player: Character) -> str:
    """Give the player the battle and treasure test items; return the log."""
    lines: list[str] = []
    for item_type in (ItemType.BATTLE, ItemType.TREASURE):
        _, word, _ = _KINDS[item_type]
        lines.append(f"\nAdding {word} items for testing to {player.name}'s possessions.\n")
        for item in build_test_items(player.name, item_type):
            verdict = "Successfully added" if player.add_item(item) else "Failed to add"
            lines.append(f"{verdict} {word} item {item.name} to {player.name}'s list.\n")
    return "".join(lines)


@dataclass
class DemoResult:
    """The outcome of a demonstration run."""

    grade: float
    max_grade: float
    output: str


class _Grader:
    def __init__(self) -> None:
        self.grade = 0.0
        self.max_grade = 0.0
        self.out: list[str] = []

    def write(self, text: str) -> None:
        self.out.append(text)

    def text(self) -> str:
        return "".join(self.out)

    def score(self, passed: bool, points: float, success: str, failure: str) -> None:
        self.max_grade += points
        if passed:
            self.grade += points
            self.write(success)
        else:
            self.write(failure)
        self.tally()

    def tally(self) -> None:
        self.write(f"\t Grade = {self.grade:g} out of {self.max_grade:g}\n")


def _named(item: Item | None, name: str) -> bool:
    return item is not None and item.name == name


def _test_possessions(g: _Grader) -> None:
    g.write("\n=============== Creating an instance of Possessions for testing ======================\n")
    pos = Possessions()
    g.write("Possessions instance created\n\tAdding items to instance.\n")
    g.write("\nAdding battle items for testing to Rimbard's possessions.\n")
    g.grade += add_items_to_possessions(pos, "Rimbard")
    g.max_grade += 3.5
    g.write(f"\n====== After adding items to Possessions instance grade = "
            f"{g.grade:g} out of {g.max_grade:g}\n")
    g.write(_RULE + "                    Items in Possessions Instance \n")
    g.write(pos.format_tree() + _RULE)

    g.write("\n=============== Testing getItem  ======================\n")
    for name, points, where in (("R_BItem_7", 0.5, "Leaf node"),
                                ("R_BItem_6", 0.5, "Interior node"),
                                ("R_BItem_4", 1.0, "Root node")):
        g.score(_named(pos.get_item(name), name), points,
                f"\n\t Successfully found {name}. {where}.\n",
                f"\n\t*** Failed to find {name}. {where}.***\n")
    g.tally()
    g.score(pos.get_item("R_BItem_0") is None, 1.0,
            "\n\t Successfully reported not finding a non-existing node.\n",
            "\n\t*** Failed. Reported finding a non-existing node.***\n")

    g.score(pos.drop_item("R_BItem_8") is None, 0.5,
            "\n\t Successfully reported unable to delete a node \n\t\tknown to not be in the tree.\n",
            "\n*** Unsuccessfully reported deleting a nonexistant node. ***\n")

    def drop(name: str, points: float, case: str, check_name: bool = True) -> Item | None:
        item = pos.drop_item(name)
        passed = _named(item, name) if check_name else item is not None
        g.score(passed, points,
                f"\n\t Successfully removed {name}. \n\t\t{case}.\n",
                f"\n*** Failed to delete {name}. \n\t\t{case}.***\n")
        return item

    drop("R_BItem_7", 1.0, "Node not root with no children or only 1 on right")
    drop("R_BItem_2", 2.0, "Node not root with 2 children")
    drop("R_BItem_6", 1.0, "Node not root with one child on left", check_name=False)
    drop("R_BItem_1", 1.0, "Node not root with 1 child on right")
    held = drop("R_BItem_4", 2.0, "Root node with 2 children")
    drop("R_BItem_3", 1.0, "Root node with 1 child on right")
    if held is not None:
        pos.add_item(held)
    drop("R_BItem_5", 1.0, "Root node, one child on left")
    drop("R_BItem_4", 2.0, "Root node, last in tree")
    g.write(f"\n====== After dropping items grade = {g.grade:g} out of {g.max_grade:g}\n")
    g.write("\nDone testing delete...\n" + _RULE + pos.format_tree() + _RULE)


def _test_character(g: _Grader, confirm: Callable[[str], bool]) -> None:
    g.write("\n=============== Creating a character for testing ======================\n")
    player = Character("Rimbard", 5, 1, 31, 11, 15, 14, 18, 18, 14)
    g.write("Rimbard created\n\tAdding items to Rimbard's item lists.\n")
    g.write(add_items_to_player(player))
    g.write(_RULE + player.describe() + _RULE)
    g.write("\nDoes the printout look correct? (press Y or N)\n")
    if confirm(g.text()):
        g.grade += 2.0
    g.max_grade += 2.0
    g.write(f"\n====== After adding items grade = {g.grade:g} out of {g.max_grade:g}\n")

    for name, kind in (("R_BItem_7", "Battle"), ("R_TItem_6", "Treasure")):
        g.score(_named(player.get_item(name), name), 0.5,
                f"\n\t Successfully got back a {kind} item {name}. \n",
                f"\n\t*** Failed to get {kind} item {name} returned by the Character.***\n")

    g.write("\nTesting dropping items from the Character's lists.\n")
    for name, kind, check_name in (("R_BItem_7", "Battle", True),
                                   ("R_BItem_6", "Battle", False),
                                   ("R_TItem_6", "Treasure", True),
                                   ("R_TItem_4", "Treasure", False)):
        item = player.drop_item(name)
        passed = _named(item, name) if check_name else item is not None
        g.score(passed, 1.0,
                f"\n\t Player successfully dropped {kind} item {name}. \n",
                f"\n*** Player failed to drop {kind} item {name}. \n***\n")


def run_demo(confirm: Callable[[str], bool]) -> DemoResult:
    """Run the scored demonstration.

    confirm is called once with the output so far, ending in the
    character's printout and a question; a true answer earns two points.
    """
    g = _Grader()
    _test_possessions(g)
    _test_character(g, confirm)
    g.write("\n===============================================================================\n")
    g.write(f"\nFinal grade = {g.grade:g}\n")
    return DemoResult(g.grade, g.max_grade, g.text())


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration, asking on the terminal whether the printout is right."""
    shown = 0

    def ask(text: str) -> bool:
        nonlocal shown
        print(text, end="")
        shown = len(text)
        try:
            answer = input()
        except EOFError:
            return False
        return answer[:1] in ("Y", "y")

    result = run_demo(ask)
    print(result.output[shown:], end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())