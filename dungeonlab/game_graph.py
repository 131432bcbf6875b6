"""A dungeon of connected rooms loaded from a layout file, and a command loop."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

NUM_ROOMS = 20
DATA_FILE = "gamelayout.txt"
MAX_LINE = 127
NO_EXIT = -1

_NO_LINK = "-"
_ATOI = re.compile(r"\s*([+-]?\d+)")
_CANNOT_MOVE = "You cannot move in that direction. Try another input.\n"
_NOT_IMPLEMENTED = "This is not yet implemented. Please try another input.\n"
_WRONG_INPUT = "Wrong Input. Please try again.\n"


class Direction(Enum):
    """A way out of a room, in the order the layout file lists them."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    UP = "U"
    DOWN = "D"


_DOOR_PHRASES = {
    Direction.NORTH: "There is a door on the North wall.",
    Direction.SOUTH: "There is a door on the South wall.",
    Direction.EAST: "There is a door on the East wall.",
    Direction.WEST: "There is a door on the West wall.",
    Direction.UP: "There is a stairway going up.",
    Direction.DOWN: "There is a stairway going down.",
}

_MOVES = {f"GO {direction.name}": direction for direction in Direction}


@dataclass
class Room:
    """A room's text and the directions in which it has an exit."""

    name: str = ""
    description: str = ""
    item: str = ""
    creature: str = ""
    doors: frozenset[Direction] = frozenset()


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: no digits means 0."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _data_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield non-blank, non-comment lines; stop at the first over-long line."""
    for raw in lines:
        line = raw.rstrip("\n")
        if len(line) > MAX_LINE:
            return
        if not line or line.startswith("#"):
            continue
        yield line


def _empty_matrix() -> list[list[str]]:
    return [[_NO_LINK] * NUM_ROOMS for _ in range(NUM_ROOMS)]


class GameGraph:
    """Twenty rooms joined by an adjacency matrix of direction letters."""

    def __init__(self) -> None:
        self._matrix = _empty_matrix()
        self.rooms = [Room() for _ in range(NUM_ROOMS)]
        self.location = 0
        self.finished = False

    def load_game(self, path: str) -> str:
        """Read a layout file and return the description of the current room.

        Each room takes ten data lines: name, description, item, creature,
        then the room index reached going north, south, east, west, up and
        down, with -1 for no exit. Missing lines read as empty. Raises
        OSError if the file cannot be opened and ValueError for a link
        outside the dungeon.
        """
        matrix = _empty_matrix()
        rooms: list[Room] = []
        with open(path, encoding="utf-8") as handle:
            lines = _data_lines(handle)
            for index in range(NUM_ROOMS):
                name, description, item, creature = (next(lines, "") for _ in range(4))
                doors: set[Direction] = set()
                for direction in Direction:
                    link = _atoi(next(lines, ""))
                    if link == NO_EXIT:
                        continue
                    if not 0 <= link < NUM_ROOMS:
                        raise ValueError(
                            f"room {index} links {direction.name.lower()} to "
                            f"nonexistent room {link}"
                        )
                    doors.add(direction)
                    matrix[index][link] = direction.value
                rooms.append(Room(name, description, item, creature, frozenset(doors)))
        self._matrix = matrix
        self.rooms = rooms
        return self.describe_room(self.location)

    def describe_room(self, index: int) -> str:
        """Return the text describing a room and its exits."""
        if not 0 <= index < NUM_ROOMS:
            raise IndexError(f"no room {index}")
        room = self.rooms[index]
        parts = [
            f"{room.name}\n",
            f"{room.description}\n",
            f"There is a {room.item} in the room.\n",
            f"There is a {room.creature} in the room.\n",
        ]
        parts.extend(
            _DOOR_PHRASES[direction] + "\n" for direction in Direction if direction in room.doors
        )
        parts.append("\n")
        return "".join(parts)

    def _move(self, direction: Direction) -> str:
        if direction not in self.rooms[self.location].doors:
            return _CANNOT_MOVE
        row = self._matrix[self.location]
        target = next(
            (i for i, cell in enumerate(row) if cell == direction.value), None
        )
        if target is None:
            return ""
        self.location = target
        return f"Going {direction.name}. New Room is:\n\n" + self.describe_room(target)

    def do_command(self, command: str) -> str:
        """Carry out one command and return the text it produces.

        QUIT sets finished; GO NORTH, GO SOUTH, GO EAST, GO WEST, GO UP and
        GO DOWN move between rooms.
        """
        if command == "QUIT":
            self.finished = True
            return "Game is Closing\n"
        direction = _MOVES.get(command)
        if direction is not None:
            return self._move(direction)
        if command.startswith(("TAKE", "FIGHT")):
            return _NOT_IMPLEMENTED
        return _WRONG_INPUT

    def adjacency_text(self) -> str:
        """Return the adjacency matrix, one row of direction letters per room."""
        rows = ("".join(cell + " " for cell in row) + "\n" for row in self._matrix)
        return "Adjancecy Matrix for the Rooms. \n" + "".join(rows)


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


def main(argv: list[str] | None = None) -> int:
    """Load a layout file (gamelayout.txt unless one is named) and play."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DATA_FILE
    game = GameGraph()

    print("This is a Dungeons and Dragons style role ")
    print("playing game.  At the prompt enter enter your commands.\n")

    try:
        print(game.load_game(path), end="")
    except OSError:
        print(f"Unable to open game file {path}.")
        return 1
    except ValueError as err:
        print(err)
        return 1

    while not game.finished:
        print("\n\nWhat do you want to do?  ", end="")
        try:
            command = input()
        except EOFError:
            break
        print(command)
        print(game.do_command(_ascii_upper(command)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())