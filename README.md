# dungeonlab

Small data-structure exercises around a dungeon-crawling theme. There are no
dependencies beyond the standard library.

## Modules

- **`dungeonlab.cards`**: a `Card` with `RedCard` and `BlackCard` beneath it,
  and `Heart`, `Diamond`, `Club` and `Spade` beneath those. Every card has
  `value`, `color` and `suit` attributes and a `description()` method. Values
  2 to 10 print as numbers, 11 to 14 print as J, Q, K and A, and any other
  value prints as `?`.
- **`dungeonlab.stack`**: `Stack(capacity)` holds integers and doubles its
  capacity when a push finds it full. It has `push`, `pop`, `top`,
  `peek(n)` (`peek(0)` is the top), `max`, `min`, `is_empty`, `is_full`,
  `make_empty`, `capacity()`, `len()` and `render()`. `max()` and `min()` look
  at the values below the top, or at the single value when there is only one.
  Errors raise `StackEmpty`, `StackFull` or `StackInvalidPeek`.
- **`dungeonlab.possessions`**: `Item` (name, description, `ItemType.BATTLE`
  or `ItemType.TREASURE`, value, weight) and `Possessions`, a binary search
  tree of item copies ordered by name. It has `add_item`, `get_item`,
  `drop_item`, in-order iteration, `len()`, `in` by name and `format_tree()`.
  Equal names go to the right, so duplicates are kept.
- **`dungeonlab.character`**: `Character` holds ten attributes (name, class,
  alignment, hit points and six traits) and keeps battle and treasure items in
  separate `Possessions`. It has `add_item`, `get_item`, `drop_item` and
  `describe()`.
- **`dungeonlab.character_list`**: `CharacterList` keeps characters sorted by
  name and refuses most duplicate names. It has `add_character`,
  `delete_character`, `add_item`, `get_item`, `drop_item`, iteration and
  `describe()`.
- **`dungeonlab.hashing`**: the hash functions `hash_1`, `hash_2` and `hash_3`
  and the probe steps `probe_dec_1`, `probe_dec_2` and `probe_dec_3` work on
  four-character keys. `HashTable` has 100 slots. `insert()` returns the number
  of collisions it met, `occupancy_diagram()` draws `|` for a used slot and `-`
  for an empty one, and `run_experiment(lines)` reports every combination of
  hash and probe over the first 50 records.
- **`dungeonlab.game_graph`**: `GameGraph` loads 20 `Room`s from a layout file
  with `load_game(path)`. It moves between them with `do_command` and prints
  the links with `adjacency_text()`. Each room takes ten non-blank,
  non-comment lines: name, description, item, creature, then the room index
  reached going north, south, east, west, up and down. `-1` means there is no
  exit that way.
- **`dungeonlab.grading`**: `run_demo(confirm)` runs a scored walk through
  `Possessions` and `Character` and returns a `DemoResult` with `grade`,
  `max_grade` and `output`. `build_test_items`, `add_items_to_possessions` and
  `add_items_to_player` build and add the test items.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dungeonlab.cards import Heart, Spade
from dungeonlab.stack import Stack, StackEmpty

print(Heart(12).description())   # Value = Q Color: red  Suit: H
print(Spade(14).description())   # Value = A Color: black  Suit: S

stack = Stack(2)
for value in (5, 9, 3):
    stack.push(value)            # the third push doubles the capacity
print(stack.top(), len(stack), stack.capacity())   # 3 3 4

stack.make_empty()
try:
    stack.pop()
except StackEmpty:
    print("nothing to pop")
```

## Commands

- `dungeonlab-cards SCRIPT` runs a card test script. The first line is a
  header. After it come single-character operations:
  - `#` starts a comment.
  - `p` prints the current card.
  - `b` prints a bar.
  - `+` builds a card: `h`, `d`, `c`, `s`, `b`, `r` or `x` followed by a
    value, or `z` for a default `Card`.
  - `-` discards the current card.
- `dungeonlab-stack SCRIPT` runs a stack test script. The operations are:
  - `c N` constructs a stack.
  - `+ N` pushes and `-` pops.
  - `t` shows the top, `> ` the maximum and `<` the minimum.
  - `? N` peeks.
  - `f` and `e` test for full and empty.
  - `m` empties the stack and `p` prints it.
  - `s` shows the size and `z` the capacity.
  - `d` destroys the stack.
  - `#` starts a comment.
- `dungeonlab-hashing [FILE]` runs the hashing experiment on `P4DATA.TXT`, or
  on the named file. Each line of the file is a key and a one-character datum.
- `dungeonlab-game [FILE]` loads `gamelayout.txt`, or the named layout, and
  reads commands from the terminal. Commands are upper-cased before they are
  run. They are `GO NORTH`, `GO SOUTH`, `GO EAST`, `GO WEST`, `GO UP`,
  `GO DOWN` and `QUIT`.
- `dungeonlab-grading` runs the scored demonstration. It asks once whether the
  character printout looks correct.

## What it does not do

The adventure only moves between rooms. `TAKE` and `FIGHT` commands are
answered with "not yet implemented". Rooms name an item and a creature, but
these cannot be picked up or fought. Nothing is saved between runs. No layout
or key data file comes with the package, so you supply your own.