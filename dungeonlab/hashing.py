"""Four-letter key hashing with double-hash probing, and a collision experiment."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

TABLE_SIZE = 100
KEY_SIZE = 4
RECORDS_PER_TEST = 50
DATA_FILE = "P4DATA.TXT"

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _check(key: str) -> str:
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} characters: {key!r}")
    return key


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def _letter(c: str) -> int:
    return ord(c) - ord("A") + 1


def hash_1(key: str) -> int:
    """Treat the key as a base-57 number of letter positions."""
    _check(key)
    index = sum(_letter(c) * 57 ** (KEY_SIZE - 1 - i) for i, c in enumerate(key))
    return _c_mod(index, TABLE_SIZE)


def hash_2(key: str) -> int:
    """Fold the key as the sum of two products of letter positions."""
    _check(key)
    index = _letter(key[0]) * _letter(key[1]) + _letter(key[2]) * _letter(key[3])
    return _c_mod(index, TABLE_SIZE)


def hash_3(key: str) -> int:
    """Sum squared character codes mixed with the middle letters."""
    _check(key)
    middle = _letter(key[1]) * _letter(key[2])
    index = sum((ord(c) ** 2 + middle) * 57 for c in key)
    return _c_mod(index, TABLE_SIZE)


def probe_dec_1(key: str) -> int:
    """Linear probing: always step by one."""
    _check(key)
    return 1


def probe_dec_2(key: str) -> int:
    """A 32-bit multiplicative string hash, giving a step from 1 to 100."""
    _check(key)
    a, b, index = 378551, 63689, 0
    for c in key:
        index = (index * a + ord(c)) & _MASK32
        a = (a * b) & _MASK32
    return index % TABLE_SIZE + 1


def probe_dec_3(key: str) -> int:
    """The djb2 string hash, giving a step from 0 to 99."""
    _check(key)
    index = 5381
    for c in key:
        index = (index * 33 + ord(c)) & _MASK64
    return index % TABLE_SIZE


_HASHES: tuple[Callable[[str], int], ...] = (hash_1, hash_2, hash_3)
_PROBES: tuple[Callable[[str], int], ...] = (probe_dec_1, probe_dec_2, probe_dec_3)


class HashTable:
    """A fixed table of 100 slots filled by open addressing with double hashing."""

    def __init__(self) -> None:
        self._slots: list[tuple[str, str] | None] = [None] * TABLE_SIZE

    @property
    def slots(self) -> tuple[tuple[str, str] | None, ...]:
        """The (key, data) pair in each slot, or None where the slot is empty."""
        return tuple(self._slots)

    def insert(self, key: str, data: str, hash_num: int, probe_num: int) -> int:
        """Store key and data and return the number of collisions met.

        hash_num and probe_num (each 0, 1 or 2) choose the home hash and the
        probe step. Raises ValueError for a bad key or choice, and
        RuntimeError when probing can reach no empty slot.
        """
        if not (0 <= hash_num < len(_HASHES) and 0 <= probe_num < len(_PROBES)):
            raise ValueError(f"no hash combination ({hash_num}, {probe_num})")
        index = _HASHES[hash_num](key)
        step = _PROBES[probe_num](key)
        if not 0 <= index < TABLE_SIZE:
            raise ValueError(f"key {key!r} hashes outside the table")
        collisions = 0
        visited: set[int] = set()
        while self._slots[index] is not None:
            visited.add(index)
            collisions += 1
            index = (index - step) % TABLE_SIZE
            if index in visited:
                raise RuntimeError(f"no empty slot reachable for key {key!r}")
        self._slots[index] = (key, data)
        return collisions

    def clear(self) -> None:
        """Empty every slot."""
        self._slots = [None] * TABLE_SIZE

    def occupancy_diagram(self) -> str:
        """One character per slot: '|' where occupied, '-' where empty."""
        return "".join("-" if slot is None else "|" for slot in self._slots)

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)


def _parse(line: str) -> tuple[str, str]:
    parts = line.split(None, 1)
    if len(parts) != 2 or not parts[1].strip():
        raise ValueError(f"malformed record: {line!r}")
    return parts[0], parts[1].lstrip()[0]


def run_experiment(lines: Iterable[str]) -> str:
    """Insert the first 50 records with every hash combination and report.

    Each record is a key and a one-character datum separated by space.
    """
    records = [_parse(line) for line in list(lines)[:RECORDS_PER_TEST]]
    if len(records) < RECORDS_PER_TEST:
        raise ValueError(f"need {RECORDS_PER_TEST} records, got {len(records)}")
    table = HashTable()
    out: list[str] = []
    for hash_num in range(len(_HASHES)):
        for probe_num in range(len(_PROBES)):
            count = sum(
                table.insert(key, data, hash_num, probe_num) for key, data in records
            )
            out.append(
                f"Testing hash function {hash_num + 1} using double hash {probe_num + 1}.\n"
                f"Total collisions = {count + 1}.\n"
                f"{table.occupancy_diagram()}\n\n"
            )
            table.clear()
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Run the experiment on the data file (P4DATA.TXT unless one is named)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DATA_FILE
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print("Unable to open file.")
        return 0
    try:
        print(run_experiment(lines), end="")
    except (ValueError, RuntimeError) as err:
        print(err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())