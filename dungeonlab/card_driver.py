"""Script-driven exerciser for the card classes."""

from __future__ import annotations

import re
import sys

from dungeonlab.cards import BlackCard, Card, Club, Diamond, Heart, RedCard, Spade

_BAR = "#################################################################"
_INT = re.compile(r"[+-]?\d+")
_CONSTRUCTORS: dict[str, type[Card]] = {
    "h": Heart,
    "d": Diamond,
    "c": Club,
    "s": Spade,
    "b": BlackCard,
    "r": RedCard,
    "x": Card,
}


class ScriptError(Exception):
    """Raised when a script cannot be run to the end; carries the output so far."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class _Reader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end < 0:
            result, self._pos = self._text[self._pos:], len(self._text)
        else:
            result, self._pos = self._text[self._pos:end], end + 1
        return result

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def char(self) -> str | None:
        self._skip_space()
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def integer(self) -> int | None:
        self._skip_space()
        match = _INT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())


def run_script(text: str) -> str:
    """Run a card test script and return everything it prints.

    The first line is a header echoed back; the rest is a stream of
    single-character operations. Raises ScriptError on an unknown
    operation or on printing when no card exists.
    """
    reader = _Reader(text)
    out: list[str] = ["\n", reader.line(), "\n\n"]
    card: Card | None = None

    while (op := reader.char()) is not None:
        if op == "#":
            out.append("#" + reader.line() + "\n")
        elif op == "p":
            if card is None:
                raise ScriptError("Error - no card to print", "".join(out))
            out.append(card.description() + "\n")
        elif op == "b":
            out.append(_BAR + "\n")
        elif op == "+":
            kind = reader.char()
            stop = False
            if kind in _CONSTRUCTORS:
                cls = _CONSTRUCTORS[kind]
                value = reader.integer()
                if value is None:
                    value, stop = 0, True
                out.append(f"{cls.__name__}({value}) -- ")
                card = cls(value)
            elif kind == "z":
                out.append("Card() -- ")
                card = Card()
            else:
                out.append("Error: Unknown Card Type")
                card = None
                stop = kind is None
            out.append("Successful\n")
            if stop:
                break
        elif op == "-":
            card = None
        else:
            raise ScriptError(
                f"Error - unrecognized operation '{op}'\nTerminating now...",
                "".join(out),
            )
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Run the script file named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage:\n  project02  <inputfile>")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Error - unable to open input file")
        return 1
    try:
        print(run_script(text), end="")
    except ScriptError as err:
        print(err.output, end="")
        print(err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())