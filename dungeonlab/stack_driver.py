"""Script-driven exerciser for the integer stack."""

from __future__ import annotations

import sys

from dungeonlab.card_driver import _Reader
from dungeonlab.stack import Stack, StackEmpty, StackFull, StackInvalidPeek


class ScriptError(Exception):
    """Raised when a script cannot be run to the end; carries the output so far."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


def _require(stack: Stack | None, out: list[str]) -> Stack:
    if stack is None:
        raise ScriptError("Error - no stack has been constructed", "".join(out))
    return stack


def _read_value(reader: _Reader) -> tuple[int, bool]:
    """Read an integer; on failure return 0 and signal that reading must stop."""
    value = reader.integer()
    if value is None:
        return 0, True
    return value, False


def run_script(text: str) -> str:
    """Run a stack test script and return everything it prints.

    The first line is a header echoed back after '#'; the rest is a stream
    of single-character operations, some followed by an integer. Raises
    ScriptError on an unknown operation, on a failed construction, or on
    using the stack before one exists.
    """
    reader = _Reader(text)
    out: list[str] = ["\n#", reader.line(), "\n"]
    stack: Stack | None = None

    while (op := reader.char()) is not None:
        stop = False
        if op == "#":
            out.append("#" + reader.line() + "\n")
        elif op == "c":
            value, stop = _read_value(reader)
            out.append(f"\nStack({value})")
            try:
                stack = Stack(value)
            except ValueError:
                raise ScriptError("Failed : Terminating now...", "".join(out)) from None
            out.append(" -- Successful\n")
        elif op == "+":
            value, stop = _read_value(reader)
            current = _require(stack, out)
            out.append(f"Push({value})")
            try:
                current.push(value)
                out.append(" -- successful")
            except StackFull:
                out.append(" -- Failed Full Stack")
            out.append("\n")
        elif op == "-":
            current = _require(stack, out)
            out.append("Pop() -- ")
            try:
                current.pop()
                out.append("successful")
            except StackEmpty:
                out.append("Failed Empty Stack")
            out.append("\n")
        elif op == "f":
            current = _require(stack, out)
            out.append(f"IsFull() -- {'true' if current.is_full() else 'false'}\n")
        elif op == "e":
            current = _require(stack, out)
            out.append(f"IsEmpty() -- {'true' if current.is_empty() else 'false'}\n")
        elif op == "m":
            _require(stack, out).make_empty()
            out.append("MakeEmpty()\n")
        elif op == "p":
            current = _require(stack, out)
            out.append("Print() -- " + current.render() + "\n")
        elif op in ("t", ">", "<"):
            current = _require(stack, out)
            label, query = {
                "t": ("Top()", current.top),
                ">": ("Max()", current.max),
                "<": ("Min()", current.min),
            }[op]
            out.append(f"{label} -- ")
            try:
                out.append(f"{query()}\n")
            except StackEmpty:
                out.append(f"{label} -- Failed Empty Stack\n")
        elif op == "?":
            value, stop = _read_value(reader)
            current = _require(stack, out)
            out.append(f"Peek({value}) -- ")
            try:
                out.append(f"{current.peek(value)}\n")
            except StackInvalidPeek:
                out.append(f"Peek({value}) -- Failed Invalid Peek\n")
        elif op == "s":
            out.append(f"Size() -- {len(_require(stack, out))}\n")
        elif op == "z":
            out.append(f"Capacity() -- {_require(stack, out).capacity()}\n")
        elif op == "d":
            stack = None
            out.append("~Stack()\n\n")
        else:
            raise ScriptError(
                f"Error - unrecognized operation '{op}'\nTerminating now...",
                "".join(out),
            )
        if stop:
            break
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Run the script file named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage:\n  project03  <inputfile>")
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