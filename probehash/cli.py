"""Interactive menu comparing a traditional and a Fibonacci hash table."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from probehash.tables import FibonacciHash, TraditionalHash

DEFAULT_DATA_FILE = "Data.txt"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MENU = "\n".join(
    [
        "-------------------------Menu------------------------",
        "1. Input size of hash table",
        "2. Insert key-value pair or get from file",
        "3. Search key",
        "4. Remove key",
        "5. Exit",
        "-----------------------------------------------------",
    ]
)

_INSERT_MENU = "\n".join(
    [
        " ------------- menu --------------- ",
        "1. Direct data entry",
        "2. Get data from file",
        " ---------------------------------- ",
    ]
)

_NO_TABLE = "Please create a hash table first!"


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def read_data_file(path: str | Path) -> list[tuple[str, int]]:
    """Read key-value pairs from a data file.

    The file starts with the number of pairs. Each following non-empty line
    yields one pair: its last word is the value and the word before it the key.
    """
    text = Path(path).read_text(encoding="utf-8")
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("data file must start with the number of pairs")
    count = int(match.group(1))
    lines = iter(text[match.end():].split("\n"))
    pairs: list[tuple[str, int]] = []
    while len(pairs) < count:
        line = next(lines, None)
        if line is None:
            raise ValueError(f"expected {count} pairs, found {len(pairs)}")
        if not line:
            continue
        words = line.split()
        key = words[-2] if len(words) >= 2 else ""
        value = words[-1] if words else ""
        pairs.append((key, _parse_int(value)))
    return pairs


class _TokenReader:
    """Reads whitespace-separated tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self, prompt: str = "") -> str:
        if prompt:
            print(prompt, end="", flush=True)
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self, prompt: str = "") -> int:
        text = self.word(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected an integer, got {text!r}") from None


@dataclass
class _Session:
    data_file: Path
    size: int = 0
    traditional: TraditionalHash = field(default_factory=lambda: TraditionalHash(0))
    fibonacci: FibonacciHash = field(default_factory=lambda: FibonacciHash(0))

    def insert(self, key: str, value: int) -> None:
        self.traditional.insert(key, value)
        self.fibonacci.insert(key, value)


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)


def _pause() -> None:
    if sys.stdin.isatty():
        input("Press Enter to continue...")


def _create_tables(session: _Session, reader: _TokenReader) -> None:
    size = reader.integer("Enter the size of the hash table: ")
    session.traditional = TraditionalHash(size)
    session.fibonacci = FibonacciHash(size)
    session.size = size
    print(f"Hash tables created with size {size}")
    _pause()


def _insert_direct(session: _Session, reader: _TokenReader) -> None:
    count = reader.integer("How many key-value pairs do you want to insert? ")
    for number in range(1, count + 1):
        key = reader.word(f"{number}.Enter key and value: ")
        value = reader.integer()
        session.insert(key, value)
    print(f"Inserted {count} key-value pairs into both hash tables.")
    _pause()


def _insert_from_file(session: _Session) -> None:
    try:
        pairs = read_data_file(session.data_file)
    except OSError:
        print("Error!")
        return
    except ValueError as exc:
        print(f"Error! {exc}")
        return
    for key, value in pairs:
        session.insert(key, value)
    print(f"Inserted {len(pairs)} key-value pairs into both hash tables.")
    _pause()


def _insert(session: _Session, reader: _TokenReader) -> None:
    print(_INSERT_MENU)
    choice = reader.integer("Please enter your option: ")
    if choice not in (1, 2):
        return
    if session.size == 0:
        print(_NO_TABLE)
        return
    if choice == 1:
        _insert_direct(session, reader)
    else:
        _insert_from_file(session)


def _search(session: _Session, reader: _TokenReader) -> None:
    key = reader.word("Enter the key to search: ")
    for name, table in (("traditional", session.traditional), ("fibonacci", session.fibonacci)):
        value = table.search(key)
        if value is None:
            print(f"Key {key} not found in {name} hash table.")
        else:
            print(f"Found key {key} with value {value}")
    _pause()


def _remove(session: _Session, reader: _TokenReader) -> None:
    key = reader.word("Enter the key to remove: ")
    for name, table in (("traditional", session.traditional), ("fibonacci", session.fibonacci)):
        if table.remove(key):
            print(f"Key {key} removed from {name} hash table.")
        else:
            print(f"Key {key} not found in {name} hash table.")
    print("Press any key to continue...")
    _pause()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="probehash",
        description="Compare a traditional and a Fibonacci linear-probing hash table.",
    )
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_FILE,
        help=f"file read by the 'get data from file' option (default: {DEFAULT_DATA_FILE})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    args = _parse_args(argv)
    session = _Session(data_file=Path(args.data))
    reader = _TokenReader(sys.stdin)
    try:
        while True:
            _clear_screen()
            print(" ------ Table of Traditional Hash ------ ")
            print(session.traditional.render())
            print(" ------ Table of Fibonacci Hash ------ ")
            print(session.fibonacci.render())
            print(_MENU)
            try:
                option = reader.integer("Please enter your option: ")
                if option == 1:
                    _create_tables(session, reader)
                elif option == 2:
                    _insert(session, reader)
                elif option in (3, 4) and session.size == 0:
                    print(_NO_TABLE)
                elif option == 3:
                    _search(session, reader)
                elif option == 4:
                    _remove(session, reader)
                elif option == 5:
                    print("Exiting program...")
                    return 0
            except ValueError as exc:
                print(f"Invalid input: {exc}")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())