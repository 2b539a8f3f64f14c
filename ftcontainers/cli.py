"""Seeded stress run over the containers: memory churn, a map and a stack."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass, field

from .stack import Stack

MAX_RAM = 4294967296
BUFFER_SIZE = 4096
_BUFFER_RECORD_SIZE = 4 + BUFFER_SIZE
COUNT = MAX_RAM // _BUFFER_RECORD_SIZE
RAND_MAX = 2**31 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Buffer:
    """A fixed-size block of memory tagged with an index."""

    idx: int = 0
    buff: bytearray = field(default_factory=lambda: bytearray(BUFFER_SIZE))


class IterableStack(Stack):
    """A stack that can also be walked from bottom to top."""

    def __iter__(self):
        return iter(self._items)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def run(seed, count=COUNT, out=None) -> int:
    """Run the seeded workload, write its report to ``out`` and return the sum."""
    out = sys.stdout if out is None else out
    rng = random.Random(seed)

    def rand() -> int:
        return rng.randint(0, RAND_MAX)

    buffers = [Buffer() for _ in range(count)]
    for _ in range(count):
        buffers[rand() % count].idx = 5
    buffers = []

    try:
        for _ in range(count):
            buffers[rand() % count]
            print("Error: THIS VECTOR SHOULD BE EMPTY!!", file=sys.stderr)
    except IndexError:
        pass

    numbers: dict[int, int] = {}
    for _ in range(count):
        key = rand()
        numbers.setdefault(key, rand())

    total = 0
    for _ in range(10000):
        total += numbers.setdefault(rand(), 0)
    print(f"should be constant with the same seed: {total}", file=out)

    # A full copy is part of the workload.
    snapshot = dict(numbers)
    del snapshot

    letters = IterableStack()
    for code in range(ord("a"), ord("z") + 1):
        letters.push(chr(code))
    print("".join(letters), file=out)
    return total


def _usage() -> None:
    print("Usage: ./test seed", file=sys.stderr)
    print("Provide a seed please", file=sys.stderr)
    print(f"Count value:{COUNT}", file=sys.stderr)


def main(argv=None) -> int:
    """Entry point: ``[--count N] seed``."""
    args = list(sys.argv[1:] if argv is None else argv)
    count = COUNT
    if len(args) >= 2 and args[0] == "--count":
        count = _atoi(args[1])
        args = args[2:]
    if len(args) != 1 or count <= 0:
        _usage()
        return 1
    run(_atoi(args[0]), count)
    return 0


if __name__ == "__main__":
    sys.exit(main())