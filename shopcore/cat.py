"""Print files with a running line counter."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, TextIO


def numbered(lines: Iterable[str]) -> Iterator[str]:
    """Yield the output for text given in chunks: a header "1 " line, then the
    text with the next line number written before every newline after the first
    character."""
    count = 1
    yield f"{count} \n"
    first = True
    for chunk in lines:
        for char in chunk:
            if char == "\n" and not first:
                count += 1
                yield f"\n{count}"
            yield char
            first = False


def cat(path: str, out: Optional[TextIO] = None) -> None:
    """Write the numbered contents of the file at path to out."""
    target = out if out is not None else sys.stdout
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        for piece in numbered(handle):
            target.write(piece)


def main(argv: Optional[List[str]] = None) -> int:
    """Numbered output of each file named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: cat fil1 ...")
        return 0
    status = 0
    for path in args:
        try:
            cat(path)
        except OSError as error:
            print(f"cat: {path}: {error.strerror}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())