from __future__ import annotations

from typing import List


def parse_csv(text: str) -> List[List[str]]:
    """Split published-sheet CSV text into rows of raw (untrimmed) fields.

    Quoted fields may contain commas and line breaks; ``""`` inside quotes is a
    literal quote. Blank lines are skipped and a final row without a trailing
    newline is still returned.
    """
    rows: List[List[str]] = []
    row: List[str] = []
    value: List[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if c == '"' and in_quotes and nxt == '"':
            value.append('"')
            i += 1
        elif c == '"':
            in_quotes = not in_quotes
        elif c == "," and not in_quotes:
            row.append("".join(value))
            value = []
        elif c in ("\n", "\r") and not in_quotes:
            if value or row:
                row.append("".join(value))
                rows.append(row)
                row = []
                value = []
            if c == "\r" and nxt == "\n":
                i += 1
        else:
            value.append(c)
        i += 1

    if value or row:
        row.append("".join(value))
        rows.append(row)
    return rows
