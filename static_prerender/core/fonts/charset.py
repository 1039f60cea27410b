"""Describe a character set as a CSS ``unicode-range`` value."""

from typing import Iterable, List, Tuple


def code_point_ranges(characters: Iterable[str]) -> List[Tuple[int, int]]:
    """Collapse the unique code points of ``characters`` into inclusive runs."""
    ranges: List[Tuple[int, int]] = []
    for point in sorted({ord(char) for char in characters}):
        if ranges and ranges[-1][1] == point - 1:
            ranges[-1] = (ranges[-1][0], point)
        else:
            ranges.append((point, point))
    return ranges


def to_hex_range_string(characters: Iterable[str]) -> str:
    """
    Format characters as ``U+20,U+30-39,U+41``.

    Code points are lowercase hexadecimal without padding; consecutive code
    points are merged into a single range.
    """
    parts = []
    for start, end in code_point_ranges(characters):
        if start == end:
            parts.append(f"U+{start:x}")
        else:
            parts.append(f"U+{start:x}-{end:x}")
    return ",".join(parts)
