"""Levenshtein-based string similarity used by the spelling grader."""
from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``."""
    rows = len(a) + 1
    cols = len(b) + 1
    table = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = min(
                    table[i - 1][j - 1] + 1,  # substitute
                    table[i][j - 1] + 1,      # insert
                    table[i - 1][j] + 1,      # delete
                )
    return table[-1][-1]


def similarity(a: str, b: str) -> float:
    """Case-insensitive similarity in [0, 1].

    1.0 for identical strings (including two empty strings), 0.0 when exactly
    one side is empty, otherwise ``1 - distance / longest``.
    """
    s1 = a.lower()
    s2 = b.lower()
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0
    longest = max(len(s1), len(s2))
    return (longest - edit_distance(s1, s2)) / longest
