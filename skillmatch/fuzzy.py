"""
Fuzzy Matcher

Levenshtein edit distance used as the last-resort equality test between skills.
"""

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic edit distance between two strings.

    Fills the full (len(a)+1) x (len(b)+1) table; each cell takes the cheapest
    of a deletion, an insertion or a substitution (free when characters match).
    Callers are expected to lowercase both strings first.
    """
    rows = len(a) + 1
    cols = len(b) + 1
    table: List[List[int]] = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,  # deletion
                table[i][j - 1] + 1,  # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )

    return table[rows - 1][cols - 1]
