from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance between two strings (case-sensitive).

    Keeps two rows sized by the shorter string.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev_row = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        row = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            row.append(min(row[j - 1] + 1, prev_row[j] + 1, prev_row[j - 1] + cost))
        prev_row = row
    return prev_row[-1]
