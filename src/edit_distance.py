# src/edit_distance.py
from typing import List, Optional


def levenshtein(s: Optional[str], t: Optional[str]) -> int:
    """
    Classic Levenshtein distance (insert, delete, substitute all cost 1).
    - empty/None on either side -> length of the other side
    - identical strings -> 0
    Keeps two rows of len(t)+1 instead of the full matrix.
    Case-sensitive: callers lower-case beforehand.
    """
    s = s or ""
    t = t or ""
    if not s:
        return len(t)
    if not t:
        return len(s)
    if s == t:
        return 0

    prev: List[int] = list(range(len(t) + 1))
    cur: List[int] = [0] * (len(t) + 1)

    for i, sc in enumerate(s):
        cur[0] = i + 1
        for j, tc in enumerate(t):
            cost = 0 if sc == tc else 1
            cur[j + 1] = min(
                cur[j] + 1,        # insertion
                prev[j + 1] + 1,   # deletion
                prev[j] + cost,    # substitution
            )
        prev, cur = cur, prev

    return prev[len(t)]


if __name__ == "__main__":
    print(levenshtein("kitten", "sitting"))
    print(levenshtein("dumn", "dumm"))
    print(levenshtein("flaw", "lawn"))
