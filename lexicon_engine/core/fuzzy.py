# fuzzy.py
# Edit-distance scoring and "did you mean" ranking.
# - edit_distance: Levenshtein (insert/delete/substitute all cost 1), optional max_dist cutoff.
# - rank_corrections: shared selection/order rules for the scan and the BK-tree index.

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

Candidate = Tuple[str, int]  # (word, distance)


def edit_distance(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Levenshtein distance between `a` and `b`, two DP rows sized by the shorter string.
    With `max_dist` the result is exact when the distance is <= max_dist;
    otherwise the walk stops early and returns max_dist + 1.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a

    # length difference alone is a lower bound
    if max_dist is not None and len(a) - len(b) > max_dist:
        return max_dist + 1

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                curr.append(prev[j - 1])
            else:
                curr.append(1 + min(prev[j], curr[j - 1], prev[j - 1]))
        # row minima never decrease
        if max_dist is not None and min(curr) > max_dist:
            return max_dist + 1
        prev = curr
    return prev[-1]


def rank_corrections(candidates: Iterable[Candidate], max_suggestions: int) -> List[str]:
    """
    Order (word, distance) pairs by distance then word, drop repeats
    (first occurrence wins) and keep at most `max_suggestions` words.
    """
    if max_suggestions <= 0:
        return []
    out: List[str] = []
    seen = set()
    for w, _dist in sorted(candidates, key=lambda c: (c[1], c[0])):
        if w in seen:
            continue
        seen.add(w)
        out.append(w)
        if len(out) >= max_suggestions:
            break
    return out


def scan_corrections(
    query: str, words: Iterable[str], max_distance: int, max_suggestions: int
) -> List[str]:
    """
    Linear scan over `words`: keep those with 0 < distance <= max_distance.
    `query` is expected to be normalized already.
    """
    if max_distance < 1 or max_suggestions <= 0:
        return []
    candidates: List[Candidate] = []
    for w in words:
        d = edit_distance(query, w, max_distance)
        if 0 < d <= max_distance:
            candidates.append((w, d))
    return rank_corrections(candidates, max_suggestions)
