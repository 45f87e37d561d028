from __future__ import annotations

from typing import Hashable, List, Sequence, Set


def lcs_for(s: Sequence[Hashable], t: Sequence[Hashable]) -> int:
    """Greedy scan with a set of already counted symbols and the position of the last match in ``t``.

    Not a true LCS: every symbol value of ``s`` counts at most once, and ``t[0]``
    can never match because a match must land strictly after the cursor.
    """
    lcs = 0
    already_counted: Set[Hashable] = set()
    # a match in t must come after the last counted position, otherwise the sequence is not valid
    max_pos = 0
    for x in s:
        if x in already_counted:
            continue
        # no break on a hit: the rest of t is still scanned for this x
        for j, y in enumerate(t):
            if y in already_counted:
                continue
            if x == y and j > max_pos:
                already_counted.add(x)
                max_pos = j
                lcs += 1
    return lcs


def lcs_rec_at(s: Sequence[Hashable], t: Sequence[Hashable], i: int, j: int) -> int:
    # -1 means "before the start"; no memo table on purpose, this is the exponential baseline
    if i == -1 or j == -1:
        return 0
    if s[i] == t[j]:
        return 1 + lcs_rec_at(s, t, i - 1, j - 1)
    return max(lcs_rec_at(s, t, i - 1, j), lcs_rec_at(s, t, i, j - 1))


def lcs_rec(s: Sequence[Hashable], t: Sequence[Hashable]) -> int:
    return lcs_rec_at(s, t, len(s) - 1, len(t) - 1)


def lcs_table(s: Sequence[Hashable], t: Sequence[Hashable]) -> List[List[int]]:
    """Returns the (m+1) x (n+1) table where ``dp[i][j]`` is the LCS length of ``s[:i]`` and ``t[:j]``."""
    m, n = len(s), len(t)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s[i - 1] == t[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp


def lcs_dynamic(s: Sequence[Hashable], t: Sequence[Hashable]) -> int:
    return lcs_table(s, t)[len(s)][len(t)]
