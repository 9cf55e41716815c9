# distance.py
# Levenshtein edit distance: minimum number of single-character inserts,
# deletes or substitutions turning one string into the other.

from typing import List


def edit_distance(a: str, b: str) -> int:
    """
    Classic dynamic-programming Levenshtein over a (len(a)+1) x (len(b)+1)
    table. Row 0 / column 0 hold the cost of building or erasing a prefix.
    """
    m, n = len(a), len(b)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        ca = a[i - 1]
        for j in range(1, n + 1):
            if ca == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
    return dp[m][n]


def next_row(prev: List[int], ch: str, target: str) -> List[int]:
    """
    Extend a Levenshtein row by one character.
    prev[j] is the distance between some prefix p and target[:j]; the
    returned row holds the distances between p + ch and target[:j].
    Used to carry the table down a trie one edge at a time.
    """
    row = [prev[0] + 1]
    for j in range(1, len(target) + 1):
        if ch == target[j - 1]:
            row.append(prev[j - 1])
        else:
            row.append(1 + min(prev[j], row[j - 1], prev[j - 1]))
    return row
