"""
Fuzzy matching for wwt.

Subsequence scoring in the style of interactive fuzzy finders: every query
character must appear in the candidate, in order, but not necessarily
next to each other. Among the valid alignments the best-scoring one is
found with a small dynamic programme over (query char, candidate position).

Scores go up for contiguous runs and for runs starting on a word boundary,
and down for gaps and for unmatched candidate text. A candidate that does
not contain the query as a subsequence gets no score at all (None).
"""

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1
PENALTY_UNMATCHED = 1

BONUS_BOUNDARY = 8
BONUS_CAMEL = 7
BONUS_CONSECUTIVE = 4
BONUS_FIRST_CHAR_MULTIPLIER = 2


def char_bonus(prev: str | None, ch: str) -> int:
    """Bonus for matching `ch` given the character before it."""
    if prev is None:
        return BONUS_BOUNDARY
    if not prev.isalnum():
        # After a space, hyphen, underscore, slash, dot...
        return BONUS_BOUNDARY if ch.isalnum() else 0
    if prev.islower() and ch.isupper():
        return BONUS_CAMEL
    if prev.isalpha() and ch.isdigit():
        return BONUS_CAMEL
    return 0


def fold(ch: str) -> str:
    """Lowercase one character, keeping it one code point long."""
    return ch.lower()[:1] or ch


def is_subsequence(candidate: list[str], query: list[str]) -> bool:
    """Check that query occurs in candidate in order."""
    it = iter(candidate)
    return all(ch in it for ch in query)


class FuzzyMatcher:
    """
    Scores a query against candidate strings.

    case_sensitive=None is "smart case": case is ignored unless the query
    contains an uppercase character.
    """

    def __init__(self, case_sensitive: bool | None = None):
        self.case_sensitive = case_sensitive

    def _respect_case(self, query: str) -> bool:
        if self.case_sensitive is None:
            return any(ch.isupper() for ch in query)
        return self.case_sensitive

    def is_match(self, candidate: str, query: str) -> bool:
        """True if query is an in-order subsequence of candidate."""
        return self.score(candidate, query) is not None

    def score(self, candidate: str, query: str) -> int | None:
        """
        Score query against candidate.

        Returns None when there is no subsequence match. The empty query
        matches everything with a score of 0.
        """
        if not query:
            return 0

        # Per-character folding keeps positions aligned with `candidate`.
        if self._respect_case(query):
            cand = list(candidate)
            pattern = list(query)
        else:
            cand = [fold(ch) for ch in candidate]
            pattern = [fold(ch) for ch in query]

        n, m = len(cand), len(pattern)
        if m > n or not is_subsequence(cand, pattern):
            return None

        bonuses = [
            char_bonus(candidate[j - 1] if j else None, candidate[j])
            for j in range(n)
        ]

        # row[j]: best score with the current query char matched at j
        row: list[int | None] = [
            SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER
            if cand[j] == pattern[0] else None
            for j in range(n)
        ]

        for i in range(1, m):
            prev_row = row
            row = [None] * n
            gap_best: int | None = None

            for j in range(i, n):
                if gap_best is not None:
                    gap_best += SCORE_GAP_EXTENSION
                if j >= 2 and prev_row[j - 2] is not None:
                    opened = prev_row[j - 2] + SCORE_GAP_START
                    if gap_best is None or opened > gap_best:
                        gap_best = opened

                if cand[j] != pattern[i]:
                    continue

                best = None
                if prev_row[j - 1] is not None:
                    best = prev_row[j - 1] + BONUS_CONSECUTIVE
                if gap_best is not None and (best is None or gap_best > best):
                    best = gap_best
                if best is not None:
                    row[j] = best + SCORE_MATCH + bonuses[j]

        scores = [s for s in row if s is not None]
        if not scores:
            return None
        return max(scores) - (n - m) * PENALTY_UNMATCHED

