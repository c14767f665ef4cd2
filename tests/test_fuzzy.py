import pytest

from wwt.fuzzy import FuzzyMatcher, char_bonus, fold, is_subsequence


@pytest.fixture
def matcher():
    return FuzzyMatcher()


def test_empty_query_matches_everything(matcher):
    assert matcher.score("list files", "") == 0
    assert matcher.score("", "") == 0
    assert matcher.is_match("anything at all", "")


def test_exact_and_prefix_match(matcher):
    assert matcher.is_match("list files", "list files")
    assert matcher.is_match("list files with longer format", "list files")


def test_scattered_subsequence_matches(matcher):
    assert matcher.is_match("list files", "lf")
    assert matcher.is_match("A foo cli", "fcl")


@pytest.mark.parametrize(
    "candidate,query",
    [
        ("files list", "list files"),
        ("list", "lists"),
        ("abc", "cba"),
        ("", "a"),
        ("list files", "x"),
    ],
)
def test_no_subsequence_is_no_match(matcher, candidate, query):
    assert matcher.score(candidate, query) is None
    assert not matcher.is_match(candidate, query)


def test_smart_case():
    matcher = FuzzyMatcher()
    assert matcher.is_match("List Files", "list")
    assert not matcher.is_match("list files", "List")
    assert matcher.is_match("List files", "List")


def test_smart_case_with_expanding_lowercase():
    # "İ".lower() is "i" plus a combining dot
    assert FuzzyMatcher().is_match("İstanbul", "stanbul")
    assert FuzzyMatcher().is_match("İstanbul", "istanbul")


def test_explicit_case_modes():
    assert FuzzyMatcher(case_sensitive=False).is_match("list", "LIST")
    assert not FuzzyMatcher(case_sensitive=True).is_match("List", "list")


def test_contiguous_run_beats_scattered(matcher):
    assert matcher.score("list", "list") > matcher.score("lxixsxt", "list")


def test_word_boundary_beats_mid_word(matcher):
    assert matcher.score("foo bar", "b") > matcher.score("foobar", "b")
    assert matcher.score("foo-bar", "b") > matcher.score("foobar", "b")
    assert matcher.score("fooBar", "b") > matcher.score("foobar", "b")


def test_shorter_remainder_scores_higher(matcher):
    assert matcher.score("list files", "list") > matcher.score(
        "list files with longer format", "list"
    )


def test_score_is_deterministic(matcher):
    first = matcher.score("list files with longer format", "lfwf")
    assert first is not None
    assert all(
        matcher.score("list files with longer format", "lfwf") == first
        for _ in range(5)
    )


def test_best_alignment_is_found(matcher):
    # Greedy leftmost alignment would take the first "b"; the run at the
    # word boundary scores better.
    assert matcher.score("xbx bar", "bar") > matcher.score("xbxxxar", "bar")


def test_char_bonus():
    assert char_bonus(None, "a") > 0
    assert char_bonus(" ", "a") > 0
    assert char_bonus("_", "a") > 0
    assert char_bonus("a", "B") > 0
    assert char_bonus("a", "b") == 0
    assert char_bonus(" ", " ") == 0


def test_is_subsequence():
    assert is_subsequence(list("list files"), list("lf"))
    assert is_subsequence(list("abc"), [])
    assert not is_subsequence(list("abc"), list("ca"))


def test_fold_keeps_one_code_point():
    assert fold("A") == "a"
    assert fold("İ") == "i"
    assert fold("-") == "-"
