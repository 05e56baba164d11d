import itertools

import pytest
from hypothesis import given, strategies as st

from algorithms import (
    ALGORITHMS,
    Algorithm,
    UnknownAlgorithmError,
    boyer_moore_search,
    get_algorithm,
    naive_search,
)
from algorithms.boyer_moore import build_bad_character_table, build_good_suffix_shift
from algorithms.kmp import compute_lps
from algorithms.rabin_karp import BASE, PRIME, polynomial_hash, rabin_karp_search, roll_hash
from algorithms.run_all import run_all_algorithms

KERNELS = list(ALGORITHMS.values())
kernels = pytest.mark.parametrize("kernel", KERNELS, ids=[str(a) for a in ALGORITHMS])


@st.composite
def text_and_pattern(draw, alphabet=None):
    chars = st.characters() if alphabet is None else st.sampled_from(alphabet)
    text = draw(st.text(alphabet=chars, max_size=60))
    if text and draw(st.booleans()):
        start = draw(st.integers(0, len(text) - 1))
        end = draw(st.integers(start, len(text)))
        return text, text[start:end]
    return text, draw(st.text(alphabet=chars, max_size=8))


def reference_offsets(text, pattern):
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i:i + m] == pattern]


@kernels
@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("abcabcabc", "abc", [0, 3, 6]),
        ("aaaa", "aa", [0, 1, 2]),
        ("mississippi", "issi", [1, 4]),
        ("mississippi", "i", [1, 4, 7, 10]),
        ("mississippi", "mississippi", [0]),
        ("hello world", "xyz", []),
        ("ab", "b", [1]),
        ("abab", "abab", [0]),
    ],
)
def test_known_scenarios(kernel, text, pattern, expected):
    assert kernel(text, pattern) == expected


@kernels
@given(text=st.text(max_size=30))
def test_empty_pattern_matches_everywhere(kernel, text):
    assert kernel(text, "") == list(range(len(text) + 1))


@kernels
def test_empty_text(kernel):
    assert kernel("", "") == [0]
    assert kernel("", "a") == []


@kernels
@given(text=st.text(max_size=10), extra=st.text(min_size=1, max_size=5))
def test_pattern_longer_than_text_never_matches(kernel, text, extra):
    assert kernel(text, text + extra) == []


@given(text_and_pattern())
def test_naive_matches_slicing_reference(case):
    text, pattern = case
    assert naive_search(text, pattern) == reference_offsets(text, pattern)


@kernels
@given(text_and_pattern(alphabet="ab"))
def test_kernels_agree_with_naive_on_small_alphabet(kernel, case):
    text, pattern = case
    assert kernel(text, pattern) == naive_search(text, pattern)


@kernels
@given(text_and_pattern())
def test_kernels_agree_with_naive_on_any_text(kernel, case):
    text, pattern = case
    assert kernel(text, pattern) == naive_search(text, pattern)


@kernels
@given(text_and_pattern(alphabet="abc"))
def test_offsets_are_sound_and_increasing(kernel, case):
    text, pattern = case
    offsets = kernel(text, pattern)
    assert offsets == sorted(set(offsets))
    for i in offsets:
        assert text[i:i + len(pattern)] == pattern


@kernels
def test_non_ascii_text(kernel):
    assert kernel("çağrı çağ çağrı", "çağ") == [0, 6, 10]
    assert kernel("🙂a🙂a🙂", "🙂a") == [0, 2]


def test_rabin_karp_verifies_hash_collisions():
    # Find two distinct windows with the same hash under the small prime.
    target = polynomial_hash("ab")
    collision = next(
        a + b
        for a, b in itertools.product(map(chr, range(32, 127)), repeat=2)
        if a + b != "ab" and polynomial_hash(a + b) == target
    )
    assert rabin_karp_search(collision * 3, "ab") == []
    assert rabin_karp_search(collision + "ab", "ab") == [2]


def test_run_all_algorithms_reports_every_kernel():
    results = run_all_algorithms("abcabcabc", "abc")
    assert list(results) == ["Naive", "KMP", "RabinKarp", "BoyerMoore", "GoCrazy"]
    assert all(offsets == [0, 3, 6] for offsets in results.values())


def test_registry_lookup():
    assert get_algorithm("KMP") is ALGORITHMS[Algorithm.KMP]
    assert get_algorithm(Algorithm.BOYER_MOORE) is boyer_moore_search
    assert str(Algorithm.RABIN_KARP) == "RabinKarp"
    with pytest.raises(UnknownAlgorithmError):
        get_algorithm("Horspool")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ALGORITHMS["Horspool"] = naive_search


# ---------------------- KMP failure function ----------------------

def brute_force_lps(pattern):
    lps = []
    for i in range(len(pattern)):
        prefix = pattern[:i + 1]
        lps.append(max(k for k in range(len(prefix)) if prefix[:k] == prefix[len(prefix) - k:]))
    return lps


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("", []),
        ("a", [0]),
        ("aaaa", [0, 1, 2, 3]),
        ("abab", [0, 0, 1, 2]),
        ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
        ("abcd", [0, 0, 0, 0]),
    ],
)
def test_lps_known_values(pattern, expected):
    assert compute_lps(pattern) == expected


@given(st.text(alphabet="abc", max_size=30))
def test_lps_is_longest_border(pattern):
    assert compute_lps(pattern) == brute_force_lps(pattern)


# ---------------------- Boyer-Moore tables ----------------------

def test_bad_character_table_keeps_rightmost_index():
    table = build_bad_character_table("abcab")
    assert dict(table) == {"a": 3, "b": 4, "c": 2}
    assert table.get("z", -1) == -1
    with pytest.raises(TypeError):
        table["a"] = 0


def minimal_safe_shift(pattern, j):
    """Smallest shift that could still align an occurrence after pattern[j:]
    matched and pattern[j - 1] mismatched (j == 0: full match)."""
    m = len(pattern)
    for s in range(1, m + 1):
        suffix_ok = all(k - s < 0 or pattern[k - s] == pattern[k] for k in range(j, m))
        mismatch_ok = j == 0 or j - 1 - s < 0 or pattern[j - 1 - s] != pattern[j - 1]
        if suffix_ok and mismatch_ok:
            return s
    return m


@pytest.mark.parametrize("pattern", ["aaaa", "abab", "abcd", "abcab", "aabaab", "abaabaab", "ba"])
def test_good_suffix_shift_never_skips(pattern):
    shift = build_good_suffix_shift(pattern)
    assert len(shift) == len(pattern) + 1
    for j in range(len(pattern) + 1):
        assert 1 <= shift[j] <= minimal_safe_shift(pattern, j)
    # Full match shifts by the pattern's period.
    assert shift[0] == minimal_safe_shift(pattern, 0)


@given(st.text(alphabet="ab", min_size=1, max_size=12))
def test_good_suffix_shift_never_skips_random(pattern):
    shift = build_good_suffix_shift(pattern)
    for j in range(len(pattern) + 1):
        assert 1 <= shift[j] <= minimal_safe_shift(pattern, j)


@pytest.mark.parametrize("pattern", ["aaaa", "abab", "abcd", "aab"])
def test_boyer_moore_exhaustive_small_texts(pattern):
    for length in range(len(pattern) + 3):
        for chars in itertools.product(sorted(set(pattern + "x")), repeat=length):
            text = "".join(chars)
            assert boyer_moore_search(text, pattern) == naive_search(text, pattern)


# ---------------------- Rabin-Karp rolling hash ----------------------

@given(st.text(max_size=40), st.integers(1, 10))
def test_rolling_hash_matches_fresh_hash(text, m):
    if m > len(text):
        return
    h = pow(BASE, m - 1, PRIME)
    window_hash = polynomial_hash(text[:m])
    for i in range(len(text) - m + 1):
        assert window_hash == polynomial_hash(text[i:i + m])
        assert 0 <= window_hash < PRIME
        if i < len(text) - m:
            window_hash = roll_hash(window_hash, text[i], text[i + m], h)
