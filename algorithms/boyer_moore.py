# boyer_moore.py
# Right-to-left scan that jumps by the larger of the bad-character and
# good-suffix shifts.

from types import MappingProxyType


def build_bad_character_table(pattern):
    """Map every pattern character to its rightmost index in the pattern."""
    table = {}
    for i, c in enumerate(pattern):
        table[c] = i
    return MappingProxyType(table)


def build_good_suffix_shift(pattern):
    """Good-suffix shifts indexed by mismatch position + 1 (0 = full match).

    The first pass walks the borders of every suffix and records the shift for
    suffixes that reoccur earlier in the pattern. The second pass fills the
    remaining entries from the widest border of the whole pattern.
    """
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)

    i = m
    j = m + 1
    border[i] = j

    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j

    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]

    return shift


def boyer_moore_search(text, pattern):
    n = len(text)
    m = len(pattern)
    indices = []

    if m == 0:
        return list(range(n + 1))
    if m > n:
        return indices
    if m == 1:
        target = pattern[0]
        return [i for i, c in enumerate(text) if c == target]

    good_suffix = build_good_suffix_shift(pattern)
    bad_char = build_bad_character_table(pattern)

    i = 0
    while i <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[i + j]:
            j -= 1

        if j < 0:
            indices.append(i)
            i += good_suffix[0]
        else:
            bad_char_shift = j - bad_char.get(text[i + j], -1)
            good_suffix_shift = good_suffix[j + 1]
            # Only the combined shift is clamped; bad_char_shift may be negative.
            shift = max(bad_char_shift, good_suffix_shift)
            i += shift if shift > 0 else 1

    return indices
