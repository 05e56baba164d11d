def compute_lps(pattern):
    """Longest proper prefix of pattern[:i + 1] that is also its suffix, per i."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        else:
            if length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1
    return lps


def kmp_search(text, pattern):
    n = len(text)
    m = len(pattern)

    # The empty pattern matches at every position, including n.
    if m == 0:
        return list(range(n + 1))

    lps = compute_lps(pattern)

    i = j = 0
    indices = []

    while i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

        if j == m:
            indices.append(i - j)
            j = lps[j - 1]

    return indices
