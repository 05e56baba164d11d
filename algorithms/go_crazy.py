# go_crazy.py
# "Gated" scan: a window is only compared in full once both of its endpoint
# characters match the pattern's first and last characters.


def go_crazy_search(text, pattern):
    n = len(text)
    m = len(pattern)
    indices = []

    if m == 0:
        return list(range(n + 1))
    if m > n:
        return indices

    first_char = pattern[0]
    last_char = pattern[m - 1]

    for i in range(n - m + 1):
        # The two gates.
        if text[i + m - 1] != last_char or text[i] != first_char:
            continue

        match = True
        for j in range(1, m - 1):
            if text[i + j] != pattern[j]:
                match = False
                break
        if match:
            indices.append(i)

    return indices
