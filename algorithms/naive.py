def naive_search(text, pattern):
    n = len(text)
    m = len(pattern)
    indices = []

    for i in range(n - m + 1):
        match = True
        for j in range(m):
            if text[i + j] != pattern[j]:
                match = False
                break
        if match:
            indices.append(i)

    return indices
