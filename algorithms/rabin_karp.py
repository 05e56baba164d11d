BASE = 256
PRIME = 101  # Small on purpose: collisions happen and are verified.


def polynomial_hash(chars, base=BASE, prime=PRIME):
    """Horner-evaluated hash of ``chars`` modulo ``prime``."""
    value = 0
    for c in chars:
        value = (base * value + ord(c)) % prime
    return value


def roll_hash(window_hash, outgoing, incoming, h, base=BASE, prime=PRIME):
    """Slide a window hash one position: drop ``outgoing``, append ``incoming``.

    ``h`` is ``base ** (m - 1) % prime`` for a window of length ``m``.
    """
    window_hash = (base * (window_hash - ord(outgoing) * h) + ord(incoming)) % prime
    if window_hash < 0:
        window_hash += prime
    return window_hash


def rabin_karp_search(text, pattern, base=BASE, prime=PRIME):
    n = len(text)
    m = len(pattern)
    indices = []

    if m == 0:
        return list(range(n + 1))
    if m > n:
        return indices

    h = pow(base, m - 1, prime)
    p_hash = polynomial_hash(pattern, base, prime)
    t_hash = polynomial_hash(text[:m], base, prime)

    for i in range(n - m + 1):
        if p_hash == t_hash:
            # Equal hashes are necessary, not sufficient.
            match = True
            for j in range(m):
                if text[i + j] != pattern[j]:
                    match = False
                    break
            if match:
                indices.append(i)
        if i < n - m:
            t_hash = roll_hash(t_hash, text[i], text[i + m], h, base, prime)

    return indices
