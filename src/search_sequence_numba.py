import numpy as np
from numba import njit

from rolling_hash import DEFAULT_MOD

# les produits code * poids doivent tenir dans un int64
MAX_NUMBA_MOD = 2**55


@njit
def _verify_match_numba(text, pattern, pos, m):
    for j in range(m):
        if text[pos + j] != pattern[j]:
            return False
    return True


@njit
def exact_search_numba(text, pattern):
    n = len(text)
    m = len(pattern)
    count = 0

    for i in range(n - m + 1):
        ok = True
        for j in range(m):
            if text[i + j] != pattern[j]:
                ok = False
                break
        if ok:
            count += 1

    return count


@njit
def _window_hash_numba(seq, start, m, mod):
    h = np.int64(0)
    weight = np.int64(1)
    for k in range(m - 1, -1, -1):
        h = (h + (np.int64(seq[start + k]) * weight) % mod) % mod
        if k > 0:
            weight = (weight * 2) % mod
    return h


@njit
def _hashed_search_kernel(text, pattern, mod):
    n = len(text)
    m = len(pattern)
    if m > n:
        return 0

    power = np.int64(1)
    for _ in range(m - 1):
        power = (power * 2) % mod

    pattern_hash = _window_hash_numba(pattern, 0, m, mod)
    text_hash = _window_hash_numba(text, 0, m, mod)
    count = 0

    for i in range(n - m + 1):
        if text_hash == pattern_hash and _verify_match_numba(text, pattern, i, m):
            count += 1
        if i < n - m:
            h = text_hash - (np.int64(text[i]) * power) % mod
            if h < 0:
                h += mod
            text_hash = (h * 2 + np.int64(text[i + m])) % mod

    return count


def hashed_search_numba(text, pattern, mod=DEFAULT_MOD):
    """
    Version Numba de la recherche Karp-Rabin.
    text et pattern sont des tableaux uint8 (codes ASCII).
    """
    if mod < 2 or mod > MAX_NUMBA_MOD:
        raise ValueError(f"mod must be in [2, {MAX_NUMBA_MOD}] for the numba engine, got {mod}")
    return _hashed_search_kernel(text, pattern, np.int64(mod))
