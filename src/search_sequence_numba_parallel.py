import numpy as np
from numba import njit, prange


@njit(parallel=True)
def exact_search_numba_parallel(text, pattern):
    """
    Version parallèle de la recherche naïve.
    Utilise prange pour paralléliser la boucle sur les positions ;
    chaque position écrit dans sa propre case, aucun état partagé.
    """
    n = len(text)
    m = len(pattern)
    if m > n:
        return 0

    matches = np.zeros(n - m + 1, dtype=np.uint8)

    for i in prange(n - m + 1):  # boucle parallèle
        ok = True
        for j in range(m):
            if text[i + j] != pattern[j]:
                ok = False
                break
        if ok:
            matches[i] = 1

    return int(matches.sum())
