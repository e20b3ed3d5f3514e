import time
import numpy as np
import sys, os
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from search_sequence_simple import exact_search
from search_sequence_hash import hashed_search
from search_sequence_numba import exact_search_numba, hashed_search_numba
from sequence_io import to_codes

def bench(fn, *args, warmup=1, repeat=5):
    for _ in range(warmup):
        fn(*args)

    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn(*args)
        best = min(best, time.perf_counter() - t0)
    return best

if __name__ == "__main__":
    rng = np.random.default_rng(0)
    text = "".join(rng.choice(list("ACGT"), size=1_000_000))
    pattern = "ACGTACGTTGCA"
    text_codes, pattern_codes = to_codes(text), to_codes(pattern)

    t_bf = bench(exact_search, text, len(text), pattern, len(pattern), repeat=3)
    t_kr = bench(hashed_search, text, len(text), pattern, len(pattern), repeat=3)
    t_bf_nb = bench(exact_search_numba, text_codes, pattern_codes)
    t_kr_nb = bench(hashed_search_numba, text_codes, pattern_codes)

    print(f"Brute Force Python : {t_bf:.5f} sec")
    print(f"Karp-Rabin Python  : {t_kr:.5f} sec")
    print(f"Brute Force Numba  : {t_bf_nb:.5f} sec")
    print(f"Karp-Rabin Numba   : {t_kr_nb:.5f} sec")
    print(f"Speedup BF = ×{t_bf/t_bf_nb:.1f}")
    print(f"Speedup KR = ×{t_kr/t_kr_nb:.1f}")
