import time
import numpy as np
import sys, os
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from search_sequence import count_sequence_numpy
from search_sequence_numba import exact_search_numba
from search_sequence_numba_parallel import exact_search_numba_parallel
from sequence_io import to_codes

def bench(fn, text, pattern, warmup=1, repeat=5):
    for _ in range(warmup):
        fn(text, pattern)

    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn(text, pattern)
        best = min(best, time.perf_counter() - t0)
    return best

if __name__ == "__main__":
    rng = np.random.default_rng(0)
    text = to_codes("".join(rng.choice(list("ACGT"), size=5_000_000)))
    pattern = to_codes("GATTACA")

    t_np = bench(count_sequence_numpy, text, pattern)
    t_nb = bench(exact_search_numba, text, pattern)
    t_pnb = bench(exact_search_numba_parallel, text, pattern)

    print(f"NumPy             : {t_np:.5f} sec")
    print(f"Numba             : {t_nb:.5f} sec")
    print(f"Numba Parallel    : {t_pnb:.5f} sec")

    print(f"Speedup Numba        = ×{t_np/t_nb:.1f}")
    print(f"Speedup Numba Parall = ×{t_np/t_pnb:.1f}")
    print(f"Parall vs Numba      = ×{t_nb/t_pnb:.2f}")
