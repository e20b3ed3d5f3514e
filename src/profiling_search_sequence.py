import cProfile
import numpy as np
import sys, os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from search_sequence_simple import exact_search
from search_sequence_hash import hashed_search

rng = np.random.default_rng()
text = "".join(rng.choice(list("ACGT"), size=200_000))
pattern = "ACGTTGCA"

for fn in (exact_search, hashed_search):
    print(f"\n=== {fn.__name__} ===\n")
    profiler = cProfile.Profile()
    profiler.runcall(fn, text, len(text), pattern, len(pattern))
    profiler.print_stats(sort='cumtime')
