import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from rolling_hash import DEFAULT_MOD
from search_sequence import count_sequence_numpy, search_sequence_numpy
from search_sequence_hash import hashed_search
from search_sequence_numba import exact_search_numba, hashed_search_numba
from search_sequence_numba_parallel import exact_search_numba_parallel
from search_sequence_simple import exact_positions, exact_search, verify_match
from sequence_io import to_codes

dna = st.text(alphabet="ACGT", max_size=200)
motif = st.text(alphabet="ACGT", min_size=1, max_size=8)


def count_with_find(text, pattern):
    count = 0
    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            return count
        count += 1
        start = pos + 1


def all_counts(text, pattern):
    codes, pcodes = to_codes(text), to_codes(pattern)
    return {
        "exact": exact_search(text, len(text), pattern, len(pattern)),
        "hashed": hashed_search(text, len(text), pattern, len(pattern)),
        "numpy": count_sequence_numpy(codes, pcodes),
        "exact_numba": exact_search_numba(codes, pcodes),
        "hashed_numba": hashed_search_numba(codes, pcodes),
        "exact_numba_parallel": exact_search_numba_parallel(codes, pcodes),
    }


@pytest.mark.parametrize("text, pattern, expected", [
    ("ATCGATCGATCG", "ATCG", 3),
    ("AAAA", "AA", 3),
    ("ACGT", "TTTT", 0),
    ("ACG", "ACGT", 0),
    ("GATTACA", "GATTACA", 1),
    ("GATTACA", "GATTACC", 0),
    ("", "A", 0),
])
def test_scenarios(text, pattern, expected):
    counts = all_counts(text, pattern)
    assert set(counts.values()) == {expected}, counts


def test_parity():
    rng = np.random.default_rng(42)
    text = "".join(rng.choice(list("ACGT"), size=20_000))
    pattern = text[1234:1240]

    counts = all_counts(text, pattern)

    assert counts["exact"] >= 1
    assert len(set(counts.values())) == 1, counts
    assert counts["exact"] == count_with_find(text, pattern)


@settings(max_examples=200, deadline=None)
@given(dna, motif, st.sampled_from([2, 3, 5, DEFAULT_MOD]))
def test_exact_and_hashed_agree(text, pattern, mod):
    expected = count_with_find(text, pattern)
    assert exact_search(text, len(text), pattern, len(pattern)) == expected
    # petits modules : presque chaque fenêtre passe par la vérification
    assert hashed_search(text, len(text), pattern, len(pattern), mod) == expected


@settings(max_examples=50, deadline=None)
@given(dna, motif, st.sampled_from([2, 3, 5]))
def test_numba_agrees_with_python(text, pattern, mod):
    counts = all_counts(text, pattern)
    assert len(set(counts.values())) == 1, counts
    assert hashed_search_numba(to_codes(text), to_codes(pattern), mod) == counts["exact"]


def test_verify_match():
    assert verify_match("GGATTACA", "TTA", 3, 3)
    assert not verify_match("GGATTACA", "TTA", 2, 3)


def test_exact_positions():
    text = "AAAA"
    assert exact_positions(text, 4, "AA", 2) == [0, 1, 2]
    assert list(search_sequence_numpy(to_codes(text), to_codes("AA"))) == [0, 1, 2]
    assert exact_positions("ACG", 3, "ACGT", 4) == []
    assert search_sequence_numpy(to_codes("ACG"), to_codes("ACGT")).size == 0


def test_python_engine_accepts_code_arrays():
    text, pattern = to_codes("ATCGATCGATCG"), to_codes("ATCG")
    assert exact_search(text, len(text), pattern, len(pattern)) == 3
    assert hashed_search(text, len(text), pattern, len(pattern)) == 3
