import pytest

from rolling_hash import calculate_hash
from search_sequence_hash import HashSearchStats, hashed_search, hashed_search_stats
from search_sequence_numba import MAX_NUMBA_MOD, hashed_search_numba
from sequence_io import to_codes

# poids de la position 0 : 2^31 = 1 (mod 2^31 - 1), comme la position 31
LEFT = "A" + "C" * 30 + "G"
RIGHT = "G" + "C" * 30 + "A"


def test_engineered_collision_default_mod():
    assert LEFT != RIGHT
    assert calculate_hash(LEFT, 32) == calculate_hash(RIGHT, 32)

    assert hashed_search(RIGHT, 32, LEFT, 32) == 0
    assert hashed_search_stats(RIGHT, 32, LEFT, 32) == HashSearchStats(0, 1, 1)
    assert hashed_search_numba(to_codes(RIGHT), to_codes(LEFT)) == 0


def test_collision_next_to_real_match():
    text = RIGHT + LEFT
    stats = hashed_search_stats(text, len(text), LEFT, len(LEFT))
    assert stats.matches == 1
    assert stats.collisions >= 1


def test_tiny_modulus_collides_everywhere():
    # mod 2 : A, C, G -> 1
    stats = hashed_search_stats("CCC", 3, "A", 1, mod=2)
    assert stats == HashSearchStats(0, 3, 3)
    assert hashed_search("CACGA", 5, "A", 1, mod=2) == 2
    assert hashed_search_numba(to_codes("CACGA"), to_codes("A"), 2) == 2


@pytest.mark.parametrize("mod", [3, 7, 101, 2**61 - 1])
def test_count_independent_of_modulus(mod):
    text = "ATCGATCGATCGAAAATTTT"
    assert hashed_search(text, len(text), "ATCG", 4, mod) == 3
    assert hashed_search(text, len(text), "AA", 2, mod) == 3


def test_pattern_longer_than_text():
    assert hashed_search_stats("ACG", 3, "ACGT", 4) == HashSearchStats(0, 0, 0)


def test_pattern_length_equals_text_length():
    assert hashed_search("GATTACA", 7, "GATTACA", 7) == 1
    assert hashed_search("GATTACA", 7, "GATTACT", 7) == 0


def test_numba_rejects_oversized_modulus():
    with pytest.raises(ValueError):
        hashed_search_numba(to_codes("ACGT"), to_codes("A"), MAX_NUMBA_MOD + 1)
    with pytest.raises(ValueError):
        hashed_search_numba(to_codes("ACGT"), to_codes("A"), 1)
