"""
Recherche Karp-Rabin : comparaison d'empreintes, puis vérification exacte.

Le module par défaut (2^31 - 1) avec une base 2 donne des poids qui
bouclent tous les 31 caractères : deux fenêtres distinctes peuvent avoir la
même empreinte. Une égalité d'empreintes n'est donc jamais comptée sans
verify_match.
"""
from collections import namedtuple

from rolling_hash import DEFAULT_MOD, calculate_hash, high_weight, rehash
from search_sequence_simple import verify_match

HashSearchStats = namedtuple("HashSearchStats", ["matches", "candidates", "collisions"])


def hashed_search_stats(text, text_len, pattern, pattern_len, mod=DEFAULT_MOD):
    """
    Parcours Karp-Rabin complet.

    candidates : fenêtres dont l'empreinte égale celle du motif
    collisions : candidates rejetées par la vérification exacte
    """
    if pattern_len > text_len:
        return HashSearchStats(0, 0, 0)

    pattern_hash = calculate_hash(pattern, pattern_len, 0, mod)
    text_hash = calculate_hash(text, pattern_len, 0, mod)
    # L est constant pendant toute la recherche
    power = high_weight(pattern_len, mod)

    matches = 0
    candidates = 0
    last = text_len - pattern_len

    for i in range(last + 1):
        if text_hash == pattern_hash:
            candidates += 1
            if verify_match(text, pattern, i, pattern_len):
                matches += 1

        if i < last:
            text_hash = rehash(text[i], text_hash, text[i + pattern_len],
                               pattern_len, mod, power)

    return HashSearchStats(matches, candidates, candidates - matches)


def hashed_search(text, text_len, pattern, pattern_len, mod=DEFAULT_MOD):
    """Nombre d'occurrences du motif (Karp-Rabin)."""
    return hashed_search_stats(text, text_len, pattern, pattern_len, mod).matches
