def verify_match(text, pattern, pos, pattern_len):
    """
    Vérifie que les pattern_len bases à partir de pos sont exactement le motif.
    Sert de garde-fou contre les collisions d'empreintes.
    """
    for j in range(pattern_len):
        if text[pos + j] != pattern[j]:
            return False
    return True


def exact_search(text, text_len, pattern, pattern_len):
    """
    Recherche naïve (force brute).
    Compte les positions i de [0, T-P] où le motif apparaît.
    Si le motif est plus long que le texte, la plage est vide : 0.
    """
    matches = 0

    for i in range(text_len - pattern_len + 1):
        j = 0
        # arrêt au premier caractère différent
        while j < pattern_len and text[i + j] == pattern[j]:
            j += 1
        if j == pattern_len:
            matches += 1

    return matches


def exact_positions(text, text_len, pattern, pattern_len):
    """Même parcours, mais renvoie les positions au lieu du nombre."""
    return [
        i for i in range(text_len - pattern_len + 1)
        if verify_match(text, pattern, i, pattern_len)
    ]
