"""
Empreinte (hash) glissante pour la recherche Karp-Rabin.

Chaque fenêtre de longueur L est lue comme un nombre en base 2 :
la base à la position k (depuis la gauche) pèse 2^(L-1-k).
La valeur d'une base est son code ASCII brut (A=65, C=67, G=71, T=84).
"""

# INT_MAX sur 32 bits (2^31 - 1)
DEFAULT_MOD = 2**31 - 1
BASE = 2


def symbol_code(symbol):
    """Code numérique brut d'une base ('A', b'A'[0], np.uint8...)."""
    if isinstance(symbol, str):
        return ord(symbol)
    return int(symbol)


def calculate_hash(seq, length, start=0, mod=DEFAULT_MOD):
    """
    Empreinte de seq[start:start+length].
    Réduction modulo après chaque multiplication / accumulation.
    """
    h = 0
    weight = 1

    # on part de la droite : poids 2^0, 2^1, ...
    for k in range(length - 1, -1, -1):
        h = (h + (symbol_code(seq[start + k]) * weight) % mod) % mod
        if k > 0:
            weight = (weight * BASE) % mod

    return h


def high_weight(length, mod=DEFAULT_MOD):
    """Poids de la base la plus à gauche : 2^(length-1) mod mod."""
    power = 1
    for _ in range(length - 1):
        power = (power * BASE) % mod
    return power


def rehash(old_symbol, old_hash, new_symbol, length, mod=DEFAULT_MOD, power=None):
    """
    Décale la fenêtre d'une position vers la droite.

    rehash(a, h, b) = ((h - a*2^(L-1)) * 2 + b) mod M

    `power` permet de passer high_weight(length, mod) déjà calculé.
    """
    if power is None:
        power = high_weight(length, mod)

    h = old_hash - (symbol_code(old_symbol) * power) % mod
    if h < 0:
        h += mod

    return (h * BASE + symbol_code(new_symbol)) % mod


def window_hashes(seq, length, mod=DEFAULT_MOD):
    """Empreintes de toutes les fenêtres de longueur `length` (une seule passe)."""
    n = len(seq)
    if length < 1 or length > n:
        return []

    power = high_weight(length, mod)
    h = calculate_hash(seq, length, 0, mod)
    out = [h]

    for i in range(1, n - length + 1):
        h = rehash(seq[i - 1], h, seq[i + length - 1], length, mod, power)
        out.append(h)

    return out
