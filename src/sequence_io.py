"""
Lecture et nettoyage des fichiers de séquences ADN.

Seule la première ligne du fichier est lue ; tout caractère hors de
A/C/G/T (majuscule ou minuscule) est ignoré, le reste est mis en majuscules.
"""
import numpy as np

from log_utils import get_logger

ALPHABET = "ACGT"
# capacité du tampon de lecture
MAX_SEQUENCE_SIZE = 512_000
_CHUNK_SIZE = 64 * 1024

_KEEP = set(ALPHABET + ALPHABET.lower())

logger = get_logger("sequence_io")


class SequenceError(ValueError):
    """Erreur de lecture ou de validation d'une séquence."""


class SequenceFileError(SequenceError):
    pass


class SequenceTooLargeError(SequenceError):
    pass


class EmptyPatternError(SequenceError):
    pass


def sanitize(raw):
    """Garde les bases de la première ligne, en majuscules."""
    line = raw.split("\n", 1)[0]
    return "".join(ch for ch in line if ch in _KEEP).upper()


def _read_first_line(f, max_size):
    """
    Lit la première ligne par blocs et s'arrête dès que max_size - 1 bases
    sont lues. Renvoie (bases, fin_de_ligne_atteinte).
    """
    parts = []
    count = 0
    while count < max_size - 1:
        chunk = f.readline(_CHUNK_SIZE)
        if not chunk:
            return "".join(parts), False
        kept = sanitize(chunk)
        parts.append(kept)
        count += len(kept)
        if chunk.endswith("\n"):
            return "".join(parts), True
    return "".join(parts), False


def read_sequence(path, max_size=MAX_SEQUENCE_SIZE):
    try:
        with open(path, "r", encoding="ascii", errors="ignore") as f:
            seq, line_ended = _read_first_line(f, max_size)
            # lignes suivantes parcourues une à une, arrêt à la première base
            if line_ended and any(sanitize(line) for line in f):
                logger.warning("Only the first line of %s is read, remaining bases ignored", path)
    except OSError as e:
        raise SequenceFileError(f"Cannot open file {path}") from e

    # au plus max_size - 2 bases
    if len(seq) >= max_size - 1:
        raise SequenceTooLargeError(
            f"Sequence in {path} too large (at least {len(seq)} bases, limit {max_size - 2})"
        )
    return seq


def read_pattern(path, max_size=MAX_SEQUENCE_SIZE):
    seq = read_sequence(path, max_size)
    if not seq:
        raise EmptyPatternError(f"Empty pattern in {path}")
    return seq


def to_codes(seq):
    """
    Séquence -> tableau uint8 des codes ASCII (pour NumPy / Numba).
    Un tableau d'entiers est accepté si tous ses codes tiennent dans un octet.
    """
    if isinstance(seq, np.ndarray):
        if seq.dtype == np.uint8:
            return seq
        if seq.dtype.kind not in "iu":
            raise SequenceError(f"Symbol codes must be integers, got dtype {seq.dtype}")
        if seq.size and (seq.min() < 0 or seq.max() > 255):
            raise SequenceError("Symbol codes must be in [0, 255]")
        return seq.astype(np.uint8)
    if isinstance(seq, str):
        seq = seq.encode("ascii")
    return np.frombuffer(bytes(seq), dtype=np.uint8)
