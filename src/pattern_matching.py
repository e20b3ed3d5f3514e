"""
Recherche d'un motif ADN dans une séquence.

Usage : pattern-matching -bf|-kr DNASequenceFile.txt patternFile.txt

  -bf  force brute (comparaison naïve)
  -kr  Karp-Rabin (empreinte glissante + vérification)
"""
import argparse
import logging
import sys

from log_utils import get_logger
from rolling_hash import DEFAULT_MOD
from search_config import ENGINES, SearchConfig
from sequence_io import MAX_SEQUENCE_SIZE, read_pattern, read_sequence, to_codes

logger = get_logger("cli")


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="pattern-matching",
        description="Count occurrences of a DNA pattern with Brute Force or Karp-Rabin.",
    )
    alg = parser.add_mutually_exclusive_group(required=True)
    alg.add_argument("-bf", dest="algorithm", action="store_const", const="bf",
                     help="Brute Force algorithm")
    alg.add_argument("-kr", dest="algorithm", action="store_const", const="kr",
                     help="Karp-Rabin algorithm")
    parser.add_argument("dna_file", help="DNA sequence file (first line is read)")
    parser.add_argument("pattern_file", help="Pattern file (first line is read)")
    parser.add_argument("--engine", choices=ENGINES, default="python",
                        help="Pure Python loops or Numba-compiled kernels")
    parser.add_argument("--mod", type=int, default=DEFAULT_MOD,
                        help=f"Karp-Rabin modulus (default {DEFAULT_MOD})")
    parser.add_argument("--max-size", type=int, default=MAX_SEQUENCE_SIZE,
                        help=f"Sequence buffer capacity (default {MAX_SEQUENCE_SIZE})")
    parser.add_argument("--positions", action="store_true",
                        help="Also print the 0-based offsets of every match")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(list(argv))


def dispatch(text, pattern, config):
    """Lance l'algorithme choisi sur le moteur choisi, renvoie le nombre d'occurrences."""
    if config.engine == "numba":
        # import tardif : la compilation Numba n'est payée que si demandée
        from search_sequence_numba import exact_search_numba, hashed_search_numba

        text_codes, pattern_codes = to_codes(text), to_codes(pattern)
        if config.algorithm == "bf":
            return exact_search_numba(text_codes, pattern_codes)
        return hashed_search_numba(text_codes, pattern_codes, config.mod)

    from search_sequence_hash import hashed_search
    from search_sequence_simple import exact_search

    if config.algorithm == "bf":
        return exact_search(text, len(text), pattern, len(pattern))
    return hashed_search(text, len(text), pattern, len(pattern), config.mod)


def run(argv):
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger("pattern_matching").setLevel(logging.DEBUG)

    config = SearchConfig(
        algorithm=args.algorithm,
        engine=args.engine,
        mod=args.mod,
        max_size=args.max_size,
    )

    try:
        config.validate()
        dna = read_sequence(args.dna_file, config.max_size)
        pattern = read_pattern(args.pattern_file, config.max_size)
        logger.debug("config=%s text=%d pattern=%d", config.as_dict(), len(dna), len(pattern))
        matches = int(dispatch(dna, pattern, config))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"The pattern was found: {matches} times")

    if args.positions:
        from search_sequence_simple import exact_positions

        offsets = exact_positions(dna, len(dna), pattern, len(pattern))
        print("Positions:", " ".join(str(p) for p in offsets))

    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
