"""Paramètres d'une recherche."""

from dataclasses import dataclass

from rolling_hash import DEFAULT_MOD
from sequence_io import MAX_SEQUENCE_SIZE

ALGORITHMS = ("bf", "kr")
ENGINES = ("python", "numba")


@dataclass
class SearchConfig:
    algorithm: str = "bf"
    engine: str = "python"
    mod: int = DEFAULT_MOD
    max_size: int = MAX_SEQUENCE_SIZE

    def validate(self):
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Invalid algorithm {self.algorithm!r}, expected one of {ALGORITHMS}")
        if self.engine not in ENGINES:
            raise ValueError(f"Invalid engine {self.engine!r}, expected one of {ENGINES}")
        if self.mod < 2:
            raise ValueError(f"mod must be >= 2, got {self.mod}")
        if self.max_size < 2:
            raise ValueError(f"max_size must be >= 2, got {self.max_size}")
        return self

    def as_dict(self):
        return {
            "algorithm": self.algorithm,
            "engine": self.engine,
            "mod": self.mod,
            "max_size": self.max_size,
        }
