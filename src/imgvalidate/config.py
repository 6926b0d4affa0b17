# src/imgvalidate/config.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .hashutil import DEFAULT_CHUNK_SIZE


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Options for a single validation run.
    The chunk size only affects throughput, never the resulting digest.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the configuration to a dictionary.
        """
        return asdict(self)
