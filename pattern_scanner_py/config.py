"""
Configuration handling for the pattern scanner.
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Optional
import json
import os
from pathlib import Path


def available_parallelism() -> int:
    """Number of workers used when none is requested."""
    return os.cpu_count() or 1


def resolve_worker_count(requested: Optional[int]) -> int:
    """
    Turn a requested worker count into a concrete one.

    Args:
        requested: Explicit count, or None for available parallelism

    Returns:
        Worker count (0 is passed through and yields an empty scan)

    Raises:
        ValueError: If the count is negative
    """
    if requested is None:
        return available_parallelism()
    if requested < 0:
        raise ValueError(f"worker count must not be negative: {requested}")
    return requested


@dataclass
class ScannerConfig:
    """Configuration options for the pattern scanner."""

    # Worker threads (None = one per available CPU)
    threads: Optional[int] = None

    # Search options
    find_all: bool = True
    require_unique: bool = False

    # Output options
    offset_format: str = 'hex'
    base_address: int = 0

    @property
    def worker_count(self) -> int:
        return resolve_worker_count(self.threads)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'ScannerConfig':
        """Load configuration from a JSON file."""
        if path is None:
            path = Path(__file__).parent / 'config.json'

        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = json.load(f)

        # Convert camelCase to snake_case
        converted = {}
        for key, value in data.items():
            snake_key = ''.join(
                f'_{c.lower()}' if c.isupper() else c
                for c in key
            ).lstrip('_')
            converted[snake_key] = value

        # Filter to only include valid fields
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in converted.items() if k in valid_fields}

        return cls(**filtered)

    def save(self, path: Path) -> None:
        """Save configuration to a JSON file."""
        # Convert snake_case to camelCase
        data = {}
        for key, value in self.__dict__.items():
            camel_key = ''.join(
                word.capitalize() if i > 0 else word
                for i, word in enumerate(key.split('_'))
            )
            data[camel_key] = value

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
