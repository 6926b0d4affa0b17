# src/imgvalidate/metadata.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol


@dataclass(frozen=True)
class ImageMetadata:
    timestamp: Optional[str] = None
    gps: Optional[str] = None


class MetadataExtractor(Protocol):
    """
    Pulls embedded capture time / location out of a file that has already
    been opened and hashed successfully. Must not touch the hash.
    """

    def extract(self, path: Path) -> ImageMetadata: ...


class NoMetadata:
    """
    Default extractor: metadata extraction is disabled, both fields stay empty.
    """

    def extract(self, path: Path) -> ImageMetadata:
        return ImageMetadata()
