# src/imgvalidate/validator.py
from __future__ import annotations
import logging
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .config import ValidatorConfig
from .hashutil import iter_chunks, sha256_chunks
from .metadata import ImageMetadata, MetadataExtractor, NoMetadata
from .models.schema import ValidationFailure, ValidationResult, ValidationSuccess

logger = logging.getLogger(__name__)


def _metadata(extractor: MetadataExtractor, path: Path) -> ImageMetadata:
    """
    Run the extractor; a failing or misbehaving extractor leaves both fields empty.
    """
    try:
        meta = extractor.extract(path)
    except Exception as e:
        logger.warning("Metadata extraction failed for %s: %s", path, e)
        return ImageMetadata()

    if not isinstance(meta, ImageMetadata) or not all(
        v is None or isinstance(v, str) for v in (meta.timestamp, meta.gps)
    ):
        logger.warning("Metadata extractor returned unusable value for %s: %r", path, meta)
        return ImageMetadata()
    return meta


def validate(
    path: Union[str, PathLike],
    cfg: Optional[ValidatorConfig] = None,
    extractor: Optional[MetadataExtractor] = None,
) -> ValidationResult:
    """
    Hash the file at `path` with SHA-256 and wrap the outcome in a result record.

    Never raises: a failed open or a failed read becomes a ValidationFailure
    carrying the OS diagnostic. The file handle is closed before returning on
    every path, and no partial digest is ever reported.
    """
    if cfg is None:
        cfg = ValidatorConfig()
    if extractor is None:
        extractor = NoMetadata()

    logger.debug("Validating %s (chunk_size=%d)", path, cfg.chunk_size)
    try:
        f = open(path, "rb")
    except (OSError, ValueError) as e:
        logger.debug("Open failed for %s: %s", path, e)
        return ValidationFailure(stage="open", error=f"Failed to open file: {e}")

    # a failing close() counts as a read failure
    try:
        with f:
            digest = sha256_chunks(iter_chunks(f, cfg.chunk_size))
    except OSError as e:
        logger.debug("Read failed for %s: %s", path, e)
        return ValidationFailure(stage="read", error=f"Failed to read file: {e}")

    meta = _metadata(extractor, Path(path))
    logger.debug("Validated %s: sha256=%s", path, digest)
    return ValidationSuccess(hash=digest, timestamp=meta.timestamp, gps=meta.gps)
