# src/imgvalidate/models/schema.py
from __future__ import annotations
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

FailureStage = Literal["open", "read"]


class ValidationSuccess(BaseModel):
    """
    The file was opened and read to the end; `hash` covers every byte.
    """

    model_config = ConfigDict(frozen=True)

    valid: Literal[True] = True
    hash: str = Field(pattern=r"^[0-9a-f]{64}$")
    timestamp: Optional[str] = None
    gps: Optional[str] = None
    error: None = None


class ValidationFailure(BaseModel):
    """
    Opening or reading the file failed. No digest is reported.
    """

    model_config = ConfigDict(frozen=True)

    valid: Literal[False] = False
    hash: Literal[""] = ""
    timestamp: None = None
    gps: None = None
    error: str = Field(min_length=1)
    # which step failed; not part of the wire record
    stage: FailureStage = Field(exclude=True)


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def to_wire(result: ValidationResult) -> Dict[str, Any]:
    """
    Five-field mapping handed back to the host: valid, hash, timestamp, gps, error.
    """
    return result.model_dump(mode="json")
