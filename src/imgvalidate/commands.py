# src/imgvalidate/commands.py
from __future__ import annotations
from typing import Any, Dict

from .models.schema import to_wire
from .validator import validate


def greet(name: str) -> str:
    """
    Fixed greeting, used by the host to check the backend is reachable.
    """
    return f"Hello, {name}! You've been greeted from Python!"


def validate_image(path: str) -> Dict[str, Any]:
    """
    Host entry point: validate `path` and return the serialized record.
    """
    return to_wire(validate(path))
