"""JSON codec: encode values and rebuild dataclass instances from JSON text."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["RehydrationError", "from_json", "to_json"]

T = TypeVar("T")


class RehydrationError(ValueError):
    """Raised when decoded JSON cannot populate the requested template type."""

    def __init__(self, message: str, *, template: type | None = None) -> None:
        super().__init__(message)
        self.template = template


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialise *value* to compact JSON text.

    Dataclass instances (at any depth) are encoded as their field mapping.
    """
    return json.dumps(value, separators=(",", ":"), default=_encode_default)


def from_json(template: type[T], text: str) -> T:
    """Decode *text* and build an instance of the dataclass *template*.

    Keys that are not init fields of *template* are ignored. Missing
    required fields, a non-object payload or a non-dataclass template raise
    :class:`RehydrationError`; malformed JSON raises ``json.JSONDecodeError``.
    """
    if not (isinstance(template, type) and dataclasses.is_dataclass(template)):
        raise RehydrationError(
            f"Template {template!r} is not a dataclass type"
        )

    data = json.loads(text)
    if not isinstance(data, dict):
        raise RehydrationError(
            f"Expected a JSON object for {template.__name__}, "
            f"got {type(data).__name__}",
            template=template,
        )

    init_fields = [f for f in dataclasses.fields(template) if f.init]
    kwargs = {f.name: data[f.name] for f in init_fields if f.name in data}
    missing = [
        f.name
        for f in init_fields
        if f.name not in kwargs
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        raise RehydrationError(
            f"Missing field(s) for {template.__name__}: {', '.join(missing)}",
            template=template,
        )
    return template(**kwargs)
