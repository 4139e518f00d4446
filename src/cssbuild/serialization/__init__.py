"""JSON encoding and typed rehydration helpers."""

from cssbuild.serialization.codec import RehydrationError, from_json, to_json

__all__ = ["RehydrationError", "from_json", "to_json"]
