"""Locating messages in source: import tracking, scope checks, extraction."""

from .imports import (
    DEFAULT_IMPORT,
    NAMESPACE_IMPORT,
    ImportTracker,
    ScopeRange,
    TrackedSymbol,
    TrackedSymbols,
)
from .messages import MessageCandidate, MessageDescriptor, extract_messages
from .scope import binding_names, declared_names, resolves_to_import
from .values import decode_escape, property_name, static_string

__all__ = [
    "DEFAULT_IMPORT",
    "NAMESPACE_IMPORT",
    "ImportTracker",
    "MessageCandidate",
    "MessageDescriptor",
    "ScopeRange",
    "TrackedSymbol",
    "TrackedSymbols",
    "binding_names",
    "declared_names",
    "decode_escape",
    "extract_messages",
    "property_name",
    "resolves_to_import",
    "static_string",
]
