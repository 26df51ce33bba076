"""Local-document loading exports."""

from .document_loader import from_file
from .embedded_documents import extract_document_from_javascript
from .introspection_payloads import (
    IntrospectionEnvelope,
    IntrospectionPayload,
    RawSchema,
    SchemaWrapper,
    decode_introspection_payload,
)
from .source_formats import SUPPORTED_SUFFIXES, SourceFormat, resolve_source_format

__all__ = [
    "IntrospectionEnvelope",
    "IntrospectionPayload",
    "RawSchema",
    "SchemaWrapper",
    "SourceFormat",
    "SUPPORTED_SUFFIXES",
    "decode_introspection_payload",
    "extract_document_from_javascript",
    "from_file",
    "resolve_source_format",
]
