"""GraphQL signature extractor.

This package reads the variable declarations of a GraphQL document
(``query($id: ID!, $limit: Int = 10)``) and produces an ordered, typed
Signature that hosting platforms use to build input forms, validate payloads
and fill in defaults.
"""

from .config import SignatureExtractorConfig
from .errors import (
    ExtractorConfigError,
    MalformedDeclarationError,
    ParserError,
    SignatureError,
)
from .extractor import SignatureExtractor, parse_graphql_signature
from .models import Argument, Signature
from .types import SemanticType, TypeKind, parse_graphql_type

__all__ = [
    "Argument",
    "ExtractorConfigError",
    "MalformedDeclarationError",
    "ParserError",
    "SemanticType",
    "Signature",
    "SignatureError",
    "SignatureExtractor",
    "SignatureExtractorConfig",
    "TypeKind",
    "parse_graphql_signature",
    "parse_graphql_type",
]
