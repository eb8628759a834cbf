"""Signature extraction from GraphQL variable declarations.

Declarations are recognised lexically: every ``$name: Type = default``
shaped substring of the scanned text becomes one argument, in the order it
appears. The query body is never parsed.
"""

import logging
import math
import re
from functools import cache

from waivern_graphql_signature.config import SignatureExtractorConfig
from waivern_graphql_signature.errors import MalformedDeclarationError
from waivern_graphql_signature.models import Argument, DefaultValue, Signature
from waivern_graphql_signature.types import (
    SemanticType,
    TypeKind,
    parse_graphql_type,
)

logger = logging.getLogger(__name__)

# $name : Type! | [Type!]! = default
_DECLARATION_PATTERN = (
    r"\$(?P<name>\w+)?\s*:\s*"
    r"(?:(?P<type>\w+)!?|\[(?P<item>\w+)!?\])!?\s*"
    r"(?:=\s*(?P<default>-?\w+(?:\.\w+)?)\s*)?"
)

# ASCII digits only; int() and float() also accept other Unicode digits
_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)

# Integer defaults outside the signed 64-bit range stay as text
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


@cache
def _declaration_regex() -> re.Pattern[str]:
    """Compile the declaration pattern once, on first use."""
    return re.compile(_DECLARATION_PATTERN)


class SignatureExtractor:
    """Extracts typed argument signatures from GraphQL documents."""

    def __init__(self, config: SignatureExtractorConfig | None = None) -> None:
        """Initialise the extractor.

        Args:
            config: Extraction options (defaults scan the whole document and
                raise on malformed declarations)

        """
        self._config = config or SignatureExtractorConfig()

    @property
    def config(self) -> SignatureExtractorConfig:
        return self._config

    def extract(self, text: str) -> Signature:
        """Extract the argument signature of a GraphQL document.

        Args:
            text: Document source. Only declaration-shaped text is consulted,
                so partial or invalid documents are accepted.

        Returns:
            Signature with one argument per recognised declaration, in source
            order. A document without declarations yields an empty signature.

        Raises:
            MalformedDeclarationError: If a declaration has no variable name
                and the extractor is configured to raise

        """
        start, end = self._scan_bounds(text)
        args: list[Argument] = []

        for match in _declaration_regex().finditer(text, start, end):
            if match.group("name") is None:
                if self._config.on_malformed == "skip":
                    logger.warning(
                        "Skipping declaration without a name at offset %d: %r",
                        match.start(),
                        match.group(0).strip(),
                    )
                    continue
                raise MalformedDeclarationError(
                    f"Failed to capture variable name in declaration "
                    f"{match.group(0).strip()!r} at offset {match.start()}",
                    offset=match.start(),
                    text=match.group(0),
                )
            args.append(_build_argument(match))

        logger.debug("Extracted %d argument(s) from GraphQL document", len(args))
        return Signature(args=tuple(args))

    def _scan_bounds(self, text: str) -> tuple[int, int]:
        """Get the slice of text to scan for declarations."""
        if self._config.scope == "document":
            return 0, len(text)
        return _find_header_bounds(text)


def parse_graphql_signature(code: str) -> Signature:
    """Extract a signature from a GraphQL document with default options.

    Args:
        code: GraphQL document source

    Returns:
        Extracted signature

    Raises:
        MalformedDeclarationError: If a declaration has no variable name

    """
    return SignatureExtractor().extract(code)


def _build_argument(match: re.Match[str]) -> Argument:
    """Build an argument from a declaration match."""
    type_name = match.group("type")
    if type_name is not None:
        semantic_type = parse_graphql_type(type_name)
        original_type_text = type_name
    else:
        item_name = match.group("item")
        semantic_type = SemanticType.list_of(parse_graphql_type(item_name))
        original_type_text = f"[{item_name}]"

    default_token = match.group("default")
    return Argument(
        name=match.group("name"),
        type=semantic_type,
        original_type_text=original_type_text,
        default=(
            _coerce_default(default_token, semantic_type)
            if default_token is not None
            else None
        ),
        has_default=default_token is not None,
    )


def _coerce_default(token: str, semantic_type: SemanticType) -> DefaultValue:
    """Convert a default token to the argument's type where possible.

    Integer and float defaults that fail to parse are kept as text; every
    other type keeps the raw token.
    """
    if semantic_type.kind is TypeKind.INTEGER:
        if _INTEGER_LITERAL.fullmatch(token):
            value = int(token)
            if _INT_MIN <= value <= _INT_MAX:
                return value
        logger.debug("Keeping non-integer default %r as text", token)
        return token

    if semantic_type.kind is TypeKind.FLOAT:
        if _FLOAT_LITERAL.fullmatch(token):
            value = float(token)
            # Overflowing exponents parse to inf, which JSON cannot carry
            if math.isfinite(value):
                return value
        logger.debug("Keeping non-float default %r as text", token)
        return token

    return token


def _find_header_bounds(text: str) -> tuple[int, int]:
    """Locate the parenthesised variable header of the first operation.

    The header is the first ``(`` before the document's first ``{`` up to its
    matching ``)``. An unterminated header runs to the first ``{``.

    Returns:
        Start and end offsets of the header contents, or an empty range when
        the document has no header

    """
    body_start = text.find("{")
    if body_start == -1:
        body_start = len(text)

    open_index = text.find("(", 0, body_start)
    if open_index == -1:
        return 0, 0

    depth = 0
    for index in range(open_index, body_start):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return open_index + 1, index

    return open_index + 1, body_start
