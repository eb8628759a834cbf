"""Error classes for the GraphQL signature extractor.

This module provides:
- SignatureError: Base exception class for all extractor errors
- ParserError, MalformedDeclarationError: Declaration scanning exceptions
- ExtractorConfigError: Configuration exception
"""


class SignatureError(Exception):
    """Base exception for all signature extraction errors."""

    pass


class ParserError(SignatureError):
    """Base exception for parser-related errors."""

    pass


class MalformedDeclarationError(ParserError):
    """Raised when a declaration-shaped match has no variable name."""

    def __init__(self, message: str, offset: int, text: str) -> None:
        """Initialise with the location of the offending declaration.

        Args:
            message: Human-readable error message
            offset: Character index of the declaration in the scanned document
            text: The matched declaration text

        """
        super().__init__(message)
        self.offset = offset
        self.text = text


class ExtractorConfigError(SignatureError):
    """Raised when extractor configuration is invalid."""

    pass
