"""Configuration for SignatureExtractor."""

from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from waivern_graphql_signature.errors import ExtractorConfigError


class SignatureExtractorConfig(BaseModel):
    """Configuration for SignatureExtractor with Pydantic validation.

    Features:
        - Immutable (frozen) so one config can be shared between extractors
        - from_properties() factory method for dictionary-based creation
        - Strict validation (no extra fields allowed)

    Example:
        ```python
        config = SignatureExtractorConfig.from_properties(
            {"scope": "header", "on_malformed": "skip"}
        )
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
        validate_assignment=True,
    )

    scope: Literal["document", "header"] = Field(
        default="document",
        description=(
            "Text scanned for declarations: the whole document, or only the "
            "parenthesised variable header of the operation"
        ),
    )
    on_malformed: Literal["raise", "skip"] = Field(
        default="raise",
        description="Raise on a declaration without a name, or skip it",
    )

    @field_validator("scope", "on_malformed", mode="before")
    @classmethod
    def normalise_choice(cls, v: Any) -> Any:  # noqa: ANN401
        """Strip whitespace and lowercase string choices."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw properties containing:
                - scope (str, optional): "document" or "header".
                - on_malformed (str, optional): "raise" or "skip".

        Returns:
            Validated configuration object

        Raises:
            ExtractorConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ExtractorConfigError(
                f"Invalid signature extractor configuration: {e}"
            ) from e
