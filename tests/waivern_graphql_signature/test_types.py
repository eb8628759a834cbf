"""Tests for the semantic type vocabulary."""

import pytest
from pydantic import ValidationError

from waivern_graphql_signature.types import SemanticType, TypeKind, parse_graphql_type


class TestParseGraphqlType:
    """Test mapping of GraphQL type names onto semantic types."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("String", TypeKind.STRING),
            ("ID", TypeKind.STRING),
            ("Int", TypeKind.INTEGER),
            ("Float", TypeKind.FLOAT),
            ("Boolean", TypeKind.BOOLEAN),
        ],
        ids=["string", "id", "int", "float", "boolean"],
    )
    def test_maps_builtin_scalars(self, token: str, expected: TypeKind) -> None:
        """Test that built-in scalar names map to their semantic types."""
        assert parse_graphql_type(token).kind is expected

    @pytest.mark.parametrize(
        "token",
        ["BookInput", "Weird", "DateTime"],
    )
    def test_unknown_names_fall_back_to_object(self, token: str) -> None:
        """Test that any other type name maps to object."""
        assert parse_graphql_type(token) == SemanticType.object()

    @pytest.mark.parametrize("token", ["string", "INT", "boolean", "Id"])
    def test_matching_is_case_sensitive(self, token: str) -> None:
        """Test that scalar names only match with their exact spelling."""
        assert parse_graphql_type(token).kind is TypeKind.OBJECT


class TestSemanticType:
    """Test SemanticType construction and rendering."""

    def test_list_type_carries_item(self) -> None:
        """Test that list_of wraps an item type."""
        list_type = SemanticType.list_of(SemanticType.string())

        assert list_type.is_list
        assert list_type.item == SemanticType.string()

    def test_list_without_item_is_rejected(self) -> None:
        """Test that a list type must declare its item type."""
        with pytest.raises(ValidationError, match="requires an item type"):
            SemanticType(kind=TypeKind.LIST)

    def test_scalar_with_item_is_rejected(self) -> None:
        """Test that only list types can carry an item type."""
        with pytest.raises(ValidationError, match="cannot carry an item type"):
            SemanticType(kind=TypeKind.INTEGER, item=SemanticType.string())

    def test_str_rendering(self) -> None:
        """Test the compact text form of scalar and list types."""
        assert str(SemanticType.float_()) == "float"
        assert str(SemanticType.list_of(SemanticType.integer())) == "list[int]"

    def test_types_are_immutable(self) -> None:
        """Test that semantic types cannot be modified after creation."""
        semantic_type = SemanticType.boolean()

        with pytest.raises(ValidationError):
            semantic_type.kind = TypeKind.STRING  # type: ignore[misc]

    def test_serialises_to_plain_values(self) -> None:
        """Test that model_dump produces plain JSON-compatible values."""
        dumped = SemanticType.list_of(SemanticType.object()).model_dump(mode="json")

        assert dumped == {"kind": "list", "item": {"kind": "object", "item": None}}
