"""Semantic type vocabulary for extracted arguments."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import override


class TypeKind(StrEnum):
    """Closed set of value kinds an argument can carry."""

    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    LIST = "list"
    OBJECT = "object"


class SemanticType(BaseModel):
    """Inferred type of a declared variable.

    Only ``list`` carries an ``item`` type. ``object`` is the untyped
    fallback and holds no structural detail.
    """

    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    item: "SemanticType | None" = None

    @model_validator(mode="after")
    def check_item_matches_kind(self) -> Self:
        """Ensure only list types carry an item type."""
        if self.kind is TypeKind.LIST and self.item is None:
            raise ValueError("List type requires an item type")
        if self.kind is not TypeKind.LIST and self.item is not None:
            raise ValueError(f"Type '{self.kind}' cannot carry an item type")
        return self

    @classmethod
    def string(cls) -> Self:
        return cls(kind=TypeKind.STRING)

    @classmethod
    def integer(cls) -> Self:
        return cls(kind=TypeKind.INTEGER)

    @classmethod
    def float_(cls) -> Self:
        return cls(kind=TypeKind.FLOAT)

    @classmethod
    def boolean(cls) -> Self:
        return cls(kind=TypeKind.BOOLEAN)

    @classmethod
    def object(cls) -> Self:
        return cls(kind=TypeKind.OBJECT)

    @classmethod
    def list_of(cls, item: "SemanticType") -> Self:
        return cls(kind=TypeKind.LIST, item=item)

    @property
    def is_list(self) -> bool:
        return self.kind is TypeKind.LIST

    @override
    def __str__(self) -> str:
        if self.item is not None:
            return f"{self.kind}[{self.item}]"
        return str(self.kind)


# Scalar names are matched case-sensitively
_SCALAR_TYPES: dict[str, TypeKind] = {
    "String": TypeKind.STRING,
    "ID": TypeKind.STRING,
    "Int": TypeKind.INTEGER,
    "Boolean": TypeKind.BOOLEAN,
    "Float": TypeKind.FLOAT,
}


def parse_graphql_type(token: str) -> SemanticType:
    """Map a GraphQL scalar or object type name onto a semantic type.

    Args:
        token: Type name as written in the declaration, without list
            brackets or non-null markers

    Returns:
        The matching scalar type, or ``object`` for any other name

    Example:
        >>> str(parse_graphql_type("ID"))
        'str'
        >>> str(parse_graphql_type("BookInput"))
        'object'

    """
    return SemanticType(kind=_SCALAR_TYPES.get(token, TypeKind.OBJECT))
