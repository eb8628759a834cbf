"""Data models for extracted GraphQL signatures."""

from pydantic import BaseModel, ConfigDict

from waivern_graphql_signature.types import SemanticType

DefaultValue = int | float | str


class Argument(BaseModel):
    """A declared query variable."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: SemanticType
    original_type_text: str | None = None
    default: DefaultValue | None = None
    has_default: bool = False


class Signature(BaseModel):
    """Ordered parameter contract of one GraphQL document.

    GraphQL documents have no variadic capture and no entry point, so
    ``star_args`` and ``star_kwargs`` are always false and ``no_main_func``
    is always unset for extracted signatures.
    """

    model_config = ConfigDict(frozen=True)

    args: tuple[Argument, ...] = ()
    star_args: bool = False
    star_kwargs: bool = False
    no_main_func: bool | None = None

    def arg_names(self) -> list[str]:
        """List argument names in declaration order."""
        return [arg.name for arg in self.args]

    def get(self, name: str) -> Argument | None:
        """Get the first argument declared with the given name."""
        return next((arg for arg in self.args if arg.name == name), None)

    def defaults(self) -> dict[str, DefaultValue | None]:
        """Map argument names to their default values.

        Only arguments that declared a default are included. When a name is
        declared more than once the first declaration wins.
        """
        result: dict[str, DefaultValue | None] = {}
        for arg in self.args:
            if arg.has_default and arg.name not in result:
                result[arg.name] = arg.default
        return result

    def to_json(self) -> str:
        """Serialise the signature to compact JSON text."""
        return self.model_dump_json()
