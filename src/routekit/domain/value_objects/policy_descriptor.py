"""Policy and middleware descriptors.

A route applies policies and middlewares by declaring descriptors in its
``config``. Callers write them in three shapes, which are classified once at
the input boundary into explicit variants:

    "global::is-authenticated"                      -> NamedReference
    check_owner                                     -> InlineFunction
    {"name": "rate-limit", "options": {"max": 5}}   -> ConfiguredReference

Downstream code matches on the variant type and never re-inspects the raw
value.

Usage:
    from pydantic import TypeAdapter

    adapter = TypeAdapter(PolicyOrMiddleware)
    adapter.validate_python("global::is-authenticated")
    # NamedReference(name='global::is-authenticated')
"""

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    StringConstraints,
    Tag,
)

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]

NAMED_REFERENCE_TAG = "named-reference"
INLINE_FUNCTION_TAG = "inline-function"
CONFIGURED_REFERENCE_TAG = "configured-reference"


class NamedReference(BaseModel):
    """Policy or middleware referenced by name, resolved at composition.

    Attributes:
        name: Registry identifier (e.g. "global::is-authenticated").
    """

    model_config = ConfigDict(frozen=True)

    name: NonEmptyStr


class InlineFunction(BaseModel):
    """Policy or middleware given directly as a callable.

    Attributes:
        function: The callable, used as-is.
    """

    model_config = ConfigDict(frozen=True)

    function: Callable[..., Any]


class ConfiguredReference(BaseModel):
    """Policy or middleware referenced by name with options.

    Attributes:
        name: Registry identifier.
        options: Opaque options handed to the resolved factory.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: NonEmptyStr
    options: dict[Any, Any] | None = None


def wrap_bare_value(field: str) -> Callable[[Any], Any]:
    """Build a before-validator that wraps a bare value into ``{field: value}``."""

    def wrap(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value
        return {field: value}

    return wrap


def policy_shape(value: Any) -> str | None:
    """Classify a raw policy/middleware descriptor by its runtime shape.

    Args:
        value: Raw descriptor (string, callable, mapping) or an already
            classified variant.

    Returns:
        The union tag for the variant, or None when no variant applies.
    """
    match value:
        case NamedReference():
            return NAMED_REFERENCE_TAG
        case InlineFunction():
            return INLINE_FUNCTION_TAG
        case ConfiguredReference():
            return CONFIGURED_REFERENCE_TAG
        case str():
            return NAMED_REFERENCE_TAG
        case Mapping():
            return CONFIGURED_REFERENCE_TAG
        case _ if callable(value):
            return INLINE_FUNCTION_TAG
        case _:
            return None


PolicyOrMiddleware = Annotated[
    Union[
        Annotated[NamedReference, BeforeValidator(wrap_bare_value("name")), Tag(NAMED_REFERENCE_TAG)],
        Annotated[InlineFunction, BeforeValidator(wrap_bare_value("function")), Tag(INLINE_FUNCTION_TAG)],
        Annotated[ConfiguredReference, Tag(CONFIGURED_REFERENCE_TAG)],
    ],
    Discriminator(
        policy_shape,
        custom_error_type="policy_descriptor",
        custom_error_message=(
            "Input should be a policy name, a callable, "
            "or a mapping with a 'name' and optional 'options'"
        ),
    ),
]
"""One applied policy or middleware, classified by shape."""

PolicyDescriptor = NamedReference | InlineFunction | ConfiguredReference


def require_ordered(value: Any) -> Any:
    """Reject unordered collections (sets, iterators) before tuple coercion."""
    if isinstance(value, list | tuple):
        return value
    raise ValueError("Input should be a list or tuple")


PolicyList = Annotated[tuple[PolicyOrMiddleware, ...], BeforeValidator(require_ordered)]
"""Ordered policies or middlewares; only lists and tuples are accepted."""
