"""Route handler variants.

A route's ``handler`` is written in one of three shapes:

    "health.check"              -> HandlerReference (handler registry lookup)
    ["auth.load_user", action]  -> HandlerChain (ordered steps, last is the endpoint)
    action                      -> HandlerFunction (direct callable)

The shape is classified once during validation. Each variant keeps the
caller's value untouched and exposes it as ``raw``.
"""

from collections.abc import Callable
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator, Tag

from routekit.domain.value_objects.policy_descriptor import NonEmptyStr, wrap_bare_value

HANDLER_REFERENCE_TAG = "handler-reference"
HANDLER_CHAIN_TAG = "handler-chain"
HANDLER_FUNCTION_TAG = "handler-function"


class HandlerReference(BaseModel):
    """Handler identified by name in the host's handler registry."""

    model_config = ConfigDict(frozen=True)

    name: NonEmptyStr

    @property
    def raw(self) -> str:
        return self.name


class HandlerChain(BaseModel):
    """Ordered handler steps; elements are not validated here."""

    model_config = ConfigDict(frozen=True)

    steps: tuple[Any, ...]

    @property
    def raw(self) -> tuple[Any, ...]:
        return self.steps


class HandlerFunction(BaseModel):
    """Handler given directly as a callable."""

    model_config = ConfigDict(frozen=True)

    function: Callable[..., Any]

    @property
    def raw(self) -> Callable[..., Any]:
        return self.function


def handler_shape(value: Any) -> str | None:
    """Classify a raw handler by its runtime shape.

    Args:
        value: Raw handler value or an already classified variant.

    Returns:
        The union tag for the variant, or None for unsupported shapes
        (mappings, numbers, None).
    """
    match value:
        case HandlerReference() | str():
            return HANDLER_REFERENCE_TAG
        case HandlerChain() | list() | tuple():
            return HANDLER_CHAIN_TAG
        case HandlerFunction():
            return HANDLER_FUNCTION_TAG
        case _ if callable(value):
            return HANDLER_FUNCTION_TAG
        case _:
            return None


RouteHandler = Annotated[
    Union[
        Annotated[HandlerReference, BeforeValidator(wrap_bare_value("name")), Tag(HANDLER_REFERENCE_TAG)],
        Annotated[HandlerChain, BeforeValidator(wrap_bare_value("steps")), Tag(HANDLER_CHAIN_TAG)],
        Annotated[HandlerFunction, BeforeValidator(wrap_bare_value("function")), Tag(HANDLER_FUNCTION_TAG)],
    ],
    Discriminator(
        handler_shape,
        custom_error_type="route_handler",
        custom_error_message="Input should be a handler name, a list of handlers, or a callable",
    ),
]
"""A route handler, classified by shape."""
