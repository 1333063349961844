"""Errors raised while composing a validated route into an endpoint."""

from routekit.core.enums import ErrorCode


class RouteCompositionError(Exception):
    """Raised when a validated route cannot be turned into an endpoint.

    Typical causes: unknown handler/policy/middleware name, an empty handler
    chain, or a chain step that is neither a name nor a callable.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.ROUTE_COMPOSITION_FAILED,
        reference: str | None = None,
    ) -> None:
        """Initialize composition error.

        Args:
            message: Human-readable message.
            code: Machine-readable error code.
            reference: The name that failed to resolve, if any.
        """
        super().__init__(message)
        self.code = code
        self.reference = reference
