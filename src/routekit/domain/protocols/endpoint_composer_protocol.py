"""EndpointComposerProtocol definition.

The endpoint composer turns a validated route into an executable handler
chain bound to a router. The route manager calls it exactly once per
validated route, after default policies have been injected.

Implementations are free to raise; the route manager does not interpret
composer errors, it lets them propagate.

Usage:
    class RecordingComposer:
        def __init__(self) -> None:
            self.calls = []

        def compose(self, route: RouteDescriptor, context: RouteContext) -> None:
            self.calls.append((route, context))
"""

from typing import Protocol

from routekit.domain.value_objects import RouteContext, RouteDescriptor


class EndpointComposerProtocol(Protocol):
    """Protocol for endpoint composers."""

    def compose(self, route: RouteDescriptor, context: RouteContext) -> None:
        """Register ``route`` on ``context.router``.

        Args:
            route: Validated route, defaults already injected.
            context: Target router plus the route's info metadata.
        """
        ...
