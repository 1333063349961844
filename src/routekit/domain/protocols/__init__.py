"""Domain protocols (PEP 544 structural interfaces)."""

from routekit.domain.protocols.endpoint_composer_protocol import (
    EndpointComposerProtocol,
)

__all__ = ["EndpointComposerProtocol"]
