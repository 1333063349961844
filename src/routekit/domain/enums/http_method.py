"""HTTP methods accepted in route descriptors."""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods a route descriptor may declare.

    Matching is case-sensitive: "GET" is valid, "get" is not.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        PATCH: Non-idempotent partial update
        DELETE: Idempotent delete operations
        ALL: Matches every method on the path
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    ALL = "ALL"
