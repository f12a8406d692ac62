"""
Custom application exceptions.

Only document-level failures are raised. Missing or malformed
metadata fields inside a valid document are value states
(``None`` / ``nan``) and never show up here.
"""


class CatalogError(Exception):
    """Base exception for the WFS catalog."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class TransportError(CatalogError):
    """Raised when a GetCapabilities document cannot be retrieved."""

    def __init__(self, url: str, reason: str = "Unknown error"):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to retrieve '{url}': {reason}")


class PermanentTransportError(TransportError):
    """
    Failure that will not go away by asking again.

    Examples: 404 Not Found, 403 Forbidden, DNS for non-existent domain,
    redirect loops.
    """
    pass


class TransientTransportError(TransportError):
    """
    Failure that might succeed on a subsequent attempt.

    Examples: 503 Service Unavailable, 429 Too Many Requests,
    connection timeout, connection reset.
    """
    pass


class InvalidCapabilitiesDocument(CatalogError):
    """
    Raised when a retrieved document is not a WFS GetCapabilities response.

    Carries the URL plus a short ``title`` and a ``message`` meant to be
    shown to the end user as the reason a data source could not be added.
    """

    title = "Invalid GetCapabilities"

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            f"The URL {url} was retrieved successfully but it does not appear "
            "to be a valid Web Feature Service (WFS) GetCapabilities document."
            "\n\nEither the catalog file has been set up incorrectly, "
            "or the server address has changed."
        )
