"""Error kinds surfaced by the price API.

Each error carries the HTTP status and the client-facing message; the web
layer renders them as ``{"error": message}``.
"""


class PriceAPIError(Exception):
    """Base class for request errors that terminate a price request."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidBodyError(PriceAPIError):
    """Payload is missing a non-empty string name or a numeric price."""

    status_code = 400
    message = "Invalid request body"


class MalformedJSONError(PriceAPIError):
    status_code = 400
    message = "Malformed JSON body"


class ItemNotFoundError(PriceAPIError):
    """No stored item matches the requested name."""

    status_code = 404
    message = "Item not found"
