class ProductNameError(ValueError):
    """Raised when a product name fails validation. `kind` is a ProductNameErrorKind."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message


class UpstreamFailure(Exception):
    """Any failure talking to the text generation service."""
