class HttpmsgError(Exception):
    """Base exception for the httpmsgpy library."""
    pass

# --- Construction Errors ---

class InvalidArgumentError(HttpmsgError, ValueError):
    """A constructor argument violates the HTTP/1.1 grammar or range rules."""

    def __init__(self, field: str, reason: str = ""):
        self.field = field
        self.reason = reason
        message = f"invalid {field}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

# --- Header Errors ---

class KeyNotFoundError(HttpmsgError, KeyError):
    """No header matches the requested key."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""

class HeaderMutationError(HttpmsgError):
    """A header mutation was refused. Raised only via HeaderResult.raise_for_error()."""
    pass

class HeaderIsReadOnlyError(HeaderMutationError): pass
class DuplicateKeyError(HeaderMutationError): pass
