"""Simplifier-specific exceptions for error handling."""


class SimplifierError(Exception):
    """Base exception for all Simplifier operations."""
    pass


class SimplifierAPIError(SimplifierError):
    """HTTP or envelope error from the Simplifier API.
    
    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class LoginMethodNotFoundError(SimplifierError):
    """Login method lookup failed - name does not exist."""
    pass


class SimplifierConnectionError(SimplifierError):
    """The Simplifier instance could not be reached (connection error, timeout).
    
    Attributes:
        endpoint: URL that was requested
    """
    
    def __init__(self, endpoint: str, cause: Exception):
        self.endpoint = endpoint
        super().__init__(f"Could not reach {endpoint}: {cause}")
