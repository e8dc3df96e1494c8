class FetchError(Exception):
    """Base class for every way a profile lookup can fail."""

    kind = "error"

    def __init__(self, username: str, message: str):
        super().__init__(message)
        self.username = username
        self.message = message


class NotFoundError(FetchError):
    """The user (or their repository listing) does not exist."""

    kind = "not_found"

    def __init__(self, username: str):
        super().__init__(username, f"GitHub user not found: {username}")


class NetworkError(FetchError):
    """The service could not be reached or refused to serve the request."""

    kind = "network"

    def __init__(self, username: str, message: str, status_code: int | None = None):
        super().__init__(username, message)
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """The service answered with a payload of an unexpected shape."""

    kind = "malformed_response"
