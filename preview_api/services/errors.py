class MetadataFetchError(Exception):
    """A page could not be fetched; ``message`` is shown to the user as is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(MetadataFetchError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Netzwerkfehler: {detail}")


class HTTPStatusError(MetadataFetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class BodyReadError(MetadataFetchError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Fehler beim Lesen: {detail}")


class FeedbackError(Exception):
    """Feedback could not be delivered to the issue tracker."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
