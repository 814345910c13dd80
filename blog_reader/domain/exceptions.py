"""Domain-specific exceptions — framework-independent."""


class RequestFailedError(Exception):
    """Raised when a call to the blog API does not complete successfully.

    Covers non-success statuses (not-found included), transport failures and
    unusable payloads alike. Callers never see a finer-grained distinction.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
