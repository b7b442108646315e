"""
Exception hierarchy for the Dairycart client.
Transport failures, codec failures and failures reported by the store API are kept apart
so callers can decide retry or abort policy themselves.
"""


class DairyClientError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(DairyClientError):
    pass


class MalformedURLError(DairyClientError):
    pass


class TransportError(DairyClientError):
    """The HTTP call could not be completed (DNS, refused connection, timeout)."""


class LoginTransportError(TransportError):
    pass


class NoCredentialReturnedError(DairyClientError):
    """Login reached the store but no `dairycart` session cookie came back."""


class NilDestinationError(DairyClientError):
    pass


class NotAReferenceError(DairyClientError):
    pass


class EncodeError(DairyClientError):
    pass


class DecodeError(DairyClientError):
    pass


class APIError(DairyClientError):
    """The store API reported a failure in its error envelope."""

    def __init__(self, status: int, message: str):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


class DeleteFailedError(DairyClientError):
    def __init__(self, status_code: int):
        super().__init__(f"delete failed, status returned: {status_code}")
        self.status_code = status_code
