"""
Error taxonomy for the coin ranking client.
"""

from enum import StrEnum


class AppError(Exception):
    """Base error for the coin ranking client."""


class NetworkErrorKind(StrEnum):
    """Failures that happen during or after network I/O."""

    NO_INTERNET = "no_internet"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    UNAUTHORIZED = "unauthorized"
    DECODING_ERROR = "decoding_error"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"


class RequestErrorKind(StrEnum):
    """Failures that happen while building a request, before any I/O."""

    INVALID_URL = "invalid_url"
    INVALID_BODY = "invalid_body"


NETWORK_ERROR_MESSAGES: dict[NetworkErrorKind, str] = {
    NetworkErrorKind.NO_INTERNET: "No internet connection.",
    NetworkErrorKind.TIMEOUT: "The request timed out. Please check your connection and try again.",
    NetworkErrorKind.SERVER_ERROR: "The server encountered an error. Please try again later.",
    NetworkErrorKind.UNAUTHORIZED: "Unauthorized access. Please check your credentials.",
    NetworkErrorKind.DECODING_ERROR: "Failed to decode response data. Please try again later.",
    NetworkErrorKind.INVALID_RESPONSE: "The server's response was invalid. Please try again.",
    NetworkErrorKind.UNKNOWN: "An unknown error occurred. Please try again.",
}


class NetworkError(AppError):
    """Raised when fetching or decoding a response fails."""

    def __init__(
        self,
        kind: NetworkErrorKind,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(NETWORK_ERROR_MESSAGES[kind])
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def no_internet(cls, cause: BaseException | None = None) -> "NetworkError":
        return cls(NetworkErrorKind.NO_INTERNET, cause=cause)

    @classmethod
    def timeout(cls, cause: BaseException | None = None) -> "NetworkError":
        return cls(NetworkErrorKind.TIMEOUT, cause=cause)

    @classmethod
    def server_error(cls, status_code: int) -> "NetworkError":
        return cls(NetworkErrorKind.SERVER_ERROR, status_code=status_code)

    @classmethod
    def unauthorized(cls) -> "NetworkError":
        return cls(NetworkErrorKind.UNAUTHORIZED)

    @classmethod
    def decoding_error(cls, cause: BaseException) -> "NetworkError":
        return cls(NetworkErrorKind.DECODING_ERROR, cause=cause)

    @classmethod
    def invalid_response(cls) -> "NetworkError":
        return cls(NetworkErrorKind.INVALID_RESPONSE)

    @classmethod
    def unknown(cls, cause: BaseException | None = None) -> "NetworkError":
        return cls(NetworkErrorKind.UNKNOWN, cause=cause)

    def __repr__(self) -> str:
        if self.status_code is not None:
            return f"NetworkError({self.kind}, status_code={self.status_code})"
        return f"NetworkError({self.kind})"


class RequestError(AppError):
    """Raised when a request descriptor cannot be turned into a request."""

    def __init__(self, kind: RequestErrorKind, detail: str) -> None:
        match kind:
            case RequestErrorKind.INVALID_URL:
                message = f"The URL is invalid: {detail}. Please check the URL and try again."
            case RequestErrorKind.INVALID_BODY:
                message = f"The body of the request is invalid: {detail}. Please check the body and try again."
            case _:
                message = detail
        super().__init__(message)
        self.kind = kind
        self.detail = detail

    @classmethod
    def invalid_url(cls, detail: str) -> "RequestError":
        return cls(RequestErrorKind.INVALID_URL, detail)

    @classmethod
    def invalid_body(cls, detail: str) -> "RequestError":
        return cls(RequestErrorKind.INVALID_BODY, detail)


class StorageError(AppError):
    """Raised when the favorites database cannot be read or written."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail
