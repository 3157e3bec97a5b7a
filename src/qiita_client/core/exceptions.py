from __future__ import annotations

from qiita_client.core.types import ErrorKind, ResourceRef


class QiitaClientError(Exception):
    """Base exception for all client errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        resource: ResourceRef | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource = resource


class InvalidRequestError(QiitaClientError):
    """Base URL or relative path cannot be composed into a valid URL."""

    kind = ErrorKind.INVALID_REQUEST


class InvalidParameterError(QiitaClientError):
    """Pagination parameters outside the documented bounds."""

    kind = ErrorKind.INVALID_PARAMETER


class TransportFailure(QiitaClientError):
    """Network failure or transport deadline exceeded."""

    kind = ErrorKind.TRANSPORT_FAILURE


class DecodeError(QiitaClientError):
    """Response body is not valid JSON or does not match the expected shape."""

    kind = ErrorKind.DECODE_FAILURE


class MalformedPaginationError(QiitaClientError):
    """Total-Count or Link headers cannot be parsed."""

    kind = ErrorKind.MALFORMED_PAGINATION


class AuthenticationError(QiitaClientError):
    """Missing or invalid access token (401)."""

    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(QiitaClientError):
    """Requested resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class UnknownStatusError(QiitaClientError):
    """Any status code the client has no specific handling for."""

    kind = ErrorKind.UNKNOWN
