"""Map HTTP status codes onto the client error taxonomy."""

from __future__ import annotations

from http import HTTPStatus

from qiita_client.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    QiitaClientError,
    UnknownStatusError,
)
from qiita_client.core.types import ResourceRef, StatusOutcome


def error_for_status(
    status_code: int, resource: ResourceRef | None = None
) -> QiitaClientError | None:
    """Return the error a status code stands for, or None for a success status."""
    if status_code in (HTTPStatus.OK, HTTPStatus.NO_CONTENT):
        return None

    if status_code == HTTPStatus.UNAUTHORIZED:
        return AuthenticationError(
            f"unauthorized. you may have provided no/invalid access token (status = {status_code})",
            status_code=status_code,
            resource=resource,
        )
    if status_code == HTTPStatus.NOT_FOUND:
        target = str(resource) if resource is not None else "resource"
        return NotFoundError(
            f"{target} not found (status = {status_code})",
            status_code=status_code,
            resource=resource,
        )
    return UnknownStatusError(
        f"unknown error (status = {status_code})",
        status_code=status_code,
        resource=resource,
    )


def classify_status(status_code: int, resource: ResourceRef | None = None) -> StatusOutcome:
    """Decide what to do with a response before its body is touched.

    200 means decode the body, 204 means success without a body; every
    other status raises the matching error.
    """
    error = error_for_status(status_code, resource)
    if error is not None:
        raise error
    if status_code == HTTPStatus.NO_CONTENT:
        return StatusOutcome.NO_CONTENT
    return StatusOutcome.DECODE
