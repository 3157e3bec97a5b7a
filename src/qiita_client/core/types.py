from dataclasses import dataclass
from enum import StrEnum


class ResourceKind(StrEnum):
    USER = "user"
    ITEM = "item"
    TAG = "tag"
    COMMENT = "comment"


class ErrorKind(StrEnum):
    INVALID_REQUEST = "invalid-request"
    INVALID_PARAMETER = "invalid-parameter"
    TRANSPORT_FAILURE = "transport-failure"
    DECODE_FAILURE = "decode-failure"
    MALFORMED_PAGINATION = "malformed-pagination"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not-found"
    UNKNOWN = "unknown"


class TagSort(StrEnum):
    COUNT = "count"
    NAME = "name"


class StatusOutcome(StrEnum):
    DECODE = "decode"
    NO_CONTENT = "no_content"


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """Identity of the resource a request targets, used in error messages."""

    kind: ResourceKind
    identifier: str

    def __str__(self) -> str:
        return f"{self.kind} with id '{self.identifier}'"
