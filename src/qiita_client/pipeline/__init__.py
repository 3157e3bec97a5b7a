from qiita_client.pipeline.classifier import classify_status, error_for_status
from qiita_client.pipeline.decoder import decode_body, response_scope
from qiita_client.pipeline.executor import Executor
from qiita_client.pipeline.pagination import (
    extract_pagination_info,
    parse_link_header,
    validate_pagination_limit,
)
from qiita_client.pipeline.request import (
    RequestDescriptor,
    build_request,
    encode_query,
    join_url,
    resource_path,
)

__all__ = [
    "Executor",
    "RequestDescriptor",
    "build_request",
    "classify_status",
    "decode_body",
    "encode_query",
    "error_for_status",
    "extract_pagination_info",
    "join_url",
    "parse_link_header",
    "resource_path",
    "response_scope",
    "validate_pagination_limit",
]
