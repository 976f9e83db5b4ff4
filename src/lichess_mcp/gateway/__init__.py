"""Invocation gateway: validation, request building, transport and decoding."""

from .dispatcher import MISSING_TOKEN_MESSAGE, Dispatcher, InvocationResult, TextContent
from .mapper import StatusMessage, error_code_for, map_status
from .normalize import decode_ndjson, normalize
from .request import (
    AuthPolicy,
    FormBody,
    HttpMethod,
    JsonBody,
    RequestSpec,
    TextBody,
    endpoint,
    form,
    json_body,
    query,
    text_body,
)
from .response import ContentKind, Json, NormalizedResult, RawResponse, RecordStream, Text
from .tool import ToolMetadata, ToolSpec
from .transport import DEFAULT_BASE_URL, LichessClient
from .validation import (
    LICHESS_EPOCH_MS,
    FixedId,
    FreeText,
    Identifier,
    NoParams,
    Number,
    Timestamp,
    ToolParams,
    id_list,
    validate_arguments,
)

__all__ = [
    # Dispatch
    "Dispatcher", "InvocationResult", "TextContent", "MISSING_TOKEN_MESSAGE",
    "ToolMetadata", "ToolSpec",
    # Validation
    "ToolParams", "NoParams", "validate_arguments", "Identifier", "FreeText", "FixedId",
    "Timestamp", "Number", "id_list", "LICHESS_EPOCH_MS",
    # Requests
    "RequestSpec", "HttpMethod", "AuthPolicy", "FormBody", "JsonBody", "TextBody",
    "endpoint", "query", "form", "json_body", "text_body",
    # Transport & responses
    "LichessClient", "DEFAULT_BASE_URL", "RawResponse", "ContentKind",
    "NormalizedResult", "Text", "Json", "RecordStream", "normalize", "decode_ndjson",
    # Errors
    "map_status", "error_code_for", "StatusMessage",
]
