from .combinators import (
    alt,
    and_then,
    apply,
    fail,
    fmap,
    lift,
    one_of,
    record,
    succeed,
)
from .context import decoding_context, is_strict
from .core import decode, decode_json
from .errors import (
    MISSING_FIELD,
    Arr,
    DecodeError,
    ErrorKind,
    FieldError,
    InvalidField,
    MissingField,
    Obj,
    ParseError,
    Val,
    error_paths,
    format_error,
    merge,
)
from .fields import field, field_with_fallback, optional, optional_field, path
from .nonempty import NonEmpty, cons
from .observability import get_logger
from .primitives import boolean, integer, null, number, string, value
from .schema import decoder_for, from_model
from .structural import array, at, dict_of, list_of, tuple_of
from .types import (
    DecodeResult,
    Decoder,
    Err,
    JsonValue,
    Ok,
    map_err,
    recover_with,
    with_default,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "map_err",
    "recover_with",
    "with_default",
    "Decoder",
    "DecodeResult",
    "JsonValue",
    # Errors
    "ErrorKind",
    "Val",
    "Arr",
    "Obj",
    "MissingField",
    "InvalidField",
    "MISSING_FIELD",
    "ParseError",
    "FieldError",
    "DecodeError",
    "merge",
    "error_paths",
    "format_error",
    "NonEmpty",
    "cons",
    # Primitives
    "string",
    "number",
    "integer",
    "boolean",
    "null",
    "value",
    # Structural
    "array",
    "list_of",
    "at",
    "tuple_of",
    "dict_of",
    # Fields
    "field",
    "field_with_fallback",
    "optional_field",
    "optional",
    "path",
    # Combinators
    "fmap",
    "apply",
    "alt",
    "one_of",
    "and_then",
    "succeed",
    "fail",
    "lift",
    "record",
    # Schema
    "from_model",
    "decoder_for",
    # Entry points
    "decode",
    "decode_json",
    "decoding_context",
    "is_strict",
    "get_logger",
]
