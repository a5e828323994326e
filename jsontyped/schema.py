"""
Pydantic interop: derive decoders from BaseModel classes.

Usage:
    class User(BaseModel):
        name: str
        tags: list[str] = []

    decode_user = from_model(User)
    decode_user({"name": 1, "tags": ["a", 2]})
    # Err(Obj([("name", InvalidField(...)), ("tags", InvalidField(Arr(...)))]))
"""

from __future__ import annotations

import sys
import types
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    ForwardRef,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from pydantic import BaseModel, ValidationError

from .combinators import and_then, record
from .errors import ErrorKind, InvalidField, Obj, Val
from .fields import field, optional, optional_field
from .nonempty import NonEmpty
from .primitives import boolean, integer, number, string, value
from .structural import array, dict_of, list_of, tuple_of
from .types import DecodeResult, Decoder, Err, Ok

_Model = TypeVar("_Model", bound=BaseModel)

_PRIMITIVES: dict[Any, Decoder[Any]] = {
    str: string,
    int: integer,
    float: number,
    bool: boolean,
    Any: value,
    object: value,
}


def is_pydantic_model(model_class: Any) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        return isinstance(model_class, type) and issubclass(model_class, BaseModel)
    except TypeError:
        return False


def decoder_for(annotation: Any, owner: type | None = None) -> Decoder[Any]:
    """
    Map a type annotation onto a decoder.

    Supports str/int/float/bool/Any, Optional and ``X | None``, list, tuple
    (fixed and variadic), dict with str keys, Annotated and nested models.
    Forward references are resolved against ``owner`` and its module.

    Raises:
        TypeError: for annotations with no decoder equivalent
    """
    if isinstance(annotation, (str, ForwardRef)):
        return decoder_for(_resolve(annotation, owner), owner)

    primitive = _primitive(annotation)
    if primitive is not None:
        return primitive

    if is_pydantic_model(annotation):
        # Resolved on first use so self-referencing models work
        return lambda v: from_model(annotation)(v)

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        return decoder_for(args[0], owner)

    if origin in (Union, types.UnionType):
        members = [a for a in args if a is not type(None)]
        if len(members) == 1 and len(members) < len(args):
            return optional(decoder_for(members[0], owner))
        raise TypeError(f"Unsupported union annotation: {annotation!r}")

    if origin is list:
        return list_of(decoder_for(args[0], owner) if args else value)

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return array(decoder_for(args[0], owner))
        return tuple_of(*(decoder_for(a, owner) for a in args))

    if origin is dict:
        if args and args[0] is not str:
            raise TypeError(f"JSON object keys are strings, got {annotation!r}")
        return dict_of(decoder_for(args[1], owner) if args else value)

    if annotation is list:
        return list_of(value)
    if annotation is tuple:
        return decoder_for(tuple[Any, ...])
    if annotation is dict:
        return dict_of(value)

    raise TypeError(f"No decoder for annotation {annotation!r}")


def _resolve(ref: str | ForwardRef, owner: type | None) -> Any:
    name = ref.__forward_arg__ if isinstance(ref, ForwardRef) else ref
    if owner is not None:
        if name == owner.__name__:
            return owner
        namespace = vars(sys.modules[owner.__module__])
        if name in namespace:
            return namespace[name]
    raise TypeError(f"Cannot resolve forward reference {name!r}")


def _primitive(annotation: Any) -> Decoder[Any] | None:
    try:
        return _PRIMITIVES.get(annotation)
    except TypeError:
        # Unhashable annotation
        return None


@lru_cache(maxsize=128)
def from_model(model_class: Type[_Model]) -> Decoder[_Model]:
    """
    Build a decoder for a pydantic model.

    Each field is decoded under its alias (or name), which is also the key
    handed to ``model_validate``. Required fields use
    :func:`field`; fields with a default use :func:`optional_field` and
    substitute the default when the key is absent or null. All field
    failures accumulate into one ``Obj`` error, then the decoded values are
    passed to ``model_validate`` so model validators still run.
    """
    if not is_pydantic_model(model_class):
        raise TypeError(f"Expected a pydantic model, got {model_class!r}")

    decoders: dict[str, Decoder[Any]] = {}
    for name, info in model_class.model_fields.items():
        key = info.alias or name
        decoder = decoder_for(info.annotation, model_class)
        if info.is_required():
            decoders[key] = field(key, decoder)
        else:
            default = info.get_default(call_default_factory=True)
            decoders[key] = _with_default(optional_field(key, decoder), default)

    decode_fields = record(dict, **decoders)

    def validate(values: dict[str, Any]) -> Decoder[_Model]:
        return lambda raw: _validate(model_class, values, raw)

    return and_then(decode_fields, validate)


def _with_default(decoder: Decoder[Any], default: Any) -> Decoder[Any]:
    def decode(value: Any) -> DecodeResult[Any]:
        result = decoder(value)
        if isinstance(result, Ok) and result.value is None:
            return Ok(default)
        return result

    return decode


def _validate(
    model_class: Type[_Model], values: dict[str, Any], raw: Any
) -> DecodeResult[_Model]:
    try:
        return Ok(model_class.model_validate(values))
    except ValidationError as e:
        return Err(_from_validation_error(model_class, e, raw))


def _from_validation_error(
    model_class: Type[BaseModel], error: ValidationError, raw: Any
) -> Obj:
    """One InvalidField per failing top-level field, first error wins."""
    entries: dict[str, InvalidField] = {}
    for detail in error.errors():
        loc = detail.get("loc") or (model_class.__name__,)
        key = str(loc[0])
        if key not in entries:
            entries[key] = InvalidField(
                Val(ErrorKind.VALIDATION_FAILED, detail.get("input", raw))
            )
    return Obj(NonEmpty.from_iterable(entries.items()))
