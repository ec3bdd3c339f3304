"""Extraction of payload data from backend JSON responses."""

from __future__ import annotations

import base64
import binascii
import dataclasses
import json
from typing import Any, Callable, TypeVar

from .errors import SdkError, err_unmarshal_json

T = TypeVar("T")

_SCALARS: dict[str, type] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "bytes": bytes,
}


def _field_hint(field: dataclasses.Field) -> Any:
    annotation = field.type
    if isinstance(annotation, str):
        return _SCALARS.get(annotation.strip())
    if annotation in _SCALARS.values():
        return annotation
    return None


def _coerce(value: Any, hint: Any, name: str) -> Any:
    if hint is bytes and isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise SdkError(f"field {name}: invalid base64 data") from exc
    checks = {
        bool: lambda v: isinstance(v, bool),
        int: lambda v: isinstance(v, int) and not isinstance(v, bool),
        float: lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
        str: lambda v: isinstance(v, str),
        bytes: lambda v: isinstance(v, bytes),
    }
    check = checks.get(hint)
    if check is not None and not check(value):
        raise SdkError(f"field {name}: cannot decode {type(value).__name__} into {hint.__name__}")
    return float(value) if hint is float else value


def _decode(data: Any, target: Callable[..., T]) -> T:
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        if not isinstance(data, dict):
            raise SdkError(f"cannot decode {type(data).__name__} into {target.__name__}")
        lowered = {str(key).lower(): value for key, value in data.items()}
        kwargs = {}
        for field in dataclasses.fields(target):
            if not field.init:
                continue
            if field.name in data:
                value = data[field.name]
            elif field.name.lower() in lowered:
                value = lowered[field.name.lower()]
            else:
                continue
            if value is None:
                continue
            kwargs[field.name] = _coerce(value, _field_hint(field), field.name)
        try:
            return target(**kwargs)
        except TypeError as exc:
            raise SdkError(f"cannot build {target.__name__}: {exc}") from exc
    try:
        return target(data)
    except (TypeError, ValueError) as exc:
        raise SdkError(f"cannot decode response data: {exc}") from exc


def _loads(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise err_unmarshal_json(str(exc)) from exc


def unmarshal_list_response(raw: bytes | str, target: Callable[..., T]) -> T:
    """Decode the ``data.data`` payload of a list response into ``target``.

    ``target`` is a dataclass, built from the payload's fields, or any
    callable taking the decoded payload.
    """
    response = _loads(raw)
    if not isinstance(response, dict):
        raise SdkError("failed. list response must be a JSON object")
    data = response.get("data")
    if data is None:
        inner = None
    elif isinstance(data, dict):
        inner = data.get("data")
    else:
        raise SdkError("failed. list response data must be a JSON object")
    return _decode(inner, target)


def get_data_from_base_response(raw: bytes | str, target: Callable[..., T]) -> T:
    """Decode the trailing ``data`` field of a base response into ``target``."""
    if isinstance(raw, str):
        raw = raw.encode()
    index = raw.find(b"data")
    if index == -1 or index + 6 > len(raw) - 1:
        raise SdkError("failed. invalid format of JSON data received")
    return _decode(_loads(raw[index + 6:-1]), target)