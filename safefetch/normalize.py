"""
Conversion of caught failures into synthesized error responses.

A failure may be a string, an exception, a mapping or any other object.
Each is reduced to a summary (the response's reason phrase) and a record
serialized as the JSON body.
"""
import json
import logging
import math
import traceback
from typing import Any, Dict, List, Mapping, Set

from .response import ErrorResponse

logger = logging.getLogger("safefetch.normalize")

UNKNOWN_ERROR = "Unknown error"


def normalize(failure: Any) -> ErrorResponse:
    """Build the response returned in place of a failed transport call. Never raises."""
    summary = summarize(failure)
    try:
        body = serialize_record(build_record(failure))
    except Exception as e:
        logger.debug(f"Error record not serializable ({e!r}); using message only")
        body = json.dumps({"message": summary})
    return ErrorResponse(summary, body)


def summarize(failure: Any) -> str:
    if isinstance(failure, str):
        return failure
    return _read_message(failure) or UNKNOWN_ERROR


def build_record(failure: Any) -> Dict[str, Any]:
    """
    Collect the JSON-bound fields of a failure.
    Attributes that raise on access and callable values are left out.
    """
    if isinstance(failure, str):
        return {"message": failure}

    if isinstance(failure, Mapping):
        return {str(k): v for k, v in failure.items() if not callable(v)}

    record: Dict[str, Any] = {}
    if isinstance(failure, BaseException):
        record["message"] = _exception_text(failure)
        record["name"] = type(failure).__name__
        record["stack"] = "".join(
            traceback.format_exception(type(failure), failure, failure.__traceback__)
        )

    for name in _own_attribute_names(failure):
        try:
            value = getattr(failure, name)
        except Exception:
            continue
        if callable(value):
            continue
        record[name] = value
    return record


def serialize_record(record: Dict[str, Any]) -> str:
    """
    Render a record as JSON text.
    Raises ValueError on cycles. NaN and infinities become null.
    """
    return json.dumps(_to_json(record, set()), allow_nan=False)


def _to_json(value: Any, path: Set[int]) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    # ids of the containers between the root and this value
    marker = id(value)
    if marker in path:
        raise ValueError("Circular reference detected")
    path.add(marker)
    try:
        if isinstance(value, Mapping):
            return {str(k): _to_json(v, path) for k, v in value.items() if not callable(v)}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [None if callable(item) else _to_json(item, path) for item in value]
        if isinstance(value, BaseException) or _own_attribute_names(value):
            return _to_json(build_record(value), path)
        return str(value)
    finally:
        path.discard(marker)


def _read_message(failure: Any) -> str:
    try:
        if isinstance(failure, Mapping):
            message = failure.get("message")
        else:
            message = getattr(failure, "message", None)
            if message is None and isinstance(failure, BaseException):
                message = str(failure)
        if message is None:
            return ""
        return message if isinstance(message, str) else str(message)
    except Exception:
        return ""


def _exception_text(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return ""


def _own_attribute_names(obj: Any) -> List[str]:
    """Public instance attributes, from __dict__ and any __slots__ in the MRO."""
    names: List[str] = []
    try:
        names.extend(vars(obj))
    except TypeError:
        pass
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in names:
                names.append(name)
    return [name for name in names if not name.startswith("_")]
