import json
from json.decoder import scanstring
from typing import Any, Mapping, Optional

_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid json constant: {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def load_json(raw: bytes) -> Any:
    text = raw.decode("utf-8")
    return _DECODER.decode(text)


def scan_object(raw: bytes) -> tuple[dict[str, Any], dict[str, bytes]]:
    """Decode a top-level JSON object in one pass.

    Returns the decoded members together with the exact source bytes of each
    member value, so a nested fragment can be handed on without being
    re-serialized.
    """
    text = raw.decode("utf-8")
    end = len(text)
    idx = _skip_whitespace(text, 0)
    if idx >= end or text[idx] != "{":
        raise json.JSONDecodeError("expecting a json object", text, idx)

    members: dict[str, Any] = {}
    fragments: dict[str, bytes] = {}
    idx = _skip_whitespace(text, idx + 1)
    if text[idx : idx + 1] == "}":
        idx += 1
    else:
        while True:
            if text[idx : idx + 1] != '"':
                raise json.JSONDecodeError("expecting property name enclosed in double quotes", text, idx)
            key, idx = scanstring(text, idx + 1, True)
            idx = _skip_whitespace(text, idx)
            if text[idx : idx + 1] != ":":
                raise json.JSONDecodeError("expecting ':' delimiter", text, idx)
            idx = _skip_whitespace(text, idx + 1)
            value, value_end = _DECODER.raw_decode(text, idx)
            members[key] = value
            fragments[key] = text[idx:value_end].encode("utf-8")
            idx = _skip_whitespace(text, value_end)
            delimiter = text[idx : idx + 1]
            if delimiter == ",":
                idx = _skip_whitespace(text, idx + 1)
                continue
            if delimiter == "}":
                idx += 1
                break
            raise json.JSONDecodeError("expecting ',' delimiter", text, idx)

    idx = _skip_whitespace(text, idx)
    if idx != end:
        raise json.JSONDecodeError("extra data", text, idx)
    return members, fragments


def _skip_whitespace(text: str, idx: int) -> int:
    end = len(text)
    while idx < end and text[idx] in _WHITESPACE:
        idx += 1
    return idx


def as_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")


def as_optional_str(payload: Mapping[str, Any], key: str) -> Optional[str]:
    if payload.get(key) is None:
        return None
    return as_str(payload, key)


def as_int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"field {key!r} must be an integer, got {type(value).__name__}")


def as_bool(payload: Mapping[str, Any], key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise TypeError(f"field {key!r} must be a boolean, got {type(value).__name__}")


def as_str_list(payload: Mapping[str, Any], key: str) -> list[str]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list, got {type(value).__name__}")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"field {key!r} must only contain strings")
        items.append(item)
    return items


def as_mapping(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {str(k): item for k, item in value.items()}
    raise TypeError(f"field {key!r} must be an object, got {type(value).__name__}")


def as_optional_mapping(payload: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    if payload.get(key) is None:
        return None
    return as_mapping(payload, key)


def as_mapping_list(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list, got {type(value).__name__}")
    items: list[Mapping[str, Any]] = []
    for item in value:
        if not isinstance(item, Mapping):
            raise TypeError(f"field {key!r} must only contain objects")
        items.append({str(k): v for k, v in item.items()})
    return items
