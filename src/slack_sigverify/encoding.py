from typing import Union


def encode_text(value: Union[str, bytes]) -> bytes:
    """Encode header or secret text back to bytes without raising.

    Surrogate-escaped header bytes round-trip to their wire form; any other
    lone surrogate is passed through so the value simply fails to match.
    """
    if not isinstance(value, str):
        return bytes(value)
    try:
        return value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", "surrogatepass")
