from dataclasses import dataclass
from typing import Union

from .encoding import encode_text


_DEFAULT_TOLERANCE_SECONDS = 300


@dataclass(frozen=True)
class VerifierConfig:
    signing_secret: Union[str, bytes]
    tolerance_seconds: int = _DEFAULT_TOLERANCE_SECONDS
    reject_malformed_timestamp: bool = False
    use_rtm_registry: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.tolerance_seconds, bool) or not isinstance(self.tolerance_seconds, int):
            raise ValueError("tolerance_seconds must be an integer")
        if self.tolerance_seconds < 0:
            raise ValueError("tolerance_seconds must not be negative")

    @property
    def secret_bytes(self) -> bytes:
        return encode_text(self.signing_secret)
