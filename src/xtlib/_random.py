from __future__ import annotations

import dataclasses
import secrets

DEFAULT_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclasses.dataclass
class RandomString:
    """Cryptographically secure random string generator.

    Characters are drawn uniformly from ``charset`` using the operating
    system's CSPRNG (``secrets``).
    """

    charset: str = DEFAULT_CHARSET

    def generate(self, length: int) -> str:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if not self.charset:
            raise ValueError("charset must not be empty")
        return "".join(secrets.choice(self.charset) for _ in range(length))


def new_random_string() -> RandomString:
    return RandomString(charset=DEFAULT_CHARSET)
