"""Redemption code generation.

Codes look like ``ING-LZ3K9Q2A-7F0XQ2MB``: a fixed prefix, the issue time in
milliseconds and a random part, all base 36 and uppercase.
"""

import secrets
import string
import time

ALPHABET = string.digits + string.ascii_uppercase


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("Only non-negative numbers can be encoded")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


class TicketCodeGenerator:
    """Produces human-presentable redemption codes.

    Eight random base 36 characters give about 2.8e12 values per
    millisecond, so collisions are not expected in practice; callers still
    treat one as retryable.
    """

    def __init__(self, prefix: str = "ING", random_length: int = 8) -> None:
        if random_length < 1:
            raise ValueError("random_length must be positive")
        self._prefix = prefix.upper()
        self._random_length = random_length

    def generate(self) -> str:
        millis = time.time_ns() // 1_000_000
        random_part = "".join(secrets.choice(ALPHABET) for _ in range(self._random_length))
        return f"{self._prefix}-{to_base36(millis)}-{random_part}"
