"""
Random value and identifier generation.
"""

import os
import random
import string
import time
import uuid
from typing import List, Literal

UUIDVersion = Literal[4, 7]

DEFAULT_CHARACTERS = string.ascii_uppercase + string.ascii_lowercase + string.digits


def _uuid7() -> uuid.UUID:
    # 48-bit ms timestamp, 4-bit version, 12+62 random bits, RFC 4122 variant
    ms = time.time_ns() // 1_000_000
    raw = bytearray(ms.to_bytes(6, "big") + os.urandom(10))
    raw[6] = (raw[6] & 0x0F) | 0x70
    raw[8] = (raw[8] & 0x3F) | 0x80
    return uuid.UUID(bytes=bytes(raw))


def generate_uuid(version: UUIDVersion = 4) -> str:
    """
    Generate a UUID string.

    Version 7 ids sort by creation time, version 4 ids are fully random.
    """
    if version == 7:
        return str(_uuid7())
    if version == 4:
        return str(uuid.uuid4())
    raise ValueError(f"unsupported UUID version: {version}")


def generate_random_string(length: int, characters: str = DEFAULT_CHARACTERS) -> str:
    """Pick length characters at random from characters."""
    return "".join(random.choice(characters) for _ in range(length))


def generate_random_float(min: float, max: float) -> float:
    """Random float in [min, max]."""
    return random.uniform(min, max)


def generate_random_integer(min: int, max: int) -> int:
    """Random integer in [min, max], both ends included."""
    return random.randint(min, max)


def generate_sequence(start: float, stop: float, step: float = 1) -> List[float]:
    """
    Numbers from start to stop (inclusive) spaced by step.

    Example:
        generate_sequence(1, 10, 3) -> [1, 4, 7, 10]
    """
    if step == 0:
        raise ValueError("step must not be zero")
    count = int((stop - start) / step) + 1
    return [start + i * step for i in range(max(count, 0))]
