from __future__ import annotations

import random

"""Random CODE / DECODE values for upload scenarios."""

__all__ = [
    "CODE_CHARSET",
    "generate_random_value",
]

# 紛らわしい文字 (x, y, z, 0) は含めない
CODE_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvw123456789"


def generate_random_value(length: int = 5, rng: random.Random | None = None) -> str:
    if length < 0:
        raise ValueError(f"length must be >= 0: {length}")
    chooser = rng or random
    return "".join(chooser.choice(CODE_CHARSET) for _ in range(length))
