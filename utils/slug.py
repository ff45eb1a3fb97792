"""
Slug generation for catalog entities.

Categories use the bare slugified name and rely on a uniqueness pre-check.
Products append a base-36 timestamp plus a short random fragment so two
products with the same name never collide and no retry loop is needed.
"""

import re
import secrets
import time

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_DASH_RUNS = re.compile(r"-+")


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def slugify(name: str) -> str:
    """
    >>> slugify("  Gaming Laptops & Accessories ")
    'gaming-laptops-accessories'
    """
    slug = _NON_WORD.sub("", name.lower().strip())
    slug = _SEPARATORS.sub("-", slug)
    return _DASH_RUNS.sub("-", slug)


def product_slug(name: str) -> str:
    suffix = to_base36(time.time_ns() // 1_000_000) + "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(3))
    return f"{slugify(name)}-{suffix}"
