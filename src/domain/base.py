"""Domain base model and identifier helpers"""

import secrets
import string
import time
import uuid
from typing import Optional
from decimal import Decimal, ROUND_HALF_UP
from sqlmodel import SQLModel

MONEY_QUANT = Decimal("0.01")
_BASE36_ALPHABET = string.digits + string.ascii_uppercase


class BaseModel(SQLModel):
    """Base class for all domain entities"""
    pass


def generate_uuid() -> str:
    return str(uuid.uuid4())


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


def generate_document_number(prefix: str, now_ms: Optional[int] = None) -> str:
    """
    Generate a human-readable document number

    Format: <PREFIX>-<base36(now_ms)><6 random base36 chars> (e.g. PB-LZ3K9QW2A7F0XC).
    The random suffix keeps numbers unique when two documents are issued in
    the same millisecond; the number columns also carry a unique constraint.

    Args:
        prefix: Document prefix (PB, SI, RC, PP)
        now_ms: Timestamp in milliseconds (defaults to current time)

    Returns:
        Document number string
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(6))
    return f"{prefix}-{to_base36(now_ms)}{suffix}"


def money(value) -> Decimal:
    """Normalize a numeric value to a 2-decimal Decimal"""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)
