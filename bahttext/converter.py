"""Render a monetary amount as Thai cheque wording ("baht text").

Contract:
- Input: int, float or Decimal (baht, satang in the two fractional digits).
- Output: Thai words only, e.g. 100.25 -> หนึ่งร้อยบาทยี่สิบห้าสตางค์
- Error: NaN/inf or non-numeric input -> InvalidAmount.

The module is pure; every table below is an immutable constant.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

Amount = Union[int, float, Decimal]


class InvalidAmount(ValueError):
    """Raised when an amount cannot be written as baht text."""


# --- Lookup tables ---------------------------------------------------------

# Generic Thai numeral words, indexed by digit value
THAI_DIGITS = (
    "ศูนย์",
    "หนึ่ง",
    "สอง",
    "สาม",
    "สี่",
    "ห้า",
    "หก",
    "เจ็ด",
    "แปด",
    "เก้า",
)

# Positional words inside a 6-digit group, indexed by distance from the group end
THAI_MAGNITUDES = ("", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน", "ล้าน")

TWENTY_PREFIX = "ยี่"
TRAILING_ONE = "เอ็ด"
MILLION = THAI_MAGNITUDES[6]
NEGATIVE = "ลบ"
BAHT = "บาท"
SATANG = "สตางค์"
EVEN = "ถ้วน"

GROUP_SIZE = 6
_SATANG_QUANTUM = Decimal("0.01")


# --- Group helpers ---------------------------------------------------------


def split_into_groups(digits: str) -> list[str]:
    """Split an integer digit string into 6-digit groups, highest group first.

    Groups are counted from the right, so only the leftmost group may be short.
    Example: "10000000680000" -> ["10", "000000", "680000"]
    """
    groups: list[str] = []
    end = len(digits)
    while end > 0:
        start = max(0, end - GROUP_SIZE)
        groups.append(digits[start:end])
        end = start
    groups.reverse()
    return groups


def read_two_digit(pair: str) -> str:
    """Read the tens/units pair at the end of a group.

    Rules:
    - Tens 2 reads ยี่สิบ, tens 1 reads สิบ alone, tens 0 is silent.
    - Units 1 after a non-zero tens reads เอ็ด (21 -> ยี่สิบเอ็ด).
    - Units after a zero tens read as a plain digit (01 -> หนึ่ง).
    """
    if len(pair) != 2 or not _is_digits(pair):
        return ""
    tens, units = int(pair[0]), int(pair[1])

    parts: list[str] = []
    if tens == 2:
        parts.append(TWENTY_PREFIX)
    elif tens > 1:
        parts.append(THAI_DIGITS[tens])
    if tens:
        parts.append(THAI_MAGNITUDES[1])

    if units == 0:
        pass
    elif tens == 0:
        parts.append(THAI_DIGITS[units])
    elif units == 1:
        parts.append(TRAILING_ONE)
    else:
        parts.append(THAI_DIGITS[units])
    return "".join(parts)


def group_to_text(group: str) -> str:
    """Convert one group of 1..6 digits; zero digits above the tens are silent.

    Returns "" for anything that is not a 1..6 digit string.
    """
    if not 1 <= len(group) <= GROUP_SIZE or not _is_digits(group):
        return ""
    if len(group) == 1:
        return THAI_DIGITS[int(group)]

    parts: list[str] = []
    for index, char in enumerate(group[:-2]):
        digit = int(char)
        if digit == 0:
            continue
        parts.append(THAI_DIGITS[digit] + THAI_MAGNITUDES[len(group) - index - 1])
    parts.append(read_two_digit(group[-2:]))
    return "".join(parts)


def satang_text(satang: str) -> str:
    """Read the two fractional digits without the สตางค์ unit ("" for "00")."""
    if len(satang) != 2 or not _is_digits(satang):
        return ""
    value = int(satang)
    if value == 0:
        return ""
    if value < 10:
        return THAI_DIGITS[value]
    return read_two_digit(satang)


# --- Amount handling -------------------------------------------------------


def split_amount(amount: Amount) -> tuple[bool, str, str]:
    """Decompose an amount into (negative, integer digits, two satang digits).

    Floats go through their shortest repr and are rounded half away from zero,
    so 1.005 -> (False, "1", "01") regardless of binary representation.
    """
    value = _to_decimal(amount)
    negative = value < 0
    # Integer digits, a possible carry digit from rounding, two satang digits
    context = Context(prec=max(28, value.adjusted() + 4), rounding=ROUND_HALF_UP)
    rounded = value.copy_abs().quantize(_SATANG_QUANTUM, context=context)
    integer_digits, _, satang = format(rounded, "f").partition(".")
    return negative, integer_digits, satang


def baht_text(amount: Amount) -> str:
    """Write an amount the way it appears on a Thai cheque.

    Examples:
        0       -> ศูนย์บาทถ้วน
        21      -> ยี่สิบเอ็ดบาทถ้วน
        -1      -> ลบหนึ่งบาทถ้วน
        100.25  -> หนึ่งร้อยบาทยี่สิบห้าสตางค์
        1000000 -> หนึ่งล้านบาทถ้วน
    """
    negative, integer_digits, satang = split_amount(amount)

    parts: list[str] = [NEGATIVE] if negative else []
    groups = split_into_groups(integer_digits)
    for index, group in enumerate(groups):
        parts.append(group_to_text(group))
        # One ล้าน after every group but the last, even if the group is all zeros
        if index < len(groups) - 1:
            parts.append(MILLION)
    parts.append(BAHT)

    satang_words = satang_text(satang)
    if satang_words:
        parts.extend((satang_words, SATANG))
    else:
        parts.append(EVEN)
    return "".join(parts)


def _is_digits(text: str) -> bool:
    # str.isdigit() also accepts Thai and other Unicode digits
    return all("0" <= char <= "9" for char in text)


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmount(f"Amount must be a real number, got {type(amount).__name__}")
    if isinstance(amount, float):
        value = Decimal(repr(amount))
    else:
        value = Decimal(amount)
    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {amount!r}")
    return value
