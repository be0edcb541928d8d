"""Display helpers shared by templates and API consumers."""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

CURRENCY_SYMBOL = "₹"

# Prices above this are assumed to be stored in paise
MINOR_UNIT_THRESHOLD = 1000


def _flatten_classes(inputs: Any) -> list[str]:
    if not inputs:
        return []
    if isinstance(inputs, str):
        return inputs.split()
    if isinstance(inputs, Mapping):
        return [name for key, enabled in inputs.items() if enabled for name in str(key).split()]
    if isinstance(inputs, (list, tuple, set)):
        return [name for item in inputs for name in _flatten_classes(item)]
    return str(inputs).split()


def cn(*inputs: Any) -> str:
    """Merge CSS class names.

    Accepts strings, nested sequences and ``{class: condition}`` mappings,
    drops falsy entries, and keeps the last occurrence of a repeated class.
    Only identical names are merged: Tailwind utilities that conflict
    without being equal both survive, so ``cn("px-2", "px-4")`` is
    ``"px-2 px-4"`` and the stylesheet order decides which one applies.

        >>> cn("px-4 py-2", {"hidden": False, "block": True}, ["px-4"])
        'py-2 block px-4'
    """
    classes = _flatten_classes(inputs)
    merged: dict[str, None] = {}
    for name in classes:
        merged.pop(name, None)
        merged[name] = None
    return " ".join(merged)


def _group_indian(digits: str) -> str:
    """Insert separators in lakh/crore style: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_price(price: int | float) -> str:
    """Format a price as whole rupees, e.g. ``format_price(500) == "₹500"``.

    Stored prices carry no unit, so anything above 1000 is taken to be in
    paise and divided by 100: ``format_price(1500) == "₹15"``. A genuine
    ₹1500 price is indistinguishable from 1500 paise and will be rendered
    as ₹15.

    NaN and infinities render as ``"₹NaN"`` and ``"₹∞"`` (with a leading
    ``"-"`` when negative) instead of raising.
    """
    amount = Decimal(str(price))
    if amount.is_nan():
        return f"{CURRENCY_SYMBOL}NaN"
    if amount.is_infinite():
        sign = "-" if amount.is_signed() else ""
        return f"{sign}{CURRENCY_SYMBOL}∞"

    if amount > MINOR_UNIT_THRESHOLD:
        amount = amount / 100

    rounded = amount.quantize(Decimal(1), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(abs(int(rounded))))}"
