import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: str | None) -> int | None:
    """Parse a base-10 integer the way JavaScript's ``parseInt`` does.

    Leading whitespace and a sign are accepted and parsing stops at the first
    non-digit, so ``"12abc"`` gives 12. Input without leading digits gives
    ``None``, the not-a-number sentinel.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))
