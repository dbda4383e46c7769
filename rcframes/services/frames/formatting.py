"""Number, label and query-value formatting for display frames."""

import re
from decimal import ROUND_HALF_UP, Context, Decimal

MAX_PRECISION = 6

# Enough digits for any finite double plus the fraction part
_DECIMAL_CONTEXT = Context(prec=400)

_INTEGER_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)
_SEPARATORS = re.compile(r"[_.-]+")
_WORD_START = re.compile(r"\b\w", re.ASCII)
_CURRENCY_UNIT = re.compile(
    r"^[€£$¥₹₽₩₺₫₴฿₦₱₪₭₡₲₵₸₮₤₯₠₢₣₥₨]+$"
)


def format_number(value: float, fraction_digits: int) -> str:
    """Format with en-US grouping and exactly ``fraction_digits`` decimals.

    Rounds half away from zero on the shortest decimal form of ``value``,
    so ``1.005`` at two digits is ``1.01``.
    """
    quantum = Decimal(1).scaleb(-fraction_digits)
    rounded = Decimal(repr(value)).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    return f"{rounded:,.{fraction_digits}f}"


def format_with_unit(value: float, unit: object, precision: int) -> str:
    """Format a number with its upstream unit.

    Empty and ``#`` units render the bare number, currency symbols are
    prefixed without a space, anything else is appended after a space.
    """
    formatted = format_number(value, precision)
    unit_text = unit.strip() if isinstance(unit, str) else ""

    if not unit_text or unit_text == "#":
        return formatted

    if _CURRENCY_UNIT.match(unit_text):
        return f"{unit_text}{formatted}"

    return f"{formatted} {unit_text}"


def prettify_metric_name(metric: str) -> str:
    """Turn ``new_customers`` into ``New Customers``."""
    spaced = _SEPARATORS.sub(" ", metric)
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced).strip()


def parse_int_prefix(raw: str | None) -> int | None:
    """Parse the leading integer of ``raw`` the way ``parseInt`` does.

    ``"12px"`` gives 12, ``"abc"`` and ``""`` give None.
    """
    if raw is None:
        return None

    match = _INTEGER_PREFIX.match(raw.lstrip())
    if not match:
        return None
    return int(match.group(0))


def parse_precision(raw: str | None) -> int:
    """Parse a precision override; anything outside 0-6 becomes 0."""
    parsed = parse_int_prefix(raw)
    if parsed is not None and 0 <= parsed <= MAX_PRECISION:
        return parsed
    return 0


def parse_non_negative_integer(raw: str | None) -> int | None:
    """Parse a goal target; negative or unparseable means absent."""
    parsed = parse_int_prefix(raw)
    if parsed is None or parsed < 0:
        return None
    return parsed
