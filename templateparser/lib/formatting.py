"""
Value formatting for substituted tokens.

Turns a resolved value into the text that replaces its token, applying the
token's optional format argument when the value's type supports one.

Supported format dialects:
- Dates and times (`datetime`, `date`, `time`): .NET-style custom patterns
  such as "d MMMM yyyy" or "yyyy-MM-dd HH:mm", and the single-character
  standard formats d D f F g G M m Y y s u o O t T (invariant culture).
- Numbers (`int`, `float`, `Decimal`): .NET standard numeric formats
  (C D E F G N P R X with optional precision, e.g. "N2"), custom digit
  patterns ("#,##0.00", "0.0 %"), and otherwise Python's format-spec
  mini-language (",.2f").
- Anything else with its own `__format__`: the format argument is passed to
  `format()`.

Strings, bytes, booleans and None are never formatted. A format argument
that a value cannot take is ignored and the plain rendering is used; no
function here raises.

Month and day names come from the `calendar` module and follow the process
locale.
"""

import calendar
import re
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, Final
from templateparser.lib.log import LOG

_STANDARD_DATE: Final[dict[str, str]] = {
    "d": "MM/dd/yyyy",
    "D": "dddd, dd MMMM yyyy",
    "f": "dddd, dd MMMM yyyy HH:mm",
    "F": "dddd, dd MMMM yyyy HH:mm:ss",
    "g": "MM/dd/yyyy HH:mm",
    "G": "MM/dd/yyyy HH:mm:ss",
    "M": "MMMM dd",
    "m": "MMMM dd",
    "Y": "yyyy MMMM",
    "y": "yyyy MMMM",
    "t": "HH:mm",
    "T": "HH:mm:ss",
    "s": "yyyy'-'MM'-'dd'T'HH':'mm':'ss",
    "u": "yyyy'-'MM'-'dd HH':'mm':'ss'Z'",
    "o": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "O": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
}

_DATE_SPECIFIERS: Final[str] = "dfFghHKmMstyz"

_STANDARD_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"([CcDdEeFfGgNnPpRrXx])(\d{0,2})")
_CUSTOM_NUMBER_CORE_RE: Final[re.Pattern[str]] = re.compile(r"[0#][0#,.]*|\.[0#,.]*[0#]")

CURRENCY_SYMBOL: Final[str] = "¤"


def text_plain(value: Any) -> str:
    """Plain textual rendering: None is empty, everything else is str()."""
    if value is None:
        return ""
    return str(value)


def value_format(value: Any, format_arg: str | None = None) -> str:
    """
    Render a resolved value, applying a format argument where supported.

    :param value: The resolved value.
    :param format_arg: Optional format specifier from the token.
    :return: The formatted text, or the plain rendering when the value does
             not support the format.
    """
    if format_arg is None or value is None or isinstance(value, (str, bytes, bool)):
        return text_plain(value)

    formatter: Callable[[Any, str], str]
    if isinstance(value, (datetime, date, time)):
        formatter = datetime_format
    elif isinstance(value, (int, float, Decimal)):
        formatter = number_format
    else:
        formatter = format

    try:
        return formatter(value, format_arg)
    except (TypeError, ValueError, ArithmeticError, KeyError, IndexError) as e:
        LOG(f"Format {format_arg!r} not applicable to {type(value).__name__}: {e}")
        return text_plain(value)


# --------------------------------------------------------------------------
# Dates and times
# --------------------------------------------------------------------------


def _as_datetime(value: date | time) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.combine(date(1, 1, 1), value)


def _offset_format(moment: datetime, width: int) -> str:
    offset = moment.utcoffset()
    if offset is None:
        return ""
    minutes: int = int(offset.total_seconds()) // 60
    sign: str = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    if width == 1:
        return f"{sign}{hours}"
    if width == 2:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _specifier_render(moment: datetime, char: str, count: int) -> str:
    """Render one run of a repeated date specifier character."""
    if char == "d":
        if count == 1:
            return str(moment.day)
        if count == 2:
            return f"{moment.day:02d}"
        days = calendar.day_abbr if count == 3 else calendar.day_name
        return days[moment.weekday()]
    if char == "M":
        if count == 1:
            return str(moment.month)
        if count == 2:
            return f"{moment.month:02d}"
        months = calendar.month_abbr if count == 3 else calendar.month_name
        return months[moment.month]
    if char == "y":
        if count == 1:
            return str(moment.year % 100)
        if count == 2:
            return f"{moment.year % 100:02d}"
        return str(moment.year).zfill(count)
    if char in "fF":
        digits: str = f"{moment.microsecond:06d}0"[: min(count, 7)]
        return digits if char == "f" else digits.rstrip("0")
    if char == "t":
        marker: str = "AM" if moment.hour < 12 else "PM"
        return marker[0] if count == 1 else marker
    if char == "g":
        return "A.D."
    if char == "z":
        return _offset_format(moment, min(count, 3))
    if char == "K":
        return "Z" if moment.tzinfo is timezone.utc else _offset_format(moment, 3)

    clock: int = {
        "h": moment.hour % 12 or 12,
        "H": moment.hour,
        "m": moment.minute,
        "s": moment.second,
    }[char]
    return f"{clock:02d}" if count > 1 else str(clock)


def _pattern_render(moment: datetime, pattern: str) -> str:
    output: list[str] = []
    i: int = 0
    length: int = len(pattern)

    while i < length:
        char: str = pattern[i]

        if char in "'\"":
            close: int = pattern.find(char, i + 1)
            if close < 0:
                close = length
            output.append(pattern[i + 1 : close])
            i = close + 1
            continue

        if char == "\\":
            output.append(pattern[i + 1 : i + 2])
            i += 2
            continue

        if char == "%":
            i += 1
            continue

        if char in _DATE_SPECIFIERS:
            run: int = i
            while run < length and pattern[run] == char:
                run += 1
            output.append(_specifier_render(moment, char, run - i))
            i = run
            continue

        output.append(char)
        i += 1

    return "".join(output)


def datetime_format(value: date | time, pattern: str) -> str:
    """
    Format a date, time or datetime with a .NET-style date pattern.

    A single-character pattern is a standard format; longer patterns are
    custom. Unknown standard formats raise ValueError.

    :param value: The temporal value.
    :param pattern: The date pattern, e.g. "d MMMM yyyy".
    :return: The formatted text.
    """
    if not pattern:
        raise ValueError("Empty date format")

    moment: datetime = _as_datetime(value)
    if len(pattern) == 1:
        if pattern not in _STANDARD_DATE:
            raise ValueError(f"Unknown standard date format {pattern!r}")
        if pattern == "u" and moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        pattern = _STANDARD_DATE[pattern]

    return _pattern_render(moment, pattern)


# --------------------------------------------------------------------------
# Numbers
# --------------------------------------------------------------------------


def _digits_group(digits: str) -> str:
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ",".join(groups)


def _exponent_widen(text: str) -> str:
    """Pad the exponent to three digits, as in 1.05E+003."""
    mantissa, marker, exponent = text.partition("E" if "E" in text else "e")
    if not marker:
        return text
    return f"{mantissa}{marker}{exponent[0]}{exponent[1:].zfill(3)}"


def _standard_number(value: int | float | Decimal, spec: str, precision: str) -> str:
    digits: int | None = int(precision) if precision else None
    upper: str = spec.upper()

    if upper in "DX" and not isinstance(value, int):
        raise ValueError(f"Format {spec!r} requires an integer")

    fixed: int = 2 if digits is None else digits

    if upper == "C":
        body: str = format(abs(value), f",.{fixed}f")
        return f"{'-' if value < 0 else ''}{CURRENCY_SYMBOL}{body}"
    if upper == "D":
        body = str(abs(value)).zfill(digits or 0)
        return f"-{body}" if value < 0 else body
    if upper == "E":
        text: str = format(value, f".{6 if digits is None else digits}{spec}")
        return _exponent_widen(text)
    if upper == "F":
        return format(value, f".{fixed}f")
    if upper == "G":
        if digits is None:
            return str(value)
        return format(value, f".{digits}{spec}")
    if upper == "N":
        return format(value, f",.{fixed}f")
    if upper == "P":
        return f"{format(value * 100, f',.{fixed}f')} %"
    if upper == "R":
        return repr(value) if isinstance(value, float) else str(value)
    if upper == "X":
        if value < 0:
            raise ValueError("Hex format requires a non-negative integer")
        return format(value, spec).zfill(digits or 0)
    raise ValueError(f"Unknown numeric format {spec!r}")


def _custom_number(value: int | float | Decimal, pattern: str) -> str | None:
    """Render a custom digit pattern such as "#,##0.00" or "0.0 %".

    Returns None when the pattern is not a custom digit pattern.
    """
    core_match = _CUSTOM_NUMBER_CORE_RE.search(pattern)
    if core_match is None:
        return None

    prefix: str = pattern[: core_match.start()]
    suffix: str = pattern[core_match.end() :]
    if any(ch.isdigit() for ch in prefix + suffix):
        return None

    core: str = core_match.group(0)
    int_part, _, frac_part = core.partition(".")
    grouped: bool = "," in int_part.rstrip(",")
    min_int: int = int_part.count("0")
    frac_part = frac_part.replace(",", "")
    min_frac: int = frac_part.count("0")
    max_frac: int = len(frac_part)

    number: Decimal = Decimal(str(value))
    if "%" in prefix + suffix:
        number *= 100
    number = number.quantize(Decimal(1).scaleb(-max_frac), rounding=ROUND_HALF_UP)

    sign: str = "-" if number < 0 else ""
    whole, _, fraction = f"{abs(number):f}".partition(".")
    fraction = fraction.rstrip("0").ljust(min_frac, "0")
    whole = whole.lstrip("0").zfill(min_int)
    if grouped and whole:
        whole = _digits_group(whole)

    body: str = whole + (f".{fraction}" if fraction else "")
    if not body.strip("0.,"):
        sign = ""
    return f"{prefix}{sign}{body}{suffix}"


def number_format(value: int | float | Decimal, spec: str) -> str:
    """
    Format a number with a .NET numeric format or a Python format spec.

    :param value: The numeric value.
    :param spec: Standard numeric format ("N2"), custom digit pattern
                 ("#,##0.00") or Python format spec (",.2f").
    :return: The formatted text.
    :raises ValueError: If no dialect accepts the spec for this value.
    """
    standard = _STANDARD_NUMBER_RE.fullmatch(spec)
    if standard:
        return _standard_number(value, standard.group(1), standard.group(2))

    try:
        custom: str | None = _custom_number(value, spec)
    except InvalidOperation as e:
        raise ValueError(str(e)) from e
    if custom is not None:
        return custom

    return format(value, spec)
