import logging
import re
from datetime import date, datetime
from typing import Union

from .currencies import ISO_4217_CODES

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateLike = Union[date, str]


class DateFormatError(ValueError): pass


def parse_date(value: str) -> date:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise DateFormatError(f"{value!r} is not a YYYY-MM-DD date.")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise DateFormatError(f"{value!r} is not a calendar date.") from e


def _as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return parse_date(value)


def is_date(value) -> bool:
    try:
        parse_date(value)
    except DateFormatError:
        return False
    return True


def is_before(first: DateLike, second: DateLike) -> bool:
    """True iff ``first`` is strictly earlier than ``second``.

    Unparsable input compares as not-before: the error is logged and the
    result is False, so callers keep evaluating the rest of the batch.
    """
    try:
        return _as_date(first) < _as_date(second)
    except DateFormatError as e:
        logger.warning("Date comparison treated as false: %s", e)
        return False


def is_weekend(value: DateLike) -> bool:
    try:
        d = _as_date(value)
    except DateFormatError as e:
        logger.warning("Weekend check treated as false: %s", e)
        return False
    # Saturday=5, Sunday=6
    return d.weekday() >= 5


def is_valid_currency_code(code) -> bool:
    return isinstance(code, str) and code in ISO_4217_CODES
