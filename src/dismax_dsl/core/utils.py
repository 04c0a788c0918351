import logging
import re
from datetime import date, datetime, timezone

from dismax_dsl.core.config import settings

logger = logging.getLogger(__name__)

# Every non-word character is escaped, whitespace included.
_ESCAPE_RE = re.compile(r"(\W)")


def escape(text: str) -> str:
    return _ESCAPE_RE.sub(r"\\\1", text)


def format_boost(boost: float, precision: int | None = None) -> str:
    """Render a boost or factor as it appears after ``^``."""
    if precision is None:
        precision = settings.BOOST_PRECISION
    value = float(boost)
    # Fixed point: the ^ grammar has no exponent form.
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0")
    if text.endswith("."):
        text += "0"
    elif "." not in text:
        text += ".0"
    if float(text) == 0:
        if value != 0:
            logger.warning(f"Boost {value!r} rounds to zero at precision {precision}")
        text = "0.0"
    return text


def solr_value(value: object) -> str:
    """Render an attribute value for use inside a Lucene clause."""
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        text = repr(value)
        return "\\" + text if value < 0 else text
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return escape(value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"))
    if isinstance(value, date):
        return escape(value.strftime("%Y-%m-%dT00:00:00Z"))
    return escape(str(value))
