"""String format checkers used by the ``format`` keyword.

Unknown format names pass, the same way unknown keywords are skipped.

Example:
    >>> from jsonguard.formats import check
    >>> check("test@example.com", "email")
    True
    >>> check("anything", "x-custom-format")
    True
"""

from __future__ import annotations

import ipaddress
import logging
import re
from collections.abc import Callable
from datetime import date, datetime, time

logger = logging.getLogger(__name__)

FormatFunc = Callable[[str], bool]

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
URI_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:[^\s]*$")
DURATION_PATTERN = re.compile(
    r"^P(?!$)(?:\d+Y)?(?:\d+M)?(?:\d+W)?(?:\d+D)?(?:T(?=\d)(?:\d+H)?(?:\d+M)?(?:\d+(?:\.\d+)?S)?)?$"
)
HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
DATE_TIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


class FormatChecker:
    """Registry of format name to checker function."""

    def __init__(self) -> None:
        self._checkers: dict[str, FormatFunc] = {}

    def register(self, name: str) -> Callable[[FormatFunc], FormatFunc]:
        """Decorator registering a checker for ``name``."""

        def decorator(func: FormatFunc) -> FormatFunc:
            self._checkers[name] = func
            return func

        return decorator

    def knows(self, name: str) -> bool:
        return name in self._checkers

    def check(self, value: str, format_name: str) -> bool:
        """Return whether ``value`` satisfies ``format_name``.

        Args:
            value: The string to check
            format_name: The format name from the schema

        Returns:
            False only if the format is known and the value does not match
        """
        checker = self._checkers.get(format_name)
        if checker is None:
            logger.debug(f"No checker registered for format '{format_name}', skipping")
            return True
        return checker(value)


default_checker = FormatChecker()


@default_checker.register("email")
def is_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None


@default_checker.register("uri")
def is_uri(value: str) -> bool:
    return URI_PATTERN.match(value) is not None


@default_checker.register("date-time")
def is_date_time(value: str) -> bool:
    if not DATE_TIME_PATTERN.match(value):
        return False
    normalized = value.upper().replace("Z", "+00:00")
    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


@default_checker.register("date")
def is_date(value: str) -> bool:
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@default_checker.register("time")
def is_time(value: str) -> bool:
    if not re.match(r"^\d{2}:\d{2}:\d{2}(?:\.\d+)?$", value):
        return False
    try:
        time.fromisoformat(value)
    except ValueError:
        return False
    return True


@default_checker.register("ipv4")
def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


@default_checker.register("ipv6")
def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


@default_checker.register("hostname")
def is_hostname(value: str) -> bool:
    hostname = value[:-1] if value.endswith(".") else value
    if not hostname or len(hostname) > 253:
        return False
    return all(HOSTNAME_LABEL.match(label) for label in hostname.split("."))


@default_checker.register("regex")
def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


@default_checker.register("duration")
def is_duration(value: str) -> bool:
    return DURATION_PATTERN.match(value) is not None


def check(value: str, format_name: str) -> bool:
    """Check ``value`` against ``format_name`` with the default registry."""
    return default_checker.check(value, format_name)
