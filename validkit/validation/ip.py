"""Checks that a value is an IPv4 or IPv6 address."""

from __future__ import annotations

import ipaddress
from typing import Any, Optional, Union

__all__ = ["validate_ip", "validate_ipv4", "validate_ipv6"]

_Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _parse(value: Any) -> Optional[_Address]:
    """Parse the string form of ``value`` as an address, or return ``None``.

    Only plain ASCII dotted-decimal or colon-hex notation is accepted; zone
    identifiers are not part of an address.
    """
    text = str(value)
    if not text.isascii() or "%" in text:
        return None
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def validate_ip(value: Any) -> bool:
    """Tell whether the string form of ``value`` is an IPv4 or IPv6 address."""
    return _parse(value) is not None


def validate_ipv4(value: Any) -> bool:
    """Tell whether the string form of ``value`` is an IPv4 address."""
    return isinstance(_parse(value), ipaddress.IPv4Address)


def validate_ipv6(value: Any) -> bool:
    """Tell whether the string form of ``value`` is an IPv6 address."""
    return isinstance(_parse(value), ipaddress.IPv6Address)