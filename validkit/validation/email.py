"""Checks that a value is an e-mail address in the HTML form sense."""

from __future__ import annotations

import re
from typing import Optional

import idna

from validkit.validation.ip import validate_ip

__all__ = ["validate_email"]

# Quoted local parts and other rarely used forms are rejected on purpose.
_USER_RE = re.compile(r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+")
_DOMAIN_RE = re.compile(
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
# Address literal: an IPv4 or IPv6 address in brackets.
_LITERAL_RE = re.compile(r"\[([a-fA-F0-9:.]+)\]\Z")

_MAX_USER_LENGTH = 64
_MAX_DOMAIN_LENGTH = 255


def _validate_domain_part(domain: str) -> bool:
    if _DOMAIN_RE.fullmatch(domain):
        return True
    literal = _LITERAL_RE.search(domain)
    return literal is not None and validate_ip(literal.group(1))


def _to_ascii(domain: str) -> Optional[str]:
    try:
        return idna.encode(domain, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError, ValueError):
        return None


def validate_email(value: Optional[str]) -> bool:
    """Tell whether ``value`` is a valid e-mail address; ``None`` passes."""
    if value is None:
        return True
    if not isinstance(value, str):
        raise TypeError(f"cannot validate {type(value).__name__} as an e-mail")
    if "@" not in value:
        return False

    user, _, domain = value.rpartition("@")
    if len(user) > _MAX_USER_LENGTH or len(domain) > _MAX_DOMAIN_LENGTH:
        return False
    if not _USER_RE.fullmatch(user):
        return False
    if _validate_domain_part(domain):
        return True

    ascii_domain = _to_ascii(domain)
    return ascii_domain is not None and _validate_domain_part(ascii_domain)