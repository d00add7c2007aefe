"""Checks that a value parses as an absolute URL."""

from __future__ import annotations

import ipaddress
import re
from typing import Any, Optional
from urllib.parse import unquote

import idna

__all__ = ["validate_url"]

_SCHEME_RE = re.compile(r"([A-Za-z][A-Za-z0-9+\-.]*):")
_SPECIAL_SCHEMES = frozenset({"ftp", "file", "http", "https", "ws", "wss"})
_FORBIDDEN_HOST = frozenset("\x00\t\n\r #/:<>?@[\\]^|")
_FORBIDDEN_DOMAIN = _FORBIDDEN_HOST | {"%", "\x7f"} | {chr(c) for c in range(0x20)}
_C0_OR_SPACE = "".join(chr(c) for c in range(0x21))
_TAB_OR_NEWLINE = str.maketrans("", "", "\t\n\r")
_MAX_PORT = 65535


def validate_url(value: Any) -> bool:
    """Tell whether ``value`` parses as an absolute URL; ``None`` passes."""
    if value is None:
        return True
    return _parse_url(str(value))


def _parse_url(text: str) -> bool:
    text = text.strip(_C0_OR_SPACE).translate(_TAB_OR_NEWLINE)
    match = _SCHEME_RE.match(text)
    if match is None:
        return False
    scheme = match.group(1).lower()
    rest = text[match.end():]

    if scheme == "file":
        if rest[:2] in ("//", "\\\\", "/\\", "\\/"):
            host = _take_authority(rest[2:], "/\\?#")
            return not host or _valid_host(host, special=True)
        return True
    if scheme in _SPECIAL_SCHEMES:
        authority = _take_authority(rest.lstrip("/\\"), "/\\?#")
        return _valid_authority(authority, special=True)
    if rest.startswith("//"):
        return _valid_authority(_take_authority(rest[2:], "/?#"), special=False)
    return True


def _take_authority(text: str, delimiters: str) -> str:
    end = next((i for i, c in enumerate(text) if c in delimiters), len(text))
    return text[:end]


def _valid_authority(authority: str, special: bool) -> bool:
    has_userinfo = "@" in authority
    hostport = authority.rpartition("@")[2]
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            return False
        host, tail = hostport[: end + 1], hostport[end + 1:]
        if tail and not tail.startswith(":"):
            return False
        has_port, port = bool(tail), tail[1:]
    else:
        host, colon, port = hostport.partition(":")
        has_port = bool(colon)

    if not _valid_port(port):
        return False
    if not host:
        return not (special or has_userinfo or has_port)
    return _valid_host(host, special)


def _valid_port(port: str) -> bool:
    if not port:
        return True
    return port.isascii() and port.isdigit() and int(port) <= _MAX_PORT


def _valid_host(host: str, special: bool) -> bool:
    if host.startswith("["):
        if not host.endswith("]"):
            return False
        inner = host[1:-1]
        if not inner.isascii() or "%" in inner:
            return False
        try:
            ipaddress.IPv6Address(inner)
        except ValueError:
            return False
        return True
    if not special:
        return not any(c in _FORBIDDEN_HOST for c in host)

    domain = _domain_to_ascii(unquote(host, errors="replace"))
    if not domain or any(c in _FORBIDDEN_DOMAIN for c in domain):
        return False
    if _ends_in_number(domain):
        return _valid_ipv4(domain)
    return True


def _domain_to_ascii(domain: str) -> Optional[str]:
    if domain.isascii():
        return domain.lower()
    try:
        return idna.encode(domain, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError, ValueError):
        return None


def _ipv4_number(part: str) -> Optional[int]:
    if not part:
        return None
    digits, radix = part, 10
    if part[:2] in ("0x", "0X"):
        digits, radix = part[2:], 16
    elif len(part) > 1 and part.startswith("0"):
        digits, radix = part[1:], 8
    if not digits:
        return 0
    allowed = {10: "0123456789", 8: "01234567", 16: "0123456789abcdefABCDEF"}[radix]
    if any(c not in allowed for c in digits):
        return None
    return int(digits, radix)


def _split_ipv4(host: str) -> list[str]:
    parts = host.split(".")
    if parts[-1] == "" and len(parts) > 1:
        parts.pop()
    return parts


def _ends_in_number(host: str) -> bool:
    last = _split_ipv4(host)[-1]
    if last and last.isascii() and last.isdigit():
        return True
    return _ipv4_number(last) is not None


def _valid_ipv4(host: str) -> bool:
    parts = _split_ipv4(host)
    if len(parts) > 4:
        return False
    numbers = [_ipv4_number(part) for part in parts]
    if any(n is None for n in numbers):
        return False
    *leading, last = numbers
    if any(n > 255 for n in leading):
        return False
    return last < 256 ** (5 - len(numbers))