"""
IPv6 socket address validation and parsing.

Addresses are expected in bracketed ``[addr]:port`` form, e.g. ``[::1]:8080``
or ``[fe80::1%eth0]:443``.
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Optional

MAX_PORT = 65535

_SOCKET_PATTERN = re.compile(
    r"\[(?P<addr>[^\[\]%]+)(?:%(?P<scope>[A-Za-z0-9_.-]+))?\]:(?P<port>[0-9]+)"
)


@dataclass(frozen=True)
class IPv6Socket:
    """An IPv6 address with port, flow info and scope id."""

    ip: ipaddress.IPv6Address
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    def __str__(self) -> str:
        if self.scope_id:
            return f"[{self.ip}%{self.scope_id}]:{self.port}"
        return f"[{self.ip}]:{self.port}"


def is_valid_ipv6(address: str) -> bool:
    """
    Check whether a string is a valid bracketed IPv6 address with a port.

    >>> is_valid_ipv6("[2001:db8::1]:80")
    True
    >>> is_valid_ipv6("::1:8080")
    False
    """
    return str_to_ipv6(address) is not None


def str_to_ipv6(address: str) -> Optional[IPv6Socket]:
    """
    Parse an ``[IP]:PORT`` string.

    A numeric ``%scope`` suffix becomes the scope id; a named zone
    (``%eth0``) is accepted and leaves the scope id at 0.

    Returns:
        IPv6Socket, or None if the string is not a valid address
    """
    match = _SOCKET_PATTERN.fullmatch(address)
    if match is None:
        return None

    port = int(match.group("port"))
    if port > MAX_PORT:
        return None

    scope = match.group("scope")
    scope_id = int(scope) if scope and scope.isascii() and scope.isdigit() else 0
    return create_ipv6_socket(match.group("addr"), port, 0, scope_id)


def create_ipv6_socket(
    ip: str, port: int, flowinfo: int = 0, scope_id: int = 0
) -> Optional[IPv6Socket]:
    """
    Build an IPv6Socket from its parts.

    Args:
        ip: IPv6 address text, without brackets
        port: Port number (0-65535)
        flowinfo: Flow label
        scope_id: Scope (interface) id

    Returns:
        IPv6Socket, or None if the address or port is invalid
    """
    try:
        addr = ipaddress.IPv6Address(ip)
    except ValueError:
        return None
    if not 0 <= port <= MAX_PORT:
        return None
    return IPv6Socket(ip=addr, port=port, flowinfo=flowinfo, scope_id=scope_id)
