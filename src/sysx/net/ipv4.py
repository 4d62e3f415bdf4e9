"""
IPv4 socket address validation and parsing.

Addresses are expected in ``a.b.c.d:port`` form, e.g. ``192.168.0.1:8080``.
"""

import ipaddress
from dataclasses import dataclass
from typing import List, Optional

MAX_PORT = 65535


@dataclass(frozen=True)
class IPv4Socket:
    """An IPv4 address paired with a port."""

    ip: ipaddress.IPv4Address
    port: int

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


def _parse_port(text: str) -> Optional[int]:
    if not text.isdigit() or not text.isascii():
        return None
    port = int(text)
    return port if port <= MAX_PORT else None


def _parse_octets(text: str) -> Optional[List[int]]:
    parts = text.split(".")
    if len(parts) != 4:
        return None
    octets = []
    for part in parts:
        if not part or not part.isdigit() or not part.isascii():
            return None
        value = int(part)
        if value > 255:
            return None
        octets.append(value)
    return octets


def is_valid_ipv4(address: str) -> bool:
    """
    Check whether a string is a valid IPv4 address with a port.

    Args:
        address: Candidate string in ``IP:PORT`` form

    Returns:
        True if the string has four decimal octets (0-255) and a port (0-65535)
    """
    return str_to_ipv4(address) is not None


def str_to_ipv4(address: str) -> Optional[IPv4Socket]:
    """
    Parse an ``IP:PORT`` string.

    Args:
        address: Candidate string in ``IP:PORT`` form

    Returns:
        IPv4Socket, or None if the string is not a valid address
    """
    parts = address.split(":")
    if len(parts) != 2:
        return None

    port = _parse_port(parts[1])
    octets = _parse_octets(parts[0])
    if port is None or octets is None:
        return None

    return IPv4Socket(ip=ipaddress.IPv4Address(bytes(octets)), port=port)
