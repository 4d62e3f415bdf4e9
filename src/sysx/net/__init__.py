"""
sysx Net Module

Validation and parsing of IPv4 and IPv6 socket address strings.
"""

from .ipv4 import IPv4Socket, is_valid_ipv4, str_to_ipv4
from .ipv6 import IPv6Socket, create_ipv6_socket, is_valid_ipv6, str_to_ipv6

__all__ = [
    "IPv4Socket",
    "IPv6Socket",
    "is_valid_ipv4",
    "str_to_ipv4",
    "is_valid_ipv6",
    "str_to_ipv6",
    "create_ipv6_socket",
]
