"""Parsers for the kernel IPv4 routing table."""

from procroute.parser.hex_ip import parse_ip
from procroute.parser.route_table import load, parse_line, parse_route_table

__all__ = [
    "load",
    "parse_ip",
    "parse_line",
    "parse_route_table",
]
