# procroute Models Package
"""
Data models for procroute.
"""

from procroute.models.route import UNSPECIFIED, Route, default_gateway

__all__ = [
    "UNSPECIFIED",
    "Route",
    "default_gateway",
]
