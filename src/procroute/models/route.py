"""Route record - one parsed entry of the kernel IPv4 routing table."""

from collections.abc import Iterable
from ipaddress import IPv4Address

from pydantic import BaseModel, ConfigDict, Field

UNSPECIFIED = IPv4Address(0)


class Route(BaseModel):
    """
    Immutable IPv4 route.

    Instances are validated on construction and frozen afterwards, so a
    partially built or mutated route never exists.
    """

    model_config = ConfigDict(frozen=True)

    iface: str = Field(min_length=1, description="Interface name (e.g. eno1)")
    destination: IPv4Address = Field(description="Destination network address")
    gateway: IPv4Address = Field(
        description="Next-hop address, 0.0.0.0 for directly connected networks"
    )

    @property
    def is_default(self) -> bool:
        """True for the default route (destination 0.0.0.0)."""
        return self.destination == UNSPECIFIED

    @property
    def has_gateway(self) -> bool:
        return self.gateway != UNSPECIFIED


def default_gateway(routes: Iterable[Route]) -> IPv4Address | None:
    """Return the gateway of the first default route that has one."""
    for route in routes:
        if route.is_default and route.has_gateway:
            return route.gateway
    return None
