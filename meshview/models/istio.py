"""Service mesh configuration view models.

Mesh objects are open-ended, so these models keep the known top-level keys of
each object's spec as opaque JSON-like values instead of a fixed schema.
"""

from typing import Any

from pydantic import Field

from .base import ViewModel


class RouteRule(ViewModel):
    """Routing rule applied to a service."""

    destination: Any = Field(default=None, description="Destination selector")
    precedence: Any = Field(default=None, description="Rule precedence")
    route: Any = Field(default=None, description="Weighted route targets")
    http_fault: Any = Field(default=None, description="Injected HTTP faults")


class DestinationPolicy(ViewModel):
    """Traffic policy applied to a destination."""

    source: Any = Field(default=None, description="Source selector")
    destination: Any = Field(default=None, description="Destination selector")
    load_balancing: Any = Field(default=None, description="Load balancing policy")
    circuit_breaker: Any = Field(default=None, description="Circuit breaker policy")
