"""
Raw inputs supplied by the cluster and mesh collaborators.

Raw objects are either kubernetes client models (``V1Service``,
``V1DeploymentList``, ...) or the camelCase JSON mappings the API server
returns. Both are normalised to plain mappings before they are read.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any, Mapping, Optional

from kubernetes.client import ApiClient


@dataclass(frozen=True)
class ServiceDetails:
    """Cluster objects describing one service."""

    service: Any = None
    endpoints: Any = None
    deployments: Any = None
    autoscalers: Any = None


@dataclass(frozen=True)
class IstioDetails:
    """Mesh configuration objects of a namespace."""

    route_rules: Any = None
    destination_policies: Any = None


@dataclass(frozen=True)
class ClusterServiceList:
    """Services and deployments of a namespace."""

    services: Any = None
    deployments: Any = None


@lru_cache
def _serializer() -> ApiClient:
    return ApiClient()


def to_raw(obj: Any) -> dict[str, Any]:
    """Return ``obj`` as a JSON-like mapping with API field names."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    if hasattr(obj, "openapi_types"):
        return _serializer().sanitize_for_serialization(obj)
    raise TypeError(f"Unsupported cluster object: {type(obj).__name__}")


def to_items(obj: Any) -> list[dict[str, Any]]:
    """Return the objects of a list-like input as raw mappings."""
    if obj is None:
        return []
    if isinstance(obj, (list, tuple)):
        return [to_raw(item) for item in obj]
    return [to_raw(item) for item in to_raw(obj).get("items") or []]


def timestamp(value: Optional[Any]) -> str:
    """Render a creation timestamp without reparsing it."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
