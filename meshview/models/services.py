"""Service view models: the detail view and the list overview."""

from pydantic import Field

from .base import ViewModel
from .cluster import Endpoint, Namespace, Port
from .deployments import Deployment
from .istio import DestinationPolicy, RouteRule


class Service(ViewModel):
    """Detailed view of a single service."""

    name: str = Field(default="", description="Service name")
    namespace: Namespace = Field(default_factory=Namespace, description="Service namespace")
    type: str = Field(default="", description="Service type (ClusterIP, LoadBalancer, etc.)")
    ip: str = Field(default="", description="Cluster IP")
    labels: dict[str, str] = Field(default_factory=dict, description="Service labels")
    ports: list[Port] = Field(default_factory=list, description="Service ports")
    endpoints: list[Endpoint] = Field(default_factory=list, description="Endpoint subsets")
    deployments: list[Deployment] = Field(default_factory=list, description="Deployments")
    route_rules: list[RouteRule] = Field(default_factory=list, description="Route rules")
    destination_policies: list[DestinationPolicy] = Field(
        default_factory=list,
        description="Destination policies",
    )
    dependencies: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Callers of the service, keyed by version",
    )


class ServiceOverview(ViewModel):
    """List row for a service, with replica and request statistics."""

    name: str = Field(default="", description="Service name")
    replicas: int = Field(default=0, description="Replicas across matching deployments")
    available_replicas: int = Field(default=0, description="Available replicas")
    unavailable_replicas: int = Field(default=0, description="Unavailable replicas")
    request_count: float = Field(default=0.0, description="Requests sent or received")
    request_error_count: float = Field(default=0.0, description="Requests answered with an error")
    error_rate: float = Field(default=0.0, description="Error share of requests")


class ServiceList(ViewModel):
    """Services of a namespace, in discovery order."""

    namespace: Namespace = Field(default_factory=Namespace, description="Namespace")
    services: list[ServiceOverview] = Field(default_factory=list, description="Service overviews")
