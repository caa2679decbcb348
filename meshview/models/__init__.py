"""View models and collaborator inputs."""

from .cluster import Address, Endpoint, Namespace, Port
from .deployments import Autoscaler, Deployment
from .istio import DestinationPolicy, RouteRule
from .metrics import MetricSample, MetricsVector
from .services import Service, ServiceList, ServiceOverview
from .sources import ClusterServiceList, IstioDetails, ServiceDetails

__all__ = [
    "Address",
    "Endpoint",
    "Namespace",
    "Port",
    "Autoscaler",
    "Deployment",
    "DestinationPolicy",
    "RouteRule",
    "MetricSample",
    "MetricsVector",
    "Service",
    "ServiceList",
    "ServiceOverview",
    "ClusterServiceList",
    "IstioDetails",
    "ServiceDetails",
]
