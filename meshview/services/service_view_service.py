"""
Service view assembly.

Combines cluster state, mesh configuration and request metrics already
fetched by the collaborators into the service views served to clients.
"""

import logging
from typing import Any, Optional

from opentelemetry import trace

from ..config import Settings
from ..models.cluster import Namespace
from ..models.metrics import MetricsVector
from ..models.services import Service, ServiceList
from ..models.sources import ClusterServiceList, IstioDetails, ServiceDetails
from ..telemetry import traced
from .detail_builder import build_service_detail
from .list_builder import build_namespace_list, build_service_list
from .request_counters import process_request_counters

logger = logging.getLogger(__name__)


class ServiceViewService:
    """Service for building service views."""

    def __init__(self, settings: Settings):
        """Initialize the service view service."""
        self.settings = settings

    @traced("get_service_details")
    def get_service_details(
        self,
        namespace: str,
        name: str,
        service_details: Optional[ServiceDetails],
        istio_details: Optional[IstioDetails] = None,
        dependencies: Optional[dict[str, list[str]]] = None,
    ) -> Service:
        """Get the detail view of a service."""
        span = trace.get_current_span()
        span.set_attribute("meshview.namespace", namespace)
        span.set_attribute("meshview.service", name)

        if istio_details is None:
            logger.debug(f"No mesh configuration for service {namespace}/{name}")

        service = Service(name=name, namespace=Namespace(name=namespace))
        return build_service_detail(service, service_details, istio_details, dependencies)

    @traced("get_service_list")
    def get_service_list(
        self,
        namespace: str,
        service_list: Optional[ClusterServiceList],
        request_counters: Optional[MetricsVector] = None,
    ) -> ServiceList:
        """Get the service overviews of a namespace, with request statistics if available."""
        span = trace.get_current_span()
        span.set_attribute("meshview.namespace", namespace)

        services = build_service_list(namespace, service_list)
        if request_counters is not None:
            span.set_attribute("meshview.samples", len(request_counters.samples))
            services = process_request_counters(
                services,
                request_counters,
                settings=self.settings,
            )

        logger.info(f"Listed {len(services.services)} services in {namespace}")
        return services

    @traced("get_namespaces")
    def get_namespaces(self, namespaces: Any) -> list[Namespace]:
        """Get the namespaces of the cluster."""
        return build_namespace_list(namespaces)
