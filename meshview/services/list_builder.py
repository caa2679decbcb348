"""
Service list builder.

Produces one overview row per service, aggregating replica counts of the
deployments selected by the service.
"""

import logging
from typing import Any, Optional

from ..models.cluster import Namespace
from ..models.services import ServiceList, ServiceOverview
from ..models.sources import ClusterServiceList, to_items

logger = logging.getLogger(__name__)


def selector_matches(selector: dict[str, str], labels: dict[str, str]) -> bool:
    """Check whether ``labels`` is a superset of ``selector``."""
    return all(labels.get(key) == value for key, value in selector.items())


def build_service_list(
    namespace: str,
    service_list: Optional[ClusterServiceList],
) -> ServiceList:
    """Build the overview list of a namespace, in service order."""
    overviews = []
    if service_list is not None:
        deployments = to_items(service_list.deployments)

        for raw in to_items(service_list.services):
            name = (raw.get("metadata") or {}).get("name") or ""
            selector = (raw.get("spec") or {}).get("selector") or {}

            replicas = available = unavailable = 0
            for deployment in deployments:
                labels = (deployment.get("metadata") or {}).get("labels") or {}
                if not selector_matches(selector, labels):
                    continue
                status = deployment.get("status") or {}
                replicas += status.get("replicas") or 0
                available += status.get("availableReplicas") or 0
                unavailable += status.get("unavailableReplicas") or 0

            overviews.append(
                ServiceOverview(
                    name=name,
                    replicas=replicas,
                    available_replicas=available,
                    unavailable_replicas=unavailable,
                )
            )

    logger.debug("Built %d service overviews for namespace %s", len(overviews), namespace)
    return ServiceList(namespace=Namespace(name=namespace), services=overviews)


def build_namespace_list(namespaces: Any) -> list[Namespace]:
    """Convert raw namespace objects into Namespace views, in source order."""
    return [
        Namespace(name=(raw.get("metadata") or {}).get("name") or "")
        for raw in to_items(namespaces)
    ]
