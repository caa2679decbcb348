"""
Service detail builder.

Merges the cluster objects of a service with the mesh configuration of its
namespace into a single Service view.
"""

import copy
import logging
from typing import Any, Optional

from ..models.cluster import Address, Endpoint, Port
from ..models.deployments import Autoscaler, Deployment
from ..models.istio import DestinationPolicy, RouteRule
from ..models.services import Service
from ..models.sources import IstioDetails, ServiceDetails, timestamp, to_items, to_raw

logger = logging.getLogger(__name__)


def build_service_detail(
    service: Service,
    service_details: Optional[ServiceDetails],
    istio_details: Optional[IstioDetails] = None,
    dependencies: Optional[dict[str, list[str]]] = None,
) -> Service:
    """
    Build the detail view of ``service``.

    Args:
        service: Shell carrying the service name and namespace
        service_details: Service, endpoints, deployments and autoscalers
        istio_details: Route rules and destination policies of the namespace
        dependencies: Callers keyed by version, computed from metrics elsewhere

    Returns:
        A new Service; absent inputs leave the matching fields empty.
    """
    update: dict[str, Any] = {}

    if service_details is not None:
        raw_service = to_raw(service_details.service)
        metadata = raw_service.get("metadata") or {}
        spec = raw_service.get("spec") or {}

        update["type"] = spec.get("type") or ""
        update["ip"] = spec.get("clusterIP") or ""
        update["labels"] = dict(metadata.get("labels") or {})
        update["ports"] = [_parse_port(p) for p in spec.get("ports") or []]
        update["endpoints"] = _parse_endpoints(service_details.endpoints)
        update["deployments"] = _parse_deployments(
            service_details.deployments,
            service_details.autoscalers,
        )

    if istio_details is not None:
        update["route_rules"] = [
            _parse_route_rule(rule) for rule in to_items(istio_details.route_rules)
        ]
        update["destination_policies"] = [
            _parse_destination_policy(policy)
            for policy in to_items(istio_details.destination_policies)
        ]

    if dependencies:
        update["dependencies"] = {
            version: list(callers) for version, callers in dependencies.items()
        }

    logger.debug(
        "Built detail for service %s/%s: %d deployments, %d route rules",
        service.namespace.name,
        service.name,
        len(update.get("deployments", [])),
        len(update.get("route_rules", [])),
    )
    return service.model_copy(update=update)


def _parse_port(port: dict[str, Any]) -> Port:
    return Port(
        name=port.get("name") or "",
        protocol=port.get("protocol") or "",
        port=port.get("port") or 0,
    )


def _parse_endpoints(endpoints: Any) -> list[Endpoint]:
    """Flatten endpoint subsets, keeping subset, address and port order."""
    result = []
    for subset in to_raw(endpoints).get("subsets") or []:
        addresses = []
        for address in subset.get("addresses") or []:
            target = address.get("targetRef") or {}
            addresses.append(
                Address(
                    kind=target.get("kind") or "",
                    name=target.get("name") or "",
                    ip=address.get("ip") or "",
                )
            )
        result.append(
            Endpoint(
                addresses=addresses,
                ports=[_parse_port(p) for p in subset.get("ports") or []],
            )
        )
    return result


def _parse_deployments(deployments: Any, autoscalers: Any) -> list[Deployment]:
    """Build deployments, attaching the autoscaler that shares each one's name."""
    autoscalers_by_name: dict[str, Autoscaler] = {}
    for raw in to_items(autoscalers):
        autoscaler = _parse_autoscaler(raw)
        autoscalers_by_name.setdefault(autoscaler.name, autoscaler)

    result = []
    for raw in to_items(deployments):
        metadata = raw.get("metadata") or {}
        status = raw.get("status") or {}
        name = metadata.get("name") or ""
        result.append(
            Deployment(
                name=name,
                labels=dict(metadata.get("labels") or {}),
                created_at=timestamp(metadata.get("creationTimestamp")),
                replicas=status.get("replicas") or 0,
                available_replicas=status.get("availableReplicas") or 0,
                unavailable_replicas=status.get("unavailableReplicas") or 0,
                autoscaler=autoscalers_by_name.get(name, Autoscaler()),
            )
        )
    return result


def _parse_autoscaler(raw: dict[str, Any]) -> Autoscaler:
    metadata = raw.get("metadata") or {}
    spec = raw.get("spec") or {}
    status = raw.get("status") or {}

    return Autoscaler(
        name=metadata.get("name") or "",
        labels=dict(metadata.get("labels") or {}),
        created_at=timestamp(metadata.get("creationTimestamp")),
        min_replicas=spec.get("minReplicas") or 0,
        max_replicas=spec.get("maxReplicas") or 0,
        target_cpu_utilization_percentage=spec.get("targetCPUUtilizationPercentage") or 0,
        current_replicas=status.get("currentReplicas") or 0,
        desired_replicas=status.get("desiredReplicas") or 0,
        observed_generation=status.get("observedGeneration") or 0,
        current_cpu_utilization_percentage=status.get("currentCPUUtilizationPercentage") or 0,
    )


def _parse_route_rule(raw: dict[str, Any]) -> RouteRule:
    spec = raw.get("spec") or {}
    return RouteRule(
        destination=copy.deepcopy(spec.get("destination")),
        precedence=copy.deepcopy(spec.get("precedence")),
        route=copy.deepcopy(spec.get("route")),
        http_fault=copy.deepcopy(spec.get("httpFault")),
    )


def _parse_destination_policy(raw: dict[str, Any]) -> DestinationPolicy:
    spec = raw.get("spec") or {}
    return DestinationPolicy(
        source=copy.deepcopy(spec.get("source")),
        destination=copy.deepcopy(spec.get("destination")),
        load_balancing=copy.deepcopy(spec.get("loadBalancing")),
        circuit_breaker=copy.deepcopy(spec.get("circuitBreaker")),
    )
