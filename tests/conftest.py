"""Shared fixtures: a `tutorial` namespace with reviews and httpbin services."""

import pytest

from meshview.models import (
    ClusterServiceList,
    IstioDetails,
    MetricSample,
    MetricsVector,
    ServiceDetails,
)


@pytest.fixture
def service_details() -> ServiceDetails:
    """Cluster objects of a service backed by two deployments."""
    service = {
        "metadata": {
            "name": "Name",
            "namespace": "Namespace",
            "labels": {"label1": "labelName1", "label2": "labelName2"},
        },
        "spec": {
            "clusterIP": "fromservice",
            "type": "ClusterIP",
            "ports": [
                {"name": "http", "protocol": "TCP", "port": 3001},
                {"name": "http", "protocol": "TCP", "port": 3000},
            ],
        },
    }
    endpoints = {
        "subsets": [
            {
                "addresses": [
                    {
                        "ip": "172.17.0.9",
                        "targetRef": {"kind": "Pod", "name": "recommendation-v1"},
                    },
                    {
                        "ip": "172.17.0.8",
                        "targetRef": {"kind": "Pod", "name": "recommendation-v2"},
                    },
                ],
                "ports": [
                    {"name": "http", "protocol": "TCP", "port": 3001},
                    {"name": "http", "protocol": "TCP", "port": 3000},
                ],
            }
        ]
    }
    deployments = {
        "items": [
            {
                "metadata": {
                    "name": "reviews-v1",
                    "creationTimestamp": "2018-03-08T17:44:00+03:00",
                    "labels": {"apps": "reviews", "version": "v1"},
                },
                "status": {"replicas": 3, "availableReplicas": 1, "unavailableReplicas": 2},
            },
            {
                "metadata": {
                    "name": "reviews-v2",
                    "creationTimestamp": "2018-03-08T17:45:00+03:00",
                    "labels": {"apps": "reviews", "version": "v2"},
                },
                "status": {"replicas": 3, "availableReplicas": 3, "unavailableReplicas": 0},
            },
        ]
    }
    autoscalers = {
        "items": [
            {
                "metadata": {
                    "name": "reviews-v1",
                    "labels": {"apps": "reviews", "version": "v1"},
                    "creationTimestamp": "2018-03-08T17:44:00+03:00",
                },
                "spec": {
                    "scaleTargetRef": {"kind": "Deployment", "name": "reviews-v1"},
                    "minReplicas": 1,
                    "maxReplicas": 10,
                    "targetCPUUtilizationPercentage": 50,
                },
                "status": {
                    "observedGeneration": 50,
                    "currentReplicas": 3,
                    "desiredReplicas": 4,
                    "currentCPUUtilizationPercentage": 70,
                },
            },
            {
                "metadata": {
                    "name": "reviews-v2",
                    "labels": {"apps": "reviews", "version": "v2"},
                    "creationTimestamp": "2018-03-08T17:45:00+03:00",
                },
                "spec": {
                    "scaleTargetRef": {"kind": "Deployment", "name": "reviews-v2"},
                    "minReplicas": 1,
                    "maxReplicas": 10,
                    "targetCPUUtilizationPercentage": 50,
                },
                "status": {
                    "observedGeneration": 50,
                    "currentReplicas": 3,
                    "desiredReplicas": 2,
                    "currentCPUUtilizationPercentage": 30,
                },
            },
        ]
    }
    return ServiceDetails(
        service=service,
        endpoints=endpoints,
        deployments=deployments,
        autoscalers=autoscalers,
    )


@pytest.fixture
def istio_details() -> IstioDetails:
    """Two route rules and two destination policies for reviews."""
    routes = [
        {
            "spec": {
                "destination": {"name": "reviews", "namespace": "tutorial"},
                "precedence": 1,
                "route": {"labels": {"name": "version", "namespace": "v1"}},
                "httpFault": {"abort": {"percent": "50", "httpStatus": "503"}},
            }
        },
        {
            "spec": {
                "destination": {"name": "reviews", "namespace": "tutorial"},
                "precedence": 1,
                "route": {"labels": {"name": "version", "namespace": "v3"}},
            }
        },
    ]
    policies = [
        {
            "spec": {
                "source": {"name": "recommendation"},
                "destination": {"name": "reviews", "namespace": "tutorial"},
                "loadBalancing": {"name": "RANDOM"},
            }
        },
        {
            "spec": {
                "destination": {
                    "name": "reviews",
                    "namespace": "tutorial",
                    "labels": {"version": "v2"},
                },
                "circuitBreaker": {
                    "simpleCb": {
                        "maxConnections": 1,
                        "httpMaxPendingRequests": 1,
                        "sleepWindow": "2m",
                        "httpDetectionInterval": "1s",
                        "httpMaxEjectionPercent": 100,
                        "httpConsecutiveErrors": 1,
                        "httpMaxRequestsPerConnection": 1,
                    }
                },
            }
        },
    ]
    return IstioDetails(route_rules=routes, destination_policies=policies)


@pytest.fixture
def dependencies() -> dict[str, list[str]]:
    """Callers of each version, as computed by the metrics collaborator."""
    return {
        "v1": ["unknown", "/products", "/reviews"],
        "v2": ["/catalog", "/shares"],
    }


def _service(name: str, selector: dict[str, str]) -> dict:
    return {
        "metadata": {
            "name": name,
            "namespace": "tutorial",
            "labels": {"app": name, "version": "v1"},
        },
        "spec": {
            "clusterIP": "fromservice",
            "type": "ClusterIP",
            "selector": selector,
            "ports": [
                {"name": "http", "protocol": "TCP", "port": 3001},
                {"name": "http", "protocol": "TCP", "port": 3000},
            ],
        },
    }


def _deployment(name: str, labels: dict[str, str], replicas: int, available: int, unavailable: int) -> dict:
    return {
        "metadata": {
            "name": name,
            "creationTimestamp": "2018-03-08T17:44:00+03:00",
            "labels": labels,
        },
        "status": {
            "replicas": replicas,
            "availableReplicas": available,
            "unavailableReplicas": unavailable,
        },
    }


@pytest.fixture
def cluster_service_list() -> ClusterServiceList:
    """reviews (two deployments) and httpbin (one deployment)."""
    return ClusterServiceList(
        services={
            "items": [
                _service("reviews", {"app": "reviews"}),
                _service("httpbin", {"app": "httpbin"}),
            ]
        },
        deployments={
            "items": [
                _deployment("reviews-v1", {"app": "reviews", "version": "v1"}, 3, 2, 1),
                _deployment("reviews-v2", {"app": "reviews", "version": "v2"}, 2, 1, 1),
                _deployment("httpbin-v1", {"app": "httpbin", "version": "v1"}, 1, 1, 0),
            ]
        },
    )


def _sample(destination: str, source: str, code: str, value: float) -> MetricSample:
    return MetricSample(
        metric={
            "destination_service": destination,
            "source_service": source,
            "response_code": code,
        },
        value=value,
        timestamp=1520520240.0,
    )


@pytest.fixture
def make_sample():
    """Factory for request samples."""
    return _sample


@pytest.fixture
def request_counters() -> MetricsVector:
    """Request totals between reviews, httpbin and traffic outside the mesh."""
    return MetricsVector(
        samples=[
            _sample("reviews.tutorial.svc.cluster.local", "httpbin.tutorial.svc.cluster.local", "200", 5),
            _sample("httpbin.tutorial.svc.cluster.local", "unknown", "200", 14),
            _sample("unknown", "httpbin.tutorial.svc.cluster.local", "400", 1.5),
            _sample("unknown", "reviews.tutorial.svc.cluster.local", "500", 1.5),
        ]
    )
