"""
Request counter processing.

Folds a request-count vector into the request statistics of each service
overview.
"""

import logging
import math
from typing import Optional

from ..config import PrometheusSettings, Settings
from ..models.metrics import MetricSample, MetricsVector
from ..models.services import ServiceList, ServiceOverview
from .label_matcher import matches_service

logger = logging.getLogger(__name__)


def is_error_code(code: str, threshold: int = 400) -> bool:
    """Check whether a response code label denotes a client or server error."""
    try:
        return int(code) >= threshold
    except (TypeError, ValueError):
        return False


def process_request_counters(
    service_list: ServiceList,
    vector: MetricsVector,
    settings: Optional[Settings] = None,
) -> ServiceList:
    """
    Fill in request count, error count and error rate of every overview.

    A sample counts toward a service when the service is its source or its
    destination, once even if it is both. Samples missing the source,
    destination or response code label, or with a non-finite value (NaN, Inf),
    are ignored. The error rate of a service without requests is 0.

    Returns:
        A new ServiceList; ``service_list`` and ``vector`` are left untouched.
    """
    settings = settings or Settings()
    prometheus = settings.prometheus
    required = (
        prometheus.source_label,
        prometheus.destination_label,
        prometheus.response_code_label,
    )

    samples: list[MetricSample] = []
    for sample in vector.samples:
        if math.isfinite(sample.value) and all(label in sample.metric for label in required):
            samples.append(sample)
    skipped = len(vector.samples) - len(samples)
    if skipped:
        logger.debug("Ignoring %d malformed or non-finite samples", skipped)

    services = [
        _count_requests(overview, samples, prometheus, settings.istio.unknown_service)
        for overview in service_list.services
    ]
    return service_list.model_copy(update={"services": services})


def _count_requests(
    overview: ServiceOverview,
    samples: list[MetricSample],
    prometheus: PrometheusSettings,
    unknown: str,
) -> ServiceOverview:
    request_count = 0.0
    error_count = 0.0

    for sample in samples:
        source = sample.metric[prometheus.source_label]
        destination = sample.metric[prometheus.destination_label]
        if not (
            matches_service(source, overview.name, unknown)
            or matches_service(destination, overview.name, unknown)
        ):
            continue
        request_count += sample.value
        code = sample.metric[prometheus.response_code_label]
        if is_error_code(code, prometheus.error_code_threshold):
            error_count += sample.value

    error_rate = error_count / request_count if request_count > 0 else 0.0

    return overview.model_copy(
        update={
            "request_count": request_count,
            "request_error_count": error_count,
            "error_rate": error_rate,
        }
    )
