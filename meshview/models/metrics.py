"""Metrics vector models."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class MetricSample(BaseModel):
    """One labeled sample of a query result."""

    model_config = ConfigDict(frozen=True)

    metric: dict[str, str] = Field(default_factory=dict, description="Sample labels")
    value: float = Field(default=0.0, description="Sample value")
    timestamp: float = Field(default=0.0, description="Unix timestamp in seconds")


class MetricsVector(BaseModel):
    """Ordered samples returned by an instant query."""

    model_config = ConfigDict(frozen=True)

    samples: list[MetricSample] = Field(default_factory=list, description="Samples")

    @classmethod
    def from_query_result(cls, result: list[dict[str, Any]]) -> "MetricsVector":
        """
        Build a vector from the ``data.result`` list of a query response.

        Instant query rows carry ``value: [ts, "v"]``; range query rows carry
        ``values`` and contribute their latest point.
        """
        samples = []
        for row in result or []:
            point = row.get("value")
            if point is None and row.get("values"):
                point = row["values"][-1]
            if point is None:
                logger.debug("Skipping query row without a value: %s", row.get("metric"))
                continue
            timestamp, value = point
            samples.append(
                MetricSample(
                    metric=row.get("metric") or {},
                    value=float(value),
                    timestamp=float(timestamp),
                )
            )
        return cls(samples=samples)
