"""Deployment-related view models."""

from pydantic import Field

from .base import ViewModel


class Autoscaler(ViewModel):
    """Horizontal pod autoscaler attached to a deployment.

    A deployment without an autoscaler carries the zero value of this model.
    """

    name: str = Field(default="", description="Autoscaler name")
    labels: dict[str, str] = Field(default_factory=dict, description="Autoscaler labels")
    created_at: str = Field(default="", description="Creation timestamp, as received")
    min_replicas: int = Field(default=0, description="Lower replica bound")
    max_replicas: int = Field(default=0, description="Upper replica bound")
    target_cpu_utilization_percentage: int = Field(
        default=0,
        alias="targetCPUUtilizationPercentage",
        description="Target average CPU utilization",
    )
    current_replicas: int = Field(default=0, description="Current replicas")
    desired_replicas: int = Field(default=0, description="Desired replicas")
    observed_generation: int = Field(default=0, description="Most recent observed generation")
    current_cpu_utilization_percentage: int = Field(
        default=0,
        alias="currentCPUUtilizationPercentage",
        description="Current average CPU utilization",
    )


class Deployment(ViewModel):
    """A deployment backing a service."""

    name: str = Field(default="", description="Deployment name")
    labels: dict[str, str] = Field(default_factory=dict, description="Deployment labels")
    created_at: str = Field(default="", description="Creation timestamp, as received")
    replicas: int = Field(default=0, description="Total replicas")
    available_replicas: int = Field(default=0, description="Available replicas")
    unavailable_replicas: int = Field(default=0, description="Unavailable replicas")
    autoscaler: Autoscaler = Field(default_factory=Autoscaler, description="Matching autoscaler")
