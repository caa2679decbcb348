"""Cluster runtime view models."""

from pydantic import Field

from .base import ViewModel


class Namespace(ViewModel):
    """A logical grouping of services."""

    name: str = Field(default="", description="Namespace name")


class Port(ViewModel):
    """A service or endpoint port."""

    name: str = Field(default="", description="Port name")
    protocol: str = Field(default="", description="Transport protocol (TCP, UDP)")
    port: int = Field(default=0, description="Port number")


class Address(ViewModel):
    """One runtime target backing a service, usually a pod."""

    kind: str = Field(default="", description="Kind of the referenced object")
    name: str = Field(default="", description="Name of the referenced object")
    ip: str = Field(default="", description="Target IP address")


class Endpoint(ViewModel):
    """One endpoint subset: addresses sharing the same ports."""

    addresses: list[Address] = Field(default_factory=list, description="Subset addresses")
    ports: list[Port] = Field(default_factory=list, description="Subset ports")
