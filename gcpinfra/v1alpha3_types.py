"""Network, subnet and service account types for the v1alpha3 API."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a mapping, got {type(data).__name__}")
    return data


def _compact(pairs: tuple[tuple[str, Any], ...]) -> dict[str, Any]:
    return {key: value for key, value in pairs if value is not None and value != {} and value != ""}


@dataclass
class Filter:
    """A filter used to identify a resource."""

    name: str = ""
    values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: Any) -> Filter:
        data = _mapping(data)
        return cls(name=data.get("name", ""), values=list(data.get("values") or []))


@dataclass
class Network:
    """References to the networking resources of a cluster."""

    self_link: str | None = None
    firewall_rules: dict[str, str] = field(default_factory=dict)
    router: str | None = None
    api_server_address: str | None = None
    api_server_health_check: str | None = None
    api_server_instance_groups: dict[str, str] = field(default_factory=dict)
    api_server_backend_service: str | None = None
    api_server_target_proxy: str | None = None
    api_server_forwarding_rule: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact((
            ("selfLink", self.self_link),
            ("firewallRules", dict(self.firewall_rules)),
            ("router", self.router),
            ("apiServerIpAddress", self.api_server_address),
            ("apiServerHealthCheck", self.api_server_health_check),
            ("apiServerInstanceGroups", dict(self.api_server_instance_groups)),
            ("apiServerBackendService", self.api_server_backend_service),
            ("apiServerTargetProxy", self.api_server_target_proxy),
            ("apiServerForwardingRule", self.api_server_forwarding_rule),
        ))

    @classmethod
    def from_dict(cls, data: Any) -> Network:
        data = _mapping(data)
        return cls(
            self_link=data.get("selfLink"),
            firewall_rules=dict(data.get("firewallRules") or {}),
            router=data.get("router"),
            api_server_address=data.get("apiServerIpAddress"),
            api_server_health_check=data.get("apiServerHealthCheck"),
            api_server_instance_groups=dict(data.get("apiServerInstanceGroups") or {}),
            api_server_backend_service=data.get("apiServerBackendService"),
            api_server_target_proxy=data.get("apiServerTargetProxy"),
            api_server_forwarding_rule=data.get("apiServerForwardingRule"),
        )


@dataclass
class SubnetSpec:
    """Configuration of one subnet."""

    name: str = ""
    cidr_block: str = ""
    description: str | None = None
    secondary_cidr_blocks: dict[str, str] = field(default_factory=dict)
    region: str = ""
    private_google_access: bool | None = None
    enable_flow_logs: bool | None = None

    def __str__(self) -> str:
        return f"name={self.name}/region={self.region}"

    def to_dict(self) -> dict[str, Any]:
        out = _compact((
            ("name", self.name),
            ("cidrBlock", self.cidr_block),
            ("description", self.description),
            ("secondaryCidrBlocks", dict(self.secondary_cidr_blocks)),
            ("region", self.region),
            ("privateGoogleAccess", self.private_google_access),
        ))
        # This field is serialised under this key and is always present.
        out["routeTableId"] = self.enable_flow_logs
        return out

    @classmethod
    def from_dict(cls, data: Any) -> SubnetSpec:
        data = _mapping(data)
        return cls(
            name=data.get("name", ""),
            cidr_block=data.get("cidrBlock", ""),
            description=data.get("description"),
            secondary_cidr_blocks=dict(data.get("secondaryCidrBlocks") or {}),
            region=data.get("region", ""),
            private_google_access=data.get("privateGoogleAccess"),
            enable_flow_logs=data.get("routeTableId"),
        )


class Subnets(list):
    """A list of subnet specifications."""

    def to_map(self) -> dict[str, SubnetSpec]:
        """Return copies of the subnets keyed by name."""
        return {subnet.name: copy.copy(subnet) for subnet in self}

    def find_by_name(self, name: str) -> SubnetSpec | None:
        """Return a copy of the first subnet with this name, or None."""
        found = next((subnet for subnet in self if subnet.name == name), None)
        return None if found is None else copy.copy(found)

    def filter_by_region(self, region: str) -> Subnets:
        """Return the subnets that live in the region."""
        return Subnets(subnet for subnet in self if subnet.region == region)


@dataclass
class NetworkSpec:
    """Desired configuration of a cluster network."""

    name: str | None = None
    auto_create_subnetworks: bool | None = None
    subnets: Subnets = field(default_factory=Subnets)
    load_balancer_backend_port: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out = _compact((
            ("name", self.name),
            ("autoCreateSubnetworks", self.auto_create_subnetworks),
            ("loadBalancerBackendPort", self.load_balancer_backend_port),
        ))
        if self.subnets:
            out["subnets"] = [subnet.to_dict() for subnet in self.subnets]
        return out

    @classmethod
    def from_dict(cls, data: Any) -> NetworkSpec:
        data = _mapping(data)
        port = data.get("loadBalancerBackendPort")
        return cls(
            name=data.get("name"),
            auto_create_subnetworks=data.get("autoCreateSubnetworks"),
            subnets=Subnets(SubnetSpec.from_dict(item) for item in data.get("subnets") or []),
            load_balancer_backend_port=None if port is None else int(port),
        )


class InstanceStatus(str, Enum):
    """State of a compute instance."""

    PROVISIONING = "PROVISIONING"
    REPAIRING = "REPAIRING"
    RUNNING = "RUNNING"
    STAGING = "STAGING"
    STOPPED = "STOPPED"
    STOPPING = "STOPPING"
    SUSPENDED = "SUSPENDED"
    SUSPENDING = "SUSPENDING"
    TERMINATED = "TERMINATED"


@dataclass
class ServiceAccount:
    """Service account e-mail and scopes of an instance."""

    email: str = ""
    scopes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.email:
            out["email"] = self.email
        if self.scopes:
            out["scopes"] = list(self.scopes)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ServiceAccount:
        data = _mapping(data)
        return cls(email=data.get("email", ""), scopes=list(data.get("scopes") or []))