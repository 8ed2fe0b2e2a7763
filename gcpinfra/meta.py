"""Object metadata and shared API value types for the infrastructure resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

GROUP = "infrastructure.cluster.x-k8s.io"


def _mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a mapping, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the value used in an object's apiVersion field."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return self.api_version()


V1ALPHA3 = GroupVersion(GROUP, "v1alpha3")
V1ALPHA4 = GroupVersion(GROUP, "v1alpha4")


@dataclass
class TypeMeta:
    """Kind and API version of an object."""

    kind: str = ""
    api_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.kind:
            out["kind"] = self.kind
        if self.api_version:
            out["apiVersion"] = self.api_version
        return out

    @classmethod
    def from_dict(cls, data: Any) -> TypeMeta:
        data = _mapping(data)
        return cls(kind=data.get("kind", ""), api_version=data.get("apiVersion", ""))


@dataclass
class ObjectMeta:
    """Metadata carried by every persisted object."""

    name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        pairs = (
            ("name", self.name),
            ("namespace", self.namespace),
            ("uid", self.uid),
            ("resourceVersion", self.resource_version),
            ("generation", self.generation),
            ("labels", dict(self.labels)),
            ("annotations", dict(self.annotations)),
        )
        return {key: value for key, value in pairs if value}

    @classmethod
    def from_dict(cls, data: Any) -> ObjectMeta:
        data = _mapping(data)
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            uid=data.get("uid", ""),
            resource_version=data.get("resourceVersion", ""),
            generation=int(data.get("generation", 0) or 0),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
        )


@dataclass
class ListMeta:
    """Metadata carried by list objects."""

    resource_version: str = ""
    continue_token: str = ""
    remaining_item_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.resource_version:
            out["resourceVersion"] = self.resource_version
        if self.continue_token:
            out["continue"] = self.continue_token
        if self.remaining_item_count is not None:
            out["remainingItemCount"] = self.remaining_item_count
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ListMeta:
        data = _mapping(data)
        remaining = data.get("remainingItemCount")
        return cls(
            resource_version=data.get("resourceVersion", ""),
            continue_token=data.get("continue", ""),
            remaining_item_count=None if remaining is None else int(remaining),
        )


@dataclass
class APIEndpoint:
    """Host and port of an API server."""

    host: str = ""
    port: int = 0

    def is_zero(self) -> bool:
        """True when neither host nor port is set."""
        return not self.host and self.port == 0

    def to_dict(self) -> dict[str, Any]:
        return {"host": self.host, "port": self.port}

    @classmethod
    def from_dict(cls, data: Any) -> APIEndpoint:
        data = _mapping(data)
        return cls(host=data.get("host", ""), port=int(data.get("port", 0) or 0))


@dataclass
class FailureDomainSpec:
    """Description of one failure domain."""

    control_plane: bool = False
    attributes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.control_plane:
            out["controlPlane"] = True
        if self.attributes:
            out["attributes"] = dict(self.attributes)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> FailureDomainSpec:
        data = _mapping(data)
        return cls(
            control_plane=bool(data.get("controlPlane", False)),
            attributes=dict(data.get("attributes") or {}),
        )


@dataclass
class NodeAddress:
    """One address of a node."""

    type: str = ""
    address: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "address": self.address}

    @classmethod
    def from_dict(cls, data: Any) -> NodeAddress:
        data = _mapping(data)
        return cls(type=data.get("type", ""), address=data.get("address", ""))