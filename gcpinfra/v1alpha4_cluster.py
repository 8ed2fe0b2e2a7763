"""GCPCluster and GCPClusterTemplate resources of the v1alpha4 API.

This API version is deprecated and will be removed in a future release.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gcpinfra.meta import (
    V1ALPHA4,
    APIEndpoint,
    FailureDomainSpec,
    ListMeta,
    ObjectMeta,
    TypeMeta,
)
from gcpinfra.v1alpha4_labels import Labels
from gcpinfra.v1alpha4_types import Network, NetworkSpec

CLUSTER_FINALIZER = "gcpcluster.infrastructure.cluster.x-k8s.io"

KIND_CLUSTER = "GCPCluster"
KIND_CLUSTER_LIST = "GCPClusterList"
KIND_CLUSTER_TEMPLATE = "GCPClusterTemplate"
KIND_CLUSTER_TEMPLATE_LIST = "GCPClusterTemplateList"


def _mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a mapping, got {type(data).__name__}")
    return data


def _default_type_meta(kind: str) -> TypeMeta:
    return TypeMeta(kind=kind, api_version=V1ALPHA4.api_version())


def _type_meta(data: Mapping[str, Any], kind: str) -> TypeMeta:
    given = TypeMeta.from_dict(data)
    if given.kind and given.kind != kind:
        raise ValueError(f"expected kind {kind!r}, got {given.kind!r}")
    expected_version = V1ALPHA4.api_version()
    if given.api_version and given.api_version != expected_version:
        raise ValueError(
            f"expected apiVersion {expected_version!r}, got {given.api_version!r}"
        )
    return _default_type_meta(kind)


@dataclass
class GCPClusterSpec:
    """Desired state of a GCPCluster."""

    project: str = ""
    region: str = ""
    control_plane_endpoint: APIEndpoint = field(default_factory=APIEndpoint)
    network: NetworkSpec = field(default_factory=NetworkSpec)
    failure_domains: list[str] = field(default_factory=list)
    additional_labels: Labels = field(default_factory=Labels)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "project": self.project,
            "region": self.region,
            "controlPlaneEndpoint": self.control_plane_endpoint.to_dict(),
            "network": self.network.to_dict(),
        }
        if self.failure_domains:
            out["failureDomains"] = list(self.failure_domains)
        if self.additional_labels:
            out["additionalLabels"] = dict(self.additional_labels)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterSpec:
        data = _mapping(data)
        return cls(
            project=data.get("project", ""),
            region=data.get("region", ""),
            control_plane_endpoint=APIEndpoint.from_dict(data.get("controlPlaneEndpoint")),
            network=NetworkSpec.from_dict(data.get("network")),
            failure_domains=list(data.get("failureDomains") or []),
            additional_labels=Labels(data.get("additionalLabels") or {}),
        )


@dataclass
class GCPClusterStatus:
    """Observed state of a GCPCluster."""

    failure_domains: dict[str, FailureDomainSpec] = field(default_factory=dict)
    network: Network = field(default_factory=Network)
    ready: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.failure_domains:
            out["failureDomains"] = {
                name: spec.to_dict() for name, spec in self.failure_domains.items()
            }
        out["network"] = self.network.to_dict()
        out["ready"] = self.ready
        return out

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterStatus:
        data = _mapping(data)
        domains = _mapping(data.get("failureDomains"))
        return cls(
            failure_domains={
                name: FailureDomainSpec.from_dict(spec) for name, spec in domains.items()
            },
            network=Network.from_dict(data.get("network")),
            ready=bool(data.get("ready", False)),
        )


@dataclass
class GCPCluster:
    """A cluster's infrastructure on GCP."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GCPClusterSpec = field(default_factory=GCPClusterSpec)
    status: GCPClusterStatus = field(default_factory=GCPClusterStatus)
    type_meta: TypeMeta = field(default_factory=lambda: _default_type_meta(KIND_CLUSTER))

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPCluster:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_CLUSTER),
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=GCPClusterSpec.from_dict(data.get("spec")),
            status=GCPClusterStatus.from_dict(data.get("status")),
        )


@dataclass
class GCPClusterList:
    """A list of GCPCluster objects."""

    items: list[GCPCluster] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_CLUSTER_LIST)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterList:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_CLUSTER_LIST),
            metadata=ListMeta.from_dict(data.get("metadata")),
            items=[GCPCluster.from_dict(item) for item in data.get("items") or []],
        )


@dataclass
class GCPClusterTemplateResource:
    """The cluster spec held by a template."""

    spec: GCPClusterSpec = field(default_factory=GCPClusterSpec)

    def to_dict(self) -> dict[str, Any]:
        return {"spec": self.spec.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterTemplateResource:
        data = _mapping(data)
        return cls(spec=GCPClusterSpec.from_dict(data.get("spec")))


@dataclass
class GCPClusterTemplateSpec:
    """Desired state of a GCPClusterTemplate."""

    template: GCPClusterTemplateResource = field(default_factory=GCPClusterTemplateResource)

    def to_dict(self) -> dict[str, Any]:
        return {"template": self.template.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterTemplateSpec:
        data = _mapping(data)
        return cls(template=GCPClusterTemplateResource.from_dict(data.get("template")))


@dataclass
class GCPClusterTemplate:
    """A template from which GCPClusters are created."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GCPClusterTemplateSpec = field(default_factory=GCPClusterTemplateSpec)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_CLUSTER_TEMPLATE)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterTemplate:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_CLUSTER_TEMPLATE),
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=GCPClusterTemplateSpec.from_dict(data.get("spec")),
        )


@dataclass
class GCPClusterTemplateList:
    """A list of GCPClusterTemplate objects."""

    items: list[GCPClusterTemplate] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_CLUSTER_TEMPLATE_LIST)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPClusterTemplateList:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_CLUSTER_TEMPLATE_LIST),
            metadata=ListMeta.from_dict(data.get("metadata")),
            items=[GCPClusterTemplate.from_dict(item) for item in data.get("items") or []],
        )