"""GCPMachine and GCPMachineTemplate resources of the v1alpha4 API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gcpinfra.meta import V1ALPHA4, ListMeta, NodeAddress, ObjectMeta, TypeMeta
from gcpinfra.v1alpha4_labels import Labels
from gcpinfra.v1alpha4_types import InstanceStatus, ServiceAccount

MACHINE_FINALIZER = "gcpmachine.infrastructure.cluster.x-k8s.io"

KIND_MACHINE = "GCPMachine"
KIND_MACHINE_LIST = "GCPMachineList"
KIND_MACHINE_TEMPLATE = "GCPMachineTemplate"
KIND_MACHINE_TEMPLATE_LIST = "GCPMachineTemplateList"


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


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


class DiskType(str, Enum):
    """Type of a persistent or local disk."""

    PD_STANDARD = "pd-standard"
    PD_SSD = "pd-ssd"
    LOCAL_SSD = "local-ssd"


def _disk_type(value: Any) -> DiskType | None:
    return None if value is None else DiskType(value)


@dataclass
class AttachedDiskSpec:
    """A non-boot disk attached to a machine."""

    device_type: DiskType | None = None
    size: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.device_type is not None:
            out["deviceType"] = DiskType(self.device_type).value
        if self.size is not None:
            out["size"] = self.size
        return out

    @classmethod
    def from_dict(cls, data: Any) -> AttachedDiskSpec:
        data = _mapping(data)
        return cls(
            device_type=_disk_type(data.get("deviceType")),
            size=_optional_int(data.get("size")),
        )


@dataclass
class MetadataItem:
    """One metadata entry of an instance."""

    key: str = ""
    value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"key": self.key}
        if self.value is not None:
            out["value"] = self.value
        return out

    @classmethod
    def from_dict(cls, data: Any) -> MetadataItem:
        data = _mapping(data)
        return cls(key=data.get("key", ""), value=data.get("value"))


@dataclass
class GCPMachineSpec:
    """Desired state of a GCPMachine."""

    instance_type: str = ""
    subnet: str | None = None
    provider_id: str | None = None
    image_family: str | None = None
    image: str | None = None
    additional_labels: Labels = field(default_factory=Labels)
    additional_metadata: list[MetadataItem] = field(default_factory=list)
    public_ip: bool | None = None
    additional_network_tags: list[str] = field(default_factory=list)
    root_device_size: int = 0
    root_device_type: DiskType | None = None
    additional_disks: list[AttachedDiskSpec] = field(default_factory=list)
    service_account: ServiceAccount | None = None
    preemptible: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"instanceType": self.instance_type}
        optional = (
            ("subnet", self.subnet),
            ("providerID", self.provider_id),
            ("imageFamily", self.image_family),
            ("image", self.image),
        )
        out.update((key, value) for key, value in optional if value is not None)
        if self.additional_labels:
            out["additionalLabels"] = dict(self.additional_labels)
        if self.additional_metadata:
            out["additionalMetadata"] = [item.to_dict() for item in self.additional_metadata]
        if self.public_ip is not None:
            out["publicIP"] = self.public_ip
        if self.additional_network_tags:
            out["additionalNetworkTags"] = list(self.additional_network_tags)
        if self.root_device_size:
            out["rootDeviceSize"] = self.root_device_size
        if self.root_device_type is not None:
            out["rootDeviceType"] = DiskType(self.root_device_type).value
        if self.additional_disks:
            out["additionalDisks"] = [disk.to_dict() for disk in self.additional_disks]
        if self.service_account is not None:
            out["serviceAccounts"] = self.service_account.to_dict()
        if self.preemptible:
            out["preemptible"] = True
        return out

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineSpec:
        data = _mapping(data)
        account = data.get("serviceAccounts")
        return cls(
            instance_type=data.get("instanceType", ""),
            subnet=data.get("subnet"),
            provider_id=data.get("providerID"),
            image_family=data.get("imageFamily"),
            image=data.get("image"),
            additional_labels=Labels(data.get("additionalLabels") or {}),
            additional_metadata=[
                MetadataItem.from_dict(item) for item in data.get("additionalMetadata") or []
            ],
            public_ip=data.get("publicIP"),
            additional_network_tags=list(data.get("additionalNetworkTags") or []),
            root_device_size=int(data.get("rootDeviceSize", 0) or 0),
            root_device_type=_disk_type(data.get("rootDeviceType")),
            additional_disks=[
                AttachedDiskSpec.from_dict(disk) for disk in data.get("additionalDisks") or []
            ],
            service_account=None if account is None else ServiceAccount.from_dict(account),
            preemptible=bool(data.get("preemptible", False)),
        )


@dataclass
class GCPMachineStatus:
    """Observed state of a GCPMachine."""

    ready: bool = False
    addresses: list[NodeAddress] = field(default_factory=list)
    instance_status: InstanceStatus | None = None
    failure_reason: str | None = None
    failure_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"ready": self.ready}
        if self.addresses:
            out["addresses"] = [address.to_dict() for address in self.addresses]
        if self.instance_status is not None:
            out["instanceState"] = InstanceStatus(self.instance_status).value
        if self.failure_reason is not None:
            out["failureReason"] = self.failure_reason
        if self.failure_message is not None:
            out["failureMessage"] = self.failure_message
        return out

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineStatus:
        data = _mapping(data)
        state = data.get("instanceState")
        return cls(
            ready=bool(data.get("ready", False)),
            addresses=[NodeAddress.from_dict(item) for item in data.get("addresses") or []],
            instance_status=None if state is None else InstanceStatus(state),
            failure_reason=data.get("failureReason"),
            failure_message=data.get("failureMessage"),
        )


@dataclass
class GCPMachine:
    """A machine's infrastructure on GCP."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GCPMachineSpec = field(default_factory=GCPMachineSpec)
    status: GCPMachineStatus = field(default_factory=GCPMachineStatus)
    type_meta: TypeMeta = field(default_factory=lambda: _default_type_meta(KIND_MACHINE))

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachine:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_MACHINE),
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=GCPMachineSpec.from_dict(data.get("spec")),
            status=GCPMachineStatus.from_dict(data.get("status")),
        )


@dataclass
class GCPMachineList:
    """A list of GCPMachine objects."""

    items: list[GCPMachine] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_MACHINE_LIST)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineList:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_MACHINE_LIST),
            metadata=ListMeta.from_dict(data.get("metadata")),
            items=[GCPMachine.from_dict(item) for item in data.get("items") or []],
        )


@dataclass
class GCPMachineTemplateResource:
    """Data needed to create a GCPMachine from a template."""

    spec: GCPMachineSpec = field(default_factory=GCPMachineSpec)

    def to_dict(self) -> dict[str, Any]:
        return {"spec": self.spec.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineTemplateResource:
        data = _mapping(data)
        return cls(spec=GCPMachineSpec.from_dict(data.get("spec")))


@dataclass
class GCPMachineTemplateSpec:
    """Desired state of a GCPMachineTemplate."""

    template: GCPMachineTemplateResource = field(default_factory=GCPMachineTemplateResource)

    def to_dict(self) -> dict[str, Any]:
        return {"template": self.template.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineTemplateSpec:
        data = _mapping(data)
        return cls(template=GCPMachineTemplateResource.from_dict(data.get("template")))


@dataclass
class GCPMachineTemplate:
    """A template from which GCPMachines are created."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: GCPMachineTemplateSpec = field(default_factory=GCPMachineTemplateSpec)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_MACHINE_TEMPLATE)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineTemplate:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_MACHINE_TEMPLATE),
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=GCPMachineTemplateSpec.from_dict(data.get("spec")),
        )


@dataclass
class GCPMachineTemplateList:
    """A list of GCPMachineTemplate objects."""

    items: list[GCPMachineTemplate] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    type_meta: TypeMeta = field(
        default_factory=lambda: _default_type_meta(KIND_MACHINE_TEMPLATE_LIST)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> GCPMachineTemplateList:
        data = _mapping(data)
        return cls(
            type_meta=_type_meta(data, KIND_MACHINE_TEMPLATE_LIST),
            metadata=ListMeta.from_dict(data.get("metadata")),
            items=[GCPMachineTemplate.from_dict(item) for item in data.get("items") or []],
        )