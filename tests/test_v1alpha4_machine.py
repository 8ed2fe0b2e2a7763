import pytest

from gcpinfra.meta import ListMeta, NodeAddress, ObjectMeta
from gcpinfra.v1alpha4_labels import Labels
from gcpinfra.v1alpha4_machine import (
    AttachedDiskSpec,
    DiskType,
    GCPMachine,
    GCPMachineList,
    GCPMachineSpec,
    GCPMachineStatus,
    GCPMachineTemplate,
    GCPMachineTemplateList,
    GCPMachineTemplateResource,
    GCPMachineTemplateSpec,
    MetadataItem,
)
from gcpinfra.v1alpha4_types import InstanceStatus, ServiceAccount


def _spec():
    return GCPMachineSpec(
        instance_type="n1-standard-2",
        subnet="sub",
        provider_id="gce://proj/zone/vm",
        image_family="fam",
        image="img",
        additional_labels=Labels({"env": "dev"}),
        additional_metadata=[MetadataItem(key="k", value="v"), MetadataItem(key="bare")],
        public_ip=True,
        additional_network_tags=["web"],
        root_device_size=50,
        root_device_type=DiskType.PD_SSD,
        additional_disks=[AttachedDiskSpec(device_type=DiskType.LOCAL_SSD, size=375)],
        service_account=ServiceAccount(email="default@example.com", scopes=["scope"]),
        preemptible=True,
    )


def _machine():
    return GCPMachine(
        metadata=ObjectMeta(name="m1", namespace="default"),
        spec=_spec(),
        status=GCPMachineStatus(
            ready=True,
            addresses=[NodeAddress(type="InternalIP", address="10.0.0.2")],
            instance_status=InstanceStatus.RUNNING,
            failure_reason="reason",
            failure_message="message",
        ),
    )


def test_disk_type_values():
    assert DiskType("pd-standard") is DiskType.PD_STANDARD
    assert DiskType.LOCAL_SSD.value == "local-ssd"


def test_attached_disk_serialises_device_type_string():
    out = AttachedDiskSpec(device_type=DiskType.PD_SSD, size=100).to_dict()
    assert out == {"deviceType": "pd-ssd", "size": 100}
    assert AttachedDiskSpec.from_dict(out) == AttachedDiskSpec(DiskType.PD_SSD, 100)


def test_attached_disk_rejects_unknown_type():
    with pytest.raises(ValueError):
        AttachedDiskSpec.from_dict({"deviceType": "floppy"})


def test_empty_attached_disk_is_empty_dict():
    assert AttachedDiskSpec().to_dict() == {}


def test_metadata_item_omits_missing_value():
    assert MetadataItem(key="bare").to_dict() == {"key": "bare"}
    assert MetadataItem.from_dict({"key": "k", "value": "v"}) == MetadataItem("k", "v")


def test_machine_spec_round_trip():
    spec = _spec()
    assert GCPMachineSpec.from_dict(spec.to_dict()) == spec


def test_service_account_serialised_under_plural_key():
    out = _spec().to_dict()
    assert out["serviceAccounts"]["email"] == "default@example.com"
    assert "serviceAccount" not in out


def test_minimal_spec_only_has_instance_type():
    assert GCPMachineSpec(instance_type="e2-small").to_dict() == {"instanceType": "e2-small"}


def test_status_rejects_unknown_instance_state():
    with pytest.raises(ValueError):
        GCPMachineStatus.from_dict({"instanceState": "EXPLODED"})


def test_status_instance_state_key():
    out = GCPMachineStatus(instance_status=InstanceStatus.STOPPED).to_dict()
    assert out["instanceState"] == "STOPPED"
    assert out["ready"] is False


def test_machine_round_trip_and_kind():
    machine = _machine()
    data = machine.to_dict()
    assert data["kind"] == "GCPMachine"
    assert data["apiVersion"] == "infrastructure.cluster.x-k8s.io/v1alpha4"
    assert GCPMachine.from_dict(data) == machine


def test_machine_wrong_kind_rejected():
    data = _machine().to_dict()
    data["kind"] = "GCPCluster"
    with pytest.raises(ValueError):
        GCPMachine.from_dict(data)


def test_machine_non_mapping_rejected():
    with pytest.raises(TypeError):
        GCPMachine.from_dict("machine")


def test_machine_list_round_trip():
    machines = GCPMachineList(items=[_machine(), GCPMachine()], metadata=ListMeta(continue_token="next"))
    assert GCPMachineList.from_dict(machines.to_dict()) == machines


def test_machine_template_round_trip():
    template = GCPMachineTemplate(
        metadata=ObjectMeta(name="tpl"),
        spec=GCPMachineTemplateSpec(template=GCPMachineTemplateResource(spec=_spec())),
    )
    data = template.to_dict()
    assert data["kind"] == "GCPMachineTemplate"
    assert data["spec"]["template"]["spec"]["instanceType"] == "n1-standard-2"
    assert GCPMachineTemplate.from_dict(data) == template


def test_machine_template_list_round_trip_and_version_check():
    templates = GCPMachineTemplateList(items=[GCPMachineTemplate(metadata=ObjectMeta(name="t"))])
    data = templates.to_dict()
    assert GCPMachineTemplateList.from_dict(data) == templates
    data["apiVersion"] = "infrastructure.cluster.x-k8s.io/v1alpha3"
    with pytest.raises(ValueError):
        GCPMachineTemplateList.from_dict(data)