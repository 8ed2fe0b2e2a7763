import pytest

from gcpinfra.meta import APIEndpoint, FailureDomainSpec, ListMeta, ObjectMeta
from gcpinfra.v1alpha4_cluster import (
    GCPCluster,
    GCPClusterList,
    GCPClusterSpec,
    GCPClusterStatus,
    GCPClusterTemplate,
    GCPClusterTemplateList,
    GCPClusterTemplateResource,
    GCPClusterTemplateSpec,
)
from gcpinfra.v1alpha4_labels import Labels, cluster_tag_key
from gcpinfra.v1alpha4_types import Network, NetworkSpec, SubnetSpec, Subnets


def _spec():
    return GCPClusterSpec(
        project="proj",
        region="us-east1",
        control_plane_endpoint=APIEndpoint(host="10.0.0.1", port=6443),
        network=NetworkSpec(
            name="net",
            auto_create_subnetworks=False,
            subnets=Subnets([SubnetSpec(name="a", cidr_block="10.0.0.0/16", region="us-east1")]),
        ),
        failure_domains=["us-east1-b", "us-east1-c"],
        additional_labels=Labels({cluster_tag_key("c1"): "owned", "env": "dev"}),
    )


def _cluster():
    return GCPCluster(
        metadata=ObjectMeta(name="c1", namespace="default"),
        spec=_spec(),
        status=GCPClusterStatus(
            failure_domains={"us-east1-b": FailureDomainSpec(control_plane=True)},
            network=Network(self_link="link", router="router"),
            ready=True,
        ),
    )


def test_default_cluster_carries_kind_and_api_version():
    out = GCPCluster().to_dict()
    assert out["kind"] == "GCPCluster"
    assert out["apiVersion"] == "infrastructure.cluster.x-k8s.io/v1alpha4"


def test_cluster_round_trip():
    cluster = _cluster()
    assert GCPCluster.from_dict(cluster.to_dict()) == cluster


def test_cluster_labels_restored_as_labels():
    restored = GCPCluster.from_dict(_cluster().to_dict())
    assert restored.spec.additional_labels.has_owned("c1")


def test_cluster_wrong_kind_rejected():
    data = _cluster().to_dict()
    data["kind"] = "GCPMachine"
    with pytest.raises(ValueError):
        GCPCluster.from_dict(data)


def test_cluster_wrong_api_version_rejected():
    data = _cluster().to_dict()
    data["apiVersion"] = "infrastructure.cluster.x-k8s.io/v1alpha3"
    with pytest.raises(ValueError):
        GCPCluster.from_dict(data)


def test_cluster_non_mapping_rejected():
    with pytest.raises(TypeError):
        GCPCluster.from_dict(["not", "a", "mapping"])


def test_empty_spec_omits_optional_fields():
    out = GCPClusterSpec(project="p", region="r").to_dict()
    assert "failureDomains" not in out
    assert "additionalLabels" not in out
    assert out["project"] == "p"
    assert out["region"] == "r"


def test_status_always_reports_ready():
    out = GCPClusterStatus().to_dict()
    assert out["ready"] is False
    assert "failureDomains" not in out


def test_cluster_list_round_trip():
    clusters = GCPClusterList(items=[_cluster(), GCPCluster()], metadata=ListMeta(resource_version="7"))
    data = clusters.to_dict()
    assert data["kind"] == "GCPClusterList"
    assert GCPClusterList.from_dict(data) == clusters


def test_template_round_trip():
    template = GCPClusterTemplate(
        metadata=ObjectMeta(name="tpl"),
        spec=GCPClusterTemplateSpec(template=GCPClusterTemplateResource(spec=_spec())),
    )
    data = template.to_dict()
    assert data["kind"] == "GCPClusterTemplate"
    assert data["spec"]["template"]["spec"]["project"] == "proj"
    assert GCPClusterTemplate.from_dict(data) == template


def test_template_list_round_trip_and_kind_check():
    templates = GCPClusterTemplateList(items=[GCPClusterTemplate(metadata=ObjectMeta(name="t"))])
    data = templates.to_dict()
    assert GCPClusterTemplateList.from_dict(data) == templates
    data["kind"] = "GCPClusterList"
    with pytest.raises(ValueError):
        GCPClusterTemplateList.from_dict(data)