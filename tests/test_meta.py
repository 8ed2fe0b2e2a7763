import pytest

from gcpinfra.meta import (
    V1ALPHA3,
    V1ALPHA4,
    APIEndpoint,
    FailureDomainSpec,
    GroupVersion,
    ListMeta,
    NodeAddress,
    ObjectMeta,
    TypeMeta,
)


def test_group_versions_api_version():
    assert V1ALPHA3.api_version() == "infrastructure.cluster.x-k8s.io/v1alpha3"
    assert V1ALPHA4.api_version() == "infrastructure.cluster.x-k8s.io/v1alpha4"


def test_group_version_without_group_is_version_only():
    assert GroupVersion("", "v1").api_version() == "v1"
    assert str(GroupVersion("", "v1")) == "v1"


def test_type_meta_round_trip():
    meta = TypeMeta(kind="GCPCluster", api_version=V1ALPHA3.api_version())
    data = meta.to_dict()
    assert data["kind"] == "GCPCluster"
    assert TypeMeta.from_dict(data) == meta


def test_type_meta_empty_is_omitted():
    assert TypeMeta().to_dict() == {}


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="c1",
        namespace="default",
        resource_version="12",
        generation=3,
        labels={"a": "b"},
        annotations={"x": "y"},
    )
    data = meta.to_dict()
    assert data["resourceVersion"] == "12"
    assert ObjectMeta.from_dict(data) == meta


def test_object_meta_from_none_is_empty():
    assert ObjectMeta.from_dict(None) == ObjectMeta()


def test_list_meta_round_trip():
    meta = ListMeta(resource_version="5", continue_token="next", remaining_item_count=2)
    data = meta.to_dict()
    assert data["continue"] == "next"
    assert ListMeta.from_dict(data) == meta


def test_api_endpoint_is_zero():
    assert APIEndpoint().is_zero()
    assert not APIEndpoint(host="1.2.3.4").is_zero()
    assert not APIEndpoint(port=6443).is_zero()


def test_api_endpoint_round_trip():
    endpoint = APIEndpoint(host="example.com", port=6443)
    assert APIEndpoint.from_dict(endpoint.to_dict()) == endpoint


def test_failure_domain_spec_round_trip():
    spec = FailureDomainSpec(control_plane=True, attributes={"zone": "z1"})
    assert FailureDomainSpec.from_dict(spec.to_dict()) == spec
    assert FailureDomainSpec().to_dict() == {}


def test_node_address_round_trip():
    address = NodeAddress(type="InternalIP", address="10.0.0.1")
    assert NodeAddress.from_dict(address.to_dict()) == address


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        ObjectMeta.from_dict(["name"])