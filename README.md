# gcpinfra

Python data model for GCP cluster infrastructure resources of the API
group `infrastructure.cluster.x-k8s.io`.

It has:

- dataclasses for `v1alpha4` clusters, cluster templates, machines and
  machine templates, each with `to_dict()` and `from_dict()` that use the
  same JSON field names as the API objects;
- network, subnet and service account types for both `v1alpha3` and
  `v1alpha4`;
- `v1alpha4` label helpers for marking resources as owned by a cluster and
  for building GCP compute filters;
- subnet helpers for looking subnets up by name or region.

There are no dependencies beyond the standard library.

## Installation

```
pip install gcpinfra
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "gcpinfra[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `gcpinfra.meta` | `GroupVersion` (with `V1ALPHA3` and `V1ALPHA4`), `TypeMeta`, `ObjectMeta`, `ListMeta`, `APIEndpoint`, `FailureDomainSpec`, `NodeAddress` |
| `gcpinfra.v1alpha3_types`, `gcpinfra.v1alpha4_types` | `Filter`, `Network`, `NetworkSpec`, `SubnetSpec`, `Subnets`, `InstanceStatus`, `ServiceAccount` |
| `gcpinfra.v1alpha4_labels` | `Labels`, `ResourceLifecycle`, `BuildParams`, `cluster_tag_key`, `build` |
| `gcpinfra.v1alpha4_cluster` | `GCPClusterSpec`, `GCPClusterStatus`, `GCPCluster`, `GCPClusterList`, `GCPClusterTemplateResource`, `GCPClusterTemplateSpec`, `GCPClusterTemplate`, `GCPClusterTemplateList`, `CLUSTER_FINALIZER` |
| `gcpinfra.v1alpha4_machine` | `DiskType`, `AttachedDiskSpec`, `MetadataItem`, `GCPMachineSpec`, `GCPMachineStatus`, `GCPMachine`, `GCPMachineList`, `GCPMachineTemplateResource`, `GCPMachineTemplateSpec`, `GCPMachineTemplate`, `GCPMachineTemplateList`, `MACHINE_FINALIZER` |

## Labels

```python
from gcpinfra.v1alpha4_labels import BuildParams, Labels, ResourceLifecycle, build

tags = build(BuildParams(
    lifecycle=ResourceLifecycle.OWNED,
    cluster_name="demo",
    role="APIServer",
    additional=Labels({"Team": "Infra"}),
))
assert tags.has_owned("demo")
assert tags.get_role() == "apiserver"
print(tags.to_compute_filter())
# (labels.team = "infra") (labels.capg-cluster-demo = "owned") (labels.capg-role = "apiserver")
```

`build` lower-cases the keys and values of the additional labels and the
role, and adds the cluster label `capg-cluster-<name>` (see
`cluster_tag_key`). `Labels.difference` keeps only the entries whose key is
missing from the other labels or whose value differs there.
`Labels.add_labels` merges the other labels in, overwriting existing keys,
and returns the same `Labels`. `Labels.equals` is false against `None`.

## Subnets

```python
from gcpinfra.v1alpha4_types import SubnetSpec, Subnets

subnets = Subnets([
    SubnetSpec(name="a", region="us-east1"),
    SubnetSpec(name="b", region="europe-west1"),
])
subnets.find_by_name("a")               # a copy of the SubnetSpec, or None
subnets.filter_by_region("us-east1")    # a new Subnets
subnets.to_map()                        # {"a": ..., "b": ...}, copies
str(subnets[0])                         # "name=a/region=us-east1"
```

`SubnetSpec.to_dict()` always writes the flow-log setting under the key
`routeTableId`, even when it is `None`.

## Serialisation

The `v1alpha4` resource types serialise to and from plain dictionaries
using the API's JSON field names, so they can be written out with `json`
or a YAML library:

```python
from gcpinfra.v1alpha4_machine import GCPMachine

machine = GCPMachine.from_dict(document)
assert GCPMachine.from_dict(machine.to_dict()) == machine
```

`to_dict()` on a top-level resource includes `kind` and
`apiVersion` (`infrastructure.cluster.x-k8s.io/v1alpha4`). `from_dict()`
raises `ValueError` when the document names a different kind or API
version, or holds an unknown disk type or instance state, and `TypeError`
when a part that should be a mapping is not one.

## What this package does not do

- For `v1alpha3` it has only the network, subnet, filter, instance status
  and service account types; there are no `v1alpha3` cluster, machine or
  template resources and no `v1alpha3` label helpers.
- It does not convert resources between API versions.
- It does not talk to GCP or to a Kubernetes API server, and does not
  reconcile or store resources; it only models and serialises them.