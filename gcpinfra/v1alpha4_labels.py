"""Resource labels for the v1alpha4 API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceLifecycle(str, Enum):
    """Lifecycle of a labelled resource."""

    OWNED = "owned"


NAME_GCP_PROVIDER_PREFIX = "capg-"
NAME_GCP_PROVIDER_OWNED = NAME_GCP_PROVIDER_PREFIX + "cluster-"
NAME_GCP_CLUSTER_API_ROLE = NAME_GCP_PROVIDER_PREFIX + "role"
API_SERVER_ROLE_TAG_VALUE = "apiserver"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    """Quote a string with escapes for quotes, backslashes and unprintables."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def _text(value: object) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def cluster_tag_key(name: str) -> str:
    """Return the label key that ties a resource to a cluster."""
    return f"{NAME_GCP_PROVIDER_OWNED}{name}"


class Labels(dict):
    """A mapping of label keys to values."""

    def equals(self, other: dict[str, str] | None) -> bool:
        """True when both hold the same keys and values."""
        if other is None:
            return False
        return dict(self) == dict(other)

    def has_owned(self, cluster: str) -> bool:
        """True when the labels mark the resource as owned by the cluster."""
        value = self.get(cluster_tag_key(cluster))
        return value is not None and value == ResourceLifecycle.OWNED.value

    def get_role(self) -> str:
        """Return the role label, or an empty string."""
        return self.get(NAME_GCP_CLUSTER_API_ROLE, "")

    def to_compute_filter(self) -> str:
        """Render the labels as a compute API filter expression."""
        return "".join(f"(labels.{key} = {_quote(value)}) " for key, value in self.items())

    def difference(self, other: dict[str, str] | None) -> Labels:
        """Return the entries whose key or value is not matched in other."""
        other = other or {}
        return Labels(
            (key, value)
            for key, value in self.items()
            if not (key in other and other[key] == value)
        )

    def add_labels(self, other: dict[str, str] | None) -> Labels:
        """Add and overwrite entries from other; return these labels."""
        if other:
            self.update(other)
        return self


@dataclass
class BuildParams:
    """Inputs for building the labels of a resource."""

    lifecycle: ResourceLifecycle | str
    cluster_name: str
    resource_id: str = ""
    role: str | None = None
    additional: dict[str, str] | None = None


def build(params: BuildParams) -> Labels:
    """Build labels including the cluster label."""
    tags = Labels(
        (key.lower(), value.lower()) for key, value in (params.additional or {}).items()
    )
    tags[cluster_tag_key(params.cluster_name)] = _text(params.lifecycle)
    if params.role is not None:
        tags[NAME_GCP_CLUSTER_API_ROLE] = params.role.lower()
    return tags