"""Kubernetes-style type and object metadata shared by every resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the ``group/version`` string; only the version for the core group."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_NAME = "fluentbit.fluent.io"
SCHEME_GROUP_VERSION = GroupVersion(group=GROUP_NAME, version="v1alpha2")


@dataclass
class TypeMeta:
    """The API version and kind of a serialized object."""

    api_version: str = ""
    kind: str = ""


@dataclass
class ObjectMeta:
    """Name, labels, finalizers and lifecycle data of a resource."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    resource_version: str = ""
    deletion_timestamp: datetime | None = None

    def is_being_deleted(self) -> bool:
        """True once a deletion timestamp has been set."""
        return self.deletion_timestamp is not None

    def has_finalizer(self, name: str) -> bool:
        """True if ``name`` is among the finalizers."""
        return name in self.finalizers

    def add_finalizer(self, name: str) -> None:
        """Append ``name`` to the finalizers."""
        self.finalizers.append(name)

    def remove_finalizer(self, name: str) -> None:
        """Drop every occurrence of ``name`` from the finalizers."""
        self.finalizers = [item for item in self.finalizers if item != name]