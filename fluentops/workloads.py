"""FluentBit and Collector workload resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fluentops.meta import ObjectMeta, TypeMeta

FLUENT_BIT_FINALIZER_NAME = "fluentbit.fluent.io"
COLLECTOR_FINALIZER_NAME = "collector.fluent.io"


@dataclass
class FluentBitSpec:
    """Desired state of a FluentBit daemon set."""

    disable_service: bool = False
    image: str = ""
    args: list[str] = field(default_factory=list)
    command: list[str] = field(default_factory=list)
    image_pull_policy: str = ""
    image_pull_secrets: list[dict[str, Any]] = field(default_factory=list)
    position_db: dict[str, Any] = field(default_factory=dict)
    container_log_real_path: str = ""
    resources: dict[str, Any] = field(default_factory=dict)
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: dict[str, Any] | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    fluent_bit_config_name: str = ""
    secrets: list[str] = field(default_factory=list)
    runtime_class_name: str = ""
    priority_class_name: str = ""
    volumes: list[dict[str, Any]] = field(default_factory=list)
    volumes_mounts: list[dict[str, Any]] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    security_context: dict[str, Any] | None = None
    host_network: bool = False
    env_vars: list[dict[str, Any]] = field(default_factory=list)
    liveness_probe: dict[str, Any] | None = None
    readiness_probe: dict[str, Any] | None = None
    init_containers: list[dict[str, Any]] = field(default_factory=list)
    ports: list[dict[str, Any]] = field(default_factory=list)
    rbac_rules: list[dict[str, Any]] = field(default_factory=list)
    dns_policy: str = ""
    metrics_port: int = 0


@dataclass
class FluentBit:
    """A FluentBit resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: FluentBitSpec = field(default_factory=FluentBitSpec)
    status: dict[str, Any] = field(default_factory=dict)

    def is_being_deleted(self) -> bool:
        """True once a deletion timestamp has been set."""
        return self.metadata.is_being_deleted()

    def has_finalizer(self, finalizer_name: str) -> bool:
        """True if the resource carries ``finalizer_name``."""
        return self.metadata.has_finalizer(finalizer_name)

    def add_finalizer(self, finalizer_name: str) -> None:
        """Append ``finalizer_name`` to the resource's finalizers."""
        self.metadata.add_finalizer(finalizer_name)

    def remove_finalizer(self, finalizer_name: str) -> None:
        """Remove ``finalizer_name`` from the resource's finalizers."""
        self.metadata.remove_finalizer(finalizer_name)


@dataclass
class FluentBitList:
    """A list of FluentBit resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[FluentBit] = field(default_factory=list)


@dataclass
class CollectorSpec:
    """Desired state of a Collector stateful set."""

    image: str = ""
    args: list[str] = field(default_factory=list)
    image_pull_policy: str = ""
    image_pull_secrets: list[dict[str, Any]] = field(default_factory=list)
    resources: dict[str, Any] = field(default_factory=dict)
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: dict[str, Any] | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    fluent_bit_config_name: str = ""
    secrets: list[str] = field(default_factory=list)
    runtime_class_name: str = ""
    priority_class_name: str = ""
    volumes: list[dict[str, Any]] = field(default_factory=list)
    volumes_mounts: list[dict[str, Any]] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    security_context: dict[str, Any] | None = None
    host_network: bool = False
    persistent_volume_claim: dict[str, Any] | None = None
    rbac_rules: list[dict[str, Any]] = field(default_factory=list)
    disable_service: bool = False
    buffer_path: str | None = None
    ports: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class Collector:
    """A Collector resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: CollectorSpec = field(default_factory=CollectorSpec)
    status: dict[str, Any] = field(default_factory=dict)

    def is_being_deleted(self) -> bool:
        """True once a deletion timestamp has been set."""
        return self.metadata.is_being_deleted()

    def has_finalizer(self, finalizer_name: str) -> bool:
        """True if the resource carries ``finalizer_name``."""
        return self.metadata.has_finalizer(finalizer_name)

    def add_finalizer(self, finalizer_name: str) -> None:
        """Append ``finalizer_name`` to the resource's finalizers."""
        self.metadata.add_finalizer(finalizer_name)

    def remove_finalizer(self, finalizer_name: str) -> None:
        """Remove ``finalizer_name`` from the resource's finalizers."""
        self.metadata.remove_finalizer(finalizer_name)


@dataclass
class CollectorList:
    """A list of Collector resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[Collector] = field(default_factory=list)