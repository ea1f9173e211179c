"""Cluster-wide Fluent Bit configuration and rendering of its config files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fluentops.meta import ObjectMeta, TypeMeta
from fluentops.plugin import ConfigMapLoader, KVs, SecretLoader
from fluentops.sections import (
    ClusterFilterList,
    ClusterInputList,
    ClusterOutputList,
    ClusterParserList,
)

_NULL_OUTPUT = "[Output]\n    Name    null\n    Match   *"


def _format(value: bool | int) -> str:
    """Format a scalar the way the Fluent Bit configuration expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Service:
    """Global behaviour of the Fluent Bit engine."""

    daemon: bool | None = None
    flush_seconds: int | None = None
    grace_seconds: int | None = None
    hc_errors_count: int | None = None
    hc_retry_failure_count: int | None = None
    hc_period: int | None = None
    health_check: bool | None = None
    http_listen: str = ""
    http_port: int | None = None
    http_server: bool | None = None
    log_file: str = ""
    log_level: str = ""
    parsers_file: str = ""

    def params(self) -> KVs:
        """The ``[Service]`` parameters for every option that is set."""
        kvs = KVs()
        optional = (
            ("Daemon", self.daemon),
            ("Flush", self.flush_seconds),
            ("Grace", self.grace_seconds),
            ("HC_Errors_Count", self.hc_errors_count),
            ("HC_Retry_Failure_Count", self.hc_retry_failure_count),
            ("HC_Period", self.hc_period),
            ("Health_Check", self.health_check),
        )
        for key, value in optional:
            if value is not None:
                kvs.insert(key, _format(value))
        if self.http_listen:
            kvs.insert("Http_Listen", self.http_listen)
        if self.http_port is not None:
            kvs.insert("Http_Port", _format(self.http_port))
        if self.http_server is not None:
            kvs.insert("Http_Server", _format(self.http_server))
        if self.log_file:
            kvs.insert("Log_File", self.log_file)
        if self.log_level:
            kvs.insert("Log_Level", self.log_level)
        if self.parsers_file:
            kvs.insert("Parsers_File", self.parsers_file)
        return kvs


@dataclass
class FluentBitConfigSpec:
    """Desired state of a cluster Fluent Bit configuration."""

    service: Service | None = None
    input_selector: dict[str, Any] = field(default_factory=dict)
    filter_selector: dict[str, Any] = field(default_factory=dict)
    output_selector: dict[str, Any] = field(default_factory=dict)
    parser_selector: dict[str, Any] = field(default_factory=dict)
    namespace: str | None = None


@dataclass
class Script:
    """A named Lua script."""

    name: str
    content: str


@dataclass
class ClusterFluentBitConfig:
    """A cluster-level Fluent Bit configuration resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: FluentBitConfigSpec = field(default_factory=FluentBitConfigSpec)

    def render_main_config(
        self,
        secret_loader: SecretLoader,
        inputs: ClusterInputList,
        filters: ClusterFilterList,
        outputs: ClusterOutputList,
    ) -> str:
        """Render the main configuration: service, inputs, filters, outputs."""
        parts: list[str] = []
        if self.spec.service is not None:
            parts.append("[Service]\n")
            parts.append(str(self.spec.service.params()))

        input_sections = inputs.load(secret_loader)
        filter_sections = filters.load(secret_loader)
        output_sections = outputs.load(secret_loader)
        if input_sections and not output_sections:
            output_sections = _NULL_OUTPUT

        parts.extend((input_sections, filter_sections, output_sections))
        return "".join(parts)

    def render_parser_config(
        self, secret_loader: SecretLoader, parsers: ClusterParserList
    ) -> str:
        """Render the parsers configuration."""
        return parsers.load(secret_loader)

    def render_lua_script(
        self,
        config_map_loader: ConfigMapLoader,
        filters: ClusterFilterList,
        namespace: str,
    ) -> list[Script]:
        """Load the Lua scripts referenced by the filters, sorted by name."""
        scripts = [
            Script(
                name=item.lua.script.key,
                content=config_map_loader.load_config_map(item.lua.script, namespace),
            )
            for cluster_filter in filters.items
            for item in cluster_filter.spec.filter_items
            if item.lua is not None
        ]
        return sorted(scripts, key=lambda script: script.name)


@dataclass
class ClusterFluentBitConfigList:
    """A list of cluster Fluent Bit configurations."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[ClusterFluentBitConfig] = field(default_factory=list)