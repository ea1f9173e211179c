"""Input, filter, output and parser resources and their config sections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, fields

from fluentops.meta import ObjectMeta, TypeMeta
from fluentops.plugin import Plugin, SecretLoader


def _plugin_fields(obj: object) -> Iterator[Plugin]:
    """Yield the plugins set on ``obj``, in field declaration order."""
    for spec_field in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, spec_field.name)
        if isinstance(value, Plugin):
            yield value


def _section(
    header: str,
    plugin: Plugin,
    lines: Iterable[tuple[str, str]],
    secret_loader: SecretLoader,
) -> str:
    """Render one ``[header]`` section for ``plugin``."""
    parts = [f"[{header}]\n"]
    plugin_name = plugin.name()
    if plugin_name:
        parts.append(f"    Name    {plugin_name}\n")
    parts.extend(f"    {key}    {value}\n" for key, value in lines if value)
    parts.append(str(plugin.params(secret_loader)))
    return "".join(parts)


def _by_name(items: Iterable) -> list:
    return sorted(items, key=lambda item: item.metadata.name)


@dataclass
class InputSpec:
    """Desired state of a cluster input."""

    alias: str = ""
    dummy: Plugin | None = None
    tail: Plugin | None = None
    systemd: Plugin | None = None
    node_exporter_metrics: Plugin | None = None
    prometheus_scrape_metrics: Plugin | None = None
    fluent_bit_metrics: Plugin | None = None
    custom_plugin: Plugin | None = None

    def plugins(self) -> Iterator[Plugin]:
        """The configured input plugins in declaration order."""
        return _plugin_fields(self)


@dataclass
class ClusterInput:
    """A cluster-level input resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: InputSpec = field(default_factory=InputSpec)


@dataclass
class ClusterInputList:
    """A list of cluster inputs."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[ClusterInput] = field(default_factory=list)

    def load(self, secret_loader: SecretLoader) -> str:
        """Render every input as ``[Input]`` sections, ordered by resource name."""
        return "".join(
            _section("Input", plugin, [("Alias", item.spec.alias)], secret_loader)
            for item in _by_name(self.items)
            for plugin in item.spec.plugins()
        )


@dataclass
class FilterItem:
    """One step of a filter chain; each set plugin becomes a section."""

    grep: Plugin | None = None
    record_modifier: Plugin | None = None
    kubernetes: Plugin | None = None
    modify: Plugin | None = None
    nest: Plugin | None = None
    parser: Plugin | None = None
    lua: Plugin | None = None
    throttle: Plugin | None = None
    rewrite_tag: Plugin | None = None
    aws: Plugin | None = None
    multiline: Plugin | None = None
    custom_plugin: Plugin | None = None

    def plugins(self) -> Iterator[Plugin]:
        """The configured filter plugins in declaration order."""
        return _plugin_fields(self)


@dataclass
class FilterSpec:
    """Desired state of a cluster filter."""

    match: str = ""
    match_regex: str = ""
    filter_items: list[FilterItem] = field(default_factory=list)


@dataclass
class ClusterFilter:
    """A cluster-level filter resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: FilterSpec = field(default_factory=FilterSpec)


@dataclass
class ClusterFilterList:
    """A list of cluster filters."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[ClusterFilter] = field(default_factory=list)

    def load(self, secret_loader: SecretLoader) -> str:
        """Render every filter as ``[Filter]`` sections, ordered by resource name."""
        return "".join(
            _section(
                "Filter",
                plugin,
                [("Match", item.spec.match), ("Match_Regex", item.spec.match_regex)],
                secret_loader,
            )
            for item in _by_name(self.items)
            for filter_item in item.spec.filter_items
            for plugin in filter_item.plugins()
        )


@dataclass
class OutputSpec:
    """Desired state of a cluster output."""

    match: str = ""
    match_regex: str = ""
    alias: str = ""
    azure_blob: Plugin | None = None
    azure_log_analytics: Plugin | None = None
    retry_limit: str = ""
    elasticsearch: Plugin | None = None
    file: Plugin | None = None
    forward: Plugin | None = None
    http: Plugin | None = None
    kafka: Plugin | None = None
    null: Plugin | None = None
    stdout: Plugin | None = None
    tcp: Plugin | None = None
    loki: Plugin | None = None
    syslog: Plugin | None = None
    datadog: Plugin | None = None
    firehose: Plugin | None = None
    splunk: Plugin | None = None
    opensearch: Plugin | None = None
    opentelemetry: Plugin | None = None
    prometheus_remote_write: Plugin | None = None
    custom_plugin: Plugin | None = None

    def plugins(self) -> Iterator[Plugin]:
        """The configured output plugins in declaration order."""
        return _plugin_fields(self)


@dataclass
class ClusterOutput:
    """A cluster-level output resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: OutputSpec = field(default_factory=OutputSpec)


@dataclass
class ClusterOutputList:
    """A list of cluster outputs."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[ClusterOutput] = field(default_factory=list)

    def load(self, secret_loader: SecretLoader) -> str:
        """Render every output as ``[Output]`` sections, ordered by resource name."""
        return "".join(
            _section(
                "Output",
                plugin,
                [
                    ("Match", item.spec.match),
                    ("Match_Regex", item.spec.match_regex),
                    ("Alias", item.spec.alias),
                    ("Retry_Limit", item.spec.retry_limit),
                ],
                secret_loader,
            )
            for item in _by_name(self.items)
            for plugin in item.spec.plugins()
        )


@dataclass
class Decoder:
    """A parser decoder: ``Decode_Field`` and/or ``Decode_Field_As``."""

    decode_field: str = ""
    decode_field_as: str = ""


@dataclass
class ParserSpec:
    """Desired state of a cluster parser."""

    json: Plugin | None = None
    regex: Plugin | None = None
    ltsv: Plugin | None = None
    logfmt: Plugin | None = None
    decoders: list[Decoder] = field(default_factory=list)

    def plugins(self) -> Iterator[Plugin]:
        """The configured parser formats in declaration order."""
        return _plugin_fields(self)


@dataclass
class ClusterParser:
    """A cluster-level parser resource."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ParserSpec = field(default_factory=ParserSpec)


@dataclass
class ClusterParserList:
    """A list of cluster parsers."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    items: list[ClusterParser] = field(default_factory=list)

    def load(self, secret_loader: SecretLoader) -> str:
        """Render every parser as ``[PARSER]`` sections, ordered by resource name."""
        parts: list[str] = []
        for item in _by_name(self.items):
            for plugin in item.spec.plugins():
                parts.append("[PARSER]\n")
                parts.append(f"    Name    {item.metadata.name}\n")
                parts.append(f"    Format    {plugin.name()}\n")
                parts.append(str(plugin.params(secret_loader)))
                for decoder in item.spec.decoders:
                    if decoder.decode_field:
                        parts.append(f"    Decode_Field    {decoder.decode_field}\n")
                    if decoder.decode_field_as:
                        parts.append(
                            f"    Decode_Field_As    {decoder.decode_field_as}\n"
                        )
        return "".join(parts)