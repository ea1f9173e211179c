# fluentops

`fluentops` describes Fluent Bit resources as Python dataclasses. These
resources are inputs, filters, outputs, parsers and the service section. The
package renders them into the text that Fluent Bit reads as its configuration.

The output is deterministic. Resources in each list are sorted by
`metadata.name`, and each resource's plugins are written in the order the
fields are declared.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `fluentops.meta`

- `GroupVersion(group, version)`. `api_version()` returns `"group/version"`,
  or just the version when the group is empty. `SCHEME_GROUP_VERSION` is
  `fluentbit.fluent.io/v1alpha2`.
- `TypeMeta(api_version, kind)`.
- `ObjectMeta` holds `name`, `namespace`, `labels`, `annotations`,
  `finalizers`, `resource_version` and `deletion_timestamp`. It has these
  methods:
  - `is_being_deleted()` returns true when a deletion timestamp is set.
  - `has_finalizer(name)`.
  - `add_finalizer(name)` appends the name.
  - `remove_finalizer(name)` drops every occurrence of the name.

### `fluentops.plugin`

- `KVs` is an ordered list of key/value pairs.
  - `insert(key, value)` appends a pair and keeps duplicates.
  - `merge(other)` appends another `KVs`.
  - `len()` and iteration work as usual.
  - `str()` renders each pair as `"    key    value\n"`.
- `Plugin` is the abstract interface every plugin implements: `name()` and
  `params(secret_loader) -> KVs`.
- `SecretLoader(secrets, namespace)` resolves references with `name` and `key`
  attributes from a mapping of secret name to data. `bytes` values are decoded
  as UTF-8. A missing secret or key raises `SecretNotFoundError`.
- `ConfigMapLoader(config_maps)` resolves selectors from a mapping laid out as
  namespace, then config map name, then data. The method is
  `load_config_map(selector, namespace)`. A missing map or key raises
  `ConfigMapNotFoundError`.

Both error classes are subclasses of `LookupError`.

### `fluentops.sections`

Each resource kind comes as a spec, a resource and a list:

- `InputSpec` / `ClusterInput` / `ClusterInputList`
- `FilterItem` and `FilterSpec` / `ClusterFilter` / `ClusterFilterList`
- `OutputSpec` / `ClusterOutput` / `ClusterOutputList`
- `Decoder` and `ParserSpec` / `ClusterParser` / `ClusterParserList`

On a spec, any field that holds a `Plugin` becomes one section. `plugins()`
yields those fields in declaration order. Each list's `load(secret_loader)`
renders its sections as follows:

- `[Input]`: `Name`, then `Alias` if set, then the plugin's parameters.
- `[Filter]`: one section per plugin of each `FilterItem`. It contains `Name`,
  then `Match` and `Match_Regex` if set, then the parameters.
- `[Output]`: `Name`, then `Match`, `Match_Regex`, `Alias` and `Retry_Limit` if
  set, then the parameters.
- `[PARSER]`: `Name` is the resource name and `Format` is the plugin name. The
  parameters follow, then one `Decode_Field` / `Decode_Field_As` line for each
  decoder value that is set.

### `fluentops.config`

- `Service` holds the options of the `[Service]` section. `params()` returns
  only the options that are set, with booleans written as `true`/`false`.
- `FluentBitConfigSpec` and `ClusterFluentBitConfig`. A
  `ClusterFluentBitConfig` has three render methods:
  - `render_main_config(secret_loader, inputs, filters, outputs)` writes
    `[Service]` if a service is set, then the inputs, filters and outputs. If
    there are inputs but no outputs, it appends a `null` output matching `*`.
  - `render_parser_config(secret_loader, parsers)`.
  - `render_lua_script(config_map_loader, filters, namespace)` loads the script
    for every filter item with a `lua` plugin. That plugin's `script` is a
    selector with `name` and `key`. The result is a list of
    `Script(name, content)` sorted by name.
- `ClusterFluentBitConfigList`.

### `fluentops.workloads`

- `FluentBitSpec` / `FluentBit` / `FluentBitList` describe the Fluent Bit
  daemon set.
- `CollectorSpec` / `Collector` / `CollectorList` describe the collector.

Both resource classes have the same finalizer helpers as `ObjectMeta`. The
finalizer names are `FLUENT_BIT_FINALIZER_NAME` and
`COLLECTOR_FINALIZER_NAME`.

## Example

```python
from fluentops.config import ClusterFluentBitConfig, FluentBitConfigSpec, Service
from fluentops.meta import ObjectMeta
from fluentops.plugin import KVs, Plugin, SecretLoader
from fluentops.sections import (
    ClusterFilterList, ClusterInput, ClusterInputList, ClusterOutputList, InputSpec,
)


class Tail(Plugin):
    def __init__(self, path):
        self.path = path

    def name(self):
        return "tail"

    def params(self, secret_loader):
        kvs = KVs()
        kvs.insert("Path", self.path)
        return kvs


inputs = ClusterInputList(items=[
    ClusterInput(metadata=ObjectMeta(name="input0"),
                 spec=InputSpec(tail=Tail("/var/log/containers/*.log"))),
])
cfg = ClusterFluentBitConfig(
    spec=FluentBitConfigSpec(service=Service(daemon=False, flush_seconds=1)),
)
print(cfg.render_main_config(SecretLoader(), inputs,
                             ClusterFilterList(), ClusterOutputList()))
```

This prints:

```
[Service]
    Daemon    false
    Flush    1
[Input]
    Name    tail
    Path    /var/log/containers/*.log
[Output]
    Name    null
    Match   *
```

Errors raised by a plugin's `params()` propagate unchanged out of `load()` and
out of the render methods. Missing secrets are one example.

## What this package does not do

- It ships no concrete plugins. Tail, Kubernetes, HTTP, Kafka and the others
  have to be supplied as `Plugin` subclasses.
- It does not talk to a Kubernetes API server. It does not watch or reconcile
  resources, and it does not create daemon sets, secrets or config maps.
  Secrets and config maps come from the mappings given to the loaders.
- It has no command-line program. It returns configuration text and leaves
  writing it anywhere to the caller.