"""Plugin interface, ordered key/value parameters and resource loaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Any


class KVs:
    """An ordered list of configuration key/value pairs."""

    def __init__(self) -> None:
        self._items: list[tuple[str, str]] = []

    def insert(self, key: str, value: str) -> None:
        """Append a key/value pair, keeping duplicates and order."""
        self._items.append((key, value))

    def merge(self, other: KVs) -> None:
        """Append every pair of ``other`` after the existing ones."""
        self._items.extend(other)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f"    {key}    {value}\n" for key, value in self._items)

    def __repr__(self) -> str:
        return f"KVs({self._items!r})"


class Plugin(ABC):
    """A plugin that renders itself as a named set of parameters."""

    @abstractmethod
    def name(self) -> str:
        """The plugin name written into the configuration section."""

    @abstractmethod
    def params(self, secret_loader: SecretLoader) -> KVs:
        """The plugin parameters, resolving secrets through ``secret_loader``."""


class SecretNotFoundError(LookupError):
    """A referenced secret or secret key does not exist."""


class ConfigMapNotFoundError(LookupError):
    """A referenced config map or config map key does not exist."""


def _as_text(value: str | bytes) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


class SecretLoader:
    """Resolves secret references within one namespace.

    ``secrets`` maps a secret name to its data, a mapping of key to value.
    """

    def __init__(
        self,
        secrets: Mapping[str, Mapping[str, str | bytes]] | None = None,
        namespace: str = "",
    ) -> None:
        self.namespace = namespace
        self._secrets = {name: dict(data) for name, data in (secrets or {}).items()}

    def load_secret(self, secret: Any) -> str:
        """Return the value a reference with ``name`` and ``key`` points to."""
        try:
            data = self._secrets[secret.name]
        except KeyError:
            raise SecretNotFoundError(
                f"secret {self.namespace}/{secret.name} not found"
            ) from None
        try:
            return _as_text(data[secret.key])
        except KeyError:
            raise SecretNotFoundError(
                f"no key {secret.key} in secret {self.namespace}/{secret.name}"
            ) from None


class ConfigMapLoader:
    """Resolves config map key selectors.

    ``config_maps`` maps a namespace to config maps by name, each a mapping
    of key to value.
    """

    def __init__(
        self,
        config_maps: Mapping[str, Mapping[str, Mapping[str, str]]] | None = None,
    ) -> None:
        self._config_maps = {
            namespace: {name: dict(data) for name, data in maps.items()}
            for namespace, maps in (config_maps or {}).items()
        }

    def load_config_map(self, selector: Any, namespace: str) -> str:
        """Return the value that a selector with ``name`` and ``key`` points to."""
        try:
            data = self._config_maps[namespace][selector.name]
        except KeyError:
            raise ConfigMapNotFoundError(
                f"config map {namespace}/{selector.name} not found"
            ) from None
        try:
            return data[selector.key]
        except KeyError:
            raise ConfigMapNotFoundError(
                f"no key {selector.key} in config map {namespace}/{selector.name}"
            ) from None