"""
Data models

Scan configuration and the usage report shared by both detectors.
"""

from dataclasses import dataclass, field
from typing import Iterator

from config_scanner.core.scanner.patterns import (
    ACCESSOR_METHODS,
    ENV_VAR_ROOT,
    EXCLUDED_CALLEE_SUBSTRINGS,
    SERVICE_TYPES,
)


@dataclass
class ScanConfig:
    """
    Scanner configuration

    Attributes:
        service_types: type names whose presence in an import puts a file in scope
        accessor_methods: method names treated as configuration lookups
        excluded_callee_substrings: callee text fragments that are never service calls
        env_var_root: global expression whose property reads are environment reads
    """
    service_types: tuple[str, ...] = SERVICE_TYPES
    accessor_methods: tuple[str, ...] = ACCESSOR_METHODS
    excluded_callee_substrings: tuple[str, ...] = EXCLUDED_CALLEE_SUBSTRINGS
    env_var_root: str = ENV_VAR_ROOT

    def accessor_suffixes(self) -> tuple[str, ...]:
        """Callee suffixes such as `.get` and `.getOrThrow`."""
        return tuple(f".{method}" for method in self.accessor_methods)

    def parameter_callees(self, param_name: str) -> tuple[str, ...]:
        """Exact callee texts for accessor calls made on a parameter."""
        return tuple(f"{param_name}.{method}" for method in self.accessor_methods)


def env_key(name: str, root: str = ENV_VAR_ROOT) -> str:
    """Report entry for an environment variable read."""
    return f"{root}.{name}"


@dataclass
class UsageReport:
    """
    Configuration keys discovered during a run

    Keys are only ever added. Order of insertion carries no meaning; use
    `sorted()` when presenting.
    """
    _keys: set[str] = field(default_factory=set)

    def add(self, key: str) -> None:
        self._keys.add(key)

    def all(self) -> frozenset[str]:
        return frozenset(self._keys)

    def sorted(self) -> list[str]:
        return sorted(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.sorted())
