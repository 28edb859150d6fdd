"""Environment substitution for the connection settings of a tracker config.

Only ``api_base_url`` and the values of ``headers`` are resolved: those are the
deployment-specific parts (tenant, organisation ids, endpoint). Everything
else in the file is taken literally and validated as written.

A reference is either ``${VAR}`` (required) or ``${VAR:-fallback}``.
"""

import os
import re
from dataclasses import dataclass
from typing import Any

_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


@dataclass(frozen=True)
class EnvReference:
    """A required variable referenced from ``config_path`` (e.g. ``headers.X-Org-ID``)."""

    config_path: str
    var_name: str


def find_unset_references(raw: dict[str, Any]) -> list[EnvReference]:
    """Return every required reference whose variable is unset, in file order."""
    unset: list[EnvReference] = []
    for config_path, value in _connection_values(raw):
        for match in _REFERENCE.finditer(value):
            var_name, fallback = match.group(1), match.group(2)
            if fallback is None and var_name not in os.environ:
                unset.append(EnvReference(config_path=config_path, var_name=var_name))
    return unset


def resolve_connection_env(raw: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``raw`` with connection settings substituted.

    Expects ``find_unset_references(raw)`` to be empty.
    """
    resolved = dict(raw)
    base_url = raw.get("api_base_url")
    if isinstance(base_url, str):
        resolved["api_base_url"] = _substitute(base_url)
    headers = raw.get("headers")
    if isinstance(headers, dict):
        resolved["headers"] = {
            name: _substitute(value) if isinstance(value, str) else value
            for name, value in headers.items()
        }
    return resolved


def _connection_values(raw: dict[str, Any]) -> list[tuple[str, str]]:
    values: list[tuple[str, str]] = []
    base_url = raw.get("api_base_url")
    if isinstance(base_url, str):
        values.append(("api_base_url", base_url))
    headers = raw.get("headers")
    if isinstance(headers, dict):
        values.extend(
            (f"headers.{name}", value)
            for name, value in headers.items()
            if isinstance(value, str)
        )
    return values


def _substitute(value: str) -> str:
    def replace(match: re.Match[str]) -> str:
        var_name, fallback = match.group(1), match.group(2)
        if fallback is None:
            return os.environ[var_name]
        return os.environ.get(var_name, fallback)

    return _REFERENCE.sub(replace, value)
