from __future__ import annotations
"""
Path resolver utilities.

Condition paths are dot-separated key sequences ("user.isAdmin") walked
through caller-supplied data:

- `Mapping` values are indexed by key.
- Non-string sequences are indexed when the key is an ASCII decimal position
  ("items.0").
- Anything else, or a missing key, ends the walk with `ABSENT`.

`PathResolverProtocol` is re-exported here to keep a single import path for
callers wiring custom resolvers.
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from condtpl.constants import PATH_SEPARATOR
from condtpl.core.interfaces.resolver import PathResolverProtocol as _PathResolverProtocol
from condtpl.core.models import ABSENT

PathResolverProtocol = _PathResolverProtocol


def split_path(path: str) -> List[str]:
    """Split *path* into its ordered keys."""
    return path.split(PATH_SEPARATOR)


def _step(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        # Membership first: defaultdict-style mappings must not grow on lookup.
        return current[key] if key in current else ABSENT
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        if not (key.isascii() and key.isdigit()):
            return ABSENT
        idx = int(key)
        return current[idx] if idx < len(current) else ABSENT
    return ABSENT


def resolve(data: Optional[Mapping[str, Any]], path: str) -> Any:
    """Return the value at *path* inside *data*, or ``ABSENT``.

    Never raises for missing keys or wrong-shaped intermediate values.
    """
    current: Any = data
    for key in split_path(path):
        if current is None or current is ABSENT:
            return ABSENT
        current = _step(current, key)
    return current


class KeyPathResolver(PathResolverProtocol):
    """Dotted key-path resolver over nested mappings."""

    separator = PATH_SEPARATOR

    def resolve(self, data: Optional[Mapping[str, Any]], path: str) -> Any:  # type: ignore[override]
        return resolve(data, path)


DefaultPathResolver = KeyPathResolver
