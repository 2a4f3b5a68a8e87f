from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializationConfig:
    indent: int | None = None  # None renders compact, single-line JSON
    sort_keys: bool = False
    ensure_ascii: bool = False


DEFAULT_CONFIG = SerializationConfig()
