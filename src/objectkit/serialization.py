"""JSON round-tripping that re-attaches behaviour to parsed data."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objectkit.config import DEFAULT_CONFIG, SerializationConfig
from objectkit.errors import BindError, ParseError, SerializationError

__all__ = ["bind", "from_json", "to_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, config: SerializationConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Dataclasses and plain objects are written as their fields. Keys keep
    their insertion order unless ``config.sort_keys`` is set.

    Raises:
        SerializationError: *value* holds NaN or infinity, which JSON cannot
            represent, or contains a reference cycle.
        TypeError: *value* holds an object with no JSON form.

    Examples:
        [1, 2, 3]                 -> '[1,2,3]'
        Rectangle(10, 20)         -> '{"width":10,"height":20}'
    """
    config = config or DEFAULT_CONFIG
    separators = (",", ":") if config.indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            default=_default,
            indent=config.indent,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            separators=separators,
            allow_nan=False,
        )
    except ValueError as exc:
        raise SerializationError(f"Cannot write JSON: {exc}", cause=exc) from exc


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
            cause=exc,
        ) from exc


def _bind_dataclass(cls: type[T], data: dict[str, Any]) -> T:
    fields = {f.name: f for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - set(fields))
    if unknown:
        raise BindError(
            f"{cls.__name__} has no field(s) {', '.join(unknown)}", target=cls
        )
    init_args = {k: v for k, v in data.items() if fields[k].init}
    try:
        instance = cls(**init_args)
    except TypeError as exc:
        raise BindError(
            f"Cannot build {cls.__name__}: {exc}", target=cls, cause=exc
        ) from exc
    # init=False fields were written by to_json; restore them as stored.
    for name, value in data.items():
        if not fields[name].init:
            object.__setattr__(instance, name, value)
    return instance


def bind(cls: type[T], data: Any) -> T:
    """Return already-decoded *data* as an instance of *cls*.

    Dataclasses are built from the fields, ``dict`` subclasses are built
    from the mapping, and any other class gets the fields as attributes
    without running ``__init__``.

    Raises:
        BindError: *data* is not a JSON object, or does not fit *cls*.
    """
    if not isinstance(data, dict):
        raise BindError(
            f"Cannot bind JSON {type(data).__name__} to {cls.__name__}: expected an object",
            target=cls,
        )
    if dataclasses.is_dataclass(cls):
        instance = _bind_dataclass(cls, data)
    elif issubclass(cls, dict):
        instance = cls(data)
    else:
        # Plain classes get the parsed fields without running __init__.
        instance = cls.__new__(cls)
        try:
            vars(instance).update(data)
        except TypeError as exc:
            raise BindError(
                f"{cls.__name__} instances have no attribute dict", target=cls, cause=exc
            ) from exc
    logger.debug("Bound %d field(s) to %s", len(data), cls.__name__)
    return instance


def from_json(cls: type[T] | None, text: str) -> T | Any:
    """Parse *text* and return it as an instance of *cls*.

    The parsed object's fields become the instance's attributes, so the
    result exposes *cls*'s methods over the decoded data. With ``cls=None``
    the plain decoded value is returned.

    Raises:
        ParseError: *text* is not well-formed JSON.
        BindError: the payload is not a JSON object, or does not fit *cls*.
    """
    data = _parse(text)
    if cls is None:
        return data
    return bind(cls, data)
