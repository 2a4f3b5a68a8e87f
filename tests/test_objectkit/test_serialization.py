"""Tests for JSON round-tripping."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field

import pytest

from objectkit.config import DEFAULT_CONFIG, SerializationConfig
from objectkit.errors import BindError, ObjectKitError, ParseError, SerializationError
from objectkit.serialization import bind, from_json, to_json
from objectkit.shapes import Rectangle


class Circle:
    def __init__(self, radius: float) -> None:
        raise AssertionError("from_json must not call __init__")

    def diameter(self) -> float:
        return self.radius * 2


class Slotted:
    __slots__ = ("x",)


@dataclass
class Point:
    x: int
    y: int = 0


@dataclass
class Square:
    side: int
    area: int = field(init=False)

    def __post_init__(self) -> None:
        self.area = self.side * self.side


@dataclass(frozen=True)
class Tagged:
    name: str
    tag: str = field(init=False, default="")


class Registry(dict):
    def names(self) -> list[str]:
        return sorted(self)


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self) -> None:
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self) -> None:
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_rectangle(self) -> None:
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self) -> None:
        assert to_json({"shape": Rectangle(1, 2)}) == '{"shape":{"width":1,"height":2}}'

    def test_plain_object_fields(self) -> None:
        class Thing:
            def __init__(self) -> None:
                self.name = "x"

        assert to_json(Thing()) == '{"name":"x"}'

    def test_scalars(self) -> None:
        assert to_json("hi") == '"hi"'
        assert to_json(None) == "null"
        assert to_json(True) == "true"

    def test_non_ascii_kept(self) -> None:
        assert to_json(["é"]) == '["é"]'

    def test_sort_keys(self) -> None:
        config = SerializationConfig(sort_keys=True)
        assert to_json({"width": 10, "height": 20}, config) == '{"height":20,"width":10}'

    def test_indent(self) -> None:
        config = SerializationConfig(indent=2)
        assert to_json({"a": [1]}, config) == json.dumps({"a": [1]}, indent=2)

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            to_json(object())

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats_rejected(self, value: float) -> None:
        with pytest.raises(SerializationError) as exc_info:
            to_json({"x": value})
        assert isinstance(exc_info.value.cause, ValueError)

    def test_reference_cycle_rejected(self) -> None:
        loop: list = []
        loop.append(loop)
        with pytest.raises(SerializationError):
            to_json(loop)

    def test_default_config_is_compact(self) -> None:
        assert DEFAULT_CONFIG.indent is None
        assert DEFAULT_CONFIG.sort_keys is False


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJsonDataclass:
    def test_rectangle(self) -> None:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_defaults_apply(self) -> None:
        assert from_json(Point, '{"x": 1}') == Point(1, 0)

    def test_unknown_field(self) -> None:
        with pytest.raises(BindError, match="radius") as exc_info:
            from_json(Rectangle, '{"width":1,"height":2,"radius":3}')
        assert exc_info.value.target is Rectangle

    def test_missing_field(self) -> None:
        with pytest.raises(BindError) as exc_info:
            from_json(Rectangle, '{"width":1}')
        assert isinstance(exc_info.value.cause, TypeError)


    def test_init_false_field_round_trips(self) -> None:
        text = to_json(Square(3))
        assert text == '{"side":3,"area":9}'
        restored = from_json(Square, text)
        assert restored == Square(3)
        assert restored.area == 9

    def test_init_false_value_is_restored(self) -> None:
        restored = from_json(Square, '{"side":3,"area":10}')
        assert restored.area == 10

    def test_init_false_on_frozen_dataclass(self) -> None:
        restored = from_json(Tagged, '{"name":"a","tag":"b"}')
        assert (restored.name, restored.tag) == ("a", "b")


class TestFromJsonPlainClass:
    def test_binds_methods_without_init(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.diameter() == 20

    def test_slotted_class(self) -> None:
        with pytest.raises(BindError):
            from_json(Slotted, '{"x": 1}')


class TestFromJsonPayloads:
    def test_no_class_returns_plain_value(self) -> None:
        assert from_json(None, "[1,2,3]") == [1, 2, 3]

    def test_array_cannot_bind(self) -> None:
        with pytest.raises(BindError, match="expected an object"):
            from_json(Rectangle, "[1,2]")

    def test_round_trip(self) -> None:
        original = Rectangle(3, 4)
        restored = from_json(Rectangle, to_json(original))
        assert restored == original
        assert restored.area() == 12


class TestBind:
    def test_binds_decoded_mapping(self) -> None:
        assert bind(Rectangle, {"width": 2, "height": 5}).area() == 10

    def test_dict_subclass(self) -> None:
        registry = from_json(Registry, '{"b":1,"a":2}')
        assert isinstance(registry, Registry)
        assert registry == {"a": 2, "b": 1}
        assert registry.names() == ["a", "b"]

    def test_plain_dict(self) -> None:
        assert from_json(dict, '{"a":1}') == {"a": 1}

    def test_non_mapping(self) -> None:
        with pytest.raises(BindError):
            bind(Rectangle, [2, 5])


class TestParseError:
    def test_malformed(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            from_json(Rectangle, '{"width": }')
        err = exc_info.value
        assert err.line == 1
        assert err.column is not None
        assert isinstance(err.cause, json.JSONDecodeError)

    def test_line_number(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            from_json(None, '{\n"a": \n}')
        assert exc_info.value.line == 3

    def test_empty_text(self) -> None:
        with pytest.raises(ParseError):
            from_json(None, "")

    def test_hierarchy(self) -> None:
        assert issubclass(ParseError, SerializationError)
        assert issubclass(BindError, SerializationError)
        assert issubclass(SerializationError, ObjectKitError)


class TestLogging:
    def test_bind_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="objectkit"):
            from_json(Rectangle, '{"width":1,"height":2}')
        assert "Bound 2 field(s) to Rectangle" in [r.getMessage() for r in caplog.records]
