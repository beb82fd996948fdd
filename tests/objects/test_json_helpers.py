import json

import pytest

from objects.json_helpers import from_json, get_json
from objects.rectangle import Rectangle


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * 3 * self.radius


class Tagged:
    """Target that builds itself from raw data"""

    def __init__(self, tags):
        self.tags = tags

    @classmethod
    def from_dict(cls, data):
        return cls(tags=list(data))


# ==================== TEST GET JSON ====================

class TestGetJson:
    """Tests for get_json"""

    @pytest.mark.parametrize("value,expected", [
        ([1, 2, 3], "[1,2,3]"),
        ({"width": 10, "height": 20}, '{"width":10,"height":20}'),
        ("text", '"text"'),
        (None, "null"),
        ([], "[]"),
        ({"a": [1, {"b": True}]}, '{"a":[1,{"b":true}]}'),
    ])
    def test_plain_values(self, value, expected):
        assert get_json(value) == expected

    def test_dataclass_instance(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_uses_instance_fields(self):
        assert get_json(Circle(10)) == '{"radius":10}'

    def test_unserializable_value_raises_type_error(self):
        with pytest.raises(TypeError):
            get_json({1, 2, 3})


# ==================== TEST FROM JSON ====================

class TestFromJson:
    """Tests for from_json"""

    def test_rectangle_round_trip(self):
        rect = from_json(Rectangle, get_json(Rectangle(10, 20)))

        assert isinstance(rect, Rectangle)
        assert rect == Rectangle(10, 20)
        assert rect.get_area() == 200

    def test_plain_class(self):
        circle = from_json(Circle, '{"radius":10}')

        assert isinstance(circle, Circle)
        assert vars(circle) == {"radius": 10}
        assert circle.get_circumference() == 60

    def test_from_dict_is_preferred(self):
        tagged = from_json(Tagged, '["a","b"]')

        assert isinstance(tagged, Tagged)
        assert tagged.tags == ["a", "b"]

    def test_non_object_without_from_dict_raises(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, "[10,20]")

    def test_unknown_field_raises_type_error(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, '{"width":1,"height":2,"depth":3}')

    def test_malformed_json_passes_through(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, '{"width":')
