import pytest

from objects.rectangle import Rectangle


class TestRectangle:
    """Tests for the Rectangle record"""

    def test_fields(self):
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20

    @pytest.mark.parametrize("width,height,expected", [
        (10, 20, 200),
        (0, 5, 0),
        (2.5, 4, 10.0),
    ])
    def test_get_area(self, width, height, expected):
        assert Rectangle(width, height).get_area() == expected

    def test_area_follows_field_changes(self):
        rect = Rectangle(1, 1)
        rect.width = 3
        assert rect.get_area() == 3

    def test_equality(self):
        assert Rectangle(10, 20) == Rectangle(10, 20)
        assert Rectangle(10, 20) != Rectangle(20, 10)
