import pytest

from openapi_to_zod.utils import format_object_key, format_value, indent


@pytest.mark.parametrize(
    "key,expected",
    [
        ("name", "name"),
        ("_private", "_private"),
        ("$ref", "$ref"),
        ("camelCase2", "camelCase2"),
        ("deep-Prop", '"deep-Prop"'),
        ("2d", '"2d"'),
        ("with space", '"with space"'),
        ("café", '"caf\\u00e9"'),
        ('say "hi"', '"say \\"hi\\""'),
    ],
)
def test_format_object_key(key, expected):
    assert format_object_key(key) == expected


def test_format_value():
    assert format_value("user") == '"user"'
    assert format_value(3) == "3"
    assert format_value(True) == "true"
    assert format_value(None) == "null"


def test_indent():
    assert indent("a: 1,\nb: z.object({\n  c: 2\n})") == "  a: 1,\n  b: z.object({\n    c: 2\n  })"
    assert indent("x", level=2) == "    x"
