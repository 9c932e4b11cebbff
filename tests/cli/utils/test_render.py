"""Tests for output rendering helpers."""

import json

import pytest
import yaml

from edgeapp.cli.exceptions import UnsupportedFormatError
from edgeapp.cli.secrets import Secret
from edgeapp.cli.utils.render import (
    ItemFormat,
    ListFormat,
    item_format_for,
    render_item,
    render_list,
    sanitize_value,
)

SECRETS = [
    Secret(name="API_KEY", value='a"b'),
    Secret(name="TOKEN", value="xyz"),
]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("plain", "plain"),
        ('a"b', 'a\\"b'),
        ("line1\nline2", "line1\\nline2"),
        ("tab\there", "tab\\there"),
        ("cr\r", "cr\\r"),
        ("$HOME", "\\$HOME"),
        ("`id`", "\\`id\\`"),
        ("back\\slash", "back\\\\slash"),
        ("bell\x01", "bell\\x01"),
        ("del\x7f", "del\\x7f"),
        ("", ""),
        ("héllo", "héllo"),
    ],
)
def test_sanitize_value(raw, expected):
    assert sanitize_value(raw) == expected


def test_sanitize_value_leaves_no_control_characters():
    sanitized = sanitize_value("".join(chr(code) for code in range(0x20)))

    assert all(ord(char) >= 0x20 for char in sanitized)


def test_item_format_for():
    assert item_format_for(ListFormat.JSON) == ItemFormat.JSON
    assert item_format_for(ListFormat.YAML) == ItemFormat.YAML
    assert item_format_for(ListFormat.TABLE) == ItemFormat.TABLE

    with pytest.raises(UnsupportedFormatError) as exc_info:
        item_format_for(ListFormat.ITEM_TABLE)
    assert "item-table" in str(exc_info.value)
    assert exc_info.value.exit_code == 1


def test_render_item_json():
    output = render_item(Secret(name="DB_PASSWORD", value="s3cr3t"), ItemFormat.JSON)

    assert json.loads(output) == {"name": "DB_PASSWORD", "value": "s3cr3t"}


def test_render_item_yaml():
    output = render_item(Secret(name="DB_PASSWORD", value="s3cr3t"), ItemFormat.YAML)

    assert yaml.safe_load(output) == {"name": "DB_PASSWORD", "value": "s3cr3t"}


def test_render_item_table():
    output = render_item(Secret(name="DB_PASSWORD", value="s3cr3t"), ItemFormat.TABLE)

    assert "Field" in output
    assert "DB_PASSWORD" in output
    assert "s3cr3t" in output


def test_render_list_json_keeps_values_raw():
    output = render_list(SECRETS, ListFormat.JSON)

    assert json.loads(output) == [
        {"name": "API_KEY", "value": 'a"b'},
        {"name": "TOKEN", "value": "xyz"},
    ]


def test_render_list_yaml():
    output = render_list(SECRETS, ListFormat.YAML)

    assert yaml.safe_load(output) == [
        {"name": "API_KEY", "value": 'a"b'},
        {"name": "TOKEN", "value": "xyz"},
    ]


def test_render_list_table():
    output = render_list(SECRETS, ListFormat.TABLE)

    header = output.splitlines()[1]
    assert "Name" in header
    assert "Value" in header
    assert output.index("API_KEY") < output.index("TOKEN")
    assert "xyz" in output


def test_render_list_item_table():
    output = render_list(SECRETS, ListFormat.ITEM_TABLE)

    first, second = output.split("\n\n")
    assert "API_KEY" in first and "TOKEN" not in first
    assert "TOKEN" in second and "xyz" in second


def test_render_empty_list():
    assert render_list([], ListFormat.JSON) == "[]"
    assert yaml.safe_load(render_list([], ListFormat.YAML)) == []
    assert render_list([], ListFormat.ITEM_TABLE) == ""


def test_long_values_stay_on_one_table_row():
    long_value = "v" * 6000
    secrets = [Secret(name="CERT", value=long_value), Secret(name="TOKEN", value="xyz")]

    item_output = render_item(secrets[0], ItemFormat.TABLE)
    list_output = render_list(secrets, ListFormat.TABLE)
    per_item_output = render_list(secrets, ListFormat.ITEM_TABLE)

    for output in (item_output, list_output, per_item_output):
        assert any(long_value in line for line in output.splitlines())
