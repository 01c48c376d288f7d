"""Tests for parameter parsing utilities."""

import pytest

from dnaseq_tool.utils.batch import Operation
from dnaseq_tool.utils.params import parse_params, get_transform_params


class TestParseParams:
    """Tests for parameter file parsing."""

    def test_parse_simple_params(self, params_file):
        """Test parsing a simple params file."""
        path = params_file("OPERATION = reverse\nCOPY = output\n")
        params = parse_params(path)
        assert params["OPERATION"] == "reverse"
        assert params["COPY"] == "output"

    def test_parse_numeric_params(self, params_file):
        """Test that numeric values are parsed as float."""
        params = parse_params(params_file("PARAM_A = 10\n"))
        assert params["PARAM_A"] == 10.0

    def test_parse_params_with_comments(self, params_file):
        """Test parsing params file with comments."""
        path = params_file(
            "## This is a comment\n"
            "OPERATION = complement\n"
            "# OUTPUT_FORMAT = paired\n"
            "COPY = none\n"
        )
        params = parse_params(path)
        assert params == {"OPERATION": "complement", "COPY": "none"}

    def test_parse_params_with_empty_lines(self, params_file):
        """Test parsing params file with empty lines."""
        params = parse_params(params_file("OPERATION = reverse\n\n\nCOPY = input\n"))
        assert len(params) == 2

    def test_value_with_equals_and_spaces(self, params_file):
        """Test that only the first '=' splits name and value."""
        params = parse_params(params_file("CLIPBOARD_CMD = xclip -selection clipboard\nX = a=b\n"))
        assert params["CLIPBOARD_CMD"] == "xclip -selection clipboard"
        assert params["X"] == "a=b"


class TestGetTransformParams:
    """Tests for transformation settings extraction."""

    def test_defaults(self):
        """Test settings for an empty params dict."""
        assert get_transform_params({}) == {
            "operation": Operation.REVERSE_COMPLEMENT,
            "output_format": "lines",
            "copy": "none",
            "clipboard_cmd": None,
        }

    def test_values(self):
        """Test settings taken from params."""
        settings = get_transform_params({
            "OPERATION": "Complement",
            "OUTPUT_FORMAT": "paired",
            "COPY": "input",
            "CLIPBOARD_CMD": "wl-copy",
        })
        assert settings["operation"] is Operation.COMPLEMENT
        assert settings["output_format"] == "paired"
        assert settings["copy"] == "input"
        assert settings["clipboard_cmd"] == "wl-copy"

    @pytest.mark.parametrize("name,value", [
        ("OPERATION", "translate"),
        ("OUTPUT_FORMAT", "fasta"),
        ("COPY", "both"),
    ])
    def test_invalid_values(self, name, value):
        """Test that unknown setting values are rejected."""
        with pytest.raises(ValueError, match=name):
            get_transform_params({name: value})
