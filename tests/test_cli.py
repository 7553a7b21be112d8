"""
Tests for main.py CLI commands.
"""

import pytest

from main import main, parse_params
from sequences.config import reset


class TestParseParams:
    """PARAM=VALUE parsing."""

    def test_scalars_and_lists(self):
        assert parse_params(['n=5', 'k=3']) == {'n': 5, 'k': 3}
        assert parse_params(['radices=[1, 2]']) == {'radices': [1, 2]}

    def test_missing_equals_raises(self):
        with pytest.raises(ValueError, match="PARAM=VALUE"):
            parse_params(['n5'])


class TestCommands:
    """Command dispatch and output."""

    def setup_method(self):
        reset()

    def test_list_generators(self, capsys):
        assert main(['generators']) == 0
        out = capsys.readouterr().out
        assert "Registered generators (5)" in out
        assert "- mixed_radix" in out

    def test_generator_details(self, capsys):
        assert main(['generators', 'permutation']) == 0
        out = capsys.readouterr().out
        assert "Class: PermutationGenerator" in out
        assert "Parameters: ['n']" in out

    def test_unknown_generator(self, capsys):
        assert main(['generators', 'nope']) == 1
        assert "Unknown generator: nope" in capsys.readouterr().out

    def test_count(self, capsys):
        assert main(['count', 'combination', 'n=5', 'k=3']) == 0
        assert "Elements: 10" in capsys.readouterr().out

    def test_count_mixed_radix_with_dtype(self, capsys):
        assert main(['count', 'mixed_radix', 'radices=[1,2]', '--dtype', 'uint8']) == 0
        out = capsys.readouterr().out
        assert "Elements: 6" in out
        assert "dtype=uint8" in out

    def test_count_invalid_params(self, capsys):
        assert main(['count', 'combination', 'n=5', 'k=0']) == 1
        assert "E_INVALID_PARAMS" in capsys.readouterr().out

    def test_count_width_overflow(self, capsys):
        assert main(['count', 'gray_code', 'n=9', '--dtype', 'uint8']) == 1
        assert "E_WIDTH_OVERFLOW" in capsys.readouterr().out

    def test_count_unexpected_param(self, capsys):
        assert main(['count', 'permutation', 'm=3']) == 1
        assert "Invalid parameters" in capsys.readouterr().out

    def test_count_malformed_value(self, capsys):
        assert main(['count', 'mixed_radix', 'radices=[1,']) == 1
        assert "Invalid parameters" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out
