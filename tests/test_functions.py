"""Tests for the user function table."""

import dataclasses
import logging

import pytest

from shunteval import FunctionTable, UnknownFunctionError, UserFunction


@pytest.fixture
def table():
    return FunctionTable()


def _double(args):
    return args[0] * 2


class TestFunctionTable:

    def test_register_and_get(self, table):
        func = UserFunction("double", 1, _double)
        table.register(func)

        assert table.get("double") is func
        assert table.is_registered("double")
        assert "double" in table
        assert len(table) == 1

    def test_get_unknown(self, table):
        with pytest.raises(UnknownFunctionError) as exc_info:
            table.get("missing")
        assert "Unknown function: missing" in str(exc_info.value)

    def test_register_replaces(self, table):
        table.register(UserFunction("f", 1, _double))
        replacement = UserFunction("f", 2, lambda args: args[0] + args[1])
        table.register(replacement)

        assert table.get("f") is replacement
        assert len(table) == 1

    def test_negative_arity_rejected(self, table):
        with pytest.raises(ValueError):
            table.register(UserFunction("bad", -1, _double))
        assert not table.is_registered("bad")

    def test_list_all_and_clear(self, table):
        table.register(UserFunction("a", 0, lambda args: 1.0))
        table.register(UserFunction("b", 0, lambda args: 2.0))

        assert [f.name for f in table.list_all()] == ["a", "b"]

        table.clear()

        assert table.list_all() == []
        assert not table.is_registered("a")

    def test_definition_fields(self):
        fields = [f.name for f in dataclasses.fields(UserFunction)]

        assert fields == ["name", "arity", "implementation"]

    def test_registration_is_logged(self, table, caplog):
        with caplog.at_level(logging.DEBUG, logger="shunteval.functions"):
            table.register(UserFunction("double", 1, _double))
            table.register(UserFunction("double", 1, _double))

        assert "Registered function double" in caplog.text
        assert "Replacing function double" in caplog.text
