"""Tests for evaluator configuration."""

import pytest

from shunteval import Control, Evaluator, EvaluatorConfig, Number, Operation


class TestEvaluatorConfig:

    def test_defaults(self):
        assert EvaluatorConfig().enable_join is False

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_from_env_enables_join(self, monkeypatch, value):
        monkeypatch.setenv("SHUNTEVAL_ENABLE_JOIN", value)

        assert EvaluatorConfig.from_env().enable_join is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off", "maybe"])
    def test_from_env_disables_join(self, monkeypatch, value):
        monkeypatch.setenv("SHUNTEVAL_ENABLE_JOIN", value)

        assert EvaluatorConfig.from_env().enable_join is False

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("SHUNTEVAL_ENABLE_JOIN", raising=False)

        assert EvaluatorConfig.from_env() == EvaluatorConfig()

    def test_evaluator_does_not_read_env(self, monkeypatch):
        monkeypatch.setenv("SHUNTEVAL_ENABLE_JOIN", "1")

        assert Evaluator().config.enable_join is False

    def test_from_env_config_accepts_join(self, monkeypatch):
        monkeypatch.setenv("SHUNTEVAL_ENABLE_JOIN", "1")
        evaluator = Evaluator(config=EvaluatorConfig.from_env())

        tokens = [Number(1), Operation(Control.JOIN), Number(2), Operation(Control.END_EXPR)]

        assert evaluator.evaluate(tokens) == 12.0
