"""Tests for data models."""

import pytest

from cliprompts.models import LogType, PromptOption


class TestPromptOption:
    def test_fields(self):
        option = PromptOption("option1", "Pikachu")

        assert option.value == "option1"
        assert option.label == "Pikachu"

    def test_str(self):
        assert str(PromptOption("option1", "Pikachu")) == "option1 <Pikachu>"

    def test_equality_by_value_and_label(self):
        assert PromptOption("a", "A") == PromptOption("a", "A")
        assert PromptOption("a", "A") != PromptOption("a", "B")
        assert len({PromptOption("a", "A"), PromptOption("a", "A")}) == 1

    def test_immutable(self):
        option = PromptOption("a", "A")
        with pytest.raises(AttributeError):
            option.label = "B"


def test_log_type_values():
    assert LogType.INFO.value == "info"
    assert LogType.WARN.value == "warn"
    assert LogType.ERROR.value == "error"
