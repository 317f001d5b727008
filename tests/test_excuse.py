"""Unit tests for Excuse text assembly and immutability."""

import dataclasses

import pytest

from bofhexcuses.model.excuse import Excuse


class TestExcuseText:
    """Test suite for Excuse.text()."""

    @pytest.mark.parametrize(
        "components, expected",
        [
            pytest.param(None, None, id="null"),
            pytest.param([], "", id="empty"),
            pytest.param([None], "", id="one null"),
            pytest.param([""], "", id="one empty"),
            pytest.param(["A"], "A", id="one normal"),
            pytest.param(["A", None, "B", "", "C"], "A B  C", id="multi nulls"),
            pytest.param(["A", "B", "C"], "A B C", id="multi normal"),
        ],
    )
    def test_text(self, components, expected) -> None:
        assert Excuse(components).text() == expected

    def test_absent_text_is_not_empty_string(self) -> None:
        """A missing component sequence gives None, never ''."""
        assert Excuse(None).text() is None
        assert Excuse([]).text() == ""

    def test_str_falls_back_to_empty(self) -> None:
        assert str(Excuse(None)) == ""
        assert str(Excuse(["Temporary", "Power", "Interruption"])) == "Temporary Power Interruption"

    def test_multi_word_components_kept_intact(self) -> None:
        assert Excuse(["Dual Homed", "Power"]).text() == "Dual Homed Power"


class TestExcuseValue:
    """Test suite for Excuse as an immutable value."""

    def test_components_are_copied(self) -> None:
        words = ["A", "B"]
        excuse = Excuse(words)
        words.append("C")
        words[0] = "Z"

        assert excuse.components() == ("A", "B")

    def test_components_none(self) -> None:
        assert Excuse(None).components() is None

    def test_frozen(self) -> None:
        excuse = Excuse(["A"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            excuse.words = ("B",)

    def test_standalone_excuse_has_no_model(self) -> None:
        assert Excuse(["A"]).model is None

    def test_equality_ignores_model(self, sample_model) -> None:
        drawn = sample_model.excuse_at([0, 0, 0])
        standalone = Excuse(["Temporary", "Power", "Interruption"])

        assert drawn == standalone
        assert hash(drawn) == hash(standalone)
        assert drawn.model is sample_model
