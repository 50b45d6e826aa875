"""Tests for the render() contract and escaping."""

import pytest

from manroff import NotRenderableError, RoffError, Section, Troffable, escape, render


class TestRender:
    """Tests for render() dispatch."""

    def test_string_is_identity(self) -> None:
        assert render("hello") == "hello"
        assert render("") == ""

    def test_sequence_concatenates_in_order(self) -> None:
        assert render(["a", "b", "c"]) == "abc"
        assert render(("x", "y")) == "xy"

    def test_empty_sequence(self) -> None:
        assert render([]) == ""

    def test_nested_sequences(self) -> None:
        assert render(["a", ["b", ("c", "d")], "e"]) == "abcde"

    def test_generator(self) -> None:
        assert render(str(i) for i in range(3)) == "012"

    def test_troffable_object(self) -> None:
        section = Section(title="NAME", content="body")
        assert isinstance(section, Troffable)
        assert render([section]) == ".SH NAME\nbody"

    def test_custom_troffable(self) -> None:
        class Literal:
            def render(self) -> str:
                return ".B x"

        assert render(Literal()) == ".B x"
        assert render([Literal(), "\n"]) == ".B x\n"

    def test_does_not_mutate_input(self) -> None:
        items = ["a", "b"]
        render(items)
        assert items == ["a", "b"]

    @pytest.mark.parametrize("value", [42, None, b"bytes", ["ok", 3.5]])
    def test_rejects_non_content(self, value: object) -> None:
        with pytest.raises(NotRenderableError) as exc_info:
            render(value)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, RoffError)
        assert "Cannot render" in exc_info.value.message


class TestEscape:
    """Tests for escape()."""

    def test_escapes_every_hyphen(self) -> None:
        assert escape("--foo-bar") == "\\-\\-foo\\-bar"

    def test_hyphen_count_preserved(self) -> None:
        text = "a-b--c---d"
        result = escape(text)
        assert result.count("\\-") == text.count("-")
        assert result.replace("\\-", "") == text.replace("-", "")

    def test_leaves_other_text_alone(self) -> None:
        assert escape("plain \\fBtext\\fP") == "plain \\fBtext\\fP"
        assert escape("") == ""
