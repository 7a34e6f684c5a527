"""Tests for project name validation and identifier forms."""
import pytest

from df_sol.core.errors import InvalidProjectName
from df_sol.core.naming import (
    ProjectName,
    split_words,
    to_camel,
    to_kebab,
    to_pascal,
    to_snake,
    to_upper,
)


class TestCaseConversion:
    """Test the individual case helpers."""

    @pytest.mark.parametrize("name,words", [
        ("counter", ["counter"]),
        ("my-program", ["my", "program"]),
        ("my_program", ["my", "program"]),
        ("MyProgram", ["My", "Program"]),
        ("myProgram", ["my", "Program"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("token2022-mint", ["token2022", "mint"]),
    ])
    def test_split_words(self, name, words):
        """Names split on separators and case boundaries."""
        assert split_words(name) == words

    def test_forms_from_kebab(self):
        """Every form is derived from the same word list."""
        assert to_snake("mint-token") == "mint_token"
        assert to_kebab("mint-token") == "mint-token"
        assert to_pascal("mint-token") == "MintToken"
        assert to_camel("mint-token") == "mintToken"
        assert to_upper("mint-token") == "MINT_TOKEN"

    def test_forms_from_pascal(self):
        """Pascal case input converts back to separated forms."""
        assert to_snake("MintToken") == "mint_token"
        assert to_kebab("MintToken") == "mint-token"
        assert to_pascal("MintToken") == "MintToken"


class TestProjectName:
    """Test ProjectName.parse."""

    def test_simple_name(self):
        """A lowercase word is used as-is everywhere."""
        name = ProjectName.parse("counter")

        assert name.raw == "counter"
        assert name.project == "counter"
        assert name.snake == "counter"
        assert name.pascal == "Counter"
        assert name.upper == "COUNTER"

    def test_kebab_name_keeps_kebab_directory(self):
        """Kebab input names the directory in kebab case."""
        name = ProjectName.parse("my-program")

        assert name.project == "my-program"
        assert name.snake == "my_program"
        assert name.camel == "myProgram"

    def test_snake_name_keeps_snake_directory(self):
        """Snake input names the directory in snake case."""
        name = ProjectName.parse("my_program")

        assert name.project == "my_program"
        assert name.kebab == "my-program"

    def test_pascal_name_becomes_kebab_directory(self):
        """Mixed case input names the directory in kebab case."""
        name = ProjectName.parse("MyProgram")

        assert name.project == "my-program"
        assert name.snake == "my_program"
        assert name.pascal == "MyProgram"

    @pytest.mark.parametrize("bad", [
        "",
        "my program",
        "my.program",
        "über",
        "../escape",
        "a/b",
        "--",
        "2fast",
        "9",
    ])
    def test_rejects_invalid_names(self, bad):
        """Names that are not safe directories or Rust identifiers are rejected."""
        with pytest.raises(InvalidProjectName) as exc_info:
            ProjectName.parse(bad)

        assert exc_info.value.name == bad
        assert exc_info.value.exit_code == 2
        assert exc_info.value.stage == "validation"

    @pytest.mark.parametrize("keyword", ["fn", "crate", "self", "mod", "async"])
    def test_rejects_rust_keywords(self, keyword):
        """Reserved words cannot name the program module."""
        with pytest.raises(InvalidProjectName, match="reserved Rust keyword"):
            ProjectName.parse(keyword)

    def test_keyword_inside_name_is_fine(self):
        """Only the whole snake form is checked against keywords."""
        assert ProjectName.parse("fn-helper").snake == "fn_helper"
