"""Template option models.

The CLI accepts plain strings; everything past the boundary works with these
variants.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from df_sol.core.errors import UnknownOption


class _Choice(str, Enum):
    """String-valued enum with a validating parser."""

    @classmethod
    def option_name(cls) -> str:
        return cls.__name__

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Union[str, "_Choice"]):
        """Turn a user string into a variant.

        Raises:
            UnknownOption: If the value names no variant
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnknownOption(cls.option_name(), str(value), cls.values())

    def __str__(self) -> str:
        return self.value


class ProgramTemplate(_Choice):
    """Base program the workspace starts from."""
    BASIC = "basic"
    COUNTER = "counter"
    MINT_TOKEN = "mint-token"

    @classmethod
    def option_name(cls) -> str:
        return "template"


class Layout(_Choice):
    """How the program sources are split into files."""
    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def option_name(cls) -> str:
        return "layout"


class TestFramework(_Choice):
    """Test tooling generated next to the program."""
    MOCHA = "mocha"
    JEST = "jest"
    RUST = "rust"

    @classmethod
    def option_name(cls) -> str:
        return "test template"


# Keep pytest from collecting the enum as a test class
TestFramework.__test__ = False


class Language(_Choice):
    """Language of the client side files (tests, deploy script, package.json)."""
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @classmethod
    def option_name(cls) -> str:
        return "language"


@dataclass(frozen=True)
class TemplateKind:
    """One base program combined with one layout."""
    program: ProgramTemplate
    layout: Layout = Layout.SINGLE

    @classmethod
    def parse(cls, program: Union[str, ProgramTemplate],
              layout: Union[str, Layout] = Layout.SINGLE) -> "TemplateKind":
        return cls(ProgramTemplate.parse(program), Layout.parse(layout))

    def __str__(self) -> str:
        return f"{self.program.value}/{self.layout.value}"
