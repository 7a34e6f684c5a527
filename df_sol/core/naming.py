"""Project name validation and derived identifier forms."""
import re
from dataclasses import dataclass
from typing import List

from df_sol.core.errors import InvalidProjectName

_ALLOWED_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_CHUNK_SPLIT_RE = re.compile(r"[^A-Za-z0-9]+")
# Acronym runs, capitalized words, lowercase runs (digits stick to the word before them)
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+[0-9]*|[0-9]+")
_RUST_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

RUST_KEYWORDS = frozenset({
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    "abstract", "become", "box", "do", "dyn", "final", "macro", "override",
    "priv", "typeof", "unsized", "virtual", "yield",
})
# Reserved in newer editions but not rejected by every parser
EXTRA_KEYWORDS = frozenset({"async", "await", "try"})


def split_words(name: str) -> List[str]:
    """Split a name on separators and camel-case boundaries."""
    words: List[str] = []
    for chunk in _CHUNK_SPLIT_RE.split(name):
        words.extend(_WORD_RE.findall(chunk))
    return words


def to_snake(name: str) -> str:
    return "_".join(word.lower() for word in split_words(name))


def to_kebab(name: str) -> str:
    return "-".join(word.lower() for word in split_words(name))


def to_pascal(name: str) -> str:
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def to_camel(name: str) -> str:
    pascal = to_pascal(name)
    return pascal[:1].lower() + pascal[1:]


def to_upper(name: str) -> str:
    return "_".join(word.upper() for word in split_words(name))


@dataclass(frozen=True)
class ProjectName:
    """A validated project name and every form the templates need."""
    raw: str
    project: str
    snake: str
    kebab: str
    pascal: str
    camel: str
    upper: str

    @classmethod
    def parse(cls, name: str) -> "ProjectName":
        """Validate a user supplied name and derive its forms.

        The directory / package name is the snake form when the input already
        is snake case, otherwise the kebab form.

        Raises:
            InvalidProjectName: If the name cannot become a Rust identifier
        """
        if not name:
            raise InvalidProjectName(name, "name must not be empty")
        if not _ALLOWED_RE.match(name):
            raise InvalidProjectName(
                name, "only ASCII letters, digits, '-' and '_' are allowed"
            )

        snake = to_snake(name)
        if not snake or not _RUST_IDENT_RE.match(snake):
            raise InvalidProjectName(
                name,
                "it must be a valid Rust identifier once converted to snake case "
                "(it may not start with a digit)",
            )
        if snake in RUST_KEYWORDS or snake in EXTRA_KEYWORDS:
            raise InvalidProjectName(name, f"'{snake}' is a reserved Rust keyword")

        project = snake if name == snake else to_kebab(name)
        return cls(
            raw=name,
            project=project,
            snake=snake,
            kebab=to_kebab(name),
            pascal=to_pascal(name),
            camel=to_camel(name),
            upper=to_upper(name),
        )
