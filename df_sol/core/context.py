"""Generation context: the placeholder values for one invocation."""
import re
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

from df_sol.core.config import DfSolConfig, get_config
from df_sol.core.errors import InvalidOptionValue
from df_sol.core.naming import ProjectName

PLACEHOLDER_KEYS = frozenset({
    "PROJECT_NAME",
    "SNAKE_NAME",
    "KEBAB_NAME",
    "PASCAL_NAME",
    "CAMEL_NAME",
    "UPPER_NAME",
    "PROGRAM_ID",
    "ANCHOR_VERSION",
    "LICENSE",
    "TEST_SCRIPT",
})

_BASE58_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
_LICENSE_RE = re.compile(r"^[A-Za-z0-9.+()-]+( (OR|AND|WITH) [A-Za-z0-9.+()-]+)*$")


class GenerationContext(Mapping):
    """Immutable placeholder key -> value mapping.

    Only keys from PLACEHOLDER_KEYS are accepted; a context may hold a subset
    of them, in which case substituting a missing one fails.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None, **kwargs: str):
        merged = dict(values or {})
        merged.update(kwargs)
        unknown = sorted(set(merged) - PLACEHOLDER_KEYS)
        if unknown:
            raise ValueError(f"Unknown placeholder keys: {', '.join(unknown)}")
        self._values = {key: str(value) for key, value in merged.items()}

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"GenerationContext({self._values!r})"


def validate_program_id(program_id: str) -> str:
    if not _BASE58_RE.match(program_id):
        raise InvalidOptionValue(
            "--program-id", program_id, "expected a 32-44 character base58 public key"
        )
    return program_id


def validate_license(license_id: str) -> str:
    if not _LICENSE_RE.match(license_id):
        raise InvalidOptionValue(
            "--license", license_id, "expected an SPDX license identifier"
        )
    return license_id


def build_context(
    name: ProjectName,
    test_script: str,
    program_id: Optional[str] = None,
    license_id: Optional[str] = None,
    config: Optional[DfSolConfig] = None,
) -> GenerationContext:
    """Build the full context for one workspace.

    Args:
        name: Validated project name
        test_script: Command Anchor.toml runs for `anchor test`
        program_id: Program id override (defaults to configuration)
        license_id: License override (defaults to configuration)
        config: Runtime configuration (defaults to get_config())

    Raises:
        InvalidOptionValue: If the program id or license is malformed
    """
    config = config or get_config()
    return GenerationContext(
        PROJECT_NAME=name.project,
        SNAKE_NAME=name.snake,
        KEBAB_NAME=name.kebab,
        PASCAL_NAME=name.pascal,
        CAMEL_NAME=name.camel,
        UPPER_NAME=name.upper,
        PROGRAM_ID=validate_program_id(program_id or config.program_id),
        ANCHOR_VERSION=config.anchor_version,
        LICENSE=validate_license(license_id or config.license),
        TEST_SCRIPT=test_script,
    )
