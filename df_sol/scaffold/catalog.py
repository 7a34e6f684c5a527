"""Bundled template catalog.

Template bytes ship as package data under ``df_sol/templates``. The
``catalog.yml`` manifest groups files into named sets and lists, in order, the
group-name patterns that make up a workspace for a given selection. A
selection is valid when every group its patterns name exists.
Patterns may use ``{lang}``, the group-name suffix of the selected language.
"""
from pathlib import Path, PurePosixPath
from typing import Dict, FrozenSet, List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from df_sol.core.errors import CatalogCorrupt, TemplateNotFound
from df_sol.core.logger import get_logger
from df_sol.models.assets import AssetEntry, EntryType
from df_sol.models.options import Language, Layout, ProgramTemplate, TemplateKind, TestFramework

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
MANIFEST_NAME = "catalog.yml"

Combination = Tuple[TemplateKind, TestFramework]
_Selection = Tuple[TemplateKind, TestFramework, Language]


class EntrySpec(BaseModel):
    """One file or directory in a group."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    path: str = Field(..., min_length=1)
    source: Optional[str] = None
    type: Literal["file", "directory"] = "file"
    substitute: bool = True

    @model_validator(mode='after')
    def validate_source(self) -> 'EntrySpec':
        """Files need a source, directories must not have one."""
        if self.type == "file" and not self.source:
            raise ValueError(f"File entry '{self.path}' has no source")
        if self.type == "directory" and self.source:
            raise ValueError(f"Directory entry '{self.path}' cannot have a source")
        return self


class OptionSpec(BaseModel):
    """Metadata for one option value."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    description: str = ""
    test_script: Optional[str] = None
    # Per-language replacements for test_script, keyed by language name
    language_test_scripts: Dict[str, str] = Field(default_factory=dict)


class LanguageSpec(BaseModel):
    """Metadata for one client language.

    ``suffix`` is appended wherever a compose pattern says ``{lang}``, so the
    default language can keep unsuffixed group names.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    description: str = ""
    suffix: str = ""


class ManifestSpec(BaseModel):
    """Schema of catalog.yml."""

    model_config = ConfigDict(extra='forbid')

    version: int = 1
    programs: Dict[str, OptionSpec]
    layouts: Dict[str, OptionSpec]
    test_frameworks: Dict[str, OptionSpec]
    languages: Dict[str, LanguageSpec]
    compose: List[str] = Field(..., min_length=1)
    groups: Dict[str, List[EntrySpec]]

    @model_validator(mode='after')
    def validate_options(self) -> 'ManifestSpec':
        """Option keys must match the known variants exactly."""
        for label, declared, enum in (
            ("programs", self.programs, ProgramTemplate),
            ("layouts", self.layouts, Layout),
            ("test_frameworks", self.test_frameworks, TestFramework),
            ("languages", self.languages, Language),
        ):
            if set(declared) != set(enum.values()):
                raise ValueError(
                    f"{label} must declare exactly {sorted(enum.values())}, "
                    f"got {sorted(declared)}"
                )
        for name, spec in self.test_frameworks.items():
            if not spec.test_script:
                raise ValueError(f"test framework '{name}' has no test_script")
            unknown = set(spec.language_test_scripts) - set(Language.values())
            if unknown:
                raise ValueError(
                    f"test framework '{name}' has scripts for unknown languages {sorted(unknown)}"
                )
        suffixes = [spec.suffix for spec in self.languages.values()]
        if len(set(suffixes)) != len(suffixes):
            raise ValueError("languages must use distinct suffixes")
        return self


class AssetCatalog:
    """Immutable registry of every bundled file set."""

    def __init__(self, manifest: ManifestSpec, groups: Dict[str, Tuple[AssetEntry, ...]]):
        self._manifest = manifest
        self._groups = dict(groups)
        self._combinations = self._compute_combinations()

    @classmethod
    def load(cls, templates_dir: Optional[Path] = None) -> "AssetCatalog":
        """Read the manifest and every template file into memory.

        Args:
            templates_dir: Directory holding catalog.yml. Defaults to df_sol/templates/

        Raises:
            CatalogCorrupt: If the manifest is unreadable, invalid, or names
                a source file that does not exist
        """
        templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        manifest_path = templates_dir / MANIFEST_NAME

        try:
            with open(manifest_path) as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogCorrupt(f"Cannot read template manifest {manifest_path}: {e}") from e

        try:
            manifest = ManifestSpec.model_validate(raw or {})
        except ValidationError as e:
            raise CatalogCorrupt(f"Invalid template manifest {manifest_path}:\n{e}") from e

        sources: Dict[str, bytes] = {}
        groups: Dict[str, Tuple[AssetEntry, ...]] = {}
        for group_name, specs in manifest.groups.items():
            entries = []
            for spec in specs:
                content = b""
                if spec.source:
                    if spec.source not in sources:
                        sources[spec.source] = cls._read_source(templates_dir, spec.source)
                    content = sources[spec.source]
                entries.append(AssetEntry(
                    path=spec.path,
                    content=content,
                    substitutable=spec.substitute and spec.type == "file",
                    entry_type=EntryType(spec.type),
                    source=spec.source or "",
                ))
            groups[group_name] = tuple(entries)

        logger.debug(
            f"Loaded template catalog: {len(groups)} groups, {len(sources)} files"
        )
        return cls(manifest, groups)

    @staticmethod
    def _read_source(templates_dir: Path, source: str) -> bytes:
        relative = PurePosixPath(source)
        if relative.is_absolute() or ".." in relative.parts:
            raise CatalogCorrupt(f"Template source '{source}' escapes the templates directory")
        try:
            return (templates_dir / relative).read_bytes()
        except OSError as e:
            raise CatalogCorrupt(f"Template source '{source}' is missing: {e}") from e

    def _group_names(self, kind: TemplateKind, test_framework: TestFramework,
                     language: Language) -> List[str]:
        return [
            pattern.format(
                program=kind.program.value,
                layout=kind.layout.value,
                test=test_framework.value,
                lang=self._manifest.languages[language.value].suffix,
            )
            for pattern in self._manifest.compose
        ]

    def _compute_combinations(self) -> FrozenSet[_Selection]:
        combinations = set()
        for program in ProgramTemplate:
            for layout in Layout:
                kind = TemplateKind(program, layout)
                for test_framework in TestFramework:
                    for language in Language:
                        try:
                            names = self._group_names(kind, test_framework, language)
                        except (KeyError, IndexError, ValueError) as e:
                            raise CatalogCorrupt(f"Bad compose pattern in manifest: {e}") from e
                        if all(name in self._groups for name in names):
                            combinations.add((kind, test_framework, language))
        return frozenset(combinations)

    def valid_combinations(self, language: Language = Language.TYPESCRIPT) -> FrozenSet[Combination]:
        """Every (template kind, test framework) pair with a complete file set in ``language``."""
        return frozenset(
            (kind, test_framework)
            for kind, test_framework, lang in self._combinations
            if lang is language
        )

    def is_valid(self, kind: TemplateKind, test_framework: TestFramework,
                 language: Language = Language.TYPESCRIPT) -> bool:
        return (kind, test_framework, language) in self._combinations

    def supported_test_frameworks(self, kind: TemplateKind,
                                  language: Language = Language.TYPESCRIPT) -> List[TestFramework]:
        return [tf for tf in TestFramework if (kind, tf, language) in self._combinations]

    def supported_layouts(self, program: ProgramTemplate,
                          language: Language = Language.TYPESCRIPT) -> List[Layout]:
        """Layouts that have at least one complete file set for ``program``."""
        return [
            layout for layout in Layout
            if self.supported_test_frameworks(TemplateKind(program, layout), language)
        ]

    def lookup(self, kind: TemplateKind, test_framework: TestFramework,
               language: Language = Language.TYPESCRIPT) -> Tuple[AssetEntry, ...]:
        """Return the ordered file set for a combination.

        Raises:
            TemplateNotFound: If the catalog has no complete set for it
        """
        if (kind, test_framework, language) not in self._combinations:
            raise TemplateNotFound(
                f"No bundled templates for {kind} with {language.value} "
                f"{test_framework.value} tests"
            )
        entries: List[AssetEntry] = []
        for name in self._group_names(kind, test_framework, language):
            entries.extend(self._groups[name])
        return tuple(entries)

    def test_script(self, test_framework: TestFramework,
                    language: Language = Language.TYPESCRIPT) -> str:
        spec = self._manifest.test_frameworks[test_framework.value]
        return spec.language_test_scripts.get(language.value, spec.test_script)

    def describe_language(self, language: Language) -> str:
        return self._manifest.languages[language.value].description

    def describe_program(self, program: ProgramTemplate) -> str:
        return self._manifest.programs[program.value].description

    def describe_layout(self, layout: Layout) -> str:
        return self._manifest.layouts[layout.value].description

    def describe_test_framework(self, test_framework: TestFramework) -> str:
        return self._manifest.test_frameworks[test_framework.value].description


# Global catalog instance, loaded on first use
_catalog: Optional[AssetCatalog] = None


def get_catalog() -> AssetCatalog:
    """Get the process-wide catalog of bundled templates."""
    global _catalog
    if _catalog is None:
        _catalog = AssetCatalog.load()
    return _catalog
