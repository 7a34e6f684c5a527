"""Turns a template selection into an ordered generation plan."""
from pathlib import PurePosixPath
from typing import Mapping, Optional, Set

from df_sol.core.errors import CatalogCorrupt, UnsupportedCombination
from df_sol.core.logger import get_logger
from df_sol.core.substitution import substitute_text
from df_sol.models.assets import GenerationPlan, PlanEntry
from df_sol.models.options import Language, TemplateKind, TestFramework
from df_sol.scaffold.catalog import AssetCatalog, get_catalog

logger = get_logger(__name__)


class TemplateResolver:
    """Validates selections against the catalog and binds destination paths."""

    def __init__(self, catalog: Optional[AssetCatalog] = None):
        self.catalog = catalog or get_catalog()

    def resolve(
        self,
        kind: TemplateKind,
        test_framework: TestFramework,
        context: Mapping[str, str],
        language: Language = Language.TYPESCRIPT,
    ) -> GenerationPlan:
        """Build the generation plan for one selection.

        Entry order follows the catalog, so directories come before the files
        they hold.

        Raises:
            UnsupportedCombination: If the selection is not in valid_combinations()
            MissingKeyError: If a path placeholder has no value in the context
            CatalogCorrupt: If an entry has an empty, absolute, escaping or
                duplicate destination
        """
        if not self.catalog.is_valid(kind, test_framework, language):
            raise self._unsupported(kind, test_framework, language)

        seen: Set[str] = set()
        entries = []
        for asset in self.catalog.lookup(kind, test_framework, language):
            destination = self._destination(asset.path, context)
            if destination in seen:
                raise CatalogCorrupt(
                    f"Duplicate destination '{destination}' in {kind} + {test_framework.value}"
                )
            seen.add(destination)
            entries.append(PlanEntry(destination=destination, asset=asset))

        logger.debug(
            f"Resolved {kind} + {test_framework.value} ({language.value}): {len(entries)} entries"
        )
        return GenerationPlan(
            kind=kind,
            test_framework=test_framework,
            entries=tuple(entries),
            language=language,
        )

    def _unsupported(self, kind: TemplateKind, test_framework: TestFramework,
                     language: Language) -> UnsupportedCombination:
        """Blame the layout when no test template works with it, else the test template."""
        language_name = None if language is Language.TYPESCRIPT else language.value
        frameworks = self.catalog.supported_test_frameworks(kind, language)
        if not frameworks:
            layouts = self.catalog.supported_layouts(kind.program, language)
            if layouts:
                return UnsupportedCombination(
                    kind.program.value,
                    kind.layout.value,
                    test_framework.value,
                    [layout.value for layout in layouts],
                    option="layout",
                    language=language_name,
                )
        return UnsupportedCombination(
            kind.program.value,
            kind.layout.value,
            test_framework.value,
            [tf.value for tf in frameworks],
            language=language_name,
        )

    @staticmethod
    def _destination(template_path: str, context: Mapping[str, str]) -> str:
        if not template_path.strip():
            raise CatalogCorrupt("Catalog entry with an empty path")

        resolved = substitute_text(template_path, context, where=f"path '{template_path}'")
        path = PurePosixPath(resolved)
        if (
            not resolved.strip()
            or path.is_absolute()
            or ".." in path.parts
            or str(path) in ("", ".")
        ):
            raise CatalogCorrupt(
                f"Catalog path '{template_path}' resolves to unusable destination '{resolved}'"
            )
        return path.as_posix()
