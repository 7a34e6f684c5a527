"""Core scaffolding functionality for Anchor workspaces."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from df_sol.core.config import DfSolConfig, get_config
from df_sol.core.context import GenerationContext, build_context
from df_sol.core.logger import get_logger
from df_sol.core.naming import ProjectName
from df_sol.models.assets import GeneratedSummary, GenerationPlan
from df_sol.models.options import Language, Layout, ProgramTemplate, TemplateKind, TestFramework
from df_sol.scaffold.catalog import AssetCatalog, get_catalog
from df_sol.scaffold.generator import TreeGenerator
from df_sol.scaffold.resolver import TemplateResolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScaffoldRequest:
    """Everything decided before the first filesystem write."""
    name: ProjectName
    kind: TemplateKind
    test_framework: TestFramework
    context: GenerationContext
    plan: GenerationPlan
    root: Path
    language: Language = Language.TYPESCRIPT


class ScaffoldManager:
    """Manages Anchor workspace scaffolding."""

    def __init__(self, catalog: Optional[AssetCatalog] = None,
                 config: Optional[DfSolConfig] = None):
        self.catalog = catalog or get_catalog()
        self.config = config or get_config()
        self.resolver = TemplateResolver(self.catalog)
        self.generator = TreeGenerator()

    def prepare(
        self,
        name: str,
        template: Union[str, ProgramTemplate] = ProgramTemplate.BASIC,
        layout: Union[str, Layout] = Layout.SINGLE,
        test_template: Union[str, TestFramework] = TestFramework.MOCHA,
        output_dir: Optional[Path] = None,
        program_id: Optional[str] = None,
        license_id: Optional[str] = None,
        language: Union[str, Language] = Language.TYPESCRIPT,
    ) -> ScaffoldRequest:
        """Validate the options and resolve the plan without writing anything.

        Raises:
            ValidationError: For a bad name, option value or combination
            TemplateError: If the bundled templates cannot serve the request
        """
        project = ProjectName.parse(name)
        kind = TemplateKind.parse(template, layout)
        test_framework = TestFramework.parse(test_template)
        language = Language.parse(language)

        context = build_context(
            project,
            test_script=self.catalog.test_script(test_framework, language),
            program_id=program_id,
            license_id=license_id,
            config=self.config,
        )
        plan = self.resolver.resolve(kind, test_framework, context, language)
        root = Path(output_dir or Path.cwd()) / project.project

        return ScaffoldRequest(
            name=project,
            kind=kind,
            test_framework=test_framework,
            context=context,
            plan=plan,
            root=root,
            language=language,
        )

    def generate(self, request: ScaffoldRequest, overwrite: bool = False) -> GeneratedSummary:
        """Write a prepared request to disk."""
        logger.debug(
            f"Creating workspace {request.name.project} from {request.kind} "
            f"with {request.language.value} {request.test_framework.value} tests in {request.root}"
        )
        return self.generator.generate(request.plan, request.root, request.context, overwrite)

    def scaffold_workspace(
        self,
        name: str,
        template: Union[str, ProgramTemplate] = ProgramTemplate.BASIC,
        layout: Union[str, Layout] = Layout.SINGLE,
        test_template: Union[str, TestFramework] = TestFramework.MOCHA,
        output_dir: Optional[Path] = None,
        overwrite: bool = False,
        program_id: Optional[str] = None,
        license_id: Optional[str] = None,
        language: Union[str, Language] = Language.TYPESCRIPT,
    ) -> GeneratedSummary:
        """Scaffold a complete Anchor workspace.

        Args:
            name: Workspace name (e.g., "counter", "mint-token")
            template: Program template (basic, counter, mint-token)
            layout: Program source layout (single, multiple)
            test_template: Test template (mocha, jest, rust)
            output_dir: Parent directory (defaults to current dir)
            overwrite: Replace files that already exist
            program_id: Program id for declare_id! (defaults to config)
            license_id: License for package.json (defaults to config)
            language: Client language for tests and deploy script (typescript, javascript)

        Returns:
            Summary of the paths written below the workspace root
        """
        request = self.prepare(
            name,
            template=template,
            layout=layout,
            test_template=test_template,
            output_dir=output_dir,
            program_id=program_id,
            license_id=license_id,
            language=language,
        )
        return self.generate(request, overwrite=overwrite)
