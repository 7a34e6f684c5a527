"""Writes a generation plan to disk."""
from pathlib import Path, PurePosixPath
from typing import Dict, List, Mapping, Set

from df_sol.core.errors import DestinationConflict, WriteFailed
from df_sol.core.logger import get_logger
from df_sol.core.substitution import substitute
from df_sol.models.assets import GeneratedSummary, GenerationPlan, PlanEntry

logger = get_logger(__name__)


class TreeGenerator:
    """Materializes a GenerationPlan under a destination root.

    Every entry is rendered and checked for conflicts before the first write,
    so template errors and conflicts leave the destination untouched. Writes
    then happen sequentially in plan order; an I/O failure aborts the run and
    leaves the files written so far in place.
    """

    def generate(
        self,
        plan: GenerationPlan,
        destination_root: Path,
        context: Mapping[str, str],
        overwrite: bool = False,
    ) -> GeneratedSummary:
        """Write every plan entry below ``destination_root``.

        Args:
            plan: Resolved plan from TemplateResolver
            destination_root: Project root directory (created if missing)
            context: Placeholder values for substitutable content
            overwrite: Replace existing files instead of failing

        Returns:
            GeneratedSummary listing written paths in write order

        Raises:
            MissingKeyError: If content references a placeholder with no value
            DestinationConflict: If a target exists and cannot be reused
            WriteFailed: If the filesystem rejects a write
        """
        root = Path(destination_root)
        if root.exists() and not root.is_dir():
            raise DestinationConflict(root, "exists and is not a directory")

        plan_dirs = {entry.destination for entry in plan if entry.is_dir}
        rendered = self._render(plan, context)
        for entry in plan:
            self._check(root, entry, overwrite, plan_dirs)

        summary = GeneratedSummary(root=root)
        self._mkdir(root)

        for entry in plan:
            target = root / entry.destination
            # Re-checked while writing in case the tree changed under us
            self._check(root, entry, overwrite, plan_dirs)
            if entry.is_dir:
                self._write_dir(target, summary)
            else:
                self._write_file(target, rendered[entry.destination], summary)

        logger.debug(f"Generated {len(summary.written)} paths under {root}")
        return summary

    @staticmethod
    def _render(plan: GenerationPlan, context: Mapping[str, str]) -> Dict[str, bytes]:
        return {
            entry.destination: substitute(
                entry.asset.content,
                context,
                substitutable=entry.asset.substitutable,
                where=entry.asset.source or entry.destination,
            )
            for entry in plan.files
        }

    @staticmethod
    def _check(root: Path, entry: PlanEntry, overwrite: bool, plan_dirs: Set[str]) -> None:
        relative = PurePosixPath(entry.destination)

        # Intermediate components must be directories (or become one)
        for parent in reversed(relative.parents):
            if str(parent) == ".":
                continue
            existing = root / parent
            if existing.exists() and not existing.is_dir():
                if overwrite and parent.as_posix() in plan_dirs:
                    continue
                raise DestinationConflict(existing, "exists and is not a directory")

        target = root / relative
        if not target.exists():
            return
        if target.is_dir():
            if entry.is_dir:
                return
            raise DestinationConflict(target, "exists and is a directory")
        if not overwrite:
            raise DestinationConflict(target)

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailed(path, e) from e

    def _write_dir(self, target: Path, summary: GeneratedSummary) -> None:
        if target.is_dir():
            summary.skipped.append(target)
            return
        replaced = False
        if target.exists():
            try:
                target.unlink()
            except OSError as e:
                raise WriteFailed(target, e) from e
            replaced = True
        self._mkdir(target)
        summary.written.append(target)
        if replaced:
            summary.overwritten.append(target)
        logger.debug(f"Created directory {target}")

    def _write_file(self, target: Path, content: bytes, summary: GeneratedSummary) -> None:
        existed = target.exists()
        self._mkdir(target.parent)
        try:
            target.write_bytes(content)
        except OSError as e:
            raise WriteFailed(target, e) from e
        summary.written.append(target)
        summary.files.append(target)
        if existed:
            summary.overwritten.append(target)
        logger.debug(f"Wrote {target}")


def find_conflicts(plan: GenerationPlan, destination_root: Path) -> List[Path]:
    """Existing files the plan would replace (used for dry-run reporting)."""
    root = Path(destination_root)
    conflicts: List[Path] = []
    for entry in plan:
        target = root / entry.destination
        if target.exists() and not (entry.is_dir and target.is_dir()):
            conflicts.append(target)
    return conflicts
