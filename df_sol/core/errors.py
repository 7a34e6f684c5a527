"""Error taxonomy for workspace scaffolding.

Every failure raised by the core derives from DfSolError and carries the
stage it happened in plus the process exit code the CLI should use.
"""
from pathlib import Path
from typing import Iterable, Optional


class DfSolError(Exception):
    """Base class for all scaffolding errors."""

    stage = "internal"
    exit_code = 1


# Validation errors: detected before any filesystem mutation

class ValidationError(DfSolError):
    """Raised when user supplied options are invalid."""

    stage = "validation"
    exit_code = 2


class InvalidProjectName(ValidationError):
    """Raised when the project name cannot be used as a directory or identifier."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name '{name}': {reason}")


class InvalidOptionValue(ValidationError):
    """Raised when a free-form option value (program id, license) is malformed."""

    def __init__(self, option: str, value: str, reason: str):
        self.option = option
        self.value = value
        super().__init__(f"Invalid value '{value}' for {option}: {reason}")


class UnknownOption(ValidationError):
    """Raised when a string does not name a known template option."""

    def __init__(self, option: str, value: str, valid: Iterable[str]):
        self.option = option
        self.value = value
        self.valid = list(valid)
        super().__init__(
            f"Unknown {option} '{value}'. Valid values: {', '.join(self.valid)}"
        )


class UnsupportedCombination(ValidationError):
    """Raised when a template cannot be combined with the other selected options.

    ``option`` names the offending choice ("layout" or "test template") and
    ``supported`` lists the values of that option that would work.
    """

    exit_code = 3

    def __init__(self, template: str, layout: str, test_framework: str,
                 supported: Optional[Iterable[str]] = None,
                 option: str = "test template",
                 language: Optional[str] = None):
        self.template = template
        self.layout = layout
        self.test_framework = test_framework
        self.supported = list(supported or [])
        self.option = option
        self.language = language
        if option == "layout":
            message = f"Template '{template}' does not support layout '{layout}'"
            supported_label = "layouts"
        else:
            message = (
                f"Template '{template}' ({layout} layout) does not support "
                f"test template '{test_framework}'"
            )
            supported_label = "test templates"
        if language:
            message += f" in {language}"
        if self.supported:
            message += f". Supported {supported_label}: {', '.join(self.supported)}"
        super().__init__(message)


# Template errors: catalog and context disagree, always a latent bug

class TemplateError(DfSolError):
    """Raised when bundled templates are inconsistent with the context."""

    stage = "template"
    exit_code = 5


class MissingKeyError(TemplateError):
    """Raised when a known placeholder has no value in the context."""

    def __init__(self, key: str, where: Optional[str] = None):
        self.key = key
        self.where = where
        location = f" in {where}" if where else ""
        super().__init__(f"No value for placeholder '{{{{{key}}}}}'{location}")


class CatalogCorrupt(TemplateError):
    """Raised when the bundled template catalog is incomplete or malformed."""
    pass


class TemplateNotFound(TemplateError):
    """Raised when the catalog holds no file set for a combination."""
    pass


# Generation errors: detected while writing the tree

class GenerationError(DfSolError):
    """Raised when the file tree cannot be written."""

    stage = "generation"
    exit_code = 6

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class DestinationConflict(GenerationError):
    """Raised when a target path already exists and overwrite is off."""

    exit_code = 4

    def __init__(self, path: Path, reason: str = "already exists"):
        super().__init__(path, f"{path} {reason} (use --force to overwrite)")


class WriteFailed(GenerationError):
    """Raised when the filesystem rejects a write; earlier files stay on disk."""

    def __init__(self, path: Path, cause: OSError):
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(
            path,
            f"Failed to write {path}: {reason}. "
            f"Files written before this path were left in place",
        )
