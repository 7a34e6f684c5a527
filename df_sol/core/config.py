"""df-sol runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional

# Anchor's placeholder program id, replaced once the program keypair exists
DEFAULT_PROGRAM_ID = "Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS"


@dataclass
class DfSolConfig:
    """Runtime configuration for workspace generation.

    Attributes:
        anchor_version: Anchor release pinned in generated manifests (default: 0.30.0)
        license: License written to package.json (default: MIT)
        program_id: Program id embedded in declare_id! and Anchor.toml
        log_file: Optional log file path; file logging is off when unset
    """

    anchor_version: str = "0.30.0"
    license: str = "MIT"
    program_id: str = DEFAULT_PROGRAM_ID
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DfSolConfig":
        """Create config from environment variables.

        Environment variables:
            DF_SOL_ANCHOR_VERSION: Anchor version for generated manifests
            DF_SOL_LICENSE: License for package.json
            DF_SOL_PROGRAM_ID: Program id for declare_id!
            DF_SOL_LOG_FILE: Enable file logging to this path

        Returns:
            DfSolConfig instance with values from environment or defaults
        """
        return cls(
            anchor_version=os.getenv("DF_SOL_ANCHOR_VERSION", cls.anchor_version),
            license=os.getenv("DF_SOL_LICENSE", cls.license),
            program_id=os.getenv("DF_SOL_PROGRAM_ID", cls.program_id),
            log_file=os.getenv("DF_SOL_LOG_FILE") or None,
        )


# Global config instance (can be overridden)
_config: Optional[DfSolConfig] = None


def get_config() -> DfSolConfig:
    """Get the global df-sol configuration.

    Returns:
        DfSolConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = DfSolConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() rereads the env."""
    global _config
    _config = None
