"""df-sol: scaffolding for Anchor workspaces."""

__version__ = "0.1.0"
