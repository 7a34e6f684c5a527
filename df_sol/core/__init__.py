"""Core utilities: configuration, logging, errors and substitution."""
