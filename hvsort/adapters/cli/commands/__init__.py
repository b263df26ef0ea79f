"""Sous-package CLI commands - re-exporte les commandes publiques."""

from hvsort.adapters.cli.commands.project_commands import (
    autosort,
    create,
    organize,
    probe,
    scan,
)
from hvsort.adapters.cli.commands.rename_commands import (
    rename_app,
    rename_append,
    rename_prepend,
    rename_remove,
    rename_replace,
)

__all__ = [
    # projet
    "scan",
    "organize",
    "autosort",
    "probe",
    "create",
    # renommage
    "rename_app",
    "rename_replace",
    "rename_append",
    "rename_prepend",
    "rename_remove",
]
