"""
Entités du domaine.

Exports :
- DirectoryEntry : Élément brut d'un listage de répertoire
- FileEntry : Fichier du projet avec chemin relatif
- FolderEntry : Dossier du projet avec chemin relatif
- ProjectSnapshot : Vue classée et immutable du projet
- ProjectContext : Contexte explicite d'un projet ouvert
"""

from hvsort.core.entities.project import (
    DirectoryEntry,
    FileEntry,
    FolderEntry,
    ProjectContext,
    ProjectSnapshot,
)

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "FolderEntry",
    "ProjectContext",
    "ProjectSnapshot",
]
