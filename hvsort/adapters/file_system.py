"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystemGateway pour le systeme de fichiers reel.
Chaque methode capture les OSError et retourne un resultat en echec.
"""

import os
import shutil
from datetime import datetime
from pathlib import Path

from loguru import logger

from hvsort.core.entities import DirectoryEntry
from hvsort.core.ports.file_system import (
    IFileSystemGateway,
    ListResult,
    OperationResult,
    StatResult,
)


def _entry_from_stat(path: Path, stat_result: os.stat_result, is_directory: bool) -> DirectoryEntry:
    """Construit un DirectoryEntry depuis un os.stat_result."""
    # st_birthtime n'existe pas sur la plupart des systemes Linux
    created = getattr(stat_result, "st_birthtime", stat_result.st_ctime)
    return DirectoryEntry(
        name=path.name,
        path=path,
        is_directory=is_directory,
        size=0 if is_directory else stat_result.st_size,
        created_at=datetime.fromtimestamp(created),
        modified_at=datetime.fromtimestamp(stat_result.st_mtime),
    )


class FileSystemGateway(IFileSystemGateway):
    """
    Implementation de IFileSystemGateway pour le systeme de fichiers reel.

    Les deplacements se font par copie (avec preservation des metadonnees)
    puis suppression de la source, jamais par renommage atomique.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def list_directory(self, path: Path) -> ListResult:
        """
        Liste le contenu direct d'un repertoire, trie par nom.

        Un symlink casse ou cyclique est decrit par ses propres metadonnees (lstat).
        Un lien vers un repertoire est ignore: le parcours ne sort jamais
        de l'arborescence du projet et ne boucle pas.
        Toute autre erreur de lecture fait echouer le listage complet.
        """
        try:
            entries: list[DirectoryEntry] = []
            with os.scandir(path) as iterator:
                for item in sorted(iterator, key=lambda e: e.name):
                    item_path = Path(item.path)
                    if item.is_symlink() and item.is_dir():
                        logger.debug("Lien vers un repertoire ignore", path=str(item_path))
                        continue
                    try:
                        stat_result = item.stat()
                    except OSError:
                        if not item.is_symlink():
                            raise
                        stat_result = item.stat(follow_symlinks=False)
                    entries.append(
                        _entry_from_stat(item_path, stat_result, item.is_dir(follow_symlinks=False))
                    )
            return ListResult(success=True, entries=tuple(entries))
        except OSError as e:
            return ListResult(success=False, error=str(e))

    def create_directory(self, path: Path) -> OperationResult:
        """Cree un repertoire et ses parents (idempotent)."""
        try:
            path.mkdir(parents=True, exist_ok=True)
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def move(self, source: Path, destination: Path) -> OperationResult:
        """
        Deplace un fichier par copie puis suppression de la source.

        Cree les repertoires parents si necessaire. Si la suppression de la
        source echoue, la copie est conservee (doublon plutot que perte).
        """
        if not source.exists():
            return OperationResult(
                success=False, error=f"Le fichier source n'existe pas: {source}"
            )

        if os.path.normpath(source) == os.path.normpath(destination):
            return OperationResult(success=True, message="Fichier deja a destination")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(str(source), str(destination))
        except (OSError, shutil.Error) as e:
            return OperationResult(success=False, error=f"Copie echouee: {e}")

        try:
            source.unlink()
        except OSError as e:
            return OperationResult(
                success=False,
                message=f"Copie presente dans {destination}",
                error=f"Suppression de la source echouee: {e}",
            )

        return OperationResult(success=True)

    def rename(self, source: Path, destination: Path) -> OperationResult:
        """Renomme un fichier sur place (ecrase une destination existante)."""
        try:
            os.replace(source, destination)
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def stat(self, path: Path) -> StatResult:
        """Lit la taille et les dates d'un chemin."""
        try:
            stat_result = path.stat()
            return StatResult(
                success=True,
                entry=_entry_from_stat(path, stat_result, path.is_dir()),
            )
        except OSError as e:
            return StatResult(success=False, error=str(e))
