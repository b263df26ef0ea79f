"""
Service de scan d'un repertoire de projet.

Parcourt l'arborescence complete du projet via IFileSystemGateway et produit
une liste plate des fichiers et dossiers avec leurs chemins relatifs a la racine.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from hvsort.core.entities import FileEntry, FolderEntry
from hvsort.core.ports.file_system import IFileSystemGateway


@dataclass
class ScanResult:
    """
    Resultat du scan d'un projet.

    Un scan est tout ou rien : en cas d'echec, files et folders sont vides
    et error decrit le premier repertoire illisible.

    Attributs:
        success: True si toute l'arborescence a ete lue
        root_path: Racine scannee
        files: Fichiers trouves (ordre de parcours)
        folders: Dossiers trouves (ordre de parcours)
        error: Message d'erreur (si echec)
    """

    success: bool
    root_path: Path
    files: tuple[FileEntry, ...] = ()
    folders: tuple[FolderEntry, ...] = ()
    error: Optional[str] = None


class ScannerService:
    """
    Service de parcours recursif d'un projet.

    Le parcours est iteratif (pile explicite de repertoires en attente),
    en profondeur d'abord, un repertoire a la fois. Les entrees d'un
    repertoire sont traitees dans l'ordre du nom, ce qui rend l'ordre
    de parcours deterministe.
    """

    def __init__(self, file_system: IFileSystemGateway) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystemGateway
        """
        self._file_system = file_system

    def scan(self, root: Path) -> ScanResult:
        """
        Scanne recursivement un repertoire de projet.

        Toute erreur de listage, sur n'importe quel sous-repertoire, fait
        echouer le scan entier : un resultat partiel n'est jamais retourne.

        Args:
            root: Repertoire racine du projet

        Returns:
            ScanResult complet, ou en echec
        """
        root = Path(root)
        logger.debug("Scan du projet", root=str(root))

        files: list[FileEntry] = []
        folders: list[FolderEntry] = []

        # Pile des repertoires a lister: (chemin absolu, chemin relatif)
        pending: list[tuple[Path, Path]] = [(root, Path())]

        while pending:
            directory, relative_dir = pending.pop()

            listing = self._file_system.list_directory(directory)
            if not listing.success:
                error = f"Lecture du repertoire impossible ({directory}): {listing.error}"
                logger.error("Scan interrompu", directory=str(directory), error=listing.error)
                return ScanResult(success=False, root_path=root, error=error)

            subdirectories: list[tuple[Path, Path]] = []
            for entry in listing.entries:
                relative_path = relative_dir / entry.name
                if entry.is_directory:
                    folders.append(
                        FolderEntry(
                            name=entry.name,
                            path=entry.path,
                            relative_path=relative_path,
                        )
                    )
                    subdirectories.append((entry.path, relative_path))
                else:
                    files.append(
                        FileEntry(
                            name=entry.name,
                            path=entry.path,
                            relative_path=relative_path,
                            is_directory=False,
                            size=entry.size,
                            created_at=entry.created_at,
                            modified_at=entry.modified_at,
                        )
                    )

            # Empile a l'envers pour descendre dans le premier sous-repertoire d'abord
            pending.extend(reversed(subdirectories))

        logger.info(
            "Scan termine",
            root=str(root),
            files=len(files),
            folders=len(folders),
        )
        return ScanResult(
            success=True,
            root_path=root,
            files=tuple(files),
            folders=tuple(folders),
        )
