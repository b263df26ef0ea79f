"""
Service d'orchestration d'un projet.

Enchaine scan, classification, deplacements et renommages sur un
ProjectContext explicite fourni par l'appelant. Apres chaque mutation du
disque, le snapshot du contexte est remplace en bloc par un scan neuf.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger
from pathvalidate import ValidationError, validate_filename

from hvsort.core.entities import FileEntry, ProjectContext, ProjectSnapshot
from hvsort.core.ports.file_system import IFileSystemGateway
from hvsort.core.value_objects import RenameOperation
from hvsort.services.classifier import H_FOLDER_NAME, V_FOLDER_NAME, ClassifierService
from hvsort.services.relocation import ProgressCallback, RelocationReport, RelocationService
from hvsort.services.renamer import RenameBatchResult, RenamerService
from hvsort.services.scanner import ScannerService


@dataclass
class ProjectResult:
    """
    Resultat de l'ouverture, creation ou rafraichissement d'un projet.

    Attributs:
        success: True si le projet a ete scanne integralement
        context: Contexte du projet (snapshot a jour si succes)
        error: Message d'erreur (si echec)
    """

    success: bool
    context: Optional[ProjectContext] = None
    error: Optional[str] = None

    @property
    def snapshot(self) -> Optional[ProjectSnapshot]:
        return self.context.snapshot if self.context else None


class ProjectService:
    """
    Orchestrateur des operations sur un projet.

    Ne conserve aucun etat: tout passe par le ProjectContext de l'appelant.

    Utilisation:
        projects = ProjectService(file_system, scanner, classifier, relocation, renamer)
        opened = projects.open_project(Path("/media/rushes/Tournage"))
        report = projects.move_to_canonical_folders(opened.context)
        print(opened.context.snapshot.orphaned_h)
    """

    def __init__(
        self,
        file_system: IFileSystemGateway,
        scanner: ScannerService,
        classifier: ClassifierService,
        relocation: RelocationService,
        renamer: RenamerService,
    ) -> None:
        self._fs = file_system
        self._scanner = scanner
        self._classifier = classifier
        self._relocation = relocation
        self._renamer = renamer

    def open_project(self, root: Path) -> ProjectResult:
        """Ouvre un projet existant et calcule son premier snapshot."""
        context = ProjectContext(root_path=Path(root))
        return self.refresh(context)

    def refresh(self, context: ProjectContext) -> ProjectResult:
        """
        Rescanne le projet et remplace le snapshot du contexte.

        En cas d'echec du scan, le snapshot precedent est conserve tel quel.
        """
        scan = self._scanner.scan(context.root_path)
        if not scan.success:
            return ProjectResult(success=False, context=context, error=scan.error)

        context.snapshot = self._classifier.snapshot_from_scan(scan)
        return ProjectResult(success=True, context=context)

    def create_project(self, parent: Path, name: str) -> ProjectResult:
        """
        Cree un nouveau projet avec ses dossiers H et V, puis l'ouvre.

        Args:
            parent: Dossier dans lequel creer le projet
            name: Nom du projet (doit etre un nom de dossier valide)
        """
        try:
            validate_filename(name, platform="auto")
        except ValidationError as e:
            return ProjectResult(success=False, error=f"Nom de projet invalide: {e}")

        root = Path(parent) / name
        for directory in (root, root / H_FOLDER_NAME, root / V_FOLDER_NAME):
            created = self._fs.create_directory(directory)
            if not created.success:
                return ProjectResult(
                    success=False,
                    error=f"Creation de {directory} impossible: {created.error}",
                )

        logger.info("Projet cree", root=str(root))
        return self.open_project(root)

    def move_to_canonical_folders(
        self,
        context: ProjectContext,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> RelocationReport:
        """Deplace les fichiers H/V du projet et met a jour le snapshot du contexte."""
        snapshot = self._require_snapshot(context)
        if snapshot is None:
            return RelocationReport(success=False, error="Projet illisible")

        report = self._relocation.move_to_canonical_folders(snapshot, progress_callback)
        self._adopt(context, report.snapshot)
        return report

    def move_by_aspect_ratio(
        self,
        context: ProjectContext,
        files: Optional[Iterable[FileEntry]] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> RelocationReport:
        """Trie les fichiers sans suffixe par ratio et met a jour le snapshot du contexte."""
        snapshot = self._require_snapshot(context)
        if snapshot is None:
            return RelocationReport(success=False, error="Projet illisible")

        report = self._relocation.move_by_aspect_ratio(snapshot, files, progress_callback)
        self._adopt(context, report.snapshot)
        return report

    def rename(
        self,
        context: ProjectContext,
        files: Iterable[FileEntry | Path],
        operation: RenameOperation,
        preserve_extension: bool = True,
    ) -> RenameBatchResult:
        """Renomme une selection puis rescanne le projet."""
        result = self._renamer.apply(files, operation, preserve_extension)
        if result.success:
            refreshed = self.refresh(context)
            if not refreshed.success:
                logger.error("Rescan apres renommage impossible", error=refreshed.error)
        return result

    def _require_snapshot(self, context: ProjectContext) -> Optional[ProjectSnapshot]:
        """Snapshot courant du contexte, scanne a la demande s'il manque."""
        if context.snapshot is None:
            self.refresh(context)
        return context.snapshot

    @staticmethod
    def _adopt(context: ProjectContext, snapshot: Optional[ProjectSnapshot]) -> None:
        if snapshot is not None:
            context.snapshot = snapshot
