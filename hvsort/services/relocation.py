"""
Service de deplacement des fichiers vers les dossiers canoniques H et V.

Ce module fournit:
- Le deplacement sur d'un fichier (detection de doublon, mise de cote de la
  destination existante, copie puis suppression de la source)
- Le deplacement en lot des fichiers H et V d'un projet
- Le tri automatique des fichiers sans suffixe selon leur ratio d'image

Chaque lot continue apres une erreur sur un fichier et se termine par un
nouveau scan du projet.
"""

import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from hvsort.core.entities import FileEntry, ProjectSnapshot
from hvsort.core.ports.file_system import IFileSystemGateway
from hvsort.core.value_objects import Orientation, OutcomeKind
from hvsort.services.classifier import (
    H_FOLDER_NAME,
    V_FOLDER_NAME,
    ClassifierService,
)
from hvsort.services.scanner import ScannerService

# Lettre de lecteur en debut de chemin ou juste apres un separateur ("C:\", "D:/")
DRIVE_PREFIX = re.compile(r"(?<![^\\/])[A-Za-z]:[\\/]")

# Callback de progression: (fichiers traites, total, nom du fichier)
ProgressCallback = Callable[[int, int, str], None]


def repair_destination_path(path: str) -> str:
    """
    Repare un chemin de destination mal forme.

    Un chemin melangeant "/" et "\\" et contenant deux fois un prefixe de
    lecteur (ex: "C:\\Projet/C:\\Projet\\H\\a.mp4") est tronque avant la
    seconde occurrence du prefixe pour ne garder que le chemin voulu.

    Args:
        path: Chemin de destination

    Returns:
        Chemin repare, ou inchange s'il n'est pas concerne
    """
    if "/" not in path or "\\" not in path:
        return path

    drives = list(DRIVE_PREFIX.finditer(path))
    if len(drives) < 2 or drives[0].start() != 0:
        return path

    return path[drives[1].start():]


def normalize_path(path: Path | str) -> str:
    """Forme normalisee d'un chemin, pour comparer source et destination."""
    return os.path.normcase(os.path.normpath(str(path)))


def aside_timestamp(now: Optional[datetime] = None) -> str:
    """
    Horodatage ISO-8601 UTC sans ":" ni ".", ex: "2026-10-19T101530123Z".

    Args:
        now: Instant a formater (defaut: maintenant)
    """
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H%M%S") + f"{now.microsecond // 1000:03d}Z"


def aside_path(destination: Path, now: Optional[datetime] = None, counter: int = 0) -> Path:
    """
    Chemin de mise de cote d'une destination existante.

    <nom>_<horodatage><ext>, puis <nom>_<horodatage>_<n><ext> quand ce nom
    est deja pris (plusieurs conflits dans la meme milliseconde).
    """
    suffix = f"_{counter}" if counter else ""
    return destination.with_name(
        f"{destination.stem}_{aside_timestamp(now)}{suffix}{destination.suffix}"
    )


def _truncate_to_ms(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


@dataclass
class MoveOutcome:
    """
    Issue du deplacement d'un fichier.

    Attributs:
        source: Chemin source
        destination: Chemin de destination (apres reparation eventuelle)
        kind: Issue typee (MOVED, SKIPPED, CONFLICT_RESOLVED, IO_ERROR, NOT_FOUND)
        message: Information ou message d'erreur
        renamed_aside: Nouveau nom de la destination existante mise de cote
    """

    source: Path
    destination: Path
    kind: OutcomeKind
    message: Optional[str] = None
    renamed_aside: Optional[Path] = None

    @property
    def success(self) -> bool:
        return not self.kind.is_error


@dataclass
class MoveError:
    """Erreur de deplacement ou d'inspection d'un fichier."""

    file: str
    path: Path
    kind: OutcomeKind
    error: str


@dataclass
class GroupResult:
    """
    Bilan d'un groupe d'orientation.

    Attributs:
        moved_count: Fichiers effectivement deplaces
        skipped_count: Fichiers deja en place
        conflicts_resolved: Destinations existantes mises de cote
        errors: Erreurs par fichier
    """

    moved_count: int = 0
    skipped_count: int = 0
    conflicts_resolved: int = 0
    errors: list[MoveError] = field(default_factory=list)


@dataclass
class RelocationReport:
    """
    Rapport d'un deplacement en lot.

    Attributs:
        success: False si les dossiers canoniques n'ont pu etre crees ou si
            le scan final a echoue
        h: Bilan des fichiers H
        v: Bilan des fichiers V
        probe_errors: Fichiers exclus car la sonde a echoue (tri par ratio)
        h_folder: Dossier canonique H utilise
        v_folder: Dossier canonique V utilise
        snapshot: Vue du projet apres les deplacements
        error: Message d'erreur global
    """

    success: bool
    h: GroupResult = field(default_factory=GroupResult)
    v: GroupResult = field(default_factory=GroupResult)
    probe_errors: list[MoveError] = field(default_factory=list)
    h_folder: Optional[Path] = None
    v_folder: Optional[Path] = None
    snapshot: Optional[ProjectSnapshot] = None
    error: Optional[str] = None

    @property
    def moved_count(self) -> int:
        return self.h.moved_count + self.v.moved_count

    @property
    def errors(self) -> list[MoveError]:
        return [*self.h.errors, *self.v.errors, *self.probe_errors]


class RelocationService:
    """
    Service de deplacement des fichiers classes vers les dossiers H et V.

    Utilisation:
        relocation = RelocationService(file_system, scanner, classifier)
        report = relocation.move_to_canonical_folders(snapshot)
        print(f"{report.moved_count} fichiers deplaces")
        context.snapshot = report.snapshot
    """

    def __init__(
        self,
        file_system: IFileSystemGateway,
        scanner: ScannerService,
        classifier: ClassifierService,
    ) -> None:
        """
        Initialise le service de deplacement.

        Args:
            file_system: Implementation de IFileSystemGateway
            scanner: Service de scan pour le rescan final
            classifier: Classifieur pour reconstruire le snapshot et sonder les ratios
        """
        self._fs = file_system
        self._scanner = scanner
        self._classifier = classifier

    def relocate_file(self, source: Path, destination: Path) -> MoveOutcome:
        """
        Deplace un fichier vers sa destination de maniere sure.

        Etapes:
        1. Source absente -> NOT_FOUND
        2. Reparation d'une destination mal formee
        3. Source deja a destination -> SKIPPED
        4. Creation du repertoire parent
        5. Destination existante identique (taille + date de modification)
           -> SKIPPED, la source est laissee en place
        6. Destination existante differente -> mise de cote horodatee
        7. Copie puis suppression de la source

        Args:
            source: Chemin du fichier a deplacer
            destination: Chemin cible

        Returns:
            MoveOutcome decrivant ce qui a ete fait
        """
        source = Path(source)
        destination = Path(repair_destination_path(os.path.normpath(str(destination))))

        if not self._fs.exists(source):
            return MoveOutcome(
                source, destination, OutcomeKind.NOT_FOUND,
                message=f"Le fichier source n'existe pas: {source}",
            )

        if normalize_path(source) == normalize_path(destination):
            return MoveOutcome(
                source, destination, OutcomeKind.SKIPPED,
                message="Fichier deja a destination",
            )

        created = self._fs.create_directory(destination.parent)
        if not created.success:
            return MoveOutcome(
                source, destination, OutcomeKind.IO_ERROR,
                message=f"Creation du dossier impossible: {created.error}",
            )

        renamed_aside: Optional[Path] = None
        if self._fs.exists(destination):
            source_stat = self._fs.stat(source)
            dest_stat = self._fs.stat(destination)
            if not (source_stat.success and dest_stat.success):
                return MoveOutcome(
                    source, destination, OutcomeKind.IO_ERROR,
                    message=source_stat.error or dest_stat.error,
                )

            src_entry, dst_entry = source_stat.entry, dest_stat.entry
            if src_entry.size == dst_entry.size and _truncate_to_ms(
                src_entry.modified_at
            ) == _truncate_to_ms(dst_entry.modified_at):
                logger.debug(
                    "Fichier identique deja a destination, source conservee",
                    source=str(source),
                    destination=str(destination),
                )
                return MoveOutcome(
                    source, destination, OutcomeKind.SKIPPED,
                    message="Fichier identique deja present a destination",
                )

            renamed_aside = self._free_aside_path(destination)
            renamed = self._fs.rename(destination, renamed_aside)
            if not renamed.success:
                return MoveOutcome(
                    source, destination, OutcomeKind.IO_ERROR,
                    message=f"Mise de cote de la destination impossible: {renamed.error}",
                )
            logger.info(
                "Destination existante mise de cote",
                destination=str(destination),
                renamed_to=renamed_aside.name,
            )

        moved = self._fs.move(source, destination)
        if not moved.success:
            return MoveOutcome(
                source, destination, OutcomeKind.IO_ERROR,
                message=moved.error,
                renamed_aside=renamed_aside,
            )

        kind = OutcomeKind.CONFLICT_RESOLVED if renamed_aside else OutcomeKind.MOVED
        logger.debug("Fichier deplace", source=str(source), destination=str(destination))
        return MoveOutcome(source, destination, kind, renamed_aside=renamed_aside)

    def _free_aside_path(self, destination: Path) -> Path:
        """Premier nom de mise de cote libre: une copie mise de cote n'est jamais ecrasee."""
        now = datetime.now(timezone.utc)
        candidate = aside_path(destination, now)
        counter = 0
        while self._fs.exists(candidate):
            counter += 1
            candidate = aside_path(destination, now, counter)
        return candidate

    def move_to_canonical_folders(
        self,
        snapshot: ProjectSnapshot,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> RelocationReport:
        """
        Deplace tous les fichiers H et V du projet dans leurs dossiers canoniques.

        Les dossiers "H" et "V" existants sont reutilises (premier trouve),
        les manquants sont crees a la racine. Un echec sur un fichier n'arrete
        pas le lot. Le projet est rescanne a la fin.

        Args:
            snapshot: Vue courante du projet
            progress_callback: Appele apres chaque fichier (traites, total, nom)

        Returns:
            RelocationReport avec les bilans H/V et le nouveau snapshot
        """
        report = self._prepare_report(snapshot)
        if not report.success:
            return report

        total = len(snapshot.h_files) + len(snapshot.v_files)
        logger.info(
            "Deplacement vers les dossiers canoniques",
            h_folder=str(report.h_folder),
            v_folder=str(report.v_folder),
            h_files=len(snapshot.h_files),
            v_files=len(snapshot.v_files),
        )

        done = self._relocate_group(
            snapshot.h_files, report.h_folder, report.h, 0, total, progress_callback
        )
        self._relocate_group(
            snapshot.v_files, report.v_folder, report.v, done, total, progress_callback
        )

        return self._finish(snapshot.root_path, report)

    def move_by_aspect_ratio(
        self,
        snapshot: ProjectSnapshot,
        files: Optional[Iterable[FileEntry]] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> RelocationReport:
        """
        Trie des fichiers sans suffixe dans H ou V selon leur ratio d'image.

        Le fichier n'est jamais renomme: l'orientation mesuree decide seulement
        du dossier de destination. Un fichier dont l'inspection echoue est
        exclu et rapporte dans probe_errors.

        Args:
            snapshot: Vue courante du projet
            files: Fichiers a traiter (defaut: tous les fichiers video sans suffixe)
            progress_callback: Appele apres chaque fichier deplace

        Returns:
            RelocationReport avec les bilans H/V, les erreurs de sonde et le nouveau snapshot
        """
        report = self._prepare_report(snapshot)
        if not report.success:
            return report

        if files is None:
            candidates = [f for f in snapshot.files if self._classifier.is_probe_candidate(f)]
        else:
            candidates = list(files)

        logger.info("Tri par ratio d'image", candidates=len(candidates))

        by_orientation: dict[Orientation, list[FileEntry]] = {
            Orientation.H: [],
            Orientation.V: [],
        }
        for classification in self._classifier.classify_many_by_aspect_ratio(candidates):
            if classification.success:
                by_orientation[classification.orientation].append(classification.file)
            else:
                report.probe_errors.append(
                    MoveError(
                        file=classification.file.name,
                        path=classification.file.path,
                        kind=OutcomeKind.PROBE_ERROR,
                        error=classification.error or "Inspection echouee",
                    )
                )

        h_files, v_files = by_orientation[Orientation.H], by_orientation[Orientation.V]
        total = len(h_files) + len(v_files)
        done = self._relocate_group(
            h_files, report.h_folder, report.h, 0, total, progress_callback
        )
        self._relocate_group(
            v_files, report.v_folder, report.v, done, total, progress_callback
        )

        return self._finish(snapshot.root_path, report)

    def _prepare_report(self, snapshot: ProjectSnapshot) -> RelocationReport:
        """Localise ou cree les dossiers canoniques; echec global si la creation echoue."""
        folders: dict[str, Path] = {}
        for name, existing in (
            (H_FOLDER_NAME, snapshot.h_folder),
            (V_FOLDER_NAME, snapshot.v_folder),
        ):
            if existing is not None:
                folders[name] = existing.path
                continue

            path = snapshot.root_path / name
            created = self._fs.create_directory(path)
            if not created.success:
                logger.error("Creation du dossier canonique impossible", folder=str(path))
                return RelocationReport(
                    success=False,
                    error=f"Creation du dossier {name} impossible: {created.error}",
                )
            logger.info("Dossier canonique cree a la racine", folder=str(path))
            folders[name] = path

        return RelocationReport(
            success=True,
            h_folder=folders[H_FOLDER_NAME],
            v_folder=folders[V_FOLDER_NAME],
        )

    def _relocate_group(
        self,
        files: Iterable[FileEntry],
        folder: Path,
        result: GroupResult,
        done: int,
        total: int,
        progress_callback: Optional[ProgressCallback],
    ) -> int:
        """Deplace un groupe de fichiers et remplit son bilan. Retourne le compteur de progression."""
        for file in files:
            outcome = self.relocate_file(file.path, folder / file.name)

            if outcome.kind.moved:
                result.moved_count += 1
                if outcome.kind is OutcomeKind.CONFLICT_RESOLVED:
                    result.conflicts_resolved += 1
            elif outcome.kind is OutcomeKind.SKIPPED:
                result.skipped_count += 1
            else:
                logger.warning(
                    "Deplacement echoue",
                    file=file.name,
                    kind=outcome.kind.value,
                    error=outcome.message,
                )
                result.errors.append(
                    MoveError(
                        file=file.name,
                        path=file.path,
                        kind=outcome.kind,
                        error=outcome.message or "Erreur inconnue",
                    )
                )

            done += 1
            if progress_callback:
                progress_callback(done, total, file.name)
        return done

    def _finish(self, root: Path, report: RelocationReport) -> RelocationReport:
        """Rescanne le projet et attache le nouveau snapshot au rapport."""
        logger.info(
            "Deplacement termine",
            h_moved=report.h.moved_count,
            v_moved=report.v.moved_count,
            errors=len(report.errors),
        )

        scan = self._scanner.scan(root)
        if not scan.success:
            report.success = False
            report.error = f"Rescan du projet impossible: {scan.error}"
            return report

        report.snapshot = self._classifier.snapshot_from_scan(scan)
        return report
