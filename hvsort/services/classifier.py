"""
Service de classification des fichiers par orientation.

Ce module classe les fichiers scannes en groupes H / V / aucun selon la
convention de nommage, calcule les cles d'appariement et en deduit les
fichiers orphelins. Il sait aussi classer un fichier sans suffixe en
mesurant son ratio d'image.

Convention: le suffixe litteral " - H" ou " - V" precede immediatement
l'extension, ex: "Scene01 - H.mp4" s'apparie avec "Scene01 - V.mov".
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from hvsort.core.entities import FileEntry, FolderEntry, ProjectSnapshot
from hvsort.core.ports.probe import IAspectRatioProbe
from hvsort.core.value_objects import Orientation, OutcomeKind, VideoGeometry
from hvsort.services.scanner import ScanResult

# Suffixe d'orientation en fin de nom, extension optionnelle
ORIENTATION_SUFFIX = re.compile(r" - (?P<orientation>[HV])(?P<extension>\.\w+)?$")

# Noms exacts des dossiers canoniques (sensibles a la casse)
H_FOLDER_NAME = "H"
V_FOLDER_NAME = "V"


def _name_of(file: FileEntry | str) -> str:
    return file if isinstance(file, str) else file.name


def classify(file: FileEntry | str) -> Orientation:
    """
    Retourne l'orientation d'un fichier d'apres son nom.

    Args:
        file: FileEntry ou nom de fichier

    Returns:
        Orientation.H pour " - H" avant l'extension, V pour " - V", sinon NONE
    """
    match = ORIENTATION_SUFFIX.search(_name_of(file))
    if match is None:
        return Orientation.NONE
    return Orientation(match.group("orientation"))


def pair_key(file: FileEntry | str) -> str:
    """
    Calcule la cle d'appariement d'un fichier.

    Retire le suffixe " - H" / " - V" et l'extension qui le suit, quelle
    qu'elle soit: "A - H.mp4" et "A - V.mov" donnent tous deux "A".
    Un nom sans suffixe est retourne tel quel.
    """
    return ORIENTATION_SUFFIX.sub("", _name_of(file))


def find_folder(folders: Iterable[FolderEntry], name: str) -> Optional[FolderEntry]:
    """Premier dossier portant exactement ce nom, dans l'ordre de parcours."""
    return next((folder for folder in folders if folder.name == name), None)


def find_orphans(
    group: Iterable[FileEntry], counterparts: Iterable[FileEntry]
) -> tuple[FileEntry, ...]:
    """
    Fichiers du groupe sans contrepartie de meme cle dans l'autre groupe.

    Indexe les cles de l'autre groupe dans un ensemble: O(H+V).
    """
    counterpart_keys = {pair_key(f) for f in counterparts}
    return tuple(f for f in group if pair_key(f) not in counterpart_keys)


@dataclass
class AspectClassification:
    """
    Resultat de la classification d'un fichier par son ratio d'image.

    Attributs:
        file: Fichier sonde
        orientation: H ou V si la sonde a reussi
        geometry: Dimensions mesurees
        error: Message d'erreur (si la sonde a echoue)
    """

    file: FileEntry
    orientation: Optional[Orientation] = None
    geometry: Optional[VideoGeometry] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.orientation is not None

    @property
    def kind(self) -> Optional[OutcomeKind]:
        """PROBE_ERROR si la sonde a echoue, None sinon."""
        return None if self.success else OutcomeKind.PROBE_ERROR


class ClassifierService:
    """
    Service de classification des fichiers du projet.

    Combine la classification par nom (pure, sans E/S) et la classification
    par ratio d'image (deleguee a IAspectRatioProbe).
    """

    def __init__(self, probe: IAspectRatioProbe) -> None:
        """
        Initialise le classifieur.

        Args:
            probe: Sonde de ratio d'image pour les fichiers sans suffixe
        """
        self._probe = probe

    def classify(self, file: FileEntry | str) -> Orientation:
        """Orientation d'un fichier d'apres son nom."""
        return classify(file)

    def pair_key(self, file: FileEntry | str) -> str:
        """Cle d'appariement d'un fichier."""
        return pair_key(file)

    def build_snapshot(
        self,
        root_path: Path,
        files: Iterable[FileEntry],
        folders: Iterable[FolderEntry],
    ) -> ProjectSnapshot:
        """
        Construit la vue classee complete du projet.

        Args:
            root_path: Racine du projet
            files: Fichiers scannes
            folders: Dossiers scannes

        Returns:
            ProjectSnapshot neuf, coherent par construction
        """
        files = tuple(files)
        folders = tuple(folders)

        h_files: list[FileEntry] = []
        v_files: list[FileEntry] = []
        for file in files:
            orientation = classify(file)
            if orientation is Orientation.H:
                h_files.append(file)
            elif orientation is Orientation.V:
                v_files.append(file)

        snapshot = ProjectSnapshot(
            root_path=Path(root_path),
            files=files,
            folders=folders,
            h_folder=find_folder(folders, H_FOLDER_NAME),
            v_folder=find_folder(folders, V_FOLDER_NAME),
            h_files=tuple(h_files),
            v_files=tuple(v_files),
            orphaned_h=find_orphans(h_files, v_files),
            orphaned_v=find_orphans(v_files, h_files),
        )

        logger.debug(
            "Classification terminee",
            h=len(snapshot.h_files),
            v=len(snapshot.v_files),
            orphaned_h=len(snapshot.orphaned_h),
            orphaned_v=len(snapshot.orphaned_v),
        )
        return snapshot

    def snapshot_from_scan(self, scan: ScanResult) -> ProjectSnapshot:
        """
        Construit la vue classee depuis un scan reussi.

        Raises:
            ValueError: Si le scan a echoue (un snapshot partiel n'existe pas)
        """
        if not scan.success:
            raise ValueError(f"Scan en echec, aucun snapshot possible: {scan.error}")
        return self.build_snapshot(scan.root_path, scan.files, scan.folders)

    def is_probe_candidate(self, file: FileEntry) -> bool:
        """Vrai pour un fichier video sans suffixe d'orientation."""
        return classify(file) is Orientation.NONE and self._probe.is_video_file(file.name)

    def classify_by_aspect_ratio(self, file: FileEntry) -> AspectClassification:
        """
        Classe un fichier d'apres le ratio d'image mesure.

        L'orientation obtenue decide seulement du dossier de destination,
        le fichier n'est jamais renomme. Un echec de la sonde n'est rapporte
        que pour ce fichier.
        """
        result = self._probe.probe(file.path)
        if not result.success or result.geometry is None:
            logger.warning(
                "Inspection impossible, fichier exclu",
                file=file.name,
                error=result.error,
            )
            return AspectClassification(file=file, error=result.error)

        logger.debug(
            "Ratio mesure",
            file=file.name,
            geometry=result.geometry.label,
            orientation=result.geometry.orientation.value,
        )
        return AspectClassification(
            file=file,
            orientation=result.geometry.orientation,
            geometry=result.geometry,
        )

    def classify_many_by_aspect_ratio(
        self, files: Iterable[FileEntry]
    ) -> list[AspectClassification]:
        """Classe chaque fichier par son ratio, sans s'arreter sur un echec."""
        return [self.classify_by_aspect_ratio(file) for file in files]
