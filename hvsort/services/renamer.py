"""
Service de renommage par lot.

Ce module applique une transformation (motif, remplacement) au nom de chaque
fichier d'une selection et renomme les fichiers sur place, dans leur dossier.

Les operations exposees (remplacer, ajouter a la fin, ajouter au debut,
supprimer) sont des RenameOperation converties en couple (motif, remplacement)
juste avant l'appel a rename_batch.

Limitation connue: deux fichiers d'un meme dossier qui aboutissent au meme
nouveau nom ne sont pas departages, le second ecrase le premier.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger
from pathvalidate import ValidationError, validate_filename

from hvsort.core.entities import FileEntry
from hvsort.core.ports.file_system import IFileSystemGateway
from hvsort.core.value_objects import OutcomeKind, RenameOperation, to_python_replacement


@dataclass
class RenamedFile:
    """Fichier renomme: ancien et nouveau chemin."""

    old_path: Path
    new_path: Path


@dataclass
class RenameError:
    """Echec du renommage d'un fichier."""

    path: Path
    new_name: str
    kind: OutcomeKind
    error: str


@dataclass
class RenamePreview:
    """Apercu du renommage d'un fichier, sans toucher au disque."""

    path: Path
    old_name: str
    new_name: str

    @property
    def changed(self) -> bool:
        return self.old_name != self.new_name


@dataclass
class RenameBatchResult:
    """
    Resultat d'un renommage par lot.

    Attributs:
        success: False uniquement si le lot n'a pas pu demarrer (motif invalide)
        results: Fichiers effectivement renommes (les noms inchanges sont omis)
        errors: Echecs par fichier, le lot ayant continue
        skipped_count: Fichiers dont le nom ne change pas
        error: Message d'erreur global
    """

    success: bool
    results: list[RenamedFile] = field(default_factory=list)
    errors: list[RenameError] = field(default_factory=list)
    skipped_count: int = 0
    error: Optional[str] = None


def compute_new_name(
    name: str,
    regex: re.Pattern,
    replacement: str,
    preserve_extension: bool = False,
) -> str:
    """
    Applique la substitution a un nom de fichier.

    Args:
        name: Nom actuel (sans le dossier)
        regex: Motif compile, applique a toutes les occurrences
        replacement: Remplacement au format re.sub (\\g<1> pour un groupe),
            deja traduit par to_python_replacement
        preserve_extension: Si True, la substitution ne porte que sur le nom
            sans extension, l'extension est remise ensuite

    Returns:
        Nouveau nom
    """
    if preserve_extension:
        path = Path(name)
        stem, extension = path.stem, path.suffix
    else:
        stem, extension = name, ""
    return regex.sub(replacement, stem) + extension


def _is_valid_filename(name: str) -> Optional[str]:
    """Retourne la raison de l'invalidite du nom, ou None s'il est utilisable."""
    try:
        validate_filename(name, platform="auto")
    except ValidationError as e:
        return str(e)
    return None


class RenamerService:
    """
    Service de renommage par lot.

    Chaque fichier est traite independamment: un echec est consigne et le
    lot continue.
    """

    def __init__(self, file_system: IFileSystemGateway) -> None:
        """
        Initialise le service de renommage.

        Args:
            file_system: Implementation de IFileSystemGateway
        """
        self._fs = file_system

    def rename_batch(
        self,
        paths: Iterable[Path],
        pattern: str,
        replacement: str,
        preserve_extension: bool = False,
    ) -> RenameBatchResult:
        """
        Renomme une selection de fichiers par substitution regex.

        Args:
            paths: Fichiers a renommer
            pattern: Expression reguliere appliquee a toutes les occurrences
            replacement: Remplacement, $1 ou \\g<1> pour un groupe
            preserve_extension: Si True, l'extension n'est pas touchee

        Returns:
            RenameBatchResult avec les renommages effectues et les erreurs
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            return RenameBatchResult(success=False, error=f"Motif invalide: {e}")
        replacement = to_python_replacement(replacement, regex)

        result = RenameBatchResult(success=True)
        for path in paths:
            path = Path(path)
            old_name = path.name
            try:
                new_name = compute_new_name(old_name, regex, replacement, preserve_extension)
            except (re.error, IndexError) as e:
                # Reference a un groupe inexistant dans le remplacement
                return RenameBatchResult(success=False, error=f"Remplacement invalide: {e}")

            if new_name == old_name:
                result.skipped_count += 1
                continue

            invalid = _is_valid_filename(new_name)
            if invalid:
                self._record_error(result, path, new_name, OutcomeKind.IO_ERROR, invalid)
                continue

            new_path = path.with_name(new_name)
            renamed = self._fs.rename(path, new_path)
            if not renamed.success:
                kind = OutcomeKind.IO_ERROR if self._fs.exists(path) else OutcomeKind.NOT_FOUND
                self._record_error(result, path, new_name, kind, renamed.error or "")
                continue

            logger.debug("Fichier renomme", old=old_name, new=new_name)
            result.results.append(RenamedFile(old_path=path, new_path=new_path))

        logger.info(
            "Renommage termine",
            renamed=len(result.results),
            skipped=result.skipped_count,
            errors=len(result.errors),
        )
        return result

    def apply(
        self,
        files: Iterable[FileEntry | Path],
        operation: RenameOperation,
        preserve_extension: bool = True,
    ) -> RenameBatchResult:
        """
        Applique une operation de renommage a une selection.

        Args:
            files: Fichiers a renommer
            operation: Replace, Append, Prepend ou Remove
            preserve_extension: Si True, l'extension n'est pas touchee

        Returns:
            RenameBatchResult
        """
        pattern, replacement = operation.to_substitution()
        logger.info("Renommage par lot", operation=operation.kind, pattern=pattern)
        return self.rename_batch(
            [self._path_of(f) for f in files], pattern, replacement, preserve_extension
        )

    def preview(
        self,
        files: Iterable[FileEntry | Path],
        operation: RenameOperation,
        preserve_extension: bool = True,
    ) -> list[RenamePreview]:
        """
        Calcule les nouveaux noms sans renommer.

        Raises:
            re.error: Si le motif de l'operation est invalide
        """
        pattern, replacement = operation.to_substitution()
        regex = re.compile(pattern)
        replacement = to_python_replacement(replacement, regex)
        previews = []
        for f in files:
            path = self._path_of(f)
            previews.append(
                RenamePreview(
                    path=path,
                    old_name=path.name,
                    new_name=compute_new_name(path.name, regex, replacement, preserve_extension),
                )
            )
        return previews

    @staticmethod
    def _path_of(file: FileEntry | Path) -> Path:
        return file.path if isinstance(file, FileEntry) else Path(file)

    @staticmethod
    def _record_error(
        result: RenameBatchResult,
        path: Path,
        new_name: str,
        kind: OutcomeKind,
        error: str,
    ) -> None:
        logger.warning("Renommage echoue", file=path.name, new_name=new_name, error=error)
        result.errors.append(RenameError(path=path, new_name=new_name, kind=kind, error=error))
