"""
Interface port pour le système de fichiers.

Interface abstraite (port) définissant les opérations fichiers dont le domaine
a besoin : listage, création de dossier, déplacement, renommage, métadonnées.
Chaque opération retourne un résultat succès/erreur au lieu de lever une exception.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hvsort.core.entities import DirectoryEntry


@dataclass
class OperationResult:
    """
    Résultat d'une opération fichier simple.

    Attributs :
        success : True si l'opération a réussi
        message : Information complémentaire (ex: "déjà à destination")
        error : Message d'erreur (si échec)
    """

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ListResult:
    """
    Résultat du listage d'un répertoire.

    Attributs :
        success : True si le listage a réussi
        entries : Entrées du répertoire, triées par nom
        error : Message d'erreur (si échec)
    """

    success: bool
    entries: tuple[DirectoryEntry, ...] = ()
    error: Optional[str] = None


@dataclass
class StatResult:
    """
    Résultat de la lecture des métadonnées d'un chemin.

    Attributs :
        success : True si la lecture a réussi
        entry : Métadonnées du chemin
        error : Message d'erreur (si échec)
    """

    success: bool
    entry: Optional[DirectoryEntry] = None
    error: Optional[str] = None


class IFileSystemGateway(ABC):
    """
    Interface pour les opérations sur le système de fichiers.

    Les implémentations ne laissent jamais remonter d'OSError : toute erreur
    est convertie en résultat avec success=False.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def list_directory(self, path: Path) -> ListResult:
        """
        Liste le contenu direct d'un répertoire.

        Args :
            path : Répertoire à lister

        Retourne :
            ListResult avec les entrées triées par nom
        """
        ...

    @abstractmethod
    def create_directory(self, path: Path) -> OperationResult:
        """
        Crée un répertoire et ses parents.

        Idempotent : pas d'erreur si le répertoire existe déjà.
        """
        ...

    @abstractmethod
    def move(self, source: Path, destination: Path) -> OperationResult:
        """
        Déplace un fichier par copie puis suppression de la source.

        Jamais un renommage atomique, pour supporter les volumes différents.
        Si la suppression de la source échoue après la copie, le résultat est
        en échec mais la copie est conservée.

        Args :
            source : Chemin actuel du fichier
            destination : Chemin cible du fichier
        """
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> OperationResult:
        """Renomme un fichier sur place."""
        ...

    @abstractmethod
    def stat(self, path: Path) -> StatResult:
        """Lit taille et dates d'un chemin."""
        ...
