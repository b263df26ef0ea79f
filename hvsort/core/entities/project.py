"""
Entités du projet.

Représentent les entrées du répertoire de projet (fichiers et dossiers),
la vue classée produite après chaque scan (ProjectSnapshot) et le contexte
explicite transmis à chaque opération (ProjectContext).
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Élément retourné par le listage d'un répertoire.

    Attributs :
        name : Nom de l'entrée (sans le chemin)
        path : Chemin absolu
        is_directory : True pour un dossier
        size : Taille en octets
        created_at : Date de création (birthtime si disponible, sinon ctime)
        modified_at : Date de dernière modification
    """

    name: str
    path: Path
    is_directory: bool
    size: int = 0
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


@dataclass(frozen=True)
class FileEntry:
    """
    Fichier du projet avec son chemin relatif à la racine.

    Attributs :
        name : Nom du fichier
        path : Chemin absolu
        relative_path : Chemin relatif à la racine du projet
        is_directory : Toujours False pour un fichier scanné
        size : Taille en octets
        created_at : Date de création
        modified_at : Date de dernière modification
    """

    name: str
    path: Path
    relative_path: Path
    is_directory: bool = False
    size: int = 0
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @property
    def stem(self) -> str:
        """Nom sans l'extension."""
        return Path(self.name).stem

    @property
    def extension(self) -> str:
        """Extension avec le point (ex: ".mp4"), vide si absente."""
        return Path(self.name).suffix


@dataclass(frozen=True)
class FolderEntry:
    """
    Dossier du projet.

    Attributs :
        name : Nom du dossier
        path : Chemin absolu
        relative_path : Chemin relatif à la racine du projet
    """

    name: str
    path: Path
    relative_path: Path


@dataclass(frozen=True)
class ProjectSnapshot:
    """
    Vue complète et immutable du projet après un scan.

    Reconstruite intégralement à chaque scan, jamais modifiée en place :
    elle est toujours cohérente en interne.

    Attributs :
        root_path : Racine du projet
        files : Tous les fichiers (ordre de parcours)
        folders : Tous les dossiers (ordre de parcours)
        h_folder : Premier dossier nommé exactement "H", s'il existe
        v_folder : Premier dossier nommé exactement "V", s'il existe
        h_files : Fichiers portant le suffixe " - H"
        v_files : Fichiers portant le suffixe " - V"
        orphaned_h : Fichiers H sans contrepartie V (même clé d'appariement)
        orphaned_v : Fichiers V sans contrepartie H
    """

    root_path: Path
    files: tuple[FileEntry, ...] = ()
    folders: tuple[FolderEntry, ...] = ()
    h_folder: Optional[FolderEntry] = None
    v_folder: Optional[FolderEntry] = None
    h_files: tuple[FileEntry, ...] = ()
    v_files: tuple[FileEntry, ...] = ()
    orphaned_h: tuple[FileEntry, ...] = ()
    orphaned_v: tuple[FileEntry, ...] = ()

    @property
    def regular_files(self) -> tuple[FileEntry, ...]:
        """Fichiers sans suffixe d'orientation."""
        classified = {f.path for f in self.h_files} | {f.path for f in self.v_files}
        return tuple(f for f in self.files if f.path not in classified)

    @property
    def paired_count(self) -> int:
        """Nombre de fichiers H ayant une contrepartie V."""
        return len(self.h_files) - len(self.orphaned_h)


@dataclass
class ProjectContext:
    """
    Contexte explicite d'un projet ouvert.

    Possédé par l'appelant (CLI, interface) et transmis à chaque opération.
    Le snapshot est remplacé en bloc après chaque mutation du disque.

    Attributs :
        root_path : Racine du projet
        snapshot : Dernière vue classée du projet
        opened_at : Date d'ouverture du projet
    """

    root_path: Path
    snapshot: Optional[ProjectSnapshot] = None
    opened_at: datetime = field(default_factory=datetime.now)

    @property
    def name(self) -> str:
        """Nom du projet (nom du dossier racine)."""
        return self.root_path.name
