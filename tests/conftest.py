"""
Fixtures pytest partagees pour les tests hvsort.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystemGateway, IAspectRatioProbe)
- Fabriques d'entrees (FileEntry, FolderEntry) et d'arborescences de projet
- Settings de test avec chemins temporaires
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from hvsort.config import Settings
from hvsort.core.entities import FileEntry, FolderEntry
from hvsort.core.ports.file_system import IFileSystemGateway, OperationResult
from hvsort.core.ports.probe import IAspectRatioProbe, ProbeResult


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystemGateway pour les tests.

    Toutes les operations reussissent par defaut.
    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystemGateway)
    mock.exists.return_value = True
    mock.create_directory.return_value = OperationResult(success=True)
    mock.move.return_value = OperationResult(success=True)
    mock.rename.return_value = OperationResult(success=True)
    return mock


@pytest.fixture
def mock_probe() -> MagicMock:
    """
    Mock de IAspectRatioProbe pour les tests.

    Echoue par defaut (pas de flux video), reconnait les extensions .mp4/.mov/.mkv.
    """
    mock = MagicMock(spec=IAspectRatioProbe)
    mock.probe.return_value = ProbeResult(success=False, error="Aucun flux video trouve")
    mock.is_video_file.side_effect = lambda name: Path(name).suffix.lower() in {
        ".mp4", ".mov", ".mkv",
    }
    return mock


@pytest.fixture
def make_file() -> Callable[..., FileEntry]:
    """Fabrique de FileEntry sous une racine fictive /project."""

    def factory(relative: str, root: Path = Path("/project"), size: int = 1024) -> FileEntry:
        relative_path = Path(relative)
        return FileEntry(
            name=relative_path.name,
            path=root / relative_path,
            relative_path=relative_path,
            size=size,
            created_at=datetime(2026, 1, 1, 12, 0, 0),
            modified_at=datetime(2026, 1, 1, 12, 0, 0),
        )

    return factory


@pytest.fixture
def make_folder() -> Callable[..., FolderEntry]:
    """Fabrique de FolderEntry sous une racine fictive /project."""

    def factory(relative: str, root: Path = Path("/project")) -> FolderEntry:
        relative_path = Path(relative)
        return FolderEntry(
            name=relative_path.name,
            path=root / relative_path,
            relative_path=relative_path,
        )

    return factory


@pytest.fixture
def project_tree(tmp_path: Path) -> Callable[..., Path]:
    """
    Cree une arborescence de projet reelle sous tmp_path.

    Usage:
        root = project_tree({"A - H.mp4": b"aaa", "sub/B - V.mov": b"bb"})
    """

    def factory(files: dict[str, bytes], name: str = "project", mtime: Optional[float] = None) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            if relative.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
            if mtime is not None:
                os.utime(path, (mtime, mtime))
        return root

    return factory


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles du fichier .env et de l'environnement."""
    return Settings(
        _env_file=None,
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def make_video_track() -> Callable[..., MagicMock]:
    """Fabrique de pistes video pymediainfo avec tous les attributs lus par la sonde."""

    def factory(
        width: Optional[int] = 1920,
        height: Optional[int] = 1080,
        display_aspect_ratio: Optional[str] = None,
        rotation: Optional[str] = None,
    ) -> MagicMock:
        track = MagicMock()
        track.track_type = "Video"
        track.width = width
        track.height = height
        track.other_display_aspect_ratio = (
            [display_aspect_ratio] if display_aspect_ratio else None
        )
        track.rotation = rotation
        return track

    return factory


@pytest.fixture
def general_track() -> MagicMock:
    """Mock d'une piste generale pymediainfo."""
    track = MagicMock()
    track.track_type = "General"
    return track
