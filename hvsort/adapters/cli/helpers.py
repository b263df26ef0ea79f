"""
Utilitaires partages pour les commandes CLI de hvsort.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- open_project_or_exit : ouverture d'un projet avec sortie en erreur
- rich_progress : barre de progression Rich pour les traitements par lot
"""

from contextlib import contextmanager
from pathlib import Path

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from hvsort.core.entities import ProjectContext
from hvsort.services.project import ProjectService

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("hvsort")
    try:
        yield
    finally:
        loguru_logger.enable("hvsort")


def open_project_or_exit(projects: ProjectService, root: Path) -> ProjectContext:
    """
    Ouvre un projet ou quitte la commande en erreur.

    Args:
        projects: Service d'orchestration
        root: Racine du projet

    Returns:
        Contexte du projet avec son snapshot
    """
    if not root.is_dir():
        console.print(f"[red]Erreur: Repertoire introuvable: {root}[/red]")
        raise typer.Exit(1)

    opened = projects.open_project(root)
    if not opened.success:
        console.print(f"[red]Erreur: Scan impossible: {opened.error}[/red]")
        raise typer.Exit(1)
    return opened.context


@contextmanager
def rich_progress(description: str):
    """
    Barre de progression Rich, fournit un callback (traites, total, nom).

    Usage:
        with rich_progress("Deplacement") as on_progress:
            service.move_to_canonical_folders(snapshot, on_progress)
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task(description, total=None)

        def on_progress(done: int, total: int, name: str) -> None:
            progress.update(
                task_id,
                completed=done,
                total=total,
                description=f"{description}: {name}",
            )

        yield on_progress
