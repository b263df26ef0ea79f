"""Commandes CLI projet : scan, organize, autosort, probe, create."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from hvsort.adapters.cli.display import (
    display_geometry,
    display_relocation_report,
    display_snapshot,
)
from hvsort.adapters.cli.helpers import (
    console,
    open_project_or_exit,
    rich_progress,
    suppress_loguru,
)
from hvsort.container import Container


def scan(
    root: Annotated[Path, typer.Argument(help="Repertoire du projet")],
    details: Annotated[
        bool, typer.Option("--details", "-d", help="Afficher l'arbre des orphelins")
    ] = False,
) -> None:
    """Scanne un projet et affiche ses groupes H/V et ses orphelins."""
    container = Container()
    context = open_project_or_exit(container.project_service(), root)
    display_snapshot(context.snapshot, show_files=details)


def organize(
    root: Annotated[Path, typer.Argument(help="Repertoire du projet")],
) -> None:
    """Deplace les fichiers H et V dans les dossiers canoniques H et V."""
    container = Container()
    projects = container.project_service()
    context = open_project_or_exit(projects, root)

    with suppress_loguru(), rich_progress("Deplacement") as on_progress:
        report = projects.move_to_canonical_folders(context, on_progress)

    if report.h_folder is None:
        console.print(f"[red]Erreur: {report.error}[/red]")
        raise typer.Exit(1)

    display_relocation_report(report, root)
    if report.snapshot is not None:
        display_snapshot(report.snapshot)
    if not report.success:
        console.print(f"[red]Erreur: {report.error}[/red]")
        raise typer.Exit(1)


def autosort(
    root: Annotated[Path, typer.Argument(help="Repertoire du projet")],
    files: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Fichiers a trier (defaut: toutes les videos sans suffixe)"),
    ] = None,
) -> None:
    """Trie les videos sans suffixe dans H ou V selon leur ratio d'image."""
    container = Container()
    projects = container.project_service()
    context = open_project_or_exit(projects, root)

    selection = None
    if files:
        wanted = {p.resolve() for p in files}
        selection = [f for f in context.snapshot.files if f.path.resolve() in wanted]
        missing = wanted - {f.path.resolve() for f in selection}
        for path in sorted(missing):
            console.print(f"[yellow]Ignore (hors projet): {path}[/yellow]")

    with suppress_loguru(), rich_progress("Tri par ratio") as on_progress:
        report = projects.move_by_aspect_ratio(context, selection, on_progress)

    if report.h_folder is None:
        console.print(f"[red]Erreur: {report.error}[/red]")
        raise typer.Exit(1)

    display_relocation_report(report, root)
    if not report.success:
        console.print(f"[red]Erreur: {report.error}[/red]")
        raise typer.Exit(1)


def probe(
    file: Annotated[Path, typer.Argument(help="Fichier video a inspecter")],
) -> None:
    """Affiche les dimensions, le ratio et l'orientation d'une video."""
    container = Container()
    result = container.aspect_ratio_probe().probe(file)
    if not result.success:
        console.print(f"[red]Erreur: {result.error}[/red]")
        raise typer.Exit(1)
    display_geometry(file, result.geometry)


def create(
    parent: Annotated[Path, typer.Argument(help="Dossier parent")],
    name: Annotated[str, typer.Argument(help="Nom du projet")],
) -> None:
    """Cree un projet avec ses dossiers H et V."""
    container = Container()
    created = container.project_service().create_project(parent, name)
    if not created.success:
        console.print(f"[red]Erreur: {created.error}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Projet cree:[/green] {created.context.root_path}")

