"""
Affichage Rich des snapshots et rapports.

Responsabilites:
- Resume d'un projet (groupes H/V, orphelins, dossiers canoniques)
- Bilan d'un deplacement en lot
- Resultat et apercu d'un renommage par lot
"""

from pathlib import Path
from typing import Iterable

from rich.table import Table
from rich.tree import Tree

from hvsort.adapters.cli.helpers import console
from hvsort.core.entities import FileEntry, ProjectSnapshot
from hvsort.core.value_objects import VideoGeometry
from hvsort.services.relocation import GroupResult, RelocationReport
from hvsort.services.renamer import RenameBatchResult, RenamePreview


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def display_snapshot(snapshot: ProjectSnapshot, show_files: bool = False) -> None:
    """
    Affiche le resume d'un projet.

    Args:
        snapshot: Vue classee du projet
        show_files: Si True, affiche aussi l'arbre des orphelins
    """
    table = Table(title=f"Projet {snapshot.root_path.name}", show_header=True)
    table.add_column("Categorie", style="cyan")
    table.add_column("Nombre", justify="right")
    table.add_column("Details", style="dim")

    table.add_row(
        "Dossier H",
        "1" if snapshot.h_folder else "0",
        str(snapshot.h_folder.relative_path) if snapshot.h_folder else "absent",
    )
    table.add_row(
        "Dossier V",
        "1" if snapshot.v_folder else "0",
        str(snapshot.v_folder.relative_path) if snapshot.v_folder else "absent",
    )
    table.add_row("Fichiers", str(len(snapshot.files)), f"{len(snapshot.folders)} dossiers")
    table.add_row("Fichiers H", str(len(snapshot.h_files)), f"{snapshot.paired_count} apparies")
    table.add_row("Fichiers V", str(len(snapshot.v_files)), "")
    table.add_row("Sans suffixe", str(len(snapshot.regular_files)), "")
    table.add_row(
        "[yellow]Orphelins H[/yellow]",
        str(len(snapshot.orphaned_h)),
        ", ".join(f.name for f in snapshot.orphaned_h[:3]),
    )
    table.add_row(
        "[yellow]Orphelins V[/yellow]",
        str(len(snapshot.orphaned_v)),
        ", ".join(f.name for f in snapshot.orphaned_v[:3]),
    )
    console.print(table)

    if show_files and (snapshot.orphaned_h or snapshot.orphaned_v):
        display_orphans_tree(snapshot)


def display_orphans_tree(snapshot: ProjectSnapshot) -> None:
    """Arbre des fichiers orphelins par groupe."""
    tree = Tree("[bold yellow]Fichiers sans contrepartie[/bold yellow]")
    for label, files in (("H sans V", snapshot.orphaned_h), ("V sans H", snapshot.orphaned_v)):
        if not files:
            continue
        branch = tree.add(f"[cyan]{label}[/cyan] ({len(files)})")
        for file in files:
            branch.add(str(file.relative_path))
    console.print(tree)


def _group_row(table: Table, label: str, group: GroupResult) -> None:
    table.add_row(
        label,
        str(group.moved_count),
        str(group.skipped_count),
        str(group.conflicts_resolved),
        f"[red]{len(group.errors)}[/red]" if group.errors else "0",
    )


def display_relocation_report(report: RelocationReport, root: Path) -> None:
    """
    Affiche le bilan d'un deplacement en lot.

    Args:
        report: Rapport du deplacement
        root: Racine du projet pour les chemins relatifs
    """
    table = Table(title="Deplacement vers les dossiers H et V", show_header=True)
    table.add_column("Groupe", style="cyan")
    table.add_column("Deplaces", justify="right", style="green")
    table.add_column("Deja en place", justify="right")
    table.add_column("Conflits resolus", justify="right")
    table.add_column("Erreurs", justify="right")
    _group_row(table, "H", report.h)
    _group_row(table, "V", report.v)
    console.print(table)

    errors = report.errors
    if errors:
        tree = Tree(f"[bold red]Erreurs ({len(errors)})[/bold red]")
        for error in errors:
            tree.add(
                f"{_relative(error.path, root)} [dim]({error.kind.value})[/dim]: {error.error}"
            )
        console.print(tree)


def display_rename_result(result: RenameBatchResult) -> None:
    """Affiche les renommages effectues et les erreurs."""
    if result.results:
        table = Table(title=f"{len(result.results)} fichier(s) renomme(s)", show_header=True)
        table.add_column("Ancien nom", style="dim")
        table.add_column("Nouveau nom", style="green")
        for renamed in result.results:
            table.add_row(renamed.old_path.name, renamed.new_path.name)
        console.print(table)
    else:
        console.print("[dim]Aucun fichier a renommer[/dim]")

    for error in result.errors:
        console.print(f"[red]Echec[/red] {error.path.name} -> {error.new_name}: {error.error}")


def display_previews(previews: Iterable[RenamePreview]) -> None:
    """Affiche un apercu de renommage (mode --dry-run)."""
    table = Table(title="Apercu du renommage", show_header=True)
    table.add_column("Ancien nom", style="dim")
    table.add_column("Nouveau nom")
    for preview in previews:
        style = "green" if preview.changed else "dim"
        table.add_row(preview.old_name, f"[{style}]{preview.new_name}[/{style}]")
    console.print(table)


def display_geometry(file: FileEntry | Path, geometry: VideoGeometry) -> None:
    """Affiche le resultat d'une inspection."""
    name = file.name
    console.print(
        f"[bold]{name}[/bold]: {geometry.width}x{geometry.height} "
        f"ratio [cyan]{geometry.aspect_ratio}[/cyan] "
        f"orientation [green]{geometry.orientation.value}[/green]"
    )
