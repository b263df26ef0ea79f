"""
Commandes CLI de renommage par lot : replace, append, prepend, remove.

Les motifs suivent la syntaxe des expressions regulieres Python et ignorent
la casse sauf avec --case-sensitive. Les remplacements designent les groupes
par $1 ou \\g<1>.
"""

import re
from pathlib import Path
from typing import Annotated, Optional

import typer

from hvsort.adapters.cli.display import (
    display_previews,
    display_rename_result,
    display_snapshot,
)
from hvsort.adapters.cli.helpers import console, open_project_or_exit
from hvsort.container import Container
from hvsort.core.value_objects import (
    Append,
    Prepend,
    Remove,
    RenameOperation,
    Replace,
    literal,
)

rename_app = typer.Typer(
    name="rename",
    help="Renommage par lot d'une selection de fichiers",
)

FilesArgument = Annotated[list[Path], typer.Argument(help="Fichiers a renommer")]
KeepExtensionOption = Annotated[
    Optional[bool],
    typer.Option(
        "--keep-extension/--no-keep-extension",
        help="Ne pas toucher a l'extension (defaut: configuration)",
    ),
]
DryRunOption = Annotated[
    bool, typer.Option("--dry-run", help="Afficher l'apercu sans renommer")
]
RootOption = Annotated[
    Optional[Path],
    typer.Option("--root", help="Projet a rescanner apres le renommage"),
]
CaseSensitiveOption = Annotated[
    bool,
    typer.Option(
        "--case-sensitive", "-c", help="Respecter la casse (ignoree par defaut)"
    ),
]
LiteralOption = Annotated[
    bool, typer.Option("--literal", "-F", help="Motif pris comme texte brut")
]


def _run_rename(
    operation: RenameOperation,
    files: list[Path],
    keep_extension: Optional[bool],
    dry_run: bool,
    root: Optional[Path],
) -> None:
    """Execute (ou previsualise) une operation de renommage."""
    container = Container()
    if keep_extension is None:
        keep_extension = container.config().rename_keep_extension

    missing = [f for f in files if not f.is_file()]
    for path in missing:
        console.print(f"[yellow]Ignore (fichier introuvable): {path}[/yellow]")
    files = [f for f in files if f.is_file()]

    if dry_run:
        try:
            previews = container.renamer_service().preview(files, operation, keep_extension)
        except re.error as e:
            console.print(f"[red]Erreur: Motif invalide: {e}[/red]")
            raise typer.Exit(1)
        display_previews(previews)
        return

    if root is not None:
        projects = container.project_service()
        context = open_project_or_exit(projects, root)
        result = projects.rename(context, files, operation, keep_extension)
    else:
        context = None
        result = container.renamer_service().apply(files, operation, keep_extension)

    if not result.success:
        console.print(f"[red]Erreur: {result.error}[/red]")
        raise typer.Exit(1)

    display_rename_result(result)
    if context is not None and context.snapshot is not None:
        display_snapshot(context.snapshot)
    if result.errors:
        raise typer.Exit(1)


def _build(factory, *args, **kwargs) -> RenameOperation:
    """Construit l'operation, ou quitte en erreur si elle est invalide."""
    try:
        return factory(*args, **kwargs)
    except ValueError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)


@rename_app.command("replace")
def rename_replace(
    pattern: Annotated[str, typer.Argument(help="Motif a rechercher")],
    replacement: Annotated[str, typer.Argument(help="Texte de remplacement")],
    files: FilesArgument,
    case_sensitive: CaseSensitiveOption = False,
    is_literal: LiteralOption = False,
    keep_extension: KeepExtensionOption = None,
    dry_run: DryRunOption = False,
    root: RootOption = None,
) -> None:
    """Remplace chaque occurrence du motif dans le nom."""
    operation = _build(
        Replace,
        literal(pattern) if is_literal else pattern,
        replacement,
        case_sensitive=case_sensitive,
    )
    _run_rename(operation, files, keep_extension, dry_run, root)


@rename_app.command("append")
def rename_append(
    text: Annotated[str, typer.Argument(help="Texte a ajouter a la fin du nom")],
    files: FilesArgument,
    keep_extension: KeepExtensionOption = None,
    dry_run: DryRunOption = False,
    root: RootOption = None,
) -> None:
    """Ajoute un texte a la fin du nom."""
    _run_rename(_build(Append, text), files, keep_extension, dry_run, root)


@rename_app.command("prepend")
def rename_prepend(
    text: Annotated[str, typer.Argument(help="Texte a ajouter au debut du nom")],
    files: FilesArgument,
    keep_extension: KeepExtensionOption = None,
    dry_run: DryRunOption = False,
    root: RootOption = None,
) -> None:
    """Ajoute un texte au debut du nom."""
    _run_rename(_build(Prepend, text), files, keep_extension, dry_run, root)


@rename_app.command("remove")
def rename_remove(
    pattern: Annotated[str, typer.Argument(help="Motif a supprimer")],
    files: FilesArgument,
    case_sensitive: CaseSensitiveOption = False,
    is_literal: LiteralOption = False,
    keep_extension: KeepExtensionOption = None,
    dry_run: DryRunOption = False,
    root: RootOption = None,
) -> None:
    """Supprime chaque occurrence du motif dans le nom."""
    operation = _build(
        Remove,
        literal(pattern) if is_literal else pattern,
        case_sensitive=case_sensitive,
    )
    _run_rename(operation, files, keep_extension, dry_run, root)
