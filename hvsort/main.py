"""
Point d'entrée CLI de hvsort.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    autosort,
    create,
    organize,
    probe,
    rename_app,
    scan,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, verbosity_to_level

app = typer.Typer(
    name="hvsort",
    help="Tri des rushes video en dossiers horizontal (H) et vertical (V)",
)
container = Container()


def _configure_from_settings(settings: Settings, level: str) -> None:
    configure_logging(
        log_level=level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """hvsort - Classement H/V des fichiers video d'un projet."""
    if verbose or quiet:
        settings = get_config()
        _configure_from_settings(
            settings, verbosity_to_level(verbose, quiet, settings.log_level)
        )


# Commandes projet
app.command()(scan)
app.command()(organize)
app.command()(autosort)
app.command()(probe)
app.command()(create)

# Monter rename_app comme sous-commande
app.add_typer(rename_app, name="rename")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration hvsort")
    typer.echo(f"Extensions video : {', '.join(config.video_extensions)}")
    typer.echo(f"Rotation prise en compte : {'oui' if config.honor_rotation else 'non'}")
    typer.echo(
        f"Renommage, extension conservee : {'oui' if config.rename_keep_extension else 'non'}"
    )
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"hvsort v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    _configure_from_settings(settings, settings.log_level)

    logger.info("Démarrage de hvsort", version=__version__)

    app()


if __name__ == "__main__":
    main()
