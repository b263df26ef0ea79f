"""
Journalisation de hvsort via loguru.

Deux destinations :
- stderr : une ligne par evenement, suivie des chemins concernes
  (fichier, source, destination, projet) quand l'evenement en porte
- fichier : un objet JSON par evenement, limite aux messages de hvsort,
  avec rotation et archives compressees
"""

import sys
from pathlib import Path

from loguru import logger

# Champs contextuels affiches en fin de ligne console, dans cet ordre
CONSOLE_CONTEXT_FIELDS = ("file", "source", "destination", "renamed_to", "root")

CONSOLE_PREFIX = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<level>{message}</level>"
)


def _console_format(record: dict) -> str:
    """
    Gabarit console d'un evenement.

    Les valeurs ne sont pas inserees directement: le gabarit reference
    record["extra"], loguru se charge de la substitution.
    """
    extra = record["extra"]
    context = "".join(
        f" <dim>{key}=</dim><cyan>{{extra[{key}]}}</cyan>"
        for key in CONSOLE_CONTEXT_FIELDS
        if key in extra
    )
    return CONSOLE_PREFIX + context + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/hvsort.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """
    Installe les handlers console et fichier.

    Le fichier recoit tout a partir de DEBUG, y compris chaque deplacement,
    quel que soit le niveau choisi pour la console.

    Args:
        log_level: Niveau minimum sur stderr (voir verbosity_to_level)
        log_file: Fichier JSON, son dossier est cree au besoin
        rotation_size: Taille declenchant la rotation (ex: "10 MB")
        retention_count: Nombre d'archives conservees
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        filter="hvsort",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Journalisation prete", log_file=str(log_file), rotation=rotation_size)


def verbosity_to_level(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """
    Traduit les options -v/-q de la CLI en niveau de log console.

    Args:
        verbose: Nombre de -v (0, 1, 2...)
        quiet: True si --quiet
        default: Niveau si aucune option n'est donnee
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default
