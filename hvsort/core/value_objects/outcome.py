"""
Taxonomie des issues d'une operation fichier.

Chaque deplacement, renommage ou sondage produit une issue typee plutot
qu'une exception. Les services agregent ces issues dans leurs rapports.
"""

from enum import Enum


class OutcomeKind(str, Enum):
    """
    Issue d'une operation sur un fichier.

    MOVED: Fichier deplace vers sa destination
    SKIPPED: Rien a faire (deja a destination, ou nom inchange)
    CONFLICT_RESOLVED: La destination existait, elle a ete renommee puis le deplacement a eu lieu
    IO_ERROR: Un appel systeme de fichiers a echoue
    NOT_FOUND: Le fichier source n'existe pas
    PROBE_ERROR: L'inspection media a echoue ou aucun flux video n'a ete trouve
    """

    MOVED = "moved"
    SKIPPED = "skipped"
    CONFLICT_RESOLVED = "conflict_resolved"
    IO_ERROR = "io_error"
    NOT_FOUND = "not_found"
    PROBE_ERROR = "probe_error"

    @property
    def is_error(self) -> bool:
        """Vrai pour les issues qui doivent etre rapportees comme erreurs."""
        return self in (OutcomeKind.IO_ERROR, OutcomeKind.NOT_FOUND, OutcomeKind.PROBE_ERROR)

    @property
    def moved(self) -> bool:
        """Vrai si un fichier a effectivement change de place."""
        return self in (OutcomeKind.MOVED, OutcomeKind.CONFLICT_RESOLVED)
