"""
Interface port pour la sonde de ratio d'image.

Definit le contrat d'inspection d'un fichier video par un utilitaire externe
pour obtenir les dimensions du flux video principal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hvsort.core.value_objects import VideoGeometry


@dataclass
class ProbeResult:
    """
    Resultat d'une inspection media.

    Attributs:
        success: True si un flux video exploitable a ete trouve
        geometry: Dimensions, ratio et orientation (si succes)
        error: Message d'erreur (si echec)
    """

    success: bool
    geometry: Optional[VideoGeometry] = None
    error: Optional[str] = None


class IAspectRatioProbe(ABC):
    """
    Interface pour l'inspection des dimensions d'un fichier video.

    L'implementation delegue a un utilitaire externe (mediainfo) et ne
    parse jamais les conteneurs ou codecs elle-meme.
    """

    @abstractmethod
    def probe(self, path: Path) -> ProbeResult:
        """
        Inspecte le flux video principal d'un fichier.

        Args:
            path: Chemin complet vers le fichier video

        Retourne:
            ProbeResult avec la geometrie, ou en echec si le fichier est
            illisible, corrompu ou sans flux video.
        """
        ...

    @abstractmethod
    def is_video_file(self, filename: str) -> bool:
        """Indique si le nom de fichier porte une extension video connue."""
        ...
