"""
Objets valeur pour l'orientation et la géométrie vidéo.

Objets valeur immutables décrivant l'orientation d'un fichier (H, V ou aucune)
et les dimensions mesurées de son flux vidéo principal.
"""

from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """
    Groupe d'orientation d'un fichier.

    H : horizontal (paysage)
    V : vertical (portrait)
    NONE : pas de suffixe d'orientation dans le nom
    """

    H = "H"
    V = "V"
    NONE = "None"


@dataclass(frozen=True)
class VideoGeometry:
    """
    Géométrie du flux vidéo principal d'un fichier.

    Attributs :
        width : Largeur en pixels
        height : Hauteur en pixels
        aspect_ratio : Ratio simplifié (ex: "16:9", "9:16")
        orientation : H si width >= height, sinon V
    """

    width: int
    height: int
    aspect_ratio: str
    orientation: Orientation

    @property
    def label(self) -> str:
        """Libellé lisible, ex: "1920x1080 (16:9)"."""
        return f"{self.width}x{self.height} ({self.aspect_ratio})"
