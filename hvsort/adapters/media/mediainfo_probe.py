"""
Implementation de la sonde de ratio d'image avec pymediainfo.

Ce module fournit MediaInfoProbe qui implemente IAspectRatioProbe
pour extraire largeur, hauteur, ratio et orientation du flux video principal.
"""

from math import gcd
from pathlib import Path
from typing import Iterable, Optional

from pymediainfo import MediaInfo as PyMediaInfo

from hvsort.core.ports.probe import IAspectRatioProbe, ProbeResult
from hvsort.core.value_objects import Orientation, VideoGeometry

# Extensions video reconnues (insensible a la casse)
VIDEO_EXTENSIONS: frozenset[str] = frozenset({
    ".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv",
    ".webm", ".m4v", ".mpg", ".mpeg", ".3gp", ".3g2",
})

# Ratio declare degenere, a ignorer
DEGENERATE_ASPECT_RATIO = "0:1"


def simplify_ratio(width: int, height: int) -> str:
    """
    Reduit width:height par leur plus grand commun diviseur.

    Args:
        width: Largeur en pixels (> 0)
        height: Hauteur en pixels (> 0)

    Returns:
        Ratio simplifie, ex: 1920x1080 -> "16:9"
    """
    divisor = gcd(width, height)
    return f"{width // divisor}:{height // divisor}"


def orientation_for(width: int, height: int) -> Orientation:
    """H si la largeur est superieure ou egale a la hauteur, sinon V."""
    return Orientation.H if width >= height else Orientation.V


class MediaInfoProbe(IAspectRatioProbe):
    """
    Sonde de ratio d'image utilisant pymediainfo (libmediainfo).

    Lit la premiere piste video, en deduit l'orientation et le ratio.
    Le ratio d'affichage declare par le conteneur est prefere au calcul
    quand il est present et non degenere.
    """

    def __init__(
        self,
        honor_rotation: bool = True,
        video_extensions: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Initialise la sonde.

        Args:
            honor_rotation: Si True, une rotation de 90/270 degres inverse
                largeur et hauteur (videos de telephone)
            video_extensions: Extensions video reconnues (defaut: VIDEO_EXTENSIONS)
        """
        self._honor_rotation = honor_rotation
        self._video_extensions = frozenset(
            ext.lower() for ext in (video_extensions or VIDEO_EXTENSIONS)
        )

    def is_video_file(self, filename: str) -> bool:
        """Indique si le nom porte une extension video connue."""
        return Path(filename).suffix.lower() in self._video_extensions

    def probe(self, path: Path) -> ProbeResult:
        """
        Inspecte le flux video principal d'un fichier.

        Args:
            path: Chemin complet vers le fichier video

        Returns:
            ProbeResult avec la geometrie, ou en echec (fichier absent,
            mediainfo indisponible, fichier corrompu, pas de flux video)
        """
        if not path.exists():
            return ProbeResult(success=False, error=f"Fichier introuvable: {path}")

        try:
            media_info = PyMediaInfo.parse(str(path))
        except Exception as e:
            # pymediainfo leve OSError si libmediainfo manque, RuntimeError sinon
            return ProbeResult(success=False, error=f"Inspection echouee: {e}")

        video_tracks = [
            track for track in media_info.tracks if track.track_type == "Video"
        ]
        if not video_tracks:
            return ProbeResult(success=False, error="Aucun flux video trouve")

        track = video_tracks[0]
        width, height = self._extract_dimensions(track)
        if width is None or height is None:
            return ProbeResult(
                success=False, error="Dimensions du flux video introuvables"
            )

        aspect_ratio = self._declared_aspect_ratio(track)
        if aspect_ratio is None or self._is_rotated(track):
            aspect_ratio = simplify_ratio(width, height)

        return ProbeResult(
            success=True,
            geometry=VideoGeometry(
                width=width,
                height=height,
                aspect_ratio=aspect_ratio,
                orientation=orientation_for(width, height),
            ),
        )

    def _extract_dimensions(self, track) -> tuple[Optional[int], Optional[int]]:
        """
        Extrait largeur et hauteur de la piste video.

        Inverse les deux valeurs si la piste porte une rotation de 90/270 degres
        et que honor_rotation est actif.
        """
        try:
            width = int(track.width)
            height = int(track.height)
        except (TypeError, ValueError):
            return None, None

        if width <= 0 or height <= 0:
            return None, None

        if self._is_rotated(track):
            return height, width
        return width, height

    def _is_rotated(self, track) -> bool:
        """Vrai si la piste est tournee d'un quart de tour et que la rotation est prise en compte."""
        if not self._honor_rotation:
            return False
        try:
            rotation = float(track.rotation)
        except (TypeError, ValueError):
            return False
        return int(rotation) % 180 == 90

    def _declared_aspect_ratio(self, track) -> Optional[str]:
        """
        Retourne le ratio d'affichage declare par le conteneur.

        pymediainfo expose display_aspect_ratio en decimal ("1.778") et
        other_display_aspect_ratio sous forme lisible (["16:9"]).

        Returns:
            Ratio "W:H" ou None si absent ou degenere ("0:1")
        """
        candidates = track.other_display_aspect_ratio
        if not candidates:
            return None

        declared = str(candidates[0]).strip()
        if ":" not in declared or declared == DEGENERATE_ASPECT_RATIO:
            return None
        return declared
