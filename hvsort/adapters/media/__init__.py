"""
Adaptateurs d'inspection media pour hvsort.

Ce package contient l'implementation concrete de IAspectRatioProbe:
- MediaInfoProbe: Dimensions et ratio du flux video avec pymediainfo
"""

from hvsort.adapters.media.mediainfo_probe import (
    VIDEO_EXTENSIONS,
    MediaInfoProbe,
    orientation_for,
    simplify_ratio,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "MediaInfoProbe",
    "orientation_for",
    "simplify_ratio",
]
