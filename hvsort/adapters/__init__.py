"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- media/ : Inspection des fichiers vidéo (pymediainfo)

Modules :
- file_system : Opérations sur le système de fichiers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from hvsort.adapters.file_system import FileSystemGateway
from hvsort.adapters.media.mediainfo_probe import MediaInfoProbe

__all__ = [
    "FileSystemGateway",
    "MediaInfoProbe",
]
