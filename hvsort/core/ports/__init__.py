"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileSystemGateway : Listage, création, déplacement, renommage, métadonnées
- OperationResult, ListResult, StatResult : Résultats des opérations fichiers

Ports inspection média :
- IAspectRatioProbe : Dimensions du flux vidéo principal
- ProbeResult : Résultat d'une inspection
"""

from hvsort.core.ports.file_system import (
    IFileSystemGateway,
    ListResult,
    OperationResult,
    StatResult,
)
from hvsort.core.ports.probe import IAspectRatioProbe, ProbeResult

__all__ = [
    # Système de fichiers
    "IFileSystemGateway",
    "ListResult",
    "OperationResult",
    "StatResult",
    # Inspection média
    "IAspectRatioProbe",
    "ProbeResult",
]
