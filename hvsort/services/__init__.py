"""
Couche application (services).

Services orchestrant le domaine:
- ScannerService : Parcours recursif d'un projet
- ClassifierService : Classification H/V, cles d'appariement, orphelins
- RelocationService : Deplacement sur vers les dossiers canoniques H et V
- RenamerService : Renommage par lot
- ProjectService : Orchestration sur un ProjectContext explicite
"""

from hvsort.services.classifier import ClassifierService, classify, pair_key
from hvsort.services.project import ProjectResult, ProjectService
from hvsort.services.relocation import RelocationReport, RelocationService
from hvsort.services.renamer import RenameBatchResult, RenamerService
from hvsort.services.scanner import ScannerService, ScanResult

__all__ = [
    "ClassifierService",
    "classify",
    "pair_key",
    "ProjectResult",
    "ProjectService",
    "RelocationReport",
    "RelocationService",
    "RenameBatchResult",
    "RenamerService",
    "ScannerService",
    "ScanResult",
]
