"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Orientation : Groupe d'orientation (H, V, NONE)
- VideoGeometry : Dimensions et ratio du flux video principal
- OutcomeKind : Issue typee d'une operation fichier
- Replace, Append, Prepend, Remove : Variantes d'operation de renommage
- RenameOperation : Union des variantes de renommage
- literal, to_python_replacement : Aides pour motifs et remplacements
"""

from hvsort.core.value_objects.media import Orientation, VideoGeometry
from hvsort.core.value_objects.outcome import OutcomeKind
from hvsort.core.value_objects.rename_operation import (
    Append,
    Prepend,
    Remove,
    RenameOperation,
    Replace,
    literal,
    to_python_replacement,
)

__all__ = [
    "Orientation",
    "VideoGeometry",
    "OutcomeKind",
    "Replace",
    "Append",
    "Prepend",
    "Remove",
    "RenameOperation",
    "literal",
    "to_python_replacement",
]
