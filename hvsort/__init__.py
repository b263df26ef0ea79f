"""
hvsort - Tri des rushes video en groupes horizontal (H) et vertical (V).

Ce package scanne un repertoire de projet, classe les fichiers selon la
convention de nommage " - H" / " - V" ou selon le ratio d'image mesure,
detecte les fichiers orphelins (sans contrepartie dans l'autre groupe),
deplace les fichiers dans les dossiers canoniques H/V et renomme des lots
de fichiers par motif.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (scan, classification, deplacement, renommage)
- adapters/ : Couche infrastructure (systeme de fichiers, mediainfo, CLI)
"""

__version__ = "0.1.0"
