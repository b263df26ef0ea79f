"""
Couche domaine (core).

Contient les entités du projet, les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, bibliothèques externes).

Sous-packages :
- entities/ : Entrées du projet (FileEntry, FolderEntry, ProjectSnapshot, ProjectContext)
- ports/ : Interfaces abstraites (système de fichiers, sonde de ratio d'image)
- value_objects/ : Objets valeur immutables (Orientation, VideoGeometry, résultats, RenameOperation)
"""
