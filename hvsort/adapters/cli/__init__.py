"""
Interface ligne de commande (Typer + Rich).

- commands/ : Commandes projet et renommage
- display : Rendu Rich des snapshots et rapports
- helpers : Console partagee, progression, ouverture de projet
"""
