"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemGateway
from .adapters.media.mediainfo_probe import MediaInfoProbe
from .config import Settings
from .services.classifier import ClassifierService
from .services.project import ProjectService
from .services.relocation import RelocationService
from .services.renamer import RenamerService
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        projects = container.project_service()
        opened = projects.open_project(Path("/media/rushes"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemGateway)
    aspect_ratio_probe = providers.Singleton(
        MediaInfoProbe,
        honor_rotation=config.provided.honor_rotation,
        video_extensions=config.provided.video_extensions,
    )

    # Services sans etat - Singletons
    classifier_service = providers.Singleton(
        ClassifierService,
        probe=aspect_ratio_probe,
    )
    renamer_service = providers.Singleton(
        RenamerService,
        file_system=file_system,
    )

    # Services d'orchestration - Factory
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
    )
    relocation_service = providers.Factory(
        RelocationService,
        file_system=file_system,
        scanner=scanner_service,
        classifier=classifier_service,
    )
    project_service = providers.Factory(
        ProjectService,
        file_system=file_system,
        scanner=scanner_service,
        classifier=classifier_service,
        relocation=relocation_service,
        renamer=renamer_service,
    )
