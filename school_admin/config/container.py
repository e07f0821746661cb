"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Flags de domínio (ex.: cpf_strict_length)
"""

from dependency_injector import containers, providers
from typing import Optional


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Settings
    - Repositories: Persistência (Django ORM)
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from school_admin.config.container import Container

        container = Container()
        container.config.from_dict({"cpf_strict_length": False})

        service = container.student_service()
        output = service.cadastrar(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    # Lazy import: models só podem ser importados com Django pronto
    student_repository = providers.Singleton(
        lambda: __import__(
            "school_admin.adapters.django_app.school.repositories",
            fromlist=["DjangoStudentRepository"]
        ).DjangoStudentRepository()
    )

    teacher_repository = providers.Singleton(
        lambda: __import__(
            "school_admin.adapters.django_app.school.repositories",
            fromlist=["DjangoTeacherRepository"]
        ).DjangoTeacherRepository()
    )

    director_repository = providers.Singleton(
        lambda: __import__(
            "school_admin.adapters.django_app.school.repositories",
            fromlist=["DjangoDirectorRepository"]
        ).DjangoDirectorRepository()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda: __import__(
            "school_admin.adapters.django_app.shared.unit_of_work",
            fromlist=["DjangoUnitOfWork"]
        ).DjangoUnitOfWork()
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    cpf_service = providers.Factory(
        lambda student_repo, teacher_repo, director_repo: __import__(
            "school_admin.core.school.uniqueness",
            fromlist=["CpfUniquenessService"]
        ).CpfUniquenessService(
            student_repo=student_repo,
            teacher_repo=teacher_repo,
            director_repo=director_repo,
        ),
        student_repo=student_repository,
        teacher_repo=teacher_repository,
        director_repo=director_repository,
    )

    student_service = providers.Factory(
        lambda student_repo, cpf_service, uow, strict: __import__(
            "school_admin.core.school.use_cases",
            fromlist=["StudentService"]
        ).StudentService(
            student_repo=student_repo,
            cpf_service=cpf_service,
            uow=uow,
            exigir_tamanho_cpf=bool(strict),
        ),
        student_repo=student_repository,
        cpf_service=cpf_service,
        uow=unit_of_work,
        strict=config.cpf_strict_length,
    )

    teacher_service = providers.Factory(
        lambda teacher_repo, cpf_service, uow, strict: __import__(
            "school_admin.core.school.use_cases",
            fromlist=["TeacherService"]
        ).TeacherService(
            teacher_repo=teacher_repo,
            cpf_service=cpf_service,
            uow=uow,
            exigir_tamanho_cpf=bool(strict),
        ),
        teacher_repo=teacher_repository,
        cpf_service=cpf_service,
        uow=unit_of_work,
        strict=config.cpf_strict_length,
    )

    director_service = providers.Factory(
        lambda director_repo, cpf_service, uow, strict: __import__(
            "school_admin.core.school.use_cases",
            fromlist=["DirectorService"]
        ).DirectorService(
            director_repo=director_repo,
            cpf_service=cpf_service,
            uow=uow,
            exigir_tamanho_cpf=bool(strict),
        ),
        director_repo=director_repository,
        cpf_service=cpf_service,
        uow=unit_of_work,
        strict=config.cpf_strict_length,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def _strict_length_from_settings() -> bool:
    """Lê CPF_STRICT_LENGTH do Django settings, se configurado."""
    from django.conf import settings

    if not settings.configured:
        return False
    return bool(getattr(settings, "CPF_STRICT_LENGTH", False))


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict({
            "cpf_strict_length": _strict_length_from_settings(),
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def create_testing_container(cpf_strict_length: bool = False) -> Container:
    """
    Container para testes sem banco de dados.

    Sobrescreve repositórios e Unit of Work com implementações
    InMemory; os services continuam os mesmos do Container principal.

    Example:
        container = create_testing_container()
        service = container.student_service()
        service.cadastrar(StudentInputDTO(name="Joseph", cpf="74539808010"))
    """
    from school_admin.core.school.ports import (
        InMemoryStudentRepository,
        InMemoryTeacherRepository,
        InMemoryDirectorRepository,
    )
    from school_admin.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork

    container = Container()
    container.config.from_dict({"cpf_strict_length": cpf_strict_length})

    container.student_repository.override(providers.Singleton(InMemoryStudentRepository))
    container.teacher_repository.override(providers.Singleton(InMemoryTeacherRepository))
    container.director_repository.override(providers.Singleton(InMemoryDirectorRepository))
    container.unit_of_work.override(providers.Factory(InMemoryUnitOfWork))

    return container
