"""
Domínio Escolar - Cadastro de Alunos, Professores e Diretores.

Este módulo contém toda a lógica de negócio dos registros
administrativos da escola, incluindo:
- Entidades (StudentEntity, TeacherEntity, DirectorEntity)
- Validadores (campos obrigatórios, dígitos do CPF)
- Unicidade de CPF entre os três tipos
- Use Cases (StudentService, TeacherService, DirectorService)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interfaces para repositórios)
"""

from .entities import StudentEntity, TeacherEntity, DirectorEntity
from .dtos import (
    StudentInputDTO,
    TeacherInputDTO,
    DirectorInputDTO,
    StudentOutputDTO,
    TeacherOutputDTO,
    DirectorOutputDTO,
)
from .ports import StudentRepository, TeacherRepository, DirectorRepository
from .uniqueness import CpfUniquenessService
from .use_cases import StudentService, TeacherService, DirectorService

__all__ = [
    # Entities
    "StudentEntity",
    "TeacherEntity",
    "DirectorEntity",
    # DTOs
    "StudentInputDTO",
    "TeacherInputDTO",
    "DirectorInputDTO",
    "StudentOutputDTO",
    "TeacherOutputDTO",
    "DirectorOutputDTO",
    # Ports
    "StudentRepository",
    "TeacherRepository",
    "DirectorRepository",
    # Services
    "CpfUniquenessService",
    "StudentService",
    "TeacherService",
    "DirectorService",
]
