"""
Repositórios Django para persistência de registros escolares.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Toda a lógica de CRUD vem de BaseRepository; cada repositório
apenas liga Model e Mapper do seu tipo.
"""

from school_admin.core.school.entities import (
    StudentEntity,
    TeacherEntity,
    DirectorEntity,
)

from ..shared.repository import BaseRepository
from .models import StudentModel, TeacherModel, DirectorModel
from .mappers import StudentMapper, TeacherMapper, DirectorMapper


class DjangoStudentRepository(BaseRepository[StudentEntity, StudentModel]):
    """
    Implementação Django do StudentRepository.

    Example:
        repo = DjangoStudentRepository()
        aluno = repo.add(StudentEntity.criar(name="Joseph", cpf="74539808010"))
        repo.exists_by_cpf("74539808010")  # True
    """

    model_class = StudentModel

    def to_entity(self, model: StudentModel) -> StudentEntity:
        return StudentMapper.to_entity(model)

    def to_model(self, entity: StudentEntity) -> StudentModel:
        return StudentMapper.to_model(entity)


class DjangoTeacherRepository(BaseRepository[TeacherEntity, TeacherModel]):
    """Implementação Django do TeacherRepository."""

    model_class = TeacherModel

    def to_entity(self, model: TeacherModel) -> TeacherEntity:
        return TeacherMapper.to_entity(model)

    def to_model(self, entity: TeacherEntity) -> TeacherModel:
        return TeacherMapper.to_model(entity)


class DjangoDirectorRepository(BaseRepository[DirectorEntity, DirectorModel]):
    """Implementação Django do DirectorRepository."""

    model_class = DirectorModel

    def to_entity(self, model: DirectorModel) -> DirectorEntity:
        return DirectorMapper.to_entity(model)

    def to_model(self, entity: DirectorEntity) -> DirectorModel:
        return DirectorMapper.to_model(entity)
