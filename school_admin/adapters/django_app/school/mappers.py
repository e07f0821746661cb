"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter Entity → Model (para persistência)
- Converter Model → Entity (para uso no Core)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from school_admin.core.school.entities import (
    StudentEntity,
    TeacherEntity,
    DirectorEntity,
)

from .models import StudentModel, TeacherModel, DirectorModel


class StudentMapper:
    """Mapper entre StudentEntity e StudentModel."""

    @staticmethod
    def to_model(entity: StudentEntity) -> StudentModel:
        """
        Converte StudentEntity para StudentModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return StudentModel(id=entity.id, name=entity.name, cpf=entity.cpf)

    @staticmethod
    def to_entity(model: StudentModel) -> StudentEntity:
        """
        Converte StudentModel para StudentEntity.

        Note:
            Bypassa validações do factory method .criar()
            pois dados já foram validados na criação original
        """
        return StudentEntity(id=model.id, name=model.name, cpf=model.cpf)


class TeacherMapper:
    """Mapper entre TeacherEntity e TeacherModel."""

    @staticmethod
    def to_model(entity: TeacherEntity) -> TeacherModel:
        return TeacherModel(
            id=entity.id,
            name=entity.name,
            cpf=entity.cpf,
            specialty=entity.specialty,
        )

    @staticmethod
    def to_entity(model: TeacherModel) -> TeacherEntity:
        return TeacherEntity(
            id=model.id,
            name=model.name,
            cpf=model.cpf,
            specialty=model.specialty,
        )


class DirectorMapper:
    """Mapper entre DirectorEntity e DirectorModel."""

    @staticmethod
    def to_model(entity: DirectorEntity) -> DirectorModel:
        return DirectorModel(id=entity.id, name=entity.name, cpf=entity.cpf)

    @staticmethod
    def to_entity(model: DirectorModel) -> DirectorEntity:
        return DirectorEntity(id=model.id, name=model.name, cpf=model.cpf)
