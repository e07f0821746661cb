"""
Ports (Interfaces) do Domínio Escolar.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência de alunos, professores e diretores.

Tipos de Ports:
- StudentRepository, TeacherRepository, DirectorRepository

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoStudentRepository(BaseRepository[StudentEntity, StudentModel]):
        model_class = StudentModel
"""

import copy
from typing import Dict, Generic, List, Optional, Protocol, TypeVar, runtime_checkable

from .entities import (
    SchoolRecordEntity,
    StudentEntity,
    TeacherEntity,
    DirectorEntity,
)


E = TypeVar("E", bound=SchoolRecordEntity)


@runtime_checkable
class StudentRepository(Protocol):
    """
    Interface para persistência de Alunos.

    Implementações:
    - DjangoStudentRepository (PostgreSQL/SQLite via ORM)
    - InMemoryStudentRepository (para testes)

    Methods:
        add: Insere aluno novo (repositório atribui o ID)
        get_by_id: Busca por ID
        list_all: Lista todos
        update: Persiste alterações
        delete: Remove aluno
        exists_by_cpf: Verifica se CPF já está em uso
    """

    def add(self, student: StudentEntity) -> StudentEntity:
        """
        Insere aluno.

        Raises:
            DuplicateIdentifierError: Se o banco rejeitar CPF repetido
        """
        ...

    def get_by_id(self, student_id: int) -> Optional[StudentEntity]:
        ...

    def list_all(self) -> List[StudentEntity]:
        ...

    def update(self, student: StudentEntity) -> StudentEntity:
        ...

    def delete(self, student: StudentEntity) -> None:
        ...

    def exists_by_cpf(self, cpf: str) -> bool:
        ...


@runtime_checkable
class TeacherRepository(Protocol):
    """Interface para persistência de Professores (mesmo contrato)."""

    def add(self, teacher: TeacherEntity) -> TeacherEntity:
        ...

    def get_by_id(self, teacher_id: int) -> Optional[TeacherEntity]:
        ...

    def list_all(self) -> List[TeacherEntity]:
        ...

    def update(self, teacher: TeacherEntity) -> TeacherEntity:
        ...

    def delete(self, teacher: TeacherEntity) -> None:
        ...

    def exists_by_cpf(self, cpf: str) -> bool:
        ...


@runtime_checkable
class DirectorRepository(Protocol):
    """Interface para persistência de Diretores (mesmo contrato)."""

    def add(self, director: DirectorEntity) -> DirectorEntity:
        ...

    def get_by_id(self, director_id: int) -> Optional[DirectorEntity]:
        ...

    def list_all(self) -> List[DirectorEntity]:
        ...

    def update(self, director: DirectorEntity) -> DirectorEntity:
        ...

    def delete(self, director: DirectorEntity) -> None:
        ...

    def exists_by_cpf(self, cpf: str) -> bool:
        ...


class InMemoryRecordRepository(Generic[E]):
    """
    Implementação em memória do contrato de repositório.

    IDs são inteiros sequenciais começando em 1, nunca reutilizados.
    Entidades são copiadas na entrada e na saída, como num banco real:
    alterar o objeto retornado não altera o que está armazenado.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!
    """

    def __init__(self):
        self._records: Dict[int, E] = {}
        self._next_id = 1

    def add(self, entity: E) -> E:
        """Insere e atribui ID."""
        stored = copy.copy(entity)
        stored.id = self._next_id
        self._next_id += 1
        self._records[stored.id] = stored
        return copy.copy(stored)

    def get_by_id(self, entity_id: int) -> Optional[E]:
        stored = self._records.get(entity_id)
        return copy.copy(stored) if stored is not None else None

    def list_all(self) -> List[E]:
        """Lista na ordem de inserção."""
        return [copy.copy(e) for e in self._records.values()]

    def update(self, entity: E) -> E:
        self._records[entity.id] = copy.copy(entity)
        return copy.copy(entity)

    def delete(self, entity: E) -> None:
        self._records.pop(entity.id, None)

    def exists_by_cpf(self, cpf: str) -> bool:
        return any(e.cpf == cpf for e in self._records.values())

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._records.clear()
        self._next_id = 1


class InMemoryStudentRepository(InMemoryRecordRepository[StudentEntity]):
    """Repositório de alunos em memória."""


class InMemoryTeacherRepository(InMemoryRecordRepository[TeacherEntity]):
    """Repositório de professores em memória."""


class InMemoryDirectorRepository(InMemoryRecordRepository[DirectorEntity]):
    """Repositório de diretores em memória."""
