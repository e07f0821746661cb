"""
Entidades do Domínio Escolar.

Este módulo define as entidades de domínio dos três tipos de
registro administrativo da escola.

Entidades:
- StudentEntity: Aluno (nome, CPF)
- TeacherEntity: Professor (nome, CPF, especialidade)
- DirectorEntity: Diretor (nome, CPF)

Regras de Negócio Encapsuladas:
- Validação de campos obrigatórios e CPF na criação
- Substituição dos dados mutáveis na atualização (ID preservado)

O ID é atribuído pelo repositório na inserção; entidades novas
têm id=None. A unicidade do CPF entre os três tipos é verificada
pelo CpfUniquenessService, não pela entidade.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from . import validators


@dataclass
class SchoolRecordEntity:
    """
    Base comum dos registros escolares.

    Attributes:
        id: Identificador numérico (atribuído pelo repositório)
        name: Nome da pessoa
        cpf: CPF (11 dígitos, sem máscara)
    """

    id: Optional[int] = None
    name: str = ""
    cpf: str = ""

    # Nome do tipo usado em mensagens ("Student not found")
    KIND: ClassVar[str] = "Record"

    @property
    def persistido(self) -> bool:
        """Verifica se já recebeu ID do repositório."""
        return self.id is not None

    def to_dict(self) -> dict:
        """Serializa no formato plano da API."""
        return {
            "id": self.id,
            "name": self.name,
            "cpf": self.cpf,
        }

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade) quando persistida."""
        if type(other) is not type(self):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))


@dataclass(eq=False)
class StudentEntity(SchoolRecordEntity):
    """
    Entidade de Domínio: Aluno.

    Example:
        aluno = StudentEntity.criar(name="Joseph", cpf="74539808010")
        aluno.atualizar_dados(name="Joseph Silva", cpf="74539808010")
    """

    KIND: ClassVar[str] = "Student"

    @classmethod
    def criar(cls, name: str, cpf: str,
              exigir_tamanho_cpf: bool = False) -> "StudentEntity":
        """
        Factory method para criar aluno com validações.

        Raises:
            RequiredFieldError: Se nome ou CPF em branco
            InvalidIdentifierError: Se CPF inválido
        """
        validators.validar_aluno(name, cpf, exigir_tamanho_cpf)
        return cls(name=name, cpf=cpf)

    def atualizar_dados(self, name: str, cpf: str) -> None:
        self.name = name
        self.cpf = cpf


@dataclass(eq=False)
class TeacherEntity(SchoolRecordEntity):
    """
    Entidade de Domínio: Professor.

    Attributes:
        specialty: Especialidade/disciplina do professor
    """

    specialty: str = ""

    KIND: ClassVar[str] = "Teacher"

    @classmethod
    def criar(cls, name: str, cpf: str, specialty: str,
              exigir_tamanho_cpf: bool = False) -> "TeacherEntity":
        """
        Factory method para criar professor com validações.

        Raises:
            RequiredFieldError: Se nome, CPF ou especialidade em branco
            InvalidIdentifierError: Se CPF inválido
        """
        validators.validar_professor(name, cpf, specialty, exigir_tamanho_cpf)
        return cls(name=name, cpf=cpf, specialty=specialty)

    def atualizar_dados(self, name: str, cpf: str, specialty: str) -> None:
        self.name = name
        self.cpf = cpf
        self.specialty = specialty

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["specialty"] = self.specialty
        return result


@dataclass(eq=False)
class DirectorEntity(SchoolRecordEntity):
    """Entidade de Domínio: Diretor."""

    KIND: ClassVar[str] = "Director"

    @classmethod
    def criar(cls, name: str, cpf: str,
              exigir_tamanho_cpf: bool = False) -> "DirectorEntity":
        validators.validar_diretor(name, cpf, exigir_tamanho_cpf)
        return cls(name=name, cpf=cpf)

    def atualizar_dados(self, name: str, cpf: str) -> None:
        self.name = name
        self.cpf = cpf
