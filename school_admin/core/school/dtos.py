"""
Data Transfer Objects (DTOs) do Domínio Escolar.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos (entidades) para camadas externas.

Tipos de DTOs:
- Input DTOs: Dados recebidos da API (ainda não validados)
- Output DTOs: Dados de resposta no formato plano da API
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .entities import StudentEntity, TeacherEntity, DirectorEntity


def _texto(data: Dict[str, Any], chave: str) -> Optional[str]:
    """Extrai campo textual do payload (números viram string)."""
    valor = data.get(chave)
    if valor is None:
        return None
    return str(valor)


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class StudentInputDTO:
    """
    DTO de entrada para cadastrar/atualizar aluno.

    Campos podem chegar None; a validação acontece no caso de uso.
    Qualquer "id" enviado no payload é ignorado.
    """

    name: Optional[str] = None
    cpf: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudentInputDTO":
        return cls(name=_texto(data, "name"), cpf=_texto(data, "cpf"))

    def to_dict(self) -> dict:
        return {"name": self.name, "cpf": self.cpf}


@dataclass(frozen=True)
class TeacherInputDTO:
    """DTO de entrada para cadastrar/atualizar professor."""

    name: Optional[str] = None
    cpf: Optional[str] = None
    specialty: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeacherInputDTO":
        return cls(
            name=_texto(data, "name"),
            cpf=_texto(data, "cpf"),
            specialty=_texto(data, "specialty"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "cpf": self.cpf,
            "specialty": self.specialty,
        }


@dataclass(frozen=True)
class DirectorInputDTO:
    """DTO de entrada para cadastrar/atualizar diretor."""

    name: Optional[str] = None
    cpf: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectorInputDTO":
        return cls(name=_texto(data, "name"), cpf=_texto(data, "cpf"))

    def to_dict(self) -> dict:
        return {"name": self.name, "cpf": self.cpf}


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class StudentOutputDTO:
    """DTO de saída de aluno: {id, name, cpf}."""

    id: int
    name: str
    cpf: str

    @classmethod
    def from_entity(cls, entity: StudentEntity) -> "StudentOutputDTO":
        return cls(id=entity.id, name=entity.name, cpf=entity.cpf)

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {"id": self.id, "name": self.name, "cpf": self.cpf}


@dataclass
class TeacherOutputDTO:
    """DTO de saída de professor: {id, name, cpf, specialty}."""

    id: int
    name: str
    cpf: str
    specialty: str

    @classmethod
    def from_entity(cls, entity: TeacherEntity) -> "TeacherOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            cpf=entity.cpf,
            specialty=entity.specialty,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cpf": self.cpf,
            "specialty": self.specialty,
        }


@dataclass
class DirectorOutputDTO:
    """DTO de saída de diretor: {id, name, cpf}."""

    id: int
    name: str
    cpf: str

    @classmethod
    def from_entity(cls, entity: DirectorEntity) -> "DirectorOutputDTO":
        return cls(id=entity.id, name=entity.name, cpf=entity.cpf)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "cpf": self.cpf}
