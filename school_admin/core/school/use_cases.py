"""
Use Cases (Application Services) do Domínio Escolar.

Este módulo contém os serviços de aplicação que orquestram validação,
unicidade de CPF e persistência para cada tipo de registro.

Serviços implementados:
- StudentService: CRUD de alunos
- TeacherService: CRUD de professores
- DirectorService: CRUD de diretores

Operações (iguais para os três tipos):
- listar: Lista todos os registros
- obter: Obtém registro por ID
- cadastrar: Valida, verifica CPF e insere
- atualizar: Valida, verifica CPF e substitui os dados
- remover: Remove registro existente

Princípios:
- Validação antes de qualquer leitura/escrita no repositório
- Escritas dentro de Unit of Work
- Erros propagados sem tratamento local
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from school_admin.core.shared.interfaces import Repository, UnitOfWork
from school_admin.core.shared.exceptions import NotFoundError

from .entities import (
    SchoolRecordEntity,
    StudentEntity,
    TeacherEntity,
    DirectorEntity,
)
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

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=SchoolRecordEntity)


class RecordService(ABC, Generic[E]):
    """
    Base dos serviços de registro escolar.

    Subclasses definem a entidade, o DTO de saída e como um DTO de
    entrada vira entidade validada.

    Attributes:
        repo: Repositório do tipo de registro
        cpf_service: Verificação de CPF entre os três tipos
        uow: Unit of Work para transações
        exigir_tamanho_cpf: Modo estrito (CPF com exatamente 11 dígitos)
    """

    entity_class: type = SchoolRecordEntity
    output_dto_class: Optional[type] = None

    def __init__(
        self,
        repo: Repository[E],
        cpf_service: CpfUniquenessService,
        uow: UnitOfWork,
        exigir_tamanho_cpf: bool = False,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            repo: Repositório para persistência
            cpf_service: Serviço de unicidade de CPF
            uow: Unit of Work para transação atômica
            exigir_tamanho_cpf: Rejeitar CPF com tamanho diferente de 11
        """
        self.repo = repo
        self.cpf_service = cpf_service
        self.uow = uow
        self.exigir_tamanho_cpf = bool(exigir_tamanho_cpf)

    @property
    def kind(self) -> str:
        return self.entity_class.KIND

    # ------------------------------------------------------------------
    # Hooks das subclasses
    # ------------------------------------------------------------------

    @abstractmethod
    def _criar_entidade(self, input_dto: Any) -> E:
        """Converte DTO de entrada em entidade validada (sem ID)."""
        raise NotImplementedError

    @abstractmethod
    def _aplicar_dados(self, entity: E, dados: E) -> None:
        """Substitui os campos mutáveis de entity pelos de dados."""
        raise NotImplementedError

    def _to_output(self, entity: E):
        return self.output_dto_class.from_entity(entity)

    # ------------------------------------------------------------------
    # Operações
    # ------------------------------------------------------------------

    def _buscar(self, record_id: int) -> E:
        entity = self.repo.get_by_id(record_id)

        if entity is None:
            logger.debug(f"{self.kind} not found: {record_id}")
            raise NotFoundError(self.kind, record_id)

        return entity

    def listar(self) -> List:
        """
        Lista todos os registros, na ordem do repositório.

        Não usa UoW pois é operação de leitura.
        """
        return [self._to_output(e) for e in self.repo.list_all()]

    def obter(self, record_id: int):
        """
        Obtém registro por ID.

        Raises:
            NotFoundError: Se registro não existe
        """
        return self._to_output(self._buscar(record_id))

    def cadastrar(self, input_dto: Any):
        """
        Cadastra novo registro.

        Fluxo:
        1. Validar campos (nome, CPF, especialidade)
        2. Verificar CPF nos três repositórios
        3. Inserir (repositório atribui o ID)

        Raises:
            RequiredFieldError: Se campo obrigatório em branco
            InvalidIdentifierError: Se CPF inválido
            DuplicateIdentifierError: Se CPF já cadastrado
        """
        entity = self._criar_entidade(input_dto)

        with self.uow:
            self.cpf_service.verificar_cpf_unico(entity.cpf, None)
            saved = self.repo.add(entity)

        logger.info(f"{self.kind} created: {saved.id}")
        return self._to_output(saved)

    def atualizar(self, record_id: int, input_dto: Any):
        """
        Atualiza registro existente.

        O registro alvo é sempre o de record_id; o CPF atual dele
        pode ser mantido sem acusar duplicidade.

        Raises:
            RequiredFieldError / InvalidIdentifierError: Dados inválidos
            NotFoundError: Se registro não existe
            DuplicateIdentifierError: Se CPF pertence a outro registro
        """
        dados = self._criar_entidade(input_dto)

        with self.uow:
            entity = self._buscar(record_id)
            self.cpf_service.verificar_cpf_unico(dados.cpf, entity.cpf)
            self._aplicar_dados(entity, dados)
            updated = self.repo.update(entity)

        logger.info(f"{self.kind} updated: {updated.id}")
        return self._to_output(updated)

    def remover(self, record_id: int) -> None:
        """
        Remove registro.

        Raises:
            NotFoundError: Se registro não existe
        """
        with self.uow:
            entity = self._buscar(record_id)
            self.repo.delete(entity)

        logger.info(f"{self.kind} deleted: {record_id}")


class StudentService(RecordService[StudentEntity]):
    """
    Use Case: CRUD de alunos.

    Example:
        service = StudentService(student_repo, cpf_service, uow)
        output = service.cadastrar(StudentInputDTO(name="Joseph", cpf="74539808010"))
        print(output.id)
    """

    entity_class = StudentEntity
    output_dto_class = StudentOutputDTO

    def __init__(self, student_repo: StudentRepository,
                 cpf_service: CpfUniquenessService, uow: UnitOfWork,
                 exigir_tamanho_cpf: bool = False):
        super().__init__(student_repo, cpf_service, uow, exigir_tamanho_cpf)

    def _criar_entidade(self, input_dto: StudentInputDTO) -> StudentEntity:
        return StudentEntity.criar(
            name=input_dto.name,
            cpf=input_dto.cpf,
            exigir_tamanho_cpf=self.exigir_tamanho_cpf,
        )

    def _aplicar_dados(self, entity: StudentEntity, dados: StudentEntity) -> None:
        entity.atualizar_dados(name=dados.name, cpf=dados.cpf)


class TeacherService(RecordService[TeacherEntity]):
    """Use Case: CRUD de professores."""

    entity_class = TeacherEntity
    output_dto_class = TeacherOutputDTO

    def __init__(self, teacher_repo: TeacherRepository,
                 cpf_service: CpfUniquenessService, uow: UnitOfWork,
                 exigir_tamanho_cpf: bool = False):
        super().__init__(teacher_repo, cpf_service, uow, exigir_tamanho_cpf)

    def _criar_entidade(self, input_dto: TeacherInputDTO) -> TeacherEntity:
        return TeacherEntity.criar(
            name=input_dto.name,
            cpf=input_dto.cpf,
            specialty=input_dto.specialty,
            exigir_tamanho_cpf=self.exigir_tamanho_cpf,
        )

    def _aplicar_dados(self, entity: TeacherEntity, dados: TeacherEntity) -> None:
        entity.atualizar_dados(
            name=dados.name,
            cpf=dados.cpf,
            specialty=dados.specialty,
        )


class DirectorService(RecordService[DirectorEntity]):
    """Use Case: CRUD de diretores."""

    entity_class = DirectorEntity
    output_dto_class = DirectorOutputDTO

    def __init__(self, director_repo: DirectorRepository,
                 cpf_service: CpfUniquenessService, uow: UnitOfWork,
                 exigir_tamanho_cpf: bool = False):
        super().__init__(director_repo, cpf_service, uow, exigir_tamanho_cpf)

    def _criar_entidade(self, input_dto: DirectorInputDTO) -> DirectorEntity:
        return DirectorEntity.criar(
            name=input_dto.name,
            cpf=input_dto.cpf,
            exigir_tamanho_cpf=self.exigir_tamanho_cpf,
        )

    def _aplicar_dados(self, entity: DirectorEntity, dados: DirectorEntity) -> None:
        entity.atualizar_dados(name=dados.name, cpf=dados.cpf)
