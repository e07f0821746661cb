"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TypeVar, Generic, Protocol


# Type variable para entidades genéricas
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que as operações de escrita de um caso de uso sejam
    executadas como uma única unidade: ou todas são persistidas
    ou nenhuma é.

    Pattern: Context Manager
        with uow:
            repo.add(entity)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças da transação."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios de registros escolares.

    O repositório atribui o ID na inserção; o Core nunca gera IDs.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def add(self, entity: T) -> T:
        """
        Insere entidade nova.

        Returns:
            Entidade com ID atribuído pelo repositório
        """
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades, na ordem do repositório."""
        ...

    def update(self, entity: T) -> T:
        """Persiste alterações de uma entidade existente."""
        ...

    def delete(self, entity: T) -> None:
        """Remove entidade."""
        ...

    def exists_by_cpf(self, cpf: str) -> bool:
        """Verifica se algum registro deste tipo já usa o CPF."""
        ...
