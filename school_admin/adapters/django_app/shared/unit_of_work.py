"""
Unit of Work - Implementação Django.

Gerencia a transação de cada operação de escrita dos casos de uso,
garantindo consistência de dados.

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado

Usa transaction.atomic por baixo: dentro de outra transação
(ex.: testes com pytest-django) vira um savepoint.
"""

from typing import Optional
import logging

from django.db import transaction

from school_admin.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Cada bloco `with` abre um novo transaction.atomic, então a mesma
    instância pode ser reutilizada por várias operações em sequência.

    Example:
        uow = DjangoUnitOfWork()
        with uow:
            repo.add(entity)
        # Commit automático

    Example com rollback:
        with uow:
            repo.add(entity)
            raise DuplicateIdentifierError()
        # Rollback automático
    """

    def __init__(self, using: Optional[str] = None):
        """
        Inicializa Unit of Work.

        Args:
            using: Alias do banco (None = default)
        """
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        """Abre bloco atômico."""
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Fecha o bloco atômico com sucesso.

        Raises:
            Exception: Se commit falhar, re-lança exceção
        """
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        try:
            atomic.__exit__(None, None, None)
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            raise

        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """
        Marca a transação para rollback e fecha o bloco atômico.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        try:
            transaction.set_rollback(True, using=self._using)
        finally:
            atomic.__exit__(None, None, None)
            self._rolled_back = True
            logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra commits e rollbacks
    para testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            repo.add(entity)

        assert uow.commits == 1
    """

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def _begin_transaction(self) -> None:
        """Simula início de transação."""
        pass

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1
