"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece o contrato de repositório do Core para qualquer registro
escolar que tenha um Model com `id` automático e `cpf` único:
- add / get_by_id / list_all / update / delete
- exists_by_cpf
- Tradução de violação do índice único de CPF para DuplicateIdentifierError

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar
import logging

from django.db import IntegrityError, models, transaction

from school_admin.core.shared.exceptions import DuplicateIdentifierError

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoStudentRepository(BaseRepository[StudentEntity, StudentModel]):
            model_class = StudentModel

            def to_entity(self, model):
                return StudentMapper.to_entity(model)

            def to_model(self, entity):
                return StudentMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Ordem de listagem (ordem de inserção)
    default_order_field: str = "id"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def _save_model(self, model: M, entity: T) -> None:
        """
        Salva model num savepoint próprio.

        Assim uma violação do índice único não invalida a transação
        externa (Unit of Work).
        """
        try:
            with transaction.atomic():
                model.save()
        except IntegrityError as e:
            logger.warning(f"{self.model_class.__name__} rejected by database: {e}")
            raise DuplicateIdentifierError(getattr(entity, "cpf", None)) from e

    def add(self, entity: T) -> T:
        """
        Insere entidade; o banco atribui o ID.

        Raises:
            DuplicateIdentifierError: Se o CPF violar o índice único
        """
        model = self.to_model(entity)
        model.pk = None
        self._save_model(model, entity)

        logger.debug(f"{self.model_class.__name__} inserted: {model.pk}")
        return self.to_entity(model)

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        try:
            model = self.model_class.objects.get(pk=entity_id)
            return self.to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Sem paginação - volume administrativo.
        """
        models_ = self.model_class.objects.order_by(self.default_order_field)
        return [self.to_entity(m) for m in models_]

    def update(self, entity: T) -> T:
        """
        Persiste alterações de entidade existente.

        Raises:
            DuplicateIdentifierError: Se o CPF violar o índice único
        """
        model = self.to_model(entity)
        self._save_model(model, entity)

        logger.debug(f"{self.model_class.__name__} updated: {model.pk}")
        return self.to_entity(model)

    def delete(self, entity: T) -> None:
        deleted_count, _ = self.model_class.objects.filter(pk=entity.id).delete()

        if deleted_count == 0:
            logger.debug(f"{self.model_class.__name__} not found for deletion: {entity.id}")

    def exists_by_cpf(self, cpf: str) -> bool:
        return self.model_class.objects.filter(cpf=cpf).exists()

    def count(self) -> int:
        return self.model_class.objects.count()
