"""
Exceções de Domínio do School Admin.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   ├── RequiredFieldError (campo obrigatório vazio)
    │   └── InvalidIdentifierError (CPF inválido)
    ├── EntityNotFoundError (entidade não existe)
    │   └── NotFoundError (registro de aluno/professor/diretor)
    └── BusinessRuleViolationError (regra de negócio violada)
        └── DuplicateIdentifierError (CPF já cadastrado)

As mensagens das exceções concretas são as mesmas expostas pela API.
"""

from typing import Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.cadastrar(dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class RequiredFieldError(ValidationError):
    """
    Campo obrigatório ausente, vazio ou só com espaços.

    Example:
        raise RequiredFieldError("name")  # "Name is required"
        raise RequiredFieldError("cpf")   # "CPF is required"
    """

    LABELS = {
        "name": "Name",
        "cpf": "CPF",
        "specialty": "Specialty",
    }

    def __init__(self, field: str):
        label = self.LABELS.get(field, field.capitalize())
        super().__init__(f"{label} is required", field=field)


class InvalidIdentifierError(ValidationError):
    """CPF com dígitos verificadores (ou tamanho, no modo estrito) inválidos."""

    def __init__(self, message: str = "CPF is invalid"):
        super().__init__(message, field="cpf")


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")


class NotFoundError(EntityNotFoundError):
    """
    Registro escolar não encontrado.

    Example:
        raise NotFoundError("Student", 42)  # "Student not found"
    """

    def __init__(self, entity_kind: str, entity_id=None):
        super().__init__(
            f"{entity_kind} not found",
            entity_type=entity_kind,
            entity_id=entity_id,
        )


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class DuplicateIdentifierError(BusinessRuleViolationError):
    """
    CPF já pertence a outro aluno, professor ou diretor.

    Também é o resultado de uma violação do índice único de CPF
    no banco (duas criações concorrentes com o mesmo CPF).
    """

    def __init__(self, cpf: Optional[str] = None):
        self.cpf = cpf
        super().__init__("CPF already exists", rule="cpf_unico")
