"""
Testes Unitários para as Exceções de Domínio.

Coverage:
- Mensagens expostas pela API
- Códigos por tipo de erro
- Hierarquia usada na tradução para status HTTP
"""

import pytest

from school_admin.core.shared.exceptions import (
    DomainException,
    ValidationError,
    RequiredFieldError,
    InvalidIdentifierError,
    EntityNotFoundError,
    NotFoundError,
    BusinessRuleViolationError,
    DuplicateIdentifierError,
)


class TestMensagens:

    @pytest.mark.parametrize("field,message", [
        ("name", "Name is required"),
        ("cpf", "CPF is required"),
        ("specialty", "Specialty is required"),
    ])
    def test_campo_obrigatorio(self, field, message):
        erro = RequiredFieldError(field)

        assert erro.message == message
        assert str(erro) == message

    def test_cpf_invalido(self):
        assert str(InvalidIdentifierError()) == "CPF is invalid"

    def test_nao_encontrado(self):
        erro = NotFoundError("Teacher", 3)

        assert str(erro) == "Teacher not found"
        assert erro.entity_type == "Teacher"
        assert erro.entity_id == 3

    def test_cpf_duplicado(self):
        erro = DuplicateIdentifierError("74539808010")

        assert str(erro) == "CPF already exists"
        assert erro.cpf == "74539808010"
        assert erro.rule == "cpf_unico"


class TestCodigos:

    def test_validacao_por_campo(self):
        assert RequiredFieldError("name").code == "VALIDATION_ERROR_NAME"
        assert InvalidIdentifierError().code == "VALIDATION_ERROR_CPF"
        assert ValidationError("Erro").code == "VALIDATION_ERROR"

    def test_nao_encontrado(self):
        assert NotFoundError("Student").code == "ENTITY_NOT_FOUND"

    def test_regra_de_negocio(self):
        assert DuplicateIdentifierError().code == "BUSINESS_RULE_VIOLATION"

    def test_codigo_padrao_e_nome_da_classe(self):
        assert DomainException("Erro").code == "DomainException"


class TestHierarquia:

    @pytest.mark.parametrize("erro,base", [
        (RequiredFieldError("cpf"), ValidationError),
        (InvalidIdentifierError(), ValidationError),
        (NotFoundError("Director"), EntityNotFoundError),
        (DuplicateIdentifierError(), BusinessRuleViolationError),
    ])
    def test_subclasses(self, erro, base):
        assert isinstance(erro, base)
        assert isinstance(erro, DomainException)
