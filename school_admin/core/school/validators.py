"""
Validadores do Domínio Escolar.

Funções puras, sem efeitos colaterais, que validam os campos
obrigatórios dos registros e o dígito verificador do CPF.

Regras do CPF:
- None, vazio ou só espaços: campo obrigatório
- Sequências de 11 dígitos repetidos ("00000000000" ... "99999999999")
  são aceitas sem cálculo de dígitos
- Tamanho diferente de 11 é aceito, exceto no modo estrito
- Demais casos: os dois dígitos verificadores devem conferir
"""

from typing import Optional

from school_admin.core.shared.exceptions import (
    RequiredFieldError,
    InvalidIdentifierError,
)


CPF_LENGTH = 11

# Aceitos sem verificação dos dígitos
CPFS_REPETIDOS = frozenset(str(digito) * CPF_LENGTH for digito in range(10))

_DIGITOS = frozenset("0123456789")


def _em_branco(valor: Optional[str]) -> bool:
    return valor is None or not valor.strip()


def calcular_digito_verificador(digitos: str) -> int:
    """
    Calcula um dígito verificador do CPF.

    Os pesos são decrescentes, começando em len(digitos) + 1 e
    terminando em 2. Para o primeiro dígito passe os 9 primeiros
    números; para o segundo, os 10 primeiros.

    Args:
        digitos: Prefixo numérico do CPF

    Returns:
        Dígito verificador (0 a 9)

    Example:
        >>> calcular_digito_verificador("745398080")
        1
    """
    peso_inicial = len(digitos) + 1
    soma = sum(
        int(digito) * (peso_inicial - posicao)
        for posicao, digito in enumerate(digitos)
    )
    resto = 11 - (soma % 11)
    return 0 if resto in (10, 11) else resto


def validar_nome(nome: Optional[str]) -> None:
    """Valida nome obrigatório."""
    if _em_branco(nome):
        raise RequiredFieldError("name")


def validar_especialidade(especialidade: Optional[str]) -> None:
    """Valida especialidade obrigatória (professores)."""
    if _em_branco(especialidade):
        raise RequiredFieldError("specialty")


def validar_cpf(cpf: Optional[str], exigir_tamanho: bool = False) -> None:
    """
    Valida CPF.

    Args:
        cpf: CPF candidato (apenas dígitos, sem máscara)
        exigir_tamanho: Se True, rejeita CPF com tamanho diferente de 11

    Raises:
        RequiredFieldError: Se CPF ausente ou em branco
        InvalidIdentifierError: Se dígitos verificadores não conferem
            (ou tamanho inválido no modo estrito)
    """
    if _em_branco(cpf):
        raise RequiredFieldError("cpf")

    if len(cpf) != CPF_LENGTH:
        if exigir_tamanho:
            raise InvalidIdentifierError("CPF must have 11 digits")
        return

    if cpf in CPFS_REPETIDOS:
        return

    if not set(cpf) <= _DIGITOS:
        raise InvalidIdentifierError()

    primeiro = calcular_digito_verificador(cpf[:9])
    segundo = calcular_digito_verificador(cpf[:10])

    if primeiro != int(cpf[9]) or segundo != int(cpf[10]):
        raise InvalidIdentifierError()


def validar_aluno(nome: Optional[str], cpf: Optional[str],
                  exigir_tamanho: bool = False) -> None:
    validar_nome(nome)
    validar_cpf(cpf, exigir_tamanho)


def validar_professor(nome: Optional[str], cpf: Optional[str],
                      especialidade: Optional[str],
                      exigir_tamanho: bool = False) -> None:
    validar_nome(nome)
    validar_cpf(cpf, exigir_tamanho)
    validar_especialidade(especialidade)


def validar_diretor(nome: Optional[str], cpf: Optional[str],
                    exigir_tamanho: bool = False) -> None:
    validar_nome(nome)
    validar_cpf(cpf, exigir_tamanho)
