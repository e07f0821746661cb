"""
Serviço de unicidade de CPF entre alunos, professores e diretores.

Os três tipos de registro são armazenados separadamente, mas
compartilham o mesmo espaço de CPFs: um CPF só pode pertencer a
um registro, qualquer que seja o tipo.
"""

import logging
from typing import Optional

from school_admin.core.shared.exceptions import DuplicateIdentifierError

from .ports import StudentRepository, TeacherRepository, DirectorRepository

logger = logging.getLogger(__name__)


class CpfUniquenessService:
    """
    Verifica colisão de CPF nos três repositórios.

    Example:
        service = CpfUniquenessService(student_repo, teacher_repo, director_repo)
        service.verificar_cpf_unico("74539808010")               # criação
        service.verificar_cpf_unico("74539808010", aluno.cpf)    # atualização
    """

    def __init__(
        self,
        student_repo: StudentRepository,
        teacher_repo: TeacherRepository,
        director_repo: DirectorRepository,
    ):
        self.student_repo = student_repo
        self.teacher_repo = teacher_repo
        self.director_repo = director_repo

    def verificar_cpf_unico(self, cpf: str, cpf_atual: Optional[str] = None) -> None:
        """
        Falha se o CPF já existe e não é o CPF atual do próprio registro.

        Os três repositórios são sempre consultados.

        Args:
            cpf: CPF candidato
            cpf_atual: CPF do registro sendo atualizado (None na criação)

        Raises:
            DuplicateIdentifierError: Se CPF pertence a outro registro
        """
        student_exists = self.student_repo.exists_by_cpf(cpf)
        teacher_exists = self.teacher_repo.exists_by_cpf(cpf)
        director_exists = self.director_repo.exists_by_cpf(cpf)

        if (student_exists or teacher_exists or director_exists) and cpf != cpf_atual:
            logger.warning(
                f"CPF collision: student={student_exists} "
                f"teacher={teacher_exists} director={director_exists}"
            )
            raise DuplicateIdentifierError(cpf)
