"""
Testes Unitários para Use Cases do Domínio Escolar.

Estratégia de Teste:
- Usa repositórios InMemory (fake) para isolamento
- Usa FakeUnitOfWork para verificar commit/rollback
- Testa cenários de sucesso e erro

Coverage:
- StudentService / TeacherService / DirectorService
- listar, obter, cadastrar, atualizar, remover
"""

import pytest
from unittest.mock import Mock

from school_admin.core.school.use_cases import (
    RecordService,
    StudentService,
    TeacherService,
    DirectorService,
)
from school_admin.core.school.dtos import (
    StudentInputDTO,
    TeacherInputDTO,
    DirectorInputDTO,
)
from school_admin.core.school.entities import StudentEntity
from school_admin.core.school.ports import (
    InMemoryStudentRepository,
    InMemoryTeacherRepository,
    InMemoryDirectorRepository,
)
from school_admin.core.school.uniqueness import CpfUniquenessService
from school_admin.core.shared.exceptions import (
    NotFoundError,
    EntityNotFoundError,
    RequiredFieldError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
)


CPF_1 = "74539808010"
CPF_2 = "11144477735"
CPF_3 = "52998224725"


class FakeUnitOfWork:
    """
    Fake Unit of Work para testes.

    Conta commits e rollbacks de cada bloco `with`.
    """

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def student_repo():
    return InMemoryStudentRepository()


@pytest.fixture
def teacher_repo():
    return InMemoryTeacherRepository()


@pytest.fixture
def director_repo():
    return InMemoryDirectorRepository()


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def cpf_service(student_repo, teacher_repo, director_repo):
    return CpfUniquenessService(student_repo, teacher_repo, director_repo)


@pytest.fixture
def student_service(student_repo, cpf_service, uow):
    return StudentService(student_repo, cpf_service, uow)


@pytest.fixture
def teacher_service(teacher_repo, cpf_service, uow):
    return TeacherService(teacher_repo, cpf_service, uow)


@pytest.fixture
def director_service(director_repo, cpf_service, uow):
    return DirectorService(director_repo, cpf_service, uow)


class TestCadastrar:

    def test_cadastrar_aluno(self, student_service, student_repo, uow):
        output = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        assert output.id == 1
        assert output.to_dict() == {"id": 1, "name": "Joseph", "cpf": CPF_1}
        assert student_repo.count() == 1
        assert uow.commits == 1

    def test_ids_sequenciais(self, student_service):
        primeiro = student_service.cadastrar(StudentInputDTO(name="A", cpf=CPF_1))
        segundo = student_service.cadastrar(StudentInputDTO(name="B", cpf=CPF_2))

        assert (primeiro.id, segundo.id) == (1, 2)

    def test_cadastrar_cpf_duplicado(self, student_service, student_repo, uow):
        student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        with pytest.raises(DuplicateIdentifierError):
            student_service.cadastrar(StudentInputDTO(name="Outro", cpf=CPF_1))

        assert student_repo.count() == 1
        assert uow.rollbacks == 1

    def test_cadastrar_cpf_de_professor(self, student_service, teacher_service, student_repo):
        teacher_service.cadastrar(TeacherInputDTO(name="Ana", cpf=CPF_1, specialty="Física"))

        with pytest.raises(DuplicateIdentifierError):
            student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        assert student_repo.count() == 0

    def test_cadastrar_cpf_de_diretor(self, teacher_service, director_service):
        director_service.cadastrar(DirectorInputDTO(name="Carlos", cpf=CPF_2))

        with pytest.raises(DuplicateIdentifierError):
            teacher_service.cadastrar(
                TeacherInputDTO(name="Ana", cpf=CPF_2, specialty="Física")
            )

    def test_validacao_antes_do_repositorio(self, student_repo, uow):
        cpf_service = Mock()
        service = StudentService(student_repo, cpf_service, uow)

        with pytest.raises(InvalidIdentifierError):
            service.cadastrar(StudentInputDTO(name="Joseph", cpf="12345678910"))

        cpf_service.verificar_cpf_unico.assert_not_called()
        assert uow.commits == 0 and uow.rollbacks == 0

    def test_professor_sem_especialidade(self, teacher_service, teacher_repo):
        with pytest.raises(RequiredFieldError) as exc_info:
            teacher_service.cadastrar(TeacherInputDTO(name="Ana", cpf=CPF_3))

        assert exc_info.value.message == "Specialty is required"
        assert teacher_repo.count() == 0

    def test_diretor_sem_nome(self, director_service):
        with pytest.raises(RequiredFieldError) as exc_info:
            director_service.cadastrar(DirectorInputDTO(cpf=CPF_3))

        assert exc_info.value.message == "Name is required"

    def test_modo_estrito(self, student_repo, cpf_service, uow):
        service = StudentService(student_repo, cpf_service, uow, exigir_tamanho_cpf=True)

        with pytest.raises(InvalidIdentifierError) as exc_info:
            service.cadastrar(StudentInputDTO(name="Joseph", cpf="123"))

        assert exc_info.value.message == "CPF must have 11 digits"

    def test_sem_modo_estrito_aceita_outro_tamanho(self, student_service):
        output = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf="123"))

        assert output.cpf == "123"


class TestListarObter:

    def test_listar_vazio(self, student_service):
        assert student_service.listar() == []

    def test_listar_na_ordem_de_insercao(self, teacher_service):
        teacher_service.cadastrar(TeacherInputDTO(name="Ana", cpf=CPF_1, specialty="Física"))
        teacher_service.cadastrar(TeacherInputDTO(name="Bia", cpf=CPF_2, specialty="Química"))

        nomes = [t.name for t in teacher_service.listar()]

        assert nomes == ["Ana", "Bia"]

    def test_obter(self, director_service):
        criado = director_service.cadastrar(DirectorInputDTO(name="Carlos", cpf=CPF_1))

        obtido = director_service.obter(criado.id)

        assert obtido.to_dict() == criado.to_dict()

    def test_obter_inexistente(self, student_service):
        with pytest.raises(NotFoundError) as exc_info:
            student_service.obter(99)

        assert exc_info.value.message == "Student not found"
        assert isinstance(exc_info.value, EntityNotFoundError)

    def test_obter_inexistente_mensagem_por_tipo(self, teacher_service, director_service):
        with pytest.raises(NotFoundError, match="Teacher not found"):
            teacher_service.obter(1)

        with pytest.raises(NotFoundError, match="Director not found"):
            director_service.obter(1)


class TestAtualizar:

    def test_atualizar_aluno(self, student_service, student_repo):
        criado = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        output = student_service.atualizar(
            criado.id, StudentInputDTO(name="Joseph Silva", cpf=CPF_2)
        )

        assert output.id == criado.id
        assert student_repo.get_by_id(criado.id).name == "Joseph Silva"
        assert student_repo.get_by_id(criado.id).cpf == CPF_2

    def test_manter_proprio_cpf(self, student_service):
        criado = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        output = student_service.atualizar(criado.id, StudentInputDTO(name="J", cpf=CPF_1))

        assert output.name == "J"

    def test_cpf_de_outro_registro(self, student_service, director_service, student_repo):
        criado = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))
        director_service.cadastrar(DirectorInputDTO(name="Carlos", cpf=CPF_2))

        with pytest.raises(DuplicateIdentifierError):
            student_service.atualizar(criado.id, StudentInputDTO(name="Joseph", cpf=CPF_2))

        assert student_repo.get_by_id(criado.id).cpf == CPF_1

    def test_atualizar_inexistente_nao_escreve(self, student_repo, cpf_service, uow):
        student_repo.update = Mock()
        service = StudentService(student_repo, cpf_service, uow)

        with pytest.raises(NotFoundError):
            service.atualizar(42, StudentInputDTO(name="Joseph", cpf=CPF_1))

        student_repo.update.assert_not_called()
        assert uow.rollbacks == 1

    def test_validacao_antes_da_busca(self, student_service):
        # Payload inválido para ID inexistente: erro de validação
        with pytest.raises(RequiredFieldError):
            student_service.atualizar(42, StudentInputDTO(name="", cpf=CPF_1))

    def test_professor_atualiza_especialidade(self, teacher_service):
        criado = teacher_service.cadastrar(
            TeacherInputDTO(name="Ana", cpf=CPF_1, specialty="Física")
        )

        output = teacher_service.atualizar(
            criado.id, TeacherInputDTO(name="Ana", cpf=CPF_1, specialty="Química")
        )

        assert output.specialty == "Química"

    def test_id_do_payload_ignorado(self, student_service, student_repo):
        primeiro = student_service.cadastrar(StudentInputDTO(name="A", cpf=CPF_1))
        segundo = student_service.cadastrar(StudentInputDTO(name="B", cpf=CPF_2))

        dto = StudentInputDTO.from_dict({"id": primeiro.id, "name": "B2", "cpf": CPF_2})
        output = student_service.atualizar(segundo.id, dto)

        assert output.id == segundo.id
        assert student_repo.get_by_id(primeiro.id).name == "A"


class TestRemover:

    def test_remover(self, student_service, student_repo, uow):
        criado = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))

        student_service.remover(criado.id)

        assert student_repo.get_by_id(criado.id) is None
        assert uow.commits == 2

    def test_remover_libera_cpf(self, student_service, teacher_service):
        criado = student_service.cadastrar(StudentInputDTO(name="Joseph", cpf=CPF_1))
        student_service.remover(criado.id)

        output = teacher_service.cadastrar(
            TeacherInputDTO(name="Ana", cpf=CPF_1, specialty="Física")
        )

        assert output.cpf == CPF_1

    def test_remover_inexistente_nao_escreve(self, student_repo, cpf_service, uow):
        student_repo.delete = Mock()
        service = StudentService(student_repo, cpf_service, uow)

        with pytest.raises(NotFoundError):
            service.remover(5)

        student_repo.delete.assert_not_called()

    def test_ids_nao_reutilizados(self, student_service):
        criado = student_service.cadastrar(StudentInputDTO(name="A", cpf=CPF_1))
        student_service.remover(criado.id)

        novo = student_service.cadastrar(StudentInputDTO(name="B", cpf=CPF_2))

        assert novo.id == criado.id + 1


class TestInMemoryRepository:
    """Cópias na entrada e na saída."""

    def test_alterar_retorno_nao_altera_armazenado(self, student_repo):
        salvo = student_repo.add(StudentEntity(name="Joseph", cpf=CPF_1))

        salvo.name = "Mudado"

        assert student_repo.get_by_id(salvo.id).name == "Joseph"

    def test_add_nao_altera_entidade_original(self, student_repo):
        original = StudentEntity(name="Joseph", cpf=CPF_1)

        student_repo.add(original)

        assert original.id is None

    def test_clear_reinicia_ids(self, student_repo):
        student_repo.add(StudentEntity(name="A", cpf=CPF_1))

        student_repo.clear()
        novo = student_repo.add(StudentEntity(name="B", cpf=CPF_2))

        assert student_repo.count() == 1
        assert novo.id == 1


class TestRecordServiceBase:
    """Hooks obrigatórios das subclasses."""

    def test_base_nao_instanciavel(self, student_repo, cpf_service, uow):
        with pytest.raises(TypeError):
            RecordService(student_repo, cpf_service, uow)

    def test_subclasse_sem_aplicar_dados(self, student_repo, cpf_service, uow):
        class Incompleto(RecordService):
            def _criar_entidade(self, input_dto):
                return StudentEntity.criar(input_dto.name, input_dto.cpf)

        with pytest.raises(TypeError):
            Incompleto(student_repo, cpf_service, uow)
