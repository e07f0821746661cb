"""
API Views JSON para o domínio escolar.

RESTful API para os três tipos de registro.

Endpoints (para students, teachers e directors):
- GET /students - Listar alunos
- POST /students - Cadastrar aluno
- GET /students/<id> - Obter aluno
- PUT /students/<id> - Atualizar aluno
- DELETE /students/<id> - Remover aluno

Formato:
- Entrada: JSON
- Saída: registro plano {id, name, cpf[, specialty]}
- Erro: {message, statusCode}
"""

import json
import logging
from typing import Any, Dict, Optional

from django.views import View
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from school_admin.core.school.dtos import (
    StudentInputDTO,
    TeacherInputDTO,
    DirectorInputDTO,
)
from school_admin.core.shared.exceptions import (
    EntityNotFoundError,
    DomainException,
)
from school_admin.config.container import get_container

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def error_response(message: str, status: int) -> JsonResponse:
    """
    Cria resposta de erro padronizada.

    O statusCode vai como string no corpo, além do status HTTP.
    """
    return JsonResponse(
        {"message": message, "statusCode": str(status)},
        status=status
    )


def parse_json_body(request: HttpRequest) -> Dict[str, Any]:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid JSON body: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Invalid JSON body: expected an object")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name="dispatch")
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    # Nome do provider do service no container (definir na subclasse)
    service_name: str = ""

    # DTO de entrada usado em POST/PUT
    input_dto_class: Optional[type] = None

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self):
        """Obtém service do container."""
        provider = getattr(self.get_container(), self.service_name)
        return provider()

    def parse_input(self, request: HttpRequest):
        return self.input_dto_class.from_dict(parse_json_body(request))

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        - ValidationError, BusinessRuleViolationError, ValueError → 400
        - EntityNotFoundError → 404
        - Qualquer outra → 500 (logada com traceback)
        """
        if isinstance(e, EntityNotFoundError):
            return error_response(e.message, 404)

        # Validação e CPF duplicado
        if isinstance(e, DomainException):
            return error_response(e.message, 400)

        if isinstance(e, ValueError):
            return error_response(str(e), 400)

        # Erro inesperado
        logger.exception(f"Unexpected API error: {e}")
        return error_response("Internal server error", 500)


class RecordAPIListView(BaseAPIView):
    """
    API para listar e cadastrar registros.

    GET /<kind>s - Lista registros
    POST /<kind>s - Cadastra registro
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            records = self.get_service().listar()
            return JsonResponse([r.to_dict() for r in records], safe=False)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cadastra novo registro.

        Body JSON:
        {
            "name": "string (obrigatório)",
            "cpf": "string (obrigatório)",
            "specialty": "string (obrigatório para professores)"
        }
        """
        try:
            input_dto = self.parse_input(request)
            service = self.get_service()
            output = service.cadastrar(input_dto)

            logger.info(f"API: {service.kind} created: {output.id}")

            return JsonResponse(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class RecordAPIDetailView(BaseAPIView):
    """
    API para operações em registro específico.

    GET /<kind>s/<id> - Obter registro
    PUT /<kind>s/<id> - Substituir dados do registro
    DELETE /<kind>s/<id> - Remover registro
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service().obter(pk)
            return JsonResponse(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        """
        Atualiza registro.

        O ID do path decide o alvo; "id" no body é ignorado.
        """
        try:
            input_dto = self.parse_input(request)
            output = self.get_service().atualizar(pk, input_dto)

            return JsonResponse(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            self.get_service().remover(pk)
            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Student API Views
# =============================================================================

class StudentAPIListView(RecordAPIListView):
    service_name = "student_service"
    input_dto_class = StudentInputDTO


class StudentAPIDetailView(RecordAPIDetailView):
    service_name = "student_service"
    input_dto_class = StudentInputDTO


# =============================================================================
# Teacher API Views
# =============================================================================

class TeacherAPIListView(RecordAPIListView):
    service_name = "teacher_service"
    input_dto_class = TeacherInputDTO


class TeacherAPIDetailView(RecordAPIDetailView):
    service_name = "teacher_service"
    input_dto_class = TeacherInputDTO


# =============================================================================
# Director API Views
# =============================================================================

class DirectorAPIListView(RecordAPIListView):
    service_name = "director_service"
    input_dto_class = DirectorInputDTO


class DirectorAPIDetailView(RecordAPIDetailView):
    service_name = "director_service"
    input_dto_class = DirectorInputDTO


class HealthView(View):
    """GET /health - verificação simples de disponibilidade."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse({"status": "ok"})
