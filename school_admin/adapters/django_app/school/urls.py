"""
URL patterns para o domínio escolar.

Endpoints API JSON:
- GET/POST /students
- GET/PUT/DELETE /students/<id>
- GET/POST /teachers
- GET/PUT/DELETE /teachers/<id>
- GET/POST /directors
- GET/PUT/DELETE /directors/<id>
"""

from django.urls import path
from . import api_views

app_name = "school"

urlpatterns = [
    # Alunos
    path("students", api_views.StudentAPIListView.as_view(), name="student_list"),
    path("students/<int:pk>", api_views.StudentAPIDetailView.as_view(), name="student_detail"),

    # Professores
    path("teachers", api_views.TeacherAPIListView.as_view(), name="teacher_list"),
    path("teachers/<int:pk>", api_views.TeacherAPIDetailView.as_view(), name="teacher_detail"),

    # Diretores
    path("directors", api_views.DirectorAPIListView.as_view(), name="director_list"),
    path("directors/<int:pk>", api_views.DirectorAPIDetailView.as_view(), name="director_detail"),
]
