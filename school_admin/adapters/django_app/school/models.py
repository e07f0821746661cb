"""
Django Models para o domínio escolar.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em school_admin/core/school/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação de CPF e unicidade entre tabelas ficam no Core
- O índice único em `cpf` protege cada tabela contra criações concorrentes
"""

from django.db import models


class StudentModel(models.Model):
    """
    Model Django para persistência de Alunos.

    Fields:
        id: Auto-incremento (atribuído pelo banco)
        name: Nome do aluno
        cpf: CPF, único na tabela
    """

    id = models.BigAutoField(primary_key=True, db_column="cd_student")

    name = models.CharField(
        max_length=255,
        db_column="nm_student",
        help_text="Nome do aluno"
    )

    cpf = models.CharField(
        max_length=32,
        unique=True,
        db_column="nr_cpf",
        help_text="CPF do aluno"
    )

    class Meta:
        db_table = "tb_students"
        verbose_name = "Aluno"
        verbose_name_plural = "Alunos"
        ordering = ["id"]

    def __str__(self):
        return f"[{self.id}] {self.name}"


class TeacherModel(models.Model):
    """Model Django para persistência de Professores."""

    id = models.BigAutoField(primary_key=True, db_column="cd_teacher")

    name = models.CharField(
        max_length=255,
        db_column="nm_teacher",
        help_text="Nome do professor"
    )

    cpf = models.CharField(
        max_length=32,
        unique=True,
        db_column="nr_cpf",
        help_text="CPF do professor"
    )

    specialty = models.CharField(
        max_length=255,
        db_column="ds_specialty",
        help_text="Especialidade do professor"
    )

    class Meta:
        db_table = "tb_teachers"
        verbose_name = "Professor"
        verbose_name_plural = "Professores"
        ordering = ["id"]

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.specialty})"


class DirectorModel(models.Model):
    """Model Django para persistência de Diretores."""

    id = models.BigAutoField(primary_key=True, db_column="cd_director")

    name = models.CharField(
        max_length=255,
        db_column="nm_director",
        help_text="Nome do diretor"
    )

    cpf = models.CharField(
        max_length=32,
        unique=True,
        db_column="nr_cpf",
        help_text="CPF do diretor"
    )

    class Meta:
        db_table = "tb_directors"
        verbose_name = "Diretor"
        verbose_name_plural = "Diretores"
        ordering = ["id"]

    def __str__(self):
        return f"[{self.id}] {self.name}"
