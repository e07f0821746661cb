"""
Migration inicial para o domínio escolar.

Cria as tabelas:
- tb_students: Alunos
- tb_teachers: Professores
- tb_directors: Diretores
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name="StudentModel",
            fields=[
                ("id", models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                    db_column="cd_student",
                )),
                ("name", models.CharField(
                    max_length=255,
                    db_column="nm_student",
                    help_text="Nome do aluno"
                )),
                ("cpf", models.CharField(
                    max_length=32,
                    unique=True,
                    db_column="nr_cpf",
                    help_text="CPF do aluno"
                )),
            ],
            options={
                "verbose_name": "Aluno",
                "verbose_name_plural": "Alunos",
                "db_table": "tb_students",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="TeacherModel",
            fields=[
                ("id", models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                    db_column="cd_teacher",
                )),
                ("name", models.CharField(
                    max_length=255,
                    db_column="nm_teacher",
                    help_text="Nome do professor"
                )),
                ("cpf", models.CharField(
                    max_length=32,
                    unique=True,
                    db_column="nr_cpf",
                    help_text="CPF do professor"
                )),
                ("specialty", models.CharField(
                    max_length=255,
                    db_column="ds_specialty",
                    help_text="Especialidade do professor"
                )),
            ],
            options={
                "verbose_name": "Professor",
                "verbose_name_plural": "Professores",
                "db_table": "tb_teachers",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="DirectorModel",
            fields=[
                ("id", models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                    db_column="cd_director",
                )),
                ("name", models.CharField(
                    max_length=255,
                    db_column="nm_director",
                    help_text="Nome do diretor"
                )),
                ("cpf", models.CharField(
                    max_length=32,
                    unique=True,
                    db_column="nr_cpf",
                    help_text="CPF do diretor"
                )),
            ],
            options={
                "verbose_name": "Diretor",
                "verbose_name_plural": "Diretores",
                "db_table": "tb_directors",
                "ordering": ["id"],
            },
        ),
    ]
