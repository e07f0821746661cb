#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa migrations (SQLite por padrão)
3. Cadastra alunos, professores e diretores de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_STUDENTS = [
    {"name": "Joseph Climber", "cpf": "74539808010"},
    {"name": "Maria das Dores", "cpf": "11144477735"},
]

SAMPLE_TEACHERS = [
    {"name": "Ana Souza", "cpf": "52998224725", "specialty": "Matemática"},
]

SAMPLE_DIRECTORS = [
    {"name": "Carlos Lima", "cpf": "39053344705"},
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "school_admin.config.settings")

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command("migrate", verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cadastra registros de exemplo pelos services (com validação de CPF)."""
    from school_admin.config.container import get_container
    from school_admin.core.school.dtos import (
        StudentInputDTO,
        TeacherInputDTO,
        DirectorInputDTO,
    )
    from school_admin.core.shared.exceptions import DuplicateIdentifierError

    container = get_container()

    lotes = [
        (container.student_service(), StudentInputDTO, SAMPLE_STUDENTS),
        (container.teacher_service(), TeacherInputDTO, SAMPLE_TEACHERS),
        (container.director_service(), DirectorInputDTO, SAMPLE_DIRECTORS),
    ]

    print("📝 Cadastrando registros de exemplo...")

    total = 0
    for service, dto_class, registros in lotes:
        for dados in registros:
            try:
                output = service.cadastrar(dto_class.from_dict(dados))
            except DuplicateIdentifierError:
                print(f"   - {service.kind} {dados['cpf']} já cadastrado")
                continue

            total += 1
            print(f"   ✓ {service.kind} [{output.id}] {output.name}")

    print(f"✅ {total} registros criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import DatabaseError, connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        print(f"❌ Erro de conexão: {e}")
        return False

    print("✅ Conexão OK!")
    return True


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  CPF Strict Length: {settings.CPF_STRICT_LENGTH}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=school_admin.config.settings --pythonpath=.")
    print("   2. Acesse: http://localhost:8000/students")
    print("   3. Acesse: http://localhost:8000/health")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description="Setup rápido para desenvolvimento")
    parser.add_argument(
        "--with-sample-data",
        action="store_true",
        help="Cadastrar registros de exemplo"
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Apenas verificar conexão"
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 School Admin - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_URL o projeto usa SQLite (db.sqlite3).")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == "__main__":
    main()
