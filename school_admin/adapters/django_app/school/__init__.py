"""Adapter Django do domínio escolar (models, repositórios e API)."""
