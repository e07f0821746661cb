"""School Admin - cadastro de alunos, professores e diretores com CPF validado."""
