from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.config import DirectoryConfig
from src.core.models.directory import EmployeeDirectory
from src.core.models.employee import Employee, EmployeeValidator

WHITESPACE = " \t\r\n"


def parse_csv_line(line: str) -> List[str]:
    """
    Divide uma linha CSV respeitando campos entre aspas.
    As aspas apenas alternam o modo e não entram no token.
    Cada token é aparado; linha vazia gera lista vazia.
    """
    tokens: List[str] = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            tokens.append("".join(current).strip(WHITESPACE))
            current = []
        else:
            current.append(char)

    # Último token (também quando vazio após uma vírgula)
    if current or tokens:
        tokens.append("".join(current).strip(WHITESPACE))

    return tokens


def parse_skills(skills_text: str) -> List[str]:
    """Separa a célula de habilidades por vírgula, descartando entradas vazias."""
    skills = []
    for skill in skills_text.split(","):
        skill = skill.strip(WHITESPACE)
        if skill:
            skills.append(skill)
    return skills


def read_file(filepath: str) -> List[str]:
    """
    Lê todas as linhas do arquivo.
    Retorna lista vazia se o arquivo não existir, não puder ser lido ou estiver vazio.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[Leitura Erro] Não foi possível abrir o arquivo {filepath}: {e}")
        return []

    if not lines:
        print(f"[Leitura Erro] Arquivo vazio: {filepath}")
        return []

    print(f"Leitura concluída: {len(lines)} linhas de {filepath}")
    return lines


@dataclass
class LoadReport:
    """Resumo de uma carga: registros inseridos, linhas rejeitadas e IDs repetidos."""
    loaded: int = 0
    errors: int = 0
    duplicates: int = 0


class EmployeeLoader:
    """
    Converte linhas CSV em registros validados e monta o diretório.
    Colunas: id, nome, departamento, cargo, gerente, habilidades.
    """

    @staticmethod
    def parse_line(line: str) -> Optional[Employee]:
        """Cria o registro a partir de uma linha. Retorna None se faltarem campos obrigatórios."""
        tokens = parse_csv_line(line)
        if len(tokens) < 2:
            return None

        def column(index):
            return tokens[index] if len(tokens) > index else ""

        return Employee(
            id=tokens[0],
            full_name=tokens[1],
            department=column(2),
            title=column(3),
            manager_id=column(4),
            skills=parse_skills(column(5)),
        )

    @staticmethod
    def create_directory(lines: List[str]) -> Tuple[EmployeeDirectory, LoadReport]:
        directory = EmployeeDirectory()
        report = LoadReport()

        print("Processando dados dos funcionários...")

        for line_index in range(DirectoryConfig.HEADER_LINES, len(lines)):
            line = lines[line_index]
            line_number = line_index + 1

            if not line.strip():
                continue

            employee = EmployeeLoader.parse_line(line)
            if employee is None:
                print(f"[Carga Aviso] Linha {line_number} ignorada: dados insuficientes")
                report.errors += 1
                continue

            if not EmployeeValidator.is_valid(employee):
                print(f"[Carga Aviso] Registro inválido ignorado: {employee.id or '(sem ID)'}")
                report.errors += 1
                continue

            if directory.insert(employee):
                report.loaded += 1
            else:
                print(f"[Carga Aviso] ID repetido ignorado na linha {line_number}: {employee.id}")
                report.duplicates += 1

        summary = f"Carga concluída: {report.loaded} funcionários carregados"
        if report.errors > 0:
            summary += f" ({report.errors} erros)"
        if report.duplicates > 0:
            summary += f" ({report.duplicates} repetidos)"
        print(summary)

        return directory, report

    @staticmethod
    def load(filepath: str) -> Optional[Tuple[EmployeeDirectory, LoadReport]]:
        """Lê e processa o arquivo. Retorna None se o arquivo não puder ser lido."""
        lines = read_file(filepath)
        if not lines:
            return None
        return EmployeeLoader.create_directory(lines)
