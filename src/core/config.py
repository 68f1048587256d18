import os


class DirectoryConfig:
    """
    Parâmetros do Diretório de Funcionários.
    Limites de validação seguem o formato do arquivo CSV de origem.
    """
    DEFAULT_DATA_FILE = "data/employees.csv"

    # Linhas de cabeçalho ignoradas na carga do CSV
    HEADER_LINES = 1

    # Regras de validação do registro
    ID_PREFIX = "EMP"
    MAX_ID_LENGTH = 20
    MAX_NAME_LENGTH = 100
    MAX_DEPARTMENT_LENGTH = 50
    MAX_TITLE_LENGTH = 100
    MAX_MANAGER_ID_LENGTH = 20

    # Fator da cota superior de altura de uma AVL: h <= 1.44 * log2(n + 2)
    AVL_HEIGHT_FACTOR = 1.44

    @staticmethod
    def data_file() -> str:
        """Arquivo de dados padrão (pode ser sobrescrito por EMPLOYEE_DATA_FILE)."""
        return os.environ.get("EMPLOYEE_DATA_FILE", DirectoryConfig.DEFAULT_DATA_FILE)
