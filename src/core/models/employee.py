from dataclasses import dataclass, field
from typing import List

from src.core.config import DirectoryConfig


@dataclass
class Employee:
    """
    Registro de um funcionário do diretório.
    O campo 'id' é a chave de ordenação (comparação lexicográfica).
    """
    id: str
    full_name: str
    department: str = ""
    title: str = ""
    manager_id: str = ""
    skills: List[str] = field(default_factory=list)

    @property
    def is_executive(self) -> bool:
        return not self.manager_id

    def __repr__(self):
        return f"[{self.department or '-'}] {self.id} | {self.full_name} ({self.title or 'sem cargo'})"


class EmployeeValidator:
    """Regras de integridade aplicadas antes de inserir um registro no diretório."""

    @staticmethod
    def is_valid(employee: Employee) -> bool:
        # Campos obrigatórios
        if not employee.id or not employee.full_name:
            return False

        # Limites de tamanho
        limits = (
            (employee.id, DirectoryConfig.MAX_ID_LENGTH),
            (employee.full_name, DirectoryConfig.MAX_NAME_LENGTH),
            (employee.department, DirectoryConfig.MAX_DEPARTMENT_LENGTH),
            (employee.title, DirectoryConfig.MAX_TITLE_LENGTH),
            (employee.manager_id, DirectoryConfig.MAX_MANAGER_ID_LENGTH),
        )
        for value, max_length in limits:
            if len(value) > max_length:
                return False

        return employee.id.startswith(DirectoryConfig.ID_PREFIX)
