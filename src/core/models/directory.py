from typing import Iterator, Optional

from src.core.models.employee import Employee
from src.core.structures.avl_tree import AVLTree


class EmployeeDirectory:
    """
    Diretório de funcionários indexado por ID sobre uma Árvore AVL.
    Não valida os registros: espera dados já validados pela camada de carga.
    """
    def __init__(self):
        self._tree = AVLTree()

    @property
    def tree(self) -> AVLTree:
        return self._tree

    def insert(self, employee: Employee) -> bool:
        """
        Adiciona um funcionário. Retorna False se o ID já existe
        (o registro original é mantido) ou se o ID está vazio.
        """
        if not employee.id:
            return False
        return self._tree.insert(employee.id, employee)

    def find(self, employee_id: str) -> Optional[Employee]:
        """Busca exata pelo ID. Retorna None se não houver registro."""
        return self._tree.search(employee_id)

    def employees(self) -> Iterator[Employee]:
        """Funcionários em ordem crescente de ID."""
        return self._tree.values()

    def duplicate(self) -> "EmployeeDirectory":
        clone = EmployeeDirectory()
        clone._tree = self._tree.duplicate()
        return clone

    def assign(self, other: "EmployeeDirectory") -> "EmployeeDirectory":
        if other is not self:
            self._tree.assign(other._tree)
        return self

    def __contains__(self, employee_id) -> bool:
        return employee_id in self._tree

    def __iter__(self):
        return self.employees()

    def __len__(self) -> int:
        return len(self._tree)

    def __repr__(self):
        return f"EmployeeDirectory(funcionarios={len(self)}, altura={self._tree.height})"
