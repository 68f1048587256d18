from typing import Dict, List

import numpy as np

from src.core.config import DirectoryConfig
from src.core.structures.avl_tree import AVLTree


class TreeProfile:
    """
    Diagnóstico do formato de uma Árvore AVL.
    Coleta profundidade e fator de balanceamento de cada nó e compara a
    altura observada com a cota teórica 1.44 * log2(n + 2).
    """
    def __init__(self, tree: AVLTree):
        if not isinstance(tree, AVLTree):
            raise ValueError("O perfil exige uma instância de AVLTree.")

        depths = []
        balances = []
        for node, depth in tree.walk_nodes():
            depths.append(depth)
            balances.append(tree.balance_factor(node))

        self.depths = np.array(depths, dtype=int)
        self.balance_factors = np.array(balances, dtype=int)
        self.height = tree.height

    @property
    def size(self) -> int:
        return int(self.depths.size)

    @property
    def mean_depth(self) -> float:
        if self.size == 0:
            return 0.0
        return float(np.mean(self.depths))

    @property
    def max_depth(self) -> int:
        if self.size == 0:
            return 0
        return int(np.max(self.depths))

    @property
    def height_bound(self) -> float:
        return DirectoryConfig.AVL_HEIGHT_FACTOR * float(np.log2(self.size + 2))

    @property
    def within_bound(self) -> bool:
        return self.height <= self.height_bound

    def balance_histogram(self) -> Dict[int, int]:
        """Quantidade de nós por fator de balanceamento (-1, 0, 1)."""
        values, counts = np.unique(self.balance_factors, return_counts=True)
        histogram = {-1: 0, 0: 0, 1: 0}
        for value, count in zip(values, counts):
            histogram[int(value)] = int(count)
        return histogram

    def summary_lines(self) -> List[str]:
        histogram = self.balance_histogram()
        return [
            f"Funcionários (nós): {self.size}",
            f"Altura da árvore: {self.height} (cota AVL: {self.height_bound:.2f})",
            f"Profundidade média: {self.mean_depth:.2f} | máxima: {self.max_depth}",
            f"Fatores de balanceamento: -1={histogram[-1]}  0={histogram[0]}  +1={histogram[1]}",
        ]
