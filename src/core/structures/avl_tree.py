import copy
from typing import Any, Iterator, List, Optional, Tuple


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave (ID), o valor (registro) e a altura da subárvore.
    Cada nó pertence a um único pai (ou à própria árvore, no caso da raiz).
    """
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Folha tem altura 1

    def __repr__(self):
        return f"AVLNode(key={self.key!r}, height={self.height})"


class AVLTree:
    """
    Árvore AVL ordenada por chave.
    Garante busca e inserção em O(log n) e listagem ordenada em O(n).
    Não há remoção: a árvore só cresce por inserção.
    """
    def __init__(self):
        self.root: Optional[AVLNode] = None
        self._size = 0

    # --- Inserção ---

    def insert(self, key, value) -> bool:
        """
        Insere um novo nó e rebalanceia a árvore automaticamente.
        Chave repetida é ignorada (o valor original é mantido).
        Retorna True se um nó foi criado.
        """
        size_before = self._size
        self.root = self._insert_recursive(self.root, key, value)
        return self._size > size_before

    def _insert_recursive(self, node, key, value):
        # 1. Inserção normal de BST
        if not node:
            self._size += 1
            return AVLNode(key, value)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key, value)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key, value)
        else:
            # Chave duplicada: nada muda
            return node

        # 2. Atualizar altura do nó ancestral
        self._update_height(node)

        # 3. Fator de balanceamento (direita - esquerda)
        balance = self._get_balance(node)

        # 4. Rotações

        # Caso Esquerda-Esquerda
        if balance < -1 and key < node.left.key:
            return self._rotate_right(node)

        # Caso Direita-Direita
        if balance > 1 and key > node.right.key:
            return self._rotate_left(node)

        # Caso Esquerda-Direita
        if balance < -1 and key > node.left.key:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso Direita-Esquerda
        if balance > 1 and key < node.right.key:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Busca ---

    def search(self, key):
        """Busca um valor pela chave em O(log n). Retorna o valor ou None."""
        current = self.root
        while current:
            if key == current.key:
                return current.value
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def __contains__(self, key) -> bool:
        current = self.root
        while current:
            if key == current.key:
                return True
            current = current.left if key < current.key else current.right
        return False

    # --- Percursos ---

    def _in_order_nodes(self) -> Iterator[AVLNode]:
        """Percurso in-order iterativo com pilha explícita (espaço O(h))."""
        stack: List[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Pares (chave, valor) em ordem crescente de chave."""
        for node in self._in_order_nodes():
            yield node.key, node.value

    def keys(self) -> Iterator[Any]:
        for node in self._in_order_nodes():
            yield node.key

    def values(self) -> Iterator[Any]:
        """Valores em ordem crescente de chave (in-order traversal)."""
        for node in self._in_order_nodes():
            yield node.value

    def __iter__(self):
        return self.values()

    def walk_nodes(self) -> Iterator[Tuple[AVLNode, int]]:
        """Percorre os nós em pré-ordem, devolvendo (nó, profundidade). Raiz tem profundidade 0."""
        if self.root is None:
            return
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))

    # --- Cópia e atribuição ---

    def duplicate(self) -> "AVLTree":
        """
        Cópia profunda: cada nó é recriado com a mesma chave, altura e uma
        cópia do valor. Nenhum nó é compartilhado com a árvore de origem.
        """
        clone = AVLTree()
        clone.root = self._copy_recursive(self.root)
        clone._size = self._size
        return clone

    def _copy_recursive(self, node):
        if node is None:
            return None
        new_node = AVLNode(node.key, copy.deepcopy(node.value))
        new_node.height = node.height
        new_node.left = self._copy_recursive(node.left)
        new_node.right = self._copy_recursive(node.right)
        return new_node

    def assign(self, other: "AVLTree") -> "AVLTree":
        """Substitui o conteúdo pelo de outra árvore (cópia profunda). Atribuir a si mesma não faz nada."""
        if other is self:
            return self
        self.root = self._copy_recursive(other.root)
        self._size = other._size
        return self

    def clear(self):
        """Libera todos os nós (a posse é estritamente hierárquica, sem ciclos)."""
        self.root = None
        self._size = 0

    # --- Consultas de estrutura ---

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    @property
    def height(self) -> int:
        return self._get_height(self.root)

    def balance_factor(self, node) -> int:
        """Altura da subárvore direita menos a da esquerda."""
        return self._get_balance(node)

    @property
    def root_key(self):
        return self.root.key if self.root else None

    def check_invariants(self):
        """
        Verifica ordenação, alturas armazenadas e balanceamento de todos os nós.
        Lança AssertionError se a estrutura estiver corrompida.
        """
        count = self._check_recursive(self.root, None, None)
        if count != self._size:
            raise AssertionError(f"Tamanho registrado {self._size} difere da contagem real {count}")

    def _check_recursive(self, node, low, high) -> int:
        if node is None:
            return 0
        if (low is not None and not node.key > low) or (high is not None and not node.key < high):
            raise AssertionError(f"Ordenação violada no nó {node.key!r}")
        count = 1 + self._check_recursive(node.left, low, node.key) + self._check_recursive(node.right, node.key, high)
        expected = 1 + max(self._get_height(node.left), self._get_height(node.right))
        if node.height != expected:
            raise AssertionError(f"Altura inválida no nó {node.key!r}: {node.height} (esperado {expected})")
        if abs(self._get_balance(node)) > 1:
            raise AssertionError(f"Nó {node.key!r} desbalanceado (fator {self._get_balance(node)})")
        return count

    # --- Métodos Auxiliares e Rotações ---

    @staticmethod
    def _get_height(node) -> int:
        if not node:
            return 0
        return node.height

    def _update_height(self, node):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _get_balance(self, node) -> int:
        if not node:
            return 0
        return self._get_height(node.right) - self._get_height(node.left)

    def _rotate_right(self, y):
        """
        Rotação simples à direita (peso na esquerda).

              y            x
             / \\          / \\
            x   T3  ->   T1  y
           / \\              / \\
          T1  T2           T2  T3
        """
        x = y.left
        T2 = x.right

        x.right = y
        y.left = T2

        # Ordem importa: primeiro o filho (y), depois o novo pai (x)
        self._update_height(y)
        self._update_height(x)

        return x

    def _rotate_left(self, x):
        """Rotação simples à esquerda (espelho da rotação à direita)."""
        y = x.right
        T2 = y.left

        y.left = x
        x.right = T2

        self._update_height(x)
        self._update_height(y)

        return y

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height})"
