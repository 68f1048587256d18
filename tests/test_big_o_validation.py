"""
Testes de validação de complexidade Big-O do diretório.
Valida empiricamente as complexidades prometidas:
- Inserção AVL: O(log n) (altura <= 1.44 * log2(n + 2))
- Busca AVL: O(log n)
- Listagem ordenada: O(n)
"""
import sys
import os
import time
import math
import random
import numpy as np
import matplotlib.pyplot as plt

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.structures.tree_profile import TreeProfile
from src.core.models.directory import EmployeeDirectory
from src.core.models.employee import Employee

SIZES = [100, 500, 1000, 2000, 5000]


def _fill(directory, size, shuffle=False):
    ids = [f"EMP{i:06d}" for i in range(size)]
    if shuffle:
        random.Random(size).shuffle(ids)
    for emp_id in ids:
        directory.insert(Employee(emp_id, f"Funcionário {emp_id}"))
    return ids


def test_avl_height_is_logarithmic():
    """Inserção ascendente (pior caso da BST) deve manter altura logarítmica."""
    print("--- Teste: Altura da AVL (pior caso) ---")

    heights = []
    bounds = []
    for size in SIZES:
        directory = EmployeeDirectory()
        _fill(directory, size)
        profile = TreeProfile(directory.tree)
        heights.append(profile.height)
        bounds.append(profile.height_bound)
        print(f"  n={size:5d}: altura={profile.height:2d} cota={profile.height_bound:.2f}")

    heights = np.array(heights)
    bounds = np.array(bounds)
    assert np.all(heights <= bounds)
    # Sequência ascendente gera árvore quase perfeita: altura = ceil(log2(n + 1))
    expected = np.ceil(np.log2(np.array(SIZES) + 1))
    assert np.all(heights <= expected + 1)
    print("  >> SUCESSO: Altura da AVL é O(log n)")


def test_avl_search_path_length():
    """Busca visita no máximo 'altura' nós; média de profundidade cresce como log(n)."""
    print("\n--- Teste: Complexidade de Busca AVL ---")

    mean_depths = []
    for size in SIZES:
        directory = EmployeeDirectory()
        ids = _fill(directory, size, shuffle=True)

        search_keys = random.Random(7).sample(ids, 100)
        start = time.perf_counter()
        for key in search_keys:
            assert directory.find(key) is not None
        elapsed = (time.perf_counter() - start) / 100

        profile = TreeProfile(directory.tree)
        mean_depths.append(profile.mean_depth)
        print(f"  n={size:5d}: {elapsed*1000:.4f} ms/busca | profundidade média={profile.mean_depth:.2f}")

    # Profundidade média normalizada por log2(n) deve ficar estável (< 1.44)
    ratios = np.array(mean_depths) / np.log2(np.array(SIZES))
    print(f"  Razões profundidade/log2(n): {np.round(ratios, 3)}")
    assert np.all(ratios < 1.44)


def test_in_order_listing_is_linear():
    print("\n--- Teste: Listagem Ordenada ---")
    avl = AVLTree()
    keys = [f"EMP{i:06d}" for i in range(2000)]
    random.Random(3).shuffle(keys)
    for key in keys:
        avl.insert(key, key)

    listed = list(avl.values())
    assert len(listed) == len(keys)
    assert listed == sorted(keys)
    print("  >> SUCESSO: Listagem visita cada registro exatamente uma vez")


def plot_complexity_results():
    """Gera gráfico de altura observada x cota teórica."""
    print("\n--- Gerando Gráficos de Complexidade ---")

    heights = []
    for size in SIZES:
        directory = EmployeeDirectory()
        _fill(directory, size, shuffle=True)
        heights.append(directory.tree.height)

    bound = [1.44 * math.log2(n + 2) for n in SIZES]

    plt.figure(figsize=(10, 6))
    plt.plot(SIZES, heights, 'b-o', label='Altura Observada')
    plt.plot(SIZES, bound, 'r--', label='Cota AVL 1.44·log2(n+2)')
    plt.xlabel('Funcionários (n)')
    plt.ylabel('Altura')
    plt.title('Validação de Complexidade: O(log n)')
    plt.legend()
    plt.grid(True)
    os.makedirs('data', exist_ok=True)
    plt.savefig('data/complexity_validation.png')
    print("  >> Gráfico salvo em data/complexity_validation.png")


if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE COMPLEXIDADE BIG-O")
    print("=" * 60)

    test_avl_height_is_logarithmic()
    test_avl_search_path_length()
    test_in_order_listing_is_linear()

    plot_complexity_results()
