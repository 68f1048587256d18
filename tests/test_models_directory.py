import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.models.directory import EmployeeDirectory
from src.core.models.employee import Employee, EmployeeValidator


def sample_directory():
    directory = EmployeeDirectory()
    for emp_id in ["EMP003", "EMP001", "EMP002", "EMP005", "EMP004"]:
        directory.insert(Employee(emp_id, f"Nome {emp_id}"))
    return directory


def test_directory_listing_and_lookup():
    print("--- Teste do Diretório ---")
    directory = sample_directory()

    ids = [e.id for e in directory.employees()]
    print(f"Ordem de listagem: {ids}")
    assert ids == ["EMP001", "EMP002", "EMP003", "EMP004", "EMP005"]
    assert len(directory) == 5

    assert directory.find("EMP003").full_name == "Nome EMP003"
    assert directory.find("EMP999") is None
    assert "EMP002" in directory
    print(">> SUCESSO: Listagem ordenada e busca exata.")


def test_directory_rejects_duplicates_and_empty_ids():
    directory = EmployeeDirectory()
    assert directory.insert(Employee("EMP001", "Original")) is True
    assert directory.insert(Employee("EMP001", "Impostor")) is False
    assert directory.insert(Employee("", "Sem ID")) is False

    assert len(directory) == 1
    assert directory.find("EMP001").full_name == "Original"


def test_directory_duplicate_and_assign():
    directory = sample_directory()
    clone = directory.duplicate()
    clone.insert(Employee("EMP006", "Nova"))

    assert len(directory) == 5
    assert len(clone) == 6

    directory.assign(clone)
    assert [e.id for e in directory][-1] == "EMP006"
    assert directory.assign(directory) is directory
    assert len(directory) == 6


def test_empty_directory():
    directory = EmployeeDirectory()
    assert directory.find("EMP001") is None
    assert list(directory.employees()) == []


def test_validator_rules():
    assert EmployeeValidator.is_valid(Employee("EMP001", "Ana"))
    assert not EmployeeValidator.is_valid(Employee("", "Ana"))
    assert not EmployeeValidator.is_valid(Employee("EMP001", ""))
    assert not EmployeeValidator.is_valid(Employee("ABC001", "Ana"))
    assert not EmployeeValidator.is_valid(Employee("EMP" + "9" * 18, "Ana"))
    assert not EmployeeValidator.is_valid(Employee("EMP001", "A" * 101))
    assert not EmployeeValidator.is_valid(Employee("EMP001", "Ana", department="D" * 51))
    assert not EmployeeValidator.is_valid(Employee("EMP001", "Ana", title="T" * 101))
    assert not EmployeeValidator.is_valid(Employee("EMP001", "Ana", manager_id="EMP" + "1" * 18))
    assert EmployeeValidator.is_valid(Employee("EMP" + "9" * 17, "A" * 100, "D" * 50, "T" * 100, "M" * 20))


if __name__ == "__main__":
    test_directory_listing_and_lookup()
