# src/ui/console.py
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.config import DirectoryConfig
from src.core.io.csv_loader import EmployeeLoader
from src.core.models.directory import EmployeeDirectory
from src.core.models.employee import Employee
from src.core.structures.tree_profile import TreeProfile


def format_employee(employee: Employee) -> str:
    """Ficha de exibição de um funcionário."""
    manager = employee.manager_id if employee.manager_id else "Nenhum (Nível Executivo)"
    skills = ", ".join(employee.skills) if employee.skills else "Nenhuma"
    return "\n".join([
        f"ID do Funcionário: {employee.id}",
        f"Nome Completo: {employee.full_name}",
        f"Departamento: {employee.department}",
        f"Cargo: {employee.title}",
        f"ID do Gerente: {manager}",
        f"Habilidades: {skills}",
    ])


class ConsoleApp:
    """
    Menu de texto do Diretório de Funcionários.
    Entrada e saída são injetáveis para permitir testes sem terminal.
    """
    MENU = (
        "Bem-vindo ao Sistema de Gestão de Funcionários.\n\n"
        "1. Carregar Dados dos Funcionários.\n"
        "2. Imprimir Diretório de Funcionários.\n"
        "3. Buscar Funcionário.\n"
        "4. Estatísticas da Árvore.\n"
        "9. Sair.\n\n"
        "O que você gostaria de fazer?"
    )
    EXIT_CHOICE = 9

    def __init__(self, data_file: str = None, input_fn=input, output_fn=print):
        self.data_file = data_file or DirectoryConfig.data_file()
        self.input = input_fn
        self.output = output_fn
        self.directory = EmployeeDirectory()
        self.data_loaded = False

    def run(self):
        keep_running = True
        while keep_running:
            self.output(self.MENU)
            choice = self.get_user_choice()
            keep_running = self.process_choice(choice)
            self.output("")

    def get_user_choice(self) -> int:
        """Lê uma opção inteira, repetindo o pedido até a entrada ser válida. Fim da entrada encerra."""
        while True:
            try:
                raw = self.input().strip()
            except EOFError:
                return self.EXIT_CHOICE

            if not raw:
                self.output("Por favor, digite uma opção: ")
                continue
            try:
                return int(raw)
            except ValueError:
                self.output("Entrada inválida. Por favor, digite um número: ")

    def process_choice(self, choice: int) -> bool:
        """Executa a opção escolhida. Retorna False para encerrar o programa."""
        if choice == 1:
            self.data_loaded = self.load_data()
        elif choice == 2:
            self.print_directory()
        elif choice == 3:
            self.search_employee()
        elif choice == 4:
            self.print_statistics()
        elif choice == self.EXIT_CHOICE:
            self.output("Até logo!")
            return False
        else:
            self.output(f"{choice} não é uma opção válida.")
        return True

    def load_data(self) -> bool:
        self.output(f"Tentando carregar o arquivo: {self.data_file}")
        result = EmployeeLoader.load(self.data_file)
        if result is None:
            self.output("Não foi possível abrir o arquivo.")
            return False

        loaded, _report = result
        self.directory.assign(loaded)
        self.output("Dados dos funcionários carregados com sucesso!")
        return True

    def _require_data(self) -> bool:
        if not self.data_loaded:
            self.output("Por favor, carregue os dados dos funcionários primeiro.")
            return False
        return True

    def print_directory(self):
        if not self._require_data():
            return
        self.output("Aqui está o diretório de funcionários:\n")
        for employee in self.directory.employees():
            self.output(format_employee(employee))
            self.output("")

    def search_employee(self):
        if not self._require_data():
            return
        self.output("Digite o ID do funcionário que você procura:")
        try:
            employee_id = self.input().strip().upper()
        except EOFError:
            return
        self.output("")

        employee = self.directory.find(employee_id)
        if employee is not None:
            self.output(f"Informações de {employee_id}:")
            self.output(format_employee(employee))
        else:
            self.output(f"Desculpe. Nenhum funcionário com o ID {employee_id} foi encontrado.")

    def print_statistics(self):
        if not self._require_data():
            return
        profile = TreeProfile(self.directory.tree)
        for line in profile.summary_lines():
            self.output(line)


if __name__ == "__main__":
    ConsoleApp(sys.argv[1] if len(sys.argv) > 1 else None).run()
