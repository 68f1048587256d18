# src/ui/directory_gui.py
import tkinter as tk
from tkinter import ttk, scrolledtext, filedialog, messagebox
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.config import DirectoryConfig
from src.core.io.csv_loader import EmployeeLoader
from src.core.models.directory import EmployeeDirectory
from src.core.structures.tree_profile import TreeProfile
from src.ui.console import format_employee


class DirectoryApp:
    def __init__(self, root, data_file: str = None):
        self.root = root
        self.root.title("Diretório de Funcionários (Árvore AVL)")
        self.root.minsize(900, 500)
        self.root.geometry("1100x600")
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        self.data_file = data_file or DirectoryConfig.data_file()
        self.directory = EmployeeDirectory()

        self.create_layout()
        self.update_dashboard()

    def create_layout(self):
        # --- 1. BARRA DE FERRAMENTAS ---
        toolbar = tk.Frame(self.root, bd=1, relief=tk.RAISED, bg="#f0f0f0")
        toolbar.pack(side=tk.TOP, fill=tk.X)

        btn_opts = {'side': tk.LEFT, 'padx': 5, 'pady': 5}

        tk.Button(toolbar, text="📂 Carregar", command=self.load_default, bg="#ddffdd").pack(**btn_opts)
        tk.Button(toolbar, text="📁 Abrir CSV...", command=self.open_file_dialog).pack(**btn_opts)

        tk.Label(toolbar, text="|", bg="#f0f0f0", fg="#999").pack(side=tk.LEFT, padx=10)

        tk.Label(toolbar, text="ID:", bg="#f0f0f0").pack(side=tk.LEFT)
        self.search_var = tk.StringVar()
        entry = tk.Entry(toolbar, textvariable=self.search_var, width=16)
        entry.pack(**btn_opts)
        entry.bind("<Return>", lambda _event: self.search())
        tk.Button(toolbar, text="🔍 Buscar", command=self.search, bg="#aaccff").pack(**btn_opts)
        tk.Button(toolbar, text="✋ Limpar", command=self.clear_selection).pack(**btn_opts)

        # --- 2. ÁREA PRINCIPAL ---
        main_pane = tk.PanedWindow(self.root, orient=tk.HORIZONTAL, sashwidth=5, sashrelief=tk.RAISED)
        main_pane.pack(fill=tk.BOTH, expand=True)

        table_frame = tk.Frame(main_pane)
        columns = ("id", "name", "department", "title")
        self.table = ttk.Treeview(table_frame, columns=columns, show="headings", selectmode="browse")
        headings = {"id": "ID", "name": "Nome", "department": "Departamento", "title": "Cargo"}
        for col in columns:
            self.table.heading(col, text=headings[col])
            self.table.column(col, width=120 if col == "id" else 200, anchor="w")
        scrollbar = ttk.Scrollbar(table_frame, orient=tk.VERTICAL, command=self.table.yview)
        self.table.configure(yscrollcommand=scrollbar.set)
        self.table.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.table.bind("<<TreeviewSelect>>", self.on_select)
        main_pane.add(table_frame, minsize=550)

        # Painel lateral
        sidebar = tk.Frame(main_pane, width=350, bg="#e8e8e8")
        main_pane.add(sidebar, minsize=300)
        self._create_dashboard_widgets(sidebar)

    def _create_dashboard_widgets(self, parent):
        tk.Label(parent, text="Diretório", font=("Segoe UI", 14, "bold"), bg="#e8e8e8").pack(pady=10)

        frame_metrics = tk.LabelFrame(parent, text="Métricas da Árvore", bg="#e8e8e8", font=("Arial", 9, "bold"))
        frame_metrics.pack(fill=tk.X, padx=10, pady=5)
        self.lbl_metrics = tk.Label(frame_metrics, text="", font=("Consolas", 9), bg="#e8e8e8", justify=tk.LEFT)
        self.lbl_metrics.pack(anchor="w", padx=5, pady=5)

        frame_details = tk.LabelFrame(parent, text="Funcionário", bg="#e8e8e8", font=("Arial", 9, "bold"))
        frame_details.pack(fill=tk.BOTH, expand=True, padx=10, pady=5)
        self.txt_details = scrolledtext.ScrolledText(frame_details, height=10, font=("Consolas", 9), wrap=tk.WORD)
        self.txt_details.pack(fill=tk.BOTH, expand=True)

    # --- Carga ---

    def load_default(self):
        self.load_file(self.data_file)

    def open_file_dialog(self):
        filepath = filedialog.askopenfilename(filetypes=[("CSV", "*.csv"), ("Todos", "*.*")])
        if filepath:
            self.load_file(filepath)

    def load_file(self, filepath: str):
        result = EmployeeLoader.load(filepath)
        if result is None:
            messagebox.showerror("Erro", f"Não foi possível abrir o arquivo:\n{filepath}")
            return

        loaded, report = result
        self.directory.assign(loaded)
        self.data_file = filepath
        self.refresh_table()
        self.update_dashboard()

        msg = f"{report.loaded} funcionários carregados."
        if report.errors or report.duplicates:
            msg += f"\n{report.errors} linhas inválidas, {report.duplicates} IDs repetidos."
        messagebox.showinfo("Carga concluída", msg)

    # --- Tabela e detalhes ---

    def refresh_table(self):
        self.table.delete(*self.table.get_children())
        for employee in self.directory.employees():
            self.table.insert("", tk.END, iid=employee.id,
                              values=(employee.id, employee.full_name, employee.department, employee.title))

    def show_details(self, text: str):
        self.txt_details.delete("1.0", tk.END)
        self.txt_details.insert(tk.END, text)

    def on_select(self, _event=None):
        selection = self.table.selection()
        if not selection:
            return
        employee = self.directory.find(selection[0])
        if employee is not None:
            self.show_details(format_employee(employee))

    def search(self):
        employee_id = self.search_var.get().strip().upper()
        if not employee_id:
            return
        employee = self.directory.find(employee_id)
        if employee is None:
            self.show_details(f"Nenhum funcionário com o ID {employee_id} foi encontrado.")
            return
        self.table.selection_set(employee.id)
        self.table.see(employee.id)
        self.show_details(format_employee(employee))

    def clear_selection(self):
        self.search_var.set("")
        self.table.selection_remove(*self.table.selection())
        self.show_details("")

    def update_dashboard(self):
        profile = TreeProfile(self.directory.tree)
        self.lbl_metrics.config(text="\n".join(profile.summary_lines()))


if __name__ == "__main__": root = tk.Tk(); app = DirectoryApp(root); root.mainloop()
