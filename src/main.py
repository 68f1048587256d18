"""
Ponto de entrada do Diretório de Funcionários.

Uso: python -m src.main [arquivo.csv] [--gui]
"""
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.ui.console import ConsoleApp


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    paths = [arg for arg in argv if not arg.startswith("--")]
    data_file = paths[0] if paths else None

    if "--gui" in argv:
        # tkinter só é carregado no modo gráfico
        import tkinter as tk
        from src.ui.directory_gui import DirectoryApp

        root = tk.Tk()
        DirectoryApp(root, data_file)
        root.mainloop()
        return 0

    ConsoleApp(data_file).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
