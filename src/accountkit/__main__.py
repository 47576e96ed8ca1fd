"""Script de ejecución: `python -m accountkit ...`."""

from accountkit.cli.main import run

if __name__ == "__main__":
    run()
