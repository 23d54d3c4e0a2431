# --------------------------------------------------------------
# File: __main__.py
# Description: Ejecución del paquete como módulo.
# --------------------------------------------------------------
"""Permite ejecutar ``python -m filecipher``."""

from filecipher.cli import run

if __name__ == "__main__":
    run()
