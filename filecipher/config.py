# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de ejecución leídos del entorno o de un .env.
# --------------------------------------------------------------
"""Configuración de la CLI cargada con python-dotenv."""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("FILECIPHER_LOG_LEVEL", "WARNING").upper()
# Por defecto la CLI termina con código 0 incluso si la operación falla.
STRICT_EXIT = os.getenv("FILECIPHER_STRICT_EXIT", "0").strip().lower() in {"1", "true", "yes", "on"}
