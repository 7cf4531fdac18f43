"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python src/main.py <url>` durante desarrollo.
- Mantiene un entrypoint simple además del script `reqcli` instalado.
"""

from __future__ import annotations

import sys

# Los cuerpos de respuesta pueden traer UTF-8 que la consola cp1252 de Windows no acepta.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
