"""
Línea de comandos de la calculadora.

Reproduce una secuencia de botones y muestra el resultado final:
    python -m calculadora 1 2 3 + 4 5 6 =
    python -m calculadora --sin-voz 9 ÷ 0 =
"""

import traceback
from typing import List, Optional

import typer

from calculadora.app.calculator_app import CalculatorApp
from calculadora.config.settings import CalculatorConfig


app = typer.Typer(
    name="calculadora",
    help="Calculadora de cuatro operaciones con feedback por voz",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def cmd_run(
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Botones en orden: 0-9 . + - × ÷ = % +/- C"),
    sin_voz: bool = typer.Option(False, "--sin-voz", help="Desactiva el feedback por voz"),
) -> None:
    """Reproduce los botones indicados y muestra el display final."""
    if not tokens:
        print("⚠ Indica al menos un botón (ej: 1 2 + 3 =)")
        raise typer.Exit(2)

    config = CalculatorConfig(voice_enabled=not sin_voz)
    try:
        result = CalculatorApp(config=config).run(tokens)
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
        raise typer.Exit(130)
    except Exception as e:
        # Error inesperado - mostrar información completa
        print(f"\nError: {e}")
        traceback.print_exc()
        raise typer.Exit(1)
    print(result)


if __name__ == "__main__":
    app()
