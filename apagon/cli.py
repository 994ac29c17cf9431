"""Interactive command that sets up the plants and runs the simulation."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, TextIO, TypeVar

from apagon.central import Central, crear_central_tipo
from apagon.sistema_electrico import SistemaElectrico

_T = TypeVar("_T")


def _leer(entrada: TextIO, salida: TextIO, mensaje: str, tipo: Callable[[str], _T]) -> _T:
    """Prompt until a value of the given type is read; raise EOFError at end of input."""
    while True:
        print(mensaje, end="", file=salida, flush=True)
        linea = entrada.readline()
        if not linea:
            raise EOFError("fin de la entrada")
        texto = linea.strip()
        if not texto:
            continue
        try:
            return tipo(texto)
        except ValueError:
            continue


def crear_centrales(cantidad_h1: int, cantidad_h2: int, cantidad_h3: int) -> list[Central]:
    """Create the plants of each type, numbered from 1."""
    total = cantidad_h1 + cantidad_h2 + cantidad_h3
    centrales = []
    for central_id in range(1, total + 1):
        posicion = central_id - 1
        if posicion < cantidad_h1:
            tipo = 1
        elif posicion < cantidad_h1 + cantidad_h2:
            tipo = 2
        else:
            tipo = 3
        centrales.append(crear_central_tipo(tipo, central_id))
    return centrales


def pedir_cantidades(entrada: TextIO, salida: TextIO) -> tuple[int, int, int]:
    """Ask for the number of plants of each type until the total is not negative."""
    print("Ingrese cantidad de centrales de tipo:", file=salida)
    while True:
        h1 = _leer(entrada, salida, "H1: ", int)
        h2 = _leer(entrada, salida, "H2: ", int)
        h3 = _leer(entrada, salida, "H3: ", int)
        total = h1 + h2 + h3
        if total < 0:
            print(
                "La cantidad de centrales ingresada no es válida. Intentelo otra vez",
                file=salida,
            )
            continue
        print(f"Cantidad total de centrales: {total}", file=salida)
        return h1, h2, h3


def pedir_probabilidades(entrada: TextIO, salida: TextIO) -> tuple[float, float, float]:
    """Ask for the probabilities of no rain and shower; the deluge takes the rest."""
    print(
        "Ingrese probabilidades de lluvia (No lluvia, aguacero, diluvio) "
        "(Probabiidad entre 0 y 1):",
        file=salida,
    )
    no_lluvia = -1.0
    while no_lluvia < 0 or no_lluvia > 1:
        no_lluvia = _leer(entrada, salida, "No lluvia: ", float)

    if no_lluvia != 1:
        aguacero = -1.0
        while aguacero < 0 or aguacero > 1 - no_lluvia:
            aguacero = _leer(entrada, salida, "Aguacero: ", float)
        diluvio = 1 - (no_lluvia + aguacero)
        print(f"Diluvio (se asigna automáticamente): {diluvio:0.2f}", file=salida)
    else:
        aguacero = 0.0
        diluvio = 0.0
        print(f"Aguacero asignado a {aguacero:0.2f}", file=salida)
        print(f"Diluvio asignado a {diluvio:0.2f}", file=salida)
    print("", file=salida)
    return no_lluvia, aguacero, diluvio


def main(argv: list[str] | None = None) -> int:
    """Run the interactive simulation until the blackout."""
    parser = argparse.ArgumentParser(
        prog="apagon", description="Simulación de un sistema eléctrico de centrales hidroeléctricas."
    )
    parser.add_argument(
        "--pausa", type=float, default=1.0, help="segundos de espera entre turnos"
    )
    parser.add_argument("--semilla", type=int, default=None, help="semilla aleatoria")
    args = parser.parse_args(argv)

    entrada, salida = sys.stdin, sys.stdout
    try:
        cantidades = pedir_cantidades(entrada, salida)
        centrales = crear_centrales(*cantidades)
        if not centrales:
            print("\033[1mNo hay centrales eléctricas para producir energía...\033[m", file=salida)
            return 0
        probabilidades = pedir_probabilidades(entrada, salida)
    except EOFError:
        print("Entrada incompleta.", file=sys.stderr)
        return 1

    sistema = SistemaElectrico(
        centrales, probabilidades, rng=random.Random(args.semilla), salida=salida
    )
    sistema.ejecutar(pausa=args.pausa)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())