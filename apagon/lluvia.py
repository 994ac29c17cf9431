"""Rain modes and the rain that falls on a reservoir."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ModoLluvia(IntEnum):
    """Kind of rain falling on a plant."""

    NO_LLUVIA = 0
    AGUACERO = 1
    DILUVIO = 2


_PARAMETROS = {
    ModoLluvia.AGUACERO: (10, 2),
    ModoLluvia.DILUVIO: (5, 4),
    ModoLluvia.NO_LLUVIA: (5, 0),
}


@dataclass(frozen=True)
class Lluvia:
    """A rain mode with its duration, reservoir increment and probability."""

    modo: ModoLluvia
    duracion: int
    incremento: int
    probabilidad: int

    def info(self) -> str:
        """Describe this rain in one line."""
        return (
            f"Lluvia de modo {int(self.modo)} con una duración de {self.duracion} "
            f"y un incremento de {self.incremento}"
        )


def lluvia_modo(modo: int, probabilidad: float) -> Lluvia:
    """Build the rain of the given mode; unknown modes mean no rain.

    The probability is given between 0 and 1 and stored as a whole percentage,
    truncated.
    """
    try:
        modo_lluvia = ModoLluvia(modo)
    except ValueError:
        modo_lluvia = ModoLluvia.NO_LLUVIA
    duracion, incremento = _PARAMETROS[modo_lluvia]
    return Lluvia(modo_lluvia, duracion, incremento, int(probabilidad * 100))