"""Hydroelectric plants and their reservoirs."""

from __future__ import annotations

from dataclasses import dataclass

from apagon.lluvia import Lluvia

# tipo -> (cota_minima, cota_maxima, generacion)
_TIPOS = {
    1: (50, 200, 15),
    2: (25, 100, 5),
    3: (10, 50, 2),
}


@dataclass
class Central:
    """A hydroelectric plant with a reservoir fed by rain."""

    id: int
    tipo: int
    cota_minima: int
    cota_maxima: int
    generacion: int
    cantidad_embalse: int
    activado: bool = False
    duracion_lluvia: int = 0
    lluvia: Lluvia | None = None

    def info_creada(self) -> str:
        """Describe the plant as it was created."""
        return (
            f"Central #{self.id} de tipo {self.tipo} creada, con una cota mínima de "
            f"{self.cota_minima} m, cota máxima de {self.cota_maxima} m, embalse inicial de "
            f"{self.cantidad_embalse} m, generación de {self.generacion} MW/s."
        )

    def info(self) -> str:
        """Describe the plant's current generation and reservoir level."""
        generando = self.generacion if self.activado else 0
        return (
            f"La \033[1mcentral #{self.id}\033[m de \033[1m\x1b[36mtipo {self.tipo}"
            f"\x1b[0m\033[m genera {generando} MW/s, tiene un nivel de embalse de "
            f"{self.cantidad_embalse} m."
        )

    def iniciar_lluvia(self, lluvia: Lluvia) -> None:
        """Start a new rain on this plant."""
        self.lluvia = lluvia
        self.duracion_lluvia = 0

    def recibir_lluvia(self) -> bool:
        """Let one second of rain fall; return True when the rain has ended."""
        if self.lluvia is None:
            raise ValueError(f"la central #{self.id} no tiene lluvia asignada")
        if self.cantidad_embalse < self.cota_maxima:
            self.cantidad_embalse += self.lluvia.incremento
        else:
            self.cantidad_embalse = self.cota_maxima
        self.duracion_lluvia += 1
        return self.duracion_lluvia >= self.lluvia.duracion


def crear_central_tipo(tipo: int, central_id: int) -> Central:
    """Create a plant of type 1, 2 or 3 with its reservoir half full."""
    try:
        cota_minima, cota_maxima, generacion = _TIPOS[tipo]
    except KeyError:
        raise ValueError(
            f"No es posible crear una central de tipo {tipo}, solo de 1, 2, 3."
        ) from None
    return Central(
        id=central_id,
        tipo=tipo,
        cota_minima=cota_minima,
        cota_maxima=cota_maxima,
        generacion=generacion,
        cantidad_embalse=(cota_minima + cota_maxima) // 2,
    )