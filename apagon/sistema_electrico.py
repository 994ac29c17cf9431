"""The electrical system: plants generating in turns until a blackout."""

from __future__ import annotations

import random
import sys
import time
from typing import Iterable, Sequence, TextIO

from apagon.central import Central
from apagon.lluvia import Lluvia, lluvia_modo

MAX_PRODUCCION = 150
MIN_PRODUCCION = 100
DECREMENTO_COTA = 5


class SistemaElectrico:
    """A set of plants whose total production must stay within range."""

    def __init__(
        self,
        centrales: Iterable[Central],
        probabilidades: Sequence[float],
        rng: random.Random | None = None,
        salida: TextIO | None = None,
    ) -> None:
        if len(probabilidades) != 3:
            raise ValueError("se necesitan tres probabilidades de lluvia")
        self.centrales = list(centrales)
        self.lluvias: tuple[Lluvia, Lluvia, Lluvia] = tuple(
            lluvia_modo(modo, p) for modo, p in enumerate(probabilidades)
        )
        self.rng = rng if rng is not None else random.Random()
        self.salida = salida if salida is not None else sys.stdout
        self.generacion_total = 0
        self.generacion_actual = 0
        self.colapsado = False
        self.inicio_generado = False
        self.tiempo = 0

    def _escribir(self, texto: str) -> None:
        print(texto, file=self.salida)

    def seleccionar_lluvia(self) -> Lluvia:
        """Draw a rain according to the configured probabilities."""
        valor = self.rng.randrange(100)
        no_lluvia, aguacero, diluvio = self.lluvias
        if valor <= no_lluvia.probabilidad:
            return no_lluvia
        if valor <= no_lluvia.probabilidad + aguacero.probabilidad:
            return aguacero
        return diluvio

    def iniciar_lluvia_central(self, central: Central) -> None:
        """Start a freshly drawn rain on a plant."""
        central.iniciar_lluvia(self.seleccionar_lluvia())

    def reanudar_central(self, central: Central) -> None:
        """Put a plant back into service."""
        central.activado = True
        self.generacion_actual += central.generacion
        self._escribir(
            f"\033[1m\x1b[32m¡La central #{central.id} de tipo {central.tipo} "
            f"ha sido reanudado!\x1b[0m\033[m"
        )

    def suspender_central(self, central: Central) -> None:
        """Take a plant out of service."""
        central.activado = False
        self.generacion_actual -= central.generacion
        self._escribir(
            f"\033[1m\x1b[31m¡La central #{central.id} de tipo {central.tipo} "
            f"ha sido suspendido!\x1b[0m\033[m"
        )

    def generar_electricidad(self, central: Central) -> None:
        """Add a plant's production to the total and lower its reservoir."""
        self.generacion_total += central.generacion
        central.cantidad_embalse -= DECREMENTO_COTA

    def turno_central(self, central: Central) -> None:
        """Run one second of a plant: report, generate if active, then rain."""
        if central.lluvia is None:
            self.iniciar_lluvia_central(central)
        self._escribir(central.info())
        if central.activado:
            self.generar_electricidad(central)
        if central.recibir_lluvia():
            self.iniciar_lluvia_central(central)

    def revisar_estado(self) -> bool:
        """Report the production and detect a collapse; return whether it collapsed."""
        self._escribir(
            f"\033[1m\x1b[34mElectricidad producida en total: {self.generacion_total} MW, "
            f"Electricidad producida: {self.generacion_actual} MW, tiempo transcurrido: "
            f"{self.tiempo} segundos.\x1b[0m\033[m"
        )
        self.tiempo += 1
        energia_minima = self.generacion_total > MIN_PRODUCCION
        energia_maxima = self.generacion_total < MAX_PRODUCCION
        if not self.inicio_generado and energia_minima:
            self.inicio_generado = True
        en_rango = energia_minima and energia_maxima
        if not en_rango and not self.colapsado and self.inicio_generado:
            self._escribir(
                "\033[1m\x1b[31m¡El sistema eléctrico COLAPSÓ, causando así un APAGÓN!"
                "\x1b[0m\033[m"
            )
            self._escribir("\033[1mSe debe reanudar el sistema\033[m")
            self.colapsado = True
        return self.colapsado

    def gestionar_centrales(self) -> None:
        """Suspend plants short of water or at risk of overproduction; resume others."""
        for central in self.centrales:
            if central.activado:
                if (
                    central.cantidad_embalse < central.cota_minima
                    or self.generacion_total + self.generacion_actual >= MAX_PRODUCCION
                ):
                    self.suspender_central(central)
            elif (
                central.cantidad_embalse
                >= (central.cota_minima + central.cota_maxima) * 0.40
                and self.generacion_total + self.generacion_actual + central.generacion
                < MAX_PRODUCCION
            ):
                self.reanudar_central(central)

    def ejecutar(self, pausa: float = 1.0) -> int:
        """Run the simulation until the system collapses; return the seconds elapsed."""
        if not self.centrales:
            raise ValueError("no hay centrales eléctricas para producir energía")
        for central in self.centrales:
            central.activado = True
            self.generacion_actual += central.generacion
            self.iniciar_lluvia_central(central)
        while not self.colapsado:
            for central in self.centrales:
                self.turno_central(central)
            if self.revisar_estado():
                break
            self.gestionar_centrales()
            self._escribir("")
            if pausa > 0:
                time.sleep(pausa)
        return self.tiempo