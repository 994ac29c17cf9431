import pytest

from apagon.central import Central, crear_central_tipo
from apagon.lluvia import Lluvia, ModoLluvia, lluvia_modo


@pytest.mark.parametrize("tipo", [1, 2, 3])
def test_created_plant_is_half_full_and_inactive(tipo):
    central = crear_central_tipo(tipo, 7)
    assert central.id == 7
    assert central.tipo == tipo
    assert central.cantidad_embalse == (central.cota_minima + central.cota_maxima) // 2
    assert central.cota_minima < central.cota_maxima
    assert central.activado is False
    assert central.lluvia is None


def test_type_one_values():
    central = crear_central_tipo(1, 1)
    assert (central.cota_minima, central.cota_maxima, central.generacion) == (50, 200, 15)


def test_larger_types_generate_less():
    generaciones = [crear_central_tipo(t, t).generacion for t in (1, 2, 3)]
    assert generaciones == sorted(generaciones, reverse=True)


@pytest.mark.parametrize("tipo", [0, 4, -1])
def test_invalid_type_raises(tipo):
    with pytest.raises(ValueError, match="solo de 1, 2, 3"):
        crear_central_tipo(tipo, 1)


def test_info_shows_zero_when_inactive():
    central = crear_central_tipo(2, 3)
    assert "genera 0 MW/s" in central.info()
    central.activado = True
    assert f"genera {central.generacion} MW/s" in central.info()
    assert f"embalse de {central.cantidad_embalse} m" in central.info()


def test_info_creada():
    central = crear_central_tipo(3, 9)
    texto = central.info_creada()
    assert texto.startswith("Central #9 de tipo 3 creada")
    assert f"embalse inicial de {central.cantidad_embalse} m" in texto


def test_rain_raises_reservoir_and_ends():
    central = crear_central_tipo(1, 1)
    lluvia = lluvia_modo(2, 1.0)
    central.iniciar_lluvia(lluvia)
    inicial = central.cantidad_embalse
    terminadas = [central.recibir_lluvia() for _ in range(lluvia.duracion)]
    assert terminadas[-1] is True
    assert not any(terminadas[:-1])
    assert central.cantidad_embalse == inicial + lluvia.incremento * lluvia.duracion
    assert central.duracion_lluvia == lluvia.duracion


def test_iniciar_lluvia_resets_duration():
    central = crear_central_tipo(2, 1)
    central.iniciar_lluvia(lluvia_modo(1, 0.5))
    central.recibir_lluvia()
    central.iniciar_lluvia(lluvia_modo(2, 0.5))
    assert central.duracion_lluvia == 0
    assert central.lluvia.modo is ModoLluvia.DILUVIO


def test_full_reservoir_is_clamped():
    central = Central(1, 3, 10, 50, 2, cantidad_embalse=60)
    central.iniciar_lluvia(Lluvia(ModoLluvia.DILUVIO, 5, 4, 100))
    central.recibir_lluvia()
    assert central.cantidad_embalse == central.cota_maxima


def test_rain_without_lluvia_raises():
    central = crear_central_tipo(1, 1)
    with pytest.raises(ValueError):
        central.recibir_lluvia()