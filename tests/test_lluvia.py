import pytest

from apagon.lluvia import Lluvia, ModoLluvia, lluvia_modo


def test_aguacero_parameters():
    lluvia = lluvia_modo(1, 0.5)
    assert lluvia.modo is ModoLluvia.AGUACERO
    assert lluvia.duracion == 10
    assert lluvia.incremento == 2
    assert lluvia.probabilidad == 50


def test_diluvio_parameters():
    lluvia = lluvia_modo(2, 0.0)
    assert lluvia.modo is ModoLluvia.DILUVIO
    assert lluvia.duracion == 5
    assert lluvia.incremento == 4
    assert lluvia.probabilidad == 0


@pytest.mark.parametrize("modo", [0, 7, -3])
def test_other_modes_mean_no_rain(modo):
    lluvia = lluvia_modo(modo, 1.0)
    assert lluvia.modo is ModoLluvia.NO_LLUVIA
    assert lluvia.incremento == 0
    assert lluvia.probabilidad == 100


def test_probability_is_truncated():
    lluvia = lluvia_modo(0, 0.999)
    assert lluvia.probabilidad < 100
    assert lluvia.probabilidad >= 99


def test_info_mentions_values():
    lluvia = Lluvia(ModoLluvia.DILUVIO, 5, 4, 30)
    texto = lluvia.info()
    assert "modo 2" in texto
    assert "duración de 5" in texto
    assert "incremento de 4" in texto


def test_lluvia_is_immutable():
    lluvia = lluvia_modo(1, 0.2)
    with pytest.raises(AttributeError):
        lluvia.duracion = 3
    assert lluvia.duracion == 10
    assert lluvia.modo is ModoLluvia.AGUACERO