# apagon

A console simulation of an electrical system fed by hydroelectric plants.
Every turn, each active plant adds its output to the accumulated
production and lowers its reservoir by 5 m. Rain (none, a downpour or a
deluge) then refills the reservoir. After each turn the system suspends
plants that are short of water or would push production to 150 MW or
more. It resumes suspended plants whose reservoir has refilled to 40% of
the sum of its minimum and maximum levels, provided they would not push
production to 150 MW or more.

Once the accumulated production has passed 100 MW, it has to stay
strictly between 100 and 150 MW. When it leaves that range, the system
collapses, a blackout is reported and the simulation ends.

## Installation

```
pip install .
```

## Usage

```
apagon [--pausa SEGUNDOS] [--semilla N]
```

- `--pausa`: seconds to wait between turns. The default is 1. Use 0 to run without waiting.
- `--semilla`: seed for the random rain draws, so that a run can be repeated.

The program reads its answers from standard input. It asks for:

1. The number of plants of each type (H1, H2, H3). The questions are repeated while the total is negative:
   - **H1**: minimum level 50 m, maximum 200 m, 15 MW/s
   - **H2**: minimum level 25 m, maximum 100 m, 5 MW/s
   - **H3**: minimum level 10 m, maximum 50 m, 2 MW/s

   Each reservoir starts halfway between its minimum and maximum levels. With no plants at all, the program says so and exits.
2. The probability of no rain, between 0 and 1. If it is not 1, it also asks for the probability of a downpour, between 0 and what is left. The deluge gets the remainder.

If the input ends before every answer has been given, the program reports `Entrada incompleta.` and exits with status 1.

The simulation then runs one turn per pause. Each turn prints the state of every plant and the production figures.

Rain modes:

| Mode     | Duration (turns) | Reservoir increase (m/turn) |
|----------|------------------|-----------------------------|
| No rain  | 5                | 0                           |
| Downpour | 10               | 2                           |
| Deluge   | 5                | 4                           |

While a reservoir is below its maximum level, rain raises it by the
increase. Once it is at or above the maximum, it is set back to the
maximum. When a rain ends, a new one is drawn.

## Library use

- `apagon.lluvia.lluvia_modo(modo, probabilidad)` builds a `Lluvia` for a `ModoLluvia`. The probability is stored as a whole percentage.
- `apagon.central.crear_central_tipo(tipo, central_id)` builds a `Central` of type 1, 2 or 3. Any other type raises `ValueError`.
- `apagon.cli.crear_centrales(cantidad_h1, cantidad_h2, cantidad_h3)` builds the full list of plants, numbered from 1.
- `apagon.cli.pedir_cantidades` and `apagon.cli.pedir_probabilidades` run the questions on any pair of text streams.
- `apagon.sistema_electrico.SistemaElectrico(centrales, probabilidades, rng=None, salida=None)` takes exactly three probabilities. It accepts an optional `random.Random` and an optional output stream.
  - `ejecutar(pausa)` runs the simulation until collapse and returns the number of turns elapsed. It raises `ValueError` when there are no plants.
  - The per-turn steps `turno_central`, `revisar_estado` and `gestionar_centrales` can also be called one at a time.

## Tests

```
pip install .[test]
pytest
```