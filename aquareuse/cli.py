# aquareuse/cli.py

from __future__ import annotations

import json
import random
import time
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError

from aquareuse.core.config import settings
from aquareuse.core.logger import setup_logging
from aquareuse.schemas.treatment import WaterQualityParameters
from aquareuse.services.sensors.catalog import default_sensor_states
from aquareuse.services.sensors.simulator import simulate_ticks
from aquareuse.services.treatment.engine import simulate_treatment

app = typer.Typer(help="AquaReuse treatment decision engine")


@app.command("simulate")
def simulate(json_path: str, pretty: bool = True):
    """Evaluate one water-quality sample stored as JSON."""
    setup_logging()
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Cannot read {json_path}: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        params = WaterQualityParameters.model_validate(raw)
    except ValidationError as e:
        typer.echo(f"Invalid parameters in {json_path}:\n{e}", err=True)
        raise typer.Exit(code=1)

    out = simulate_treatment(params)
    print(out.model_dump_json(indent=2 if pretty else None, by_alias=True))


@app.command("sensors")
def sensors(
    ticks: int = typer.Option(10, min=1, help="Number of ticks to simulate"),
    interval: Optional[float] = typer.Option(
        None, min=0.0, help="Seconds between ticks (default: SENSOR_TICK_SEC)"
    ),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible runs"),
):
    """Drive the standard sensor set through a number of simulated ticks."""
    setup_logging()
    rng = random.Random(seed)
    delay = settings.SENSOR_TICK_SEC if interval is None else interval

    states = default_sensor_states()
    for n in range(1, ticks + 1):
        states = simulate_ticks(
            states,
            rng,
            variation=settings.SENSOR_VARIATION,
            capacity=settings.SENSOR_WINDOW_SIZE,
        )
        for s in states:
            logger.debug(f"[tick {n}] {s.id}={s.value}{s.unit} {s.trend.value}/{s.status.value}")
        print(json.dumps({"tick": n, "sensors": [s.model_dump(mode="json", by_alias=True) for s in states]}))

        if n < ticks and delay > 0:
            time.sleep(delay)


if __name__ == "__main__":
    app()
