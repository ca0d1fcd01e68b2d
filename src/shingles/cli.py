"""Command line interface for shingles using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import json
import logging

import typer
import yaml
from pydantic import ValidationError

from ._typer import bad_parameter, invalid_window
from .config import Settings, load_settings
from .core import (
    ElementShingles,
    InvalidShingleParameters,
    TextShingles,
    TextShingles2D,
)
from .utils.logging import get_logger
from .utils.text import split_rows

app = typer.Typer(help="Print shingles of text, numbers and text grids")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            bad_parameter(f"invalid JSON override value: {raw}", param_hint="--set")
    return raw


def _apply_overrides(settings: Settings, overrides: Iterable[str]) -> Settings:
    """Return a copy of *settings* with ``section.key=value`` overrides."""

    data: Dict[str, Any] = settings.model_dump()
    for override in overrides:
        if "=" not in override:
            bad_parameter("overrides must be of the form --set section.key=value", param_hint="--set")
        key, raw_value = override.split("=", 1)
        if not key:
            bad_parameter("override key cannot be empty", param_hint="--set")
        keys = key.split(".")
        target = data
        for part in keys[:-1]:
            target = target.get(part) if isinstance(target, dict) else None
            if not isinstance(target, dict):
                bad_parameter(f"unknown configuration key: {key}", param_hint="--set")
        if keys[-1] not in target:
            bad_parameter(f"unknown configuration key: {key}", param_hint="--set")
        # string fields such as hex keys are taken verbatim
        if isinstance(target[keys[-1]], str):
            target[keys[-1]] = raw_value
        else:
            target[keys[-1]] = _parse_override_value(raw_value)
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        bad_parameter(f"invalid configuration override: {exc}", param_hint="--set")


def _emit(lines: Iterable[str]) -> int:
    count = 0
    for line in lines:
        typer.echo(line)
        count += 1
    return count


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. window.size=5",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        bad_parameter(f"configuration file not found: {config}", param_hint="--config")

    try:
        settings = load_settings(config) if config else Settings()
    except (OSError, TypeError, ValidationError, json.JSONDecodeError, yaml.YAMLError) as exc:
        bad_parameter(f"failed to load configuration: {exc}", param_hint="--config")

    if set_overrides:
        settings = _apply_overrides(settings, set_overrides)

    get_logger("shingles", settings.logging.level, settings.logging.format)
    ctx.obj = settings


@app.command()
def text(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Text to shingle."),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Characters per shingle."),
    step: Optional[int] = typer.Option(None, "--step", "-s", help="Characters between shingle starts."),
    hashes: bool = typer.Option(False, "--hashes", help="Print hash values instead of shingles."),
) -> None:
    """Print the character shingles of VALUE, one per line."""

    cfg: Settings = ctx.obj
    size = cfg.window.size if size is None else size
    step = cfg.window.step if step is None else step
    try:
        shingles = TextShingles(value, size, step)
    except InvalidShingleParameters as exc:
        invalid_window(exc, ctx=ctx)

    if hashes:
        lines = map(str, shingles.hashes(cfg.hasher.key_bytes, cfg.hasher.digest_size))
    else:
        lines = map(str, shingles)
    count = _emit(lines)
    logger.debug("text: %d shingles of size %d, step %d", count, size, step)


@app.command()
def numbers(
    ctx: typer.Context,
    values: List[int] = typer.Argument(..., help="Integers to shingle."),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Elements per shingle."),
    step: Optional[int] = typer.Option(None, "--step", "-s", help="Elements between shingle starts."),
    hashes: bool = typer.Option(False, "--hashes", help="Print hash values instead of shingles."),
) -> None:
    """Print the element shingles of VALUES, one per line."""

    cfg: Settings = ctx.obj
    size = cfg.window.size if size is None else size
    step = cfg.window.step if step is None else step
    try:
        shingles = ElementShingles(values, size, step)
    except InvalidShingleParameters as exc:
        invalid_window(exc, ctx=ctx)

    if hashes:
        lines = map(str, shingles.hashes(cfg.hasher.key_bytes, cfg.hasher.digest_size))
    else:
        lines = (" ".join(map(str, window)) for window in shingles)
    count = _emit(lines)
    logger.debug("numbers: %d shingles of size %d, step %d", count, size, step)


@app.command()
def grid(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Text whose rows form the grid."),
    width: Optional[int] = typer.Option(None, "--width", help="Characters per row of a shingle."),
    height: Optional[int] = typer.Option(None, "--height", help="Rows per shingle."),
    step_x: Optional[int] = typer.Option(None, "--step-x", help="Characters between shingle starts."),
    step_y: Optional[int] = typer.Option(None, "--step-y", help="Rows dropped when a row block is exhausted."),
    row_sep: str = typer.Option("\n", "--row-sep", help="Separator between rows of VALUE."),
    hashes: bool = typer.Option(False, "--hashes", help="Print hash values instead of shingles."),
) -> None:
    """Print the 2D shingles of the rows of VALUE.

    Each shingle is printed on one line with its row parts separated by
    ``" | "``.
    """

    cfg: Settings = ctx.obj
    size = [
        cfg.window_2d.size[0] if width is None else width,
        cfg.window_2d.size[1] if height is None else height,
    ]
    step = [
        cfg.window_2d.step[0] if step_x is None else step_x,
        cfg.window_2d.step[1] if step_y is None else step_y,
    ]
    if not row_sep:
        bad_parameter("row separator cannot be empty", ctx=ctx, param_hint="--row-sep")
    rows = split_rows(value, row_sep)
    try:
        shingles = TextShingles2D(rows, size, step)
    except InvalidShingleParameters as exc:
        invalid_window(exc, ctx=ctx)

    if hashes:
        lines = map(str, shingles.hashes(cfg.hasher.key_bytes, cfg.hasher.digest_size))
    else:
        lines = (" | ".join(map(str, window)) for window in shingles)
    count = _emit(lines)
    logger.debug("grid: %d shingles over %d rows, size %s, step %s", count, len(rows), size, step)


def main() -> None:  # pragma: no cover - console entry point
    app()
