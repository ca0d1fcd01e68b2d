"""Helpers for reporting library errors through Typer."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer

from .core.params import InvalidShingleParameters


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param: Any = None,
    param_hint: Optional[str] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter` forwarding only the given context."""

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param is not None:
        kwargs["param"] = param
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    raise typer.BadParameter(message, **kwargs)


def invalid_window(exc: InvalidShingleParameters, *, ctx: Optional[typer.Context] = None) -> NoReturn:
    """Report a rejected size or step against the option it came from.

    ``size[0]`` maps to ``--width`` and ``size[1]`` to ``--height``; the
    step pair maps to ``--step-x``/``--step-y`` the same way.
    """

    hints = {
        "size": "--size",
        "step": "--step",
        "size[0]": "--width",
        "size[1]": "--height",
        "step[0]": "--step-x",
        "step[1]": "--step-y",
    }
    bad_parameter(str(exc), ctx=ctx, param_hint=hints.get(exc.name, exc.name))
