"""Usage, command-line echo and config rendering.

Every function here is a **pure** function of its arguments: it builds
text and returns it.  Printing is the CLI layer's job.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Sequence

from parseopts.core.conversion import format_value
from parseopts.core.models import OptionKind, ValueBinding

_NAME_COLUMN = 28


def _default_text(binding: ValueBinding) -> str:
    text = format_value(binding.kind, binding.default)
    if binding.kind is OptionKind.STR:
        return f'"{text}"'
    return text


def render_option_line(binding: ValueBinding) -> str:
    """One help line: ``  --name  : description (type, default = X)``."""
    flag = f"--{binding.name}"
    return (
        f"  {flag:<{_NAME_COLUMN}} : {binding.description} "
        f"({binding.kind.value}, default = {_default_text(binding)})"
    )


def render_usage(usage: str, bindings: Iterable[ValueBinding]) -> str:
    """Return *usage* followed by one line per option in registration order."""
    lines = [usage.rstrip("\n"), "", "Options:"]
    lines.extend(render_option_line(binding) for binding in bindings)
    return "\n".join(lines) + "\n"


def render_command_line(prog: str, args: Sequence[str]) -> str:
    """Render the argument vector as received, shell-escaped."""
    return " ".join(shlex.quote(part) for part in (prog, *args))


def render_config(bindings: Iterable[ValueBinding]) -> str:
    """Render current values of non-implicit options as config-file lines.

    Every line reads back with ``--config`` to the same value.  ``#`` is
    escaped as ``\\#``.  A value the line format cannot hold (one with a
    line break, or leading/trailing whitespace) is written as a comment
    instead, so reading the output back leaves that option untouched.
    """
    lines = []
    for binding in bindings:
        if binding.implicit:
            continue
        text = format_value(binding.kind, binding.slot.get())
        if not _fits_on_config_line(text):
            lines.append(
                f"# --{binding.name}: value not representable in a config "
                "file (line break or surrounding whitespace)"
            )
            continue
        lines.append(f"--{binding.name}=" + text.replace("#", "\\#"))
    return "\n".join(lines) + ("\n" if lines else "")


def _fits_on_config_line(text: str) -> bool:
    return len(text.splitlines()) <= 1 and text == text.strip()
