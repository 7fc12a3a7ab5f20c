"""Command-line tokenisation.

Grammar
-------
* A token starting with ``--`` is an option token.
* The first token that does not start with ``--`` ends the option
  region; it and everything after it are positional, verbatim.
* An option token is ``--name`` or ``--name=value`` where *value* is
  everything after the first ``=``.
* *name* must match ``[A-Za-z0-9-]+``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from parseopts.core.models import OptionToken
from parseopts.exceptions import MalformedOptionError

OPTION_PREFIX = "--"

NAME_RE = re.compile(r"[A-Za-z0-9-]+")


def is_option(token: str) -> bool:
    """Return ``True`` when *token* belongs to the option region."""
    return token.startswith(OPTION_PREFIX)


def split_args(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *args* into ``(option_tokens, positional)``.

    Tokens are returned raw; decoding happens in
    :func:`parse_option_token` so that callers can inspect the option
    region before any token is validated.
    """
    for index, token in enumerate(args):
        if not is_option(token):
            return list(args[:index]), list(args[index:])
    return list(args), []


def parse_option_token(text: str) -> OptionToken:
    """Decode ``--name`` / ``--name=value``.

    Raises
    ------
    MalformedOptionError
        When *text* lacks the ``--`` prefix, or the name is empty or
        contains characters outside ``[A-Za-z0-9-]``.
    """
    if not is_option(text):
        raise MalformedOptionError(
            f"Invalid option {text!r}: options must start with '--'.",
        )
    body = text[len(OPTION_PREFIX):]
    name, sep, value = body.partition("=")
    if not name:
        raise MalformedOptionError(
            f"Invalid option {text!r}: missing option name.",
            hint="Options are written as --name=value or --name.",
        )
    if NAME_RE.fullmatch(name) is None:
        raise MalformedOptionError(
            f"Invalid option {text!r}: names may only contain letters, "
            "digits and '-'.",
        )
    return OptionToken(name=name, value=value if sep else None)
