"""Pure tokenisation of config-file text.

Format
------
* One option per line, written exactly as on the command line
  (``--name=value`` or ``--name``).
* ``#`` starts a comment that runs to the end of the line; ``\\#`` is a
  literal ``#``.
* Surrounding whitespace is ignored; blank lines are skipped.
* ``--config`` may not appear inside a config file.
"""

from __future__ import annotations

from parseopts.core.models import OptionToken
from parseopts.core.tokens import parse_option_token
from parseopts.exceptions import MalformedOptionError

CONFIG_OPTION = "config"


def strip_comment(line: str) -> str:
    """Drop everything from the first unescaped ``#``; unescape ``\\#``."""
    out: list[str] = []
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\" and line[i + 1:i + 2] == "#":
            out.append("#")
            i += 2
            continue
        if char == "#":
            break
        out.append(char)
        i += 1
    return "".join(out)


def tokenize_config(text: str, source: str = "<config>") -> list[OptionToken]:
    """Turn config-file *text* into option tokens.

    *source* names the file in error messages.

    Raises
    ------
    MalformedOptionError
        For a line that is not a single valid option token, or that
        tries to include another config file.
    """
    tokens: list[OptionToken] = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = strip_comment(raw_line).strip()
        if not line:
            continue
        try:
            token = parse_option_token(line)
        except MalformedOptionError as exc:
            raise MalformedOptionError(
                f"{source}:{lineno}: {exc}",
                hint="Config files hold one --name=value per line.",
            ) from exc
        if token.name == CONFIG_OPTION:
            raise MalformedOptionError(
                f"{source}:{lineno}: --config cannot be used inside a "
                "config file.",
            )
        tokens.append(token)
    return tokens
