"""Config-file access.

The only module that touches the filesystem.  Every ``OSError`` or
decoding failure is re-raised as
:class:`~parseopts.exceptions.ConfigNotFoundError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from parseopts.core.config_lines import tokenize_config
from parseopts.core.models import OptionToken
from parseopts.exceptions import ConfigNotFoundError

logger = logging.getLogger(__name__)


def read_config_text(path: str | Path) -> str:
    """Return the UTF-8 text of *path*, without a leading byte-order mark.

    Raises
    ------
    ConfigNotFoundError
        When the file is missing, unreadable, or not valid UTF-8.
    """
    config_path = Path(path)
    if not str(path):
        raise ConfigNotFoundError("--config was given an empty path.")
    try:
        with config_path.open(encoding="utf-8-sig") as handle:
            return handle.read()
    except FileNotFoundError:
        raise ConfigNotFoundError(
            f"Config file '{config_path}' does not exist.",
        ) from None
    except IsADirectoryError:
        raise ConfigNotFoundError(
            f"Config path '{config_path}' is a directory, not a file.",
        ) from None
    except UnicodeDecodeError as exc:
        raise ConfigNotFoundError(
            f"Config file '{config_path}' is not valid UTF-8: {exc.reason}.",
        ) from exc
    except OSError as exc:
        raise ConfigNotFoundError(
            f"Cannot read config file '{config_path}': {exc.strerror}.",
        ) from exc


def load_config(path: str | Path) -> list[OptionToken]:
    """Read *path* and return its option tokens in file order."""
    text = read_config_text(path)
    tokens = tokenize_config(text, source=str(path))
    logger.debug("Loaded %d option(s) from %s", len(tokens), path)
    return tokens
