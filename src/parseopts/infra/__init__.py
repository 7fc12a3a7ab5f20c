"""Infrastructure layer — filesystem access for config files.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* OS errors never escape; they become typed parseopts exceptions.
"""

from parseopts.infra.config_reader import load_config, read_config_text

__all__: list[str] = [
    "load_config",
    "read_config_text",
]
