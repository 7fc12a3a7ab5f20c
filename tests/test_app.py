"""Tests for the error boundary and demo program (cli/app.py).

Coverage:
* ``run_program`` maps every outcome to the documented exit code.
* Usage and error text reach stderr.
* The demo program wires groups, config and positional checks together.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from parseopts.cli import exit_codes
from parseopts.cli.app import DecoderOptions, main, run_program
from parseopts.cli.options import ParseOptions
from parseopts.core.slots import Cell
from parseopts.exceptions import DuplicateOptionError, UnknownOptionError


def _exit_code(program: Callable[[Sequence[str] | None], int], argv: list[str]) -> object:
    with pytest.raises(SystemExit) as exc_info:
        run_program(program, argv)
    return exc_info.value.code


# ---------------------------------------------------------------------------
# run_program
# ---------------------------------------------------------------------------

class TestRunProgram:
    def test_returns_main_code(self) -> None:
        assert _exit_code(lambda argv: 3, []) == 3

    def test_help_exits_zero_with_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _exit_code(main, ["--help"])
        assert code == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "Usage:  parseopts-demo" in err
        assert "--max-active" in err

    def test_usage_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _exit_code(main, ["--no-such-option=1", "model"])
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Options:" in err
        assert "Error:" in err
        assert "--no-such-option" in err

    def test_hint_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _exit_code(main, ["--beam", "model"])
        assert code == exit_codes.GENERAL_ERROR
        assert "Hint:" in capsys.readouterr().err

    def test_markup_in_user_text_is_not_interpreted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _exit_code(main, ["--beam=[bold]", "model"])
        assert "[bold]" in capsys.readouterr().err

    def test_programming_error_is_unexpected(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def program(argv: Sequence[str] | None) -> int:
            po = ParseOptions("usage")
            po.register("beam", Cell(1.0), "a")
            po.register("beam", Cell(2.0), "b")
            return exit_codes.SUCCESS

        assert _exit_code(program, []) == exit_codes.UNEXPECTED_ERROR
        assert DuplicateOptionError.__name__ in capsys.readouterr().err

    def test_get_arg_out_of_range_is_unexpected(self) -> None:
        def program(argv: Sequence[str] | None) -> int:
            po = ParseOptions("usage")
            po.read(argv, prog="p")
            po.get_arg(1)
            return exit_codes.SUCCESS

        assert _exit_code(program, ["--print-args=false"]) == exit_codes.UNEXPECTED_ERROR

    def test_keyboard_interrupt(self) -> None:
        def program(argv: Sequence[str] | None) -> int:
            raise KeyboardInterrupt

        assert _exit_code(program, []) == exit_codes.KEYBOARD_INTERRUPT

    def test_usage_error_without_usage_text(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def program(argv: Sequence[str] | None) -> int:
            raise UnknownOptionError("Unknown option --x.")

        assert _exit_code(program, []) == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Options:" not in err
        assert "Unknown option --x." in err


# ---------------------------------------------------------------------------
# Demo program
# ---------------------------------------------------------------------------

class TestDemoMain:
    def test_echoes_config_and_args(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--beam=13.5", "--binary=false", "final.mdl"])
        assert code == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert err.startswith("parseopts-demo --beam=13.5 --binary=false final.mdl\n")
        assert "--beam=13.5\n" in err
        assert "--binary=false\n" in err
        assert "arg 1: final.mdl\n" in err
        assert "output: (stdout)\n" in err

    def test_config_file(
        self,
        write_config: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_config("--max-active=200  # fewer states\n--lattice-beam=6\n")
        code = main(["--print-args=false", f"--config={path}", "in.mdl", "out.lat"])
        assert code == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "--max-active=200\n" in err
        assert "--lattice-beam=6.0\n" in err
        assert "arg 2: out.lat\n" in err
        assert "output: (stdout)" not in err

    def test_wrong_argument_count(self) -> None:
        assert _exit_code(main, ["--print-args=false"]) == exit_codes.GENERAL_ERROR
        assert _exit_code(main, ["--print-args=false", "a", "b", "c"]) == exit_codes.GENERAL_ERROR


class TestDecoderOptions:
    def test_registers_three_options(self) -> None:
        po = ParseOptions("usage")
        po.register_group(DecoderOptions())
        names = [b.name for b in po.options() if not b.implicit]
        assert names == ["beam", "max-active", "lattice-beam"]
