"""Run the formatters, linter and type checker configured in ``pyproject.toml``."""

import pathlib
import subprocess
import sys
import tomllib
from typing import Iterable, List, Tuple

import pytest

Command = Tuple[str, ...]
StyleCheck = Tuple[str, Command]

REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent
PATHS: Tuple[str, ...] = ("src", "tests")
MYPY_TARGETS: Tuple[str, ...] = (
    "src/radial_knob/utils",
    "src/radial_knob/interaction",
    "src/radial_knob/render",
)
# flake8 does not read pyproject.toml, so its settings are passed on the CLI
FLAKE8_OPTION_KEYS: Tuple[Tuple[str, str], ...] = (
    ("max-line-length", "--max-line-length"),
    ("extend-ignore", "--extend-ignore"),
    ("exclude", "--exclude"),
)


def _python_module(module: str, *args: str) -> Command:
    return (sys.executable, "-m", module, *args)


def _flake8_cli_args() -> Tuple[str, ...]:
    with (REPO_ROOT / "pyproject.toml").open("rb") as config_file:
        config = tomllib.load(config_file)

    section = config.get("tool", {}).get("flake8", {})
    args: List[str] = []
    for key, option in FLAKE8_OPTION_KEYS:
        value = section.get(key)
        if value is None:
            continue
        if isinstance(value, list):
            value = ",".join(str(item) for item in value)
        args.append(f"{option}={value}")
    return tuple(args)


CHECKS: Tuple[StyleCheck, ...] = (
    ("black", _python_module("black", "--check", "--diff", *PATHS)),
    ("isort", _python_module("isort", "--check-only", "--diff", *PATHS)),
    ("flake8", _python_module("flake8", *_flake8_cli_args(), *PATHS)),
    ("mypy", _python_module("mypy", *MYPY_TARGETS)),
)


def test_flake8_reads_line_length() -> None:
    assert "--max-line-length=88" in _flake8_cli_args()


@pytest.mark.parametrize(
    ("name", "command"),
    CHECKS,
    ids=[check[0] for check in CHECKS],
)
def test_code_style(name: str, command: Command) -> None:
    """Run ``name`` and fail with its report on any violation."""
    result = subprocess.run(
        command,
        cwd=REPO_ROOT,
        check=False,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        details: Iterable[str] = [
            f"command: {' '.join(command)}",
            f"exit code: {result.returncode}",
            result.stdout.strip(),
            result.stderr.strip(),
        ]
        pytest.fail("\n\n".join(filter(None, details)))
