"""Entry point wiring for ``python -m datafilter`` and the console script."""

import runpy

import pytest
from pytest_mock import MockerFixture

import datafilter.ui.cli as cli


def test_module_runs_cli_main_and_exits_with_its_status(mocker: MockerFixture) -> None:
    """Running the package as a module exits with the status ``main`` returns."""
    main = mocker.patch.object(cli, "main", return_value=0)

    with pytest.raises(SystemExit) as exc_info:
        _ = runpy.run_module("datafilter", run_name="__main__")

    assert exc_info.value.code == 0
    main.assert_called_once_with()


def test_console_script_target_is_callable() -> None:
    """``datafilter = datafilter.ui.cli:main`` resolves to a callable."""
    assert callable(cli.main)
