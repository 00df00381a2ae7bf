"""Tests for output path, prefix and input operand policy."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from datafilter.features.output import OutputFiles, PathPlanner
from datafilter.shared.errors import ArgumentError, FilesystemSetupError


@pytest.fixture
def planner(tmp_path: Path) -> PathPlanner:
    return PathPlanner(tmp_path)


@pytest.mark.parametrize(
    ("operand", "relative"),
    [
        ("./out", "out"),
        ("/out", "out"),
        ("./some/path", "some/path"),
        ("./some/path/", "some/path"),
        (".\\win\\style", "win/style"),
        ("./with space/and-dash_1.x", "with space/and-dash_1.x"),
    ],
)
def test_relative_output_resolves_under_working_dir(
    planner: PathPlanner, tmp_path: Path, operand: str, relative: str
) -> None:
    assert planner.resolve_output_dir(operand) == (tmp_path / relative).resolve()


def test_parent_relative_output(tmp_path: Path) -> None:
    work = tmp_path / "work"
    work.mkdir()

    assert PathPlanner(work).resolve_output_dir("../out") == (tmp_path / "out").resolve()


def test_drive_letter_output_is_accepted(planner: PathPlanner) -> None:
    resolved = planner.resolve_output_dir("C:/Users/User/some/path")

    assert resolved.is_absolute()
    assert resolved.parts[-3:] == ("User", "some", "path")


@pytest.mark.parametrize(
    "operand",
    ["out", "some/path", "./", ".", "./bad*name", "./a:b", "C:", "~/out", "./semi;colon"],
)
def test_malformed_output_is_rejected(planner: PathPlanner, operand: str) -> None:
    with pytest.raises(ArgumentError, match="Incorrect output path format"):
        _ = planner.resolve_output_dir(operand)


def test_output_is_not_created_during_validation(planner: PathPlanner, tmp_path: Path) -> None:
    _ = planner.resolve_output_dir("./deep/new/dir")

    assert not (tmp_path / "deep").exists()


def test_output_under_a_file_is_not_creatable(planner: PathPlanner, tmp_path: Path) -> None:
    _ = (tmp_path / "blocker").write_text("", encoding="utf-8")

    with pytest.raises(FilesystemSetupError) as excinfo:
        _ = planner.resolve_output_dir("./blocker/sub")

    assert isinstance(excinfo.value.__cause__, NotADirectoryError)


def test_output_permission_failure_is_setup_error(planner: PathPlanner, mocker: MockerFixture) -> None:
    _ = mocker.patch("datafilter.platform.filesystem.os.access", return_value=False)

    with pytest.raises(FilesystemSetupError, match="Unable to create a directory"):
        _ = planner.resolve_output_dir("./locked")


@pytest.mark.parametrize("prefix", ["sample-", "new_", "2024 ", "ünï"])
def test_valid_prefix(planner: PathPlanner, prefix: str) -> None:
    assert planner.validate_prefix(prefix) == prefix


@pytest.mark.parametrize("prefix", ["", "   ", "a/b", "a\\b", "c:", "*", "why?", '"q"', "<", ">", "a|b"])
def test_invalid_prefix(planner: PathPlanner, prefix: str) -> None:
    with pytest.raises(ArgumentError, match="prefix contains invalid characters"):
        _ = planner.validate_prefix(prefix)


def test_resolve_input_existing_file(planner: PathPlanner, tmp_path: Path) -> None:
    _ = (tmp_path / "in1.txt").write_text("1\n", encoding="utf-8")

    assert planner.resolve_input("in1.txt") == tmp_path / "in1.txt"


def test_resolve_input_missing_file_warns(
    planner: PathPlanner, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="datafilter"):
        assert planner.resolve_input("missing.txt") is None

    assert 'The passed input file "missing.txt" does not exist.' in caplog.text


@pytest.mark.parametrize("operand", ["data.csv", "notes.TXT", ".txt", "-x"])
def test_resolve_input_invalid_operand_warns(
    planner: PathPlanner, caplog: pytest.LogCaptureFixture, operand: str
) -> None:
    with caplog.at_level(logging.WARNING, logger="datafilter"):
        assert planner.resolve_input(operand) is None

    assert f'Invalid operand passed "{operand}".' in caplog.text


def test_resolve_input_directory_is_not_an_input(planner: PathPlanner, tmp_path: Path) -> None:
    (tmp_path / "folder.txt").mkdir()

    assert planner.resolve_input("folder.txt") is None


def test_resolve_inputs_keeps_order(planner: PathPlanner, tmp_path: Path) -> None:
    for name in ("b.txt", "a.txt"):
        _ = (tmp_path / name).write_text("", encoding="utf-8")

    resolved = planner.resolve_inputs(["b.txt", "missing.txt", "a.txt", "junk"])

    assert resolved == (tmp_path / "b.txt", tmp_path / "a.txt")


def test_plan_output_files_defaults_to_working_dir(planner: PathPlanner, tmp_path: Path) -> None:
    files = planner.plan_output_files(None, None)

    assert files == OutputFiles(
        integers=tmp_path / "integers.txt",
        floats=tmp_path / "floats.txt",
        strings=tmp_path / "strings.txt",
    )
    assert not any(path.exists() for _, path in files)


def test_plan_output_files_applies_prefix(planner: PathPlanner, tmp_path: Path) -> None:
    out = tmp_path / "out"

    files = planner.plan_output_files(out, "sample-")

    assert [path.name for _, path in files] == [
        "sample-integers.txt",
        "sample-floats.txt",
        "sample-strings.txt",
    ]
    assert all(path.parent == out for _, path in files)
    assert not out.exists()


def test_plan_output_files_rejects_directory_in_the_way(planner: PathPlanner, tmp_path: Path) -> None:
    (tmp_path / "floats.txt").mkdir()

    with pytest.raises(FilesystemSetupError, match="Unable to create a file"):
        _ = planner.plan_output_files(None, None)


def test_plan_output_files_accepts_existing_files(planner: PathPlanner, tmp_path: Path) -> None:
    _ = (tmp_path / "integers.txt").write_text("1\n", encoding="utf-8")

    files = planner.plan_output_files(None, None)

    assert files.integers.read_text(encoding="utf-8") == "1\n"
