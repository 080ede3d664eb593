"""Unit tests for the argument parser module in the lstree CLI."""

import argparse
from pathlib import Path

import pytest

from lstree.cli.argparser import create_parser, positive_int, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.directory == Path(".")
    assert args.max_leaf is None
    assert args.ignore == []
    assert args.ignore_file == ".gitignore"
    assert args.format == "text"
    assert args.output is None
    assert args.summary is False
    assert args.summary_dest == "stdout"
    assert args.verbose is False


def test_all_options(parser):
    args = parser.parse_args(
        [
            "-m",
            "10",
            "-i",
            "*.log",
            "--ignore",
            "tmp/",
            "--ignore-file",
            ".dockerignore",
            "-f",
            "json",
            "-o",
            "tree.json",
            "-s",
            "--summary-dest",
            "stderr",
            "-v",
            "/srv/project",
        ]
    )

    assert args.directory == Path("/srv/project")
    assert args.max_leaf == 10
    assert args.ignore == ["*.log", "tmp/"]
    assert args.ignore_file == ".dockerignore"
    assert args.format == "json"
    assert args.output == Path("tree.json")
    assert args.summary is True
    assert args.summary_dest == "stderr"
    assert args.verbose is True


def test_summary_flag_does_not_consume_directory(parser):
    args = parser.parse_args(["-s", "project"])

    assert args.summary is True
    assert args.directory == Path("project")


@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_invalid_max_leaf_is_usage_error(parser, value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-m", value])

    assert excinfo.value.code == 2
    assert "--max-leaf" in capsys.readouterr().err


def test_invalid_format(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-f", "xml"])

    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("lstree ")


def test_positive_int():
    assert positive_int("7") == 7
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("1.5")


def test_validate_args_summary_file_requires_output(parser):
    args = parser.parse_args(["-s", "--summary-dest", "file"])

    with pytest.raises(ValueError, match="requires -o/--output"):
        validate_args(args)


def test_validate_args_summary_dest_ignored_without_summary(parser):
    validate_args(parser.parse_args(["--summary-dest", "file"]))


def test_validate_args_ignore_file_must_be_plain_name(parser):
    with pytest.raises(ValueError, match="--ignore-file"):
        validate_args(parser.parse_args(["--ignore-file", "sub/.gitignore"]))


def test_validate_args_accepts_valid_combination(parser):
    validate_args(parser.parse_args(["-s", "--summary-dest", "file", "-o", "out.txt"]))
