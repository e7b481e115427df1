import os

import pytest

from filecopy.__main__ import (
    filecopy_parser,
    main,
    main_mmap,
    parse_arguments,
    program_name_from,
)
from filecopy.config import CopyConfig
from filecopy.exceptions import UsageError


def write_text(path, content):
    with open(path, "w", encoding="utf-8") as fout:
        fout.write(content)


def read_text(path):
    with open(path, encoding="utf-8") as fin:
        return fin.read()


@pytest.fixture(params=[main, main_mmap], ids=["filecopy", "filecopy-mmap"])
def entry_point(request):
    return request.param


@pytest.mark.usefixtures("use_tmpdir")
def test_copy_into_directory(entry_point, capsys):
    write_text("a.txt", "hello")
    os.mkdir("tmp")

    entry_point(["filecopy", "a.txt", "tmp/"])

    assert read_text("tmp/a.txt") == "hello"
    assert capsys.readouterr().err == ""


@pytest.mark.usefixtures("use_tmpdir")
def test_copy_to_itself_fails(entry_point, capsys):
    write_text("a.txt", "hello")

    with pytest.raises(SystemExit) as exit_info:
        entry_point(["filecopy", "a.txt", "a.txt"])

    assert exit_info.value.code == 1
    assert capsys.readouterr().err == (
        "filecopy: source and target are the same file\n"
    )
    assert read_text("a.txt") == "hello"


@pytest.mark.usefixtures("use_tmpdir")
def test_copy_of_missing_source_fails(capsys):
    with pytest.raises(SystemExit) as exit_info:
        main(["filecopy", "missing.txt", "out.txt"])

    assert exit_info.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("filecopy: source is not a regular file: ")
    assert err.count("\n") == 1
    assert not os.path.exists("out.txt")


@pytest.mark.usefixtures("use_tmpdir")
def test_copy_to_empty_target_fails(capsys):
    write_text("a.txt", "hello")

    with pytest.raises(SystemExit) as exit_info:
        main(["filecopy", "a.txt", ""])

    assert exit_info.value.code == 1
    assert capsys.readouterr().err == "filecopy: target path is invalid\n"


@pytest.mark.usefixtures("use_tmpdir")
def test_that_io_errors_name_the_failing_operation(capsys):
    write_text("a.txt", "hello")

    with pytest.raises(SystemExit) as exit_info:
        main(["filecopy", "a.txt", "missing/b.txt"])

    assert exit_info.value.code == 1
    assert capsys.readouterr().err == (
        f"filecopy: target open error: {os.strerror(2)}\n"
    )


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["a.txt"],
        ["a.txt", "b.txt", "c.txt"],
        ["--help"],
        ["--", "a.txt", "b.txt"],
    ],
)
def test_wrong_arguments_print_usage(args, capsys):
    with pytest.raises(SystemExit) as exit_info:
        main(["/usr/local/bin/filecopy", *args])

    assert exit_info.value.code == 1
    assert capsys.readouterr().err == "usage: filecopy source target\n"


def test_that_program_name_is_taken_from_argv(capsys):
    with pytest.raises(SystemExit):
        main(["/opt/bin/tcp"])
    assert capsys.readouterr().err == "usage: tcp source target\n"


@pytest.mark.usefixtures("use_tmpdir")
def test_that_diagnostics_use_program_name(capsys):
    with pytest.raises(SystemExit):
        main(["tcp", "missing.txt", "out.txt"])
    assert capsys.readouterr().err.startswith("tcp: source is not a regular file")


@pytest.mark.usefixtures("use_tmpdir")
def test_that_diagnostics_use_configured_program_name(monkeypatch, capsys):
    def configured(program_name, strategy):
        return CopyConfig(program_name="configured", strategy=strategy)

    monkeypatch.setattr("filecopy.__main__.CopyConfig", configured)
    with pytest.raises(SystemExit):
        main(["tcp", "missing.txt", "out.txt"])
    assert capsys.readouterr().err.startswith(
        "configured: source is not a regular file"
    )


@pytest.mark.usefixtures("use_tmpdir")
@pytest.mark.parametrize("program", ["", "bin/", " "])
def test_that_copy_runs_when_program_name_is_empty(program, capsys):
    write_text("a.txt", "hello")

    main([program, "a.txt", "b.txt"])

    assert read_text("b.txt") == "hello"
    assert capsys.readouterr().err == ""


@pytest.mark.usefixtures("use_tmpdir")
def test_that_empty_program_name_falls_back_in_diagnostics(capsys):
    with pytest.raises(SystemExit):
        main(["", "missing.txt", "out.txt"])
    assert capsys.readouterr().err.startswith(
        "filecopy: source is not a regular file"
    )


@pytest.mark.usefixtures("use_tmpdir")
@pytest.mark.parametrize("source", ["-a.txt", "--a.txt", "-"])
def test_that_source_starting_with_dash_is_copied(entry_point, source):
    write_text(source, "hello")

    entry_point(["filecopy", source, "b.txt"])

    assert read_text("b.txt") == "hello"


@pytest.mark.usefixtures("use_tmpdir")
@pytest.mark.parametrize("target", ["--", "-b.txt", "--help"])
def test_that_target_starting_with_dash_is_written(entry_point, target):
    write_text("a.txt", "hello")

    entry_point(["filecopy", "a.txt", target])

    assert read_text(target) == "hello"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["filecopy", "a.txt", "b.txt"], ("a.txt", "b.txt")),
        (["filecopy", "-v", "--"], ("-v", "--")),
    ],
)
def test_that_exactly_two_arguments_are_taken_as_given(argv, expected):
    assert parse_arguments(argv) == expected


@pytest.mark.parametrize("argv", [[], ["filecopy"], ["filecopy", "-v", "a", "b"]])
def test_that_other_argument_counts_raise_usage_error(argv):
    with pytest.raises(UsageError, match="expected 2 arguments"):
        parse_arguments(argv)


def test_that_parser_formats_usage_line():
    assert filecopy_parser("tcp").format_usage() == "usage: tcp source target\n"


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], "filecopy"),
        (["/usr/bin/tcp"], "tcp"),
        ([""], "filecopy"),
        (["dir/"], "filecopy"),
    ],
)
def test_program_name_from_argv(argv, expected):
    assert program_name_from(argv) == expected


def test_main_uses_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["filecopy"])
    with pytest.raises(SystemExit) as exit_info:
        main()
    assert exit_info.value.code == 1
    assert capsys.readouterr().err == "usage: filecopy source target\n"
