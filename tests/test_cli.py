import io

from mtrcheck.cli import main, run
from mtrcheck.errors import ExitCode


def _run(argv):
    out = io.StringIO()
    code = run(argv, out)
    return code, out.getvalue()


def test_wrong_argument_count():
    code, output = _run(["info"])
    assert code == ExitCode.INVALID_NUMBER_OF_ARGUMENTS
    assert output.startswith("use ")
    assert "<log_level:info|warning|error> <test_dir> [<result_dir>]" in output


def test_too_many_arguments(tmp_path):
    code, _ = _run(["info", str(tmp_path), str(tmp_path), "extra"])
    assert code == ExitCode.INVALID_NUMBER_OF_ARGUMENTS


def test_invalid_log_level(tmp_path):
    code, output = _run(["verbose", str(tmp_path)])
    assert code == ExitCode.INVALID_LOG_LEVEL
    assert output == 'invalid log level "verbose"\n'


def test_missing_tests_path(tmp_path):
    missing = tmp_path / "missing"
    code, output = _run(["info", str(missing)])
    assert code == ExitCode.PATH_DOES_NOT_EXIST
    assert output == f'"{missing}" does not exist\n'


def test_tests_path_is_file(tmp_path):
    target = tmp_path / "a.test"
    target.write_text("x")
    code, output = _run(["info", str(target)])
    assert code == ExitCode.PATH_IS_NOT_A_DIRECTORY
    assert "is not a directory" in output


def test_missing_results_path(tmp_path):
    code, _ = _run(["info", str(tmp_path), str(tmp_path / "nope")])
    assert code == ExitCode.PATH_DOES_NOT_EXIST


def test_success_combined(tmp_path):
    (tmp_path / "a.test").write_text("x")
    (tmp_path / "a.result").write_text("y")
    code, output = _run(["info", str(tmp_path)])
    assert code == ExitCode.SUCCESS
    assert output == '[info]: verified test case "a": [ test, result ]\n'


def test_same_results_path_means_combined(tmp_path):
    (tmp_path / "a.test").write_text("x")
    (tmp_path / "a.result").write_text("y")
    code, output = _run(["warning", str(tmp_path), str(tmp_path)])
    assert code == ExitCode.SUCCESS
    assert output == ""


def test_separate_results_directory(tmp_path):
    tests = tmp_path / "t"
    results = tmp_path / "r"
    tests.mkdir()
    results.mkdir()
    (tests / "a.test").write_text("x")
    (results / "a.result").write_text("y")
    code, output = _run(["info", str(tests), str(results)])
    assert code == ExitCode.SUCCESS
    assert "verified test case" in output


def test_main_returns_code(tmp_path, capsys):
    code = main(["error", str(tmp_path / "absent")])
    assert code == ExitCode.PATH_DOES_NOT_EXIST
    assert "does not exist" in capsys.readouterr().out