# tests/integration_tests/test_cli.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Test suite for the run_eval command-line driver

"""Tests for run_eval.main: output and exit status per outcome."""

import pytest
import run_eval
from utils.logger import LogLevel, get_logger


@pytest.fixture(autouse=True)
def restore_log_level():
    """The CLI reconfigures the global logger; put it back afterwards."""
    yield
    get_logger().set_level(LogLevel.WARNING)


@pytest.fixture
def lego_log(caplog):
    """Attach pytest's capture handler to the non-propagating project logger."""
    logger = get_logger().logger
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


def _stdout_lines(capsys):
    return capsys.readouterr().out.strip().splitlines()


class TestRunEvalCli:
    """Test cases for the command-line driver."""

    def test_true_formula_inline(self, capsys, nested_formula):
        code = run_eval.main(["-e", nested_formula])
        assert code == run_eval.EXIT_OK
        assert _stdout_lines(capsys)[-1] == "true"

    def test_false_formula_inline(self, capsys):
        code = run_eval.main(["-e", "exists x in [1, 3]. forall y in [1, 3]. x + y = 4"])
        assert code == run_eval.EXIT_OK
        assert _stdout_lines(capsys)[-1] == "false"

    def test_formula_from_file(self, tmp_path, capsys, basic_formula):
        path = tmp_path / "formula.lego"
        path.write_text(f"# all positive\n{basic_formula}\n", encoding="utf-8")

        code = run_eval.main(["-f", str(path)])
        assert code == run_eval.EXIT_OK
        assert _stdout_lines(capsys)[-1] == "true"

    def test_division_fault_exit_status(self, capsys, lego_log):
        code = run_eval.main(["-e", "0 > 1 && 1 / 0 > 0"])
        assert code == run_eval.EXIT_FAULT
        assert "Error. Division by zero." in lego_log.messages
        out = capsys.readouterr().out
        assert "true" not in out.splitlines()
        assert "false" not in out.splitlines()

    def test_unbound_variable_exit_status(self, lego_log):
        code = run_eval.main(["-e", "x = 0"])
        assert code == run_eval.EXIT_FAULT
        assert any("Variable is not bound" in m for m in lego_log.messages)

    def test_parse_error_exit_status(self, lego_log):
        code = run_eval.main(["-e", "forall x in [1, 2] x = 1"])
        assert code == run_eval.EXIT_PARSE_ERROR
        assert any("Formula parsing error" in m for m in lego_log.messages)

    def test_missing_file_exit_status(self, tmp_path, lego_log):
        code = run_eval.main(["-f", str(tmp_path / "absent.lego")])
        assert code == run_eval.EXIT_FILE_ERROR
        assert any("not found" in m for m in lego_log.messages)

    def test_empty_file_exit_status(self, tmp_path, capsys):
        path = tmp_path / "empty.lego"
        path.write_text("   \n", encoding="utf-8")
        assert run_eval.main(["-f", str(path)]) == run_eval.EXIT_FILE_ERROR

    def test_parse_only_prints_canonical_form(self, capsys):
        code = run_eval.main(["--parse-only", "-e", "forall x in [1,2]. x>0 && x>=1"])
        assert code == run_eval.EXIT_OK
        assert _stdout_lines(capsys) == ["(forall x in [1, 2]. (x > 0 && x >= 1))"]

    def test_verbose_logs_header_and_result(self, capsys, lego_log):
        code = run_eval.main(["-v", "-e", "1 = 1"])
        assert code == run_eval.EXIT_OK
        assert "=== Starting Evaluation ===" in lego_log.messages
        assert ">>> RESULT: true <<<" in lego_log.messages
        assert _stdout_lines(capsys)[-1] == "true"

    def test_debug_logs_quantifier_activity(self, lego_log):
        run_eval.main(["--debug", "-e", "exists x in [1, 3]. x = 2"])
        assert any(r.levelname == "DEBUG" for r in lego_log.records)
        assert any("short-circuited at x=2" in m for m in lego_log.messages)

    def test_source_is_required(self):
        with pytest.raises(SystemExit):
            run_eval.main([])

    def test_file_and_expr_are_exclusive(self, tmp_path):
        with pytest.raises(SystemExit):
            run_eval.main(["-f", str(tmp_path / "a"), "-e", "1 = 1"])
