from infix_algebra import parse, simplify, derivative, SymPyConverter
from infix_algebra.expression_tree.utils import simplifier
from infix_algebra.logging_system import (
  LogLevel, AlgebraLogger, configure_logging, set_log_level, get_logger, is_enabled, log_info
)


def test_verbose_level_traces_core_operations(tmp_path):
  log_file = tmp_path / "algebra.log"
  configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))

  derivative(parse("x^2"), "x")

  content = log_file.read_text()
  assert "parsed 'x^2' -> (x^2)" in content
  assert "d/dx (x^2)" in content
  assert "simplified" in content


def test_default_level_hides_debug_traces(tmp_path):
  log_file = tmp_path / "algebra.log"
  configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(log_file))

  simplify(parse("x+x"))
  simplify(parse("x*0"))

  content = log_file.read_text()
  assert "DEBUG" not in content
  assert "sum to zero" in content


def test_silent_level_suppresses_warnings(caplog):
  set_log_level(LogLevel.SILENT)
  simplify(parse("x*0"))
  assert not any("sum to zero" in record.getMessage() for record in caplog.records)


def test_get_logger_returns_configured_instance():
  logger = configure_logging(LogLevel.MODERATE)
  assert get_logger() is logger
  assert isinstance(logger, AlgebraLogger)
  set_log_level(LogLevel.DETAILED)
  assert get_logger().log_level is LogLevel.DETAILED


def test_result_summary(tmp_path):
  log_file = tmp_path / "summary.log"
  logger = configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(log_file))
  logger.result_summary({'expression': '(2*x)', 'value': 1.5})
  content = log_file.read_text()
  assert "(2*x)" in content
  assert "1.500000" in content


def test_is_enabled_follows_the_level():
  configure_logging(LogLevel.MINIMAL)
  assert is_enabled(LogLevel.MINIMAL)
  assert not is_enabled(LogLevel.VERBOSE)
  set_log_level(LogLevel.VERBOSE)
  assert is_enabled(LogLevel.DETAILED)


def test_traces_are_not_built_below_verbose(monkeypatch):
  calls = []
  monkeypatch.setattr(simplifier, 'log_debug', calls.append)

  simplify(parse("x+x"))
  assert calls == []

  set_log_level(LogLevel.VERBOSE)
  simplify(parse("x+x"))
  assert calls == ["simplified (x+x) -> (2*x)"]


def test_detailed_level_reports_canonical_simplification(tmp_path):
  log_file = tmp_path / "detailed.log"
  configure_logging(LogLevel.DETAILED, log_to_file=True, log_file_path=str(log_file))

  SymPyConverter().canonical_simplify(parse("((x*x)-(x*x))+y"))
  log_info("finished", LogLevel.VERBOSE)

  content = log_file.read_text()
  assert "canonical simplify" in content
  assert "finished" not in content
