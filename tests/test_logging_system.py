import logging

from symbolic_expressions import LogLevel, configure_logging, set_log_level, get_logger, make_constant, reduce, make_operator


def test_debug_only_in_verbose(caplog):
    configure_logging(LogLevel.VERBOSE)
    with caplog.at_level(logging.DEBUG, logger="symbolic_expressions"):
        reduce(make_operator("add", [make_constant(1), make_constant(2)]))
    assert "folded 1 operator node" in caplog.text


def test_silent_suppresses_warnings(caplog):
    set_log_level(LogLevel.SILENT)
    assert get_logger().log_level is LogLevel.SILENT
    with caplog.at_level(logging.DEBUG, logger="symbolic_expressions"):
        make_constant(1).link([make_constant(2)])
    assert caplog.text == ""


def test_log_to_file(tmp_path):
    path = tmp_path / "trees.log"
    logger = configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(path))
    logger.warning("something odd")
    for handler in logger.logger.handlers:
        handler.flush()
    assert "something odd" in path.read_text()
