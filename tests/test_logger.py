import json
import logging

from shared.logger import EntPassLogger


def _close(log):
    for handler in list(log.logger.handlers):
        handler.close()
        log.logger.removeHandler(handler)


def test_json_file_records(tmp_path):
    path = tmp_path / "logs" / "entpass.jsonl"
    log = EntPassLogger(
        "test-json", log_level="INFO", log_file=path, json_logs=True, console_output=False
    )
    with log.operation("sample"):
        log.info("Sampling %d candidates", 100, workers=4)
    log.debug("hidden")
    log.error("outside")
    _close(log)

    first, second = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert first["level"] == "INFO"
    assert first["logger"] == "entpass.test-json"
    assert first["message"] == "Sampling 100 candidates"
    assert first["operation"] == "sample"
    assert first["extra"] == {"workers": 4}
    assert second["message"] == "outside"
    assert "operation" not in second
    assert "extra" not in second


def test_timed_and_plain_file(tmp_path):
    path = tmp_path / "entpass.log"
    log = EntPassLogger("test-plain", log_level="DEBUG", log_file=path, console_output=False)
    with log.timed("entropy sampling"):
        pass
    log.error("done")
    _close(log)

    text = path.read_text(encoding="utf-8")
    assert "Started: entropy sampling" in text
    assert "Completed: entropy sampling" in text
    assert "| ERROR    | entpass.test-plain | done" in text


def test_level_and_handlers():
    log = EntPassLogger("test-level", log_level="error")
    assert log.component == "test-level"
    assert log.logger.level == logging.ERROR
    assert not log.logger.propagate
    assert len(log.logger.handlers) == 1
    # re-binding the component does not stack handlers
    log = EntPassLogger("test-level", log_level="bogus")
    assert log.logger.level == logging.WARNING
    assert len(log.logger.handlers) == 1
    _close(log)
