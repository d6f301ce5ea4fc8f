# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from io import StringIO

import pytest

from funkit.logging import (
    StructuredLogger,
    _coerce_level,
    _JsonFormatter,
    _TextFormatter,
    configure_logging,
    get_logger,
)


class _CaptureHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@contextmanager
def _capture(logger: logging.Logger) -> Iterator[list[logging.LogRecord]]:
    handler = _CaptureHandler()
    logger.addHandler(handler)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in original_handlers:
                handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)


def test_structured_logger_emits_structured_records() -> None:
    logger = get_logger("tests.logging").bind(component="unit-test")
    base_logger = logger.logger
    base_logger.setLevel(logging.INFO)

    with _capture(base_logger) as records:
        logger.info("structured", event="tests.event", context={"attempt": 1})

    assert len(records) == 1
    record = records[0]
    assert record.getMessage() == "structured"
    assert getattr(record, "event") == "tests.event"
    assert getattr(record, "context") == {"component": "unit-test", "attempt": 1}


def test_event_can_come_from_extra() -> None:
    logger = get_logger("tests.logging.extra")
    logger.logger.setLevel(logging.INFO)

    with _capture(logger.logger) as records:
        logger.info("via extra", extra={"event": "tests.extra", "detail": "x"})

    assert getattr(records[0], "event") == "tests.extra"
    assert getattr(records[0], "context") == {"detail": "x"}


def test_missing_event_is_rejected() -> None:
    logger = get_logger("tests.logging.missing")
    logger.logger.setLevel(logging.INFO)

    with pytest.raises(TypeError, match="'event'"):
        logger.info("no event")


def test_non_mapping_context_is_rejected() -> None:
    logger = get_logger("tests.logging.context")
    logger.logger.setLevel(logging.INFO)

    with pytest.raises(TypeError, match="context must be a mapping"):
        logger.info("bad", event="tests.bad", context=["not", "a", "mapping"])


def test_get_logger_layers_context_over_override() -> None:
    base = get_logger("tests.logging.base", context={"a": 1, "b": 1})

    layered = get_logger("ignored", logger_override=base, context={"b": 2})

    assert isinstance(layered, StructuredLogger)
    assert layered.logger is base.logger
    assert layered.extra == {"a": 1, "b": 2}


def test_get_logger_accepts_plain_logger_override() -> None:
    plain = logging.getLogger("tests.logging.plain")

    assert get_logger("ignored", logger_override=plain).logger is plain


def test_configure_logging_json_mode_emits_json() -> None:
    configure_logging(level="DEBUG", json_mode=True, force=True)
    root = logging.getLogger()
    stream = StringIO()
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, _JsonFormatter)
    handler.setStream(stream)  # pyright: ignore[reportUnknownMemberType]

    get_logger("tests.logging.json").debug(
        "hello", event="tests.json", context={"n": 1}
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "DEBUG"
    assert payload["event"] == "tests.json"
    assert payload["context"] == {"n": 1}
    assert payload["message"] == "hello"


def test_configure_logging_reads_environment() -> None:
    configure_logging(
        env={"FUNKIT_LOG_LEVEL": "warning", "FUNKIT_LOG_FORMAT": "text"}, force=True
    )
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, _TextFormatter)


def test_configure_logging_keeps_existing_handlers_without_force() -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.handlers = [sentinel]

    configure_logging(level=logging.ERROR, env={})

    assert root.handlers == [sentinel]
    assert root.level == logging.ERROR


def test_text_formatter_tolerates_plain_records() -> None:
    formatter = _TextFormatter("%(event)s %(message)s %(context)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)

    assert formatter.format(record) == "- plain {}"


def test_coerce_level() -> None:
    assert _coerce_level(10) == logging.DEBUG
    assert _coerce_level("info") == logging.INFO
    with pytest.raises(TypeError, match="Unknown log level"):
        _coerce_level("loud")
