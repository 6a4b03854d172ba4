import logging

import pytest

from fieldbook.services import base
from fieldbook.services.base import BaseService


class _EchoService(BaseService):
    @BaseService.measure_operation("echo")
    def echo(self, value):
        return value

    @BaseService.measure_operation("explode")
    def explode(self):
        raise RuntimeError("boom")


@pytest.fixture
def service(db) -> _EchoService:
    return _EchoService(db)


class TestMeasureOperation:
    def test_returns_wrapped_result(self, service):
        assert service.echo(5) == 5

    def test_slow_operation_logs_warning(self, service, monkeypatch, caplog):
        monkeypatch.setattr(base, "SLOW_OPERATION_SECONDS", -1.0)

        with caplog.at_level(logging.WARNING, logger="_EchoService"):
            service.echo("x")

        assert "Slow operation detected: echo" in caplog.text

    def test_exceptions_propagate(self, service):
        with pytest.raises(RuntimeError, match="boom"):
            service.explode()

    def test_keeps_no_class_level_state(self, service):
        service.echo(1)
        with pytest.raises(RuntimeError):
            service.explode()

        class_state = {
            name: value for name, value in vars(BaseService).items() if not name.startswith("__")
        }
        assert not any(isinstance(value, (dict, list)) for value in class_state.values())


class TestLogOperation:
    def test_context_is_attached_to_record(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="_EchoService"):
            service.log_operation("create_field", field_name="Court", price_per_hour=100)

        record = caplog.records[-1]
        assert record.operation == "create_field"
        assert record.field_name == "Court"
