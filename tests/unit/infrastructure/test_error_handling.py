"""Tests for the exception handler and error middleware."""
import argparse
import json
from unittest.mock import MagicMock

import pytest

from decorum.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    SubjectValidationError,
    TransformTypeError,
    UnknownAttributeError,
    UnknownVariantError,
)
from decorum.infrastructure.error import (
    ErrorCategory,
    ErrorMiddleware,
    ExceptionContext,
    ExceptionHandler,
    get_exception_handler,
    with_error_handling,
)


class TestExceptionHandler:
    """Test exception categorization and error responses."""

    def setup_method(self):
        self.handler = ExceptionHandler()

    @pytest.mark.parametrize(
        "error, category",
        [
            (SubjectValidationError("speaker", {"bass": "missing"}), ErrorCategory.VALIDATION),
            (TransformTypeError("Add", "numeric", "loud"), ErrorCategory.VALIDATION),
            (UnknownAttributeError("treble", "speaker"), ErrorCategory.NOT_FOUND),
            (UnknownVariantError("treble_boost", "decorator"), ErrorCategory.NOT_FOUND),
            (ConfigurationError("bad config"), ErrorCategory.CONFIGURATION),
            (DomainException("other"), ErrorCategory.DOMAIN),
            (RuntimeError("boom"), ErrorCategory.INTERNAL),
        ],
    )
    def test_categorize(self, error, category):
        assert self.handler.categorize(error) is category

    def test_handle_domain_error(self):
        response = self.handler.handle(
            UnknownAttributeError("treble", "speaker"),
            ExceptionContext("get_attribute", layer="domain"),
        )

        assert response.to_dict() == {
            "error": "UNKNOWN_ATTRIBUTE",
            "message": "Unknown attribute 'treble' on speaker",
            "category": "not_found",
            "details": {"attribute": "treble", "kind": "speaker"},
        }

    def test_handle_internal_error(self):
        response = self.handler.handle(RuntimeError("boom"))

        assert response.error_code == "INTERNAL_ERROR"
        assert response.message == "boom"
        assert response.category is ErrorCategory.INTERNAL
        assert response.details == {}

    def test_shared_handler_instance(self):
        assert get_exception_handler() is get_exception_handler()


def test_exception_context_to_dict():
    context = ExceptionContext("chain_build", layer="interface", kind="speaker")

    data = context.to_dict()

    assert data["operation"] == "chain_build"
    assert data["layer"] == "interface"
    assert data["kind"] == "speaker"
    assert "occurred_at" in data
    assert "command" not in data


def test_exception_context_for_command():
    args = argparse.Namespace(
        resource="chain", action="build", kind="speaker", decorators=["cheese"], set=["power=1"]
    )

    context = ExceptionContext.for_command("run", args)

    assert context.layer == "interface"
    assert context.command == "chain build"
    data = context.to_dict()
    assert data["command"] == "chain build"
    assert data["kind"] == "speaker"
    assert data["decorators"] == ["cheese"]
    assert "set" not in data


def test_exception_context_for_command_without_args():
    context = ExceptionContext.for_command("run")

    assert context.command is None
    assert context.to_dict()["operation"] == "run"


class TestErrorMiddleware:
    """Test wrapping handlers with consistent error handling."""

    def test_wrap_handler_passes_results_through(self):
        wrapped = ErrorMiddleware().wrap_handler(lambda x: {"value": x})

        assert wrapped(3) == {"value": 3}

    def test_wrap_handler_returns_error_dict(self):
        def failing():
            raise UnknownVariantError("treble_boost", "decorator")

        result = ErrorMiddleware().wrap_handler(failing)()

        assert result["error"] == "UNKNOWN_VARIANT"
        assert result["category"] == "not_found"

    def test_wrap_handler_keeps_function_metadata(self):
        def chain_build():
            """Build a chain."""

        wrapped = ErrorMiddleware().wrap_handler(chain_build)

        assert wrapped.__name__ == "chain_build"
        assert wrapped.__doc__ == "Build a chain."

    def test_wrap_script_handler_exits_with_json_error(self, capsys):
        def script():
            raise ConfigurationError("Configuration file not found: missing.json")

        with pytest.raises(SystemExit) as exc_info:
            ErrorMiddleware().wrap_script_handler(script)()

        assert exc_info.value.code == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["error"] == "CONFIGURATION_ERROR"
        assert payload["category"] == "configuration"

    def test_with_error_handling_decorator(self):
        @with_error_handling()
        def failing():
            raise RuntimeError("boom")

        assert failing()["error"] == "INTERNAL_ERROR"

    def test_wrap_script_handler_passes_command_context(self, capsys):
        handler = MagicMock(spec=ExceptionHandler)
        handler.handle.return_value = ExceptionHandler().handle(UnknownVariantError("cheese", "decorator"))
        args = argparse.Namespace(resource="chain", action="show", name="supreme")

        def run(parsed):
            raise UnknownVariantError("cheese", "decorator")

        with pytest.raises(SystemExit):
            ErrorMiddleware(handler).wrap_script_handler(run)(args)

        context = handler.handle.call_args[0][1]
        assert context.command == "chain show"
        assert context.details == {"name": "supreme"}
        assert json.loads(capsys.readouterr().out)["error"] == "UNKNOWN_VARIANT"
