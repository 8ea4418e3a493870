"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mailpeek.kernel.errors import (
    ApplicationError,
    AttachmentReadError,
    AttachmentWriteError,
    BaseError,
    BodyWriteError,
    DomainError,
    InfrastructureError,
    NoBodyRenderedError,
    TemplateError,
    UnknownContentTypeError,
    UnresolvedAttachmentReferenceError,
    ViewerOpenError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


class TestDomainErrors:
    def test_unknown_content_type_detail(self) -> None:
        err = UnknownContentTypeError("application/x-nope", attachment="report")
        assert isinstance(err, DomainError)
        assert err.code == "unknown_content_type"
        assert err.detail == {"content_type": "application/x-nope", "attachment": "report"}
        assert "application/x-nope" in err.message
        assert "report" in err.message

    def test_unresolved_reference_is_template_error(self) -> None:
        err = UnresolvedAttachmentReferenceError("logo.png")
        assert isinstance(err, TemplateError)
        assert err.reference == "logo.png"
        assert err.detail == {"reference": "logo.png"}

    def test_no_body_rendered_keeps_context(self) -> None:
        err = NoBodyRenderedError(["text/html"], ["text/plain"])
        assert err.code == "no_body_rendered"
        assert err.content_types == ("text/html",)
        assert err.allowed == ("text/plain",)
        assert err.to_dict()["detail"] == {"content_types": ["text/html"], "allowed": ["text/plain"]}


# ---------------------------------------------------------------------------
# Infrastructure errors
# ---------------------------------------------------------------------------


class TestInfrastructureErrors:
    @pytest.mark.parametrize(
        "err",
        [
            AttachmentReadError("a"),
            AttachmentWriteError("a", "/tmp/a.txt"),
            BodyWriteError("text/html", "/tmp/b.html"),
            ViewerOpenError("/tmp/b.html"),
        ],
    )
    def test_are_infrastructure_errors(self, err: BaseError) -> None:
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, DomainError)

    def test_write_error_detail_has_path(self) -> None:
        err = AttachmentWriteError("report", "/nope/x.pdf", cause=PermissionError("denied"))
        assert err.detail == {"attachment": "report", "path": "/nope/x.pdf"}
        assert isinstance(err.__cause__, PermissionError)

    def test_viewer_open_custom_message(self) -> None:
        err = ViewerOpenError("/tmp/x.html", "no browser")
        assert err.message == "no browser"
        assert err.path == "/tmp/x.html"

    def test_application_error_is_base_error(self) -> None:
        assert issubclass(ApplicationError, BaseError)
