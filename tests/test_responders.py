"""
Tests for the public responder API.

Value-mode calls return the envelope dict. Transport calls write
through a StarletteTransport and return the DispatchResult.
"""

import json

import pytest

import respond
from respond.application.dispatch import DeliveryOutcome, DispatchResult
from respond.application.responders import Responder
from respond.core.config import Settings
from respond.infrastructure.localizer import CatalogLocalizer
from respond.infrastructure.starlette_transport import StarletteTransport


class TestSuccessResponders:
    """Tests for success and send_success."""

    def test_value_mode(self) -> None:
        assert respond.success({"id": 1}) == {
            "success": True,
            "code": 200,
            "result": {"id": 1},
        }

    def test_value_mode_internal_code_is_a_field(self) -> None:
        body = respond.success("ok", None, "DONE")
        assert body["internalCode"] == "DONE"

    def test_through_transport_uses_transport_status(self) -> None:
        transport = StarletteTransport(status_code=201)
        result = respond.send_success(transport, {"id": 9})

        assert isinstance(result, DispatchResult)
        assert result.outcome is DeliveryOutcome.DELIVERED
        response = transport.to_response()
        assert response.status_code == 201
        assert json.loads(response.body) == {
            "success": True,
            "code": 201,
            "result": {"id": 9},
        }

    def test_non_serializable_result_delivered_via_fallback(self) -> None:
        transport = StarletteTransport()
        result = respond.success({"tags": {"a"}}, transport)

        assert result.outcome is DeliveryOutcome.DELIVERED_VIA_FALLBACK
        body = json.loads(transport.to_response().body)
        assert body["success"] is True
        assert body["result"] == {"tags": "{'a'}"}

    def test_non_finite_result_delivered_as_valid_json(self) -> None:
        transport = StarletteTransport()
        result = respond.success({"ratio": float("nan")}, transport)

        assert result.outcome is DeliveryOutcome.DELIVERED_VIA_FALLBACK
        body = json.loads(transport.to_response().body, parse_constant=pytest.fail)
        assert body["result"] == {"ratio": None}

    def test_unreadable_transport_status_does_not_raise(self) -> None:
        class BrokenTransport(StarletteTransport):
            @property
            def status_code(self) -> int:
                raise RuntimeError("stream destroyed")

        transport = BrokenTransport()
        result = respond.success("ok", transport)

        assert isinstance(result, DispatchResult)
        assert result.payload["code"] == 200
        assert result.outcome is DeliveryOutcome.DELIVERED


class TestErrorResponders:
    """Tests for the respond.error namespace."""

    @pytest.mark.parametrize(
        ("name", "status", "message"),
        [
            ("forbidden", 403, "You do not have access privileges to view this content."),
            ("access_denied", 403, "You do not have access privileges to view this content."),
            ("socket_not_allowed", 403, "This API cannot be accessed via sockets; please use XHR."),
            ("xhr_not_allowed", 403, "This API cannot be accessed via XHR; please use sockets."),
            ("not_found", 404, "Resource Not Found"),
            ("login_required", 401, "Login Required"),
            ("login_invalidated", 401, "Login Invalidated"),
            ("server_error", 500, "The server has encountered an error. Please try again, or contact support."),
            ("disabled", 500, "This feature is currently disabled."),
            ("localhost_not_supported", 500, "Localhost cannot support this request."),
            ("not_implemented", 501, "This API has not been implemented yet, but is reserved for future use."),
        ],
    )
    def test_fixed_kinds_value_mode(self, name: str, status: int, message: str) -> None:
        body = getattr(respond.error, name)()
        assert body == {"success": False, "reason": message, "code": status}

    def test_item_not_found(self) -> None:
        body = respond.error.item_not_found("Widget")
        assert body["reason"] == '"Widget" Not Found'
        assert body["code"] == 404

    def test_param_required_with_error_code(self) -> None:
        body = respond.error.param_required("email", None, None, 422)
        assert body["reason"] == '"email" is a required parameter.'
        assert body["code"] == 422

    def test_param_invalid(self) -> None:
        assert respond.error.param_invalid("age")["reason"] == (
            '"age" contained an invalid value.'
        )

    def test_custom(self) -> None:
        body = respond.error.custom("Quota exhausted", error_code=402)
        assert body == {"success": False, "reason": "Quota exhausted", "code": 402}

    def test_custom_default_status(self) -> None:
        assert respond.error.custom("Nope")["code"] == 400

    def test_server_error_override(self) -> None:
        assert respond.error.server_error(error_code=503)["code"] == 503

    def test_forbidden_custom_message(self) -> None:
        assert respond.error.forbidden(message="Admins only.")["reason"] == "Admins only."

    def test_value_mode_internal_code_suffix(self) -> None:
        body = respond.error.not_found(None, 1234)
        assert body["reason"].endswith(" { internalCode: 1234 }")
        assert "internalCode" not in body

    def test_through_transport(self) -> None:
        transport = StarletteTransport()
        result = respond.error.item_not_found("Widget", transport, "W1")

        assert result.outcome is DeliveryOutcome.DELIVERED
        response = transport.to_response()
        assert response.status_code == 404
        assert json.loads(response.body) == {
            "success": False,
            "description": '"Widget" Not Found',
            "code": 404,
            "internalCode": "W1",
        }

    def test_send_error_by_wire_name(self) -> None:
        body = respond.application.responders.send_error("paramRequired", args=["id"])
        assert body["reason"] == '"id" is a required parameter.'

    def test_repeated_calls_do_not_share_state(self) -> None:
        first = respond.error.param_invalid("x", None, 7)
        first["reason"] = "mutated"
        second = respond.error.param_invalid("x", None, 7)
        assert second["reason"] == '"x" contained an invalid value. { internalCode: 7 }'


class TestSendingTwice:
    """A finished transport cannot take a second envelope."""

    def test_second_error_is_absorbed(self) -> None:
        transport = StarletteTransport()
        respond.success("first", transport)
        result = respond.error.not_found(transport)

        assert result.outcome is DeliveryOutcome.DELIVERY_FAILED
        response = transport.to_response()
        assert response.status_code == 200
        assert json.loads(response.body)["result"] == "first"

    def test_second_success_is_absorbed(self) -> None:
        transport = StarletteTransport()
        respond.success("first", transport)
        result = respond.success("second", transport)

        assert result.outcome is DeliveryOutcome.DELIVERY_FAILED
        assert json.loads(transport.to_response().body)["result"] == "first"


class TestResponderConfiguration:
    """Tests for Responder.from_settings."""

    def test_success_status_from_settings(self) -> None:
        responder = Responder.from_settings(Settings(success_status_code=204))
        assert responder.success(None)["code"] == 204

    def test_raw_templates_from_settings(self) -> None:
        responder = Responder.from_settings(
            Settings(format_parameterized_messages=False)
        )
        assert responder.error.item_not_found("Widget")["reason"] == [
            '"%s" Not Found',
            "Widget",
        ]

    def test_localizer(self) -> None:
        responder = Responder.from_settings(
            Settings(), localizer=CatalogLocalizer({"Login Required": "Connexion requise"})
        )
        assert responder.error.login_required()["reason"] == "Connexion requise"
