"""Unit tests for WebhookPayloadValidator (jsonschema Draft 7)."""

import pytest

from tests.helpers import player, webhook_payload
from tracker.application.services.webhook_payload_validator import (
    MAX_REPORTED_ERRORS,
    WebhookPayloadValidator,
    collect_errors,
)
from tracker.domain.exceptions import SchemaValidationException


class TestWebhookPayloadValidator:
    def test_valid_payload_is_typed(self) -> None:
        result = WebhookPayloadValidator().validate(webhook_payload())
        assert result.server_date == "2024-01-01 12:00"
        (bob,) = result.players
        assert bob.name == "Bob"
        assert bob.steam_id == "S1"
        assert bob.position == (1, 2, 3)
        assert bob.diseases == ()

    def test_floats_and_ints_are_numbers(self) -> None:
        body = webhook_payload(player("Bob", "S1", Health=99.5, KilledZombies=7))
        (bob,) = WebhookPayloadValidator().validate(body).players
        assert bob.health == 99.5
        assert bob.killed_zombies == 7

    def test_empty_players_is_valid(self) -> None:
        result = WebhookPayloadValidator().validate({"ServerDate": "x", "Players": []})
        assert result.players == ()

    @pytest.mark.parametrize(
        "field,value",
        [
            ("Health", "100"),
            ("ID", 76561198000000000),
            ("Position", [1, 2]),
            ("Position", [1, 2, 3, 4]),
            ("Diseases", [1]),
            ("Diseases", "flu"),
        ],
    )
    def test_wrong_types_are_rejected(self, field: str, value: object) -> None:
        body = webhook_payload(player("Bob", "S1", **{field: value}))
        with pytest.raises(SchemaValidationException) as exc_info:
            WebhookPayloadValidator().validate(body)
        errors = exc_info.value.details["errors"]
        assert any(e["field"].startswith(f"Players.0.{field}") for e in errors)

    def test_missing_field_is_reported_on_the_entry(self) -> None:
        entry = player("Bob", "S1")
        del entry["Wetness"]
        errors = collect_errors(webhook_payload(entry))
        assert errors == [{"field": "Players.0", "message": "'Wetness' is a required property"}]

    def test_every_failing_entry_is_reported(self) -> None:
        body = webhook_payload(
            player("A", "1", Health="x"), player("B", "2"), player("C", "3", Blood=None)
        )
        fields = {e["field"] for e in collect_errors(body)}
        assert fields == {"Players.0.Health", "Players.2.Blood"}

    def test_non_object_body(self) -> None:
        errors = collect_errors([1, 2, 3])
        assert errors[0]["field"] == "(root)"

    def test_error_count_is_capped(self) -> None:
        entries = [player(str(i), str(i), Health="x", Blood="x") for i in range(40)]
        assert len(collect_errors(webhook_payload(*entries))) == MAX_REPORTED_ERRORS

    def test_extra_fields_are_ignored(self) -> None:
        body = webhook_payload(player("Bob", "S1", Gear=["axe"]))
        body["Extra"] = True
        assert collect_errors(body) == []

    @pytest.mark.parametrize(
        "field,value",
        [
            ("Health", float("inf")),
            ("Blood", float("-inf")),
            ("Water", float("nan")),
            ("DistanceWalked", 10**400),
            ("Position", [1, float("inf"), 3]),
        ],
    )
    def test_non_finite_numbers_are_rejected(self, field: str, value: object) -> None:
        errors = collect_errors(webhook_payload(player("Bob", "S1", **{field: value})))
        assert any(e["field"].startswith(f"Players.0.{field}") for e in errors)

    @pytest.mark.parametrize("value", [2**31, -(2**31) - 1, float("inf")])
    def test_killed_zombies_outside_integer_column_is_rejected(self, value: object) -> None:
        errors = collect_errors(webhook_payload(player("Bob", "S1", KilledZombies=value)))
        assert [e["field"] for e in errors] == ["Players.0.KilledZombies"]

    def test_killed_zombies_at_column_bounds_is_valid(self) -> None:
        body = webhook_payload(
            player("A", "1", KilledZombies=2**31 - 1),
            player("B", "2", KilledZombies=-(2**31)),
        )
        assert collect_errors(body) == []

    def test_booleans_are_not_numbers(self) -> None:
        errors = collect_errors(webhook_payload(player("Bob", "S1", Stamina=True)))
        assert [e["field"] for e in errors] == ["Players.0.Stamina"]
