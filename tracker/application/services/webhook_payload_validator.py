"""Validates inbound webhook payloads against the fixed telemetry schema.

The payload comes from third-party game servers and is untrusted. The whole
body is checked before anything is written; on failure every field-level
error is reported and no player entry is processed.
"""

from __future__ import annotations

import math
from typing import Any

import jsonschema
from jsonschema.validators import extend

from tracker.application.dtos.telemetry import WebhookPayload, WebhookPlayer
from tracker.domain.exceptions import SchemaValidationException

SCHEMA_NAME = "webhook_payload"
MAX_REPORTED_ERRORS = 50

_NUMBER = {"type": "number"}
# Postgres INTEGER range for the kill counter column.
_INT32 = {"type": "number", "minimum": -(2**31), "maximum": 2**31 - 1}

_PLAYER_NUMBER_FIELDS = (
    "Health",
    "Blood",
    "Shock",
    "Water",
    "Energy",
    "HeatComfort",
    "Stamina",
    "Wetness",
    "EnvironmentTemp",
    "Playtime",
    "DistanceWalked",
)

WEBHOOK_PLAYER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": [
        "Name",
        "ID",
        *_PLAYER_NUMBER_FIELDS,
        "KilledZombies",
        "Position",
        "Diseases",
    ],
    "properties": {
        "Name": {"type": "string"},
        "ID": {"type": "string"},
        **{name: _NUMBER for name in _PLAYER_NUMBER_FIELDS},
        "KilledZombies": _INT32,
        "Position": {
            "type": "array",
            "items": _NUMBER,
            "minItems": 3,
            "maxItems": 3,
        },
        "Diseases": {"type": "array", "items": {"type": "string"}},
    },
}

WEBHOOK_PAYLOAD_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["ServerDate", "Players"],
    "properties": {
        "ServerDate": {"type": "string"},
        "Players": {"type": "array", "items": WEBHOOK_PLAYER_SCHEMA},
    },
}


def _is_finite_number(checker: Any, instance: Any) -> bool:
    """Draft 7 number, excluding inf, nan, and ints beyond float range."""
    if not jsonschema.Draft7Validator.TYPE_CHECKER.is_type(instance, "number"):
        return False
    try:
        return math.isfinite(instance)
    except OverflowError:
        return False


FiniteNumberValidator = extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine(
        "number", _is_finite_number
    ),
)

_validator = FiniteNumberValidator(WEBHOOK_PAYLOAD_SCHEMA)


def _error_field(error: jsonschema.ValidationError) -> str:
    """Dotted path of the failing value, e.g. 'Players.0.Health'."""
    path = ".".join(str(part) for part in error.absolute_path)
    return path or "(root)"


def collect_errors(payload: Any) -> list[dict[str, str]]:
    """Return field-level errors for payload (empty list when valid)."""
    errors: list[dict[str, str]] = []
    for error in _validator.iter_errors(payload):
        errors.append({"field": _error_field(error), "message": error.message})
        if len(errors) >= MAX_REPORTED_ERRORS:
            break
    return errors


def _to_player(entry: dict[str, Any]) -> WebhookPlayer:
    x, y, z = entry["Position"]
    return WebhookPlayer(
        name=entry["Name"],
        steam_id=entry["ID"],
        health=entry["Health"],
        blood=entry["Blood"],
        shock=entry["Shock"],
        water=entry["Water"],
        energy=entry["Energy"],
        heat_comfort=entry["HeatComfort"],
        stamina=entry["Stamina"],
        wetness=entry["Wetness"],
        environment_temp=entry["EnvironmentTemp"],
        playtime=entry["Playtime"],
        distance_walked=entry["DistanceWalked"],
        killed_zombies=entry["KilledZombies"],
        position=(x, y, z),
        diseases=tuple(entry["Diseases"]),
    )


class WebhookPayloadValidator:
    """Structural/type validation of webhook bodies; no side effects."""

    def validate(self, payload: Any) -> WebhookPayload:
        """Return the typed payload or raise SchemaValidationException with all field errors."""
        errors = collect_errors(payload)
        if errors:
            raise SchemaValidationException(SCHEMA_NAME, errors)
        return WebhookPayload(
            server_date=payload["ServerDate"],
            players=tuple(_to_player(entry) for entry in payload["Players"]),
        )
