"""Hand-off of the finished onboarding record to an external collaborator."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from models.onboarding import OnboardingRecord

logger = logging.getLogger(__name__)

NO_RESOURCES_SELECTED = "None selected"


class Submitter(Protocol):
    """Receives the final record; any return value is ignored."""

    def __call__(self, record: OnboardingRecord) -> object: ...


def build_submission_payload(record: OnboardingRecord) -> dict[str, Any]:
    """Return a JSON-ready payload keyed by the record's camelCase aliases."""

    return record.model_dump(mode="json", by_alias=True)


def confirmation_summary(record: OnboardingRecord) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows shown on the confirmation step."""

    rows = [
        ("Role", str(record.role) if record.role else ""),
        ("Name", record.full_name),
        ("Email", record.email),
        ("Department", record.department),
        ("Designation", record.designation),
        ("Phone", record.phone),
    ]
    if record.resources_live:
        selected = ", ".join(sorted(str(item) for item in record.selected_resources))
        rows.append(("Initial Resources", selected or NO_RESOURCES_SELECTED))
    return rows


class LoggingSubmitter:
    """Submitter that writes the payload to a logger instead of a backend."""

    def __init__(self, logger_: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = logger_ or logger
        self._level = level
        self.submitted: list[dict[str, Any]] = []

    def __call__(self, record: OnboardingRecord) -> None:
        payload = build_submission_payload(record)
        self.submitted.append(payload)
        self._logger.log(self._level, "Onboarding submission: %s", json.dumps(payload, sort_keys=True))


__all__ = [
    "LoggingSubmitter",
    "NO_RESOURCES_SELECTED",
    "Submitter",
    "build_submission_payload",
    "confirmation_summary",
]
