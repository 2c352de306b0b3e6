"""Onboarding wizard: step registry, sequencer, and form state store."""

from __future__ import annotations

from wizard.sequencer import (
    gate_satisfied,
    is_advance_allowed,
    missing_gate_fields,
    next_step,
    prev_step,
    restore_cursor,
    visible_steps,
)
from wizard.step_registry import WIZARD_STEPS, StepDefinition, get_step
from wizard.store import FormStateStore, WizardSnapshot
from wizard.submission import LoggingSubmitter, Submitter, build_submission_payload, confirmation_summary

__all__ = [
    "FormStateStore",
    "LoggingSubmitter",
    "StepDefinition",
    "Submitter",
    "WIZARD_STEPS",
    "WizardSnapshot",
    "build_submission_payload",
    "confirmation_summary",
    "gate_satisfied",
    "get_step",
    "is_advance_allowed",
    "missing_gate_fields",
    "next_step",
    "prev_step",
    "restore_cursor",
    "visible_steps",
]
