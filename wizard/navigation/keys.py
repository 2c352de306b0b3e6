from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard's record and cursor."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def record(self) -> str:
        return self.namespace("record")

    @property
    def cursor(self) -> str:
        return self.namespace("cursor")

    def widget(self, field: str) -> str:
        return self.namespace(f"field.{field}")
