"""Config settings – EngineSettings for the gating engine."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from eventgate.config.settings.base import Settings
from eventgate.config.validation import InvalidSettingValueError
from eventgate.kernel.security.access import RoleNames

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class EngineSettings(Settings):
    """Role names and logging options, read from ``EVENTGATE_*`` variables."""

    _prefix: ClassVar[str] = "EVENTGATE"

    super_admin_role: str = "SuperAdmin"
    admin_role: str = "Admin"
    attendee_role: str = "Attendee"
    log_level: str = "INFO"
    log_json: bool = True
    audit_decisions: bool = False

    def _validate(self) -> None:
        names = {
            "super_admin_role": self.super_admin_role,
            "admin_role": self.admin_role,
            "attendee_role": self.attendee_role,
        }
        for field_name, value in names.items():
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(field_name, value, "role name must not be blank")
        if len(set(names.values())) != len(names):
            raise InvalidSettingValueError(
                "attendee_role", self.attendee_role, "role names must be distinct"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def role_names(self) -> RoleNames:
        return RoleNames(
            super_admin=self.super_admin_role,
            admin=self.admin_role,
            attendee=self.attendee_role,
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["EngineSettings"]
