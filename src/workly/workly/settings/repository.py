from __future__ import annotations

from typing import Protocol, Sequence

from .model import PublicHoliday, UserSettings


class SettingsRepository(Protocol):
    def get_user_settings(self) -> UserSettings:
        raise NotImplementedError

    def set_user_settings(self, settings: UserSettings) -> None:
        raise NotImplementedError

    def get_public_holidays(self) -> Sequence[PublicHoliday]:
        raise NotImplementedError

    def set_public_holidays(self, holidays: Sequence[PublicHoliday]) -> None:
        raise NotImplementedError
