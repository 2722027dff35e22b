"""
Field store - Raw text of the sign-up form fields.

The store is the single source of truth for user input. It performs no
validation and no duplicate suppression: every setter call notifies.
"""

from dataclasses import dataclass

from .observable import Observable, Slot


@dataclass(frozen=True)
class FormState:
    """Snapshot of the three form fields."""

    username: str = ""
    password: str = ""
    password_confirmation: str = ""


class FieldStore:
    """Holds username, password and password confirmation as observable slots."""

    def __init__(self) -> None:
        self._username: Slot[str] = Slot("")
        self._password: Slot[str] = Slot("")
        self._password_confirmation: Slot[str] = Slot("")

    @property
    def username(self) -> Observable[str]:
        return self._username

    @property
    def password(self) -> Observable[str]:
        return self._password

    @property
    def password_confirmation(self) -> Observable[str]:
        return self._password_confirmation

    def set_username(self, value: str) -> None:
        self._username.set(value)

    def set_password(self, value: str) -> None:
        self._password.set(value)

    def set_password_confirmation(self, value: str) -> None:
        self._password_confirmation.set(value)

    def snapshot(self) -> FormState:
        """Return the current field values."""
        return FormState(
            username=self._username.value,
            password=self._password.value,
            password_confirmation=self._password_confirmation.value,
        )
