from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Dict, Optional, Union


class Screen(Enum):
    SPLASH = "splash"
    LOGIN = "login"
    REGISTRATION = "registration"
    MAIN = "main"


@dataclass(frozen=True)
class Credentials:
    """Field values typed on the active screen. Never persisted."""
    username: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    email: str = ""

    def get(self, name: str) -> str:
        _check_field(name)
        return getattr(self, name)

    def with_field(self, name: str, value: str) -> "Credentials":
        _check_field(name)
        return replace(self, **{name: value})


CREDENTIAL_FIELDS = tuple(f.name for f in fields(Credentials))


def _check_field(name: str):
    if name not in CREDENTIAL_FIELDS:
        raise ValueError(f"Unknown credentials field: {name!r}")


@dataclass(frozen=True)
class ValidationResult:
    fields: Dict[str, bool] = field(default_factory=dict)

    @property
    def form_valid(self) -> bool:
        return bool(self.fields) and all(self.fields.values())

    def is_valid(self, name: str) -> bool:
        return self.fields.get(name, False)


# --- Actions ---

@dataclass(frozen=True)
class SplashTimeout:
    pass


@dataclass(frozen=True)
class OpenRegistration:
    pass


@dataclass(frozen=True)
class Login:
    pass


@dataclass(frozen=True)
class Register:
    pass


@dataclass(frozen=True)
class BackToLogin:
    pass


@dataclass(frozen=True)
class UpdateField:
    field: str
    value: str


Action = Union[SplashTimeout, OpenRegistration, Login, Register, BackToLogin, UpdateField]


@dataclass(frozen=True)
class NavigationState:
    screen: Screen = Screen.SPLASH
    credentials: Credentials = field(default_factory=Credentials)


@dataclass(frozen=True)
class ScreenOutput:
    """What a presenter needs: the screen and whether its primary action is enabled."""
    screen: Screen
    action_enabled: Optional[bool] = None
