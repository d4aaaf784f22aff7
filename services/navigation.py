"""Screen navigation: a pure reducer plus a small thread-safe holder around it.

Transition table:

    SPLASH        --SplashTimeout-------------------> LOGIN
    LOGIN         --OpenRegistration----------------> REGISTRATION
    LOGIN         --Login      [login gate]---------> MAIN
    REGISTRATION  --Register   [registration gate]--> LOGIN
    REGISTRATION  --BackToLogin---------------------> LOGIN
    MAIN          --BackToLogin---------------------> LOGIN

Any other (screen, action) pair leaves the state untouched. Credentials are
dropped whenever the screen changes.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from domain.constants import LOGIN_FIELDS, REGISTRATION_FIELDS
from domain.models import (
    Action,
    BackToLogin,
    Credentials,
    Login,
    NavigationState,
    OpenRegistration,
    Register,
    Screen,
    ScreenOutput,
    SplashTimeout,
    UpdateField,
    ValidationResult,
)
from domain.settings import DEFAULT_SETTINGS, Settings
from services.validation import (
    EmailMatcher,
    login_gate,
    registration_gate,
    validate_login,
    validate_registration,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = {
    Screen.LOGIN: set(LOGIN_FIELDS),
    Screen.REGISTRATION: set(REGISTRATION_FIELDS),
}


def initial_state() -> NavigationState:
    return NavigationState(screen=Screen.SPLASH, credentials=Credentials())


def _go(screen: Screen) -> NavigationState:
    return NavigationState(screen=screen, credentials=Credentials())


def reduce(state: NavigationState, action: Action,
           settings: Settings = DEFAULT_SETTINGS,
           email_matcher: Optional[EmailMatcher] = None) -> NavigationState:
    """Return the state that follows `action`. Never mutates `state`."""
    screen = state.screen

    if isinstance(action, UpdateField):
        # Raises ValueError for a field name Credentials does not have.
        credentials = state.credentials.with_field(action.field, action.value)
        if action.field not in EDITABLE_FIELDS.get(screen, ()):
            return state
        return NavigationState(screen=screen, credentials=credentials)

    if screen is Screen.SPLASH and isinstance(action, SplashTimeout):
        return _go(Screen.LOGIN)

    if screen is Screen.LOGIN:
        if isinstance(action, OpenRegistration):
            return _go(Screen.REGISTRATION)
        if isinstance(action, Login) and login_gate(state.credentials, settings):
            return _go(Screen.MAIN)

    if screen is Screen.REGISTRATION:
        if isinstance(action, Register) and registration_gate(state.credentials, settings, email_matcher):
            return _go(Screen.LOGIN)
        if isinstance(action, BackToLogin):
            return _go(Screen.LOGIN)

    if screen is Screen.MAIN and isinstance(action, BackToLogin):
        return _go(Screen.LOGIN)

    return state


def present(state: NavigationState,
            settings: Settings = DEFAULT_SETTINGS,
            email_matcher: Optional[EmailMatcher] = None) -> ScreenOutput:
    if state.screen is Screen.LOGIN:
        return ScreenOutput(state.screen, login_gate(state.credentials, settings))
    if state.screen is Screen.REGISTRATION:
        return ScreenOutput(state.screen, registration_gate(state.credentials, settings, email_matcher))
    return ScreenOutput(state.screen)


class SplashTimer:
    """One-shot delayed callback.

    The callback runs at most once, whether it is fired by the timer thread or
    by an explicit `trigger()`. After `cancel()` it never runs.
    """

    def __init__(self, delay_seconds: float, callback: Callable[[], None]):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._lock = threading.Lock()
        self._fired = threading.Event()
        self._triggered = False
        self._cancelled = False
        self._timer: Optional[threading.Timer] = None

    @property
    def fired(self) -> bool:
        return self._fired.is_set()

    @property
    def started(self) -> bool:
        return self._timer is not None

    def start(self):
        with self._lock:
            if self._timer is not None or self._cancelled:
                return
            self._timer = threading.Timer(self.delay_seconds, self.trigger)
            self._timer.daemon = True
            self._timer.start()
        logger.debug("Splash timer scheduled for %.3fs", self.delay_seconds)

    def trigger(self) -> bool:
        """Run the callback if it has not run yet. Returns True if it ran now."""
        with self._lock:
            if self._triggered or self._cancelled:
                logger.debug("Splash timer trigger ignored (already fired or cancelled)")
                return False
            self._triggered = True
        logger.debug("Splash timer fired")
        try:
            self._callback()
        finally:
            # Waiters wake only once the callback's effect is visible.
            self._fired.set()
        return True

    def cancel(self):
        with self._lock:
            self._cancelled = True
            timer = self._timer
        if timer is not None:
            timer.cancel()
        logger.debug("Splash timer cancelled")

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._fired.wait(timeout)


class Navigator:
    """Holds the current navigation state and applies actions to it one at a time."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS,
                 email_matcher: Optional[EmailMatcher] = None):
        self.settings = settings
        self._email_matcher = email_matcher
        self._lock = threading.Lock()
        self._state = initial_state()
        self._splash_timer = SplashTimer(settings.splash_delay_seconds,
                                         lambda: self.dispatch(SplashTimeout()))

    @property
    def state(self) -> NavigationState:
        with self._lock:
            return self._state

    @property
    def screen(self) -> Screen:
        return self.state.screen

    @property
    def output(self) -> ScreenOutput:
        return present(self.state, self.settings, self._email_matcher)

    def validate(self, credentials: Optional[Credentials] = None) -> Optional[ValidationResult]:
        """Per-field validity for the current screen's form, checked the same way as the gate.

        Uses the navigator's own credentials unless `credentials` is given.
        Returns None on screens without a form.
        """
        state = self.state
        if credentials is None:
            credentials = state.credentials
        if state.screen is Screen.LOGIN:
            return validate_login(credentials, self.settings)
        if state.screen is Screen.REGISTRATION:
            return validate_registration(credentials, self.settings, self._email_matcher)
        return None

    @property
    def splash_timer(self) -> SplashTimer:
        return self._splash_timer

    def start(self):
        """Schedule the splash timeout. Calling this again is harmless."""
        self._splash_timer.start()

    def stop(self):
        self._splash_timer.cancel()

    def wait_for_splash(self, timeout: Optional[float] = None) -> bool:
        return self._splash_timer.wait(timeout)

    def dispatch(self, action: Action) -> NavigationState:
        with self._lock:
            before = self._state
            after = reduce(before, action, self.settings, self._email_matcher)
            self._state = after

        if after.screen is not before.screen:
            logger.info("Navigated %s -> %s on %s",
                        before.screen.name, after.screen.name, type(action).__name__)
        elif after is before and not isinstance(action, UpdateField):
            logger.debug("%s ignored on %s", type(action).__name__, before.screen.name)
        return after
