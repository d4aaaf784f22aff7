import threading
import pytest
from domain.models import OpenRegistration, Screen, SplashTimeout, UpdateField, Login
from domain.settings import Settings
from services.navigation import Navigator, SplashTimer


def make_navigator(delay_ms=10, **kwargs):
    return Navigator(Settings(splash_delay_ms=delay_ms, **kwargs))


def test_timer_runs_callback_once():
    calls = []
    timer = SplashTimer(0.01, lambda: calls.append(1))
    timer.start()
    assert timer.wait(2.0)
    assert timer.trigger() is False
    assert calls == [1]


def test_start_twice_schedules_once():
    calls = []
    timer = SplashTimer(0.01, lambda: calls.append(1))
    timer.start()
    timer.start()
    assert timer.wait(2.0)
    assert calls == [1]


def test_manual_trigger_preempts_timer():
    calls = []
    timer = SplashTimer(60, lambda: calls.append(1))
    timer.start()
    assert timer.trigger() is True
    assert timer.fired
    timer.cancel()
    assert calls == [1]


def test_cancelled_timer_never_fires():
    calls = []
    timer = SplashTimer(0.01, lambda: calls.append(1))
    timer.cancel()
    timer.start()
    assert not timer.started
    assert timer.trigger() is False
    assert not timer.wait(0.05)
    assert calls == []


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        SplashTimer(-1, lambda: None)


def test_concurrent_triggers_fire_once():
    calls = []
    lock = threading.Lock()

    def record():
        with lock:
            calls.append(1)

    timer = SplashTimer(60, record)
    threads = [threading.Thread(target=timer.trigger) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert calls == [1]


def test_navigator_starts_on_splash_and_moves_to_login_after_delay():
    nav = make_navigator()
    assert nav.screen is Screen.SPLASH
    nav.start()
    assert nav.wait_for_splash(2.0)
    assert nav.screen is Screen.LOGIN


def test_navigator_without_start_stays_on_splash():
    nav = make_navigator(delay_ms=0)
    assert not nav.wait_for_splash(0.05)
    assert nav.screen is Screen.SPLASH


def test_second_trigger_does_not_move_state():
    nav = make_navigator()
    nav.start()
    assert nav.wait_for_splash(2.0)
    nav.dispatch(OpenRegistration())
    assert nav.splash_timer.trigger() is False
    assert nav.dispatch(SplashTimeout()).screen is Screen.REGISTRATION


def test_late_timer_cannot_override_manual_navigation():
    nav = make_navigator(delay_ms=60_000)
    # Reach registration before the timer ever fires
    nav.dispatch(SplashTimeout())
    nav.dispatch(OpenRegistration())
    assert nav.splash_timer.trigger() is True
    assert nav.screen is Screen.REGISTRATION
    nav.stop()


def test_navigator_output_tracks_gate():
    nav = make_navigator()
    nav.dispatch(SplashTimeout())
    nav.dispatch(UpdateField("username", "bob"))
    nav.dispatch(UpdateField("password", "pw"))
    assert nav.output.action_enabled is False
    assert nav.dispatch(Login()).screen is Screen.LOGIN

    nav.dispatch(UpdateField("password", "pwd"))
    assert nav.output.action_enabled is True
    assert nav.dispatch(Login()).screen is Screen.MAIN


def test_navigator_logs_transitions(caplog):
    nav = make_navigator()
    with caplog.at_level("DEBUG", logger="services.navigation"):
        nav.dispatch(SplashTimeout())
        nav.dispatch(Login())
    assert "Navigated SPLASH -> LOGIN on SplashTimeout" in caplog.text
    assert "Login ignored on LOGIN" in caplog.text
