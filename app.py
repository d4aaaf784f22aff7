import logging
import streamlit as st
from domain.models import Screen
from domain.settings import ConfigError, load_settings
from services.navigation import Navigator

# Import the screen rendering functions from the view modules
from views import splash, login, registration, main as main_screen

# --- Screen Registry ---
# Maps each screen to its label and the rendering function from its module.
SCREEN_REGISTRY = {
    Screen.SPLASH: {
        "label": "Splash",
        "render_func": splash.view,
    },
    Screen.LOGIN: {
        "label": "Login",
        "render_func": login.view,
    },
    Screen.REGISTRATION: {
        "label": "Registration",
        "render_func": registration.view,
    },
    Screen.MAIN: {
        "label": "Main",
        "render_func": main_screen.view,
    },
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    """Install the log format once per process; the level is applied on every run."""
    if not getattr(configure_logging, "_applied", False):
        logging.basicConfig(format=LOG_FORMAT)
        configure_logging._applied = True
    logging.getLogger().setLevel(level)


def get_navigator(settings) -> Navigator:
    """Return the session's navigator, creating it on the first run."""
    if 'navigator' not in st.session_state:
        st.session_state.navigator = Navigator(settings)
        logger.info("New session navigator (splash delay %d ms)", settings.splash_delay_ms)
    return st.session_state.navigator


def main():
    """
    Main application router.

    Loads settings, makes sure the session has a navigator and renders the
    view registered for the navigator's current screen.
    """
    st.set_page_config(page_title="Homework Mobile App", layout="centered")

    try:
        settings = load_settings()
    except ConfigError as e:
        st.error(f"Configuration error: {e}")
        st.stop()
        return

    configure_logging(settings.log_level)

    navigator = get_navigator(settings)

    # --- Screen Rendering ---
    page_to_render = SCREEN_REGISTRY[navigator.screen]["render_func"]
    page_to_render(navigator)


if __name__ == "__main__":
    main()
