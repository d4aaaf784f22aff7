import streamlit as st
from domain.constants import SPLASH_LOGO, SPLASH_MESSAGE
from ui.components import inject_base_css

# Extra wait on top of the splash delay before re-checking the timer
WAIT_MARGIN_SECONDS = 0.5


def view(navigator):
    inject_base_css()
    st.markdown(
        f"""
        <div class='splash'>
            <div class='logo'>{SPLASH_LOGO}</div>
            <div class='message'>{SPLASH_MESSAGE}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    # No-op after the first run; the timer is scheduled only once
    navigator.start()
    navigator.wait_for_splash(navigator.settings.splash_delay_seconds + WAIT_MARGIN_SECONDS)
    st.rerun()
