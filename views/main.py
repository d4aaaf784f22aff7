import streamlit as st
from domain.constants import MAIN_MESSAGE, BACK_TO_LOGIN_BUTTON
from domain.models import BackToLogin
from ui.components import inject_base_css, credential_form


def view(navigator):
    """Landing page after a successful login."""
    inject_base_css()
    st.markdown(f"<div class='main-message'>{MAIN_MESSAGE}</div>", unsafe_allow_html=True)

    if st.button(BACK_TO_LOGIN_BUTTON, key="main_btn_back"):
        credential_form.navigate(navigator, BackToLogin())
