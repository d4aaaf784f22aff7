import streamlit as st
from domain.constants import REGISTRATION_FIELDS, REGISTER_BUTTON, BACK_TO_LOGIN_BUTTON
from domain.models import Register, BackToLogin
from ui.components import inject_base_css, credential_form

KEY_PREFIX = "registration_form"


def view(navigator):
    inject_base_css()
    st.header("Registration")

    settings = navigator.settings
    values = credential_form.render(
        REGISTRATION_FIELDS,
        key_prefix=KEY_PREFIX,
        validate=navigator.validate,
        settings=settings,
    )
    credential_form.push_changes(navigator, navigator.state.credentials, values)

    # Gate read after the push so it reflects what is on screen now
    output = navigator.output

    if st.button(REGISTER_BUTTON, key="registration_btn_register",
                 disabled=not output.action_enabled, type="primary"):
        # Nothing is stored; a successful registration just returns to login.
        credential_form.navigate(navigator, Register(), KEY_PREFIX)

    if st.button(BACK_TO_LOGIN_BUTTON, key="registration_btn_back"):
        credential_form.navigate(navigator, BackToLogin(), KEY_PREFIX)
