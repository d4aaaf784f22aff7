import streamlit as st
from domain.constants import LOGIN_FIELDS, LOGIN_BUTTON, REGISTER_BUTTON
from domain.models import Login, OpenRegistration
from ui.components import inject_base_css, credential_form

KEY_PREFIX = "login_form"


def view(navigator):
    inject_base_css()
    st.header("Login")

    settings = navigator.settings
    values = credential_form.render(
        LOGIN_FIELDS,
        key_prefix=KEY_PREFIX,
        validate=navigator.validate,
        settings=settings,
    )
    credential_form.push_changes(navigator, navigator.state.credentials, values)
    output = navigator.output

    if st.button(LOGIN_BUTTON, key="login_btn_login",
                 disabled=not output.action_enabled, type="primary"):
        credential_form.navigate(navigator, Login(), KEY_PREFIX)

    if st.button(REGISTER_BUTTON, key="login_btn_register"):
        credential_form.navigate(navigator, OpenRegistration(), KEY_PREFIX)
