import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
HINT_GRAY = "#6B7280"  # gray-500
RED = "#DC2626"  # red-600


def inject_base_css():
    if getattr(inject_base_css, "_applied", False):
        return
    inject_base_css._applied = True
    st.markdown(
        f"""
        <style>
        .block-container {{max-width: 480px; padding-top: 3rem;}}
        div[data-testid="stButton"] > button {{width: 100%;}}
        .splash {{text-align:center; padding-top: 6rem;}}
        .splash .logo {{font-size: 96px; line-height: 150px;}}
        .splash .message {{font-size: 24px; font-weight: 600;}}
        .main-message {{text-align:center; font-size: 24px; margin-bottom: 1rem;}}
        .field-hint {{font-size: 12px; color:{HINT_GRAY}; margin-top:-0.6rem; margin-bottom:0.4rem;}}
        .field-hint.invalid {{color:{RED};}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def field_hint(message: str, valid: bool) -> str:
    cls = "field-hint" if valid else "field-hint invalid"
    return f'<div class="{cls}">{message}</div>'
