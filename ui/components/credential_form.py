import streamlit as st
from typing import Callable, Dict, Iterable, Optional
from domain.constants import FIELD_LABELS, FIELD_HINTS, MASKED_FIELDS, NAME_HINT
from domain.models import Credentials, UpdateField, ValidationResult
from domain.settings import Settings
from ui.components.base import field_hint


def render(field_names: Iterable[str], key_prefix: str,
           validate: Optional[Callable[[Credentials], Optional[ValidationResult]]] = None,
           settings: Optional[Settings] = None) -> Dict[str, str]:
    """
    Renders the text inputs for a credentials form (login or registration).

    Args:
        field_names (Iterable[str]): Credentials attributes to render, in order.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        validate (Callable): Optional validator; when given, a hint is shown under
            each field that has been typed in but is not well-formed yet.
        settings (Settings): Used to word the length hint.

    Returns:
        Dict[str, str]: The current raw value of every rendered field.
    """
    values = {}
    hint_slots = {}
    for name in field_names:
        value = st.text_input(
            FIELD_LABELS[name],
            key=f"{key_prefix}_{name}",
            type="password" if name in MASKED_FIELDS else "default",
        )
        values[name] = value or ""
        hint_slots[name] = st.empty()

    result = validate(Credentials(**values)) if validate is not None else None
    if result is not None:
        for name, slot in hint_slots.items():
            if values[name] and not result.is_valid(name):
                slot.markdown(field_hint(_hint_for(name, settings), valid=False), unsafe_allow_html=True)
    return values


def _hint_for(name: str, settings: Optional[Settings]) -> str:
    if name in FIELD_HINTS:
        return FIELD_HINTS[name]
    if settings is None:
        return ""
    return NAME_HINT.format(min=settings.name_min_length, max=settings.name_max_length)


def push_changes(navigator, credentials: Credentials, values: Dict[str, str]) -> bool:
    """Dispatch an UpdateField for every value that differs from the navigator's copy."""
    changed = False
    for name, value in values.items():
        if credentials.get(name) != value:
            navigator.dispatch(UpdateField(name, value))
            changed = True
    return changed


def clear_form_state(key_prefix: str):
    # Drop widget values so nothing typed survives leaving the screen
    for k in list(st.session_state.keys()):
        if k.startswith(f"{key_prefix}_"):
            del st.session_state[k]


def navigate(navigator, action, key_prefix: Optional[str] = None) -> bool:
    """Dispatch a button action; on a screen change clear the form and rerun."""
    before = navigator.screen
    after = navigator.dispatch(action)
    if after.screen is before:
        return False
    if key_prefix:
        clear_form_state(key_prefix)
    st.rerun()
    return True
