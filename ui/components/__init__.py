"""
This package provides the reusable UI components for the Streamlit application.

- `base`: CSS injection and small HTML snippets such as field hints.
- `credential_form`: text inputs for the login and registration forms, plus
  helpers that forward typed values to the navigator and clear form state.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    field_hint,
)

from . import credential_form
