"""Screen modules for manual routing.

The app uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each screen lives under `views/` and exposes a
`view(navigator)` function. Views only forward input to the navigator and
enable or disable controls from its output; all validation lives in
`services/validation.py`.

Add any new screen as a module with a `view(navigator)` callable and register
it in `SCREEN_REGISTRY` inside `app.py`.
"""
