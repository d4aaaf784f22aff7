"""
This module contains centralized UI constants used throughout the application,
ensuring a single source of truth for field labels and screen copy.
"""

# Field labels, keyed by the Credentials attribute they edit
FIELD_LABELS = {
    "username": "Username",
    "password": "Password",
    "first_name": "First Name",
    "last_name": "Last Name",
    "date_of_birth": "Date of Birth (mm/dd/yyyy)",
    "email": "Email",
}

# Fields rendered on each form, in display order
LOGIN_FIELDS = ("username", "password")
REGISTRATION_FIELDS = ("first_name", "last_name", "date_of_birth", "email", "password")

MASKED_FIELDS = {"password"}

# Short hints shown under a field while it is not well-formed
NAME_HINT = "{min} to {max} characters"
FIELD_HINTS = {
    "date_of_birth": "Format: 01/31/2000",
    "email": "e.g. name@example.com",
}

SPLASH_LOGO = "🐱"
SPLASH_MESSAGE = "Welcome to my app!"
MAIN_MESSAGE = "This is the main page"

LOGIN_BUTTON = "Login"
REGISTER_BUTTON = "Register"
BACK_TO_LOGIN_BUTTON = "Back to login"
