"""Application logic layer: screen flow, pager, validation, composer."""

from .composer import Composer
from .login import LOGIN_ERROR_MESSAGE, LoginForm
from .navigation import Action, Frame, NavigationStack, ScreenFlow
from .pager import Pager
from .validation import EMAIL_MARKER, MIN_PASSWORD_LENGTH, validate_credentials

__all__ = [
    "Action",
    "Composer",
    "EMAIL_MARKER",
    "Frame",
    "LOGIN_ERROR_MESSAGE",
    "LoginForm",
    "MIN_PASSWORD_LENGTH",
    "NavigationStack",
    "Pager",
    "ScreenFlow",
    "validate_credentials",
]
