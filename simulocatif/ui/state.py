"""Session state management for the Streamlit app.

Keeps the form parameters across reruns so every widget change recomputes
the results from the full, current parameter set.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from config import DEFAULT_PARAMS

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "params": dict(DEFAULT_PARAMS),
        "welcomed": False,
    }

    @classmethod
    def initialize(cls) -> None:
        """Initialize all session state with defaults."""
        init_state({key: (value.copy() if isinstance(value, dict) else value)
                    for key, value in cls.DEFAULTS.items()})

    @classmethod
    def get_params(cls) -> dict[str, Any]:
        """Get the current raw form parameters."""
        return get_state("params", dict(DEFAULT_PARAMS))

    @classmethod
    def set_params(cls, params: dict[str, Any]) -> None:
        """Replace the current form parameters."""
        set_state("params", dict(params))

    @classmethod
    def reset_params(cls) -> None:
        """Restore the default scenario and drop the form widgets' own state."""
        for key in [k for k in st.session_state if str(k).startswith("in_")]:
            del st.session_state[key]
        set_state("params", dict(DEFAULT_PARAMS))

    @classmethod
    def consume_welcome(cls) -> bool:
        """Return True once per session, the first time it is called."""
        if get_state("welcomed", False):
            return False
        set_state("welcomed", True)
        return True
