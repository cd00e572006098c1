"""quicktodo - a small interactive console to-do manager."""

__version__ = "0.1.0"
