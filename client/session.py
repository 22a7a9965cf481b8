import logging
from typing import Literal

from client.storage import LocalStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "user_data"
THEME_KEY = "theme"

Mode = Literal["online", "demo"]
Theme = Literal["light", "dark"]

ONLINE: Mode = "online"
DEMO: Mode = "demo"


class SessionStore:
    """Current user and token, mirrored into durable storage.

    `mode` tells callers whether the session and data come from the API
    (`online`) or from fabricated/fallback data (`demo`).
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage
        self.user: dict | None = None
        self.token: str | None = None
        self.mode: Mode = ONLINE
        self.rehydrate()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    @property
    def has_demo_identity(self) -> bool:
        return bool(self.token and self.token.startswith("demo-"))

    @property
    def is_demo(self) -> bool:
        return self.mode == DEMO

    def rehydrate(self) -> None:
        token = self.storage.get_item(TOKEN_KEY)
        user = self.storage.get_json(USER_KEY)
        if token and isinstance(user, dict):
            self.token = token
            self.user = user
            if self.has_demo_identity:
                self.mode = DEMO
            logger.debug("Restored session for %s", user.get("email"))
        else:
            self.token = None
            self.user = None

    def save(self, user: dict, token: str, mode: Mode = ONLINE) -> None:
        self.user = user
        self.token = token
        self.mode = mode
        self.storage.set_item(TOKEN_KEY, token)
        self.storage.set_json(USER_KEY, user)

    def update_user(self, user: dict) -> None:
        self.user = user
        self.storage.set_json(USER_KEY, user)

    def clear(self) -> None:
        self.user = None
        self.token = None
        self.mode = ONLINE
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)

    def set_mode(self, mode: Mode) -> None:
        # A fabricated identity stays in demo mode until logout, even once the API is back.
        if mode == ONLINE and self.has_demo_identity:
            mode = DEMO
        if mode != self.mode:
            logger.info("Switching data mode from %s to %s", self.mode, mode)
        self.mode = mode

    @property
    def theme(self) -> Theme:
        value = self.storage.get_item(THEME_KEY)
        return "dark" if value == "dark" else "light"

    @theme.setter
    def theme(self, value: Theme) -> None:
        if value not in ("light", "dark"):
            raise ValueError(f"Unknown theme: {value}")
        self.storage.set_item(THEME_KEY, value)
