import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from client import config
from client.api_gateway import ApiGateway
from client.errors import NetworkError
from client.session import DEMO, ONLINE, Mode, SessionStore

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: dict
    token: str
    mode: Mode


def build_demo_user(email: str, name: str | None = None, role: str | None = None) -> dict:
    now = datetime.now(timezone.utc).isoformat()
    is_admin = "admin" in email.lower()
    return {
        "id": f"demo-{uuid.uuid4()}",
        "name": name or ("Admin User" if is_admin else "Demo User"),
        "email": email,
        "role": "admin" if is_admin else (role or "student"),
        "avatar": None,
        "created_at": now,
        "updated_at": now,
    }


def build_demo_token() -> str:
    return f"demo-{uuid.uuid4().hex}"


class AuthService:
    """Login, registration and current-user lookups.

    When the API cannot be reached and demo fallback is enabled, a local demo
    identity is issued instead and the session is marked `demo`. Errors the
    API actually returns (bad credentials, duplicate email) always propagate.
    """

    def __init__(self, gateway: ApiGateway, session: SessionStore, demo_fallback: bool | None = None):
        self.gateway = gateway
        self.session = session
        self.demo_fallback = config.DEMO_FALLBACK_ENABLED if demo_fallback is None else demo_fallback

    def _demo_session(self, user: dict) -> AuthResult:
        token = build_demo_token()
        self.session.save(user, token, mode=DEMO)
        return AuthResult(user=user, token=token, mode=DEMO)

    def login(self, email: str, password: str) -> AuthResult:
        try:
            data = self.gateway.post("/auth/login", {"email": email, "password": password})
        except NetworkError:
            if not self.demo_fallback:
                raise
            logger.warning("API unreachable, signing %s in with a demo identity", email)
            return self._demo_session(build_demo_user(email))

        self.session.save(data["user"], data["token"], mode=ONLINE)
        return AuthResult(user=data["user"], token=data["token"], mode=ONLINE)

    def register(self, name: str, email: str, password: str, role: str = "student") -> AuthResult:
        payload = {"name": name, "email": email, "password": password, "role": role}
        try:
            data = self.gateway.post("/auth/register", payload)
        except NetworkError:
            if not self.demo_fallback:
                raise
            logger.warning("API unreachable, registering %s as a demo identity", email)
            return self._demo_session(build_demo_user(email, name=name, role=role))

        self.session.save(data["user"], data["token"], mode=ONLINE)
        return AuthResult(user=data["user"], token=data["token"], mode=ONLINE)

    def get_current_user(self) -> dict:
        if self.session.is_demo and self.session.user is not None:
            return self.session.user
        try:
            user = self.gateway.get("/auth/me")
        except NetworkError:
            if not self.demo_fallback or self.session.user is None:
                raise
            logger.warning("API unreachable, using the stored user profile")
            self.session.set_mode(DEMO)
            return self.session.user

        self.session.update_user(user)
        self.session.set_mode(ONLINE)
        return user

    def logout(self) -> None:
        self.session.clear()
