import logging

from client.api_gateway import ApiGateway
from client.errors import NetworkError
from client.fallback_store import FallbackStore
from client.session import DEMO, ONLINE, SessionStore

logger = logging.getLogger(__name__)

# Fallback collection name -> API path.
ENDPOINTS = {
    "services": "/services",
    "courses": "/courses",
    "jobs": "/jobs",
    "contact_messages": "/contact-messages",
    "contact_info": "/contact-info",
    "global_offices": "/global-offices",
    "faqs": "/faqs",
}


class DataService:
    """CRUD over the API, switching to the fallback store when it is unreachable.

    Every fallback flips the session to `demo` mode; the next call that
    reaches the API flips it back to `online`, unless the session holds a
    demo identity.
    """

    def __init__(self, gateway: ApiGateway, fallback: FallbackStore, session: SessionStore):
        self.gateway = gateway
        self.fallback = fallback
        self.session = session

    @property
    def mode(self) -> str:
        return self.session.mode

    def _path(self, collection: str, record_id: str | None = None) -> str:
        try:
            path = ENDPOINTS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None
        return f"{path}/{record_id}" if record_id else path

    def _call(self, remote, local, description: str):
        try:
            result = remote()
        except NetworkError:
            logger.warning("API unreachable while trying to %s; using local data", description)
            self.session.set_mode(DEMO)
            return local()
        self.session.set_mode(ONLINE)
        return result

    def list(self, collection: str) -> list[dict]:
        return self._call(
            lambda: self.gateway.get(self._path(collection)),
            lambda: self.fallback.list(collection),
            f"list {collection}",
        )

    def get(self, collection: str, record_id: str) -> dict:
        return self._call(
            lambda: self.gateway.get(self._path(collection, record_id)),
            lambda: self.fallback.get(collection, record_id),
            f"read {collection}",
        )

    def create(self, collection: str, fields: dict) -> dict:
        return self._call(
            lambda: self.gateway.post(self._path(collection), fields),
            lambda: self.fallback.create(collection, fields),
            f"create {collection}",
        )

    def update(self, collection: str, record_id: str, updates: dict) -> dict:
        return self._call(
            lambda: self.gateway.put(self._path(collection, record_id), updates),
            lambda: self.fallback.update(collection, record_id, updates),
            f"update {collection}",
        )

    def delete(self, collection: str, record_id: str) -> bool:
        def remote() -> bool:
            self.gateway.delete(self._path(collection, record_id))
            return True

        return self._call(
            remote,
            lambda: self.fallback.delete(collection, record_id),
            f"delete {collection}",
        )
