import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))
CLIENT_STORAGE_PATH = Path(
    os.getenv("CLIENT_STORAGE_PATH", str(Path.home() / ".assetmagnets" / "storage.json"))
).expanduser()
DEMO_FALLBACK_ENABLED = os.getenv("DEMO_FALLBACK_ENABLED", "true").strip().lower() in {"1", "true", "yes", "on"}
