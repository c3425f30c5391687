import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# =========================================================
# .env LOADING
# =========================================================
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
ENV_PATH = os.path.join(PROJECT_ROOT, ".env")

load_dotenv(dotenv_path=ENV_PATH)

# =========================================================
# FLASK
# =========================================================
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


def resolve_log_level(name: str) -> int:
    # getLevelName returns a "Level X" string for unknown names
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=resolve_log_level(LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# =========================================================
# LLM BACKEND SELECTION
# =========================================================
# Options:
#   "api"  → Gemini via google-generativeai (default)
#   "mock" → canned lesson plan, no network
LLM_BACKEND = os.getenv("LLM_BACKEND", "api").strip().lower()

MOCK_LLM = LLM_BACKEND == "mock"

# =========================================================
# GEMINI CONFIG
# =========================================================
# A missing key is reported on the first generation call, not here.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "").strip()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-pro").strip()

# =========================================================
# DEBUG VISIBILITY
# =========================================================
logger.info("[CONFIG] LLM_BACKEND = %s", LLM_BACKEND)
logger.info("[CONFIG] GEMINI_MODEL = %s", GEMINI_MODEL)
logger.info("[CONFIG] GEMINI_API_KEY set = %s", bool(GEMINI_API_KEY))
