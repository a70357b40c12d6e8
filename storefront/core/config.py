import os
from dotenv import load_dotenv

# Carrega o .env da raiz do projeto
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
ENV = os.getenv("ENV", "dev")
ENV_NORMALIZED = ENV.lower()
IS_DEV = ENV_NORMALIZED in {"dev", "development", "local"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Pedidos
ORDER_NUMBER_PREFIX = os.getenv("ORDER_NUMBER_PREFIX", "SD").strip() or "SD"
DELIVERY_ESTIMATED_TIME = "30-45 min"
PICKUP_ESTIMATED_TIME = "15-20 min"

# Avaliações
TOP_RATED_LIMIT = int(os.getenv("TOP_RATED_LIMIT", "10"))

# Cardápio de exemplo carregado na inicialização
SEED_SAMPLE_DATA = _env_flag("SEED_SAMPLE_DATA", "1")

# CORS
_cors_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [origin.strip() for origin in _cors_env.split(",") if origin.strip() and origin.strip() != "*"]

if not CORS_ORIGINS and IS_DEV:
    CORS_ORIGINS = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
        "http://localhost:5173",
    ]

CORS_ALLOW_ORIGIN_REGEX = os.getenv("CORS_ALLOW_ORIGIN_REGEX", "").strip() or None
