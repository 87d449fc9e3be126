import logging
import os

from dotenv import load_dotenv

load_dotenv()  # loads .env into environment

logger = logging.getLogger(__name__)


def _env_number(name, default, cast=float):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, using %s", name, raw, default)
        return default


DEFAULT_LOAN_AMOUNT = _env_number("EMI_DEFAULT_LOAN_AMOUNT", 5_000_000, int)
DEFAULT_RATE = _env_number("EMI_DEFAULT_RATE", 8.5)
DEFAULT_TENURE_YEARS = _env_number("EMI_DEFAULT_TENURE_YEARS", 20, int)
DEFAULT_TAX_SLAB = _env_number("EMI_DEFAULT_TAX_SLAB", 30, int)

LOG_LEVEL = os.getenv("EMI_LOG_LEVEL", "INFO").upper()


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
