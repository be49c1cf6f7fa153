from dotenv import load_dotenv
import os

load_dotenv()

INDEX_PATH = os.getenv("INDEX_PATH")
INTEGRITY_POLICY = os.getenv("INTEGRITY_POLICY", "raise").lower()
DEFAULT_TOP_K = int(os.getenv("DEFAULT_TOP_K", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VALID_INTEGRITY_POLICIES = {"raise", "drop"}

if INTEGRITY_POLICY not in VALID_INTEGRITY_POLICIES:
    raise Exception(
        f"Invalid INTEGRITY_POLICY '{INTEGRITY_POLICY}'. "
        f"Allowed values: {', '.join(sorted(VALID_INTEGRITY_POLICIES))}"
    )
