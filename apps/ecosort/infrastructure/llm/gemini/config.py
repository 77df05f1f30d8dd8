"""Gemini defaults."""

DEFAULT_MODEL = "gemini-flash-latest"

# ==========================================
# Generation
# ==========================================

TEMPERATURE = 0.2
MAX_OUTPUT_TOKENS = 1024
RESPONSE_MIME_TYPE = "application/json"

# ==========================================
# HTTP
# ==========================================

REQUEST_TIMEOUT_SECONDS = 30.0

# Finish reasons meaning the model declined rather than failed.
REFUSAL_FINISH_REASONS = frozenset(
    {
        "SAFETY",
        "RECITATION",
        "BLOCKLIST",
        "PROHIBITED_CONTENT",
        "SPII",
        "IMAGE_SAFETY",
    }
)
