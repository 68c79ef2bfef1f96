import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "web_attend.config.production"

    if env in {"test", "testing"}:
        return "web_attend.config.testing"

    return "web_attend.config.development"


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


def api_timeout_from_env() -> float | None:
    """Seconds to wait on the remote API; unset means wait indefinitely."""
    return _optional_float(os.getenv("API_TIMEOUT"))
