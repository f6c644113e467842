import os
from dataclasses import dataclass

API_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_S = 30.0


@dataclass
class Settings:
    base_url: str = API_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S


def load_settings() -> Settings:
    base_url = os.getenv("BBUDDY_API_URL") or API_BASE_URL
    timeout = os.getenv("BBUDDY_TIMEOUT_S")
    if not timeout:
        return Settings(base_url=base_url.rstrip("/"))
    try:
        timeout_s = float(timeout)
    except ValueError:
        raise RuntimeError(f"BBUDDY_TIMEOUT_S is not a number: {timeout!r}")
    return Settings(base_url=base_url.rstrip("/"), timeout_s=timeout_s)
