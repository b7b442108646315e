import os
from dataclasses import dataclass

from dotenv import load_dotenv

from dairyclient.api.errors import ConfigurationError
from dairyclient.api.handle_requests import DEFAULT_TIMEOUT

REQUIRED_VARS = ("DAIRYCART_STORE_URL", "DAIRYCART_USERNAME", "DAIRYCART_PASSWORD")


@dataclass(frozen=True)
class StoreSettings:
    store_url: str
    username: str
    password: str
    timeout: float = DEFAULT_TIMEOUT


def load_settings(env_file: str | None = None) -> StoreSettings:
    """Read store connection settings from the environment (and a .env file, if present)."""
    load_dotenv(env_file)

    missing = [name for name in REQUIRED_VARS if not os.getenv(name)]
    if missing:
        raise ConfigurationError(f"missing environment variable(s): {', '.join(missing)}")

    raw_timeout = os.getenv("DAIRYCART_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as err:
            raise ConfigurationError(f"DAIRYCART_TIMEOUT must be a number, got {raw_timeout!r}") from err

    return StoreSettings(
        store_url=os.environ["DAIRYCART_STORE_URL"],
        username=os.environ["DAIRYCART_USERNAME"],
        password=os.environ["DAIRYCART_PASSWORD"],
        timeout=timeout,
    )
