"""Environment configuration for easyformat."""
import os
from typing import Optional

from babel import default_locale
from babel.dates import LOCALTZ, get_timezone
from dotenv import load_dotenv

ENV_FILE_NAME = 'easyformat.env'
TIMEZONE_VAR = 'EASYFORMAT_TIMEZONE'
LOCALE_VAR = 'EASYFORMAT_LOCALE'
FALLBACK_LOCALE = 'en_US'


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load environment variables from an easyformat.env file.

    Args:
        env_file: Path to the env file (default: easyformat.env in the working directory)

    Returns:
        True if a file was found and loaded
    """
    env_file = env_file or os.path.join(os.getcwd(), ENV_FILE_NAME)
    if not os.path.exists(env_file):
        return False
    return load_dotenv(env_file)


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, treating empty values as unset."""
    value = os.getenv(key)
    return value.strip() if value and value.strip() else default


def get_default_timezone():
    """Get the zone used to interpret civil date-times and to render.

    Returns:
        The zone named by EASYFORMAT_TIMEZONE, or the system local zone

    Raises:
        LookupError: If EASYFORMAT_TIMEZONE names an unknown zone
    """
    name = get_env_var(TIMEZONE_VAR)
    if name is None:
        return LOCALTZ
    return get_timezone(name)


def get_default_locale() -> str:
    """Get the locale identifier the CLI uses when none is given."""
    return get_env_var(LOCALE_VAR) or default_locale('LC_TIME') or FALLBACK_LOCALE
