"""Service configuration and session factory for the coolover package."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from coolover.errors import ConfigError

PREFIX = 'COOLOVER'


@dataclass(frozen=True)
class Config:
    url: str
    credentials: Optional[Tuple[str, str]] = None


def load_env(path=None):
    """Parse a .env file into a dict. Skips comments and blank lines."""
    env = {}
    candidates = [path] if path else [
        os.path.join(os.getcwd(), '.env'),
        os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env'),
    ]
    for p in candidates:
        if p and os.path.isfile(p):
            with open(p) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        k, v = line.split('=', 1)
                        env[k.strip()] = v.strip()
            break
    return env


def load_config(path=None):
    """Return a Config from .env or environment variables.

    COOLOVER_URL is required. COOLOVER_USER and COOLOVER_PASSWORD are
    optional but must be given together.
    """
    path = path or os.environ.get(f'{PREFIX}_CONFIG')
    if path and not os.path.isfile(path):
        raise ConfigError(f'Config file not found: {path}')
    env = load_env(path)

    def value(name):
        return env.get(f'{PREFIX}_{name}') or os.environ.get(f'{PREFIX}_{name}')

    url = value('URL')
    if not url:
        raise ConfigError(f'Missing {PREFIX}_URL. Set it in .env or as an environment variable.')

    user, password = value('USER'), value('PASSWORD')
    if bool(user) != bool(password):
        raise ConfigError(f'{PREFIX}_USER and {PREFIX}_PASSWORD must be set together')

    credentials = (user, password) if user else None
    return Config(url=url.rstrip('/'), credentials=credentials)


def get_session(config):
    """Create a requests.Session, authenticated when credentials are configured."""
    session = requests.Session()
    if config.credentials:
        session.auth = HTTPBasicAuth(*config.credentials)
    session.headers.update({'Accept': 'application/json'})
    return session


def setup(path=None):
    """Load configuration and build a session, returning (session, config)."""
    config = load_config(path)
    return get_session(config), config
