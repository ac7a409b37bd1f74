"""
eztotp Configuration System

Deployment-level defaults read from the environment once at import:

- EZTOTP_DIGITS, EZTOTP_PERIOD, EZTOTP_TOLERANCE, EZTOTP_ALGORITHM:
  verification parameters used by ``default_parameters()``
- EZTOTP_IGNORED_CHARS: separator characters dropped from submitted codes
  (empty by default, meaning digits only)
- EZTOTP_ALERT_THRESHOLD, EZTOTP_ALERT_COOLDOWN: security event alerting
- EZTOTP_DEBUG, EZTOTP_LOG, EZTOTP_LOG_DIR: logging, see utils.logger
"""

import os
import logging

logger = logging.getLogger(__name__)

# Application information
APP_NAME = "eztotp"
APP_VERSION = "0.1.0"

TRUTHY = ('1', 'true', 'yes')


def env_flag(name):
    return os.environ.get(name, '').lower() in TRUTHY


def env_int(name, default):
    """
    Read an integer from the environment.

    Args:
        name (str): Environment variable name
        default (int): Value used when unset or unparsable

    Returns:
        int: Parsed value or the default
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}, not an integer; using {default}")
        return default


# Verification parameters
DIGITS = env_int('EZTOTP_DIGITS', 6)
PERIOD = env_int('EZTOTP_PERIOD', 30)
TOLERANCE = env_int('EZTOTP_TOLERANCE', 1)
ALGORITHM = os.environ.get('EZTOTP_ALGORITHM') or 'sha1'

# Code normalization
IGNORED_CHARS = os.environ.get('EZTOTP_IGNORED_CHARS', '')

# Security event alerting
ALERT_THRESHOLD = env_int('EZTOTP_ALERT_THRESHOLD', 5)
ALERT_COOLDOWN = env_int('EZTOTP_ALERT_COOLDOWN', 300)

# Logging configuration
DEBUG = env_flag('EZTOTP_DEBUG')
LOG_TO_FILE = env_flag('EZTOTP_LOG')
LOG_DIR = os.environ.get('EZTOTP_LOG_DIR') or os.path.join(os.path.expanduser('~'), '.eztotp', 'logs')


def default_parameters(**overrides):
    """
    Build verification parameters from the environment defaults.

    Args:
        **overrides: Any ``Parameters`` keyword to replace

    Returns:
        Parameters: Validated parameters

    Raises:
        InvalidParameters: If a configured value is out of range
    """
    # Imported here to keep config importable from every module
    from .totp.parameters import Parameters

    values = {
        'digits': DIGITS,
        'period': PERIOD,
        'tolerance': TOLERANCE,
        'algorithm': ALGORITHM,
    }
    values.update(overrides)
    return Parameters(**values)
