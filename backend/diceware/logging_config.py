"""
Logging configuration
Generator events are logged but never include a generated passphrase
"""

import logging
import sys
from typing import Set


class SecurityFilter(logging.Filter):
    """Filter that redacts records carrying passphrases or secrets"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
        "token",
        "words",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        lowered = message.lower()
        for key in self.SENSITIVE_KEYS:
            if key in lowered and "=" in message:
                # Looks like a value assignment
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = None
                break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecurityFilter())

    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


generator_logger = logging.getLogger("diceware.generator")


def log_wordlist_loaded(source: str, size: int):
    generator_logger.info(f"Loaded {size} entries from {source}")


def log_wordlist_short(source: str, size: int):
    """Usable but below the recommended size"""
    generator_logger.warning(f"Wordlist too short! {source} has only {size} entries")


def log_wordlist_rejected(source: str, reason: str):
    generator_logger.warning(f"Couldn't load wordlist {source} ({reason})")


def log_invalid_generation(size: int):
    generator_logger.error(f"Generation attempted with an invalid configuration ({size} entries loaded)")


def log_rate_limited(ip: str):
    generator_logger.warning(f"Rate limit exceeded for {ip}")
