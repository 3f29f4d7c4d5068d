# Diceware API Routers
from diceware.routers import health, passphrase

__all__ = ["health", "passphrase"]
