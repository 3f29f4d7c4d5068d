# Diceware Pydantic Schemas
from diceware.schemas.passphrase import EntropyResponse, PassphraseRequest, PassphraseResponse

__all__ = ["EntropyResponse", "PassphraseRequest", "PassphraseResponse"]
