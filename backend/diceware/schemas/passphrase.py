"""
Passphrase request and response schemas
"""

from pydantic import BaseModel, Field
from typing import Optional

from diceware.core.passphrase import WordCase
from diceware.limits import MAX_DIGIT_COUNT, MAX_SEPARATOR_CHARS, MAX_WORD_COUNT


class PassphraseRequest(BaseModel):
    """Composition rules; omitted fields fall back to configured defaults"""
    word_count: Optional[int] = Field(None, ge=1, le=MAX_WORD_COUNT)
    digit_count: Optional[int] = Field(
        None,
        ge=1,
        le=MAX_DIGIT_COUNT,
        description="Digits in the number token (implies numbers)"
    )
    word_case: WordCase = WordCase.LOWERCASE
    numbers: bool = False
    special: bool = False
    exclude_look_alike: Optional[bool] = None
    separator: Optional[str] = Field(None, max_length=MAX_SEPARATOR_CHARS)


class PassphraseResponse(BaseModel):
    """Generated passphrase. Never stored server-side."""
    passphrase: str
    entropy_bits: float
    word_count: int
    wordlist_size: int


class EntropyResponse(BaseModel):
    entropy_bits: float
    wordlist_size: int
