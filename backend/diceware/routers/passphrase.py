"""
Passphrase REST endpoints
Generated passphrases are returned once and never stored or logged.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from diceware.config import Settings, get_settings
from diceware.core.passphrase import PassphraseGenerator
from diceware.limits import MAX_ESTIMATE_WORD_COUNT
from diceware.schemas.passphrase import EntropyResponse, PassphraseRequest, PassphraseResponse
from diceware.services.generator import GeneratorPool, configure_generator, get_generator_pool
from diceware.services.telemetry import increment_counter

router = APIRouter()


def require_valid_generator(generator: PassphraseGenerator) -> None:
    if not generator.is_valid():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "wordlist_unavailable",
                "message": "The word list is too small (< 1000 items)",
            },
        )


@router.post("/passphrase", response_model=PassphraseResponse)
async def create_passphrase(
    options: PassphraseRequest,
    pool: GeneratorPool = Depends(get_generator_pool),
    active_settings: Settings = Depends(get_settings),
):
    generator = configure_generator(pool.template(active_settings), options, active_settings)
    require_valid_generator(generator)

    passphrase = generator.generate_passphrase()
    increment_counter("passphrases_generated")

    return PassphraseResponse(
        passphrase=passphrase,
        entropy_bits=generator.estimate_entropy(),
        word_count=generator.word_count,
        wordlist_size=generator.wordlist_size,
    )


@router.get("/passphrase/entropy", response_model=EntropyResponse)
async def estimate_passphrase_entropy(
    word_count: int = Query(0, ge=0, le=MAX_ESTIMATE_WORD_COUNT),
    numbers: bool = False,
    exclude_look_alike: Optional[bool] = None,
    pool: GeneratorPool = Depends(get_generator_pool),
    active_settings: Settings = Depends(get_settings),
):
    """
    Entropy estimate without generating anything.
    word_count=0 means the configured default word count.
    """
    options = PassphraseRequest(numbers=numbers, exclude_look_alike=exclude_look_alike)
    generator = configure_generator(pool.template(active_settings), options, active_settings)

    return EntropyResponse(
        entropy_bits=generator.estimate_entropy(word_count),
        wordlist_size=generator.wordlist_size,
    )
