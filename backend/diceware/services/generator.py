"""
Generator provisioning for the HTTP layer

The word list is loaded once per path and shared; every request gets
its own PassphraseGenerator so configuration never leaks between callers.
"""

from threading import Lock
from typing import Dict, Optional

from diceware.config import Settings, settings
from diceware.core.passphrase import GeneratorFlag, PassphraseGenerator, WordClass
from diceware.core.random_source import SecureRandomSource, system_random
from diceware.core.wordlist import WordListLocator
from diceware.schemas.passphrase import PassphraseRequest
from diceware.services.telemetry import increment_counter


class GeneratorPool:
    """Caches one loaded template generator per word list path"""

    def __init__(self, random_source: SecureRandomSource = system_random):
        self._random = random_source
        self._templates: Dict[str, PassphraseGenerator] = {}
        self._lock = Lock()

    def template(self, active_settings: Settings) -> PassphraseGenerator:
        """
        Loaded generator for the configured word list

        Failed loads are not cached so a fixed file is picked up on the
        next request.
        """
        locator = WordListLocator(active_settings.WORDLIST_PATH or None)
        key = str(locator.wordlist_path())

        with self._lock:
            cached = self._templates.get(key)
            if cached is not None:
                return cached

            loaded = PassphraseGenerator(self._random, wordlist_locator=locator)
            if loaded.is_valid():
                self._templates[key] = loaded
            else:
                increment_counter("wordlist_load_failures")
            return loaded

    def clear(self) -> None:
        with self._lock:
            self._templates.clear()


generator_pool = GeneratorPool()


def get_generator_pool() -> GeneratorPool:
    """FastAPI dependency"""
    return generator_pool


def configure_generator(
    template: PassphraseGenerator,
    request: PassphraseRequest,
    active_settings: Optional[Settings] = None,
) -> PassphraseGenerator:
    """Fresh generator over the template's word list, configured from a request"""
    active_settings = active_settings or settings
    generator = template.derive()

    generator.set_word_count(request.word_count or active_settings.DEFAULT_WORD_COUNT)
    generator.set_digit_count(request.digit_count or active_settings.DEFAULT_DIGIT_COUNT)
    generator.set_word_case(request.word_case)

    separator = request.separator
    if separator is None:
        separator = active_settings.DEFAULT_SEPARATOR
    generator.set_word_separator(separator)

    classes = {WordClass.WORDS}
    # An explicit digit count turns numbers on
    if request.numbers or request.digit_count is not None:
        classes.add(WordClass.NUMBERS)
    if request.special:
        classes.add(WordClass.SPECIAL)
    generator.set_word_classes(classes)

    exclude_look_alike = request.exclude_look_alike
    if exclude_look_alike is None:
        exclude_look_alike = active_settings.EXCLUDE_LOOK_ALIKE
    generator.set_flags({GeneratorFlag.EXCLUDE_LOOK_ALIKE} if exclude_look_alike else set())

    return generator
