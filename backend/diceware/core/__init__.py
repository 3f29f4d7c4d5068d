# Diceware core: generator, random source, word lists
from diceware.core.passphrase import (
    GeneratorFlag,
    PassphraseGenerator,
    WordCase,
    WordClass,
)
from diceware.core.random_source import SecureRandomSource, SystemRandomSource, system_random
from diceware.core.wordlist import WordListLoadError, WordListLocator, read_wordlist

__all__ = [
    "GeneratorFlag", "PassphraseGenerator", "WordCase", "WordClass",
    "SecureRandomSource", "SystemRandomSource", "system_random",
    "WordListLoadError", "WordListLocator", "read_wordlist",
]
