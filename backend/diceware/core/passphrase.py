"""
Diceware passphrase generation and entropy estimation
"""

import math
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Sequence

from diceware.core.random_source import SecureRandomSource, system_random
from diceware.core.wordlist import (
    MIN_WORDLIST_SIZE,
    RECOMMENDED_WORDLIST_SIZE,
    WordListLoadError,
    WordListLocator,
    read_wordlist,
)
from diceware.logging_config import (
    log_invalid_generation,
    log_wordlist_loaded,
    log_wordlist_rejected,
    log_wordlist_short,
)

DIGITS = "0123456789"
LOOK_ALIKE_DIGITS = "01"
SPECIAL_CHARACTERS = "!,.:;"


class WordCase(str, Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    TITLECASE = "titlecase"


class WordClass(str, Enum):
    WORDS = "words"
    NUMBERS = "numbers"
    SPECIAL = "special"


class GeneratorFlag(str, Enum):
    EXCLUDE_LOOK_ALIKE = "exclude_look_alike"


class PassphraseGenerator:
    """
    Builds passphrases from a word list

    Not safe for concurrent mutation: use one instance per caller.
    Only the random source may be shared.
    """

    DEFAULT_WORD_COUNT = 7
    DEFAULT_DIGIT_COUNT = 3
    DEFAULT_SEPARATOR = " "
    DEFAULT_WORD_CLASSES: FrozenSet[WordClass] = frozenset({WordClass.WORDS})

    def __init__(
        self,
        random_source: SecureRandomSource = system_random,
        wordlist_locator: Optional[WordListLocator] = None,
    ):
        self._random = random_source
        self._locator = wordlist_locator
        self._word_count = self.DEFAULT_WORD_COUNT
        self._digit_count = self.DEFAULT_DIGIT_COUNT
        self._word_case = WordCase.LOWERCASE
        self._classes = self.DEFAULT_WORD_CLASSES
        self._flags: FrozenSet[GeneratorFlag] = frozenset()
        self._separator = self.DEFAULT_SEPARATOR
        self._wordlist: List[str] = []
        self._load_error: Optional[WordListLoadError] = None

        if wordlist_locator is not None:
            self.set_default_word_list()

    # Configuration

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def digit_count(self) -> int:
        return self._digit_count

    @property
    def word_case(self) -> WordCase:
        return self._word_case

    @property
    def word_classes(self) -> FrozenSet[WordClass]:
        return self._classes

    @property
    def flags(self) -> FrozenSet[GeneratorFlag]:
        return self._flags

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def wordlist_size(self) -> int:
        return len(self._wordlist)

    @property
    def load_error(self) -> Optional[WordListLoadError]:
        """Error recorded by the last word list load, if any"""
        return self._load_error

    def set_word_count(self, word_count: int) -> None:
        self._word_count = max(1, word_count)

    def set_digit_count(self, digit_count: int) -> None:
        self._digit_count = max(1, digit_count)

    def set_word_case(self, word_case: WordCase) -> None:
        self._word_case = word_case

    def set_word_classes(self, classes: Iterable[WordClass]) -> None:
        classes = frozenset(classes)
        if not classes:
            self._classes = self.DEFAULT_WORD_CLASSES
            return
        self._classes = classes

    def set_flags(self, flags: Iterable[GeneratorFlag]) -> None:
        self._flags = frozenset(flags)

    def set_word_separator(self, separator: str) -> None:
        self._separator = separator

    def set_word_list(self, path) -> None:
        """
        Replace the word list with the contents of a file

        Never raises: a read failure or a list under the validity floor
        leaves the word list empty and is recorded in load_error.
        """
        self._wordlist = []
        self._load_error = None
        try:
            words = read_wordlist(path)
        except WordListLoadError as e:
            self._reject(e)
            return
        self._accept(words, str(path))

    def set_words(self, words: Sequence[str], source: str = "<memory>") -> None:
        """Replace the word list with an in-memory sequence"""
        self._wordlist = []
        self._load_error = None
        self._accept(list(words), source)

    def set_default_word_list(self) -> None:
        if self._locator is None:
            self._wordlist = []
            self._reject(WordListLoadError("<default>", "no word list locator configured"))
            return
        self.set_word_list(self._locator.wordlist_path())

    def _accept(self, words: List[str], source: str) -> None:
        if len(words) < MIN_WORDLIST_SIZE:
            self._reject(
                WordListLoadError(
                    source,
                    f"only {len(words)} entries, at least {MIN_WORDLIST_SIZE} required",
                )
            )
            return
        if len(words) < RECOMMENDED_WORDLIST_SIZE:
            log_wordlist_short(source, len(words))
        self._wordlist = words
        log_wordlist_loaded(source, len(words))

    def _reject(self, error: WordListLoadError) -> None:
        self._load_error = error
        log_wordlist_rejected(error.path, error.reason)

    def derive(self) -> "PassphraseGenerator":
        """
        New generator with default configuration over the same word list

        Word lists are replaced, never mutated, so sharing one is safe.
        """
        other = PassphraseGenerator(self._random)
        other._wordlist = self._wordlist
        other._load_error = self._load_error
        return other

    def is_valid(self) -> bool:
        if self._word_count < 1:
            return False
        return len(self._wordlist) >= MIN_WORDLIST_SIZE

    # Generation

    def generate_passphrase(self) -> str:
        """
        Generate a passphrase from the current configuration

        Returns an empty string when the generator is not valid.
        """
        if not self.is_valid():
            log_invalid_generation(len(self._wordlist))
            return ""

        tokens = []
        for _ in range(self._word_count):
            word = self._wordlist[self._random.randbelow(len(self._wordlist))]
            tokens.append(self._apply_case(word))

        if WordClass.NUMBERS in self._classes:
            number = "".join(self._generate_digit() for _ in range(self._digit_count))
            tokens.insert(self._random.randbelow(len(tokens) + 1), number)

        if WordClass.SPECIAL in self._classes:
            tokens.insert(self._random.randbelow(len(tokens) + 1), self._generate_special())

        return self._separator.join(tokens)

    def estimate_entropy(self, word_count: int = 0) -> float:
        """
        Estimate passphrase entropy in bits

        word_count overrides the configured count for the word term only;
        the digit term always uses the configured word count.

        Known limitation: the special character is not counted, so a
        passphrase with WordClass.SPECIAL is under-estimated by up to
        log2(len(SPECIAL_CHARACTERS)) bits plus its position.
        """
        if not self._wordlist:
            return 0.0
        if word_count < 1:
            word_count = self._word_count

        entropy = math.log2(len(self._wordlist)) * word_count

        if WordClass.NUMBERS in self._classes:
            entropy += math.log2(len(self._digit_alphabet())) * self._word_count

        return entropy

    def _apply_case(self, word: str) -> str:
        if self._word_case == WordCase.UPPERCASE:
            return word.upper()
        if self._word_case == WordCase.TITLECASE:
            return word[:1].upper() + word[1:]
        return word.lower()

    def _digit_alphabet(self) -> str:
        if GeneratorFlag.EXCLUDE_LOOK_ALIKE in self._flags:
            return "".join(d for d in DIGITS if d not in LOOK_ALIKE_DIGITS)
        return DIGITS

    def _generate_digit(self) -> str:
        digits = self._digit_alphabet()
        return digits[self._random.randbelow(len(digits))]

    def _generate_special(self) -> str:
        return SPECIAL_CHARACTERS[self._random.randbelow(len(SPECIAL_CHARACTERS))]
