"""
Word list loading and bundled list resolution
Word lists are plain UTF-8 text, one word per line
"""

from importlib.resources import files
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_WORDLIST = "english"

# Validity floor and recommended size for a usable list
MIN_WORDLIST_SIZE = 1000
RECOMMENDED_WORDLIST_SIZE = 4000


class WordListLoadError(Exception):
    """A word list could not be read or is below the validity floor"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't load wordlist {path}: {reason}")


def read_wordlist(path: Union[str, Path]) -> List[str]:
    """
    Read a newline-delimited word list

    Trailing whitespace is stripped and blank lines are skipped.
    Raises WordListLoadError if the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip() for line in f if line.strip()]
    except FileNotFoundError:
        raise WordListLoadError(str(path), "file not found")
    except UnicodeDecodeError:
        raise WordListLoadError(str(path), "file is not valid UTF-8")
    except OSError as e:
        raise WordListLoadError(str(path), e.strerror or "unreadable")


class WordListLocator:
    """
    Resolves the default word list

    An explicit override path wins; otherwise the list bundled with the
    mnemonic distribution (BIP39, 2048 words) is used.
    """

    def __init__(self, override_path: Optional[Union[str, Path]] = None):
        self.override_path = Path(override_path) if override_path else None

    def wordlist_path(self, name: str = DEFAULT_WORDLIST) -> Path:
        if self.override_path is not None:
            return self.override_path
        return Path(str(files("mnemonic") / "wordlist" / f"{name}.txt"))
