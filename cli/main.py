"""
Command-line front end - the diceware command
"""

import argparse
import logging
import sys
from typing import List, Optional

from diceware.core.passphrase import GeneratorFlag, PassphraseGenerator, WordCase, WordClass
from diceware.core.wordlist import WordListLocator

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="diceware-cli")
    commands = parser.add_subparsers(dest="command", required=True)

    diceware = commands.add_parser(
        "diceware",
        help="Generate a new random diceware passphrase.",
        description="Generate a new random diceware passphrase.",
    )
    # Counts stay strings so bad input gets our own error message
    diceware.add_argument("-W", "--words", metavar="count",
                          help="Word count for the diceware passphrase.")
    diceware.add_argument("-w", "--word-list", metavar="path",
                          help="Wordlist for the diceware generator. [Default: BIP39 English]")
    diceware.add_argument("-n", "--number", action="store_true",
                          help="Include a number in the diceware passphrase.")
    diceware.add_argument("-N", "--digits", metavar="count",
                          help="Number of digits for the included number.")
    diceware.add_argument("-s", "--special", action="store_true",
                          help="Include a special character in the diceware passphrase.")
    diceware.add_argument("-c", "--case", choices=[case.value for case in WordCase],
                          default=WordCase.LOWERCASE.value, help="Case of the generated words.")
    diceware.add_argument("--separator", default=PassphraseGenerator.DEFAULT_SEPARATOR,
                          help="Separator placed between words.")
    diceware.add_argument("-x", "--exclude-look-alike", action="store_true",
                          help="Exclude look-alike digits (0 and 1).")
    diceware.add_argument("-v", "--verbose", action="store_true",
                          help="Show word list warnings.")
    return parser


def parse_count(value: str) -> int:
    """Non-numeric input counts as 0, which callers reject"""
    try:
        return int(value)
    except ValueError:
        return 0


def run_diceware(args, out=None, err=None, locator: Optional[WordListLocator] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr

    generator = PassphraseGenerator(wordlist_locator=locator or WordListLocator())

    if args.words is None:
        generator.set_word_count(PassphraseGenerator.DEFAULT_WORD_COUNT)
    elif parse_count(args.words) <= 0:
        print(f"Invalid word count {args.words}", file=err)
        return EXIT_FAILURE
    else:
        generator.set_word_count(parse_count(args.words))

    if args.word_list:
        generator.set_word_list(args.word_list)

    classes = {WordClass.WORDS}
    if args.number:
        classes.add(WordClass.NUMBERS)
    if args.special:
        classes.add(WordClass.SPECIAL)

    if args.digits is None:
        generator.set_digit_count(PassphraseGenerator.DEFAULT_DIGIT_COUNT)
    elif parse_count(args.digits) <= 0:
        print(f"Invalid digit count {args.digits}", file=err)
        return EXIT_FAILURE
    else:
        # A digit count switches numbers on
        classes.add(WordClass.NUMBERS)
        generator.set_digit_count(parse_count(args.digits))
    generator.set_word_classes(classes)

    generator.set_word_case(WordCase(args.case))
    generator.set_word_separator(args.separator)
    if args.exclude_look_alike:
        generator.set_flags({GeneratorFlag.EXCLUDE_LOOK_ALIKE})

    if not generator.is_valid():
        # Counts are already validated, so the word list is the problem
        print("The word list is too small (< 1000 items)", file=err)
        return EXIT_FAILURE

    print(generator.generate_passphrase(), file=out)
    print(f"Estimated Entropy: {generator.estimate_entropy():.2f}", file=out)
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING if args.verbose else logging.ERROR,
        format="[DICEWARE] %(levelname)s: %(message)s",
    )

    return run_diceware(args)


if __name__ == "__main__":
    sys.exit(main())
