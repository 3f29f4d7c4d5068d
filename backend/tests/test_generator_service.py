from conftest import ScriptedRandom
from diceware.config import Settings
from diceware.core.passphrase import GeneratorFlag, WordCase, WordClass
from diceware.schemas.passphrase import PassphraseRequest
from diceware.services.generator import GeneratorPool, configure_generator


def make_settings(**overrides) -> Settings:
    return Settings(**overrides)


def test_pool_caches_loaded_template(wordlist_file):
    settings = make_settings(WORDLIST_PATH=str(wordlist_file(1000)))
    pool = GeneratorPool()

    first = pool.template(settings)
    second = pool.template(settings)

    assert first is second
    assert first.is_valid()


def test_pool_does_not_cache_failed_loads(tmp_path, wordlist_file):
    path = tmp_path / "later.txt"
    settings = make_settings(WORDLIST_PATH=str(path))
    pool = GeneratorPool()

    assert not pool.template(settings).is_valid()

    wordlist_file(1000, name="later.txt")
    assert pool.template(settings).is_valid()


def test_pool_uses_injected_random_source(wordlist_file):
    source = ScriptedRandom()
    pool = GeneratorPool(random_source=source)
    template = pool.template(make_settings(WORDLIST_PATH=str(wordlist_file(1000))))

    configure_generator(template, PassphraseRequest(word_count=2)).generate_passphrase()

    assert source.bounds == [1000, 1000]


def test_configure_generator_uses_settings_defaults(wordlist_file):
    settings = make_settings(
        WORDLIST_PATH=str(wordlist_file(1000)),
        DEFAULT_WORD_COUNT=4,
        DEFAULT_DIGIT_COUNT=5,
        DEFAULT_SEPARATOR="-",
        EXCLUDE_LOOK_ALIKE=True,
    )
    template = GeneratorPool().template(settings)

    generator = configure_generator(template, PassphraseRequest(), settings)

    assert generator.word_count == 4
    assert generator.digit_count == 5
    assert generator.separator == "-"
    assert generator.flags == frozenset({GeneratorFlag.EXCLUDE_LOOK_ALIKE})
    assert generator.word_classes == frozenset({WordClass.WORDS})


def test_configure_generator_from_request(wordlist_file):
    settings = make_settings(WORDLIST_PATH=str(wordlist_file(1000)), EXCLUDE_LOOK_ALIKE=True)
    template = GeneratorPool().template(settings)
    request = PassphraseRequest(
        word_count=9,
        digit_count=2,
        special=True,
        word_case=WordCase.TITLECASE,
        exclude_look_alike=False,
        separator="",
    )

    generator = configure_generator(template, request, settings)

    assert generator.word_count == 9
    assert generator.digit_count == 2
    assert generator.word_case == WordCase.TITLECASE
    assert generator.separator == ""
    assert generator.flags == frozenset()
    assert generator.word_classes == frozenset({WordClass.WORDS, WordClass.NUMBERS, WordClass.SPECIAL})


def test_configured_generators_do_not_affect_template(wordlist_file):
    settings = make_settings(WORDLIST_PATH=str(wordlist_file(1000)))
    template = GeneratorPool().template(settings)

    configure_generator(template, PassphraseRequest(word_count=20, numbers=True), settings)

    assert template.word_count == 7
    assert template.word_classes == frozenset({WordClass.WORDS})
