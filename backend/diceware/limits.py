"""
Request limits for the passphrase API.
The generator core clamps but never caps; these bound what a client may ask for.
"""

MAX_WORD_COUNT = 64
MAX_DIGIT_COUNT = 32
MAX_SEPARATOR_CHARS = 8

# Entropy estimates may be requested for longer phrases than we generate.
MAX_ESTIMATE_WORD_COUNT = 4 * MAX_WORD_COUNT
