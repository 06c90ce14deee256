# Padding sentinel: WORD JOINER, a zero-width character that never shows up
# as a token on its own in ordinary text.
WORD_SEP = "\u2060"
WORD_SEP_BYTES = WORD_SEP.encode("utf-8")

# Some defaults
DEFAULT_WINDOW_SIZE = 2
DEFAULT_OUTPUT_SEPARATOR = " "

# Environment variables backing the CLI options.
ENV_WINDOW_SIZE = "NGRAMS_SIZE"
ENV_PAD = "NGRAMS_PAD"
ENV_TOKEN_MODE = "NGRAMS_TOKENS"
