from __future__ import annotations
import os

# where the word list lives (one word per line, also the append target)
DICT_FILE: str = os.environ.get("SPELLCHECK_DICT", "basic_english_2000.txt")
ENCODING: str = "utf-8"

# network
HOST: str = "0.0.0.0"
PORT_NUMBER: int = int(os.environ.get("SPELLCHECK_PORT", "60000"))

# /* ~~~ blocking reads have no timeout unless one is set (seconds) ~~~ */
READ_TIMEOUT: float | None = None

# input / output limits
INPUT_CHARACTER_LIMIT: int = 100
OUTPUT_CHARACTER_LIMIT: int = 200

# bytes read for one input line (room for CR/LF past the limit)
LINE_READ_LIMIT: int = INPUT_CHARACTER_LIMIT + 10

# dictionary
DICT_SIZE: int = 5000
MAX_WORD_LENGTH: int = INPUT_CHARACTER_LIMIT

# ranking
TOP_K: int = 5

# Progress logging (set SPELLCHECK_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("SPELLCHECK_VERBOSE") == "1"
