from __future__ import annotations
import logging
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

# ' marks a thousands group (or a single-letter numeral); " marks the last
# letter of a multi-letter numeral.
SEPARATOR = "'"
QUOTE = '"'

# glyph -> value. Final forms decode like their regular letters.
DECODE_VALUES: Dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
    "ך": 20, "ם": 40, "ן": 50, "ף": 80, "ץ": 90,
}

# value -> canonical spelling, one row per position (units, tens, hundreds).
# Written in reading order; 500..900 are built from repeated ת.
ENCODE_DIGITS: Tuple[Tuple[str, ...], ...] = (
    ("א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט"),
    ("י", "כ", "ל", "מ", "נ", "ס", "ע", "פ", "צ"),
    ("ק", "ר", "ש", "ת", "תק", "תר", "תש", "תת", "תתק"),
)

# יה and יו spell the divine name, so 15 and 16 are written as 9+6 and 9+7.
SPECIAL_IDIOMS: Dict[int, str] = {15: "טו", 16: "טז"}

FINAL_FORMS = str.maketrans({
    "כ": "ך",
    "מ": "ם",
    "נ": "ן",
    "פ": "ף",
    "צ": "ץ",
})

def letter_value(ch: str) -> int:
    return DECODE_VALUES.get(ch, 0)

def decode(numeral: str, trace: bool = False) -> int:
    """
    Read a numeral string into an integer.

    Unknown characters (including ") are skipped. A ' multiplies everything
    read so far by 1000, unless it is the last character: "ג'" is 3, not 3000.
    """
    if trace:
        logger.debug("decode got %r", numeral)
    n = 0
    last = len(numeral) - 1
    for i, ch in enumerate(numeral):
        if ch == SEPARATOR:
            if i < last:
                n *= 1000
            continue
        n += letter_value(ch)
    if trace:
        logger.debug("decode returning %d", n)
    return n

def _push(buf: List[str], letters: str) -> None:
    # buf is kept least-significant-first
    buf.extend(reversed(letters))

def encode(n: int, trace: bool = False) -> str:
    """
    Render n in canonical Hebrew numeral notation.

    Digits are consumed from the least significant end, cycling through
    units, tens and hundreds; each full cycle starts a new thousands group
    marked by '. Non-positive values have no numeral and give "".
    """
    if n <= 0:
        return ""
    if trace:
        logger.debug("encode got %d", n)

    buf: List[str] = []
    pos = 0
    while n > 0:
        if pos == 3:
            pos = 0
            buf.append(SEPARATOR)
        if pos == 0 and n % 100 in SPECIAL_IDIOMS:
            _push(buf, SPECIAL_IDIOMS[n % 100])
            n //= 100
            pos = 2
        else:
            digit = n % 10
            if digit:
                _push(buf, ENCODE_DIGITS[pos][digit - 1])
            n //= 10
            pos += 1

    if trace:
        logger.debug("encode before reversing %s", "".join(buf))
    buf.reverse()
    if trace:
        logger.debug("encode after reversing %s", "".join(buf))

    buf[-1] = buf[-1].translate(FINAL_FORMS)

    if len(buf) == 1:
        buf.append(SEPARATOR)
    elif buf[-2] == SEPARATOR and buf[-1] != SEPARATOR:
        # 5001 is ה'א' rather than ה'"א
        buf.append(SEPARATOR)
    elif buf[-1] != SEPARATOR:
        buf.insert(len(buf) - 1, QUOTE)

    out = "".join(buf)
    if trace:
        logger.debug("encode returning %s", out)
    return out

def is_canonical_gimatria(word: str, trace: bool = False) -> int:
    """
    Return the value of word if it is exactly the canonical numeral for that
    value, otherwise 0.

    Every canonical numeral carries a ' or a ", so words with neither are
    rejected without decoding.
    """
    if QUOTE not in word and SEPARATOR not in word:
        return 0
    value = decode(word, trace=trace)
    if encode(value, trace=trace) != word:
        return 0
    return value
