"""
Recursive-descent JSON reader for ghactivity.

Turns one complete JSON document into native Python values:

    null    -> None
    true    -> True, false -> False
    number  -> float
    string  -> str
    array   -> list
    object  -> dict (insertion ordered, last duplicate key wins)

The scanner walks an index over the immutable input text and only
slices out substrings when a value has to outlive the scan.
Any malformed input raises ParseError with the offending offset.
"""

from typing import Any, Dict, List

from .errors import ParseError

MAX_DEPTH = 256

_WHITESPACE = ' \t\n\r'
_DIGITS = '0123456789'
_HEX_DIGITS = '0123456789abcdefABCDEF'

_ESCAPES = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

_LITERALS = (
    ('null', None),
    ('true', True),
    ('false', False),
)


def parse(text: str) -> Any:
    """
    Parse a complete JSON document.

    Args:
        text: Full document text

    Returns:
        The top-level value as native Python objects

    Raises:
        ParseError: If the text is not exactly one valid JSON value
            optionally surrounded by whitespace
    """
    parser = _Parser(text)
    parser.skip_whitespace()
    value = parser.parse_value()
    parser.skip_whitespace()
    if parser.pos < len(text):
        raise parser.error("expected end of input")
    return value


def _describe(char: str) -> str:
    if char == '':
        return "end of input"
    if char < ' ':
        return f"control character U+{ord(char):04X}"
    return repr(char)


class _Parser:
    """Cursor over a JSON document."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ''

    def error(self, expected: str) -> ParseError:
        return ParseError(f"{expected}, found {_describe(self.peek())}", self.pos)

    def skip_whitespace(self) -> None:
        text = self.text
        pos = self.pos
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        self.pos = pos

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.error(f"expected {char!r}")
        self.pos += 1

    def parse_value(self) -> Any:
        char = self.peek()
        if char == '{':
            return self.parse_object()
        if char == '[':
            return self.parse_array()
        if char == '"':
            return self.parse_string()
        if char and char in '-' + _DIGITS:
            return self.parse_number()
        for keyword, value in _LITERALS:
            if self.text.startswith(keyword, self.pos):
                self.pos += len(keyword)
                return value
        raise self.error("expected a JSON value")

    def enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise ParseError(f"nesting deeper than {MAX_DEPTH} levels", self.pos)

    def parse_object(self) -> Dict[str, Any]:
        self.enter()
        self.pos += 1
        result: Dict[str, Any] = {}
        self.skip_whitespace()
        if self.peek() == '}':
            self.pos += 1
            self.depth -= 1
            return result
        while True:
            self.skip_whitespace()
            if self.peek() != '"':
                raise self.error("expected string key")
            key = self.parse_string()
            self.skip_whitespace()
            self.expect(':')
            self.skip_whitespace()
            result[key] = self.parse_value()
            self.skip_whitespace()
            char = self.peek()
            if char == ',':
                self.pos += 1
                continue
            if char == '}':
                self.pos += 1
                break
            raise self.error("expected ',' or '}'")
        self.depth -= 1
        return result

    def parse_array(self) -> List[Any]:
        self.enter()
        self.pos += 1
        result: List[Any] = []
        self.skip_whitespace()
        if self.peek() == ']':
            self.pos += 1
            self.depth -= 1
            return result
        while True:
            self.skip_whitespace()
            result.append(self.parse_value())
            self.skip_whitespace()
            char = self.peek()
            if char == ',':
                self.pos += 1
                continue
            if char == ']':
                self.pos += 1
                break
            raise self.error("expected ',' or ']'")
        self.depth -= 1
        return result

    def parse_number(self) -> float:
        text = self.text
        start = self.pos
        if self.peek() == '-':
            self.pos += 1
        self._digits("expected digit")
        if self.peek() == '.':
            self.pos += 1
            self._digits("expected digit after '.'")
        if self.peek() in ('e', 'E'):
            self.pos += 1
            if self.peek() in ('+', '-'):
                self.pos += 1
            self._digits("expected digit in exponent")
        return float(text[start:self.pos])

    def _digits(self, expected: str) -> None:
        text = self.text
        start = self.pos
        while self.pos < len(text) and text[self.pos] in _DIGITS:
            self.pos += 1
        if self.pos == start:
            raise self.error(expected)

    def parse_string(self) -> str:
        text = self.text
        start = self.pos
        self.pos += 1
        chunks: List[str] = []
        run_start = self.pos
        while True:
            if self.pos >= len(text):
                raise ParseError("unterminated string", start)
            char = text[self.pos]
            if char == '"':
                chunks.append(text[run_start:self.pos])
                self.pos += 1
                return ''.join(chunks)
            if char == '\\':
                chunks.append(text[run_start:self.pos])
                chunks.append(self._escape())
                run_start = self.pos
            elif char < ' ':
                raise self.error("unescaped control character in string")
            else:
                self.pos += 1

    def _escape(self) -> str:
        # pos is on the backslash
        self.pos += 1
        char = self.peek()
        if char in _ESCAPES:
            self.pos += 1
            return _ESCAPES[char]
        if char != 'u':
            raise self.error("invalid escape sequence")
        self.pos += 1
        unit = self._hex4()
        if 0xD800 <= unit <= 0xDBFF and self.text.startswith('\\u', self.pos):
            saved = self.pos
            self.pos += 2
            low = self._hex4()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))
            # not a pair; the second escape is decoded on its own
            self.pos = saved
        return chr(unit)

    def _hex4(self) -> int:
        digits = self.text[self.pos:self.pos + 4]
        if len(digits) != 4 or any(c not in _HEX_DIGITS for c in digits):
            raise self.error("expected 4 hex digits in \\u escape")
        self.pos += 4
        return int(digits, 16)
