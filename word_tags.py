import logging
from collections import defaultdict

from nltk.stem import PorterStemmer

from config import ROOT_TAG, STEM_WORDS
from utils.html_tokens import html_tokens
from utils.tokenize import tokenize_text
from utils.tokens import TokenKind

logger = logging.getLogger(__name__)

stemmer = PorterStemmer()

ESCAPES = {'\t': '\\t', '\r': '\\r', '\n': '\\n', '\\': '\\\\', '"': '\\"', "'": "\\'"}


def escape_char(ch: str) -> str:
    if ch in ESCAPES:
        return ESCAPES[ch]
    if ' ' <= ch <= '~':
        return ch
    return '\\u{%x}' % ord(ch)


class TagContext:
    """Innermost open tag, plus the tags it was opened inside of."""

    def __init__(self, root: str = ROOT_TAG):
        self.stack = []
        self.current = root

    def on_start_tag(self, name: str):
        self.stack.append(self.current)
        self.current = name

    def on_end_tag(self, name: str):
        # the name is not checked against the open tag; an end tag with
        # nothing open is ignored
        if self.stack:
            self.current = self.stack.pop()

    def current_tag(self) -> str:
        return self.current

    @property
    def depth(self) -> int:
        return len(self.stack)


class WordTagCounts: # word -> {tag: count}
    def __init__(self, stemmer=None):
        self.hsh = defaultdict(lambda: defaultdict(int))
        self.stemmer = stemmer
        self.total = 0

    def count_words(self, text: str, tag: str):
        tokens, count = tokenize_text(text, self.stemmer)
        for word, freq in tokens.items():
            self.hsh[word][tag] += freq
        self.total += count

    def get_table(self) -> dict[str, dict[str, int]]:
        """Copy of the table; later counting does not show through it."""
        return {word: dict(tags) for word, tags in self.hsh.items()}

    def __len__(self):
        return len(self.hsh)


class TokenSession:
    """Feeds one token stream through a TagContext into a WordTagCounts.

    Tag tokens move the context before any later text arrives, so each word
    lands under the innermost tag open where it appeared. Parse errors and
    other token kinds only end the current character run.

    If `echo` is a writable text stream, a readable trace of the tokens is
    written to it as they are processed.
    """

    def __init__(self, stem: bool = STEM_WORDS, echo=None, root: str = ROOT_TAG):
        self.in_char_run = False
        self.context = TagContext(root)
        self.counts = WordTagCounts(stemmer if stem else None)
        self.echo = echo
        self.tokens_seen = 0
        self.parse_errors = 0
        self.finished = False

    def _is_char(self, is_char: bool):
        if self.echo is not None:
            if not self.in_char_run and is_char:
                self.echo.write('CHAR : "')
            elif self.in_char_run and not is_char:
                self.echo.write('"\n')
        self.in_char_run = is_char

    def _do_chars(self, text: str):
        self._is_char(True)
        if self.echo is not None:
            self.echo.write(''.join(escape_char(ch) for ch in text))

    def _say(self, line: str):
        if self.echo is not None:
            self.echo.write(line + '\n')

    def process_token(self, token) -> bool:
        """Handle one token. Returns False once the end of the stream is reached."""
        self.tokens_seen += 1
        kind = token.kind

        if kind is TokenKind.CHARACTERS:
            self.counts.count_words(token.data, self.context.current_tag())
            self._do_chars(token.data)
        elif kind is TokenKind.NULL_CHARACTER:
            self._do_chars('\0')
        elif kind is TokenKind.START_TAG:
            self._is_char(False)
            self.context.on_start_tag(token.name)
            self._say(f"TAG  : <{token.name}{' /' if token.self_closing else ''}>")
        elif kind is TokenKind.END_TAG:
            self._is_char(False)
            self.context.on_end_tag(token.name)
            self._say(f"TAG  : </{token.name}>")
        elif kind is TokenKind.PARSE_ERROR:
            self._is_char(False)
            self.parse_errors += 1
            logger.debug("Discarding parse error: %s", token)
            self._say(f"ERROR: {token}")
        elif kind is TokenKind.END_OF_STREAM:
            self.finish()
            return False
        else:
            self._is_char(False)
            self._say(f"OTHER: {token!r}")
        return True

    def finish(self):
        self._is_char(False)
        if self.finished:
            return
        self.finished = True
        logger.info(
            "Stream done: %d tokens, %d words (%d distinct), %d parse errors discarded, stack depth %d",
            self.tokens_seen, self.counts.total, len(self.counts),
            self.parse_errors, self.context.depth,
        )

    def run(self, tokens) -> dict[str, dict[str, int]]:
        """Process `tokens` in order up to the end-of-stream token and return the table.

        A stream that simply runs out is finished the same way.
        """
        for token in tokens:
            if not self.process_token(token):
                break
        self.finish()
        return self.get_table()

    def get_table(self) -> dict[str, dict[str, int]]:
        return self.counts.get_table()


def count_html(html: str, stem: bool = STEM_WORDS, echo=None) -> dict[str, dict[str, int]]:
    session = TokenSession(stem=stem, echo=echo)
    return session.run(html_tokens(html))
