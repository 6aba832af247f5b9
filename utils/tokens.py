import enum


class TokenKind(enum.Enum):
    CHARACTERS = "characters"
    NULL_CHARACTER = "null-character"
    START_TAG = "start-tag"
    END_TAG = "end-tag"
    PARSE_ERROR = "parse-error"
    OTHER = "other"
    END_OF_STREAM = "end-of-stream"


class CharacterTokens:
    __slots__ = ("data",)

    kind = TokenKind.CHARACTERS

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"CharacterTokens({self.data!r})"


class NullCharacterToken:
    __slots__ = ()

    kind = TokenKind.NULL_CHARACTER

    def __repr__(self):
        return "NullCharacterToken()"


class Tag:
    __slots__ = ("attrs", "kind", "name", "self_closing")

    START = TokenKind.START_TAG
    END = TokenKind.END_TAG

    def __init__(self, kind, name, attrs=None, self_closing=False):
        self.kind = kind
        self.name = name
        self.attrs = attrs if attrs is not None else {}
        self.self_closing = bool(self_closing)

    @classmethod
    def start(cls, name, attrs=None, self_closing=False):
        return cls(cls.START, name, attrs, self_closing)

    @classmethod
    def end(cls, name):
        return cls(cls.END, name)

    def __repr__(self):
        closing = " /" if self.self_closing else ""
        kind_str = "start" if self.kind == self.START else "end"
        return f"<{kind_str}:{self.name}{closing}>"


class ParseError:
    """A tokenizer error code, carried through the stream and then discarded."""

    __slots__ = ("code", "message")

    kind = TokenKind.PARSE_ERROR

    def __init__(self, code, message=None):
        self.code = code
        self.message = message or code

    def __repr__(self):
        return f"ParseError({self.code!r})"

    def __str__(self):
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code


class OtherToken:
    """Comments, doctypes and anything else the counter has no use for."""

    __slots__ = ("data", "label")

    kind = TokenKind.OTHER

    def __init__(self, label, data=None):
        self.label = label
        self.data = data

    def __repr__(self):
        return f"OtherToken({self.label!r})"


class EOFToken:
    __slots__ = ()

    kind = TokenKind.END_OF_STREAM

    def __repr__(self):
        return "EOFToken()"
