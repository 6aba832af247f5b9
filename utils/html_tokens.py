"""Drive the html5lib tokenizer and translate its tokens into ours.

Only lexing happens here: no tree is built, so the stream keeps whatever
nesting the markup actually has, stray end tags included.
"""
from html5lib._tokenizer import HTMLTokenizer
from html5lib.constants import E, tokenTypes

from utils.tokens import (
    CharacterTokens,
    EOFToken,
    NullCharacterToken,
    OtherToken,
    ParseError,
    Tag,
)

CHARACTER_TYPES = {tokenTypes["Characters"], tokenTypes["SpaceCharacters"]}
START_TYPES = {tokenTypes["StartTag"], tokenTypes["EmptyTag"]}
OTHER_LABELS = {value: name for name, value in tokenTypes.items()}


def _error_message(token):
    template = E.get(token["data"])
    if template is None:
        return None
    try:
        return template % (token.get("datavars") or {})
    except KeyError:
        # template wants datavars the tokenizer did not supply
        return template


def _convert(token):
    token_type = token["type"]
    if token_type in START_TYPES:
        return Tag.start(
            token["name"],
            dict(token.get("data") or {}),
            token.get("selfClosing", False) or token_type == tokenTypes["EmptyTag"],
        )
    if token_type == tokenTypes["EndTag"]:
        return Tag.end(token["name"])
    if token_type == tokenTypes["ParseError"]:
        return ParseError(token["data"], _error_message(token))
    return OtherToken(OTHER_LABELS.get(token_type, str(token_type)), token.get("data"))


def html_tokens(html: str):
    """Yield tokens for `html`, finishing with an EOFToken.

    Adjacent character tokens are joined into one block, so text the
    tokenizer hands over in pieces (whitespace runs, entity references)
    reaches the word counter whole.
    """
    pending = []
    for token in HTMLTokenizer(html):
        if token["type"] in CHARACTER_TYPES:
            if token["data"] == "\u0000":
                if pending:
                    yield CharacterTokens("".join(pending))
                    pending = []
                yield NullCharacterToken()
            else:
                pending.append(token["data"])
            continue

        if pending:
            yield CharacterTokens("".join(pending))
            pending = []
        yield _convert(token)

    if pending:
        yield CharacterTokens("".join(pending))
    yield EOFToken()
