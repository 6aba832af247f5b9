from collections import defaultdict

import regex

# Alphabetic covers combining vowel signs (Devanagari, Thai, ...) that
# str.isalnum() rejects
NOT_WORD_CHAR = regex.compile(r"[^\p{Alphabetic}\p{N}']")
WHITESPACE = regex.compile(r"\p{White_Space}+")


def normalize_word(word: str) -> str:
    """Keep letters, digits and apostrophes, lowercased.

    Returns '' for fragments that are pure punctuation ('--', '...').
    """
    # lowercase first: some capitals lower to a letter plus a combining mark
    return NOT_WORD_CHAR.sub('', word.lower())


# runtime: O(n) since runs through each character once
def tokenize_text(text: str, stemmer=None) -> tuple[defaultdict, int]:
    """Split text on whitespace and count normalized word frequencies.

    Args:
        text: The text to tokenize
        stemmer: Optional object with a stem() method applied to each word

    Returns:
        defaultdict(int) with word frequencies, and the total number of words
    """
    token_freq = defaultdict(int)
    total_count = 0
    for fragment in WHITESPACE.split(text):
        token = normalize_word(fragment)
        if not token:
            continue
        if stemmer is not None:
            token = stemmer.stem(token)
        token_freq[token] += 1
        total_count += 1
    return token_freq, total_count


if __name__ == '__main__':
    print(tokenize_text("Hello, world! Don't -- HELLO..."))
