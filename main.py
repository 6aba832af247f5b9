import argparse
import json
import logging
import sys

from config import LOG_LEVEL, STEM_WORDS
from word_tags import TokenSession
from utils.html_tokens import html_tokens

logger = logging.getLogger(__name__)

SAMPLE_HTML = """
    <html>
    <head>
        <title>My Variable HTML</title>
    </head>
    <body> yeee
        <h1>Hello from a variable!</h1>
        <p>This <span>yeee</span> is a sample paragraph with some repeated words. The words in this paragraph will be counted.</p>
        <div>Sample text with sample words to show how repetition is counted across different tags.</div> yeee
    </body>
    </html>
    """


def configure_logger(level=LOG_LEVEL):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO) if isinstance(level, str) else level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def read_sources(paths):
    """Yield (name, html) for each path, or the built-in sample when none are given."""
    if not paths:
        yield '<sample>', SAMPLE_HTML
        return
    for path in paths:
        with open(path, 'r', encoding='utf-8') as f:
            yield path, f.read()


def build_parser():
    parser = argparse.ArgumentParser(description='Count words per enclosing HTML tag.')
    parser.add_argument('files', nargs='*', help='HTML files to read (default: a built-in sample page)')
    parser.add_argument('--stem', action='store_true', default=STEM_WORDS, help='Porter-stem words before counting')
    parser.add_argument('--echo', action='store_true', help='trace tokens to stdout while counting')
    parser.add_argument('--log-level', default=LOG_LEVEL)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level)

    try:
        sources = list(read_sources(args.files))
    except OSError as e:
        logger.error("Could not read input: %s", e)
        return 1

    for name, html in sources:
        logger.info("Tokenizing %s (%d chars)", name, len(html))
        session = TokenSession(stem=args.stem, echo=sys.stdout if args.echo else None)
        table = session.run(html_tokens(html))

        print(f"\n===== FINAL WORD TAG COUNTS ({name}) =====")
        print(json.dumps(table, indent=2, sort_keys=True))
    return 0


if __name__ == '__main__':
    sys.exit(main())
