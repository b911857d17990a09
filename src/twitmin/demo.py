# src/twitmin/demo.py
import argparse
import json
import logging
import os
import sys


def main(argv=None):
    """CLI demo: tokenize a tweet, list shorter alternatives per word, and count its length."""
    from .resolution import load_dictionary, resolve_tweet
    from .resolution.alternatives import DEFAULT_DICTIONARY
    from .resolution.constants import SAMPLE_TWEET
    from .resolution.utils import reload_topics

    parser = argparse.ArgumentParser(
        prog="twitmin-demo",
        description="Analyze a tweet: tokens, shorter alternatives, platform length.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Tweet to analyze (e.g. By the way, thanks for the tips @bob)",
    )
    parser.add_argument(
        "--dictionary",
        default=os.getenv("TWITMIN_DICTIONARY", DEFAULT_DICTIONARY),
        help="Dictionary file name inside the data directory",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    text = " ".join(args.text) or SAMPLE_TWEET

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        os.environ["TWITMIN_DEBUG_TOPICS"] = "all"
        reload_topics()

    try:
        dictionary = load_dictionary(args.dictionary)
        result = resolve_tweet(text, dictionary)
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
