"""
CLI interface for kl-hyphenate.

Usage:
    kl-hyphenate hyphenation
    kl-hyphenate -l de-1996 Silbentrennung
    kl-hyphenate -l hu --extended --mark = asszony
    kl-hyphenate --json --dictionary ./dictionaries/en-us.standard.bin anecdote
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from kl_hyphenate import __version__
from kl_hyphenate.dictionary import KINDS, Extended, Standard, load_dictionary
from kl_hyphenate.errors import HyphenationError
from kl_hyphenate.hyphenator import Word
from kl_hyphenate.language import Language


def word_to_dict(word: Word) -> dict:
    """JSON-ready form of a hyphenated word."""
    breaks = []
    for brk in word.breaks:
        if isinstance(brk, tuple):
            position, subregion = brk
            breaks.append({
                'position': position,
                'subregion': asdict(subregion) if subregion is not None else None,
            })
        else:
            breaks.append(brk)
    return {
        'text': word.text,
        'breaks': breaks,
        'segments': word.segments(),
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='kl-hyphenate',
        description="Find hyphenation points with Knuth-Liang patterns",
    )
    parser.add_argument('words', nargs='+', help="Words to hyphenate")
    parser.add_argument(
        '--language', '-l',
        default=Language.ENGLISH_US.code,
        help="Language code (default: en-us)"
    )
    parser.add_argument(
        '--extended', '-x',
        action='store_true',
        help="Use the extended dictionary (spelling changes at breaks)"
    )
    parser.add_argument(
        '--dictionary', '-d',
        type=Path,
        help="Path to a compiled dictionary file"
    )
    parser.add_argument(
        '--mark', '-m',
        default='-',
        help="Text inserted at each break (default: -)"
    )
    parser.add_argument('--json', '-j', action='store_true', help="Output as JSON")
    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    try:
        language = Language.from_code(args.language)
    except ValueError as exc:
        parser.error(str(exc))

    kind = Extended.kind if args.extended else Standard.kind
    try:
        if args.dictionary is not None:
            dictionary = KINDS[kind].load(args.dictionary)
        else:
            dictionary = load_dictionary(language, kind)
    except HyphenationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    words = [dictionary.hyphenate(text) for text in args.words]

    if args.json:
        print(json.dumps([word_to_dict(w) for w in words], ensure_ascii=False, indent=2))
    else:
        for word in words:
            print(word.join(args.mark))
    return 0


if __name__ == '__main__':
    sys.exit(main())
