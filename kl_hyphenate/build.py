#!/usr/bin/env python3
"""
Dictionary Builder for kl-hyphenate.

Compiles hyph-utf8 style pattern sources into binary dictionaries, one per
language and kind:

    patterns/hyph-<code>.pat.txt  -+
    patterns/hyph-<code>.hyp.txt  -+->  dictionaries/<code>.standard.bin
    patterns/hyph-<code>.ext.txt  --->  dictionaries/<code>.extended.bin

Usage:
    python -m kl_hyphenate.build --source PATH [--output PATH]
        [--normalization nfc] [--language en-us ...] [--extended-language hu ...]

The source directory may also come from $KL_HYPHENATE_SOURCE. Any error
aborts the build; fix the data or configuration and run it again.
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from kl_hyphenate.config import BuildConfig
from kl_hyphenate.dictionary import Extended, Standard
from kl_hyphenate.errors import DictionaryIOError, HyphenationError
from kl_hyphenate.language import Language
from kl_hyphenate.normalization import Normalization

logger = logging.getLogger(__name__)

STANDARD_SUFFIX = "pat"
EXCEPTIONS_SUFFIX = "hyp"
EXTENDED_SUFFIX = "ext"


# ============================================================================
# Source Reading
# ============================================================================

def read_source(path: Path) -> List[str]:
    """Read a UTF-8 pattern source file into lines."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryIOError(f"cannot read pattern source {path}: {exc}") from exc


# ============================================================================
# Dictionary Building
# ============================================================================

def build_standard(language: Language, config: BuildConfig) -> Standard:
    """Compile the standard dictionary of one language."""
    pattern_path = config.source_pattern(language, STANDARD_SUFFIX)
    exception_path = config.source_pattern(language, EXCEPTIONS_SUFFIX)

    patterns = read_source(pattern_path)
    if exception_path.exists():
        exceptions = read_source(exception_path)
    else:
        logger.warning(f"  No exceptions for {language.code} ({exception_path} missing)")
        exceptions = []

    dictionary = Standard.build(
        language,
        patterns,
        exceptions,
        normalization=config.normalization,
        pattern_source=str(pattern_path),
        exception_source=str(exception_path),
    )
    logger.info(
        f"  {language.code}: {len(dictionary.patterns)} patterns, "
        f"{len(dictionary.patterns.tallies)} distinct tallies, "
        f"{len(dictionary.exceptions)} exceptions"
    )
    return dictionary


def build_extended(language: Language, config: BuildConfig) -> Extended:
    """Compile the extended dictionary of one language."""
    pattern_path = config.source_pattern(language, EXTENDED_SUFFIX)
    dictionary = Extended.build(
        language,
        read_source(pattern_path),
        normalization=config.normalization,
        pattern_source=str(pattern_path),
    )
    logger.info(
        f"  {language.code}: {len(dictionary.patterns)} patterns, "
        f"{len(dictionary.patterns.tallies)} distinct tallies"
    )
    return dictionary


def build_all(config: BuildConfig) -> List[Path]:
    """
    Build and save every configured dictionary.

    Returns:
        Paths of the written dictionaries
    """
    written = []

    logger.info("Building standard dictionaries:")
    for language in config.languages:
        path = config.dest_dict(language, Standard.kind)
        size = build_standard(language, config).save(path)
        logger.info(f"  Saved {path} ({size / 1024:.1f} KB)")
        written.append(path)

    logger.info("Building extended dictionaries:")
    for language in config.extended_languages:
        path = config.dest_dict(language, Extended.kind)
        size = build_extended(language, config).save(path)
        logger.info(f"  Saved {path} ({size / 1024:.1f} KB)")
        written.append(path)

    return written


# ============================================================================
# Main
# ============================================================================

def _language(code: str) -> Language:
    try:
        return Language.from_code(code)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build kl-hyphenate binary dictionaries from hyphenation patterns"
    )
    parser.add_argument(
        '--source', '-s',
        type=Path,
        help="Directory containing patterns/ (default: $KL_HYPHENATE_SOURCE)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        help="Output directory for dictionaries (default: <source>/dictionaries)"
    )
    parser.add_argument(
        '--normalization', '-n',
        choices=[n.value for n in Normalization],
        help="Unicode normalization form (default: $KL_HYPHENATE_NORMALIZATION or none)"
    )
    parser.add_argument(
        '--language', '-l',
        type=_language,
        action='append',
        dest='languages',
        help="Build the standard dictionary of this language (repeatable; default: all)"
    )
    parser.add_argument(
        '--extended-language', '-e',
        type=_language,
        action='append',
        dest='extended_languages',
        help="Build the extended dictionary of this language (repeatable; default: ca, hu)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = BuildConfig.from_env(
            source=args.source,
            output=args.output,
            normalization=args.normalization,
            languages=tuple(args.languages) if args.languages else None,
            extended_languages=tuple(args.extended_languages) if args.extended_languages else None,
        )
    except HyphenationError as exc:
        logger.error(str(exc))
        return 1

    if not config.patterns_dir.is_dir():
        logger.error(f"Pattern directory not found: {config.patterns_dir}")
        return 1

    start_time = time.time()

    try:
        written = build_all(config)
    except HyphenationError as exc:
        logger.error(f"Build failed: {exc}")
        return 1

    elapsed = time.time() - start_time
    logger.info(f"Built {len(written)} dictionaries in {elapsed:.1f} seconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())
