"""Configuration for building and locating dictionaries."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from kl_hyphenate.errors import ConfigurationError
from kl_hyphenate.language import EXTENDED_LANGUAGES, Language
from kl_hyphenate.normalization import Normalization

# Directory holding patterns/ (required for builds)
SOURCE_ENV = "KL_HYPHENATE_SOURCE"
# Where compiled dictionaries are written (default: <source>/dictionaries)
OUTPUT_ENV = "KL_HYPHENATE_OUTPUT"
# Normalization form applied to patterns and words: none, nfc, nfd, nfkc, nfkd
NORMALIZATION_ENV = "KL_HYPHENATE_NORMALIZATION"
# Where dictionaries are loaded from at runtime
DICTIONARIES_ENV = "KL_HYPHENATE_DICTIONARIES"


@dataclass(frozen=True)
class BuildConfig:
    source: Path
    output: Path
    normalization: Normalization = Normalization.NONE
    languages: Tuple[Language, ...] = tuple(Language)
    extended_languages: Tuple[Language, ...] = EXTENDED_LANGUAGES

    @property
    def patterns_dir(self) -> Path:
        return self.source / "patterns"

    def source_pattern(self, language: Language, suffix: str) -> Path:
        """Pattern source file, e.g. patterns/hyph-en-us.pat.txt."""
        return self.patterns_dir / f"hyph-{language.code}.{suffix}.txt"

    def dest_dict(self, language: Language, kind: str) -> Path:
        return self.output / f"{language.code}.{kind}.bin"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "BuildConfig":
        """
        Read the build configuration from the environment.

        Keyword overrides (e.g. from command-line flags) take precedence over
        environment variables; ``None`` overrides are ignored.

        Raises:
            ConfigurationError: If no source directory is configured or the
                normalization form is unknown
        """
        environ = os.environ if environ is None else environ
        overrides = {k: v for k, v in overrides.items() if v is not None}

        source = overrides.pop("source", None) or environ.get(SOURCE_ENV)
        if not source:
            raise ConfigurationError(f"no pattern source directory: set {SOURCE_ENV} or pass --source")
        source = Path(source)

        output = overrides.pop("output", None) or environ.get(OUTPUT_ENV) or source / "dictionaries"

        normalization = overrides.pop("normalization", None) or environ.get(NORMALIZATION_ENV, "none")
        if not isinstance(normalization, Normalization):
            try:
                normalization = Normalization.from_name(normalization)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        return cls(source=source, output=Path(output), normalization=normalization, **overrides)
