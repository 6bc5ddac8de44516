"""Language profiles: the single source of truth for per-language patterns.

The table is ordered. Detection ties are broken by position, so earlier
entries win over later ones with the same signature count.

Adding a new language:
  1. Add a LanguageProfile entry to LANGUAGES below.
  2. Pick a family; the validator and nesting tracker follow from it.
"""

import re as _re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import UnsupportedLanguageError

# Families select the syntax validator and the nesting mode.
MARKUP = "markup"
BRACE = "brace"
INDENT = "indent"


@dataclass(frozen=True)
class CommentSyntax:
    """Lexical rules the normalizer needs to blank out comments and strings."""

    line_comment: Optional[str] = "//"
    block_comment: Optional[tuple[str, str]] = ("/*", "*/")
    quotes: str = "\"'"
    triple_quotes: bool = False


@dataclass(frozen=True)
class LanguageProfile:
    """Everything the engine needs to know about a language."""

    name: str
    family: str

    # Detection signature. Every non-overlapping match is one vote.
    signature: str
    signature_flags: int = 0

    comments: CommentSyntax = CommentSyntax()

    # "brace" counts {} scopes, "indent" counts colon-opened blocks.
    nesting_mode: str = "brace"

    # Whether a compile-only native parse is available for this language.
    native_parser: bool = False


# ── Re-usable building blocks ──────────────────────────────────────

C_STYLE = CommentSyntax()
HASH_STYLE = CommentSyntax(line_comment="#", block_comment=None, triple_quotes=True)
CSS_STYLE = CommentSyntax(line_comment=None)
MARKUP_STYLE = CommentSyntax(line_comment=None, block_comment=("<!--", "-->"))

_HTML_TAGS = (
    "!DOCTYPE|html|head|body|title|div|span|p|a|ul|ol|li|table|thead|tbody|tr|td|th"
    "|h[1-6]|script|style|meta|link|img|form|input|button|label|select|option"
    "|textarea|section|article|header|footer|nav|main|br|hr"
)

_CSS_RULE_HEAD = (
    r"^[ \t]*(?!(?:else|try|do|finally)\b)[.#@:]?[a-zA-Z*][\w\-]*"
    r"(?:(?:[ \t]*[,>+~][ \t]*|[ \t]+|(?=[.#:]))[.#:]{0,2}[\w\-]+)*[ \t]*\{"
)
_CSS_DECLARATION = r"^[ \t]*[a-z\-]+[ \t]*:[ \t]*[^;{}\n]+;[ \t]*\r?$"


# ── Language definitions ───────────────────────────────────────────

LANGUAGES: dict[str, LanguageProfile] = {
    "javascript": LanguageProfile(
        name="javascript",
        family=BRACE,
        signature=(
            r"\bfunction\b|\b(?:const|let|var)\s+[\w$]+|=>|\bconsole\.\w+"
            r"|\bdocument\.\w+|\brequire\s*\(|===|!=="
        ),
        comments=C_STYLE,
    ),
    "python": LanguageProfile(
        name="python",
        family=INDENT,
        signature=(
            r"^[ \t]*(?:async[ \t]+)?def[ \t]+\w+[ \t]*\("
            r"|^[ \t]*(?:from[ \t]+[\w.]+[ \t]+)?import[ \t]+\w"
            r"|\bself\.|\belif\b|\bprint[ \t]*\(|:[ \t]*\r?$|\bNone\b|\bTrue\b|\bFalse\b"
        ),
        signature_flags=_re.MULTILINE,
        comments=HASH_STYLE,
        nesting_mode="indent",
        native_parser=True,
    ),
    "java": LanguageProfile(
        name="java",
        family=BRACE,
        signature=(
            r"\b(?:public|private|protected)\s+(?:static\s+)?(?:final\s+)?[\w<>\[\],]+\s+\w+\s*\("
            r"|\bSystem\.(?:out|err|in)\b|\bString\s*\[\s*\]|@Override\b"
            r"|\bclass\s+\w+(?:\s+(?:extends|implements)\s+[\w<>, ]+)?\s*\{"
        ),
        comments=C_STYLE,
    ),
    "cpp": LanguageProfile(
        name="cpp",
        family=BRACE,
        signature=(
            r"#include\s*[<\"]|\bstd::|\bcout\b|\bcin\b|\bendl\b|\bint\s+main\s*\("
            r"|\btemplate\s*<|\bnamespace\s+\w+|\bnullptr\b|\bprintf\s*\("
        ),
        comments=C_STYLE,
    ),
    "html": LanguageProfile(
        name="html",
        family=MARKUP,
        signature=rf"</?(?:{_HTML_TAGS})(?:\s[^<>]*)?/?>",
        signature_flags=_re.IGNORECASE,
        comments=MARKUP_STYLE,
    ),
    "css": LanguageProfile(
        name="css",
        family=BRACE,
        signature=f"{_CSS_RULE_HEAD}|{_CSS_DECLARATION}",
        signature_flags=_re.MULTILINE,
        comments=CSS_STYLE,
    ),
}

DEFAULT_LANGUAGE = "javascript"


def supported_languages() -> list[str]:
    """Language names in detection precedence order."""
    return list(LANGUAGES.keys())


def get_language_profile(name: str) -> LanguageProfile:
    """Look up a language by name. Raises UnsupportedLanguageError if unknown."""
    try:
        return LANGUAGES[name]
    except KeyError:
        raise UnsupportedLanguageError(name, supported_languages())
