"""Ruby annotation markup."""

from __future__ import annotations

RUBY_TEMPLATE = (
    "<ruby>{original}<rp>(</rp>"
    '<rt role="presentation" aria-hidden="true">{transliteration}</rt>'
    "<rp>)</rp></ruby>"
)


def render_ruby(original: str, transliteration: str) -> str:
    """Wrap `original` with a pronunciation guide hidden from assistive technology."""
    return RUBY_TEMPLATE.format(original=original, transliteration=transliteration)
