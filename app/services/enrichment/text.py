import re

SCRIPT_BLOCK = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
STYLE_BLOCK = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
TAG = re.compile(r"<[^>]+>")
WHITESPACE = re.compile(r"\s+")
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")

# Only these four entities are decoded; everything else is left verbatim.
ENTITIES = (
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
)


def strip_html(html: str) -> str:
    """Plain text of an HTML document, with script and style content removed."""
    text = SCRIPT_BLOCK.sub(" ", html)
    text = STYLE_BLOCK.sub(" ", text)
    text = TAG.sub(" ", text)
    for pattern, replacement in ENTITIES:
        text = pattern.sub(replacement, text)
    return normalize_text(text)


def normalize_text(text: str | None) -> str:
    if not text:
        return ""
    return WHITESPACE.sub(" ", text).strip()


def split_sentences(text: str) -> list[str]:
    return [part.strip() for part in SENTENCE_BOUNDARY.split(text) if part.strip()]
