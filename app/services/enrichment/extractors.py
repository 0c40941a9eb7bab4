import re
from collections import Counter

FOCUS_TERMS = ("platform", "solution", "product", "helps", "we ", "our ", "enables", "build", "AI", "SaaS")

STOPWORDS = frozenset(
    {
        "the", "and", "for", "with", "that", "this", "from", "you", "your", "are",
        "our", "their", "they", "them", "have", "has", "into", "over", "under",
        "about", "through", "more", "than", "just", "will", "can", "all",
        "any", "out", "how", "why", "what", "when", "where", "which", "who",
        "company", "platform", "service", "services", "product", "products",
    }
)

NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\s\-]")

DEFAULT_SUMMARY_MIN_LENGTH = 40
DEFAULT_SUMMARY_SENTENCES = 2
DEFAULT_WHAT_THEY_DO_WINDOW = 15
DEFAULT_WHAT_THEY_DO_LIMIT = 4
DEFAULT_KEYWORD_LIMIT = 10


def build_summary(
    sentences: list[str],
    min_length: int = DEFAULT_SUMMARY_MIN_LENGTH,
    max_sentences: int = DEFAULT_SUMMARY_SENTENCES,
) -> str:
    if not sentences:
        return ""
    substantial = [sentence for sentence in sentences if len(sentence) > min_length]
    picked = (substantial or sentences)[:max_sentences]
    return " ".join(picked)


def _focus_score(sentence: str) -> int:
    lower = sentence.lower()
    return sum(1 for term in FOCUS_TERMS if term.lower() in lower)


def build_what_they_do(
    sentences: list[str],
    window: int = DEFAULT_WHAT_THEY_DO_WINDOW,
    limit: int = DEFAULT_WHAT_THEY_DO_LIMIT,
) -> list[str]:
    """Sentences from the top of the page that read most like a product description.

    Ranking is by the number of focus terms a sentence contains, longer
    sentences first on ties. The cut is positional, so zero-score sentences
    still fill the list on short pages.
    """
    ranked = sorted(
        sentences[:window],
        key=lambda sentence: (_focus_score(sentence), len(sentence)),
        reverse=True,
    )
    picked: list[str] = []
    for sentence in ranked[:limit]:
        sentence = sentence.strip()
        if sentence and sentence not in picked:
            picked.append(sentence)
    return picked


def tokenize(text: str) -> list[str]:
    cleaned = NON_TOKEN_CHARS.sub(" ", text.lower())
    return [word for word in cleaned.split() if len(word) > 2 and word not in STOPWORDS]


def build_keywords(text: str, max_keywords: int = DEFAULT_KEYWORD_LIMIT) -> list[str]:
    frequencies = Counter(tokenize(text))
    # sorted() is stable, so equal counts keep first-seen order.
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:max_keywords]]
