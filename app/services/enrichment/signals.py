from dataclasses import dataclass

from app.schemas.enrichment import SignalOut, SignalType

DEFAULT_FALLBACK_COUNT = 2


@dataclass(frozen=True)
class SignalRule:
    type: SignalType
    evidence: str
    html_cues: tuple[str, ...] = ()
    text_cues: tuple[str, ...] = ()

    def matches(self, lower_html: str, lower_text: str) -> bool:
        return any(cue in lower_html for cue in self.html_cues) or any(
            cue in lower_text for cue in self.text_cues
        )


# Order matters: the no-signal fallback returns the leading rules.
SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule(
        type=SignalType.careers_page,
        evidence="Found careers-related links or copy",
        html_cues=('href="/careers"', "href='/careers'", "careers"),
        text_cues=("we are hiring", "join our team"),
    ),
    SignalRule(
        type=SignalType.blog_or_news,
        evidence="Found blog/news links or copy",
        html_cues=('href="/blog"', "href='/blog'"),
        text_cues=("blog", "news"),
    ),
    SignalRule(
        type=SignalType.docs_or_developer_portal,
        evidence="Found docs/developer-related links or copy",
        html_cues=('href="/docs"', "href='/docs'"),
        text_cues=("documentation", "api reference", "developer docs"),
    ),
    SignalRule(
        type=SignalType.pricing_page,
        evidence="Found pricing/plan links or copy",
        html_cues=('href="/pricing"', "href='/pricing'"),
        text_cues=("pricing", "plans"),
    ),
    SignalRule(
        type=SignalType.product_or_platform,
        evidence="Website copy describes a product/platform/solution",
        text_cues=("platform", "product", "solution"),
    ),
)


def evaluate_signals(html: str, text: str) -> list[SignalOut]:
    lower_html = html.lower()
    lower_text = text.lower()
    signals: list[SignalOut] = []
    for rule in SIGNAL_RULES:
        present = rule.matches(lower_html, lower_text)
        signals.append(
            SignalOut(type=rule.type, present=present, evidence=rule.evidence if present else None)
        )
    return signals


def infer_signals(html: str, text: str, fallback_count: int = DEFAULT_FALLBACK_COUNT) -> list[SignalOut]:
    """Business signals found on the page.

    Only present signals are returned. A page with no signal at all yields the
    first ``fallback_count`` records as ``present=False`` placeholders rather
    than an empty list.
    """
    signals = evaluate_signals(html, text)
    present = [signal for signal in signals if signal.present]
    return present or signals[:fallback_count]
