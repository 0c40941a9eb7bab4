import os

import pytest

os.environ["ENV"] = "test"
os.environ["OBSERVABILITY_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture(autouse=True)
def fresh_settings():
    from app.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def page_html():
    return (
        "<html><head><title>Acme</title>"
        "<style>body { color: red; }</style>"
        "<script>window.track('pricing');</script></head>"
        "<body><nav><a href=\"/pricing\">Pricing</a> <a href=\"/careers\">Careers</a></nav>"
        "<h1>Acme Robotics</h1>"
        "<p>Acme builds a warehouse automation platform that helps retailers ship orders faster.</p>"
        "<p>Our robots pick, pack and sort parcels around the clock. Robots never sleep!</p>"
        "<p>We are hiring engineers &amp; operators.</p>"
        "</body></html>"
    )
