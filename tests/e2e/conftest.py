import pytest

from campaign_console.core.config import config
from campaign_console.search.aggregator import GlobalSearchService, create_default_service


@pytest.fixture
def service() -> GlobalSearchService:
    """Service against the live backend; e2e suites only."""
    problems = config.validate()
    if problems:
        pytest.skip("; ".join(problems))
    return create_default_service()
