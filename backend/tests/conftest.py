import pytest

SECTION_BODIES = {
    "productSummary": "Bleach is a household disinfectant and whitener.",
    "chemicalComponents": "Mostly water with a small amount of sodium hypochlorite.",
    "safeUsage": "Dilute before use and keep in a ventilated area.",
    "improperUse": "Mixing with ammonia releases irritating gases.",
    "environmental": "Dispose of small amounts down the drain with plenty of water.",
}

FIVE_SECTION_MARKDOWN = f"""## Product Summary
{SECTION_BODIES['productSummary']}

## Common Chemical Components
{SECTION_BODIES['chemicalComponents']}

## Safe Usage Guidelines
{SECTION_BODIES['safeUsage']}

## Effects of Improper Use
{SECTION_BODIES['improperUse']}

## Environmental Considerations
{SECTION_BODIES['environmental']}
"""


class StubTextClient:
    """Records prompts and returns a canned reply, or raises `error` if given."""

    def __init__(self, reply=FIVE_SECTION_MARKDOWN, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def section_bodies():
    return dict(SECTION_BODIES)


@pytest.fixture
def five_section_markdown():
    return FIVE_SECTION_MARKDOWN


@pytest.fixture
def stub_client():
    return StubTextClient()


@pytest.fixture
def gemini_settings(settings):
    settings.GEMINI_API_KEY = "test-key"
    settings.GEMINI_MODEL = "gemini-2.5-flash"
    return settings
