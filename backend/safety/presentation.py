from typing import NamedTuple

from .prompts import SECTION_TITLES
from .schemas import AnalysisResult

PLACEHOLDER = "No information available."

# Result fields in display order, paired with their section titles.
FIELD_ORDER = (
    'productSummary',
    'chemicalComponents',
    'safeUsage',
    'improperUse',
    'environmental',
)

# Seconds before the error banner hides itself.
ERROR_DISMISS_SECONDS = 8


class ResultPanel(NamedTuple):
    slot: str
    title: str
    text: str


def result_panels(result: AnalysisResult) -> list[ResultPanel]:
    return [
        ResultPanel(slot=field, title=title, text=getattr(result, field) or PLACEHOLDER)
        for field, title in zip(FIELD_ORDER, SECTION_TITLES)
    ]
