import logging

from .schemas import AnalysisResult

logger = logging.getLogger('safety')

HEADER_MARKER = '##'

# Checked in order; the first field whose keywords appear in the header wins.
HEADER_KEYWORDS = (
    ('productSummary', ('product summary',)),
    ('chemicalComponents', ('chemical component',)),
    ('safeUsage', ('safe usage', 'usage guideline')),
    ('improperUse', ('improper use', 'effects')),
    ('environmental', ('environmental',)),
)


def match_header(header: str):
    lowered = header.lower()
    for field, keywords in HEADER_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return field
    return None


def parse_sections(text: str) -> AnalysisResult:
    """
    Split generated markdown on level-2 headers into the five result fields.
    Unknown headers are dropped; a repeated header overwrites the earlier one.
    """
    sections = {}

    for part in text.split(HEADER_MARKER):
        part = part.strip()
        if not part:
            continue

        header, _, body = part.partition('\n')
        field = match_header(header)
        if field is None:
            logger.debug(f"Dropping unrecognized section: {header!r}")
            continue
        sections[field] = body.strip()

    return AnalysisResult(**sections)
