import logging

from .gemini_client import get_text_client
from .parser import parse_sections
from .prompts import render_prompt
from .schemas import AnalysisResult
from .validation import ProductName

logger = logging.getLogger('safety')


def analyze_product(name: ProductName, client=None) -> AnalysisResult:
    """
    Prompt -> Gemini -> section parsing for one validated product name.
    Raises UpstreamFailure if the model call fails.
    """
    if client is None:
        client = get_text_client()

    text = client.generate(render_prompt(name))
    result = parse_sections(text)

    missing = [field for field, value in result.model_dump().items() if not value]
    if missing:
        logger.info(f"Analysis for {name.value!r} is missing sections: {', '.join(missing)}")
    return result
