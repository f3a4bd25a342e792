from .validation import ProductName

SECTION_TITLES = (
    'Product Summary',
    'Common Chemical Components',
    'Safe Usage Guidelines',
    'Effects of Improper Use',
    'Environmental Considerations',
)

SAFETY_PROMPT = """You are a chemical safety educator. Provide a clear, informative overview of "{product_name}" for general consumers.

Structure your response EXACTLY as follows with these section headers:

## Product Summary
[Provide a high-level description of the product and its purpose]

## Common Chemical Components
[List typical ingredients in simple terms - no chemical formulas, keep it educational and non-technical]

## Safe Usage Guidelines
[Explain proper everyday usage, storage, and handling]

## Effects of Improper Use
[Describe potential risks of misuse in a clear but non-alarming way]

## Environmental Considerations
[Discuss disposal, packaging impact, and eco-friendly aspects]

Important guidelines:
- Keep language simple and educational
- Do not provide chemical formulas or synthesis instructions
- Focus on consumer safety and awareness
- Be factual but not alarmist
- Keep each section to 2-4 sentences"""


def render_prompt(name: ProductName) -> str:
    return SAFETY_PROMPT.format(product_name=name.value)
