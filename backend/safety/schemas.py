from pydantic import BaseModel, Field


class AnalysisResult(BaseModel):
    productSummary: str = Field(default="", description="High-level description of the product")
    chemicalComponents: str = Field(default="", description="Typical ingredients in plain language")
    safeUsage: str = Field(default="", description="Everyday usage, storage and handling")
    improperUse: str = Field(default="", description="Risks of misuse")
    environmental: str = Field(default="", description="Disposal and environmental impact")
