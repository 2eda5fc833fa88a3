from typing import Dict
from pydantic import Field

from edumarketer.models.common import CamelModel, ResultBlob, Status


class PerformanceMarketingContext(CamelModel):
    institution_name: str = Field(..., description="The name of the educational institution.")
    institution_type: str = Field(..., description="The type of educational institution (e.g., university, college, vocational school).")
    target_audience: str = Field(..., description="The target audience for the marketing strategy.")
    programs_offered: str = Field(..., description="Key programs offered by the institution relevant for marketing.")
    location: str = Field(..., description="The geographical location / target market.")
    marketing_budget: str = Field(..., description='Approximate marketing budget (e.g., "$500/month").')
    marketing_goals: str = Field(..., description='Primary campaign goals (e.g., "Increase enrollment by 10%").')


class PerformanceMarketingAIOutput(CamelModel):
    marketing_strategy_document: str = Field(..., description="Markdown document content")


class PerformanceMarketingStrategy(ResultBlob):
    marketing_strategy_document: str
    document_status: Status = "pending"

    def section_status_fields(self) -> Dict[str, str]:
        return {"document": "document_status"}
