from typing import Dict, List
from pydantic import Field

from edumarketer.models.common import AIKeyword, CamelModel, KeywordItem, ResultBlob, Status, StatusItem


class GMBContext(CamelModel):
    institution_name: str = Field(..., description="The name of the educational institution.")
    institution_type: str = Field(..., description="The type of educational institution (e.g., university, high school).")
    location: str = Field(..., description="The location of the institution (city, state).")
    programs_offered: str = Field(..., description="A description of the programs and courses offered.")
    target_audience: str = Field(..., description="The target audience of the institution (e.g., prospective students, parents).")
    unique_selling_points: str = Field(..., description="The unique selling points or advantages of the institution.")


class GMBAIOutput(CamelModel):
    keyword_suggestions: List[AIKeyword] = Field(
        ...,
        description="Keyword suggestion objects for the GMB profile, including estimated search volumes."
    )
    description_suggestions: str = Field(
        ...,
        description="Suggested GMB business description in markdown, highlighting unique selling points and programs."
    )
    optimization_tips: str = Field(
        ...,
        description="Additional GMB optimization tips in markdown, covering posts, Q&A, photos, services, and reviews."
    )


class GMBOptimizations(ResultBlob):
    keyword_suggestions: List[KeywordItem] = Field(default_factory=list)
    keyword_suggestions_section_status: Status = "pending"
    description_suggestions: str
    description_suggestions_status: Status = "pending"
    optimization_tips: str
    optimization_tips_status: Status = "pending"

    def status_lists(self) -> List[List[StatusItem]]:
        return [self.keyword_suggestions]

    def section_status_fields(self) -> Dict[str, str]:
        return {
            "keywordSuggestions": "keyword_suggestions_section_status",
            "descriptionSuggestions": "description_suggestions_status",
            "optimizationTips": "optimization_tips_status",
        }
