from typing import List, Optional
from pydantic import Field

from edumarketer.models.common import CamelModel, ResultBlob, StatusItem


class ContentIdeasContext(CamelModel):
    institution_name: str = Field(..., description="The name of the educational institution.")
    institution_type: str = Field(..., description="The type of educational institution.")
    target_audience: str = Field(..., description="The target audience for the content.")
    programs_offered: str = Field(..., description="A description of the programs offered by the institution.")
    unique_selling_points: str = Field(..., description="The unique selling points of the educational institution.")


class ContentIdea(StatusItem):
    expanded_details: Optional[str] = Field(
        default=None,
        description="Generated detailed script or explanation for the content idea."
    )
    is_expanding: Optional[bool] = None


class ContentIdeasAIOutput(CamelModel):
    content_ideas: List[str] = Field(..., description="A list of content idea strings.")


class RefinedContentIdeasAIOutput(CamelModel):
    refined_content_ideas: List[str] = Field(..., description="The refined list of content idea texts.")


class ContentIdeaExpansion(CamelModel):
    expanded_details: str = Field(
        ...,
        description="Detailed script, outline, or explanation for the content idea, in markdown format."
    )


class ContentIdeas(ResultBlob):
    content_ideas: List[ContentIdea] = Field(default_factory=list)

    def status_lists(self) -> List[List[StatusItem]]:
        return [self.content_ideas]
