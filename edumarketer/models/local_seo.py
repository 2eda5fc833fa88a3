from typing import List, Optional
from pydantic import Field

from edumarketer.models.common import (
    AIKeyword,
    AIKpi,
    CamelModel,
    KeywordItem,
    ResultBlob,
    StatusItem,
)


# ---------- Input ----------

class LocalSEOContext(CamelModel):
    institution_name: str = Field(..., description="The name of the educational institution.")
    location: str = Field(..., description="The location of the institution (city, state).")
    programs_offered: str = Field(..., description="A description of the programs offered by the institution.")
    target_audience: str = Field(..., description="A description of the target audience for the institution.")
    website_url: str = Field(default="", description="The URL of the institution's website.")


# ---------- Sections shared by AI output and blob ----------

class GMBOptimizationSection(CamelModel):
    profile_completeness: str = Field(..., description="Stress the importance of a 100% complete GMB profile.")
    nap_consistency: str = Field(..., description="Emphasize consistent Name, Address, Phone number (NAP).")
    categories: str = Field(..., description="Recommend accurate primary and secondary GMB categories.")
    services_products: str = Field(..., description="Suggest detailing programs as services/products in GMB.")
    photos_videos: str = Field(..., description="Advise on uploading high-quality, regular photos and videos.")
    gmb_posts: str = Field(..., description="Recommend a strategy for frequent GMB posts (updates, events, offers).")
    qa_section: str = Field(..., description="Suggest proactively adding common questions and answers.")
    reviews_strategy: str = Field(..., description="Outline strategies for ethically encouraging and responding to reviews.")


class OnPageSEOSection(CamelModel):
    localized_content: str = Field(..., description="Recommend creating location-specific pages or content.")
    title_tags_meta_descriptions: str = Field(..., description="Guide on optimizing title tags and meta descriptions with local keywords.")
    header_tags: str = Field(..., description="Explain how to use H1-H6 headers with local keywords.")
    image_optimization: str = Field(..., description="Advise on using local keywords in image alt text and filenames.")
    local_business_schema: str = Field(..., description="Recommend LocalBusiness schema markup, with example snippet guidance.")


class LocalLinkBuildingSection(CamelModel):
    local_directories: str = Field(..., description="Suggest relevant local and niche directories.")
    community_partnerships: str = Field(..., description="Recommend partnerships with local organizations for backlinks.")
    guest_posting: str = Field(..., description="Suggest guest posting on local blogs or educational sites.")
    sponsorships: str = Field(..., description="Mention local event sponsorships for link opportunities.")


class TechnicalLocalSEOSection(CamelModel):
    mobile_friendliness: str = Field(..., description="Stress importance (mention Google's Mobile-Friendly Test).")
    site_speed: str = Field(..., description="Advise on optimizing site speed (mention Google PageSpeed Insights).")
    citations_nap_consistency_check: str = Field(..., description="Reiterate checking and correcting NAP consistency.")


# ---------- AI output ----------

class AIKeywordResearch(CamelModel):
    primary_keywords: List[AIKeyword] = Field(..., description="List of 3-5 core local keywords with estimated search volumes.")
    secondary_keywords: List[AIKeyword] = Field(..., description="List of 5-7 related keywords with estimated search volumes.")
    long_tail_keywords: List[AIKeyword] = Field(..., description="List of 3-5 long-tail keywords with estimated search volumes.")
    tools_mention: Optional[str] = Field(default=None, description="Brief mention of Google Keyword Planner and Google Trends.")


class AITrackingReporting(CamelModel):
    google_analytics: str
    google_search_console: str
    kpis: List[AIKpi] = Field(..., description="KPIs like local pack rankings, GMB engagement, organic traffic from target location.")


class LocalSEOAIOutput(CamelModel):
    executive_summary: str
    keyword_research: AIKeywordResearch
    gmb_optimization: GMBOptimizationSection
    on_page_local_seo: OnPageSEOSection = Field(..., alias="onPageLocalSEO")
    local_link_building: LocalLinkBuildingSection
    technical_local_seo: TechnicalLocalSEOSection = Field(..., alias="technicalLocalSEO")
    tracking_reporting: AITrackingReporting
    conclusion: str


# ---------- Result blob ----------

class KeywordResearch(CamelModel):
    primary_keywords: List[KeywordItem] = Field(default_factory=list)
    secondary_keywords: List[KeywordItem] = Field(default_factory=list)
    long_tail_keywords: List[KeywordItem] = Field(default_factory=list)
    tools_mention: Optional[str] = None


class TrackingReporting(CamelModel):
    google_analytics: str
    google_search_console: str
    kpis: List[KeywordItem] = Field(default_factory=list)


class LocalSEOStrategy(ResultBlob):
    executive_summary: str
    keyword_research: KeywordResearch
    gmb_optimization: GMBOptimizationSection
    on_page_local_seo: OnPageSEOSection = Field(..., alias="onPageLocalSEO")
    local_link_building: LocalLinkBuildingSection
    technical_local_seo: TechnicalLocalSEOSection = Field(..., alias="technicalLocalSEO")
    tracking_reporting: TrackingReporting
    conclusion: str

    def status_lists(self) -> List[List[StatusItem]]:
        return [
            self.keyword_research.primary_keywords,
            self.keyword_research.secondary_keywords,
            self.keyword_research.long_tail_keywords,
            self.tracking_reporting.kpis,
        ]
