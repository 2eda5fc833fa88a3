import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from edumarketer.core.supabase_service import MemoryStore, get_store
from edumarketer.models.common import AIKeyword, AIKpi, InstitutionCreate
from edumarketer.models.local_seo import (
    AIKeywordResearch,
    AITrackingReporting,
    GMBOptimizationSection,
    LocalLinkBuildingSection,
    LocalSEOAIOutput,
    OnPageSEOSection,
    TechnicalLocalSEOSection,
)
from edumarketer.routes.api import get_llm


class ScriptedLLM:
    """Returns queued outputs in order; None once the queue is empty"""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def generate_structured(self, system_prompt, user_prompt, response_model, operation="generate"):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "response_model": response_model,
            "operation": operation,
        })
        if not self.responses:
            return None
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def run(coro):
    return asyncio.run(coro)


def local_seo_output(
    primary: List[str] = ("preschool seo", "daycare near me"),
    kpis: List[str] = ("Local pack ranking",),
    summary: str = "Focus on local search.",
    volume: Optional[str] = "low",
) -> LocalSEOAIOutput:
    return LocalSEOAIOutput(
        executive_summary=summary,
        keyword_research=AIKeywordResearch(
            primary_keywords=[AIKeyword(text=t, search_volume_last24h=volume, search_volume_last7d=volume) for t in primary],
            secondary_keywords=[AIKeyword(text="early learning austin")],
            long_tail_keywords=[AIKeyword(text="best montessori preschool in austin tx")],
            tools_mention="Use Google Keyword Planner.",
        ),
        gmb_optimization=GMBOptimizationSection(
            profile_completeness="Fill every field.",
            nap_consistency="Keep NAP identical.",
            categories="Preschool; Child care agency.",
            services_products="List each program.",
            photos_videos="Post classroom photos monthly.",
            gmb_posts="Weekly event posts.",
            qa_section="Seed common questions.",
            reviews_strategy="Ask parents after events.",
        ),
        on_page_local_seo=OnPageSEOSection(
            localized_content="Neighborhood pages.",
            title_tags_meta_descriptions="Include city name.",
            header_tags="H1 with primary keyword.",
            image_optimization="Alt text with location.",
            local_business_schema="Add Preschool schema.",
        ),
        local_link_building=LocalLinkBuildingSection(
            local_directories="Care.com, Yelp.",
            community_partnerships="Libraries.",
            guest_posting="Parenting blogs.",
            sponsorships="Youth sports.",
        ),
        technical_local_seo=TechnicalLocalSEOSection(
            mobile_friendliness="Run the Mobile-Friendly Test.",
            site_speed="Check PageSpeed Insights.",
            citations_nap_consistency_check="Audit citations quarterly.",
        ),
        tracking_reporting=AITrackingReporting(
            google_analytics="Track tour requests.",
            google_search_console="Watch local queries.",
            kpis=[AIKpi(text=t) for t in kpis],
        ),
        conclusion="Start with the profile.",
    )


SAMPLE_INSTITUTION = InstitutionCreate(
    name="Sunrise Montessori",
    type="Preschool",
    location="Austin, TX",
    programs_offered="Toddler, Primary, After-school",
    target_audience="Parents of children aged 2-6",
    unique_selling_points="Certified Montessori guides, outdoor classrooms",
    website_url="https://sunrise.example.com",
)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def institution(store):
    return run(store.create_institution(SAMPLE_INSTITUTION))


@pytest.fixture
def llm():
    return ScriptedLLM()


@pytest.fixture
def client(store, llm):
    from edumarketer.main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_llm] = lambda: llm
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
