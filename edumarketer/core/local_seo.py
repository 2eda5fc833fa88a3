import logging

from edumarketer.core.merge import merge_status_items, to_status_items
from edumarketer.core.placeholders import error_placeholder
from edumarketer.models.common import KeywordItem
from edumarketer.models.local_seo import (
    GMBOptimizationSection,
    KeywordResearch,
    LocalLinkBuildingSection,
    LocalSEOAIOutput,
    LocalSEOContext,
    LocalSEOStrategy,
    OnPageSEOSection,
    TechnicalLocalSEOSection,
    TrackingReporting,
)
from edumarketer.prompt.local_seo_prompt import (
    build_refine_user_prompt,
    build_system_prompt,
    build_user_prompt,
)

logger = logging.getLogger("local_seo")


def _failed_strategy() -> LocalSEOStrategy:
    """Strategy whose every text field carries the generation error placeholder"""
    def err(subject: str) -> str:
        return error_placeholder("generate", subject)

    return LocalSEOStrategy(
        executive_summary=err("executive summary"),
        keyword_research=KeywordResearch(tools_mention=err("keyword tools guidance")),
        gmb_optimization=GMBOptimizationSection(
            profile_completeness=err("profile completeness advice"),
            nap_consistency=err("NAP consistency advice"),
            categories=err("category recommendations"),
            services_products=err("services and products advice"),
            photos_videos=err("photos and videos advice"),
            gmb_posts=err("GMB posts strategy"),
            qa_section=err("Q&A advice"),
            reviews_strategy=err("reviews strategy"),
        ),
        on_page_local_seo=OnPageSEOSection(
            localized_content=err("localized content advice"),
            title_tags_meta_descriptions=err("title tag and meta description advice"),
            header_tags=err("header tag advice"),
            image_optimization=err("image optimization advice"),
            local_business_schema=err("LocalBusiness schema advice"),
        ),
        local_link_building=LocalLinkBuildingSection(
            local_directories=err("local directory suggestions"),
            community_partnerships=err("community partnership suggestions"),
            guest_posting=err("guest posting suggestions"),
            sponsorships=err("sponsorship suggestions"),
        ),
        technical_local_seo=TechnicalLocalSEOSection(
            mobile_friendliness=err("mobile friendliness advice"),
            site_speed=err("site speed advice"),
            citations_nap_consistency_check=err("citation consistency advice"),
        ),
        tracking_reporting=TrackingReporting(
            google_analytics=err("Google Analytics guidance"),
            google_search_console=err("Google Search Console guidance"),
        ),
        conclusion=err("conclusion"),
    )


async def generate_local_seo_strategy(context: LocalSEOContext, llm) -> LocalSEOStrategy:
    logger.info(f"Generating local SEO strategy for {context.institution_name}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_user_prompt(context),
        LocalSEOAIOutput,
        operation="local_seo_generate",
    )
    if ai_output is None:
        logger.error("AI failed to generate valid structured output for Local SEO Strategy")
        return _failed_strategy()

    research = ai_output.keyword_research
    tracking = ai_output.tracking_reporting
    return LocalSEOStrategy(
        executive_summary=ai_output.executive_summary,
        keyword_research=KeywordResearch(
            primary_keywords=to_status_items(research.primary_keywords, KeywordItem),
            secondary_keywords=to_status_items(research.secondary_keywords, KeywordItem),
            long_tail_keywords=to_status_items(research.long_tail_keywords, KeywordItem),
            tools_mention=research.tools_mention,
        ),
        gmb_optimization=ai_output.gmb_optimization,
        on_page_local_seo=ai_output.on_page_local_seo,
        local_link_building=ai_output.local_link_building,
        technical_local_seo=ai_output.technical_local_seo,
        tracking_reporting=TrackingReporting(
            google_analytics=tracking.google_analytics,
            google_search_console=tracking.google_search_console,
            kpis=to_status_items(tracking.kpis, KeywordItem),
        ),
        conclusion=ai_output.conclusion,
    )


async def refine_local_seo_strategy(
    current: LocalSEOStrategy,
    user_prompt: str,
    context: LocalSEOContext,
    llm,
) -> LocalSEOStrategy:
    logger.info(f"Refining local SEO strategy for {context.institution_name}: {user_prompt!r}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_refine_user_prompt(context, current.to_json_dict(), user_prompt),
        LocalSEOAIOutput,
        operation="local_seo_refine",
    )
    if ai_output is None:
        logger.error("AI failed to refine Local SEO Strategy, keeping current strategy")
        return current

    research = ai_output.keyword_research
    tracking = ai_output.tracking_reporting
    existing = current.keyword_research
    return LocalSEOStrategy(
        executive_summary=ai_output.executive_summary,
        keyword_research=KeywordResearch(
            primary_keywords=merge_status_items(existing.primary_keywords, research.primary_keywords, KeywordItem),
            secondary_keywords=merge_status_items(existing.secondary_keywords, research.secondary_keywords, KeywordItem),
            long_tail_keywords=merge_status_items(existing.long_tail_keywords, research.long_tail_keywords, KeywordItem),
            tools_mention=research.tools_mention,
        ),
        gmb_optimization=ai_output.gmb_optimization,
        on_page_local_seo=ai_output.on_page_local_seo,
        local_link_building=ai_output.local_link_building,
        technical_local_seo=ai_output.technical_local_seo,
        tracking_reporting=TrackingReporting(
            google_analytics=tracking.google_analytics,
            google_search_console=tracking.google_search_console,
            kpis=merge_status_items(current.tracking_reporting.kpis, tracking.kpis, KeywordItem),
        ),
        conclusion=ai_output.conclusion,
    )
