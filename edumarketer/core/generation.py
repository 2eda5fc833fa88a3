import logging
from typing import Awaitable, Callable, Dict, NamedTuple, Optional

from edumarketer.core.content_ideas import expand_content_idea, generate_content_ideas, refine_content_ideas
from edumarketer.core.errors import InvalidRequestError, ResultNotFoundError
from edumarketer.core.gmb_optimizer import generate_gmb_optimizations, refine_gmb_optimizations
from edumarketer.core.local_seo import generate_local_seo_strategy, refine_local_seo_strategy
from edumarketer.core.performance_marketing import (
    generate_performance_marketing_strategy,
    refine_performance_marketing_strategy,
)
from edumarketer.core.status import find_item, set_item_status, set_section_status
from edumarketer.models.common import CamelModel, Institution, ResultBlob, Status
from edumarketer.models.content_ideas import ContentIdeas, ContentIdeasContext
from edumarketer.models.domains import ContentDomain, blob_class
from edumarketer.models.gmb import GMBContext
from edumarketer.models.local_seo import LocalSEOContext
from edumarketer.models.performance_marketing import PerformanceMarketingContext

logger = logging.getLogger("generation")

NOT_SPECIFIED = "Not specified"


class CampaignInputs(NamedTuple):
    """Per-request inputs that are not part of the institution profile"""
    marketing_budget: Optional[str] = None
    marketing_goals: Optional[str] = None


def _local_seo_context(institution: Institution, inputs: CampaignInputs) -> LocalSEOContext:
    return LocalSEOContext(
        institution_name=institution.name,
        location=institution.location,
        programs_offered=institution.programs_offered,
        target_audience=institution.target_audience,
        website_url=institution.website_url or "",
    )


def _gmb_context(institution: Institution, inputs: CampaignInputs) -> GMBContext:
    return GMBContext(
        institution_name=institution.name,
        institution_type=institution.type,
        location=institution.location,
        programs_offered=institution.programs_offered,
        target_audience=institution.target_audience,
        unique_selling_points=institution.unique_selling_points,
    )


def _performance_marketing_context(
    institution: Institution,
    inputs: CampaignInputs,
) -> PerformanceMarketingContext:
    return PerformanceMarketingContext(
        institution_name=institution.name,
        institution_type=institution.type,
        target_audience=institution.target_audience,
        programs_offered=institution.programs_offered,
        location=institution.location,
        marketing_budget=inputs.marketing_budget or NOT_SPECIFIED,
        marketing_goals=inputs.marketing_goals or NOT_SPECIFIED,
    )


def _content_ideas_context(institution: Institution, inputs: CampaignInputs) -> ContentIdeasContext:
    return ContentIdeasContext(
        institution_name=institution.name,
        institution_type=institution.type,
        target_audience=institution.target_audience,
        programs_offered=institution.programs_offered,
        unique_selling_points=institution.unique_selling_points,
    )


class DomainFlow(NamedTuple):
    build_context: Callable[[Institution, CampaignInputs], CamelModel]
    generate: Callable[..., Awaitable[ResultBlob]]
    refine: Callable[..., Awaitable[ResultBlob]]


FLOWS: Dict[ContentDomain, DomainFlow] = {
    ContentDomain.LOCAL_SEO: DomainFlow(
        _local_seo_context, generate_local_seo_strategy, refine_local_seo_strategy
    ),
    ContentDomain.GMB: DomainFlow(
        _gmb_context, generate_gmb_optimizations, refine_gmb_optimizations
    ),
    ContentDomain.PERFORMANCE_MARKETING: DomainFlow(
        _performance_marketing_context,
        generate_performance_marketing_strategy,
        refine_performance_marketing_strategy,
    ),
    ContentDomain.CONTENT_IDEAS: DomainFlow(
        _content_ideas_context, generate_content_ideas, refine_content_ideas
    ),
}


async def load_result(domain: ContentDomain, institution_id: str, store) -> ResultBlob:
    data = await store.get_result(domain, institution_id)
    if data is None:
        raise ResultNotFoundError(f"No {domain.value} result for institution '{institution_id}'")
    return blob_class(domain).model_validate(data)


async def save_result(domain: ContentDomain, institution_id: str, blob: ResultBlob, store) -> ResultBlob:
    await store.save_result(domain, institution_id, blob.to_json_dict())
    return blob


async def run_generation(
    domain: ContentDomain,
    institution_id: str,
    store,
    llm,
    inputs: CampaignInputs = CampaignInputs(),
) -> ResultBlob:
    """
    Generate a fresh result for the institution and replace the stored one
    """
    try:
        logger.info("=" * 80)
        logger.info(f"GENERATION: {domain.value}")
        logger.info(f"   Institution: {institution_id}")
        logger.info("=" * 80)

        if domain is ContentDomain.PERFORMANCE_MARKETING and not (
            inputs.marketing_budget and inputs.marketing_goals
        ):
            raise InvalidRequestError("marketingBudget and marketingGoals are required")

        # STEP 1: Institution profile
        institution = await store.get_institution(institution_id)
        logger.info(f"STEP 1: Loaded institution '{institution.name}'")

        # STEP 2: Model call
        flow = FLOWS[domain]
        context = flow.build_context(institution, inputs)
        blob = await flow.generate(context, llm)
        logger.info("STEP 2: Generation finished")

        # STEP 3: Persist
        await save_result(domain, institution_id, blob, store)
        logger.info("STEP 3: Result saved")
        return blob
    except Exception:
        logger.exception(f"run_generation failed for {domain.value}")
        raise


async def run_refinement(
    domain: ContentDomain,
    institution_id: str,
    user_prompt: str,
    store,
    llm,
    inputs: CampaignInputs = CampaignInputs(),
) -> ResultBlob:
    """
    Refine the stored result with a free-text instruction and save the outcome
    """
    try:
        logger.info("=" * 80)
        logger.info(f"REFINEMENT: {domain.value}")
        logger.info(f"   Institution: {institution_id}")
        logger.info(f"   Prompt: {user_prompt!r}")
        logger.info("=" * 80)

        if not user_prompt or not user_prompt.strip():
            raise InvalidRequestError("A refinement prompt is required")

        institution = await store.get_institution(institution_id)
        current = await load_result(domain, institution_id, store)
        logger.info("STEP 1: Loaded institution and current result")

        flow = FLOWS[domain]
        context = flow.build_context(institution, inputs)
        blob = await flow.refine(current, user_prompt.strip(), context, llm)
        logger.info("STEP 2: Refinement finished")

        await save_result(domain, institution_id, blob, store)
        logger.info("STEP 3: Result saved")
        return blob
    except Exception:
        logger.exception(f"run_refinement failed for {domain.value}")
        raise


async def run_status_update(
    domain: ContentDomain,
    institution_id: str,
    item_id: str,
    status: Status,
    store,
) -> ResultBlob:
    blob = await load_result(domain, institution_id, store)
    set_item_status(blob, item_id, status)
    return await save_result(domain, institution_id, blob, store)


async def run_section_status_update(
    domain: ContentDomain,
    institution_id: str,
    section: str,
    status: Status,
    store,
) -> ResultBlob:
    blob = await load_result(domain, institution_id, store)
    set_section_status(blob, section, status)
    return await save_result(domain, institution_id, blob, store)


async def run_expansion(institution_id: str, idea_id: str, store, llm) -> ContentIdeas:
    """
    Expand one stored content idea into detailed markdown and save it on the idea
    """
    try:
        logger.info(f"EXPANSION: idea {idea_id} for institution {institution_id}")
        institution = await store.get_institution(institution_id)
        ideas = await load_result(ContentDomain.CONTENT_IDEAS, institution_id, store)
        idea = find_item(ideas, idea_id)

        context = _content_ideas_context(institution, CampaignInputs())
        idea.expanded_details = await expand_content_idea(idea.text, context, llm)
        idea.is_expanding = False

        await save_result(ContentDomain.CONTENT_IDEAS, institution_id, ideas, store)
        return ideas
    except Exception:
        logger.exception("run_expansion failed")
        raise


async def clear_result(domain: ContentDomain, institution_id: str, store) -> None:
    await store.get_institution(institution_id)
    await store.delete_result(domain, institution_id)
    logger.info(f"Cleared {domain.value} result for institution {institution_id}")
