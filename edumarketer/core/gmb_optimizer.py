import logging

from edumarketer.core.merge import merge_status_items, to_status_items
from edumarketer.core.placeholders import error_placeholder, refine_placeholder
from edumarketer.models.common import KeywordItem
from edumarketer.models.gmb import GMBAIOutput, GMBContext, GMBOptimizations
from edumarketer.prompt.gmb_prompt import (
    build_refine_user_prompt,
    build_system_prompt,
    build_user_prompt,
)

logger = logging.getLogger("gmb_optimizer")


async def generate_gmb_optimizations(context: GMBContext, llm) -> GMBOptimizations:
    logger.info(f"Generating GMB optimizations for {context.institution_name}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_user_prompt(context),
        GMBAIOutput,
        operation="gmb_generate",
    )
    if ai_output is None:
        logger.error("AI failed to generate valid structured output for GMB optimizations")
        return GMBOptimizations(
            keyword_suggestions=[],
            description_suggestions=error_placeholder("generate", "description"),
            optimization_tips=error_placeholder("generate", "optimization tips"),
        )

    return GMBOptimizations(
        keyword_suggestions=to_status_items(ai_output.keyword_suggestions, KeywordItem),
        description_suggestions=ai_output.description_suggestions,
        optimization_tips=ai_output.optimization_tips,
    )


async def refine_gmb_optimizations(
    current: GMBOptimizations,
    user_prompt: str,
    context: GMBContext,
    llm,
) -> GMBOptimizations:
    logger.info(f"Refining GMB optimizations for {context.institution_name}: {user_prompt!r}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_refine_user_prompt(context, current.to_json_dict(), user_prompt),
        GMBAIOutput,
        operation="gmb_refine",
    )
    if ai_output is None:
        logger.error("AI failed to generate valid structured output for GMB refinement")
        return current.model_copy(update={
            "description_suggestions": refine_placeholder("description"),
            "optimization_tips": refine_placeholder("tips"),
        })

    return GMBOptimizations(
        keyword_suggestions=merge_status_items(
            current.keyword_suggestions, ai_output.keyword_suggestions, KeywordItem
        ),
        keyword_suggestions_section_status=current.keyword_suggestions_section_status,
        description_suggestions=ai_output.description_suggestions,
        description_suggestions_status=current.description_suggestions_status,
        optimization_tips=ai_output.optimization_tips,
        optimization_tips_status=current.optimization_tips_status,
    )
