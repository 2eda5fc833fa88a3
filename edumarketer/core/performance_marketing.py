import logging

from edumarketer.core.placeholders import PERFORMANCE_MARKETING_GENERATE_ERROR
from edumarketer.models.performance_marketing import (
    PerformanceMarketingAIOutput,
    PerformanceMarketingContext,
    PerformanceMarketingStrategy,
)
from edumarketer.prompt.performance_marketing_prompt import (
    build_refine_user_prompt,
    build_system_prompt,
    build_user_prompt,
)

logger = logging.getLogger("performance_marketing")


async def generate_performance_marketing_strategy(
    context: PerformanceMarketingContext,
    llm,
) -> PerformanceMarketingStrategy:
    logger.info(f"Generating performance marketing strategy for {context.institution_name}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_user_prompt(context),
        PerformanceMarketingAIOutput,
        operation="performance_marketing_generate",
    )
    if ai_output is None or not ai_output.marketing_strategy_document:
        logger.error("AI failed to generate performance marketing strategy")
        return PerformanceMarketingStrategy(marketing_strategy_document=PERFORMANCE_MARKETING_GENERATE_ERROR)

    return PerformanceMarketingStrategy(marketing_strategy_document=ai_output.marketing_strategy_document)


async def refine_performance_marketing_strategy(
    current: PerformanceMarketingStrategy,
    user_prompt: str,
    context: PerformanceMarketingContext,
    llm,
) -> PerformanceMarketingStrategy:
    logger.info(f"Refining performance marketing strategy for {context.institution_name}: {user_prompt!r}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_refine_user_prompt(context, current.marketing_strategy_document, user_prompt),
        PerformanceMarketingAIOutput,
        operation="performance_marketing_refine",
    )
    if ai_output is None or not ai_output.marketing_strategy_document:
        logger.error("AI failed to refine performance marketing strategy, returning original")
        return current

    return PerformanceMarketingStrategy(
        marketing_strategy_document=ai_output.marketing_strategy_document,
        document_status=current.document_status,
    )
