import logging

from edumarketer.core.merge import merge_status_items, to_status_items
from edumarketer.core.placeholders import EXPAND_CONTENT_IDEA_ERROR
from edumarketer.models.content_ideas import (
    ContentIdea,
    ContentIdeaExpansion,
    ContentIdeas,
    ContentIdeasAIOutput,
    ContentIdeasContext,
    RefinedContentIdeasAIOutput,
)
from edumarketer.prompt.content_ideas_prompt import (
    build_expand_user_prompt,
    build_refine_user_prompt,
    build_system_prompt,
    build_user_prompt,
)

logger = logging.getLogger("content_ideas")


async def generate_content_ideas(context: ContentIdeasContext, llm) -> ContentIdeas:
    logger.info(f"Generating content ideas for {context.institution_name}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_user_prompt(context),
        ContentIdeasAIOutput,
        operation="content_ideas_generate",
    )
    if ai_output is None:
        logger.error("AI failed to generate content ideas")
        return ContentIdeas(content_ideas=[])

    return ContentIdeas(content_ideas=to_status_items(ai_output.content_ideas, ContentIdea))


async def refine_content_ideas(
    current: ContentIdeas,
    user_prompt: str,
    context: ContentIdeasContext,
    llm,
) -> ContentIdeas:
    logger.info(f"Refining content ideas for {context.institution_name}: {user_prompt!r}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_refine_user_prompt(context, current.content_ideas, user_prompt),
        RefinedContentIdeasAIOutput,
        operation="content_ideas_refine",
    )
    if ai_output is None:
        logger.error("AI failed to generate valid refined content ideas, returning original")
        return current

    merged = merge_status_items(
        current.content_ideas,
        ai_output.refined_content_ideas,
        ContentIdea,
        carry=("expanded_details",),
    )
    for idea in merged:
        idea.is_expanding = False
    return ContentIdeas(content_ideas=merged)


async def expand_content_idea(idea_text: str, context: ContentIdeasContext, llm) -> str:
    """Markdown details for one idea; the error placeholder if the model returns nothing"""
    logger.info(f"Expanding content idea: {idea_text!r}")

    ai_output = await llm.generate_structured(
        build_system_prompt(),
        build_expand_user_prompt(context, idea_text),
        ContentIdeaExpansion,
        operation="content_idea_expand",
    )
    if ai_output is None or not ai_output.expanded_details:
        logger.error("AI failed to expand content idea")
        return EXPAND_CONTENT_IDEA_ERROR

    return ai_output.expanded_details
