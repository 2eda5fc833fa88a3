import json
from typing import List

from edumarketer.models.content_ideas import ContentIdea, ContentIdeasContext


def build_system_prompt() -> str:
    return """
You are an expert content strategist and scriptwriter for educational institutions.
Output ONLY a single valid JSON object matching the response schema.
""".strip()


def _context_block(context: ContentIdeasContext) -> str:
    return f"""
Name: {context.institution_name}
Type: {context.institution_type}
Target Audience: {context.target_audience}
Programs Offered: {context.programs_offered}
Unique Selling Points: {context.unique_selling_points}
""".strip()


def build_user_prompt(context: ContentIdeasContext) -> str:
    return f"""
Generate 8-12 engaging content ideas (blog posts, short videos, social media posts, infographics,
webinars) tailored to this educational institution and its audience.

Institution Context:
{_context_block(context)}

Return the ideas as an array of strings in the 'contentIdeas' field. Each idea is one sentence.
""".strip()


def build_refine_user_prompt(
    context: ContentIdeasContext,
    current_ideas: List[ContentIdea],
    user_prompt: str,
) -> str:
    ideas_json = json.dumps(
        [{"text": idea.text, "status": idea.status} for idea in current_ideas],
        indent=2,
    )
    return f"""
You are given an existing list of content ideas and a user prompt asking for modifications.

Institution Context:
{_context_block(context)}

Existing Content Ideas:
```json
{ideas_json}
```

User's Refinement Request: "{user_prompt}"

Based on the user's request, refine the existing list of content ideas.
- If the user asks to add new types of ideas (e.g., "more video ideas", "ideas for parents"), generate those.
- If the user asks to focus on a specific program or theme, tailor existing ideas or add new ones.
- If the user asks to remove certain types of ideas, omit them from the new list.
- Keep ideas that are still relevant with their text unchanged.
- Do not include IDs, statuses, or expanded details in your output.

Return the refined list of content idea texts as an array of strings in 'refinedContentIdeas'.
""".strip()


def build_expand_user_prompt(context: ContentIdeasContext, idea_text: str) -> str:
    return f"""
Your task is to expand the given content idea into a more detailed and actionable piece of content.

Content Idea: "{idea_text}"

Institution Context:
{_context_block(context)}

Instructions for Expansion:
1. Determine Format: pick the most suitable format (short video script with scene cues, blog post
   outline, talking points for a webinar, infographic narrative, interactive social post concept).
2. Detailed Content: provide specific details, examples, and practical information. If a script,
   write out dialogue or voiceover. If an outline, list specific points under each heading.
3. Engaging & Relevant: address {context.target_audience}, highlighting {context.programs_offered}
   and {context.unique_selling_points}.
4. Include a call to action if appropriate.
5. Format your output as a single markdown string in the 'expandedDetails' field.
""".strip()
