import json
from typing import Any, Dict

from edumarketer.models.gmb import GMBContext


def build_system_prompt() -> str:
    return """
You are an expert in Google Business Profile (GMB) optimization for educational institutions.
Output ONLY a single valid JSON object matching the response schema.
Each item in "keywordSuggestions" is an object with "text", "searchVolumeLast24h" and
"searchVolumeLast7d" (estimates such as "approx 10 searches", "low", "unavailable").
"descriptionSuggestions" and "optimizationTips" are markdown strings.
""".strip()


def _context_block(context: GMBContext) -> str:
    return f"""
Institution Name: {context.institution_name}
Institution Type: {context.institution_type}
Location: {context.location}
Programs Offered: {context.programs_offered}
Target Audience: {context.target_audience}
Unique Selling Points: {context.unique_selling_points}
""".strip()


def build_user_prompt(context: GMBContext) -> str:
    return f"""
Based on the information provided about the institution, generate recommendations for optimizing
their Google Business Profile. Include keyword suggestions with estimated local search volumes,
an engaging business description highlighting the unique selling points and programs, and additional
optimization tips covering posts, Q&A, photos, services and reviews.

{_context_block(context)}
""".strip()


def build_refine_user_prompt(
    context: GMBContext,
    current_strategy: Dict[str, Any],
    user_prompt: str,
) -> str:
    return f"""
You are given an existing GMB optimization strategy and a user prompt asking for modifications.

Institution Context:
{_context_block(context)}

Existing GMB Strategy:
```json
{json.dumps(current_strategy, indent=2)}
```

User's Refinement Request: "{user_prompt}"

Based on the user's request, refine the existing strategy.
- If the user asks to add, remove, or analyze keywords, update the 'keywordSuggestions' array.
  Preserve existing keywords not mentioned in the prompt, keeping their text unchanged.
  For new keywords, provide estimated search volumes.
- If the request concerns 'descriptionSuggestions' or 'optimizationTips', modify those markdown strings.
- Try to incorporate the user's feedback directly into the relevant sections.

Return the complete, updated GMB strategy sections as a JSON object.
""".strip()
