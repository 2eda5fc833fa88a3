import json
from typing import Any, Dict

from edumarketer.models.local_seo import LocalSEOContext


def build_system_prompt() -> str:
    return """
You are an expert local SEO strategist specializing in educational institutions,
with deep knowledge of Google's SEO tools and best practices.

RULES:
1) Output ONLY a single valid JSON object matching the response schema, no Markdown fences.
2) String fields hold concise, actionable advice; simple markdown (bold) is allowed inside them.
3) Keyword arrays hold objects with "text", "searchVolumeLast24h" and "searchVolumeLast7d".
   Volumes are estimates for the institution's location (e.g. "approx 50 searches", "low", "data unavailable").
4) The "kpis" array holds objects with "text" only.
""".strip()


def _context_block(context: LocalSEOContext) -> str:
    return f"""
Institution Name: {context.institution_name}
Location: {context.location}
Programs Offered: {context.programs_offered}
Target Audience: {context.target_audience}
Website URL: {context.website_url}
""".strip()


def build_user_prompt(context: LocalSEOContext) -> str:
    return f"""
Based on the following information:
{_context_block(context)}

Generate a comprehensive local SEO strategy as a JSON object with these fields:
- executiveSummary
- keywordResearch (primaryKeywords: 3-5 core local keywords, secondaryKeywords: 5-7 related keywords
  including program-specific terms, longTailKeywords: 3-5 examples, toolsMention for Google Keyword Planner
  and Google Trends)
- gmbOptimization (profileCompleteness, napConsistency, categories, servicesProducts, photosVideos,
  gmbPosts, qaSection, reviewsStrategy)
- onPageLocalSEO (localizedContent, titleTagsMetaDescriptions, headerTags, imageOptimization, localBusinessSchema)
- localLinkBuilding (localDirectories, communityPartnerships, guestPosting, sponsorships)
- technicalLocalSEO (mobileFriendliness, siteSpeed, citationsNapConsistencyCheck)
- trackingReporting (googleAnalytics, googleSearchConsole, kpis)
- conclusion
""".strip()


def build_refine_user_prompt(
    context: LocalSEOContext,
    current_strategy: Dict[str, Any],
    user_prompt: str,
) -> str:
    return f"""
You are given an existing Local SEO strategy for an educational institution and a user prompt
asking for modifications.

Institution Context:
{_context_block(context)}

Existing Strategy:
```json
{json.dumps(current_strategy, indent=2)}
```

User's Refinement Request: "{user_prompt}"

Based on the user's request, refine the existing strategy.
- If the user asks to add or analyze keywords, update the 'keywordResearch' section accordingly.
  Provide estimated search volumes for new keywords. Preserve existing keywords unless specified otherwise,
  keeping their text unchanged.
- If the request concerns other sections (GMB, on-page SEO, link building), modify those parts.
- Do not include ids or statuses in your output.

Return the complete, updated strategy as a JSON object.
""".strip()
