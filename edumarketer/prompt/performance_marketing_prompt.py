from edumarketer.models.performance_marketing import PerformanceMarketingContext


def build_system_prompt() -> str:
    return """
You are an expert performance marketing strategist specializing in educational institutions, with
extensive experience using Google Marketing Platform tools, particularly Google Ads (Search, Display,
YouTube, Performance Max) and Google Analytics.

The 'marketingStrategyDocument' field MUST hold a single, well-structured markdown document ready to be
rendered directly. Use clear headings, bullet points, and bold text for readability.
""".strip()


def _context_block(context: PerformanceMarketingContext) -> str:
    return f"""
Institution Name: {context.institution_name}
Institution Type: {context.institution_type}
Target Audience: {context.target_audience}
Programs Offered: {context.programs_offered}
Location/Target Market: {context.location}
Marketing Budget: {context.marketing_budget}
Marketing Goals: {context.marketing_goals}
""".strip()


def build_user_prompt(context: PerformanceMarketingContext) -> str:
    return f"""
Based on the information provided, develop a comprehensive performance marketing strategy.

{_context_block(context)}
(Interpret the budget as a guideline, focus on strategic recommendations first.)

The markdown document must include the following sections with specific, actionable advice,
heavily emphasizing Google tools:

## 1. Executive Summary
- Core strategy for achieving '{context.marketing_goals}' and expected outcomes.

## 2. Target Audience Deep Dive & Google Ads Targeting
- Analyze '{context.target_audience}'.
- In-Market, Affinity and Custom Audiences relevant to '{context.programs_offered}'.
- Demographics & location targeting for '{context.location}'; remarketing lists.

## 3. Recommended Platforms & Google Ads Campaign Strategy
- Search campaigns (structure, ad groups, 2-3 example headlines and descriptions, match types, ad extensions).
- Display, YouTube and Performance Max campaigns where they fit the audience and goals.
- Other platforms briefly, if budget and goals align.

## 4. Budget Allocation (Indicative - Focus on Google Ads)
- Percentage or priority-based allocation based on '{context.marketing_budget}'.

## 5. Key Performance Indicators (KPIs) & Tracking with Google Analytics
- Conversion tracking for all goals, UTM parameters, linking Google Ads and Analytics.
- Specific, measurable KPIs (CPA, CTR, conversion rate, ROAS, Quality Score).

## 6. Content & Creative Suggestions for Google Ads
- Ad copy highlighting the institution's strengths, landing pages, visuals for Display/YouTube.

## 7. Timeline & Milestones (High-Level)

## 8. Conclusion & Next Steps
""".strip()


def build_refine_user_prompt(
    context: PerformanceMarketingContext,
    current_document: str,
    user_prompt: str,
) -> str:
    return f"""
You are given an existing performance marketing strategy document (in markdown format) and a user
prompt asking for specific modifications. Update the existing document based on the user's request,
keeping the advice aligned with Google's best practices.

Institution Context (use this to ensure refinements are relevant):
{_context_block(context)}

Existing Performance Marketing Strategy Document (Markdown):
```markdown
{current_document}
```

User's Refinement Request: "{user_prompt}"

- Identify the section(s) of the document the request relates to and modify or expand them.
- Aim to enhance, correct, or add to the existing document. Do not replace large unrelated sections
  unless the user explicitly asks for a rewrite of a specific section.
- Preserve the existing markdown headings and overall flow of the document.

Return the complete, updated strategy as a single markdown string in 'marketingStrategyDocument'.
""".strip()
