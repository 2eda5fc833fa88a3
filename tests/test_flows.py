from edumarketer.core.content_ideas import expand_content_idea, generate_content_ideas, refine_content_ideas
from edumarketer.core.gmb_optimizer import generate_gmb_optimizations, refine_gmb_optimizations
from edumarketer.core.local_seo import generate_local_seo_strategy, refine_local_seo_strategy
from edumarketer.core.performance_marketing import (
    generate_performance_marketing_strategy,
    refine_performance_marketing_strategy,
)
from edumarketer.core.placeholders import EXPAND_CONTENT_IDEA_ERROR, PERFORMANCE_MARKETING_GENERATE_ERROR
from edumarketer.models.common import AIKeyword
from edumarketer.models.content_ideas import (
    ContentIdea,
    ContentIdeaExpansion,
    ContentIdeas,
    ContentIdeasAIOutput,
    ContentIdeasContext,
    RefinedContentIdeasAIOutput,
)
from edumarketer.models.gmb import GMBAIOutput, GMBContext
from edumarketer.models.local_seo import LocalSEOContext, LocalSEOStrategy
from edumarketer.models.performance_marketing import (
    PerformanceMarketingAIOutput,
    PerformanceMarketingContext,
    PerformanceMarketingStrategy,
)

from tests.conftest import ScriptedLLM, local_seo_output, run

LOCAL_SEO_CONTEXT = LocalSEOContext(
    institution_name="Sunrise Montessori",
    location="Austin, TX",
    programs_offered="Toddler, Primary",
    target_audience="Parents",
)

GMB_CONTEXT = GMBContext(
    institution_name="Sunrise Montessori",
    institution_type="Preschool",
    location="Austin, TX",
    programs_offered="Toddler, Primary",
    target_audience="Parents",
    unique_selling_points="Outdoor classrooms",
)

PM_CONTEXT = PerformanceMarketingContext(
    institution_name="Sunrise Montessori",
    institution_type="Preschool",
    target_audience="Parents",
    programs_offered="Toddler, Primary",
    location="Austin, TX",
    marketing_budget="$500/month",
    marketing_goals="Fill 20 seats",
)

IDEAS_CONTEXT = ContentIdeasContext(
    institution_name="Sunrise Montessori",
    institution_type="Preschool",
    target_audience="Parents",
    programs_offered="Toddler, Primary",
    unique_selling_points="Outdoor classrooms",
)


def gmb_output(keywords=("montessori austin",), description="## About us", tips="- Post weekly"):
    return GMBAIOutput(
        keyword_suggestions=[AIKeyword(text=k) for k in keywords],
        description_suggestions=description,
        optimization_tips=tips,
    )


# ---------- Local SEO ----------

def test_local_seo_generate_assigns_pending_ids():
    llm = ScriptedLLM(local_seo_output())

    strategy = run(generate_local_seo_strategy(LOCAL_SEO_CONTEXT, llm))

    primary = strategy.keyword_research.primary_keywords
    assert [k.text for k in primary] == ["preschool seo", "daycare near me"]
    assert all(k.status == "pending" for k in primary)
    assert primary[0].search_volume_last24h == "low"
    assert strategy.tracking_reporting.kpis[0].text == "Local pack ranking"
    assert strategy.executive_summary == "Focus on local search."
    assert llm.calls[0]["operation"] == "local_seo_generate"
    assert "Austin, TX" in llm.calls[0]["user_prompt"]


def test_local_seo_generate_failure_fills_placeholders():
    strategy = run(generate_local_seo_strategy(LOCAL_SEO_CONTEXT, ScriptedLLM()))

    assert strategy.executive_summary == "Error: Could not generate executive summary."
    assert strategy.conclusion == "Error: Could not generate conclusion."
    assert strategy.gmb_optimization.reviews_strategy.startswith("Error: Could not generate")
    assert strategy.keyword_research.primary_keywords == []
    assert strategy.tracking_reporting.kpis == []


def test_local_seo_refine_keeps_statuses_of_surviving_keywords():
    current = run(generate_local_seo_strategy(LOCAL_SEO_CONTEXT, ScriptedLLM(local_seo_output())))
    kept = current.keyword_research.primary_keywords[0]
    kept.status = "done"

    llm = ScriptedLLM(local_seo_output(primary=["Preschool SEO", "montessori austin"], summary="Refined."))
    refined = run(refine_local_seo_strategy(current, "add montessori keywords", LOCAL_SEO_CONTEXT, llm))

    primary = refined.keyword_research.primary_keywords
    assert (primary[0].id, primary[0].status) == (kept.id, "done")
    assert primary[1].status == "pending"
    assert primary[1].id not in {k.id for k in current.keyword_research.primary_keywords}
    assert refined.executive_summary == "Refined."
    assert '"add montessori keywords"' in llm.calls[0]["user_prompt"]
    assert "onPageLocalSEO" in llm.calls[0]["user_prompt"]


def test_local_seo_refine_failure_returns_current():
    current = run(generate_local_seo_strategy(LOCAL_SEO_CONTEXT, ScriptedLLM(local_seo_output())))

    refined = run(refine_local_seo_strategy(current, "shorter", LOCAL_SEO_CONTEXT, ScriptedLLM()))

    assert refined == current


def test_local_seo_blob_uses_explicit_aliases():
    strategy = run(generate_local_seo_strategy(LOCAL_SEO_CONTEXT, ScriptedLLM(local_seo_output())))

    data = strategy.to_json_dict()

    assert "onPageLocalSEO" in data
    assert "technicalLocalSEO" in data
    assert "searchVolumeLast24h" in data["keywordResearch"]["primaryKeywords"][0]
    assert LocalSEOStrategy.model_validate(data) == strategy


# ---------- GMB ----------

def test_gmb_generate():
    gmb = run(generate_gmb_optimizations(GMB_CONTEXT, ScriptedLLM(gmb_output())))

    assert gmb.keyword_suggestions[0].text == "montessori austin"
    assert gmb.keyword_suggestions[0].status == "pending"
    assert gmb.description_suggestions == "## About us"
    assert gmb.description_suggestions_status == "pending"
    assert gmb.optimization_tips_status == "pending"


def test_gmb_generate_failure():
    gmb = run(generate_gmb_optimizations(GMB_CONTEXT, ScriptedLLM()))

    assert gmb.keyword_suggestions == []
    assert gmb.description_suggestions == "Error: Could not generate description."
    assert gmb.optimization_tips == "Error: Could not generate optimization tips."


def test_gmb_refine_keeps_section_statuses():
    current = run(generate_gmb_optimizations(GMB_CONTEXT, ScriptedLLM(gmb_output())))
    current.keyword_suggestions[0].status = "rejected"
    current.description_suggestions_status = "done"

    llm = ScriptedLLM(gmb_output(keywords=("Montessori Austin", "preschool tours"), description="## New"))
    refined = run(refine_gmb_optimizations(current, "mention tours", GMB_CONTEXT, llm))

    assert refined.keyword_suggestions[0].id == current.keyword_suggestions[0].id
    assert refined.keyword_suggestions[0].status == "rejected"
    assert refined.keyword_suggestions[1].status == "pending"
    assert refined.description_suggestions == "## New"
    assert refined.description_suggestions_status == "done"


def test_gmb_refine_failure_preserves_keywords_and_marks_text():
    current = run(generate_gmb_optimizations(GMB_CONTEXT, ScriptedLLM(gmb_output())))

    refined = run(refine_gmb_optimizations(current, "shorter", GMB_CONTEXT, ScriptedLLM()))

    assert refined.keyword_suggestions == current.keyword_suggestions
    assert refined.description_suggestions == "Error: Could not refine description. Original preserved."
    assert refined.optimization_tips == "Error: Could not refine tips. Original preserved."
    assert current.description_suggestions == "## About us"


# ---------- Performance marketing ----------

def test_performance_marketing_generate():
    llm = ScriptedLLM(PerformanceMarketingAIOutput(marketing_strategy_document="# Plan"))

    strategy = run(generate_performance_marketing_strategy(PM_CONTEXT, llm))

    assert strategy.marketing_strategy_document == "# Plan"
    assert strategy.document_status == "pending"
    assert "$500/month" in llm.calls[0]["user_prompt"]


def test_performance_marketing_generate_failure():
    strategy = run(generate_performance_marketing_strategy(PM_CONTEXT, ScriptedLLM()))

    assert strategy.marketing_strategy_document == PERFORMANCE_MARKETING_GENERATE_ERROR
    assert strategy.marketing_strategy_document.startswith("# Error\n\n")


def test_performance_marketing_refine_keeps_document_status():
    current = PerformanceMarketingStrategy(marketing_strategy_document="# Plan", document_status="inProgress")
    llm = ScriptedLLM(PerformanceMarketingAIOutput(marketing_strategy_document="# Plan v2"))

    refined = run(refine_performance_marketing_strategy(current, "more YouTube", PM_CONTEXT, llm))

    assert refined.marketing_strategy_document == "# Plan v2"
    assert refined.document_status == "inProgress"
    assert "# Plan" in llm.calls[0]["user_prompt"]


def test_performance_marketing_refine_failure_returns_current():
    current = PerformanceMarketingStrategy(marketing_strategy_document="# Plan")

    refined = run(refine_performance_marketing_strategy(current, "more YouTube", PM_CONTEXT, ScriptedLLM()))

    assert refined == current


# ---------- Content ideas ----------

def test_content_ideas_generate():
    llm = ScriptedLLM(ContentIdeasAIOutput(content_ideas=["Garden day video", "Parent Q&A webinar"]))

    ideas = run(generate_content_ideas(IDEAS_CONTEXT, llm))

    assert [i.text for i in ideas.content_ideas] == ["Garden day video", "Parent Q&A webinar"]
    assert all(i.status == "pending" for i in ideas.content_ideas)


def test_content_ideas_generate_failure_is_empty():
    ideas = run(generate_content_ideas(IDEAS_CONTEXT, ScriptedLLM()))

    assert ideas.content_ideas == []


def test_content_ideas_refine_carries_expanded_details():
    current = ContentIdeas(content_ideas=[
        ContentIdea(id="1", text="Garden day video", status="done", expanded_details="## Script", is_expanding=True),
        ContentIdea(id="2", text="Parent Q&A webinar", status="inProgress"),
    ])
    llm = ScriptedLLM(RefinedContentIdeasAIOutput(refined_content_ideas=["garden day video", "Teacher spotlight"]))

    refined = run(refine_content_ideas(current, "swap the webinar", IDEAS_CONTEXT, llm))

    first, second = refined.content_ideas
    assert (first.id, first.status, first.expanded_details) == ("1", "done", "## Script")
    assert first.is_expanding is False
    assert second.status == "pending"
    assert second.expanded_details is None
    assert "Parent Q&A webinar" in llm.calls[0]["user_prompt"]


def test_content_ideas_refine_failure_returns_current():
    current = ContentIdeas(content_ideas=[ContentIdea(id="1", text="Garden day video")])

    assert run(refine_content_ideas(current, "more", IDEAS_CONTEXT, ScriptedLLM())) == current


def test_expand_content_idea():
    llm = ScriptedLLM(ContentIdeaExpansion(expanded_details="## Scene 1"))

    details = run(expand_content_idea("Garden day video", IDEAS_CONTEXT, llm))

    assert details == "## Scene 1"
    assert '"Garden day video"' in llm.calls[0]["user_prompt"]


def test_expand_content_idea_failure():
    assert run(expand_content_idea("Garden day video", IDEAS_CONTEXT, ScriptedLLM())) == EXPAND_CONTENT_IDEA_ERROR
