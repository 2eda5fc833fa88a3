from edumarketer.models.common import AIKeyword
from edumarketer.models.content_ideas import (
    ContentIdeaExpansion,
    ContentIdeasAIOutput,
    RefinedContentIdeasAIOutput,
)
from edumarketer.models.gmb import GMBAIOutput
from edumarketer.models.performance_marketing import PerformanceMarketingAIOutput
from edumarketer.routes.api import get_llm

from tests.conftest import local_seo_output

INSTITUTION_BODY = {
    "name": "Sunrise Montessori",
    "type": "Preschool",
    "location": "Austin, TX",
    "programsOffered": "Toddler, Primary",
    "targetAudience": "Parents of children aged 2-6",
    "uniqueSellingPoints": "Outdoor classrooms",
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_statuses(client):
    values = [s["value"] for s in client.get("/statuses").json()]

    assert values == ["pending", "inProgress", "done", "rejected"]


def test_institution_lifecycle(client):
    created = client.post("/institutions", json=INSTITUTION_BODY)
    assert created.status_code == 201
    institution_id = created.json()["id"]
    assert created.json()["programsOffered"] == "Toddler, Primary"

    assert client.get(f"/institutions/{institution_id}").json()["name"] == "Sunrise Montessori"
    assert len(client.get("/institutions").json()) == 1

    patched = client.patch(f"/institutions/{institution_id}", json={"websiteUrl": "https://sunrise.example.com"})
    assert patched.json()["websiteUrl"] == "https://sunrise.example.com"

    assert client.delete(f"/institutions/{institution_id}").status_code == 204
    assert client.get(f"/institutions/{institution_id}").status_code == 404


def test_create_institution_rejects_blank_name(client):
    assert client.post("/institutions", json={**INSTITUTION_BODY, "name": ""}).status_code == 422


def test_unknown_institution_is_404(client):
    assert client.post("/institutions/missing/gmb/generate").status_code == 404


def test_unknown_domain_is_422(client, institution):
    assert client.get(f"/institutions/{institution.id}/billboards").status_code == 422


def test_missing_result_is_404(client, institution):
    assert client.get(f"/institutions/{institution.id}/content-ideas").status_code == 404


def test_content_ideas_generate_refine_and_track_status(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video", "Parent webinar"]))
    generated = client.post(f"/institutions/{institution.id}/content-ideas/generate")
    assert generated.status_code == 200
    ideas = generated.json()["contentIdeas"]
    assert [i["status"] for i in ideas] == ["pending", "pending"]

    garden_id = ideas[0]["id"]
    updated = client.patch(
        f"/institutions/{institution.id}/content-ideas/items/{garden_id}/status",
        json={"status": "done"},
    )
    assert updated.json()["contentIdeas"][0]["status"] == "done"

    llm.responses.append(RefinedContentIdeasAIOutput(refined_content_ideas=["Garden Day Video", "Teacher spotlight"]))
    refined = client.post(
        f"/institutions/{institution.id}/content-ideas/refine",
        json={"userPrompt": "replace the webinar"},
    ).json()["contentIdeas"]
    assert refined[0]["id"] == garden_id
    assert refined[0]["status"] == "done"
    assert refined[1]["status"] == "pending"

    stored = client.get(f"/institutions/{institution.id}/content-ideas").json()
    assert stored["contentIdeas"] == refined


def test_expand_content_idea(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    idea_id = client.post(f"/institutions/{institution.id}/content-ideas/generate").json()["contentIdeas"][0]["id"]

    llm.responses.append(ContentIdeaExpansion(expanded_details="## Scene 1"))
    expanded = client.post(f"/institutions/{institution.id}/content-ideas/{idea_id}/expand")

    assert expanded.status_code == 200
    assert expanded.json()["contentIdeas"][0]["expandedDetails"] == "## Scene 1"
    assert expanded.json()["contentIdeas"][0]["isExpanding"] is False


def test_expand_unknown_idea_is_404(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    client.post(f"/institutions/{institution.id}/content-ideas/generate")

    assert client.post(f"/institutions/{institution.id}/content-ideas/nope/expand").status_code == 404


def test_local_seo_generate_failure_still_saves_placeholders(client, institution):
    response = client.post(f"/institutions/{institution.id}/local-seo/generate")

    assert response.status_code == 200
    assert response.json()["executiveSummary"] == "Error: Could not generate executive summary."
    assert client.get(f"/institutions/{institution.id}/local-seo").status_code == 200


def test_local_seo_generate(client, institution, llm):
    llm.responses.append(local_seo_output())

    data = client.post(f"/institutions/{institution.id}/local-seo/generate").json()

    assert data["keywordResearch"]["primaryKeywords"][0]["text"] == "preschool seo"
    assert "onPageLocalSEO" in data
    assert "Austin, TX" in llm.calls[0]["user_prompt"]


def test_gmb_section_status(client, institution, llm):
    llm.responses.append(GMBAIOutput(
        keyword_suggestions=[AIKeyword(text="preschool austin")],
        description_suggestions="## About",
        optimization_tips="- Post weekly",
    ))
    client.post(f"/institutions/{institution.id}/gmb/generate")

    response = client.patch(
        f"/institutions/{institution.id}/gmb/sections/optimizationTips/status",
        json={"status": "inProgress"},
    )
    assert response.json()["optimizationTipsStatus"] == "inProgress"

    bad = client.patch(
        f"/institutions/{institution.id}/gmb/sections/photos/status",
        json={"status": "done"},
    )
    assert bad.status_code == 404


def test_invalid_status_is_422(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    idea_id = client.post(f"/institutions/{institution.id}/content-ideas/generate").json()["contentIdeas"][0]["id"]

    response = client.patch(
        f"/institutions/{institution.id}/content-ideas/items/{idea_id}/status",
        json={"status": "archived"},
    )
    assert response.status_code == 422


def test_performance_marketing_requires_budget_and_goals(client, institution, llm):
    missing = client.post(
        f"/institutions/{institution.id}/performance-marketing/generate",
        json={"marketingBudget": "$500/month"},
    )
    assert missing.status_code == 400
    assert llm.calls == []

    llm.responses.append(PerformanceMarketingAIOutput(marketing_strategy_document="# Plan"))
    ok = client.post(
        f"/institutions/{institution.id}/performance-marketing/generate",
        json={"marketingBudget": "$500/month", "marketingGoals": "Fill 20 seats"},
    )
    assert ok.json() == {"marketingStrategyDocument": "# Plan", "documentStatus": "pending"}


def test_refine_requires_prompt(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    client.post(f"/institutions/{institution.id}/content-ideas/generate")

    response = client.post(
        f"/institutions/{institution.id}/content-ideas/refine",
        json={"userPrompt": "   "},
    )
    assert response.status_code == 400


def test_refine_without_result_is_404(client, institution):
    response = client.post(
        f"/institutions/{institution.id}/gmb/refine",
        json={"userPrompt": "shorter"},
    )
    assert response.status_code == 404


def test_provider_error_is_500_and_keeps_stored_result(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    before = client.post(f"/institutions/{institution.id}/content-ideas/generate").json()

    llm.responses.append(RuntimeError("upstream unavailable"))
    response = client.post(
        f"/institutions/{institution.id}/content-ideas/refine",
        json={"userPrompt": "more videos"},
    )

    assert response.status_code == 500
    assert client.get(f"/institutions/{institution.id}/content-ideas").json() == before


def test_clear_result(client, institution, llm):
    llm.responses.append(ContentIdeasAIOutput(content_ideas=["Garden day video"]))
    client.post(f"/institutions/{institution.id}/content-ideas/generate")

    assert client.delete(f"/institutions/{institution.id}/content-ideas").status_code == 204
    assert client.get(f"/institutions/{institution.id}/content-ideas").status_code == 404


def test_unconfigured_llm_is_503(client, institution, monkeypatch):
    from edumarketer.main import app

    def unconfigured():
        raise RuntimeError("OPENAI_API_KEY is not configured")

    app.dependency_overrides.pop(get_llm)
    monkeypatch.setattr("edumarketer.routes.api.get_openai_service", unconfigured)

    response = client.post(f"/institutions/{institution.id}/content-ideas/generate")

    assert response.status_code == 503
    assert "OPENAI_API_KEY" in response.json()["detail"]
