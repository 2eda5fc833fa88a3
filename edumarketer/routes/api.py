import logging
from typing import Any, Dict, List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import Field, ValidationError

from edumarketer.core.generation import (
    CampaignInputs,
    clear_result,
    load_result,
    run_expansion,
    run_generation,
    run_refinement,
    run_section_status_update,
    run_status_update,
)
from edumarketer.core.openai_service import get_openai_service
from edumarketer.core.supabase_service import get_store
from edumarketer.models.common import (
    STATUS_OPTIONS,
    CamelModel,
    InstitutionCreate,
    InstitutionUpdate,
    Status,
)
from edumarketer.models.domains import ContentDomain

logger = logging.getLogger("api")

router = APIRouter(prefix="", tags=["Marketing"])

# ---------- Schemas ----------

class GenerateRequest(CamelModel):
    marketing_budget: Optional[str] = Field(None, description="Performance marketing only")
    marketing_goals: Optional[str] = Field(None, description="Performance marketing only")


class RefineRequest(CamelModel):
    user_prompt: str = Field(..., description="Free-text refinement instruction")
    marketing_budget: Optional[str] = None
    marketing_goals: Optional[str] = None


class StatusUpdateRequest(CamelModel):
    status: Status


def _raise_http(e: Exception, action: str) -> NoReturn:
    """Translate a failure into the HTTP error returned to the client"""
    if isinstance(e, HTTPException):
        raise e
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=500, detail=f"{action} failed: stored data is invalid")
    if isinstance(e, LookupError):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValueError):
        raise HTTPException(status_code=400, detail=str(e))
    raise HTTPException(status_code=500, detail=f"{action} failed: {e}")


def get_llm():
    """LLM service dependency; configuration errors become a 503"""
    try:
        return get_openai_service()
    except RuntimeError as e:
        logger.error(f"LLM service unavailable: {e}")
        raise HTTPException(status_code=503, detail=f"LLM service unavailable: {e}")


# ---------- Institutions ----------

@router.get("/statuses")
async def list_statuses() -> List[Dict[str, str]]:
    return [{"value": value, "label": label} for value, label in STATUS_OPTIONS]


@router.get("/institutions")
async def list_institutions(store=Depends(get_store)):
    try:
        return [i.to_json_dict() for i in await store.list_institutions()]
    except Exception as e:
        logger.exception("list institutions failed")
        _raise_http(e, "Fetching institutions")


@router.post("/institutions", status_code=201)
async def create_institution(body: InstitutionCreate, store=Depends(get_store)):
    try:
        logger.info(f"Received create institution request: {body.name}")
        institution = await store.create_institution(body)
        return institution.to_json_dict()
    except Exception as e:
        logger.exception("create institution failed")
        _raise_http(e, "Adding institution")


@router.get("/institutions/{institution_id}")
async def get_institution(institution_id: str, store=Depends(get_store)):
    try:
        return (await store.get_institution(institution_id)).to_json_dict()
    except Exception as e:
        _raise_http(e, "Fetching institution")


@router.patch("/institutions/{institution_id}")
async def update_institution(institution_id: str, body: InstitutionUpdate, store=Depends(get_store)):
    try:
        return (await store.update_institution(institution_id, body)).to_json_dict()
    except Exception as e:
        logger.exception("update institution failed")
        _raise_http(e, "Updating institution")


@router.delete("/institutions/{institution_id}", status_code=204)
async def delete_institution(institution_id: str, store=Depends(get_store)):
    try:
        await store.delete_institution(institution_id)
        return Response(status_code=204)
    except Exception as e:
        logger.exception("delete institution failed")
        _raise_http(e, "Deleting institution")


# ---------- Content domains ----------

@router.post("/institutions/{institution_id}/content-ideas/{idea_id}/expand")
async def expand_idea(
    institution_id: str,
    idea_id: str,
    store=Depends(get_store),
    llm=Depends(get_llm),
) -> Dict[str, Any]:
    try:
        ideas = await run_expansion(institution_id, idea_id, store, llm)
        return ideas.to_json_dict()
    except Exception as e:
        _raise_http(e, "Expanding content idea")


@router.get("/institutions/{institution_id}/{domain}")
async def get_result(institution_id: str, domain: ContentDomain, store=Depends(get_store)):
    try:
        return (await load_result(domain, institution_id, store)).to_json_dict()
    except Exception as e:
        _raise_http(e, "Fetching result")


@router.delete("/institutions/{institution_id}/{domain}", status_code=204)
async def delete_result(institution_id: str, domain: ContentDomain, store=Depends(get_store)):
    try:
        await clear_result(domain, institution_id, store)
        return Response(status_code=204)
    except Exception as e:
        _raise_http(e, "Clearing result")


@router.post("/institutions/{institution_id}/{domain}/generate")
async def generate(
    institution_id: str,
    domain: ContentDomain,
    body: Optional[GenerateRequest] = None,
    store=Depends(get_store),
    llm=Depends(get_llm),
):
    try:
        logger.info(f"Received /{domain.value}/generate request")
        body = body or GenerateRequest()
        blob = await run_generation(
            domain,
            institution_id,
            store,
            llm,
            CampaignInputs(body.marketing_budget, body.marketing_goals),
        )
        return blob.to_json_dict()
    except Exception as e:
        _raise_http(e, f"Generating {domain.value}")


@router.post("/institutions/{institution_id}/{domain}/refine")
async def refine(
    institution_id: str,
    domain: ContentDomain,
    body: RefineRequest,
    store=Depends(get_store),
    llm=Depends(get_llm),
):
    try:
        logger.info(f"Received /{domain.value}/refine request")
        blob = await run_refinement(
            domain,
            institution_id,
            body.user_prompt,
            store,
            llm,
            CampaignInputs(body.marketing_budget, body.marketing_goals),
        )
        return blob.to_json_dict()
    except Exception as e:
        _raise_http(e, f"Refining {domain.value}")


@router.patch("/institutions/{institution_id}/{domain}/items/{item_id}/status")
async def update_item_status(
    institution_id: str,
    domain: ContentDomain,
    item_id: str,
    body: StatusUpdateRequest,
    store=Depends(get_store),
):
    try:
        blob = await run_status_update(domain, institution_id, item_id, body.status, store)
        return blob.to_json_dict()
    except Exception as e:
        _raise_http(e, "Updating status")


@router.patch("/institutions/{institution_id}/{domain}/sections/{section}/status")
async def update_section_status(
    institution_id: str,
    domain: ContentDomain,
    section: str,
    body: StatusUpdateRequest,
    store=Depends(get_store),
):
    try:
        blob = await run_section_status_update(domain, institution_id, section, body.status, store)
        return blob.to_json_dict()
    except Exception as e:
        _raise_http(e, "Updating section status")
