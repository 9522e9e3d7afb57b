"""
Notebook run endpoints: trigger a run, list notebooks, poll a run's status.

Each handler catches component failures itself and answers with the
response that endpoint documents.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_context, get_db
from api.errors import error_response
from core.context import AppContext
from core.exceptions import (
    AppException,
    ConfigurationError,
    NotFoundError,
    ValidationError,
)
from models.notebook import NOTEBOOK_STATUS_SUCCESS
from repositories.notebooks import NotebookRepository
from schemas.runs import (
    NotebookListResponse,
    RunNotebookRequest,
    RunNotebookResponse,
    RunStatusResponse,
)
from upstream.resolver import filter_notebooks, resolve_notebook
from upstream.status import translate_run_state
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Runs"])

MISSING_CONFIGURATION_MESSAGE = "Missing required parameters or environment variables"
SUCCESS_RESULT_STATE = "SUCCESS"


@router.post("/run-notebook", response_model=RunNotebookResponse)
async def run_notebook(
    request: Request,
    body: RunNotebookRequest,
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db)
):
    """
    Find the notebook whose path contains `source` and submit a run of it.

    Returns 400 for a missing source, missing configuration or no matching
    notebook, 500 when the upstream platform fails.
    """
    request_id = getattr(request.state, "request_id", "-")
    settings = context.settings

    try:
        if not body.source or settings.missing_upstream_settings():
            raise ValidationError(
                MISSING_CONFIGURATION_MESSAGE,
                context={"missing": settings.missing_upstream_settings(), "source": body.source}
            )
        client = context.upstream_client()

        objects = await client.list_workspace_objects(settings.NOTEBOOK_PATH)
        notebooks = filter_notebooks(objects)
        notebook = resolve_notebook(notebooks, body.source)

        run_id = await client.submit_run(
            notebook.path,
            settings.DATABRICKS_CLUSTER_ID,
            settings.DATABRICKS_RUN_NAME
        )
    except (ValidationError, ConfigurationError) as e:
        logger.warning(f"[{request_id}] run-notebook rejected: {e.context.get('missing')}")
        return error_response(e, status_code=400, message=MISSING_CONFIGURATION_MESSAGE)
    except NotFoundError as e:
        logger.info(f"[{request_id}] {e.message}")
        return error_response(e, status_code=400)
    except AppException as e:
        logger.error(f"[{request_id}] Failed to trigger notebook: {e}")
        return error_response(e, status_code=500, message="Failed to trigger notebook")

    logger.info(f"[{request_id}] Triggered run {run_id} of {notebook.path}")

    if body.file_name:
        try:
            await NotebookRepository(db).record_run(body.file_name, str(run_id))
        except AppException as e:
            # Run is already submitted upstream
            logger.error(f"[{request_id}] Could not record run {run_id} for {body.file_name}: {e}")

    return RunNotebookResponse(
        message="Notebook execution triggered successfully.",
        run_id=run_id,
        notebook_name=notebook.path,
        notebooks=notebooks,
    )


@router.get("/list-notebooks", response_model=NotebookListResponse)
async def list_notebooks(
    request: Request,
    context: AppContext = Depends(get_context)
):
    """List the notebooks in the configured workspace folder"""
    request_id = getattr(request.state, "request_id", "-")
    folder = context.settings.NOTEBOOK_PATH

    try:
        if not folder:
            raise ConfigurationError(
                MISSING_CONFIGURATION_MESSAGE,
                context={"missing": ["NOTEBOOK_PATH"]}
            )
        client = context.upstream_client()
        notebooks = filter_notebooks(await client.list_workspace_objects(folder))
    except ConfigurationError as e:
        logger.error(f"[{request_id}] list-notebooks misconfigured: {e.context.get('missing')}")
        return error_response(e, status_code=500)
    except AppException as e:
        logger.error(f"[{request_id}] Failed to list notebooks: {e}")
        return error_response(e, status_code=500, message="Failed to list notebooks")

    logger.info(f"[{request_id}] Listed {len(notebooks)} notebooks in {folder}")
    return NotebookListResponse(
        message=f"Notebooks in folder {folder}:",
        notebooks=notebooks,
    )


@router.get("/run-status/{run_id}", response_model=RunStatusResponse)
async def run_status(
    run_id: str,
    request: Request,
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db)
):
    """
    Fetch a run's state and translate it into a status label and progress.

    A run that terminated successfully also marks the bookkeeping rows
    that track it as successful.
    """
    request_id = getattr(request.state, "request_id", "-")

    try:
        client = context.upstream_client()
        state = await client.get_run_state(run_id)
    except ConfigurationError as e:
        logger.error(f"[{request_id}] run-status misconfigured: {e.context.get('missing')}")
        return error_response(e, status_code=500)
    except AppException as e:
        logger.error(f"[{request_id}] Failed to fetch run status for {run_id}: {e}")
        return error_response(e, status_code=500, message="Failed to fetch run status")

    status, progress = translate_run_state(state.life_cycle_state)

    if state.life_cycle_state == "TERMINATED" and state.result_state == SUCCESS_RESULT_STATE:
        try:
            await NotebookRepository(db).mark_task_status(run_id, NOTEBOOK_STATUS_SUCCESS)
        except AppException as e:
            logger.error(f"[{request_id}] Could not update bookkeeping for run {run_id}: {e}")

    return RunStatusResponse(
        run_id=run_id,
        run_status=state.model_dump(exclude_none=True),
        status=status,
        message=state.state_message or "",
        result=state.result_state or "N/A",
        progress=progress,
    )
