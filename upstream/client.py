"""
HTTP client for the remote notebook platform (Databricks REST API).

Pure request/response: one call per operation, no retries, no caching.
Every failure (network, non-2xx status, non-JSON body, unexpected shape)
is raised as UpstreamError with the endpoint and status in its context.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError as SchemaError

from core.exceptions import UpstreamError
from upstream.schemas import (
    RunGetResponse,
    RunState,
    RunSubmitResponse,
    WorkspaceListResponse,
    WorkspaceObject,
)
import logging

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

WORKSPACE_LIST_PATH = "/api/2.0/workspace/list"
RUNS_SUBMIT_PATH = "/api/2.1/jobs/runs/submit"
RUNS_GET_PATH = "/api/2.1/jobs/runs/get"


class DatabricksClient:
    """
    Thin async client for the workspace and jobs endpoints.

    Attributes:
        instance_url: Base URL of the workspace, e.g. https://adb-123.azuredatabricks.net
        token: Personal access token sent as a bearer token
        transport: Optional httpx transport (tests inject httpx.MockTransport)
    """

    def __init__(
        self,
        instance_url: str,
        token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.instance_url = instance_url.rstrip("/")
        self.token = token
        self.transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json"
        }

    async def _request(
        self,
        method: str,
        path: str,
        schema: Type[ResponseT],
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> ResponseT:
        url = f"{self.instance_url}{path}"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self.headers,
                    params=params,
                    json=json
                )
        except httpx.HTTPError as e:
            logger.error(f"Upstream request failed: {method} {url}: {type(e).__name__}")
            raise UpstreamError(
                "Upstream request failed",
                context={"url": url, "method": method},
                original_exception=e
            )

        if response.is_error:
            logger.error(f"Upstream returned {response.status_code} for {method} {url}")
            raise UpstreamError(
                f"Upstream returned HTTP {response.status_code}",
                context={
                    "url": url,
                    "method": method,
                    "status_code": response.status_code,
                    "response_body": response.text[:500]
                }
            )

        try:
            return schema.model_validate(response.json())
        except (ValueError, SchemaError) as e:
            logger.error(f"Unexpected upstream response shape from {url}")
            raise UpstreamError(
                "Invalid response format from upstream",
                context={
                    "url": url,
                    "status_code": response.status_code,
                    "expected": schema.__name__,
                    "response_body": response.text[:500]
                },
                original_exception=e
            )

    async def list_workspace_objects(self, folder_path: str) -> List[WorkspaceObject]:
        """List every object directly under a workspace folder"""
        body = await self._request(
            "GET",
            WORKSPACE_LIST_PATH,
            WorkspaceListResponse,
            params={"path": folder_path}
        )
        logger.debug(f"Listed {len(body.objects)} objects under {folder_path}")
        return body.objects

    async def submit_run(self, notebook_path: str, cluster_id: str, run_name: str) -> int:
        """Submit a one-time notebook run on an existing cluster and return its run_id"""
        body = await self._request(
            "POST",
            RUNS_SUBMIT_PATH,
            RunSubmitResponse,
            json={
                "run_name": run_name,
                "existing_cluster_id": cluster_id,
                "notebook_task": {
                    "notebook_path": notebook_path,
                },
            }
        )
        logger.info(f"Submitted run {body.run_id} for notebook {notebook_path}")
        return body.run_id

    async def get_run_state(self, run_id: str) -> RunState:
        """Fetch the current state of a submitted run"""
        body = await self._request(
            "GET",
            RUNS_GET_PATH,
            RunGetResponse,
            params={"run_id": run_id}
        )
        return body.state
