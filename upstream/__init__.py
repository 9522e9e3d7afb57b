"""
Remote notebook platform integration.

Modules:
    client: DatabricksClient, the HTTP client for workspace and jobs calls
    schemas: Pydantic models every upstream response is parsed into
    resolver: Picks the notebook matching a user-supplied source name
    status: Maps a run's lifecycle state to a status label and progress

Usage:
    from upstream.client import DatabricksClient
    from upstream.resolver import resolve_notebook
    from upstream.status import translate_run_state

Example:
    client = DatabricksClient(instance_url, token)
    objects = await client.list_workspace_objects("/Shared/pipelines")
    notebook = resolve_notebook(objects, "sales")
    run_id = await client.submit_run(notebook.path, cluster_id, "Triggered from MDC App")

    state = await client.get_run_state(str(run_id))
    status, progress = translate_run_state(state.life_cycle_state)
"""

