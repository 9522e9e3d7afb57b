"""
Pick the remote notebook a user asked for.
"""

from typing import Iterable, List

from core.exceptions import NotFoundError
from upstream.schemas import WorkspaceObject

NOTEBOOK_OBJECT_TYPE = "NOTEBOOK"


def filter_notebooks(objects: Iterable[WorkspaceObject]) -> List[WorkspaceObject]:
    """Keep notebook objects only, in the order upstream returned them"""
    return [obj for obj in objects if obj.object_type == NOTEBOOK_OBJECT_TYPE]


def resolve_notebook(objects: Iterable[WorkspaceObject], source: str) -> WorkspaceObject:
    """
    Return the first notebook whose path contains `source`, ignoring case.

    Non-notebook objects never match, even when their path does.

    Raises:
        NotFoundError: if no notebook matches
    """
    needle = source.lower()
    for notebook in filter_notebooks(objects):
        if needle in notebook.path.lower():
            return notebook

    raise NotFoundError(
        f"No notebook found matching source: {source}",
        context={"entity": "notebook", "lookup": source}
    )
