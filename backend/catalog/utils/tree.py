# File: catalog/utils/tree.py
from collections import defaultdict
from typing import Any, Dict, Hashable, Iterable, List, Mapping


def unflatten_nested_fields(
    fields: Iterable[Mapping[str, Any]],
    parent_id_key: str = "parent_id",
) -> List[Dict[str, Any]]:
    """
    Take a sequence of both top-level and nested fields and return the top-level
    ones, with nested fields moved into `children` lists of their parents.

        unflatten_nested_fields([{"id": 1, "parent_id": None}, {"id": 2, "parent_id": 1}])
          -> [{"id": 1, "parent_id": None, "children": [{"id": 2, "parent_id": 1, "children": []}]}]

    Records keep their relative order inside every parent group. A record whose
    parent is not part of the input ends up nowhere, since the input may be a
    partial result set.
    """
    parent_id_to_fields: Dict[Hashable, List[Mapping[str, Any]]] = defaultdict(list)
    for field in fields:
        parent_id_to_fields[field.get(parent_id_key)].append(field)

    def resolve_children(field: Mapping[str, Any]) -> Dict[str, Any]:
        # An unsaved record has no id and therefore no children
        children = parent_id_to_fields.get(field["id"], []) if field.get("id") is not None else []
        return {**field, "children": [resolve_children(child) for child in children]}

    return [resolve_children(field) for field in parent_id_to_fields.get(None, [])]
