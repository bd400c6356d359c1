# File: catalog/utils/naming.py
import re
from typing import Optional

_TRAILING_KEY_SUFFIX = re.compile(r"(?:-|_id)$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[-_\s]+")


def name_to_human_readable_name(name: Optional[str]) -> Optional[str]:
    """
    Convert the raw name of a Table or Field into something friendlier to humans.

        name_to_human_readable_name("admin_users")  -> "Admin Users"
        name_to_human_readable_name("venue_id")     -> "Venue"
        name_to_human_readable_name("createdAt")    -> "Created At"
    """
    if not name:
        return None
    stripped = _TRAILING_KEY_SUFFIX.sub("", name)
    words = _SEPARATORS.split(_CAMEL_BOUNDARY.sub(" ", stripped))
    words = [w.capitalize() for w in words if w]
    if not words:
        # nothing left once the suffix and separators are gone, e.g. "_id"
        return name
    return " ".join(words)
