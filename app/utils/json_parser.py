"""
Helpers for reading JSON out of language-model replies.
Models often wrap JSON in ```json fences even when told not to.
"""

import json
import re
from typing import Optional, Any

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers, keeping the content between them."""
    return _FENCE_RE.sub("", text or "").strip()


def safe_parse_json(text: str) -> Optional[Any]:
    """Parse JSON text safely. Returns None on error."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None


def get_nested(data: dict, *keys, default: Any = None) -> Any:
    """Safely navigate nested dict keys and list indexes. Returns default if any step is missing."""
    current = data
    for key in keys:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return default
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
    return current
