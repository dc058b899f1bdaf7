# gateway/utils/responses.py

import json
from typing import Any

from fastapi.responses import JSONResponse

JSON_INDENT = 3


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with a fixed indent"""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=JSON_INDENT,
            separators=(",", ": "),
        ).encode("utf-8")
