"""Response classes shared by the routers."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with 4-space indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=4,
        ).encode("utf-8")


def message_response(message: str, status_code: int) -> IndentedJSONResponse:
    return IndentedJSONResponse({"message": message}, status_code=status_code)
