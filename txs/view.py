# txs/view.py
from __future__ import annotations

import asyncio
import json
from typing import Any, Iterable, Optional

from txs.rest_client import Client


def value_to_string(value: Any) -> str:
    """Render one returned value the way a compact JSON encoder does."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def format_values(values: Iterable[Any]) -> str:
    return "[" + ", ".join(value_to_string(v) for v in values) + "]"


async def run(
    function_id: str,
    type_args: Optional[str] = None,
    args: Optional[str] = None,
    client: Optional[Client] = None,
) -> str:
    """
    Call a view function once and format its results as "[v1, v2, ...]".
    Errors from the client are not caught here.
    """
    if client is None:
        client = Client()
    # run the sync http client off the event loop
    values = await asyncio.to_thread(client.view_ext, function_id, type_args, args)
    return format_values(values)
