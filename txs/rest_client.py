# txs/rest_client.py
from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

import requests
from pydantic import BaseModel, Field

from txs.config import NodeConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_ADDRESS_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")


class RestError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ViewRequest(BaseModel):
    function: str
    type_arguments: List[str] = Field(default_factory=list)
    arguments: List[Any] = Field(default_factory=list)


def parse_function_id(function_id: str) -> str:
    """
    Validate a fully qualified function id such as 0x1::coin::balance.
    """
    parts = (function_id or "").strip().split("::")
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"Invalid function id: {function_id!r} (expected <address>::<module>::<function>)")
    address, module, name = parts
    if not (_ADDRESS_RE.match(address) or _IDENT_RE.match(address)):
        raise ValueError(f"Invalid account address in function id: {address!r}")
    for ident in (module, name):
        if not _IDENT_RE.match(ident):
            raise ValueError(f"Invalid identifier in function id: {ident!r}")
    return "::".join(parts)


def _split_top_level(raw: str) -> List[str]:
    # commas nested inside <...>, [...] or "..." belong to the enclosing item
    items: List[str] = []
    depth = 0
    in_string = False
    escaped = False
    cur: List[str] = []
    for ch in raw:
        if in_string:
            cur.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "<[":
            depth += 1
        elif ch in ">]":
            depth = max(0, depth - 1)
        if ch == "," and depth == 0:
            items.append("".join(cur).strip())
            cur = []
            continue
        cur.append(ch)
    items.append("".join(cur).strip())
    return [i for i in items if i]


def parse_type_args(type_args: Optional[str]) -> List[str]:
    if not type_args or not type_args.strip():
        return []
    return _split_top_level(type_args)


def parse_args(args: Optional[str]) -> List[Any]:
    if not args or not args.strip():
        return []
    parsed: List[Any] = []
    for item in _split_top_level(args):
        try:
            parsed.append(json.loads(item))
        except ValueError:
            parsed.append(item)
    return parsed


class Client:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url if base_url is not None else NodeConfig.default().node_url
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/v1/{path.lstrip('/')}"

    def view(self, request: ViewRequest) -> List[Any]:
        """
        Run a view function on the node and return the list of values it yields.
        """
        url = self._url("view")
        logger.debug("view %s at %s", request.function, url)
        try:
            resp = self.session.post(url, json=request.model_dump(), timeout=self.timeout)
        except requests.RequestException as e:
            raise RestError(f"View transport failed for {request.function} url={url}") from e

        if resp.status_code >= 400:
            detail = resp.text
            try:
                body = resp.json()
                if isinstance(body, dict):
                    detail = body.get("message", detail)
            except ValueError:
                pass
            raise RestError(
                f"View {request.function} rejected with status {resp.status_code}: {detail}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise RestError(f"View {request.function} returned a non JSON body") from e
        if not isinstance(data, list):
            raise RestError(f"View {request.function} did not return a list")
        return data

    def view_ext(
        self,
        function_id: str,
        type_args: Optional[str] = None,
        args: Optional[str] = None,
    ) -> List[Any]:
        request = ViewRequest(
            function=parse_function_id(function_id),
            type_arguments=parse_type_args(type_args),
            arguments=parse_args(args),
        )
        return self.view(request)


__all__ = [
    "Client",
    "RestError",
    "ViewRequest",
    "parse_function_id",
    "parse_type_args",
    "parse_args",
]
