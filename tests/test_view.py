import pytest

from txs import view
from txs.rest_client import RestError


class FakeClient:
    def __init__(self, values=None, exc=None):
        self.values = values
        self.exc = exc
        self.calls = []

    def view_ext(self, function_id, type_args=None, args=None):
        self.calls.append((function_id, type_args, args))
        if self.exc:
            raise self.exc
        return self.values


def test_format_values():
    assert view.format_values([1, 2, 3]) == "[1, 2, 3]"
    assert view.format_values([]) == "[]"
    assert view.format_values(["a", {"k": [1, 2]}, True]) == '["a", {"k":[1,2]}, true]'


@pytest.mark.asyncio
async def test_run_formats_results():
    client = FakeClient([1, 2, 3])
    out = await view.run("0x1::m::f", "u64", "1, 2", client=client)
    assert out == "[1, 2, 3]"
    assert client.calls == [("0x1::m::f", "u64", "1, 2")]


@pytest.mark.asyncio
async def test_run_empty_result():
    assert await view.run("0x1::m::f", client=FakeClient([])) == "[]"


@pytest.mark.asyncio
async def test_run_propagates_errors():
    with pytest.raises(RestError):
        await view.run("0x1::m::f", client=FakeClient(exc=RestError("down")))


@pytest.mark.asyncio
async def test_run_builds_default_client(monkeypatch):
    seen = {}

    class Recording(FakeClient):
        def __init__(self):
            super().__init__(["7"])
            seen["built"] = True

    monkeypatch.setattr(view, "Client", Recording)
    assert await view.run("0x1::m::f") == '["7"]'
    assert seen["built"]
