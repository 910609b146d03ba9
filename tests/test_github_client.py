from __future__ import annotations

import anyio
import httpx

from changed_files.dev import mock_github_server
from changed_files.github.client import GitHubClient
from changed_files.github.schemas import GitHubCompareResponse
from changed_files.pipeline.models import ActionContext
from changed_files.pipeline.models import RepositoryCoordinate
from changed_files.pipeline.models import RunOptions
from changed_files.pipeline.orchestrator import run_changed_files


async def _compare_via_transport(transport: httpx.AsyncBaseTransport, basehead: str) -> GitHubCompareResponse:
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = GitHubClient(api_base_url="http://testserver/", token="t", http_client=http_client)
        return await client.compare_commits(owner="octocat", repo="hello", basehead=basehead, per_page=250, page=1)


def test_compare_commits_against_mock_server() -> None:
    transport = httpx.ASGITransport(app=mock_github_server.app)
    response = anyio.run(_compare_via_transport, transport, "main...octocat:feature/login")
    assert response.status_code == 200
    assert response.data.status == "ahead"
    assert [f.filename for f in response.data.files or []] == [
        "src/example.py",
        "docs/guide.md",
        "src/legacy.py",
        "src/renamed.py",
    ]
    last = mock_github_server._requests[-1]
    assert last["basehead"] == "main...octocat:feature/login"
    assert last["per_page"] == 250
    assert last["page"] == 1


def test_compare_commits_identical_refs() -> None:
    transport = httpx.ASGITransport(app=mock_github_server.app)
    response = anyio.run(_compare_via_transport, transport, "abc...abc")
    assert response.data.status == "identical"
    assert response.data.files == []


def test_compare_commits_returns_error_status_without_raising() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(401, json={"message": "Bad credentials"})

    response = anyio.run(_compare_via_transport, httpx.MockTransport(handler), "a...b")
    assert response.status_code == 401
    assert response.data.status is None
    assert response.data.files is None
    assert seen[0].headers["Authorization"] == "Bearer t"
    assert seen[0].headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_pipeline_end_to_end_with_mock_server() -> None:
    outputs: dict[str, str] = {}
    failures: list[str] = []

    class Sink:
        def set_output(self, name: str, value: str) -> None:
            outputs[name] = value

        def set_failed(self, message: str) -> None:
            failures.append(message)

    async def scenario() -> bool:
        transport = httpx.ASGITransport(app=mock_github_server.app)
        async with httpx.AsyncClient(transport=transport) as http_client:
            client = GitHubClient(api_base_url="http://testserver", token="t", http_client=http_client)
            return await run_changed_files(
                context=ActionContext(
                    event_name="push",
                    payload={"before": "aaa", "after": "bbb"},
                    repo=RepositoryCoordinate(owner="octocat", name="hello"),
                ),
                comparer=client,
                options=RunOptions(format="csv", filter="src/**"),
                sink=Sink(),
            )

    ok = anyio.run(scenario)
    assert ok
    assert failures == []
    assert outputs["all"] == "src/example.py,src/legacy.py,src/renamed.py"
    assert outputs["added_modified"] == "src/example.py"
    assert outputs["deleted"] == "src/legacy.py"


def test_mock_server_request_log_is_bounded() -> None:
    transport = httpx.ASGITransport(app=mock_github_server.app)
    for i in range(mock_github_server.MAX_RECORDED_REQUESTS + 5):
        anyio.run(_compare_via_transport, transport, f"base{i}...head{i}")
    assert len(mock_github_server._requests) == mock_github_server.MAX_RECORDED_REQUESTS
    assert mock_github_server._requests[-1]["basehead"] == (
        f"base{mock_github_server.MAX_RECORDED_REQUESTS + 4}...head{mock_github_server.MAX_RECORDED_REQUESTS + 4}"
    )
