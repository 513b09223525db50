"""Tests for the FastMCP server wiring."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError
from starlette.testclient import TestClient

from sshhost_mcp.models import CommandResult
from sshhost_mcp.server import create_server


@pytest.mark.asyncio
async def test_server_exposes_three_tools() -> None:
    """Only exec, upload and waitForConnection are exposed."""
    async with Client(create_server()) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == {"exec", "upload", "waitForConnection"}


@pytest.mark.asyncio
async def test_exec_schema_declares_defaults() -> None:
    """The exec schema requires host and command; timeout defaults to 60."""
    async with Client(create_server()) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    schema = tools["exec"].inputSchema
    assert set(schema["required"]) == {"host", "command"}
    assert schema["properties"]["timeout"]["default"] == 60
    assert schema["properties"]["host"]["description"] == "SSH hostname or IP"


@pytest.mark.asyncio
async def test_exec_round_trip_and_read_back() -> None:
    """An exec call returns a handle that reads back through result://."""
    with patch(
        "sshhost_mcp.services.operations.ssh_exec", new_callable=AsyncMock
    ) as mock_exec:
        mock_exec.return_value = CommandResult(0, "hi\n", "")

        async with Client(create_server()) as client:
            response = await client.call_tool(
                "exec", {"host": "10.0.0.5", "command": "echo hi"}
            )
            payload = response.structured_content
            [handle] = payload["dataHandles"]

            contents = await client.read_resource(f"result://{handle}")
            listing = await client.read_resource("results://list")

    assert payload["result"]["exitCode"] == 0
    assert payload["result"]["stdout"] == "hi\n"
    assert json.loads(contents[0].text)["data"]["command"] == "echo hi"
    assert handle in listing[0].text


@pytest.mark.asyncio
async def test_tool_errors_reach_client() -> None:
    """Operation failures are reported to the client as tool errors."""
    with patch(
        "sshhost_mcp.services.operations.wait_for_ssh", new_callable=AsyncMock
    ) as mock_wait:
        mock_wait.return_value = False

        async with Client(create_server()) as client:
            with pytest.raises(ToolError, match="not reachable on web1"):
                await client.call_tool(
                    "waitForConnection", {"host": "web1", "timeout": 1}
                )


@pytest.mark.asyncio
async def test_upload_missing_source_reaches_client(tmp_path: Path) -> None:
    """A missing local file fails the upload tool."""
    async with Client(create_server()) as client:
        with pytest.raises(ToolError, match="scp failed"):
            await client.call_tool(
                "upload",
                {"host": "web1", "source": str(tmp_path / "nope"), "dest": "/tmp/x"},
            )


class TestHealthCheck:
    """Tests for health check endpoint."""

    @pytest.fixture
    def client(self) -> TestClient:
        """Create test client for the HTTP app."""
        return TestClient(create_server().http_app())

    def test_health_returns_ok(self, client: TestClient) -> None:
        """Health endpoint returns OK status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_health_returns_plain_text(self, client: TestClient) -> None:
        """Health endpoint returns plain text content type."""
        response = client.get("/health")
        assert "text/plain" in response.headers["content-type"]
