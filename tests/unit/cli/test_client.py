"""Unit tests for CLI HTTP client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from notafacil.cli.client import APIClient


class TestAPIClient:
    """Tests for APIClient class."""

    @pytest.fixture
    def client(self) -> APIClient:
        """Create a test client."""
        return APIClient(base_url="http://test:8000", timeout=30.0)

    def test_client_initialization(self, client: APIClient) -> None:
        """Test client initializes with correct base URL."""
        assert client.base_url == "http://test:8000"
        assert client.timeout == 30.0

    def test_client_strips_trailing_slash(self) -> None:
        """Test client strips trailing slash from base URL."""
        client = APIClient(base_url="http://test:8000/", timeout=5.0)
        assert client.base_url == "http://test:8000"

    def test_client_defaults_from_config(self) -> None:
        """Test missing values come from application.yaml."""
        with patch("notafacil.cli.client.get_server_base_url", return_value=("http://cfg:9000", 12.0)):
            client = APIClient()

        assert client.base_url == "http://cfg:9000"
        assert client.timeout == 12.0

    @pytest.mark.asyncio
    async def test_sends_frontend_header(self, client: APIClient) -> None:
        """Test every request identifies the CLI frontend."""
        http_client = await client._get_client()

        assert http_client.headers["X-Frontend-ID"] == "cli"

        await client.close()

    @pytest.mark.asyncio
    async def test_get_request(self, client: APIClient) -> None:
        """Test GET request."""
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200

        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            response = await client.get("/health")

            assert response.status_code == 200
            mock_request.assert_awaited_once_with("GET", "/health")

        await client.close()

    @pytest.mark.asyncio
    async def test_request_error_propagates(self, client: APIClient) -> None:
        """Test transport errors are re-raised."""
        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("refused")

            with pytest.raises(httpx.ConnectError):
                await client.get("/health")

        await client.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, client: APIClient) -> None:
        """Test closing twice is safe."""
        await client._get_client()
        await client.close()
        await client.close()

        assert client._client is None
