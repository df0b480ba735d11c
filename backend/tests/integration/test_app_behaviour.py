"""
Integration Tests for health, middleware and error rendering
"""
import pytest
from httpx import AsyncClient

from knowzone.core.config import settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'
        assert response.json()['app_name'] == settings.APP_NAME


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_request_id_and_timing_headers(self, client: AsyncClient):
        response = await client.get('/api/colleges')

        assert response.headers['X-Request-ID']
        assert response.headers['X-Response-Time'].endswith('ms')

    @pytest.mark.asyncio
    async def test_incoming_request_id_echoed(self, client: AsyncClient):
        response = await client.get('/api/colleges', headers={'X-Request-ID': 'trace-123'})

        assert response.headers['X-Request-ID'] == 'trace-123'

    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient):
        response = await client.get('/api/bus-routes')

        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'DENY'

    @pytest.mark.asyncio
    async def test_oversized_body_rejected(self, client: AsyncClient, auth_headers):
        body = {'message': 'x' * (settings.MAX_REQUEST_SIZE + 1)}

        response = await client.post('/api/chat', json=body, headers=auth_headers)

        assert response.status_code == 413
        assert 'error' in response.json()


class TestErrorRendering:

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get('/api/does-not-exist')

        assert response.status_code == 404
        assert 'error' in response.json()

    @pytest.mark.asyncio
    async def test_bad_path_parameter(self, client: AsyncClient, auth_headers):
        response = await client.put('/api/forums/posts/abc/like', headers=auth_headers)

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid request data'

    @pytest.mark.asyncio
    async def test_bad_query_parameter(self, client: AsyncClient):
        response = await client.get('/api/questions', params={'targetRole': 'dean'})

        assert response.status_code == 400


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_builds_collaborators(self):
        from knowzone.core.security import JWTTokenVerifier
        from knowzone.db.repository import Repository
        from knowzone.main import app
        from knowzone.services.text_generator import FallbackTextGenerator

        async with app.router.lifespan_context(app):
            assert isinstance(app.state.repository, Repository)
            assert isinstance(app.state.token_verifier, JWTTokenVerifier)
            assert isinstance(app.state.text_generator, FallbackTextGenerator)
            assert len(await app.state.repository.get_all_colleges()) == 3
