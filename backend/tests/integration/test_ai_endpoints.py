"""
Integration Tests for AI chat and opportunity recommendations
"""
import pytest
from httpx import AsyncClient

from knowzone.db.repository import Repository
from knowzone.services.ai_assistant import FALLBACK_CHAT_RESPONSE


class TestChat:

    @pytest.mark.asyncio
    async def test_chat_turn_is_stored(self, client: AsyncClient, text_generator, test_user, auth_headers):
        text_generator.set_text('Operating systems manage hardware resources.')

        response = await client.post(
            '/api/chat',
            json={'message': 'What is an OS?', 'context': 'Semester 4'},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data['response'] == 'Operating systems manage hardware resources.'
        assert data['messageId'] == 1
        assert 'Context: Semester 4' in text_generator.last_prompt

        history = (await client.get('/api/chat/history', headers=auth_headers)).json()
        assert len(history) == 1
        assert history[0]['userId'] == test_user.id
        assert history[0]['userMessage'] == 'What is an OS?'
        assert history[0]['aiResponse'] == 'Operating systems manage hardware resources.'
        assert history[0]['context'] == 'Semester 4'

    @pytest.mark.asyncio
    async def test_ai_failure_uses_apology(self, client: AsyncClient, text_generator, auth_headers):
        text_generator.fail_with()

        response = await client.post('/api/chat', json={'message': 'hello'}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()['response'] == FALLBACK_CHAT_RESPONSE

        history = (await client.get('/api/chat/history', headers=auth_headers)).json()
        assert history[0]['aiResponse'] == FALLBACK_CHAT_RESPONSE

    @pytest.mark.asyncio
    async def test_history_is_per_user(self, client: AsyncClient, auth_headers, faculty_auth_headers):
        await client.post('/api/chat', json={'message': 'student question'}, headers=auth_headers)

        history = (await client.get('/api/chat/history', headers=faculty_auth_headers)).json()

        assert history == []

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, client: AsyncClient, auth_headers):
        response = await client.post('/api/chat', json={'message': ''}, headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_chat_requires_auth(self, client: AsyncClient):
        response = await client.post('/api/chat', json={'message': 'hello'})
        assert response.status_code == 401


class TestOpportunities:

    body = {
        'title': 'Backend Intern',
        'description': 'Python and FastAPI',
        'type': 'internship',
        'company': 'Acme',
        'deadline': '2026-12-31T23:59:00Z',
    }

    @pytest.mark.asyncio
    async def test_create_and_list(self, client: AsyncClient, test_user, auth_headers):
        response = await client.post('/api/opportunities', json=self.body, headers=auth_headers)

        assert response.status_code == 200
        created = response.json()
        assert created['postedBy'] == test_user.id
        assert created['isActive'] is True
        assert created['requirements'] == []

        listed = (await client.get('/api/opportunities')).json()
        assert [o['title'] for o in listed] == ['Backend Intern']

    @pytest.mark.asyncio
    async def test_filter_by_type_excludes_inactive(self, client: AsyncClient, repository: Repository, auth_headers):
        await client.post('/api/opportunities', json=self.body, headers=auth_headers)
        await client.post('/api/opportunities', json={**self.body, 'title': 'Closed', 'isActive': False}, headers=auth_headers)
        await client.post('/api/opportunities', json={**self.body, 'title': 'Hack', 'type': 'hackathon'}, headers=auth_headers)

        internships = (await client.get('/api/opportunities', params={'type': 'internship'})).json()

        assert [o['title'] for o in internships] == ['Backend Intern']

    @pytest.mark.asyncio
    async def test_recommendations(self, client: AsyncClient, text_generator, auth_headers):
        await client.post('/api/opportunities', json=self.body, headers=auth_headers)
        text_generator.set_json([
            {'title': 'Backend Intern', 'relevanceScore': 88, 'reasoning': 'Matches CSE profile'},
        ])

        response = await client.get('/api/opportunities/recommendations', headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == [
            {'title': 'Backend Intern', 'relevanceScore': 88.0, 'reasoning': 'Matches CSE profile'},
        ]
        assert 'Backend Intern - internship - Python and FastAPI' in text_generator.last_prompt

    @pytest.mark.asyncio
    async def test_recommendations_best_effort(self, client: AsyncClient, text_generator, auth_headers):
        await client.post('/api/opportunities', json=self.body, headers=auth_headers)
        text_generator.fail_with()

        response = await client.get('/api/opportunities/recommendations', headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []
