"""
Unit Tests for the AI assistant and notification service
"""
import pytest

from knowzone.core.exceptions import AIServiceError
from knowzone.db.repository import Repository
from knowzone.models import NotificationType, Opportunity, User
from knowzone.services.ai_assistant import (
    FALLBACK_NOTIFICATION,
    build_chat_prompt,
    build_recommendation_prompt,
    generate_smart_notification,
    get_ai_response,
    get_opportunity_recommendations,
)
from knowzone.services.notification_service import notify_user
from knowzone.services.text_generator import FallbackTextGenerator

from conftest import make_user_payload
from mocks.mock_text_generator import MockTextGenerator


@pytest.fixture
def user() -> User:
    return User.model_validate({'id': 1, **make_user_payload('student', year='2', subjects=['ML'])})


@pytest.fixture
def opportunities():
    return [
        Opportunity(id=1, title='ML Intern', description='Model training', type='internship'),
        Opportunity(id=2, title='Smart India Hackathon', description='36h hackathon', type='hackathon'),
    ]


class TestChatPrompt:

    def test_with_context(self):
        prompt = build_chat_prompt('What is DBMS?', context='Semester 4 syllabus')

        assert prompt.startswith('Context: Semester 4 syllabus')
        assert 'User Question: What is DBMS?' in prompt

    def test_without_context(self):
        prompt = build_chat_prompt('What is DBMS?')

        assert 'Context:' not in prompt
        assert prompt.endswith('What is DBMS?')


class TestGetAIResponse:

    @pytest.mark.asyncio
    async def test_returns_generated_text(self):
        generator = MockTextGenerator()
        generator.set_text('DBMS stands for Database Management System.')

        reply = await get_ai_response(generator, 'What is DBMS?')

        assert reply == 'DBMS stands for Database Management System.'
        assert generator.call_count == 1
        assert 'What is DBMS?' in generator.last_prompt

    @pytest.mark.asyncio
    async def test_service_errors_propagate(self):
        generator = MockTextGenerator()
        generator.fail_with()

        with pytest.raises(AIServiceError):
            await get_ai_response(generator, 'hello')

    @pytest.mark.asyncio
    async def test_unexpected_errors_become_service_errors(self):
        generator = MockTextGenerator()
        generator.fail_with(RuntimeError('socket closed'))

        with pytest.raises(AIServiceError):
            await get_ai_response(generator, 'hello')


class TestRecommendations:

    def test_prompt_lists_profile_and_opportunities(self, user, opportunities):
        prompt = build_recommendation_prompt(user, opportunities)

        assert 'Role: student' in prompt
        assert 'Year: 2' in prompt
        assert 'Interests: ML' in prompt
        assert 'ML Intern - internship - Model training' in prompt

    @pytest.mark.asyncio
    async def test_ranked_and_capped(self, user, opportunities):
        generator = MockTextGenerator()
        generator.set_json([
            {'title': 'A', 'relevanceScore': 40, 'reasoning': 'ok'},
            {'title': 'B', 'relevanceScore': 95, 'reasoning': 'great'},
            {'title': 'C', 'relevanceScore': 70, 'reasoning': 'good'},
            {'title': 'D', 'relevanceScore': 10, 'reasoning': 'weak'},
        ])

        result = await get_opportunity_recommendations(generator, user, opportunities)

        assert [r.title for r in result] == ['B', 'C', 'A']

    @pytest.mark.asyncio
    async def test_no_opportunities_skips_model(self, user):
        generator = MockTextGenerator()

        assert await get_opportunity_recommendations(generator, user, []) == []
        assert generator.call_count == 0

    @pytest.mark.asyncio
    async def test_failure_returns_empty(self, user, opportunities):
        generator = MockTextGenerator()
        generator.fail_with()

        assert await get_opportunity_recommendations(generator, user, opportunities) == []

    @pytest.mark.asyncio
    async def test_off_schema_returns_empty(self, user, opportunities):
        generator = MockTextGenerator()
        generator.set_json([{'title': 'A', 'relevanceScore': 'high'}])

        assert await get_opportunity_recommendations(generator, user, opportunities) == []

    @pytest.mark.asyncio
    async def test_fallback_generator_returns_empty(self, user, opportunities):
        assert await get_opportunity_recommendations(FallbackTextGenerator(), user, opportunities) == []


class TestSmartNotification:

    @pytest.mark.asyncio
    async def test_generated_copy(self, user):
        generator = MockTextGenerator()
        generator.set_json({'title': 'New hackathon!', 'body': 'Smart India Hackathon opens today'})

        copy = await generate_smart_notification(generator, user, 'opportunity', {'id': 2})

        assert copy.title == 'New hackathon!'
        assert 'Event Type: opportunity' in generator.last_prompt

    @pytest.mark.asyncio
    async def test_fallback_copy_on_failure(self, user):
        generator = MockTextGenerator()
        generator.fail_with()

        copy = await generate_smart_notification(generator, user, 'forum', {})

        assert copy == FALLBACK_NOTIFICATION
        assert copy.title == 'New Update'
        assert copy.body == "Check out what's happening in KnowZone!"

    @pytest.mark.asyncio
    async def test_fallback_copy_when_unavailable(self, user):
        copy = await generate_smart_notification(FallbackTextGenerator(), user, 'system', {})
        assert copy == FALLBACK_NOTIFICATION


class TestNotifyUser:

    @pytest.mark.asyncio
    async def test_creates_notification(self):
        repository = Repository()
        user = await repository.create_user(make_user_payload())
        generator = MockTextGenerator()
        generator.set_json({'title': 'Your question was answered', 'body': 'A senior replied'})

        notification = await notify_user(
            repository, generator, user, NotificationType.MENTOR, {'questionId': 3}
        )

        assert notification.user_id == user.id
        assert notification.type == NotificationType.MENTOR
        assert notification.title == 'Your question was answered'
        assert notification.data == {'questionId': 3}
        assert notification.is_read is False
        assert await repository.get_notifications_by_user(user.id) == [notification]
