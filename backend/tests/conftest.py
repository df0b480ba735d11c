"""
KnowZone - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Dict
import pytest
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment (before the app reads its settings)
os.environ['ENVIRONMENT'] = 'testing'
os.environ['AUTH_PROVIDER'] = 'jwt'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['JWT_AUDIENCE'] = ''
os.environ['AI_PROVIDER'] = 'fallback'
os.environ['ANTHROPIC_API_KEY'] = ''
os.environ['LOG_FILE'] = ''

from knowzone.main import app
from knowzone.core.config import settings
from knowzone.core.database import get_repository, init_repository
from knowzone.core.security import JWTTokenVerifier, create_identity_token, get_token_verifier
from knowzone.db.repository import Repository
from knowzone.models import User
from knowzone.services.text_generator import get_text_generator

from mocks.mock_text_generator import MockTextGenerator

fake = Faker()


@pytest.fixture
async def repository() -> Repository:
    """Fresh repository with the sample colleges and bus routes"""
    return await init_repository(seed=True)


@pytest.fixture
def text_generator() -> MockTextGenerator:
    return MockTextGenerator()


@pytest.fixture
async def client(repository: Repository, text_generator: MockTextGenerator) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with repository, generator and verifier overrides"""
    verifier = JWTTokenVerifier(settings.JWT_SECRET_KEY, settings.JWT_ALGORITHM)

    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_text_generator] = lambda: text_generator
    app.dependency_overrides[get_token_verifier] = lambda: verifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


def make_user_payload(role: str = 'student', **overrides) -> Dict:
    """Profile fields for ``repository.create_user``"""
    uid = overrides.pop('firebase_uid', None) or f'uid-{fake.uuid4()}'
    payload = {
        'firebase_uid': uid,
        'email': f'{uid}@college.edu',
        'name': fake.name(),
        'role': role,
        'college_id': 'vit-vellore',
        'department': 'Computer Science',
        'branch': 'CSE',
    }
    payload.update(overrides)
    return payload


def auth_headers_for(uid: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {create_identity_token(uid)}'}


@pytest.fixture
async def test_user(repository: Repository) -> User:
    """Create a student profile"""
    return await repository.create_user(make_user_payload('student', year='3'))


@pytest.fixture
async def faculty_user(repository: Repository) -> User:
    """Create a faculty profile"""
    return await repository.create_user(
        make_user_payload('faculty', employee_id='EMP100', designation='Professor', experience=12)
    )


@pytest.fixture
def auth_headers(test_user: User) -> Dict[str, str]:
    """Generate authentication headers for test user"""
    return auth_headers_for(test_user.firebase_uid)


@pytest.fixture
def faculty_auth_headers(faculty_user: User) -> Dict[str, str]:
    """Generate authentication headers for faculty user"""
    return auth_headers_for(faculty_user.firebase_uid)
