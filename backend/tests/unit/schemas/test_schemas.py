"""
Unit Tests for KnowZone Schemas
Tests for: role-tagged signup, profile edits, create payloads, camelCase output
"""
import pytest
from pydantic import ValidationError

from knowzone.models import User
from knowzone.schemas.auth import (
    AlumniSignup,
    FacultySignup,
    ProfileUpdate,
    SignupRequest,
    StudentSignup,
)
from knowzone.schemas.chat import ChatRequest
from knowzone.schemas.forum import ForumPostCreate
from knowzone.schemas.opportunity import OpportunityCreate, OpportunityRecommendation


def signup_data(**overrides):
    data = {
        "firebaseUid": "u1",
        "email": "a@x.com",
        "name": "A",
        "role": "student",
        "collegeId": "vit-vellore",
        "department": "CSE",
        "branch": "CSE",
    }
    data.update(overrides)
    return data


class TestSignupRequest:
    """Test the signup union is selected by role"""

    def test_student_signup(self):
        request = SignupRequest.model_validate(signup_data(usn="1VI21CS001", year="3"))

        assert isinstance(request.root, StudentSignup)
        assert request.root.firebase_uid == "u1"
        assert request.root.usn == "1VI21CS001"

    def test_alumni_signup(self):
        request = SignupRequest.model_validate(signup_data(role="alumni", batch="2019", status="alumni"))
        assert isinstance(request.root, AlumniSignup)

    def test_faculty_signup(self):
        request = SignupRequest.model_validate(signup_data(
            role="faculty",
            employeeId="EMP1",
            designation="Associate Professor",
            experience=8,
            subjects=["DBMS", "OS"],
        ))

        assert isinstance(request.root, FacultySignup)
        assert request.root.subjects == ["DBMS", "OS"]

    def test_unknown_role_fails(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(signup_data(role="admin"))

    def test_faculty_fields_rejected_for_student(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(signup_data(employeeId="EMP1"))

    def test_student_fields_rejected_for_faculty(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(signup_data(role="faculty", usn="1VI21CS001"))

    def test_negative_experience_fails(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(signup_data(role="faculty", experience=-1))

    def test_invalid_email_fails(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(signup_data(email="not-an-email"))

    @pytest.mark.parametrize("missing", ["firebaseUid", "email", "name", "collegeId", "department", "branch"])
    def test_missing_required_field_fails(self, missing):
        data = signup_data()
        del data[missing]

        with pytest.raises(ValidationError):
            SignupRequest.model_validate(data)

    def test_snake_case_keys_accepted(self):
        request = SignupRequest.model_validate({
            "firebase_uid": "u2",
            "email": "b@x.com",
            "name": "B",
            "role": "student",
            "college_id": "vit-vellore",
            "department": "ECE",
            "branch": "ECE",
        })
        assert request.root.college_id == "vit-vellore"


class TestProfileUpdate:
    """Test profile edits"""

    def test_only_sent_fields_are_set(self):
        update = ProfileUpdate.model_validate({"linkedinUrl": "https://linkedin.com/in/a", "busId": "BUS01"})
        assert update.model_dump(exclude_unset=True) == {
            "linkedin_url": "https://linkedin.com/in/a",
            "bus_id": "BUS01",
        }

    def test_optional_field_can_be_cleared(self):
        update = ProfileUpdate.model_validate({"busId": None})
        assert update.model_dump(exclude_unset=True) == {"bus_id": None}

    @pytest.mark.parametrize("field", ["firebaseUid", "email", "role"])
    def test_identity_fields_not_editable(self, field):
        with pytest.raises(ValidationError):
            ProfileUpdate.model_validate({field: "x"})

    def test_required_profile_field_cannot_be_cleared(self):
        with pytest.raises(ValidationError):
            ProfileUpdate.model_validate({"name": None})


class TestCreatePayloads:

    def test_forum_post_defaults(self):
        post = ForumPostCreate.model_validate({"forumName": "VIT Forum", "title": "Hi", "body": "Hello"})
        assert post.is_anonymous is False
        assert post.tags == []

    def test_empty_title_fails(self):
        with pytest.raises(ValidationError):
            ForumPostCreate.model_validate({"forumName": "VIT Forum", "title": "", "body": "Hello"})

    def test_opportunity_type_must_be_known(self):
        with pytest.raises(ValidationError):
            OpportunityCreate.model_validate({"title": "T", "description": "D", "type": "scholarship"})

    def test_chat_message_required(self):
        with pytest.raises(ValidationError):
            ChatRequest.model_validate({"message": ""})

    def test_recommendation_score_bounds(self):
        with pytest.raises(ValidationError):
            OpportunityRecommendation.model_validate({"title": "T", "relevanceScore": 101, "reasoning": "r"})


class TestSerialization:

    def test_user_serializes_camel_case(self):
        user = User.model_validate({
            "id": 1,
            "firebaseUid": "u1",
            "email": "a@x.com",
            "name": "A",
            "role": "student",
            "collegeId": "vit-vellore",
            "department": "CSE",
            "branch": "CSE",
        })
        data = user.model_dump(by_alias=True, mode="json")

        assert data["firebaseUid"] == "u1"
        assert data["collegeId"] == "vit-vellore"
        assert data["role"] == "student"
        assert data["linkedinUrl"] is None
        assert "createdAt" in data

    def test_records_are_immutable(self):
        user = User.model_validate({
            "id": 1, "firebaseUid": "u1", "email": "a@x.com", "name": "A", "role": "student",
            "collegeId": "vit-vellore", "department": "CSE", "branch": "CSE",
        })
        with pytest.raises(ValidationError):
            user.name = "B"
