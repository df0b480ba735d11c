"""
MentorConnect: questions for seniors and faculty.

Questions and answers reference people by external identity (``askerUid``,
``answererUid``), so they stay valid for identities still mid-signup.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List

from knowzone.core.database import get_repository
from knowzone.core.exceptions import KnowZoneError, ResourceNotFoundError
from knowzone.core.logging_config import logger
from knowzone.db.repository import Repository
from knowzone.models import Question, QuestionAnswer, QuestionTarget, User
from knowzone.modules.auth.dependencies import get_current_user
from knowzone.schemas.mentor import (
    AnswerCreate,
    AnswerWithAnswerer,
    QuestionCreate,
    QuestionWithDetails,
)
from knowzone.services.projections import join_all, with_answerer, with_asker

router = APIRouter(prefix="/questions", tags=["MentorConnect"])


@router.get("", response_model=List[QuestionWithDetails])
async def list_questions(
    target_role: QuestionTarget = Query(QuestionTarget.ANY, alias="targetRole"),
    repository: Repository = Depends(get_repository)
):
    """Questions addressed to ``targetRole`` or to anyone, with asker and answer count"""
    questions = await repository.get_questions_by_target(target_role)
    return await join_all(with_asker, repository, questions)


@router.get("/mine", response_model=List[Question])
async def list_my_questions(
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    return await repository.get_questions_by_user(current_user.firebase_uid)


@router.post("", response_model=Question)
async def ask_question(
    payload: QuestionCreate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    question = await repository.create_question({
        **payload.model_dump(),
        "asker_uid": current_user.firebase_uid,
    })
    logger.info(f"Question {question.id} asked for '{question.target_role.value}'")
    return question


@router.get("/{question_id}/answers", response_model=List[AnswerWithAnswerer])
async def list_answers(
    question_id: int,
    repository: Repository = Depends(get_repository)
):
    answers = await repository.get_answers_by_question(question_id)
    return await join_all(with_answerer, repository, answers)


@router.post("/{question_id}/answers", response_model=QuestionAnswer)
async def answer_question(
    question_id: int,
    payload: AnswerCreate,
    current_user: User = Depends(get_current_user),
    repository: Repository = Depends(get_repository)
):
    """
    Answer a question.

    The question is marked answered on every answer; there is no way back
    to unanswered.
    """
    question = await repository.get_question(question_id)
    if not question:
        raise ResourceNotFoundError("Question", question_id)

    try:
        answer = await repository.create_question_answer({
            "question_id": question_id,
            "answerer_uid": current_user.firebase_uid,
            "answer": payload.answer,
        })
        await repository.update_question(question_id, {"is_answered": True})

        logger.info(f"Answer {answer.id} posted on question {question_id} by user {current_user.id}")
        return answer

    except KnowZoneError:
        raise
    except Exception as e:
        logger.error(f"Error answering question {question_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to post answer"
        )
