"""
In-memory repository for every KnowZone entity.

The repository is the only component that touches stored rows. Each entity
kind lives in its own keyed table; numeric-keyed tables hand out strictly
increasing ids starting at 1, while colleges and bus routes use natural
string keys supplied by the caller.

Contract shared by every entity:
    create_*(payload)      -> stored record (defaults filled, timestamps stamped)
    get_*(id)              -> record or None
    get_*_by_* / get_all_* -> full scan with the entity's visibility filter
    update_*(id, fields)   -> merged record or None
    delete_forum_post(id)  -> whether the row existed

Nothing here raises for a missing row; callers turn ``None`` into a 404.
Rows live only for the life of the process and there is no locking:
concurrent read-modify-write of the same row (two likes at once) can lose
an update.
"""

from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from knowzone.core.logging_config import logger
from knowzone.models import (
    BusRoute,
    ChatMessage,
    College,
    ForumPost,
    LostFoundItem,
    Notification,
    Opportunity,
    Question,
    QuestionAnswer,
    QuestionTarget,
    Record,
    User,
    utcnow,
)

RecordT = TypeVar("RecordT", bound=Record)
Payload = Union[BaseModel, Mapping[str, Any]]


def _as_dict(payload: Payload) -> Dict[str, Any]:
    """Plain dict from a schema instance or mapping (only fields the caller set)"""
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_unset=True)
    return dict(payload)


def _to_field_names(model: Type[Record], fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Accept both snake_case field names and camelCase aliases"""
    aliases = {info.alias: name for name, info in model.model_fields.items() if info.alias}
    return {aliases.get(key, key): value for key, value in fields.items()}


class _Table(Generic[RecordT]):
    """One keyed collection of records"""

    def __init__(self, model: Type[RecordT], name: str, auto_increment: bool = True):
        self.model = model
        self.name = name
        self.auto_increment = auto_increment
        self._rows: Dict[Any, RecordT] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # Rows are stored and handed out as deep copies: frozen records still
    # have mutable list/dict fields.

    def get(self, key: Any) -> Optional[RecordT]:
        row = self._rows.get(key)
        return row.model_copy(deep=True) if row is not None else None

    def scan(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> List[RecordT]:
        return [
            row.model_copy(deep=True)
            for row in self._rows.values()
            if predicate is None or predicate(row)
        ]

    def put(self, record: RecordT) -> RecordT:
        self._rows[record.id] = record.model_copy(deep=True)
        if self.auto_increment:
            self._next_id = max(self._next_id, record.id + 1)
        return record

    def delete(self, key: Any) -> bool:
        return self._rows.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


class Repository:
    """Create/read/update/list for every entity, backed by in-memory tables"""

    def __init__(self):
        self._users: _Table[User] = _Table(User, "users")
        self._colleges: _Table[College] = _Table(College, "colleges", auto_increment=False)
        self._forum_posts: _Table[ForumPost] = _Table(ForumPost, "forum_posts")
        self._questions: _Table[Question] = _Table(Question, "questions")
        self._question_answers: _Table[QuestionAnswer] = _Table(QuestionAnswer, "question_answers")
        self._opportunities: _Table[Opportunity] = _Table(Opportunity, "opportunities")
        self._lost_found: _Table[LostFoundItem] = _Table(LostFoundItem, "lost_found")
        self._bus_routes: _Table[BusRoute] = _Table(BusRoute, "bus_routes", auto_increment=False)
        self._chat_messages: _Table[ChatMessage] = _Table(ChatMessage, "chat_messages")
        self._notifications: _Table[Notification] = _Table(Notification, "notifications")

    # ==================== Generic helpers ====================

    def _insert(self, table: _Table[RecordT], payload: Payload, *timestamp_fields: str) -> RecordT:
        data = _to_field_names(table.model, _as_dict(payload))
        if table.auto_increment:
            data["id"] = table.next_id

        now = utcnow()
        for name in ("created_at",) + timestamp_fields:
            data[name] = now

        record = table.model.model_validate(data)
        table.put(record)
        logger.debug(f"Repository insert {table.name} id={record.id}")
        return record

    def _update(
        self,
        table: _Table[RecordT],
        key: Any,
        fields: Payload,
        touch: bool = False,
    ) -> Optional[RecordT]:
        current = table.get(key)
        if current is None:
            return None

        updates = _to_field_names(table.model, _as_dict(fields))
        updates.pop("id", None)

        data = current.model_dump()
        data.update(updates)
        if touch:
            data["updated_at"] = utcnow()

        record = table.model.model_validate(data)
        table.put(record)
        logger.debug(f"Repository update {table.name} id={key} fields={sorted(updates)}")
        return record

    # ==================== Users ====================

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        return next((u for u in self._users.scan() if u.firebase_uid == firebase_uid), None)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.scan() if u.email == email), None)

    async def create_user(self, payload: Payload) -> User:
        return self._insert(self._users, payload, "updated_at")

    async def update_user(self, user_id: int, updates: Payload) -> Optional[User]:
        return self._update(self._users, user_id, updates, touch=True)

    async def get_users_by_college(self, college_id: str) -> List[User]:
        return self._users.scan(lambda u: u.college_id == college_id)

    async def get_users_by_role(self, role: str) -> List[User]:
        return self._users.scan(lambda u: u.role == role)

    # ==================== Colleges ====================

    async def get_college(self, college_id: str) -> Optional[College]:
        return self._colleges.get(college_id)

    async def get_all_colleges(self) -> List[College]:
        return self._colleges.scan()

    async def create_college(self, payload: Payload) -> College:
        return self._insert(self._colleges, payload)

    async def update_college(self, college_id: str, updates: Payload) -> Optional[College]:
        return self._update(self._colleges, college_id, updates)

    # ==================== Forum Posts ====================

    async def get_forum_post(self, post_id: int) -> Optional[ForumPost]:
        return self._forum_posts.get(post_id)

    async def get_forum_posts_by_forum(self, forum_name: str) -> List[ForumPost]:
        return self._forum_posts.scan(lambda p: p.forum_name == forum_name)

    async def create_forum_post(self, payload: Payload) -> ForumPost:
        return self._insert(self._forum_posts, payload, "updated_at")

    async def update_forum_post(self, post_id: int, updates: Payload) -> Optional[ForumPost]:
        return self._update(self._forum_posts, post_id, updates, touch=True)

    async def delete_forum_post(self, post_id: int) -> bool:
        return self._forum_posts.delete(post_id)

    # ==================== Questions ====================

    async def get_question(self, question_id: int) -> Optional[Question]:
        return self._questions.get(question_id)

    async def get_questions_by_target(self, target_role: str) -> List[Question]:
        """Questions addressed to ``target_role`` or to anyone"""
        return self._questions.scan(
            lambda q: q.target_role == target_role or q.target_role == QuestionTarget.ANY
        )

    async def get_questions_by_user(self, asker_uid: str) -> List[Question]:
        return self._questions.scan(lambda q: q.asker_uid == asker_uid)

    async def create_question(self, payload: Payload) -> Question:
        return self._insert(self._questions, payload)

    async def update_question(self, question_id: int, updates: Payload) -> Optional[Question]:
        return self._update(self._questions, question_id, updates)

    # ==================== Question Answers ====================

    async def get_answers_by_question(self, question_id: int) -> List[QuestionAnswer]:
        return self._question_answers.scan(lambda a: a.question_id == question_id)

    async def create_question_answer(self, payload: Payload) -> QuestionAnswer:
        return self._insert(self._question_answers, payload)

    async def update_question_answer(self, answer_id: int, updates: Payload) -> Optional[QuestionAnswer]:
        return self._update(self._question_answers, answer_id, updates)

    # ==================== Opportunities ====================

    async def get_opportunity(self, opportunity_id: int) -> Optional[Opportunity]:
        return self._opportunities.get(opportunity_id)

    async def get_all_opportunities(self) -> List[Opportunity]:
        return self._opportunities.scan(lambda o: o.is_active)

    async def get_opportunities_by_type(self, opportunity_type: str) -> List[Opportunity]:
        return self._opportunities.scan(lambda o: o.type == opportunity_type and o.is_active)

    async def create_opportunity(self, payload: Payload) -> Opportunity:
        return self._insert(self._opportunities, payload)

    async def update_opportunity(self, opportunity_id: int, updates: Payload) -> Optional[Opportunity]:
        return self._update(self._opportunities, opportunity_id, updates)

    # ==================== Lost & Found ====================

    async def get_lost_found_item(self, item_id: int) -> Optional[LostFoundItem]:
        return self._lost_found.get(item_id)

    async def get_all_lost_found_items(self) -> List[LostFoundItem]:
        return self._lost_found.scan(lambda i: not i.is_resolved)

    async def get_lost_found_by_type(self, item_type: str) -> List[LostFoundItem]:
        return self._lost_found.scan(lambda i: i.type == item_type and not i.is_resolved)

    async def create_lost_found_item(self, payload: Payload) -> LostFoundItem:
        return self._insert(self._lost_found, payload)

    async def update_lost_found_item(self, item_id: int, updates: Payload) -> Optional[LostFoundItem]:
        return self._update(self._lost_found, item_id, updates)

    # ==================== Bus Routes ====================

    async def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        return self._bus_routes.get(route_id)

    async def get_all_bus_routes(self) -> List[BusRoute]:
        return self._bus_routes.scan(lambda r: r.is_active)

    async def create_bus_route(self, payload: Payload) -> BusRoute:
        return self._insert(self._bus_routes, payload)

    async def update_bus_route(self, route_id: str, updates: Payload) -> Optional[BusRoute]:
        return self._update(self._bus_routes, route_id, updates)

    # ==================== Chat Messages ====================

    async def get_chat_messages_by_user(self, user_id: int) -> List[ChatMessage]:
        return self._chat_messages.scan(lambda m: m.user_id == user_id)

    async def create_chat_message(self, payload: Payload) -> ChatMessage:
        return self._insert(self._chat_messages, payload)

    # ==================== Notifications ====================

    async def get_notifications_by_user(self, user_id: int) -> List[Notification]:
        return self._notifications.scan(lambda n: n.user_id == user_id)

    async def create_notification(self, payload: Payload) -> Notification:
        return self._insert(self._notifications, payload)

    async def mark_notification_as_read(self, notification_id: int) -> bool:
        return self._update(self._notifications, notification_id, {"is_read": True}) is not None
