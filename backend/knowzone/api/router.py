from fastapi import APIRouter
from knowzone.api.endpoints import (
    auth,
    colleges,
    chat,
    forums,
    questions,
    opportunities,
    lost_found,
    bus_routes,
    users,
    notifications,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(colleges.router)
api_router.include_router(chat.router)
api_router.include_router(forums.router)
api_router.include_router(questions.router)
api_router.include_router(opportunities.router)
api_router.include_router(lost_found.router)
api_router.include_router(bus_routes.router)
api_router.include_router(users.router)
api_router.include_router(notifications.router)
