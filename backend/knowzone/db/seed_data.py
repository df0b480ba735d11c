"""
Sample colleges and bus routes loaded at startup when SEED_SAMPLE_DATA is on.
"""
from typing import Any, Dict, List

from knowzone.core.logging_config import logger


SAMPLE_COLLEGES: List[Dict[str, Any]] = [
    {
        "id": "vit-vellore",
        "name": "VIT University",
        "city": "Vellore",
        "type": "Private",
        "forums": ["VIT Forum", "South Zone Tech Forum", "All India Forum"],
    },
    {
        "id": "iit-bangalore",
        "name": "Indian Institute of Technology",
        "city": "Bangalore",
        "type": "Government",
        "forums": ["IIT Forum", "South Zone Tech Forum", "All India Forum"],
    },
    {
        "id": "vtu-bangalore",
        "name": "Visvesvaraya Technological University",
        "city": "Bangalore",
        "type": "VTU",
        "forums": ["VTU Forum", "South Zone Tech Forum", "All India Forum"],
    },
]

SAMPLE_BUS_ROUTES: List[Dict[str, Any]] = [
    {
        "id": "BUS01",
        "route": "Electronic City - VIT Campus",
        "driver_name": "Ravi Kumar",
        "driver_contact": "+91 9876543210",
        "gps_live_link": "https://maps.google.com/live-tracking-link-1",
        "timings": {"start": "7:30 AM", "end": "5:30 PM"},
    },
    {
        "id": "BUS02",
        "route": "Whitefield - VIT Campus",
        "driver_name": "Suresh Reddy",
        "driver_contact": "+91 9876543211",
        "gps_live_link": "https://maps.google.com/live-tracking-link-2",
        "timings": {"start": "7:45 AM", "end": "5:45 PM"},
    },
]


async def seed_repository(repository) -> None:
    """Load sample colleges and bus routes into an empty repository"""
    for college in SAMPLE_COLLEGES:
        await repository.create_college(college)

    for route in SAMPLE_BUS_ROUTES:
        await repository.create_bus_route(route)

    logger.info(
        f"Seeded {len(SAMPLE_COLLEGES)} colleges and {len(SAMPLE_BUS_ROUTES)} bus routes"
    )
