"""Seed the database with the default templates and a sample squad."""

from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from squad_feedback.core.database import SessionLocal
from squad_feedback.models import Event, Template, User
from squad_feedback.services.catalog import get_default_templates
from squad_feedback.services.gateway import Gateway
from squad_feedback.services.templates import seed_catalog_template

SEED_CLUB = "Riverside FC"

SEED_USERS = [
    {"name": "Alex Morgan", "role": "coach"},
    {"name": "Sam Carter", "role": "player", "position": "Goalkeeper", "age": 24, "jersey_number": 1},
    {"name": "Jordan Lee", "role": "player", "position": "Defender", "age": 22, "jersey_number": 4},
    {"name": "Chris Patel", "role": "player", "position": "Midfielder", "age": 26, "jersey_number": 8},
    {"name": "Taylor Brooks", "role": "player", "position": "Forward", "age": 21, "jersey_number": 9},
]


def seed_templates(db: Session) -> list[Template]:
    """Store every default catalog entry not already present by name."""
    gateway = Gateway(db)
    existing = {t.name for t in gateway.list_by("templates")}
    return [seed_catalog_template(gateway, entry) for entry in get_default_templates() if entry.name not in existing]


def seed_squad(db: Session) -> tuple[list[User], list[Event]]:
    gateway = Gateway(db)
    if gateway.list_by("users", {"club": SEED_CLUB}):
        return [], []
    users = gateway.insert_many("users", [{"club": SEED_CLUB, **data} for data in SEED_USERS])
    now = datetime.now().replace(microsecond=0)
    events = gateway.insert_many(
        "events",
        [
            {
                "name": "League Match vs Hillside United",
                "type": "match",
                "opponent": "Hillside United",
                "date": now - timedelta(days=1),
                "club": SEED_CLUB,
                "location": "Riverside Park",
            },
            {
                "name": "Tuesday Training",
                "type": "training",
                "date": now + timedelta(days=2),
                "club": SEED_CLUB,
                "location": "Training Ground",
            },
        ],
    )
    return users, events


def main() -> None:
    db = SessionLocal()
    try:
        templates = seed_templates(db)
        users, events = seed_squad(db)
    finally:
        db.close()

    for t in templates:
        print(f"Created template: {t.name} (id={t.id}, {t.question_count} questions)")
    for u in users:
        print(f"Created user: {u.name} (id={u.id}, role={u.role})")
    for e in events:
        print(f"Created event: {e.name} (id={e.id})")


if __name__ == "__main__":
    main()
