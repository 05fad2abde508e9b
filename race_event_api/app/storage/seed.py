"""
Deterministic demo fixture.

Builds three named accounts (admin, organizer, participant), a pool of
synthetic participants, three published events with several hundred
registrations between them, five communities, four race-pack line items
for the marathon and ten checkpoints.  Every registration respects the
one-per-user-per-event rule and every event stays within its capacity.

Seed credentials: ``admin/admin123``, ``organizer/organizer123``,
``participant/participant123``; synthetic participants use
``password``.
"""

from datetime import datetime

from ..core.security import hash_password
from ..schemas.checkpoint import ParticipantCheckpointCreate
from ..schemas.community import CommunityCreate
from ..schemas.event import EventCreate
from ..schemas.race_pack import RacePackCreate
from ..schemas.registration import RegistrationCreate
from ..schemas.user import UserCreate
from .interfaces import Storage


MARATHON_REGISTRATIONS = 782
CYCLING_REGISTRATIONS = 215
SWIM_REGISTRATIONS = 148


def _seed_users(storage: Storage) -> None:
    for username, password, email, full_name, role in (
        ("admin", "admin123", "admin@eventhub.com", "Admin User", "admin"),
        ("organizer", "organizer123", "organizer@eventhub.com", "Event Organizer", "organizer"),
        ("participant", "participant123", "participant@example.com", "John Participant", "participant"),
    ):
        storage.create_user(
            UserCreate(
                username=username,
                password=hash_password(password),
                email=email,
                full_name=full_name,
                role=role,
            )
        )

    # One hash for the whole synthetic pool; PBKDF2 per account would
    # make start-up take minutes.
    shared_hash = hash_password("password")
    for i in range(1, MARATHON_REGISTRATIONS):
        storage.create_user(
            UserCreate(
                username=f"participant{i}",
                password=shared_hash,
                email=f"participant{i}@example.com",
                full_name=f"Participant {i}",
                role="participant",
            )
        )


def seed_demo_data(storage: Storage) -> None:
    """Populate ``storage`` with the demo fixture.  Expects an empty store."""
    _seed_users(storage)
    organizer = storage.get_user_by_username("organizer")
    participant = storage.get_user_by_username("participant")
    last_user_id = storage.list_users()[-1].id

    marathon = storage.create_event(
        EventCreate(
            title="Jakarta Marathon 2023",
            description="Join the biggest marathon event in Jakarta",
            date=datetime(2023, 10, 15, 7, 0),
            location="Jakarta, Indonesia",
            category="Running",
            capacity=1000,
            price=75,
            image="https://images.unsplash.com/photo-1594882645126-14020914d58d",
            organizer_id=organizer.id,
            status="published",
            registration_open=True,
        )
    )
    cycling = storage.create_event(
        EventCreate(
            title="Bali Cycling Tour",
            description="Experience the beauty of Bali while cycling",
            date=datetime(2023, 11, 5, 6, 30),
            location="Bali, Indonesia",
            category="Cycling",
            capacity=500,
            price=85,
            image="https://images.unsplash.com/photo-1517649763962-0c623066013b",
            organizer_id=organizer.id,
            status="published",
            registration_open=True,
        )
    )
    swim = storage.create_event(
        EventCreate(
            title="Lombok Open Water Swim",
            description="Swim in the crystal clear waters of Lombok",
            date=datetime(2023, 12, 3, 8, 0),
            location="Lombok, Indonesia",
            category="Swimming",
            capacity=300,
            price=65,
            image="https://images.unsplash.com/photo-1560089000-7433a4ebbd64",
            organizer_id=organizer.id,
            status="published",
            registration_open=True,
        )
    )

    # Marathon: the named participant plus every synthetic one.  The
    # first ten are out on the course, the rest are still registered.
    for i in range(MARATHON_REGISTRATIONS):
        if i < 5:
            status = "active"
        elif i < 10:
            status = "finished"
        else:
            status = "registered"
        storage.create_registration(
            RegistrationCreate(
                event_id=marathon.id,
                user_id=participant.id + i,
                status=status,
                bib_number=f"M-{1000 + i}" if i < 10 else f"M-{5000 + i}",
                category="Marathon 42K" if i % 3 == 0 else "Half Marathon 21K",
                additional_info={"shirtSize": "M", "emergencyContact": "123456789"},
            )
        )

    for i in range(CYCLING_REGISTRATIONS):
        storage.create_registration(
            RegistrationCreate(
                event_id=cycling.id,
                user_id=last_user_id - i,
                status="registered",
                bib_number=f"C-{2000 + i}",
                category="Amateur",
                additional_info={"bikeType": "Mountain", "emergencyContact": "123456789"},
            )
        )

    for i in range(SWIM_REGISTRATIONS):
        storage.create_registration(
            RegistrationCreate(
                event_id=swim.id,
                user_id=last_user_id - i * 2,
                status="registered",
                bib_number=f"S-{3000 + i}",
                category="Open Water 3K",
                additional_info={"swimExperience": "Intermediate", "emergencyContact": "123456789"},
            )
        )

    for name, description in (
        ("Jakarta Runners", "Community for running enthusiasts in Jakarta"),
        ("Bali Cyclists", "Community for cycling enthusiasts in Bali"),
        ("Indonesia Swimmers", "Community for swimming enthusiasts in Indonesia"),
        ("Triathlon Indonesia", "Community for triathlon enthusiasts in Indonesia"),
        ("Fitness Enthusiasts", "Community for fitness enthusiasts"),
    ):
        storage.create_community(CommunityCreate(name=name, description=description, manager_id=organizer.id))

    for name, sku, category, stock, distributed in (
        ("Event T-Shirt", "TS-MAR-2023", "Apparel", 850, 682),
        ("Finisher Medal", "MD-MAR-2023", "Awards", 800, 125),
        ("Bib Numbers", "BIB-MAR-2023", "Essentials", 1000, 782),
        ("Energy Drinks", "DRK-MAR-2023", "Refreshments", 200, 180),
    ):
        storage.create_race_pack(
            RacePackCreate(
                event_id=marathon.id,
                name=name,
                sku=sku,
                category=category,
                stock_quantity=stock,
                distributed_quantity=distributed,
            )
        )

    statuses = ["active", "finished", "active", "delayed"]
    for i in range(1, 11):
        storage.create_participant_checkpoint(
            ParticipantCheckpointCreate(
                registration_id=i,
                checkpoint_name="Finished" if i == 4 else f"Checkpoint {i}",
                checkpoint_distance=i * 7,
                status=statuses[i % 4],
            )
        )
