"""
In-memory implementation of ``Storage``.

Each entity type lives in its own insertion-ordered ``dict`` keyed by
id, with its own id counter.  Filters are linear scans, which is fine
for the few thousand records a single event season produces.  Nothing
is persisted: the store lives as long as the process (or the test)
that built it.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from ..schemas.checkpoint import ParticipantCheckpoint, ParticipantCheckpointCreate
from ..schemas.community import Community, CommunityCreate, CommunityMember, CommunityMemberCreate
from ..schemas.event import Event, EventCreate
from ..schemas.race_pack import RacePack, RacePackCreate
from ..schemas.registration import Registration, RegistrationCreate
from ..schemas.user import User, UserCreate
from .interfaces import Fields, Storage


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class _Collection(Generic[RecordT]):
    """Keyed records of one entity type plus their id counter."""

    def __init__(self) -> None:
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        record_id = self._next_id
        self._next_id += 1
        record = build(record_id)
        self._records[record_id] = record
        return record

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def all(self) -> List[RecordT]:
        return list(self._records.values())

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [record for record in self._records.values() if predicate(record)]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        return next((record for record in self._records.values() if predicate(record)), None)

    def update(self, record_id: int, fields: Fields) -> Optional[RecordT]:
        record = self._records.get(record_id)
        if record is None:
            return None
        known = type(record).model_fields
        changes = {key: value for key, value in fields.items() if key in known and key != "id"}
        updated = record.model_copy(update=changes)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)


class MemStorage(Storage):
    """Process-local store for all seven entity types.

    Parameters
    ----------
    seed : bool
        Populate the store with the demo fixture from ``storage.seed``.
    """

    def __init__(self, seed: bool = False) -> None:
        self.users: _Collection[User] = _Collection()
        self.events: _Collection[Event] = _Collection()
        self.registrations: _Collection[Registration] = _Collection()
        self.communities: _Collection[Community] = _Collection()
        self.community_members: _Collection[CommunityMember] = _Collection()
        self.race_packs: _Collection[RacePack] = _Collection()
        self.participant_checkpoints: _Collection[ParticipantCheckpoint] = _Collection()
        if seed:
            from .seed import seed_demo_data

            seed_demo_data(self)
            logger.info(
                "Seeded demo data: %d users, %d events, %d registrations",
                len(self.users),
                len(self.events),
                len(self.registrations),
            )

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find(lambda user: user.email == email)

    def list_users(self) -> List[User]:
        return self.users.all()

    def create_user(self, data: UserCreate) -> User:
        return self.users.insert(lambda new_id: User(id=new_id, created_at=_now(), **data.model_dump()))

    def update_user(self, user_id: int, fields: Fields) -> Optional[User]:
        return self.users.update(user_id, fields)

    def delete_user(self, user_id: int) -> bool:
        return self.users.delete(user_id)

    # Events

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.events.get(event_id)

    def list_events(self) -> List[Event]:
        return self.events.all()

    def list_events_by_organizer(self, organizer_id: int) -> List[Event]:
        return self.events.filter(lambda event: event.organizer_id == organizer_id)

    def list_events_by_status(self, status: str) -> List[Event]:
        return self.events.filter(lambda event: event.status == status)

    def create_event(self, data: EventCreate) -> Event:
        return self.events.insert(lambda new_id: Event(id=new_id, created_at=_now(), **data.model_dump()))

    def update_event(self, event_id: int, fields: Fields) -> Optional[Event]:
        return self.events.update(event_id, fields)

    def delete_event(self, event_id: int) -> bool:
        return self.events.delete(event_id)

    # Registrations

    def get_registration(self, registration_id: int) -> Optional[Registration]:
        return self.registrations.get(registration_id)

    def get_registration_by_event_and_user(self, event_id: int, user_id: int) -> Optional[Registration]:
        return self.registrations.find(lambda reg: reg.event_id == event_id and reg.user_id == user_id)

    def list_registrations_by_event(self, event_id: int) -> List[Registration]:
        return self.registrations.filter(lambda reg: reg.event_id == event_id)

    def list_registrations_by_user(self, user_id: int) -> List[Registration]:
        return self.registrations.filter(lambda reg: reg.user_id == user_id)

    def create_registration(self, data: RegistrationCreate) -> Registration:
        return self.registrations.insert(
            lambda new_id: Registration(id=new_id, registration_date=_now(), **data.model_dump())
        )

    def update_registration(self, registration_id: int, fields: Fields) -> Optional[Registration]:
        return self.registrations.update(registration_id, fields)

    def delete_registration(self, registration_id: int) -> bool:
        return self.registrations.delete(registration_id)

    # Communities

    def get_community(self, community_id: int) -> Optional[Community]:
        return self.communities.get(community_id)

    def list_communities(self) -> List[Community]:
        return self.communities.all()

    def list_communities_by_manager(self, manager_id: int) -> List[Community]:
        return self.communities.filter(lambda community: community.manager_id == manager_id)

    def create_community(self, data: CommunityCreate) -> Community:
        return self.communities.insert(
            lambda new_id: Community(id=new_id, created_at=_now(), **data.model_dump())
        )

    def update_community(self, community_id: int, fields: Fields) -> Optional[Community]:
        return self.communities.update(community_id, fields)

    def delete_community(self, community_id: int) -> bool:
        return self.communities.delete(community_id)

    # Community members

    def get_community_member(self, member_id: int) -> Optional[CommunityMember]:
        return self.community_members.get(member_id)

    def list_community_members_by_community(self, community_id: int) -> List[CommunityMember]:
        return self.community_members.filter(lambda member: member.community_id == community_id)

    def list_community_members_by_user(self, user_id: int) -> List[CommunityMember]:
        return self.community_members.filter(lambda member: member.user_id == user_id)

    def create_community_member(self, data: CommunityMemberCreate) -> CommunityMember:
        return self.community_members.insert(
            lambda new_id: CommunityMember(id=new_id, join_date=_now(), **data.model_dump())
        )

    def update_community_member(self, member_id: int, fields: Fields) -> Optional[CommunityMember]:
        return self.community_members.update(member_id, fields)

    def delete_community_member(self, member_id: int) -> bool:
        return self.community_members.delete(member_id)

    # Race packs

    def get_race_pack(self, race_pack_id: int) -> Optional[RacePack]:
        return self.race_packs.get(race_pack_id)

    def list_race_packs_by_event(self, event_id: int) -> List[RacePack]:
        return self.race_packs.filter(lambda pack: pack.event_id == event_id)

    def create_race_pack(self, data: RacePackCreate) -> RacePack:
        return self.race_packs.insert(lambda new_id: RacePack(id=new_id, **data.model_dump()))

    def update_race_pack(self, race_pack_id: int, fields: Fields) -> Optional[RacePack]:
        return self.race_packs.update(race_pack_id, fields)

    def delete_race_pack(self, race_pack_id: int) -> bool:
        return self.race_packs.delete(race_pack_id)

    # Participant checkpoints

    def get_participant_checkpoint(self, checkpoint_id: int) -> Optional[ParticipantCheckpoint]:
        return self.participant_checkpoints.get(checkpoint_id)

    def list_participant_checkpoints_by_registration(self, registration_id: int) -> List[ParticipantCheckpoint]:
        return self.participant_checkpoints.filter(lambda cp: cp.registration_id == registration_id)

    def create_participant_checkpoint(self, data: ParticipantCheckpointCreate) -> ParticipantCheckpoint:
        values = data.model_dump()
        if values.get("timestamp") is None:
            values["timestamp"] = _now()
        return self.participant_checkpoints.insert(
            lambda new_id: ParticipantCheckpoint(id=new_id, **values)
        )

    def update_participant_checkpoint(self, checkpoint_id: int, fields: Fields) -> Optional[ParticipantCheckpoint]:
        return self.participant_checkpoints.update(checkpoint_id, fields)

    def delete_participant_checkpoint(self, checkpoint_id: int) -> bool:
        return self.participant_checkpoints.delete(checkpoint_id)
