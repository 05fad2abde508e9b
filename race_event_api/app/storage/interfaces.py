"""Storage interface (repository pattern).

Services depend only on ``Storage``; the in-memory implementation can
be swapped for a database-backed one without touching callers.

Conventions shared by every entity type:

* ``create_*`` assigns the next sequential id (starting at 1, one
  counter per entity type), stamps the creation timestamp and returns
  the stored record.
* ``get_*`` returns the record or ``None``; absence is never an error.
* ``update_*`` shallow-merges the given fields into the record and
  returns the new record, or ``None`` if the id is unknown.  Fields not
  in the mapping are left unchanged and ``id`` can never be changed.
* ``delete_*`` removes the record and reports whether it existed.
  There is no cascade: child records may be left pointing at it.
* ``list_*`` returns records in insertion order.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from ..schemas.checkpoint import ParticipantCheckpoint, ParticipantCheckpointCreate
from ..schemas.community import Community, CommunityCreate, CommunityMember, CommunityMemberCreate
from ..schemas.event import Event, EventCreate
from ..schemas.race_pack import RacePack, RacePackCreate
from ..schemas.registration import Registration, RegistrationCreate
from ..schemas.user import User, UserCreate


Fields = Mapping[str, Any]


class Storage(ABC):
    """Interface for entity persistence operations."""

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    def list_users(self) -> List[User]:
        ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Store a user.  ``data.password`` must already be hashed."""
        ...

    @abstractmethod
    def update_user(self, user_id: int, fields: Fields) -> Optional[User]:
        ...

    @abstractmethod
    def delete_user(self, user_id: int) -> bool:
        ...

    # Events

    @abstractmethod
    def get_event(self, event_id: int) -> Optional[Event]:
        ...

    @abstractmethod
    def list_events(self) -> List[Event]:
        ...

    @abstractmethod
    def list_events_by_organizer(self, organizer_id: int) -> List[Event]:
        ...

    @abstractmethod
    def list_events_by_status(self, status: str) -> List[Event]:
        ...

    @abstractmethod
    def create_event(self, data: EventCreate) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: int, fields: Fields) -> Optional[Event]:
        ...

    @abstractmethod
    def delete_event(self, event_id: int) -> bool:
        ...

    # Registrations

    @abstractmethod
    def get_registration(self, registration_id: int) -> Optional[Registration]:
        ...

    @abstractmethod
    def get_registration_by_event_and_user(self, event_id: int, user_id: int) -> Optional[Registration]:
        ...

    @abstractmethod
    def list_registrations_by_event(self, event_id: int) -> List[Registration]:
        ...

    @abstractmethod
    def list_registrations_by_user(self, user_id: int) -> List[Registration]:
        ...

    @abstractmethod
    def create_registration(self, data: RegistrationCreate) -> Registration:
        """Store a registration.  Business rules are the caller's job."""
        ...

    @abstractmethod
    def update_registration(self, registration_id: int, fields: Fields) -> Optional[Registration]:
        ...

    @abstractmethod
    def delete_registration(self, registration_id: int) -> bool:
        ...

    # Communities

    @abstractmethod
    def get_community(self, community_id: int) -> Optional[Community]:
        ...

    @abstractmethod
    def list_communities(self) -> List[Community]:
        ...

    @abstractmethod
    def list_communities_by_manager(self, manager_id: int) -> List[Community]:
        ...

    @abstractmethod
    def create_community(self, data: CommunityCreate) -> Community:
        ...

    @abstractmethod
    def update_community(self, community_id: int, fields: Fields) -> Optional[Community]:
        ...

    @abstractmethod
    def delete_community(self, community_id: int) -> bool:
        ...

    # Community members

    @abstractmethod
    def get_community_member(self, member_id: int) -> Optional[CommunityMember]:
        ...

    @abstractmethod
    def list_community_members_by_community(self, community_id: int) -> List[CommunityMember]:
        ...

    @abstractmethod
    def list_community_members_by_user(self, user_id: int) -> List[CommunityMember]:
        ...

    @abstractmethod
    def create_community_member(self, data: CommunityMemberCreate) -> CommunityMember:
        ...

    @abstractmethod
    def update_community_member(self, member_id: int, fields: Fields) -> Optional[CommunityMember]:
        ...

    @abstractmethod
    def delete_community_member(self, member_id: int) -> bool:
        ...

    # Race packs

    @abstractmethod
    def get_race_pack(self, race_pack_id: int) -> Optional[RacePack]:
        ...

    @abstractmethod
    def list_race_packs_by_event(self, event_id: int) -> List[RacePack]:
        ...

    @abstractmethod
    def create_race_pack(self, data: RacePackCreate) -> RacePack:
        ...

    @abstractmethod
    def update_race_pack(self, race_pack_id: int, fields: Fields) -> Optional[RacePack]:
        ...

    @abstractmethod
    def delete_race_pack(self, race_pack_id: int) -> bool:
        ...

    # Participant checkpoints

    @abstractmethod
    def get_participant_checkpoint(self, checkpoint_id: int) -> Optional[ParticipantCheckpoint]:
        ...

    @abstractmethod
    def list_participant_checkpoints_by_registration(self, registration_id: int) -> List[ParticipantCheckpoint]:
        ...

    @abstractmethod
    def create_participant_checkpoint(self, data: ParticipantCheckpointCreate) -> ParticipantCheckpoint:
        """Store a checkpoint; ``timestamp`` defaults to now when absent."""
        ...

    @abstractmethod
    def update_participant_checkpoint(self, checkpoint_id: int, fields: Fields) -> Optional[ParticipantCheckpoint]:
        ...

    @abstractmethod
    def delete_participant_checkpoint(self, checkpoint_id: int) -> bool:
        ...
