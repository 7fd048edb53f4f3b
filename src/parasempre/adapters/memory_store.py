"""In-memory shared data store for the in-memory store adapters."""

from dataclasses import dataclass, field

from parasempre.interfaces.credential_store import AccessCredential
from parasempre.interfaces.guest_store import Guest


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared in-memory backing store for the in-memory adapters.

    A single shared instance should be passed to both
    ``InMemoryGuestStore`` and ``InMemoryCredentialStore`` so that deleting
    a guest can unlink its credential and the roster can resolve guest
    names, the way the foreign key does in the database.

    Both mappings are keyed by the record id. Ids are handed out from
    monotonically increasing counters and never reused.
    """

    # keyed by guest id
    guests: dict[int, Guest] = field(default_factory=dict)

    # keyed by credential id
    credentials: dict[int, AccessCredential] = field(default_factory=dict)

    last_guest_id: int = 0
    last_credential_id: int = 0

    def next_guest_id(self) -> int:
        """Reserve and return the next guest id."""
        self.last_guest_id += 1
        return self.last_guest_id

    def next_credential_id(self) -> int:
        """Reserve and return the next credential id."""
        self.last_credential_id += 1
        return self.last_credential_id
