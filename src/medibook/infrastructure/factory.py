"""Builds Persons with roster-unique ids and normalized phone numbers."""

import logging
from collections.abc import Iterable

import phonenumbers

from medibook.domain import Person, Remark, Role

logger = logging.getLogger(__name__)


class PersonFactory:
    """Hands out ids from a counter that only moves forward, so ids are never reused,
    even after the person holding one is deleted.
    """

    def __init__(self, *, default_region: str | None = None, start_id: int = 1) -> None:
        if start_id <= 0:
            raise ValueError("start_id must be positive.")
        self._next_id = start_id
        self._default_region = default_region

    @property
    def next_id(self) -> int:
        return self._next_id

    def reserve(self, person_ids: Iterable[int]) -> None:
        """Advance past ids already in use (e.g. a roster loaded from storage)."""
        highest = max(person_ids, default=0)
        if highest >= self._next_id:
            self._next_id = highest + 1

    def normalize_phone(self, raw: str | None) -> str | None:
        """Return the E.164 form of raw, or None when raw is blank.

        Numbers without a leading + are read in the factory's default region.
        Raises ValueError for a number that does not parse or is not valid.
        """
        raw = (raw or "").strip()
        if not raw:
            return None
        try:
            parsed = phonenumbers.parse(raw, self._default_region)
        except phonenumbers.NumberParseException as exc:
            raise ValueError(f"Invalid phone number: {raw}") from exc
        if not phonenumbers.is_valid_number(parsed):
            raise ValueError(f"Invalid phone number: {raw}")
        return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)

    def create_patient(self, name: str, **fields) -> Person:
        return self.create(Role.PATIENT, name, **fields)

    def create_doctor(self, name: str, **fields) -> Person:
        return self.create(Role.DOCTOR, name, **fields)

    def create(
        self,
        role: Role,
        name: str,
        *,
        phone_number: str | None = None,
        email: str | None = None,
        remark: str = "",
    ) -> Person:
        phone = self.normalize_phone(phone_number)
        person = Person(
            id=self._next_id,
            name=name,
            role=role,
            phone_number=phone,
            email=email,
            remark=Remark(remark),
        )
        self._next_id += 1
        logger.debug("Created %s #%s", role, person.id)
        return person
