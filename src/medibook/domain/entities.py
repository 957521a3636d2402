"""Domain entities: Person, Appointment, Remark, and the Role tag."""

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime

# Max length for the name stored on a Person.
NAME_MAX_LENGTH = 500


class Role(enum.Enum):
    """Which side of an appointment a Person can stand on."""

    PATIENT = "Patient"
    DOCTOR = "Doctor"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Remark:
    """
    Free-text annotation on a Person.
    Empty text means "no remark"; setting an empty remark deletes the old one.
    """

    value: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", (self.value or "").strip())

    @property
    def is_empty(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Appointment:
    """One side's record of an appointment between a patient and a doctor."""

    time: datetime
    patient_id: int
    doctor_id: int
    remark: str = ""

    def __str__(self) -> str:
        text = (
            f"{self.time:%Y-%m-%d %H:%M} "
            f"(patient #{self.patient_id}, doctor #{self.doctor_id})"
        )
        if self.remark:
            text += f": {self.remark}"
        return text


def _name_key(name: str) -> str:
    return " ".join(name.split()).casefold()


@dataclass(frozen=True)
class Person:
    """
    A patient or a doctor in the roster.

    The id is unique across the roster and is never part of domain equality;
    two Persons are "the same person" when name and phone number match
    (see is_same_person).
    """

    id: int
    name: str
    role: Role
    phone_number: str | None = None
    email: str | None = None
    remark: Remark = field(default_factory=Remark)
    appointments: list[Appointment] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError("Person id must be a positive integer.")
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Person name must be non-empty.")
        if len(name) > NAME_MAX_LENGTH:
            raise ValueError(f"Person name must be at most {NAME_MAX_LENGTH} chars.")
        object.__setattr__(self, "name", name)
        if not isinstance(self.role, Role):
            raise ValueError("Person role must be a Role.")
        if self.remark is None:
            object.__setattr__(self, "remark", Remark())
        object.__setattr__(self, "phone_number", (self.phone_number or "").strip() or None)
        object.__setattr__(self, "email", (self.email or "").strip() or None)

    def __hash__(self) -> int:
        # appointments is a list; the id alone stays stable and unique in a roster.
        return hash(self.id)

    @property
    def is_patient(self) -> bool:
        return self.role is Role.PATIENT

    @property
    def is_doctor(self) -> bool:
        return self.role is Role.DOCTOR

    def is_same_person(self, other: "Person | None") -> bool:
        """Domain equality: same name (case and spacing ignored) and same phone."""
        if other is self:
            return True
        if other is None:
            return False
        return (
            _name_key(self.name) == _name_key(other.name)
            and self.phone_number == other.phone_number
        )

    def with_remark(self, remark: Remark) -> "Person":
        """Return a copy with the given remark and its own appointments list."""
        return replace(self, remark=remark, appointments=list(self.appointments))

    def add_appointment(
        self,
        time: datetime,
        patient_id: int,
        doctor_id: int,
        remark: str = "",
    ) -> Appointment:
        appointment = Appointment(
            time=time, patient_id=patient_id, doctor_id=doctor_id, remark=remark
        )
        self.appointments.append(appointment)
        return appointment

    def upcoming_appointments(self, now: datetime) -> list[Appointment]:
        """Appointments at or after now, earliest first."""
        return sorted(
            (a for a in self.appointments if a.time >= now), key=lambda a: a.time
        )

    def __str__(self) -> str:
        return (
            f"{self.role} #{self.id} {self.name}"
            f"; Phone: {self.phone_number or '-'}"
            f"; Email: {self.email or '-'}"
            f"; Remark: {self.remark.value or '-'}"
            f"; Appointments: {len(self.appointments)}"
        )
