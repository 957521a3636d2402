"""Book an appointment between a patient and a doctor."""

import logging
from datetime import datetime

from medibook.application.commands.base import Command, lookup_person
from medibook.application.dto import CommandResult
from medibook.application.messages import MESSAGE_ADD_APPOINTMENT_SUCCESS
from medibook.application.ports import Model
from medibook.domain import Role

logger = logging.getLogger(__name__)


class AddAppointmentCommand(Command):
    """
    Record one appointment on both the patient and the doctor.
    Overlapping appointments are not checked.
    """

    def __init__(
        self, time: datetime, patient_id: int, doctor_id: int, remark: str = ""
    ) -> None:
        self.time = time
        self.patient_id = patient_id
        self.doctor_id = doctor_id
        self.remark = (remark or "").strip()

    def execute(self, model: Model) -> CommandResult:
        patient = lookup_person(model, self.patient_id, Role.PATIENT)
        doctor = lookup_person(model, self.doctor_id, Role.DOCTOR)
        _, patient_copy = model.add_appointment(self.time, patient, doctor, self.remark)
        logger.info(
            "Booked patient #%s with doctor #%s at %s",
            self.patient_id,
            self.doctor_id,
            self.time.isoformat(),
        )
        return CommandResult(MESSAGE_ADD_APPOINTMENT_SUCCESS.format(patient_copy))
