"""Module: serializers."""

from medadherence import domain
from medadherence.engine.adherence import day_label


def serialize_medication(med: domain.Medication) -> dict:
    return {
        "id": str(med.id),
        "name": med.name,
        "dosage": med.dosage,
        "scheduled_times": [domain.format_time_of_day(t) for t in sorted(med.scheduled_times)],
        "notes": med.notes,
        "frequency": med.frequency.value,
        "specific_weekdays": sorted(med.specific_weekdays),
    }


def serialize_dose(dose: domain.TodayDose) -> dict:
    return {
        "medication_id": str(dose.medication.id),
        "name": dose.medication.name,
        "dosage": dose.medication.dosage,
        "scheduled_time": domain.format_time_of_day(dose.scheduled_time),
        "status": dose.status.value,
    }


def serialize_last_action(action: domain.LastAction | None) -> dict | None:
    if action is None:
        return None
    return {
        "medication_id": str(action.medication_id),
        "date": action.date.isoformat(),
        "scheduled_time": domain.format_time_of_day(action.scheduled_time),
        "previous_status": domain.DoseStatus.from_taken(action.previous_taken).value,
    }


def serialize_day(day: domain.DayAdherence) -> dict:
    return {
        "date": day.date.isoformat(),
        "label": day_label(day.date),
        "percentage": day.percentage,
    }
