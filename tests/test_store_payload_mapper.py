"""Mapeamento das linhas camelCase do store para entidades."""
from datetime import date
from decimal import Decimal
from unittest import TestCase

from clinic_core.adapters.mappers.store_payload_mapper import MappingError, StorePayloadMapper


class StorePayloadMapperTests(TestCase):
    def test_appointment_row(self) -> None:
        apt = StorePayloadMapper.map_appointment({
            "id": "a1",
            "patientId": "p1",
            "doctorId": "d1",
            "doctorName": "Dr. Rui",
            "date": "2026-10-19T00:00:00Z",
            "time": "09:30:00",
            "status": "in-progress",
            "price": "180.00",
            "paid": True,
            "duration": 45,
            "type": "exam",
            "createdAt": "2026-10-01T12:00:00Z",
        })
        self.assertEqual(apt.patient_id, "p1")
        self.assertEqual(apt.date, date(2026, 10, 19))
        self.assertEqual(apt.time, "09:30")
        self.assertEqual(apt.price, Decimal("180.00"))
        self.assertEqual(apt.duration, 45)

    def test_unknown_status_is_preserved(self) -> None:
        apt = StorePayloadMapper.map_appointment(
            {"id": "a1", "patientId": "p1", "date": "2026-10-19", "time": "09:00", "status": "rescheduled"}
        )
        self.assertEqual(apt.status, "rescheduled")
        self.assertIsNone(apt.known_status)

    def test_financial_entry_validation(self) -> None:
        row = {"id": "f1", "type": "income", "category": "Consultas", "amount": 280, "date": "2026-10-19"}
        self.assertEqual(StorePayloadMapper.map_financial_entry(row).amount, Decimal("280"))
        with self.assertRaises(MappingError):
            StorePayloadMapper.map_financial_entry({**row, "amount": -1})
        with self.assertRaises(MappingError):
            StorePayloadMapper.map_financial_entry({**row, "type": "transfer"})

    def test_company_fills_missing_weekdays(self) -> None:
        company = StorePayloadMapper.map_company({
            "id": "c1",
            "name": "Clínica Centro",
            "businessHours": {"monday": {"open": "07:00", "close": "13:00", "isOpen": True}},
        })
        self.assertEqual(company.business_hours.monday.working_hours, 6)
        self.assertTrue(company.business_hours.tuesday.is_open)
        self.assertFalse(company.business_hours.sunday.is_open)

    def test_patient_row(self) -> None:
        p = StorePayloadMapper.map_patient({"id": "p1", "name": "Maria", "birthDate": "1990-05-02", "cpf": "12345678901"})
        self.assertEqual(p.birth_date, date(1990, 5, 2))
        self.assertEqual(p.cpf, "12345678901")

    def test_map_many_skips_invalid_rows(self) -> None:
        rows = [
            {"id": "p1", "name": "Maria"},
            {"id": "p2"},
            {"id": "p3", "name": "João"},
        ]
        patients = StorePayloadMapper.map_many(StorePayloadMapper.map_patient, rows)
        self.assertEqual([p.id for p in patients], ["p1", "p3"])
