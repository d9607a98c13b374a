"""Reducers puros do snapshot da clínica."""
from decimal import Decimal
from unittest import TestCase

from clinic_core.core.domain.entities.category_registry_entity import FALLBACK_CATEGORY
from clinic_core.core.domain.entities.clinic_state_entity import ClinicState
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.services import state_reducers as sr
from tests.helpers.builders import appointment, entry, patient


class StateReducerTests(TestCase):
    def setUp(self) -> None:
        self.state = sr.load_snapshot(
            ClinicState(cash_balance=Decimal("15000")),
            patients=[patient("p1")],
            appointments=[appointment("p1", id="a1")],
            financial_entries=[entry("expense", "Aluguel", 3500, id="e1"), entry("income", "Consultas", 280, id="e2")],
        )

    def test_reducers_never_mutate_input(self) -> None:
        updated = sr.set_cash_balance(self.state, Decimal("100"))
        self.assertEqual(self.state.cash_balance, Decimal("15000"))
        self.assertEqual(updated.cash_balance, Decimal("100"))
        self.assertIsNot(updated, self.state)

    def test_load_snapshot_keeps_collections_not_provided(self) -> None:
        reloaded = sr.load_snapshot(self.state, patients=[patient("p2")])
        self.assertEqual([p.id for p in reloaded.patients], ["p2"])
        self.assertEqual(reloaded.appointments, self.state.appointments)

    def test_remove_category_rewrites_entries_in_place(self) -> None:
        state, update = sr.remove_category(self.state, "expense", "Aluguel")
        self.assertTrue(update.changed)
        self.assertNotIn("Aluguel", state.categories.expense)
        self.assertEqual([e.category for e in state.financial_entries], [FALLBACK_CATEGORY, "Consultas"])
        self.assertEqual(self.state.financial_entries[0].category, "Aluguel")

    def test_rejected_update_returns_same_state(self) -> None:
        state, update = sr.add_category(self.state, "income", "CONSULTAS")
        self.assertFalse(update.changed)
        self.assertIs(state, self.state)

    def test_rename_category(self) -> None:
        state, _ = sr.rename_category(self.state, "income", "Consultas", "Atendimentos")
        self.assertEqual(state.financial_entries[1].category, "Atendimentos")

    def test_entity_from_dict_ignores_unknown_keys(self) -> None:
        p = PatientEntity.from_dict({"id": "p5", "name": "Ana", "address": {"city": "Bauru"}})
        self.assertEqual(p.to_dict()["name"], "Ana")
        self.assertEqual(p.evolve(phone="1199").phone, "1199")
