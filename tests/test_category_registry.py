"""Registro de categorias: inclusão, renomeação e exclusão com fallback protegido."""
from unittest import TestCase

from clinic_core.core.domain.entities.category_registry_entity import (
    FALLBACK_CATEGORY,
    CategoryRegistry,
)
from clinic_core.core.domain.services import category_registry as cr
from clinic_core.core.domain.services.category_registry import RejectionReason
from tests.helpers.builders import entry


class CategoryRegistryEntityTests(TestCase):
    def test_normalization_dedupes_and_keeps_fallback(self) -> None:
        registry = CategoryRegistry(income=(" Consultas ", "consultas", "", "Exames"), expense=())
        self.assertEqual(registry.income, ("Consultas", "Exames", FALLBACK_CATEGORY))
        self.assertEqual(registry.expense, (FALLBACK_CATEGORY,))

    def test_find_is_case_insensitive(self) -> None:
        self.assertEqual(CategoryRegistry().find("income", "  CONSULTAS"), "Consultas")


class AddCategoryTests(TestCase):
    def test_case_insensitive_collision_is_rejected(self) -> None:
        registry = CategoryRegistry()
        update = cr.add(registry, "income", "consultas")
        self.assertFalse(update.changed)
        self.assertEqual(update.reason, RejectionReason.DUPLICATE)
        self.assertIs(update.registry, registry)

    def test_blank_name_is_rejected(self) -> None:
        update = cr.add(CategoryRegistry(), "expense", "   ")
        self.assertEqual(update.reason, RejectionReason.EMPTY_NAME)

    def test_adds_trimmed_name_to_requested_type_only(self) -> None:
        registry = CategoryRegistry()
        update = cr.add(registry, "expense", "  Limpeza ")
        self.assertTrue(update.changed)
        self.assertIn("Limpeza", update.registry.expense)
        self.assertNotIn("Limpeza", update.registry.income)
        self.assertEqual(update.registry.income, registry.income)


class RenameCategoryTests(TestCase):
    def setUp(self) -> None:
        self.registry = CategoryRegistry()
        self.entries = [
            entry("income", "Consultas", 280, id="e1"),
            entry("expense", "Consultas", 10, id="e2"),
            entry("income", "Exames", 90, id="e3"),
        ]

    def test_noop_rename_leaves_everything_unchanged(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", "Consultas", "Consultas")
        self.assertFalse(update.changed)
        self.assertEqual(update.reason, RejectionReason.UNCHANGED)
        self.assertIs(update.registry, self.registry)
        self.assertEqual(update.rewritten_entries, ())

    def test_fallback_cannot_be_renamed(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", FALLBACK_CATEGORY, "Diversos")
        self.assertEqual(update.reason, RejectionReason.PROTECTED_FALLBACK)

    def test_rename_rewrites_entries_of_same_type(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", "Consultas", "Atendimentos")
        self.assertTrue(update.changed)
        self.assertEqual(update.registry.income[0], "Atendimentos")
        self.assertEqual([e.id for e in update.rewritten_entries], ["e1"])
        self.assertEqual(update.rewritten_entries[0].category, "Atendimentos")

        merged = cr.apply_rewrites(self.entries, update.rewritten_entries)
        self.assertEqual([e.category for e in merged], ["Atendimentos", "Consultas", "Exames"])

    def test_rename_onto_existing_name_is_rejected(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", "Consultas", "exames")
        self.assertEqual(update.reason, RejectionReason.DUPLICATE)

    def test_case_only_rename_is_allowed(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", "Consultas", "CONSULTAS")
        self.assertTrue(update.changed)
        self.assertIn("CONSULTAS", update.registry.income)

    def test_legacy_name_only_on_entries_is_rewritten(self) -> None:
        registry = CategoryRegistry()
        entries = [entry("income", "Consulta Antiga", 100, id="e9"), entry("expense", "Consulta Antiga", 5, id="e8")]
        update = cr.rename(registry, entries, "income", "Consulta Antiga", "Consultas Legado")
        self.assertTrue(update.changed)
        self.assertEqual([(e.id, e.category) for e in update.rewritten_entries], [("e9", "Consultas Legado")])
        self.assertIs(update.registry, registry)

    def test_name_absent_everywhere_is_noop(self) -> None:
        update = cr.rename(self.registry, self.entries, "income", "Inexistente", "Nova")
        self.assertFalse(update.changed)
        self.assertEqual(update.reason, RejectionReason.NOT_FOUND)


class RemoveCategoryTests(TestCase):
    def test_entries_move_to_fallback(self) -> None:
        entries = [entry("expense", "Aluguel", 3500, id="e1"), entry("income", "Aluguel", 1, id="e2")]
        update = cr.remove(CategoryRegistry(), entries, "expense", "Aluguel")
        self.assertTrue(update.changed)
        self.assertNotIn("Aluguel", update.registry.expense)
        self.assertEqual([(e.id, e.category) for e in update.rewritten_entries], [("e1", FALLBACK_CATEGORY)])

    def test_fallback_survives_deleting_second_to_last(self) -> None:
        registry = CategoryRegistry(income=("Consultas", FALLBACK_CATEGORY))
        update = cr.remove(registry, [], "income", "Consultas")
        self.assertEqual(update.registry.income, (FALLBACK_CATEGORY,))

    def test_fallback_cannot_be_removed(self) -> None:
        registry = CategoryRegistry()
        update = cr.remove(registry, [], "income", FALLBACK_CATEGORY)
        self.assertFalse(update.changed)
        self.assertEqual(update.reason, RejectionReason.PROTECTED_FALLBACK)
        self.assertIn(FALLBACK_CATEGORY, update.registry.income)

    def test_legacy_name_only_on_entries_moves_to_fallback(self) -> None:
        registry = CategoryRegistry()
        update = cr.remove(registry, [entry("expense", "Copa", 40, id="e7")], "expense", "Copa")
        self.assertTrue(update.changed)
        self.assertEqual([e.category for e in update.rewritten_entries], [FALLBACK_CATEGORY])
        self.assertEqual(update.registry, registry)

    def test_name_absent_everywhere_is_noop(self) -> None:
        registry = CategoryRegistry()
        update = cr.remove(registry, [], "expense", "Inexistente")
        self.assertEqual(update.reason, RejectionReason.NOT_FOUND)
        self.assertIs(update.registry, registry)
