"""DefinitionStore unit tests.

Seeding, ordering, whole-catalog replacement and validation.
"""

import pytest

from app.exceptions import NotFoundError, PersistenceError, ValidationError
from app.models import DefinitionKind, FieldDefinition, TechnicalComponent
from app.services.definition_store import DefinitionStore
from app.services.document_store import FIELD_DEFINITIONS_KEY, TECHNICAL_COMPONENTS_KEY


class TestSeeding:
    @pytest.mark.asyncio
    async def test_first_read_seeds_defaults(self, definition_store, temp_store):
        fields = await definition_store.list_fields()
        scope = await definition_store.list_scope()
        components = await definition_store.list_components()

        assert len(fields) == 6
        assert len(scope) == 12
        assert len(components) == 17
        assert len(await temp_store.load(FIELD_DEFINITIONS_KEY)) == 6

    @pytest.mark.asyncio
    async def test_seed_disabled_returns_empty(self, temp_store, id_generator):
        store = DefinitionStore(temp_store, id_generator, seed_defaults=False)
        assert await store.list_components() == []
        assert await temp_store.load(TECHNICAL_COMPONENTS_KEY) is None

    @pytest.mark.asyncio
    async def test_saved_empty_catalog_is_not_reseeded(self, definition_store):
        await definition_store.upsert_all(DefinitionKind.FIELDS, [])
        assert await definition_store.list_fields() == []

    @pytest.mark.asyncio
    async def test_seed_copies_are_independent(self, temp_store, id_generator):
        from app.services.default_definitions import DEFAULT_FIELD_DEFINITIONS

        store = DefinitionStore(temp_store, id_generator)
        fields = await store.list_fields()
        fields[0].label = "변경"
        assert DEFAULT_FIELD_DEFINITIONS[0].label == "문서명"


class TestListOrdering:
    @pytest.mark.asyncio
    async def test_fields_sorted_by_order(self, definition_store):
        await definition_store.upsert_all(DefinitionKind.FIELDS, [
            FieldDefinition(id="b", label="둘째", order=2),
            FieldDefinition(id="c", label="셋째", order=3),
            FieldDefinition(id="a", label="첫째", order=1),
        ])
        assert [f.id for f in await definition_store.list_fields()] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_components_keep_stored_order(self, definition_store):
        await definition_store.upsert_all(DefinitionKind.COMPONENTS, [
            {"id": "z", "name": "Zeta"},
            {"id": "a", "name": "Alpha"},
        ])
        assert [c.id for c in await definition_store.list_components()] == ["z", "a"]


class TestUpsertAll:
    @pytest.mark.asyncio
    async def test_assigns_missing_id_and_order(self, definition_store):
        saved = await definition_store.upsert_all(DefinitionKind.FIELDS, [
            {"id": "f1", "label": "문서명", "order": 1},
            {"id": "f2", "label": "요청 유형", "order": 2},
            {"label": "담당자"},
        ])

        new_field = saved[-1]
        assert new_field.id == "id-1"
        assert new_field.order == 3
        assert new_field.required is False

    @pytest.mark.asyncio
    async def test_replaces_whole_catalog(self, definition_store):
        await definition_store.list_scope()
        await definition_store.upsert_all(DefinitionKind.SCOPE, [
            {"id": "s1", "category": "분석", "item": "업무 분석"},
        ])
        scope = await definition_store.list_scope()
        assert [s.id for s in scope] == ["s1"]

    @pytest.mark.asyncio
    async def test_empty_label_rejected_and_nothing_saved(self, definition_store):
        before = await definition_store.list_fields()

        with pytest.raises(ValidationError) as exc_info:
            await definition_store.upsert_all(DefinitionKind.FIELDS, [
                {"id": "f1", "label": "문서명", "order": 1},
                {"id": "f2", "label": "  ", "order": 2},
            ])
        assert exc_info.value.field == "label"
        assert await definition_store.list_fields() == before

    @pytest.mark.asyncio
    async def test_scope_requires_category_and_item(self, definition_store):
        with pytest.raises(ValidationError):
            await definition_store.upsert_all(DefinitionKind.SCOPE, [{"id": "s1", "category": "분석"}])
        with pytest.raises(ValidationError):
            await definition_store.upsert_all(DefinitionKind.SCOPE, [{"id": "s1", "item": "업무 분석"}])

    @pytest.mark.asyncio
    async def test_component_requires_name(self, definition_store):
        with pytest.raises(ValidationError):
            await definition_store.upsert_all(DefinitionKind.COMPONENTS, [
                TechnicalComponent(id="c1", name=""),
            ])

    @pytest.mark.asyncio
    async def test_duplicate_ids_rejected(self, definition_store):
        with pytest.raises(ValidationError) as exc_info:
            await definition_store.upsert_all(DefinitionKind.COMPONENTS, [
                {"id": "c1", "name": "Form"},
                {"id": "c1", "name": "Grid"},
            ])
        assert exc_info.value.details["duplicates"] == ["c1"]

    @pytest.mark.asyncio
    async def test_malformed_item_rejected(self, definition_store):
        with pytest.raises(ValidationError):
            await definition_store.upsert_all(DefinitionKind.FIELDS, [
                {"id": "f1", "label": "문서명", "order": "first"},
            ])


class TestGetComponent:
    @pytest.mark.asyncio
    async def test_found(self, definition_store):
        component = await definition_store.get_component("c1")
        assert component.id == "c1"

    @pytest.mark.asyncio
    async def test_missing(self, definition_store):
        with pytest.raises(NotFoundError):
            await definition_store.get_component("nope")


class TestMalformedDocument:
    @pytest.mark.asyncio
    async def test_field_without_label(self, definition_store, temp_store):
        await temp_store.save(FIELD_DEFINITIONS_KEY, [{"id": "f1"}])

        with pytest.raises(PersistenceError) as exc_info:
            await definition_store.list_fields()
        assert exc_info.value.details["key"] == FIELD_DEFINITIONS_KEY

    @pytest.mark.asyncio
    async def test_catalog_is_not_a_list(self, definition_store, temp_store):
        await temp_store.save(TECHNICAL_COMPONENTS_KEY, {"c1": "Form"})

        with pytest.raises(PersistenceError):
            await definition_store.list_components()

        # 손상된 카탈로그는 기본값으로 덮어쓰지 않음
        assert await temp_store.load(TECHNICAL_COMPONENTS_KEY) == {"c1": "Form"}
