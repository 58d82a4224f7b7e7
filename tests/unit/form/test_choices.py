from __future__ import annotations

from schemaform.core.form import ChoiceItem, FormSchema
from schemaform.core.form import choices


def _values(items):
    return [item.value for item in items]


def test_independent_list_is_returned_verbatim(region_schema):
    schema = FormSchema.from_dict(region_schema)
    items = choices.resolve_items("region", schema, {})
    assert _values(items) == ["europe", "asia"]


def test_cascading_list_follows_answered_dependency(region_schema):
    schema = FormSchema.from_dict(region_schema)
    items = choices.resolve_items("city", schema, {"region": "asia"})
    assert _values(items) == ["tokyo", "seoul"]


def test_cascading_list_falls_back_to_first_dependency_item(region_schema):
    schema = FormSchema.from_dict(region_schema)
    items = choices.resolve_items("city", schema, {})
    assert _values(items) == ["paris"]


def test_implicit_dependency_value_is_first_item_value(region_schema):
    schema = FormSchema.from_dict(region_schema)
    assert choices.implicit_dependency_value(schema.properties["region"]) == "europe"
    assert choices.implicit_dependency_value(schema.properties["name"]) is None


def test_depth_zero_dependency_never_resolves(region_schema):
    region_schema["properties"]["city"]["depLevel"] = 0
    schema = FormSchema.from_dict(region_schema)
    assert choices.resolve_items("city", schema, {"region": "asia"}) == []
    assert choices.resolve_items("city", schema, {}) == []


def test_unmatched_dependency_value_yields_empty_list(region_schema):
    schema = FormSchema.from_dict(region_schema)
    assert choices.resolve_items("city", schema, {"region": "antarctica"}) == []


def test_missing_sub_list_ref_yields_empty_list(region_schema):
    region_schema["properties"]["city"]["ref"] = "districtRef"
    schema = FormSchema.from_dict(region_schema)
    assert choices.resolve_items("city", schema, {"region": "asia"}) == []


def test_unknown_dependency_key_yields_empty_list(region_schema):
    region_schema["properties"]["city"]["dependence"] = "continent"
    schema = FormSchema.from_dict(region_schema)
    assert choices.resolve_items("city", schema, {"region": "asia"}) == []


def test_forward_reference_yields_empty_list():
    schema = FormSchema.from_dict(
        {
            "properties": {
                "city": {"type": "list", "dependence": "region", "depLevel": 1, "ref": "cityRef"},
                "region": {
                    "type": "list",
                    "list": [{"value": "asia", "subList": {"cityRef": [{"value": "tokyo"}]}}],
                },
            }
        }
    )
    assert choices.resolve_items("city", schema, {}) == []


def test_display_entry_concatenates_description_and_url():
    item = ChoiceItem.from_raw(
        {"value": "vue", "name": "Vue", "desc": "progressive framework", "url": "https://vuejs.org"}
    )
    entry = choices.display_entry(item)
    assert entry.value == "vue"
    assert entry.short == "vue"
    assert entry.name == "Vue\n\n    progressive framework\n\n    - https://vuejs.org"


def test_display_entry_lists_every_image_with_caption():
    item = ChoiceItem.from_raw(
        {
            "value": "mobile",
            "name": "Mobile",
            "imgs": [{"src": "a.png", "alt": "home"}, {"src": "b.png"}],
            "img": "ignored.png",
        }
    )
    entry = choices.display_entry(item)
    assert entry.name == "Mobile\n\n    - a.png - home\n\n    - b.png"


def test_display_entry_uses_single_image_and_skips_missing_description():
    item = ChoiceItem.from_raw({"value": "pc", "name": "PC", "img": "pc.png"})
    assert choices.display_entry(item).name == "PC\n\n    - pc.png"


def test_url_takes_precedence_over_images():
    item = ChoiceItem.from_raw(
        {"value": "x", "name": "X", "url": "https://x.dev", "imgs": [{"src": "x.png"}]}
    )
    assert choices.display_entry(item).name == "X\n\n    - https://x.dev"


def test_display_entry_stringifies_numeric_description_and_url():
    item = ChoiceItem.from_raw({"value": "v1", "name": "Version 1", "desc": 1.0, "url": 42})
    assert item.desc == "1.0"
    assert item.url == "42"
    assert choices.display_entry(item).name == "Version 1\n\n    1.0\n\n    - 42"


def test_display_entry_stringifies_numeric_image():
    item = ChoiceItem.from_raw({"value": "v2", "name": "Version 2", "img": 2})
    assert choices.display_entry(item).name == "Version 2\n\n    - 2"
