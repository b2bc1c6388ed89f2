from frontend.sections.skills import CATEGORIES, SkillsSection, category_options, rating
from frontend.utils.api_client import NetworkFailure, ServerFailure

SKILLS = [
    {"id": "s1", "name": "React", "icon_url": "u", "category": "frontend", "proficiency": 5},
    {"id": "s2", "name": "Mongo", "icon_url": "u", "category": "database", "proficiency": 3},
    {"id": "s3", "name": "Weird", "icon_url": "u", "category": "cooking", "proficiency": 2},
]


def _mounted(api, gate):
    section = SkillsSection(api, gate)
    section.mount()
    return section


def test_mount_loads_items(collection_api, anon_gate):
    section = _mounted(collection_api(SKILLS), anon_gate)
    assert [s["id"] for s in section.items] == ["s1", "s2", "s3"]
    assert section.loaded and not section.loading and section.error is None


def test_load_failure_is_empty_list_with_error(collection_api, anon_gate):
    api = collection_api(SKILLS)
    api.fail_with = NetworkFailure("Network error: refused")
    section = _mounted(api, anon_gate)
    assert section.items == []
    assert "Failed to fetch skills" in section.error


def test_grouped_in_fixed_order_skipping_empty(collection_api, anon_gate):
    section = _mounted(collection_api(SKILLS), anon_gate)
    groups = [(cat, [s["id"] for s in items]) for cat, items in section.grouped()]
    assert groups == [("frontend", ["s1"]), ("database", ["s2"]), ("other", ["s3"])]


def test_rating():
    assert rating({"proficiency": 4}) == "★★★★☆"
    assert rating({"proficiency": 9}) == "★★★★★"
    assert rating({}) == "☆☆☆☆☆"


def test_create_appends_server_item(collection_api, admin_gate):
    api = collection_api(SKILLS, prefix="new")
    section = _mounted(api, admin_gate)
    buf = section.open_create()
    buf.set("name", "Go")
    buf.set("icon_url", "https://cdn/go.svg")
    buf.set("category", "backend")
    buf.set("proficiency", 4)
    item, err = section.save()
    assert err is None
    assert item["id"] == "new1"
    assert section.items[-1]["id"] == "new1"
    assert section.buffer is None


def test_create_missing_required_fields_makes_no_request(collection_api, admin_gate):
    api = collection_api()
    section = _mounted(api, admin_gate)
    section.open_create()
    item, err = section.save()
    assert item is None
    assert "name" in err and "icon_url" in err
    assert "create" not in api.calls
    assert section.buffer is not None


def test_anonymous_cannot_open_forms(collection_api, anon_gate):
    section = _mounted(collection_api(SKILLS), anon_gate)
    assert section.open_create() is None
    assert section.open_edit("s1") is None
    section.request_delete("s1")
    assert section.pending_delete is None


def test_edit_does_not_touch_list_until_saved(collection_api, admin_gate):
    section = _mounted(collection_api(SKILLS), admin_gate)
    buf = section.open_edit("s2")
    buf.set("proficiency", 5)
    assert section.item("s2")["proficiency"] == 3
    section.save()
    assert section.item("s2")["proficiency"] == 5
    assert [s["id"] for s in section.items] == ["s1", "s2", "s3"]


def test_failed_update_keeps_buffer_and_list(collection_api, admin_gate):
    api = collection_api(SKILLS)
    section = _mounted(api, admin_gate)
    buf = section.open_edit("s1")
    buf.set("name", "Vue")
    api.fail_with = ServerFailure("Internal server error", 500)
    item, err = section.save()
    assert item is None
    assert "Failed to update skill" in err
    assert section.item("s1")["name"] == "React"
    assert section.buffer is buf
    assert section.error == err


def test_invalid_server_response_is_rejected(collection_api, admin_gate):
    api = collection_api(SKILLS)
    api.create = lambda data: {"name": "no id"}
    section = _mounted(api, admin_gate)
    buf = section.open_create()
    buf.set("name", "Go")
    buf.set("icon_url", "u")
    item, err = section.save()
    assert item is None and err
    assert len(section.items) == 3


def test_concurrent_mutation_on_same_item_is_refused(collection_api, admin_gate):
    api = collection_api(SKILLS)
    section = _mounted(api, admin_gate)
    results = []

    def reenter(op):
        if op == "update" and not results:
            section.request_delete("s1")
            results.append(section.confirm_delete())

    api.on_call = reenter
    section.open_edit("s1")
    section.save()
    ok, err = results[0]
    assert not ok and "still in progress" in err
    assert section.item("s1") is not None


def test_response_after_unmount_is_discarded(collection_api, admin_gate):
    api = collection_api(SKILLS)
    section = _mounted(api, admin_gate)
    api.on_call = lambda op: section.unmount() if op == "create" else None
    buf = section.open_create()
    buf.set("name", "Go")
    buf.set("icon_url", "u")
    section.save()
    assert len(section.items) == 3


def test_logout_closes_open_forms(collection_api, admin_gate):
    section = _mounted(collection_api(SKILLS), admin_gate)
    section.open_edit("s1")
    admin_gate.logout()
    assert section.buffer is None


def test_failed_reload_allows_retry(collection_api, anon_gate):
    api = collection_api(SKILLS)
    section = _mounted(api, anon_gate)
    assert section.loaded
    api.fail_with = NetworkFailure("Network error: refused")
    section.refresh()
    assert section.items == []
    assert not section.loaded

    api.fail_with = None
    section.refresh()
    assert section.loaded and len(section.items) == 3


def test_category_options_keep_stored_value():
    assert category_options("backend") == CATEGORIES
    assert category_options("cooking") == CATEGORIES + ["cooking"]


def test_editing_keeps_unknown_category(collection_api, admin_gate):
    api = collection_api(SKILLS)
    section = _mounted(api, admin_gate)
    buf = section.open_edit("s3")
    assert buf.get("category") in category_options(buf.get("category"))
    buf.set("proficiency", 4)
    item, err = section.save()
    assert err is None
    assert item["category"] == "cooking"
