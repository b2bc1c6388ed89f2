from frontend.sections.projects import ProjectsSection
from frontend.utils.api_client import ServerFailure

PROJECTS = [
    {"id": "p1", "title": "A", "featured": True, "tech_stack": ["Go"]},
    {"id": "p2", "title": "B", "featured": False, "tech_stack": ["Go"]},
    {"id": "p3", "title": "C", "featured": True, "tech_stack": ["Go"]},
]


def _mounted(api, gate):
    section = ProjectsSection(api, gate)
    section.mount()
    return section


def test_partition_keeps_order(collection_api, anon_gate):
    featured, regular = _mounted(collection_api(PROJECTS), anon_gate).partition()
    assert [p["id"] for p in featured] == ["p1", "p3"]
    assert [p["id"] for p in regular] == ["p2"]


def test_create_prepends_and_sends_tech_list(collection_api, admin_gate):
    api = collection_api(PROJECTS, prefix="n")
    section = _mounted(api, admin_gate)
    buf = section.open_create()
    buf.set("title", "New")
    buf.set("description", "desc")
    buf.set("tech_stack", "React, Node.js , ,MongoDB")
    buf.set("github", "https://github.com/x/y")
    item, err = section.save()
    assert err is None
    assert item["tech_stack"] == ["React", "Node.js", "MongoDB"]
    assert section.items[0]["id"] == "n1"


def test_delete_is_two_step(collection_api, admin_gate):
    api = collection_api(PROJECTS)
    section = _mounted(api, admin_gate)
    section.request_delete("p2")
    assert section.pending_delete == "p2"
    assert "delete" not in api.calls

    section.cancel_delete()
    assert section.pending_delete is None
    assert len(section.items) == 3

    section.request_delete("p2")
    ok, err = section.confirm_delete()
    assert ok and err is None
    assert [p["id"] for p in section.items] == ["p1", "p3"]


def test_failed_delete_keeps_item(collection_api, admin_gate):
    api = collection_api(PROJECTS)
    section = _mounted(api, admin_gate)
    api.fail_with = ServerFailure("Internal server error", 500)
    section.request_delete("p1")
    ok, err = section.confirm_delete()
    assert not ok
    assert err == "Failed to delete project: Internal server error"
    assert section.item("p1") is not None
    assert section.error == err


def test_unknown_item_cannot_be_edited(collection_api, admin_gate):
    section = _mounted(collection_api(PROJECTS), admin_gate)
    assert section.open_edit("nope") is None
    assert section.error
