from frontend.sections.about import AboutSection
from frontend.sections.dashboard import DashboardSection
from frontend.utils.api_client import AuthFailure, ServerFailure


def test_about_mount_loads_record(about_api, anon_gate):
    section = AboutSection(about_api, anon_gate)
    section.mount()
    assert section.about["bio"] == "Hello"
    assert section.buffer.get("interests") == "Go"


def test_about_fetch_error(about_api, anon_gate):
    about_api.fail_with = ServerFailure("Internal server error", 500)
    section = AboutSection(about_api, anon_gate)
    section.mount()
    assert section.error.startswith("Failed to fetch about information")


def test_about_edit_requires_admin(about_api, anon_gate):
    section = AboutSection(about_api, anon_gate)
    section.mount()
    assert section.start_edit() is None
    _, err = section.save()
    assert err
    assert "update" not in about_api.calls


def test_about_cancel_restores_snapshot(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    buf = section.start_edit()
    buf.set("bio", "Changed")
    section.cancel_edit()
    assert section.buffer.get("bio") == "Hello"
    assert not section.editing
    assert section.about["bio"] == "Hello"


def test_about_save(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    buf = section.start_edit()
    buf.set("bio", "Backend dev")
    buf.set("interests", "Go, Chess")
    about, err = section.save()
    assert err is None
    assert about_api.about["interests"] == ["Go", "Chess"]
    assert section.about["bio"] == "Backend dev"
    assert not section.editing


def test_about_failed_save_keeps_editing(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    buf = section.start_edit()
    buf.set("bio", "Changed")
    about_api.fail_with = ServerFailure("Internal server error", 500)
    _, err = section.save()
    assert err
    assert section.editing
    assert section.buffer.get("bio") == "Changed"
    assert section.about["bio"] == "Hello"


def test_dashboard_stats(collection_api, admin_gate):
    messages = collection_api([{"id": "m1", "status": "unread"}, {"id": "m2", "status": "read"}])
    section = DashboardSection(collection_api([{"id": "p1"}]), collection_api(), messages, admin_gate)
    section.mount()
    assert section.stats == {"projects": 1, "skills": 0, "messages": 2, "unread_messages": 1}


def test_dashboard_requires_admin(collection_api, anon_gate):
    projects = collection_api([{"id": "p1"}])
    section = DashboardSection(projects, collection_api(), collection_api(), anon_gate)
    section.mount()
    assert section.error
    assert projects.calls == []


def test_about_form_closes_when_admin_logs_out(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    buf = section.start_edit()
    buf.set("bio", "Half typed")
    admin_gate.logout()
    assert not section.editing
    assert section.buffer.get("bio") == "Hello"

    section.unmount()
    section.mount()
    assert not section.editing


def test_about_form_closes_on_expired_session(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    section.start_edit()
    admin_gate.handle_auth_failure(AuthFailure("Token expired", 401))
    assert not section.editing


def test_about_stops_listening_after_unmount(about_api, admin_gate):
    section = AboutSection(about_api, admin_gate)
    section.mount()
    section.unmount()
    assert admin_gate._subscribers == []
