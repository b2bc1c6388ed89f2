from frontend.sections.contact import ContactSection
from frontend.utils.api_client import NetworkFailure

INBOX = [
    {"id": "m1", "name": "Ada", "email": "ada@lovelace.io", "message": "hi", "status": "unread"},
    {"id": "m2", "name": "Bob", "email": "bob@example.org", "message": "yo", "status": "read"},
]


def _mounted(api, gate):
    section = ContactSection(api, gate)
    section.mount()
    return section


def _fill(section):
    section.form = {"name": "Ada", "email": "ada@lovelace.io", "message": " Hello "}


def test_anonymous_never_loads_inbox(collection_api, anon_gate):
    api = collection_api(INBOX)
    section = _mounted(api, anon_gate)
    assert section.items == []
    assert "get_all" not in api.calls


def test_admin_loads_inbox_and_counts_unread(collection_api, admin_gate):
    section = _mounted(collection_api(INBOX), admin_gate)
    assert len(section.items) == 2
    assert section.unread_count() == 1


def test_send_resets_form_and_reports_success(collection_api, anon_gate):
    api = collection_api()
    section = _mounted(api, anon_gate)
    _fill(section)
    item, err = section.send()
    assert err is None
    assert api.items[0]["message"] == "Hello"
    assert section.success == "Message sent successfully!"
    assert section.form == {"name": "", "email": "", "message": ""}
    assert section.items == []


def test_send_failure_keeps_form(collection_api, anon_gate):
    api = collection_api()
    api.fail_with = NetworkFailure("Network error: refused")
    section = _mounted(api, anon_gate)
    _fill(section)
    item, err = section.send()
    assert item is None and err
    assert section.error == "Failed to send message. Please try again."
    assert section.form["name"] == "Ada"
    assert section.success is None


def test_send_requires_all_fields(collection_api, anon_gate):
    api = collection_api()
    section = _mounted(api, anon_gate)
    section.form = {"name": "Ada", "email": "", "message": "x"}
    item, err = section.send()
    assert item is None and "email" in err
    assert "create" not in api.calls


def test_admin_sees_own_sent_message_first(collection_api, admin_gate):
    section = _mounted(collection_api(INBOX, prefix="n"), admin_gate)
    _fill(section)
    section.send()
    assert section.items[0]["id"] == "n1"


def test_set_status(collection_api, admin_gate):
    section = _mounted(collection_api(INBOX), admin_gate)
    item, err = section.set_status("m1", "read")
    assert err is None
    assert section.item("m1")["status"] == "read"
    assert section.unread_count() == 0

    item, err = section.set_status("m1", "archived")
    assert item is None and err


def test_logout_clears_inbox(collection_api, admin_gate):
    section = _mounted(collection_api(INBOX), admin_gate)
    admin_gate.logout()
    assert section.items == []
