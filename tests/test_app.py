from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import faculty.data


APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app_for(monkeypatch, make_loader):
    """AppTest for app.py whose loader answers from the in-memory sheet."""

    def _app(calls=None, **kwargs):
        monkeypatch.setattr(faculty.data, "FacultyLoader", lambda config: make_loader(calls=calls, **kwargs))
        return AppTest.from_file(APP_PATH, default_timeout=10)

    return _app


def _profile_buttons(at):
    return [b for b in at.button if b.label == "View profile"]


def test_index_lists_every_member(app_for):
    at = app_for()
    at.run()
    assert not at.exception
    assert at.caption[0].value == "2 faculty"
    assert len(_profile_buttons(at)) == 2
    assert at.selectbox[0].options == ["All positions", "Lecturer", "Professor"]


def test_index_filters_on_search_and_position(app_for):
    at = app_for()
    at.run()
    at.text_input[0].input("robotics").run()
    assert at.caption[0].value == "1 faculty"
    assert [b.key for b in _profile_buttons(at)] == ["open-0-bo-chen"]

    at.text_input[0].input("").run()
    at.selectbox[0].select("Lecturer").run()
    assert at.caption[0].value == "1 faculty"
    assert [b.key for b in _profile_buttons(at)] == ["open-0-ann-smith"]


def test_fetch_failure_shows_only_the_error(app_for):
    at = app_for(body="boom", status_code=500)
    at.run()
    assert not at.exception
    assert [e.value for e in at.error] == ["Error: CSV fetch failed: 500"]
    assert len(at.button) == 0
    assert len(at.caption) == 0


def test_unknown_id_shows_not_found_with_back(app_for):
    at = app_for()
    at.query_params["id"] = "nobody"
    at.run()
    assert not at.exception
    assert at.info[0].value == "Faculty member not found."
    assert [b.label for b in at.button] == ["Back"]
    assert len(at.error) == 0


def test_profile_view_escapes_sheet_markdown(app_for):
    at = app_for()
    at.query_params["id"] = "bo-chen"
    at.run()
    assert not at.exception
    assert at.subheader[0].value == "Bo Chen"
    markdown = [m.value for m in at.markdown]
    assert "**PhD** Univ D, PhD \\(1996\\)" in markdown
    assert "- ME200\n- ME300" in markdown


def test_navigation_reloads_records(app_for):
    calls = []
    at = app_for(calls=calls)
    at.run()
    assert len(calls) == 1

    at.text_input[0].input("ann").run()
    assert len(calls) == 1

    at.button(key="open-0-ann-smith").click().run()
    assert at.subheader[0].value == "Ann Smith"
    assert len(calls) == 2

    next(b for b in at.button if b.label == "← Back to directory").click().run()
    assert at.caption[0].value.endswith(" faculty")
    assert len(calls) == 3


def test_refresh_refetches(app_for):
    calls = []
    at = app_for(calls=calls)
    at.run()
    next(b for b in at.button if b.label == "Refresh").click().run()
    assert len(calls) == 2
