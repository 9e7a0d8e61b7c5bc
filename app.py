import asyncio
import logging
import re
from html import escape
from pathlib import Path
from typing import List

import streamlit as st

from faculty.config import get_config
from faculty.data import FacultyLoader, FacultyRecord, records_to_frame
from faculty.filters import ALL_POSITIONS_LABEL, count_label, filter_records, position_options
from faculty.profile import degree_history, find_record, profile_links
from faculty.text import split_courses

logger = logging.getLogger(__name__)

GRID_COLUMNS = 3
_MARKDOWN_CHARS = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$])")


# ---------- UI / layout helpers ----------
def md(text: str) -> str:
    """Escape sheet values so they render literally inside st.markdown."""
    return _MARKDOWN_CHARS.sub(r"\\\1", text)


def inject_base_styles():
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .fac-name {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .fac-position {color: #6b7280;font-size: 0.9rem;margin-bottom: 4px;}
        </style>
        """,
        unsafe_allow_html=True,
    )


def load_records() -> List[FacultyRecord]:
    # kept for the current view only; navigation and Refresh drop it
    if "records" not in st.session_state:
        loader = FacultyLoader(get_config())
        st.session_state["records"] = asyncio.run(loader.load())
    return st.session_state["records"]


def _refresh():
    st.session_state.pop("records", None)


def _open_profile(faculty_id: str):
    _refresh()
    st.query_params["id"] = faculty_id


def _back_to_directory():
    _refresh()
    st.query_params.clear()


def show_photo(record: FacultyRecord, width: int):
    # missing photos are skipped rather than replaced by a placeholder
    if Path(record.photo_path).is_file():
        st.image(record.photo_path, width=width)


def render_card(record: FacultyRecord, key: str):
    with st.container(border=True):
        show_photo(record, width=96)
        st.markdown(
            f"<div class='fac-name'>{escape(record.name)}</div><div class='fac-position'>{escape(record.position)}</div>",
            unsafe_allow_html=True,
        )
        st.button("View profile", key=key, on_click=_open_profile, args=(record.id,))


def render_index_page(records: List[FacultyRecord]):
    c1, c2, c3 = st.columns([6, 3, 1])
    with c1:
        query = st.text_input("Search", "", placeholder="Name, position, research, affiliations")
    with c2:
        position = st.selectbox("Position", [ALL_POSITIONS_LABEL] + position_options(records))
    with c3:
        st.button("Refresh", on_click=_refresh)

    if position == ALL_POSITIONS_LABEL:
        position = ""
    filtered = filter_records(records, query, position)

    left, right = st.columns([8, 2])
    left.caption(count_label(len(filtered)))
    if filtered:
        right.download_button(
            "Export CSV",
            data=records_to_frame(filtered).to_csv(index=False).encode("utf-8"),
            file_name="faculty.csv",
            mime="text/csv",
        )

    cols = st.columns(GRID_COLUMNS)
    for i, record in enumerate(filtered):
        with cols[i % GRID_COLUMNS]:
            render_card(record, key=f"open-{i}-{record.id}")


def render_profile_page(records: List[FacultyRecord], faculty_id: str):
    record = find_record(records, faculty_id)
    if record is None:
        st.info("Faculty member not found.")
        st.button("Back", on_click=_back_to_directory)
        return

    c1, c2 = st.columns([2, 6])
    with c1:
        show_photo(record, width=160)
    with c2:
        st.subheader(md(record.name))
        if record.position:
            st.caption(md(record.position))
        for label, url in profile_links(record):
            st.link_button(label, url)
        if record["Other Affiliations"]:
            st.markdown(f"**Other Affiliations:** {md(record['Other Affiliations'])}")

    st.markdown("---")
    for degree, text in degree_history(record):
        st.markdown(f"**{degree}** {md(text)}")

    if record["Areas of Research"]:
        st.markdown("**Areas of Research**")
        st.markdown(md(record["Areas of Research"]))

    courses = split_courses(record["Courses"])
    if courses:
        st.markdown("**Courses**")
        st.markdown("\n".join(f"- {md(c)}" for c in courses))

    if record["Awards"]:
        st.markdown("**Awards**")
        st.markdown(md(record["Awards"]))

    st.button("← Back to directory", on_click=_back_to_directory)


def main():
    st.set_page_config(page_title="Faculty Directory", layout="wide")
    inject_base_styles()
    st.markdown(
        "<div class='app-top-bar'><div class='page-title'>Faculty Directory</div></div>",
        unsafe_allow_html=True,
    )

    faculty_id = st.query_params.get("id")
    view = st.empty()
    try:
        records = load_records()
        with view.container():
            if faculty_id:
                render_profile_page(records, faculty_id)
            else:
                render_index_page(records)
    except Exception as exc:
        logger.exception("faculty directory failed")
        view.error(f"Error: {exc}")


main()
