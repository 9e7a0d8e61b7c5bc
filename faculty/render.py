from __future__ import annotations

from html import escape
from typing import List, Optional, Sequence

from faculty.data import FacultyRecord
from faculty.filters import ALL_POSITIONS_LABEL, DirectoryFilters, apply_filters, count_label, search_blob
from faculty.profile import degree_history, profile_links
from faculty.text import split_courses


INDEX_HREF = "index.html"
PROFILE_HREF = "profile.html"

BASE_STYLES = """
body {font-family: system-ui, sans-serif;margin: 0;background: #f9fafb;color: #111827;}
.wrap {max-width: 1100px;margin: 0 auto;padding: 24px;}
.app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 16px;}
.app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;}
.controls {display: flex;gap: 8px;align-items: center;margin-bottom: 12px;}
.controls input {flex: 1;padding: 8px;}
.small {color: #6b7280;font-size: 0.9rem;}
.grid {display: grid;grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));gap: 12px;}
.card {display: flex;gap: 12px;align-items: center;border: 1px solid #e5e7eb;border-radius: 12px;
       padding: 12px;background: #ffffff;color: inherit;text-decoration: none;
       box-shadow: 0 1px 2px rgba(0,0,0,0.04);}
.card[hidden] {display: none;}
.avatar {width: 56px;height: 56px;border-radius: 50%;object-fit: cover;}
.name {font-weight: 600;}
.position {color: #6b7280;font-size: 0.9rem;}
.panel {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;}
.profile {display: flex;gap: 16px;}
.big {width: 140px;height: 140px;border-radius: 12px;object-fit: cover;}
.h2 {font-size: 1.3rem;font-weight: 700;}
.links a {margin-right: 10px;}
.sep {border: 0;border-top: 1px solid #e5e7eb;margin: 16px 0;}
.kv {display: grid;grid-template-columns: 120px 1fr;gap: 6px 12px;}
.k {font-weight: 600;}
.block {margin-top: 16px;}
.badge {display: inline-block;padding: 4px 10px;border: 1px solid #e5e7eb;border-radius: 14px;}
"""

_HIDE_ON_ERROR = "this.style.display='none'"


def render_page(title: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)}</title>
<style>{BASE_STYLES}</style>
</head>
<body>
<div class="wrap">
<div class="app-top-bar"><div class="page-title">Faculty Directory</div></div>
{body}
</div>
</body>
</html>
"""


def render_card(record: FacultyRecord, visible: bool = True) -> str:
    hidden = "" if visible else " hidden"
    return (
        f'<a class="card" href="{PROFILE_HREF}?id={escape(record.id)}" '
        f'data-position="{escape(record.position)}" data-search="{escape(search_blob(record))}"{hidden}>'
        f'<img class="avatar" src="{escape(record.photo_path)}" alt="{escape(record.name)}" '
        f'onerror="{_HIDE_ON_ERROR}">'
        f'<div><div class="name">{escape(record.name)}</div>'
        f'<div class="position">{escape(record.position)}</div></div>'
        "</a>"
    )


def render_grid(records: Sequence[FacultyRecord], filters: Optional[DirectoryFilters] = None) -> str:
    filters = filters or DirectoryFilters()
    shown = {id(r) for r in apply_filters(records, filters)}
    return "".join(render_card(r, visible=id(r) in shown) for r in records)


def render_position_select(positions: Sequence[str], selected: str) -> str:
    options = [f'<option value="">{ALL_POSITIONS_LABEL}</option>']
    for p in positions:
        sel = " selected" if p == selected else ""
        options.append(f'<option value="{escape(p)}"{sel}>{escape(p)}</option>')
    return '<select id="position" name="position">' + "".join(options) + "</select>"


# same predicate as filters.filter_records, run in the browser on every input/change
LIVE_FILTER_SCRIPT = """<script>
(function () {
  var q = document.getElementById("q");
  var pos = document.getElementById("position");
  var count = document.getElementById("count");
  var cards = document.querySelectorAll("#grid .card");
  function paint() {
    var needle = q.value.toLowerCase().trim();
    var wanted = pos.value;
    var n = 0;
    cards.forEach(function (card) {
      var ok = (!needle || card.dataset.search.indexOf(needle) !== -1) &&
               (!wanted || card.dataset.position === wanted);
      card.hidden = !ok;
      if (ok) n++;
    });
    count.textContent = n + " faculty";
  }
  q.addEventListener("input", paint);
  pos.addEventListener("change", paint);
})();
</script>"""


def render_index(records: Sequence[FacultyRecord], positions: Sequence[str], filters: DirectoryFilters) -> str:
    """Index body: filter form, result count and a card for every loaded record.

    Cards failing ``filters`` are rendered hidden so the inline script can
    re-filter on each keystroke without another request.
    """
    shown = apply_filters(records, filters)
    return (
        f'<form class="controls" method="get" action="{INDEX_HREF}" onsubmit="return false">'
        f'<input id="q" name="q" type="search" placeholder="Search name, research, affiliations" '
        f'value="{escape(filters.query)}" autocomplete="off">'
        f"{render_position_select(positions, filters.position)}"
        f'<label id="count" class="small">{count_label(len(shown))}</label>'
        "</form>"
        f'<div id="grid" class="grid">{render_grid(records, filters)}</div>'
        f"{LIVE_FILTER_SCRIPT}"
    )


def _block(label: str, inner: str) -> str:
    return f'<div class="block"><div class="k">{escape(label)}</div>{inner}</div>'


def render_profile(record: FacultyRecord) -> str:
    links = "".join(
        f'<a href="{escape(url)}" target="_blank" rel="noopener">{escape(label)}</a>'
        for label, url in profile_links(record)
    )
    parts: List[str] = [
        '<div class="panel"><div class="profile">',
        f'<img class="big" src="{escape(record.photo_path)}" alt="{escape(record.name)}" onerror="{_HIDE_ON_ERROR}">',
        f'<div><div class="h2">{escape(record.name)}</div>',
    ]
    if record.position:
        parts.append(f'<div class="small">{escape(record.position)}</div>')
    if links:
        parts.append(f'<div class="links">{links}</div>')
    if record["Other Affiliations"]:
        parts.append(
            f'<p class="small"><strong>Other Affiliations:</strong> {escape(record["Other Affiliations"])}</p>'
        )
    parts.append('</div></div><hr class="sep">')

    degrees = degree_history(record)
    if degrees:
        rows = "".join(f'<div class="k">{d}</div><div class="v">{escape(text)}</div>' for d, text in degrees)
        parts.append(f'<div class="kv">{rows}</div>')

    if record["Areas of Research"]:
        parts.append(_block("Areas of Research", f'<div class="v">{escape(record["Areas of Research"])}</div>'))

    courses = split_courses(record["Courses"])
    if courses:
        items = "".join(f"<li>{escape(c)}</li>" for c in courses)
        parts.append(_block("Courses", f"<ul>{items}</ul>"))

    if record["Awards"]:
        parts.append(_block("Awards", f'<div class="v">{escape(record["Awards"])}</div>'))

    parts.append(f'<div class="block"><a class="badge" href="{INDEX_HREF}">&larr; Back to directory</a></div>')
    parts.append("</div>")
    return f'<div id="profile">{"".join(parts)}</div>'


def render_not_found() -> str:
    return (
        '<div id="profile"><div class="panel">Faculty member not found. '
        f'<a href="{INDEX_HREF}">Back</a></div></div>'
    )


def render_error(exc: BaseException, container_id: Optional[str] = None) -> str:
    panel = f'<div class="panel"><strong>Error:</strong> {escape(str(exc))}</div>'
    if container_id:
        return f'<div id="{container_id}">{panel}</div>'
    return panel
