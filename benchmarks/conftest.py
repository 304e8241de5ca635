from __future__ import annotations

import sys
import sysconfig
from importlib import metadata as importlib_metadata

import pytest
from jinja2 import Environment as Jinja2Environment
from jinja2 import Template

from htmxkit.demo.store import Todo

LARGE_TODO_COUNT = 1000

# Same markup the htmxkit builders produce for a todo row, for a fair comparison.
TODO_ROW_JINJA2 = """\
{% for todo in todos %}<div class="todo-item"><span>{{ todo.id }}. {{ todo.text }}</span>\
<button hx-delete="/api/todos/{{ todo.id }}" hx-target="closest .todo-item" hx-swap="outerHTML" \
class="btn btn-danger" style="font-size: 12px; padding: 4px 8px">Delete</button></div>{% endfor %}"""


def _versions(*dists: str) -> dict[str, str]:
    versions = {}
    for dist in dists:
        try:
            versions[dist] = importlib_metadata.version(dist)
        except importlib_metadata.PackageNotFoundError:
            versions[dist] = "unknown"
    return versions


@pytest.fixture(scope="session")
def run_info() -> dict[str, object]:
    """Facts that change how the numbers read (machine_info covers the rest)."""
    return {
        "versions": _versions("htmxkit", "jinja2"),
        "gil_enabled": getattr(sys, "_is_gil_enabled", lambda: True)(),
        "free_threaded_build": bool(sysconfig.get_config_var("Py_GIL_DISABLED")),
    }


@pytest.fixture(autouse=True)
def _attach_run_info(request: pytest.FixtureRequest, run_info: dict[str, object]) -> None:
    """Store run_info in the extra_info of every benchmark's saved JSON."""
    if "benchmark" in request.fixturenames:
        request.getfixturevalue("benchmark").extra_info.update(run_info)


def _todos(count: int) -> list[Todo]:
    return [Todo(id=i, text=f"Task <{i}> & friends") for i in range(1, count + 1)]


@pytest.fixture(scope="session")
def small_todos() -> list[Todo]:
    return _todos(5)


@pytest.fixture(scope="session")
def large_todos() -> list[Todo]:
    return _todos(LARGE_TODO_COUNT)


@pytest.fixture(scope="session")
def jinja2_env() -> Jinja2Environment:
    return Jinja2Environment(autoescape=True)


@pytest.fixture(scope="session")
def todo_row_template(jinja2_env: Jinja2Environment) -> Template:
    return jinja2_env.from_string(TODO_ROW_JINJA2)
