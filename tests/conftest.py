"""Pytest configuration and fixtures."""
import pytest

from logsweep.config import load_config
from logsweep.entries import MemoryEntrySource


@pytest.fixture
def config():
    """The configuration every run uses."""
    return load_config()


@pytest.fixture
def memory_source():
    """In-memory project tree rooted at 'proj'."""
    source = MemoryEntrySource({
        "proj/src/app.js": 'const a = 1;\nconsole.log("a", a);\nexport default a;\n',
        "proj/src/util.ts": "export function add(a: number, b: number) {\n  return a + b;\n}\n",
        "proj/src/view.vue": "<script>\nconsole.log(\n  'mounted'\n);\n</script>\n",
        "proj/main.py": "print('console.log(not scanned)')\n",
        "proj/node_modules/dep/index.js": "console.log('dependency');\n",
    })
    return source


@pytest.fixture
def echoed():
    """Collects everything a Walker prints."""
    return []


@pytest.fixture
def sample_project(tmp_path):
    """Create a minimal project on disk for end-to-end runs."""
    project_path = tmp_path / "project"
    (project_path / "src").mkdir(parents=True)
    (project_path / "node_modules" / "lib").mkdir(parents=True)

    (project_path / "src" / "index.js").write_text(
        "import { run } from './run';\n"
        "\n"
        "console.log('starting');\n"
        "run();\n"
        "console.log(\n"
        "  'finished',\n"
        "  Date.now()\n"
        ");\n"
    )
    (project_path / "src" / "clean.ts").write_text("export const answer = 42;\n")
    (project_path / "node_modules" / "lib" / "index.js").write_text("console.log('vendored');\n")

    return project_path
