import os
from pathlib import Path

import pytest

from prompt_extract.file_manipulation import (
    make_candidate,
    normalize_content,
    relpath,
    render_tree,
    trim_lines,
    walk_files,
)


@pytest.mark.unit
def test_normalize_content_collapses_whitespace() -> None:
    text = "  const a = 1;\n\n\tfunction f() {\r\n    return a;\n}\n"

    assert normalize_content(text) == "const a = 1; function f() { return a; }"


@pytest.mark.unit
def test_normalize_content_handles_empty_and_blank() -> None:
    assert not normalize_content("")
    assert not normalize_content(" \n\t ")


@pytest.mark.unit
@pytest.mark.parametrize("text", ["a  b", "\n x \n\n y\t", "already single", ""])
def test_normalize_content_is_idempotent(text: str) -> None:
    once = normalize_content(text)

    assert normalize_content(once) == once


@pytest.mark.unit
def test_trim_lines_keeps_head_and_appends_marker() -> None:
    assert trim_lines("l1\nl2\nl3\nl4", 2, "...") == "l1\nl2\n..."


@pytest.mark.unit
def test_trim_lines_beyond_length_keeps_everything_plus_marker() -> None:
    assert trim_lines("l1\nl2", 10, "...") == "l1\nl2\n..."


@pytest.mark.unit
def test_make_candidate_counts_raw_lines(tmp_path: Path) -> None:
    file_path = tmp_path / "src" / "a.ts"
    text = "one\ntwo\nthree\n"

    candidate = make_candidate(file_path, tmp_path, text)

    assert candidate.rel == "src/a.ts"
    assert candidate.extension == "ts"
    assert candidate.raw_line_count == 4


@pytest.mark.unit
def test_relpath_uses_posix_separators(tmp_path: Path) -> None:
    assert relpath(tmp_path / "a" / "b" / "c.js", tmp_path) == "a/b/c.js"


@pytest.mark.unit
def test_walk_files_follows_listing_order_depth_first(tmp_path: Path) -> None:
    for rel in ["a.ts", "lib/b.ts", "lib/deep/c.ts", "z.js"]:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x", encoding="utf-8")

    def expected(current: Path) -> list[Path]:
        out: list[Path] = []
        for name in os.listdir(current):
            p = current / name
            if p.is_dir():
                out.extend(expected(p))
            else:
                out.append(p)
        return out

    assert list(walk_files(tmp_path)) == expected(tmp_path)


@pytest.mark.unit
def test_render_tree_single_branch(tmp_path: Path) -> None:
    (tmp_path / "src" / "app").mkdir(parents=True)
    (tmp_path / "src" / "app" / "main.ts").write_text("", encoding="utf-8")

    assert render_tree(tmp_path) == "└── src\n    └── app\n        └── main.ts\n"


@pytest.mark.unit
def test_render_tree_lists_every_entry_unfiltered(tmp_path: Path) -> None:
    (tmp_path / "components").mkdir()
    (tmp_path / "components" / "c.tsx").write_text("", encoding="utf-8")
    (tmp_path / "readme.svg").write_text("", encoding="utf-8")

    tree = render_tree(tmp_path)
    lines = tree.splitlines()

    assert len(lines) == 3
    assert any(line.endswith("── readme.svg") for line in lines)
    assert any(line.endswith("── components") for line in lines)
    assert any(line.endswith("── c.tsx") for line in lines)
    assert sum(line.startswith("└── ") for line in lines) == 1


@pytest.mark.unit
def test_render_tree_uses_pipe_continuation_under_non_last_entry(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "inner.js").write_text("", encoding="utf-8")
    (tmp_path / "other.js").write_text("", encoding="utf-8")

    names = os.listdir(tmp_path)
    tree = render_tree(tmp_path)

    if names[0] == "pkg":
        assert tree == "├── pkg\n│   └── inner.js\n└── other.js\n"
    else:
        assert tree == "├── other.js\n└── pkg\n    └── inner.js\n"
