"""Tests for text renderings of repository state."""

from nanogit import Commit
from nanogit.visualize import (
    format_branches,
    format_commit_detail,
    format_commit_log,
    format_commit_oneline,
)


def test_log_empty(repo):
    assert format_commit_log(repo) == "No commits yet."
    assert format_commit_oneline(repo) == "No commits yet."


def test_log_blocks(repo, author):
    c1 = repo.commit("first", author)
    c2 = repo.commit("second", author)
    
    text = format_commit_log(repo)
    
    assert text.index(f"commit {c2.id}") < text.index(f"commit {c1.id}")
    assert "Author: Jane <jane@example.com>" in text
    assert f"Parent: {c1.id}" in text
    assert "    second" in text


def test_oneline_marks_head(repo, author):
    c1 = repo.commit("first", author)
    c2 = repo.commit("second", author)
    
    lines = format_commit_oneline(repo).splitlines()
    
    assert lines == [f"* {c2.id} (main) second", f"  {c1.id} first"]


def test_oneline_respects_limit(repo, author):
    for i in range(3):
        repo.commit(f"c{i}", author)
    
    assert len(format_commit_oneline(repo, max_commits=2).splitlines()) == 2


def test_branches(repo, author):
    c1 = repo.commit("first", author)
    repo.create_branch("feature")
    repo.switch("feature")
    repo.create_branch("empty-ish")
    
    lines = format_branches(repo).splitlines()
    
    assert lines == [
        f"  empty-ish -> {c1.id}",
        f"* feature -> {c1.id}",
        f"  main -> {c1.id}",
    ]


def test_branches_empty_head(repo):
    assert format_branches(repo) == "* main -> empty"


def test_commit_detail(author):
    root = Commit("root", author)
    child = Commit("child", author, root)
    
    assert f"Parent:  {root.id}" in format_commit_detail(child)
    assert "Parent:  (root)" in format_commit_detail(root)
    assert "    child" in format_commit_detail(child)
