"""Tests for repo_collect.render.grouping covering group and record ordering.

Run with:
    pytest tests/test_grouping.py --maxfail=1 -v --cov=repo_collect.render.grouping --cov-report=term-missing
"""

from repo_collect.models import Record
from repo_collect.render.grouping import OTHERS_GROUP, group_records


def _record(name, language=""):
    return Record(
        full_name=f"owner/{name}",
        name=name,
        owner="owner",
        language=language,
        description="",
        html_url=f"https://github.com/owner/{name}",
    )


def test_three_record_scenario():
    groups = group_records([
        _record("b-repo", "Go"),
        _record("A-repo", "Go"),
        _record("c-repo", ""),
    ])
    assert [g.name for g in groups] == ["Go", "Others"]
    assert [r.name for r in groups[0].records] == ["A-repo", "b-repo"]
    assert [r.name for r in groups[1].records] == ["c-repo"]


def test_group_names_sort_case_sensitively():
    groups = group_records([
        _record("x", "Python"),
        _record("y", "assembly"),
        _record("z", ""),
        _record("w", "C"),
    ])
    # uppercase sorts before lowercase; Others is not pinned
    assert [g.name for g in groups] == ["C", OTHERS_GROUP, "Python", "assembly"]


def test_records_sort_case_insensitively_with_empty_name_first():
    groups = group_records([
        _record("zeta", "Rust"),
        _record("Alpha", "Rust"),
        _record("", "Rust"),
        _record("beta", "Rust"),
    ])
    assert [r.name for r in groups[0].records] == ["", "Alpha", "beta", "zeta"]


def test_groups_are_disjoint_and_exhaustive():
    records = [_record(f"r{i}", lang) for i, lang in enumerate(["Go", "", "Go", "C", "", "Rust", "C"])]
    groups = group_records(records)
    flattened = [r for g in groups for r in g.records]
    assert sorted(flattened, key=lambda r: r.name) == sorted(records, key=lambda r: r.name)
    assert len({g.name for g in groups}) == len(groups)
    assert [g.name for g in groups] == sorted(g.name for g in groups)


def test_empty_input_produces_no_groups():
    assert group_records([]) == []
