"""Tests for the users file handling of the seed tool (no database)."""

import json

import pytest

from cotitra.tools.seed_db import find_users_file, load_users


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_local_file_wins(tmp_path):
    _write(tmp_path / "users.json", [])
    local = _write(tmp_path / "users.local.json", [])
    assert find_users_file(tmp_path) == local


def test_falls_back_to_committed_file(tmp_path):
    committed = _write(tmp_path / "users.json", [])
    assert find_users_file(tmp_path) == committed


def test_no_file(tmp_path):
    assert find_users_file(tmp_path) is None


def test_load_users_normalizes_entries(tmp_path):
    path = _write(
        tmp_path / "users.json",
        [
            {"firstName": " Alice ", "lastName": "Martin", "email": " Alice@Example.org"},
            {"firstName": "Bob", "lastName": "Durand", "email": "bob@example.org", "password": "pw"},
        ],
    )
    assert load_users(path) == [
        {"first_name": "Alice", "last_name": "Martin", "email": "alice@example.org"},
        {"first_name": "Bob", "last_name": "Durand", "email": "bob@example.org", "password": "pw"},
    ]


def test_load_users_rejects_non_list(tmp_path):
    path = _write(tmp_path / "users.json", {"firstName": "Alice"})
    with pytest.raises(ValueError, match="JSON list"):
        load_users(path)


def test_load_users_rejects_incomplete_entry(tmp_path):
    path = _write(tmp_path / "users.json", [{"firstName": "Alice", "lastName": "Martin"}])
    with pytest.raises(ValueError, match="index 0"):
        load_users(path)
