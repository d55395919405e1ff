"""CLI tests for channels, users, team and search."""

import json

import yaml

from conftest import body_of


def test_channels_list(run_cli):
    """Pages are followed and rows are summarised."""
    result, fake = run_cli(
        ["channels", "list"],
        {
            "ok": True,
            "channels": [{"id": "C1", "name": "general", "num_members": 10, "topic": {"value": "hi"}}],
            "response_metadata": {"next_cursor": "next"},
        },
        {"ok": True, "channels": [{"id": "C2", "name": "random", "is_private": True}]},
    )

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["channel_count"] == 2
    assert data["channels"][0] == {
        "id": "C1", "name": "#general", "private": False, "archived": False,
        "members": 10, "topic": "hi",
    }
    assert len(fake.requests) == 2


def test_channels_list_include_archived(run_cli):
    result, fake = run_cli(["channels", "list", "--include-archived"], {"ok": True, "channels": []})

    assert result.exit_code == 0, result.output
    assert fake.last.url.params["exclude_archived"] == "false"


def test_channels_list_json(run_cli):
    result, _ = run_cli(
        ["--json", "channels", "list"], {"ok": True, "channels": [{"id": "C1", "name": "general"}]}
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["name"] == "general"


def test_channels_get_not_found(run_cli):
    result, _ = run_cli(["channels", "get", "C999999"], {"ok": False, "error": "channel_not_found"})

    assert result.exit_code == 1
    assert "channel_not_found" in result.output


def test_channels_create_strips_hash(run_cli):
    result, fake = run_cli(
        ["channels", "create", "#launch", "--private"],
        {"ok": True, "channel": {"id": "G1", "name": "launch", "is_private": True}},
    )

    assert result.exit_code == 0, result.output
    assert body_of(fake.last) == {"name": "launch", "is_private": True}
    assert yaml.safe_load(result.output)["id"] == "G1"


def test_channels_archive_and_topic(run_cli):
    result, fake = run_cli(["channels", "archive", "C123456"])
    assert result.exit_code == 0, result.output
    assert fake.endpoints() == ["conversations.archive"]

    result, fake = run_cli(["channels", "set-topic", "C123456", "Release week"])
    assert result.exit_code == 0, result.output
    assert body_of(fake.last)["topic"] == "Release week"


def test_channels_invite(run_cli):
    result, fake = run_cli(["channels", "invite", "C123456", "U1", "W2"])

    assert result.exit_code == 0, result.output
    assert body_of(fake.last)["users"] == "U1,W2"
    assert yaml.safe_load(result.output)["invited"] == ["U1", "W2"]


def test_channels_invite_rejects_bad_user(run_cli):
    result, fake = run_cli(["channels", "invite", "C123456", "alice"])

    assert result.exit_code == 1
    assert "invalid user ID" in result.output
    assert fake.requests == []


def test_users_list(run_cli):
    result, _ = run_cli(
        ["users", "list"],
        {"ok": True, "members": [{"id": "U1", "name": "alice", "profile": {"display_name": "al"}}]},
    )

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["user_count"] == 1
    assert data["users"][0]["real_name"] == "al"


def test_users_get(run_cli):
    result, fake = run_cli(
        ["users", "get", "U123456"],
        {"ok": True, "user": {"id": "U123456", "name": "alice", "is_admin": True}},
    )

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output)["is_admin"] is True
    assert fake.last.url.params["user"] == "U123456"


def test_team_info(run_cli):
    result, _ = run_cli(
        ["team", "info"], {"ok": True, "team": {"id": "T1", "name": "Acme", "domain": "acme"}}
    )

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"id": "T1", "name": "Acme", "domain": "acme"}


def test_search_builds_query(run_cli):
    """Filter options turn into inline modifiers."""
    result, fake = run_cli(
        ["search", "messages", "deploy", "--in", "#ops", "--from", "alice", "--has-link"],
        {
            "ok": True,
            "messages": {
                "total": 1,
                "paging": {"page": 1, "pages": 3},
                "matches": [{"ts": "1.0", "text": "deploy", "username": "alice",
                             "channel": {"id": "C1", "name": "ops"}}],
            },
        },
    )

    assert result.exit_code == 0, result.output
    assert fake.last.url.params["query"] == "in:#ops from:@alice has:link deploy"
    data = yaml.safe_load(result.output)
    assert data["page"] == "1/3"
    assert data["matches"][0]["channel"] == "#ops"


def test_search_rejects_bad_date(run_cli):
    result, fake = run_cli(["search", "messages", "x", "--after", "last week"])

    assert result.exit_code == 1
    assert "YYYY-MM-DD" in result.output
    assert fake.requests == []


def test_search_rejects_out_of_range_count(run_cli):
    result, fake = run_cli(["search", "messages", "x", "--count", "0"])

    assert result.exit_code == 1
    assert "invalid limit" in result.output
    assert fake.requests == []


def test_search_rejects_page_zero(run_cli):
    result, fake = run_cli(["search", "messages", "x", "--page", "0"])

    assert result.exit_code == 1
    assert "invalid page" in result.output
    assert fake.requests == []
