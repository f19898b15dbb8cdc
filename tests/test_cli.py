"""Tests for the command-line finder."""

import json

import pytest

from nata.cli import NOT_FOUND_MESSAGE, main
from nata.kinship.relation_types import RelationType as R, label


@pytest.fixture
def family_file(tmp_path, store):
    path = tmp_path / "family.json"
    path.write_text(json.dumps(store.to_dict(), ensure_ascii=False), encoding="utf-8")
    return str(path)


class TestResolveCommand:

    def test_direct(self, family_file, capsys):
        assert main(["--data", family_file, "resolve", "hari", "ram"]) == 0
        out = capsys.readouterr().out
        assert "Hari को बुवा (Buwa) Ram हुनुहुन्छ।" in out
        assert "[exact]" in out

    def test_fallback_shows_path(self, family_file, capsys):
        assert main(["--data", family_file, "resolve", "hari", "shyam"]) == 0
        out = capsys.readouterr().out
        assert "[fallback]" in out
        assert f"{label(R.BUWA)} -> {label(R.BUWA)}" in out

    def test_no_path(self, family_file, capsys):
        assert main(["--data", family_file, "resolve", "hari", "loner"]) == 1
        assert NOT_FOUND_MESSAGE in capsys.readouterr().out

    def test_unknown_person(self, family_file, capsys):
        assert main(["--data", family_file, "resolve", "ghost", "ram"]) == 2
        assert "ghost" in capsys.readouterr().err


class TestLabelsCommand:

    def test_lists_both_directions(self, family_file, capsys):
        assert main(["--data", family_file, "labels"]) == 0
        out = capsys.readouterr().out
        assert f"Krishna -> Sita: {label(R.DAJU)}" in out
        assert f"Sita -> Krishna: {label(R.BAHINI)}" in out
