import json

from click.testing import CliRunner

from cli import giftres


def test_resolve_human(tmp_config):
    runner = CliRunner()
    result = runner.invoke(
        giftres.cli, ["resolve", "--config", str(tmp_config), "chocolatt noir"]
    )
    assert result.exit_code == 0, result.output
    assert "fuzzy" in result.output
    assert "chocolat noir" in result.output
    # store_limit = 2 in tmp config
    assert "Neuhaus, Galler" in result.output
    assert "Leonidas" not in result.output


def test_resolve_json(tmp_config):
    runner = CliRunner()
    result = runner.invoke(
        giftres.cli,
        ["resolve", "--json", "--limit", "1", "--config", str(tmp_config), "Rhum arrangé", ""],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["schema_version"] == "1.0"
    first, second = payload["results"]
    assert first["confidence"] == "exact"
    assert first["matchedKey"] == "rhum arrange"
    assert first["stores"] == ["Prik&Tik"]
    assert second["found"] is False
    assert second["main_category"] == "Culture & divertissement"
    assert second["stores"] == ["fnac"]


def test_resolve_requires_keywords():
    result = CliRunner().invoke(giftres.cli, ["resolve"])
    assert result.exit_code == 2


def test_resolve_bad_config_exit_code(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text('[resolver]\nlexicon = "nope.json"\nfallbacks = "nope.json"\n', encoding="utf-8")
    result = CliRunner().invoke(giftres.cli, ["resolve", "--config", str(cfg), "vin"])
    assert result.exit_code == 3


def test_batch_summary(tmp_path, tmp_config):
    kw = tmp_path / "keywords.txt"
    kw.write_text("chocolat noir\n\nchocolat fonce\nbougie\n", encoding="utf-8")
    result = CliRunner().invoke(giftres.cli, ["batch", "--config", str(tmp_config), str(kw)])
    assert result.exit_code == 0, result.output
    assert "resolved 3 keyword(s), 2 found" in result.output
    assert "alias" in result.output


def test_batch_jsonl(tmp_path, tmp_config):
    kw = tmp_path / "keywords.txt"
    kw.write_text("casque audio\nxyzzy\n", encoding="utf-8")
    result = CliRunner().invoke(
        giftres.cli, ["batch", "--jsonl", "--config", str(tmp_config), str(kw)]
    )
    assert result.exit_code == 0, result.output
    lines = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    assert len(lines) == 2
    assert lines[0]["result"]["stores"] == ["MediaMarkt", "Coolblue"]
    assert lines[1]["result"]["confidence"] == "fallback"


def test_batch_empty_file_exit_code(tmp_path):
    kw = tmp_path / "empty.txt"
    kw.write_text("\n   \n", encoding="utf-8")
    result = CliRunner().invoke(giftres.cli, ["batch", str(kw)])
    assert result.exit_code == 2


def test_normalize_cmd():
    result = CliRunner().invoke(giftres.cli, ["normalize", "  Thé (vert)! "])
    assert result.exit_code == 0
    assert result.output.strip() == "the vert"


def test_check_shipped_config():
    result = CliRunner().invoke(giftres.cli, ["check"])
    assert result.exit_code == 0, result.output
    assert "[ok]" in result.output
    assert "Animaux" in result.output


def test_check_reports_bad_lexicon(tmp_path, tmp_config):
    (tmp_path / "lex.json").write_text('{"vin": {"stores": []}}', encoding="utf-8")
    result = CliRunner().invoke(giftres.cli, ["check", "--config", str(tmp_config)])
    assert result.exit_code == 3


def test_level_from_flags():
    from gkr_utils.logging_setup import level_from_flags

    assert level_from_flags() == "INFO"
    assert level_from_flags(quiet=True) == "WARNING"
    assert level_from_flags(quiet=True, verbose=True) == "DEBUG"
