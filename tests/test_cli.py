# tests/test_cli.py - one-shot subcommands and the interactive menu
import io
import json

import pytest

from spell_dictionary.cli import cli as cli_module
from spell_dictionary.cli.cli import CLI, main
from spell_dictionary.core.dictionary_service import DictionaryService
from spell_dictionary.core.ordered_word_set import OrderedWordSet


@pytest.fixture
def base_args(tmp_path, word_file):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"log_path": str(tmp_path / "logs" / "cli.log")}), encoding="utf8")
    return ["--config", str(cfg), "--dictionary", str(word_file)]


def run_json(capsys, args):
    code = main(args)
    out = capsys.readouterr().out
    return code, json.loads(out)


def test_check_found(capsys, base_args):
    code, res = run_json(capsys, base_args + ["--json", "check", "Cherry"])
    assert code == 0
    assert res["found"] is True


def test_check_missing_exits_1(capsys, base_args):
    code, res = run_json(capsys, base_args + ["--json", "--method", "hashmap", "check", "appx"])
    assert code == 1
    assert res["method"] == "hashmap"
    assert res["suggestions"] == ["apple", "application", "apply", "banana", "cherry"]


def test_add_then_list(capsys, base_args, word_file):
    code, res = run_json(capsys, base_args + ["--json", "add", "Fig"])
    assert code == 0
    assert res["success"] is True
    assert word_file.read_text(encoding="utf-8").endswith("fig\n")

    code, res = run_json(capsys, base_args + ["--json", "list"])
    assert res["words"] == ["apple", "application", "apply", "banana", "cherry", "fig"]


def test_blank_word_exits_2(capsys, base_args):
    assert main(base_args + ["check", "   "]) == 2
    assert "Word is required" in capsys.readouterr().out


def test_rich_output(capsys, base_args):
    assert main(base_args + ["check", "app"]) == 1
    out = capsys.readouterr().out
    assert "NOT found" in out
    assert "application" in out


def test_serve(monkeypatch, capsys, base_args):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"command":"check","word":"apply"}\n'))
    assert main(base_args + ["serve"]) == 0
    assert json.loads(capsys.readouterr().out)["found"] is True


def test_compare(capsys, base_args):
    code, report = run_json(capsys, base_args + ["--json", "compare", "--repeat", "2"])
    assert code == 0
    assert set(report) == {"bst", "hashmap"}
    assert report["bst"]["size"] == 5
    assert "height" in report["bst"]


def test_interactive_menu(monkeypatch, capsys):
    ws = OrderedWordSet()
    ws.bulk_load(["apple", "banana"])
    app = CLI(DictionaryService({"bst": ws}))

    answers = iter(["1", "aple", "2", "cherry", "3", "4", "9", "5"])
    monkeypatch.setattr(cli_module.Prompt, "ask", lambda *a, **kw: next(answers))
    app.run()

    out = capsys.readouterr().out
    assert app.running is False
    assert "NOT found" in out
    assert "Invalid choice" in out
    assert ws.contains("cherry")
    assert app.metrics.n["check_time"] == 1
    assert app.metrics.n["add_time"] == 1


def test_interactive_exits_on_eof(monkeypatch):
    app = CLI(DictionaryService({"bst": OrderedWordSet()}))

    def eof(*a, **kw):
        raise EOFError

    monkeypatch.setattr(cli_module.Prompt, "ask", eof)
    app.run()
    assert app.running is False


def test_stats_shows_config(capsys, tmp_path):
    from spell_dictionary.utils.config_manager import Config

    cfg = Config(str(tmp_path / "config.json"))
    app = CLI(DictionaryService({"bst": OrderedWordSet()}), cfg=cfg)
    app.show_stats()
    out = capsys.readouterr().out
    assert "Config" in out
    assert "max_suggestions" in out
    assert "collation" in out


def test_locale_collation_adopts_environment(monkeypatch, tmp_path, word_file):
    calls = []
    monkeypatch.setattr(cli_module.locale, "setlocale", lambda cat, name=None: calls.append((cat, name)))
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"collation": "locale", "log_path": str(tmp_path / "cli.log")}), encoding="utf8")
    args = cli_module.build_parser().parse_args(["--config", str(cfg), "--dictionary", str(word_file), "list"])
    service = cli_module.build_service(args)
    assert calls == [(cli_module.locale.LC_COLLATE, "")]
    assert service.word_set().collation == "locale"


def test_unicode_collation_leaves_locale_alone(monkeypatch, base_args):
    calls = []
    monkeypatch.setattr(cli_module.locale, "setlocale", lambda cat, name=None: calls.append((cat, name)))
    cli_module.build_service(cli_module.build_parser().parse_args(base_args + ["list"]))
    assert calls == []


def test_bad_system_locale_is_logged(monkeypatch):
    def fail(cat, name=None):
        raise cli_module.locale.Error("unsupported locale setting")

    monkeypatch.setattr(cli_module.locale, "setlocale", fail)
    warnings = []
    monkeypatch.setattr(cli_module.Log, "warning", lambda msg: warnings.append(msg))
    cli_module.use_system_collation()
    assert "unsupported locale setting" in warnings[0]
