from __future__ import annotations

import asyncio

from conftest import candidate, server_error
from sanora_studio import cli
from sanora_studio.cli import build_parser, run


def test_parser_requires_kind_fields() -> None:
    args = build_parser().parse_args(["blurb", "--name", "Cedar House", "--location", "Oslo, NO"])
    assert args.kind == "blurb"
    assert args.location == "Oslo, NO"


def test_run_service(make_client) -> None:
    client, endpoint = make_client(candidate("Timber, honestly joined."))
    args = build_parser().parse_args(["service", "--title", "Timber Architecture"])
    draft = asyncio.run(run(args, client))
    assert draft.text == "Timber, honestly joined."
    assert "Timber Architecture" in endpoint.body()["contents"][0]["parts"][0]["text"]


def test_run_reports_failure(make_client) -> None:
    client, _ = make_client(server_error(502))
    args = build_parser().parse_args(["concept", "--brief", "A quiet study"])
    draft = asyncio.run(run(args, client))
    assert not draft.ok


def test_main_logs_config_warnings_through_configured_handler(
    make_client, tmp_path, monkeypatch, capsys
) -> None:  # noqa: ANN001
    cfg = tmp_path / "studio.yaml"
    cfg.write_text("model: test-model\nlog_level: INFO\n", encoding="utf-8")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    client, _ = make_client(candidate("Cedar and stone."))
    monkeypatch.setattr(cli.GenerationClient, "from_settings", classmethod(lambda cls, settings: client))

    code = cli.main(["--cfg", str(cfg), "concept", "--brief", "A quiet study"])

    out = capsys.readouterr().out
    assert code == 0
    assert "WARNING sanora.config: GEMINI_API_KEY is not set" in out
    assert out.rstrip().endswith("Cedar and stone.")
