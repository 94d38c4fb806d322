from launchtree.cli import evaluate_once
from launchtree.cli.__main__ import main

def test_evaluate_prints_trace_then_report(capsys):
    main(["evaluate", "--market-testing", "--positive-rating", "--successful"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Displaying travel path...",
        "1. launch-strategy",
        "2. rating",
        "3. positive-testing-outcome",
        "4. positive-successful-terminal",
        "",
        "Positive Successful Launch with value: $150,000.00",
    ]

def test_evaluate_without_track_path(capsys):
    main(["evaluate", "--no-track-path"])
    assert capsys.readouterr().out == "\nFailed Launch with value: $0.00\n"

def test_evaluate_with_config(tmp_path, capsys):
    cfg = tmp_path / "launch.yaml"
    cfg.write_text("track_path: false\n")
    main(["evaluate", "--modest", "--config", str(cfg)])
    assert capsys.readouterr().out == "\nNo Testing Modest Launch with value: $50,000.00\n"

def test_run_is_reproducible_with_seed(capsys):
    main(["run", "--seed", "3"])
    first = capsys.readouterr().out
    main(["run", "--seed", "3"])
    assert capsys.readouterr().out == first
    assert "with value: $" in first

def test_run_seed_from_env(monkeypatch):
    monkeypatch.setenv("LAUNCHTREE_SEED", "11")
    a = evaluate_once.seeded_rng().random()
    b = evaluate_once.seeded_rng().random()
    assert a == b

def test_notify_flag(monkeypatch, capsys):
    sent = []
    monkeypatch.setattr(evaluate_once, "notify", lambda text: sent.append(text) or True)
    main(["evaluate", "--no-track-path", "--successful", "--notify"])
    out = capsys.readouterr().out
    assert "notification sent" in out
    assert sent == ["No Testing Successful Launch with value: $100,000.00 | testing=0 positive=0 successful=1 modest=0 failed=0"]
