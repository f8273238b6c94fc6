from click.testing import CliRunner

from sss_prime.cli import main


def test_demo_prints_shares_and_secret():
    runner = CliRunner()
    result = runner.invoke(main, ["1234", "3", "5", "--seed", "1"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert [line.split(":")[0] for line in lines[:5]] == [f"Share {i}" for i in range(1, 6)]
    assert lines[0].startswith("Share 1: (1|")
    assert lines[-1] == "Secret reconstructed by all players: 1234"


def test_demo_is_reproducible_with_seed():
    runner = CliRunner()
    first = runner.invoke(main, ["99", "2", "3", "--seed", "8"])
    second = runner.invoke(main, ["99", "2", "3", "--seed", "8"])
    assert first.output == second.output


def test_demo_negative_secret():
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "1", "--", "-5", "3", "5"])
    assert result.exit_code == 0, result.output
    assert "Secret reconstructed by all players: 32744" in result.output


def test_demo_custom_prime():
    runner = CliRunner()
    result = runner.invoke(main, ["20", "2", "4", "--prime", "7"])
    assert result.exit_code == 0, result.output
    assert "Secret reconstructed by all players: 6" in result.output


def test_demo_rejects_too_few_shares():
    runner = CliRunner()
    result = runner.invoke(main, ["100", "4", "2"])
    assert result.exit_code == 1
    assert "Fatal:" in result.output
    assert "Share 1" not in result.output


def test_demo_rejects_composite_prime():
    runner = CliRunner()
    result = runner.invoke(main, ["1", "1", "1", "--prime", "32748"])
    assert result.exit_code == 2
    assert "not prime" in result.output
