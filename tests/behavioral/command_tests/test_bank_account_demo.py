from behavioral.command.bank_account_demo import run_demo


def test_demo_reports_expected_balances():
    lines = []
    run_demo(lines.append)
    assert "Account balance after undoing withdrawal: 1500" in lines
    assert "Account balance after undoing deposit: 1000" in lines
    assert "Account A balance after transfer: 700" in lines
    assert "Account B balance after transfer: 800" in lines
    assert "Did the transfer succeed? True" in lines
    assert "Account A balance after undoing transfer: 1000" in lines
    assert "Did the large transfer succeed? False" in lines
    assert "Account A balance after undoing large transfer attempt: 1000" in lines
    assert "Account B balance after undoing large transfer attempt: 500" in lines


def test_demo_prints_to_stdout_by_default(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert out.startswith("Simple Bank Account Command Example:")
    assert "Money Transfer Command Example:" in out
