'''
Command line interface tests
'''


def test_executor_prints_results(cli, capsys):
    assert cli.run(args=['-e', '2+3', '2^10', '2>=2']) == 0
    assert capsys.readouterr().out.splitlines() == ['5', '1024', 'true']


def test_executor_reports_and_continues(cli, capsys):
    assert cli.run(args=['-e', '1,,2', '1+1', '+']) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['2']
    errors = captured.err.splitlines()
    assert errors[0].startswith('error: Unexpected character')
    assert errors[1].startswith('error: Invalid expression')
    assert cli.failures == 2


def test_executor_skips_blank_lines(cli, capsys):
    assert cli.run(args=['-e', '', '  ', '1']) == 0
    assert capsys.readouterr().out.splitlines() == ['1']


def test_verbose(cli, capsys):
    assert cli.run(args=['-v', '-e', '2&0.5']) == 1
    assert 'error: Invalid decimal' in capsys.readouterr().err


def test_dump(cli, capsys):
    assert cli.run(args=['-D', '-e', '10%+pi']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '<kind>\t<repr(raw)>\t<value>'
    assert lines[1:] == ["DECIMAL\t'10%'\t0.1",
                         "PLUS\t'+'\t+",
                         "PI\t'π'\t3.141592653589793"]


def test_dump_bad_number(cli, capsys):
    assert cli.run(args=['-D', '-e', '1,,2']) == 1
    assert 'Unexpected character' in capsys.readouterr().err


def test_raw_grammar(cli, capsys):
    assert cli.run(args=['-G', '-e']) == 0
    out = capsys.readouterr().out
    assert 'spellings: φ phi π pi e E ∞ inf nan true false' in out
    assert 'synonyms: **=^ ×=* ÷=/ ∧=^' in out
    assert '>=' in out
