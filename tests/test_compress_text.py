import pytest

from huffman_coding.compress_text import main, make_parser, report


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_report_with_ascii_table(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'aaaabbc\nAab\n')
    stats = report(make_parser().parse_args([infile]))

    # a: 6, b: 3, c: 1 -> lengths 1, 2, 2
    assert stats.fixed_bits == 10 * 8
    assert stats.huffman_bits == 6 * 1 + 3 * 2 + 1 * 2

    out = capsys.readouterr().out
    assert 'Frequencies' in out
    assert 'Huffman codes' in out
    assert 'Fixed-width output' in out
    assert 'Huffman output' in out
    assert 'Compression' in out


def test_report_with_table_file(tmp_path):
    infile = _write(tmp_path, 'in.txt', 'ab ba\n')
    table = _write(tmp_path, 'table.txt', 'a, 000\nb, 001\n , 010\n')
    stats = report(make_parser().parse_args([infile, '--table', table]))
    assert stats.fixed_bits == 15


def test_show_bits(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'ab\n')
    report(make_parser().parse_args([infile, '--show-bits', '--width', '7']))
    out = capsys.readouterr().out
    assert '11000011100010' in out


def test_single_symbol_text(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'zzz\n')
    stats = report(make_parser().parse_args([infile]))
    assert stats.huffman_bits == 3
    assert "'z': 0" in capsys.readouterr().out


def test_main_exits_on_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / 'missing.txt')])
    assert info.value.code == 1
    assert 'error' in capsys.readouterr().err


def test_main_exits_on_unknown_symbol(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'ab\n')
    table = _write(tmp_path, 'table.txt', 'a, 0\n')
    with pytest.raises(SystemExit) as info:
        main([infile, '--table', table])
    assert info.value.code == 1
    assert "no code for symbol 'b'" in capsys.readouterr().err


def test_main_runs(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'hello world\n')
    assert main([infile, '-v']) == 0
    assert 'Report completed' in capsys.readouterr().out


def test_main_exits_on_undecodable_text(tmp_path, capsys):
    path = tmp_path / 'latin1.txt'
    path.write_bytes(b'caf\xe9\n')
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 1
    assert 'huffman-report: error:' in capsys.readouterr().err


def test_encoding_option(tmp_path, capsys):
    path = tmp_path / 'latin1.txt'
    path.write_bytes(b'caf\xe9\n')
    with pytest.raises(SystemExit) as info:
        main([str(path), '--encoding', 'latin-1'])
    # é is outside 7-bit ASCII
    assert info.value.code == 1
    assert "no code for symbol 'é'" in capsys.readouterr().err

    table = tmp_path / 'table.txt'
    table.write_bytes('c, 00\na, 01\nf, 10\n\xe9, 11\n'.encode('latin-1'))
    stats = report(make_parser().parse_args(
        [str(path), '--encoding', 'latin-1', '--table', str(table)]))
    assert stats.fixed_bits == 8


def test_main_rejects_narrow_width(tmp_path, capsys):
    infile = _write(tmp_path, 'in.txt', 'ab\n')
    with pytest.raises(SystemExit) as info:
        main([infile, '--width', '5'])
    assert info.value.code == 2
    assert '--width must be at least 7' in capsys.readouterr().err


def test_input_read_once(tmp_path, monkeypatch):
    infile = _write(tmp_path, 'in.txt', 'abcab\n')
    opened = []
    real_open = open

    def counting_open(path, *args, **kwargs):
        opened.append(path)
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr('builtins.open', counting_open)
    stats = report(make_parser().parse_args([infile]))
    assert opened == [infile]
    assert stats.fixed_bits == 40
