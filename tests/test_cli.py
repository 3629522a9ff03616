from __future__ import annotations

import json

import pdfplumber
import pytest

from releveur import main

from tests.helpers import FakePage, FakePDF


def _fake_open(file):
    return FakePDF([
        FakePage(1, [
            ['01/01', '_', 'VIREMENT DE', 'CAF'],
            ['PRESTATIONS'],
            ['150,00'],
            ['05/01', '_', 'PAIEMENT INCONNU'],
            ['QWERTY'],
            ['9,99'],
        ]),
    ])


def test_missing_input_directory_is_fatal(tmp_path, capsys):
    missing = tmp_path / 'files'

    with pytest.raises(SystemExit) as excinfo:
        main([str(missing)])

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out == f'\n{missing} does not exist\n\n'


def test_input_must_be_a_directory(tmp_path, capsys):
    file = tmp_path / 'releve_1_202401.pdf'
    file.touch()

    with pytest.raises(SystemExit) as excinfo:
        main([str(file)])

    assert excinfo.value.code == 1
    assert 'must be a directory' in capsys.readouterr().out


def test_badly_named_statement_is_fatal(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(pdfplumber, 'open', _fake_open)
    (tmp_path / 'statement.pdf').touch()

    with pytest.raises(SystemExit):
        main([str(tmp_path), '--output', str(tmp_path / 'out.csv')])

    assert 'releve_<account>_<YYYYMM>.pdf' in capsys.readouterr().out
    assert not (tmp_path / 'out.csv').exists()


def test_run_writes_both_csv_files(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(pdfplumber, 'open', _fake_open)
    files = tmp_path / 'files'
    files.mkdir()
    (files / 'releve_00012345_202401.pdf').touch()
    output = tmp_path / 'public' / 'data.csv'
    categorized = tmp_path / 'data' / 'data2.csv'

    main([str(files), '--output', str(output), '--categorized-output', str(categorized)])

    assert output.read_text(encoding='utf-8').splitlines() == [
        'ACCOUNT;DATE;LABEL1;LABEL2;VALUE',
        '00012345;2024-1-1;VIREMENT DE CAF;PRESTATIONS;150,00',
        '00012345;2024-1-5;PAIEMENT INCONNU;QWERTY;-9,99',
    ]
    assert categorized.read_text(encoding='utf-8').splitlines()[1:] == [
        '00012345;2024-1-1;VIREMENT DE CAF;PRESTATIONS;150,00;VIREMENT EXTERNE;CAF',
        '00012345;2024-1-5;PAIEMENT INCONNU;QWERTY;-9,99;;',
    ]

    out = capsys.readouterr().out
    assert 'releve_00012345_202401.pdf' in out
    assert '-9.99' in out
    assert '+150.0' in out
    assert 'uncategorized 1' in out


def test_custom_rules(tmp_path, monkeypatch):
    monkeypatch.setattr(pdfplumber, 'open', _fake_open)
    files = tmp_path / 'files'
    files.mkdir()
    (files / 'releve_00012345_202401.pdf').touch()
    rules = tmp_path / 'rules.json'
    rules.write_text(json.dumps({
        'debit_default': ['DIVERS', '??'],
        'rules': [{'credit': True, 'keywords': ['CAF'], 'category1': 'AIDES', 'category2': 'CAF'}],
    }), encoding='utf-8')
    categorized = tmp_path / 'data2.csv'

    main([
        str(files),
        '--rules', str(rules),
        '--output', str(tmp_path / 'data.csv'),
        '--categorized-output', str(categorized),
    ])

    assert categorized.read_text(encoding='utf-8').splitlines()[1:] == [
        '00012345;2024-1-1;VIREMENT DE CAF;PRESTATIONS;150,00;AIDES;CAF',
        '00012345;2024-1-5;PAIEMENT INCONNU;QWERTY;-9,99;DIVERS;??',
    ]


def test_help_mentions_categorized_header(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--help'])

    assert excinfo.value.code == 0
    assert 'with a header row' in ' '.join(capsys.readouterr().out.split())
