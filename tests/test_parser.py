# -*- encoding: utf-8 -*-
# @File   : test_parser.py
# @Time   : 2024/10/15 00:25:51
# @Author : Kariko Lin

import json
import logging

import pytest

from pyfreedesktop import (
    DesktopFileParser,
    DesktopJsonParser,
    DesktopYamlParser,
    InvalidDesktopDump,
    InvalidDesktopEntry,
    parse
)
from pyfreedesktop.desktop import parser as parser_module
from pyfreedesktop.desktop.parser import _StructuredParser

SAMPLE = '''# Generated by hand


[Desktop Entry]
Type=Application
Name=Files
Name[de_DE]=Dateien
Keywords=folder;manager;explore
  # indented note
Exec=nautilus --new-window %U

[Desktop Action new-window]
Name=New Window'''


class TestDesktopFileParser:
    def test_read_write_roundtrip(self, tmp_path):
        src, dst = tmp_path / 'in.desktop', tmp_path / 'out.desktop'
        src.write_bytes(SAMPLE.encode('utf-8'))
        doc = DesktopFileParser(src).read()
        assert doc == parse(SAMPLE)

        DesktopFileParser(dst).write(doc)
        assert dst.read_bytes() == SAMPLE.encode('utf-8')

    def test_explicit_encoding(self, tmp_path):
        src = tmp_path / 'latin.desktop'
        src.write_bytes('[A]\nName=Café'.encode('latin-1'))
        handler = DesktopFileParser(src, encoding='latin-1')
        assert handler.read()[0][0].values == ['Café']
        assert handler.encoding == 'latin-1'

    def test_detects_encoding(self, tmp_path, monkeypatch, caplog):
        src = tmp_path / 'latin.desktop'
        src.write_bytes('[A]\nName=Café'.encode('latin-1'))
        monkeypatch.setattr(
            parser_module.chardet, 'detect',
            lambda raw: {'encoding': 'ISO-8859-1', 'confidence': 0.9})

        handler = DesktopFileParser(src)
        with caplog.at_level(logging.WARNING):
            doc = handler.read()
        assert doc[0][0].values == ['Café']
        assert 'retrying with ISO-8859-1' in caplog.text

        # written back in the detected encoding.
        handler.write(doc)
        assert src.read_bytes() == '[A]\nName=Café'.encode('latin-1')

    def test_unsure_detection_falls_back_to_utf8(self, tmp_path, monkeypatch):
        src = tmp_path / 'latin.desktop'
        src.write_bytes('[A]\nName=Café'.encode('latin-1'))
        monkeypatch.setattr(
            parser_module.chardet, 'detect',
            lambda raw: {'encoding': 'ISO-8859-1', 'confidence': 0.3})
        with pytest.raises(InvalidDesktopEntry):
            DesktopFileParser(src).read()

    def test_repr(self, tmp_path):
        handler = DesktopFileParser(tmp_path / 'a.desktop')
        assert str(handler).endswith('a.desktop')
        assert repr(handler).startswith('DesktopFileParser(')


@pytest.mark.parametrize('handler_type', [DesktopJsonParser, DesktopYamlParser])
def test_structured_roundtrip(tmp_path, handler_type):
    doc = parse(SAMPLE)
    handler = handler_type(tmp_path / 'dump')
    handler.write(doc)
    assert handler.read() == doc


class TestDesktopJsonParser:
    def test_layout(self, tmp_path):
        target = tmp_path / 'dump.json'
        DesktopJsonParser(target).write(parse('# c\n[A]\nName[de]=x;y\n\n'))
        dump = json.loads(target.read_text(encoding='utf-8'))
        assert dump == {
            'protocol': 1,
            'content': [
                {'comment': 'c'},
                {'group': 'A', 'entries': [
                    {'key': 'Name', 'locale': 'de', 'values': ['x', 'y']},
                    {'blank': '\n'},
                ]},
            ]
        }

    def test_wrong_protocol(self, tmp_path):
        target = tmp_path / 'dump.json'
        target.write_text('{"protocol": 99, "content": []}', encoding='utf-8')
        with pytest.raises(InvalidDesktopDump):
            DesktopJsonParser(target).read()

    def test_entry_at_top_level(self, tmp_path):
        target = tmp_path / 'dump.json'
        target.write_text(
            '{"protocol": 1, "content": [{"key": "k", "values": []}]}',
            encoding='utf-8')
        with pytest.raises(InvalidDesktopDump):
            DesktopJsonParser(target).read()

    @pytest.mark.parametrize('content', [
        [1],
        None,
        'group',
        ['group'],
        [None],
        [{'group': 'A', 'entries': [7]}],
        [{'group': 'A', 'entries': 'k=v'}],
        [{'group': ['A']}],
        [{'comment': 3}],
        [{'group': 'A', 'entries': [{'key': 'k', 'values': 'v'}]}],
        [{'group': 'A', 'entries': [{'key': 'k', 'locale': 1}]}],
    ])
    def test_malformed_nodes(self, tmp_path, content):
        target = tmp_path / 'dump.json'
        target.write_text(
            json.dumps({'protocol': 1, 'content': content}), encoding='utf-8')
        with pytest.raises(InvalidDesktopDump):
            DesktopJsonParser(target).read()


def test_structured_parser_needs_load_and_dump(tmp_path):
    class HalfDone(_StructuredParser):
        def _load(self, fp):
            return json.load(fp)

    with pytest.raises(TypeError):
        HalfDone(tmp_path / 'dump')
