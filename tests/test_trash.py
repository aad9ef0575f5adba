# -*- encoding: utf-8 -*-
# @File   : test_trash.py
# @Time   : 2024/10/15 23:12:40
# @Author : Kariko Lin

from datetime import datetime, timezone

import pytest

from pyfreedesktop import (
    ContentEntry,
    DateFormatError,
    DateParseError,
    DesktopDocument,
    EntryNotFound,
    Group,
    TrashFile,
    parse
)


def _double_entry_group() -> Group:
    return Group(header='Trash Info', content=[
        ContentEntry(key='DeletionDate', values=['2025-08-12T00:14:20']),
        ContentEntry(key='Path', values=['~/Downloads/file']),
        ContentEntry(key='Path', values=['/wrong/']),
        ContentEntry(key='DeletionDate', values=['2025-08-14T00:00:00']),
    ])


class TestFromDocument:
    def test_proper_file(self):
        doc = parse('''[Trash Info]
Path=~/Downloads/file
DeletionDate=2025-08-12T00:14:20''')
        assert TrashFile.from_document(doc) == TrashFile(
            desktop_file=DesktopDocument(content=[
                Group(header='Trash Info', content=[
                    ContentEntry(key='Path', values=['~/Downloads/file']),
                    ContentEntry(key='DeletionDate',
                                 values=['2025-08-12T00:14:20']),
                ])
            ]),
            path='~/Downloads/file',
            deletion_date=datetime(2025, 8, 12, 0, 14, 20))

    def test_double_entry_file(self):
        doc = parse('''[Trash Info]
DeletionDate=2025-08-12T00:14:20
Path=~/Downloads/file
Path=/wrong/
DeletionDate=2025-08-14T00:00:00
''')
        with pytest.warns(UserWarning):
            trash = TrashFile.from_document(doc)
        assert trash.desktop_file == DesktopDocument(
            content=[_double_entry_group()])
        assert trash.path == '~/Downloads/file'
        assert trash.deletion_date == datetime(2025, 8, 12, 0, 14, 20)

    def test_missing_group(self):
        with pytest.raises(EntryNotFound) as info:
            TrashFile.from_document(parse('[Other]\nPath=/a'))
        assert info.value.key == 'Trash Info'

    def test_missing_path(self):
        doc = parse('[Trash Info]\nDeletionDate=2025-08-12T00:14:20')
        with pytest.raises(EntryNotFound) as info:
            TrashFile.from_document(doc)
        assert info.value.key == 'Path'

    @pytest.mark.parametrize('raw', [
        'yesterday',
        '2025-8-1T1:2:3',
        '2025-08-12 00:14:20',
        '2025-08-12T00:14:20Z',
        '２０２５-08-12T00:14:20',
    ])
    def test_bad_date(self, raw):
        doc = parse(f'[Trash Info]\nPath=/a\nDeletionDate={raw}')
        with pytest.raises(DateParseError) as info:
            TrashFile.from_document(doc)
        assert info.value.raw == raw

    def test_impossible_date(self):
        doc = parse('[Trash Info]\nPath=/a\nDeletionDate=2025-02-30T00:00:00')
        with pytest.raises(DateParseError) as info:
            TrashFile.from_document(doc)
        assert isinstance(info.value.__cause__, ValueError)

    def test_small_year(self):
        doc = parse('[Trash Info]\nPath=/a\nDeletionDate=0999-01-02T03:04:05')
        trash = TrashFile.from_document(doc)
        assert trash.deletion_date == datetime(999, 1, 2, 3, 4, 5)


class TestToDocument:
    def test_edit_and_convert(self):
        trash = TrashFile(
            desktop_file=DesktopDocument(content=[_double_entry_group()]),
            path='~/Downloads/file',
            deletion_date=datetime(2025, 8, 12, 0, 14, 20))

        assert str(trash.to_document()) == '''[Trash Info]
DeletionDate=2025-08-12T00:14:20
Path=~/Downloads/file
Path=/wrong/
DeletionDate=2025-08-14T00:00:00'''

        trash.path = '/new/path'
        assert str(trash.to_document()) == '''[Trash Info]
DeletionDate=2025-08-12T00:14:20
Path=/new/path
Path=/wrong/
DeletionDate=2025-08-14T00:00:00'''
        # the wrapped document itself is left alone.
        assert trash.desktop_file[0][1].values == ['~/Downloads/file']

    def test_preserve_comments(self):
        text = '''[Trash Info]


DeletionDate=2025-08-12T00:14:20
# Here is an awesome comment
Path=~/Downloads/file
Path=/wrong/


DeletionDate=2025-08-14T00:00:00'''
        with pytest.warns(UserWarning):
            trash = TrashFile.from_document(parse(text))
        assert str(trash.to_document()) == text

    def test_new_group(self):
        trash = TrashFile(
            path='/tmp/x', deletion_date=datetime(2024, 1, 2, 3, 4, 5))
        assert str(trash.to_document()) == (
            '[Trash Info]\nPath=/tmp/x\nDeletionDate=2024-01-02T03:04:05')

    def test_year_is_zero_padded(self):
        trash = TrashFile(
            path='/tmp/x', deletion_date=datetime(999, 1, 2, 3, 4, 5))
        text = str(trash.to_document())
        assert text.endswith('DeletionDate=0999-01-02T03:04:05')
        back = TrashFile.from_document(parse(text))
        assert back.deletion_date == trash.deletion_date

    @pytest.mark.parametrize('date', [
        datetime(2024, 1, 2, tzinfo=timezone.utc),
        '2024-01-02T00:00:00',
    ])
    def test_unformattable_date(self, date):
        trash = TrashFile(path='/tmp/x', deletion_date=date)
        with pytest.raises(DateFormatError) as info:
            trash.to_document()
        assert info.value.date is date

    def test_group_appended_after_others(self):
        trash = TrashFile(
            desktop_file=parse('[Desktop Entry]\nName=x\n'),
            path='/tmp/x',
            deletion_date=datetime(2024, 1, 2, 3, 4, 5))
        assert str(trash.to_document()) == (
            '[Desktop Entry]\nName=x\n'
            '[Trash Info]\nPath=/tmp/x\nDeletionDate=2024-01-02T03:04:05')

    def test_missing_entry_appended(self):
        trash = TrashFile(
            desktop_file=parse('[Trash Info]\n# keep me\nPath=/old'),
            path='/new',
            deletion_date=datetime(2024, 1, 2, 3, 4, 5))
        assert str(trash.to_document()) == (
            '[Trash Info]\n# keep me\nPath=/new\n'
            'DeletionDate=2024-01-02T03:04:05')
