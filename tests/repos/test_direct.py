from pathlib import Path
import pytest
from normalnotes.conf import NotesConf
from normalnotes.models import NoteText
from normalnotes.repos.direct import DirectRepo


def repo():
    return DirectRepo(NotesConf(notes_dir='/notes', editor='nano'))


def test_requires_notes_dir():
    with pytest.raises(ValueError):
        DirectRepo(NotesConf(notes_dir='', editor='nano'))


def test_resolve_path():
    assert DirectRepo(NotesConf(notes_dir='/tmp/my-notes')).resolve_path('2025-04-09') == '/tmp/my-notes/2025-04-09.md'
    assert repo().resolve_path('not a date') == '/notes/not a date.md'


def test_create_if_missing(fs):
    fs.create_dir('/notes')
    path = '/notes/test-note.md'
    assert repo().create_if_missing(path)
    assert Path(path).read_text() == '# test-note.md\n\n'


def test_create_if_missing_does_not_overwrite(fs):
    fs.create_file('/notes/test-note.md', contents='original content')
    assert not repo().create_if_missing('/notes/test-note.md')
    assert Path('/notes/test-note.md').read_text() == 'original content'


def test_delete(fs):
    fs.create_file('/notes/2025-04-09.md', contents='bye')
    fs.create_file('/notes/2025-04-10.md', contents='stay')
    assert repo().delete('2025-04-09')
    assert not Path('/notes/2025-04-09.md').exists()
    assert not repo().delete('2025-04-09')
    assert not repo().delete('1999-01-01')
    assert sorted(p.name for p in Path('/notes').iterdir()) == ['2025-04-10.md']


def test_entries(fs):
    fs.create_file('/notes/b.md')
    fs.create_file('/notes/a.md')
    fs.create_file('/notes/sub/nested.md')
    fs.create_file('/notes/.hidden')
    assert repo().entries() == ['/notes/.hidden', '/notes/a.md', '/notes/b.md', '/notes/sub']


def test_read(fs):
    fs.create_file('/notes/a.md', contents='hello')
    fs.create_file('/notes/binary.md', contents=b'\xff\xfe\xfa')
    fs.create_dir('/notes/sub')
    assert repo().read('/notes/a.md') == 'hello'
    assert repo().read('/notes/binary.md') is None
    assert repo().read('/notes/sub') is None
    assert repo().read('/notes/missing.md') is None


def test_search(fs):
    fs.create_file('/notes/one.md', contents='I like Python')
    fs.create_file('/notes/two.md', contents='i like python')
    fs.create_file('/notes/three.md', contents='nothing (.*) here')
    fs.create_file('/notes/binary.md', contents=b'\xffPython')
    fs.create_dir('/notes/Python')
    assert repo().search('Python') == [NoteText('/notes/one.md', 'I like Python')]
    assert repo().search('(.*)') == [NoteText('/notes/three.md', 'nothing (.*) here')]
    assert {h.path for h in repo().search('like')} == {'/notes/one.md', '/notes/two.md'}
    assert repo().search('absent') == []


def test_tags(fs):
    fs.create_file('/notes/note1.md', contents='Today I worked on #rust and #cli\n')
    fs.create_file('/notes/note2.md', contents='This is #rust again and also #dev\n')
    fs.create_file('/notes/binary.md', contents=b'\xff #secret')
    assert repo().tags() == {'#rust', '#cli', '#dev'}


def test_tags_empty(fs):
    fs.create_dir('/notes')
    assert repo().tags() == set()


def test_tag_counts(fs):
    fs.create_file('/notes/one.md', contents='#tag1 #tag1 #tag2')
    fs.create_file('/notes/two.md', contents='#tag1 #tag3')
    fs.create_file('/notes/three.md', contents='#tag1 #tag3 #tag4')
    assert repo().tag_counts() == {'#tag1': 3, '#tag2': 1, '#tag3': 2, '#tag4': 1}
