import logging

from click.testing import CliRunner

from .. import files
from ..cli import cli
from ..files import find_cpp_files
from ..rewrite import ReplaceMode, RewriteOptions

OLD = "MOCK_METHOD1(Foo, bool(int));\n"
NEW = "MOCK_METHOD(bool, Foo, (int));\n"


def test_find_cpp_files_respects_depth_and_extensions(tmp_path):
    (tmp_path / 'a.cpp').write_text(OLD)
    (tmp_path / 'b.c').write_text(OLD)
    (tmp_path / 'sub').mkdir()
    (tmp_path / 'sub' / 'c.hpp').write_text(OLD)
    exts = ['cpp', 'hpp']
    assert find_cpp_files(tmp_path, exts, 1) == [tmp_path / 'a.cpp']
    assert find_cpp_files(tmp_path, exts, 2) == [tmp_path / 'a.cpp', tmp_path / 'sub' / 'c.hpp']


def test_search_lists_matching_files(tmp_path):
    (tmp_path / 'mock.h').write_text(OLD + OLD)
    (tmp_path / 'clean.h').write_text(NEW)
    result = CliRunner().invoke(cli, ['search', '--count', str(tmp_path)])
    assert result.exit_code == 0
    assert result.output == f"{tmp_path / 'mock.h'}:2\n"


def test_replace_writes_file(tmp_path):
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', str(f)])
    assert result.exit_code == 0
    assert "(1/1)" in result.output
    assert f.read_text() == NEW


def test_replace_add_override(tmp_path):
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', '--add-override', str(f)])
    assert result.exit_code == 0
    assert f.read_text() == "MOCK_METHOD(bool, Foo, (int), (override));\n"


def test_replace_dry_run(tmp_path):
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', '--dry-run', str(f)])
    assert result.exit_code == 0
    assert f.read_text() == OLD


def test_replace_multi_line(tmp_path):
    f = tmp_path / 'mock.h'
    f.write_text("MOCK_METHOD2(Foo, bool(\n    int,\n    double));\n")
    result = CliRunner().invoke(cli, ['replace', '--multi-line', str(f)])
    assert result.exit_code == 0
    assert f.read_text() == "MOCK_METHOD(bool, Foo, (\n    int,\n    double));\n"


def test_replace_with_errors_leaves_file(tmp_path):
    f = tmp_path / 'mock.h'
    src = OLD + "MOCK_METHOD1(Bar bool(int));\n"
    f.write_text(src)
    result = CliRunner().invoke(cli, ['replace', str(f)])
    assert result.exit_code == 1
    assert "(1/2)" in result.output
    assert "ParseSignatureError" in result.output
    assert f.read_text() == src


def test_replace_skips_empty_files(tmp_path):
    empty = tmp_path / 'empty.h'
    empty.write_text('')
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', str(empty), str(f)])
    assert result.exit_code == 0
    assert str(empty) not in result.output
    assert f.read_text() == NEW


def test_replace_parallel_jobs(tmp_path):
    sources = []
    for name in ('a.h', 'b.h', 'c.h'):
        f = tmp_path / name
        f.write_text(OLD)
        sources.append(f)
    result = CliRunner().invoke(cli, ['replace', '--jobs', '2'] + [str(f) for f in sources])
    assert result.exit_code == 0
    assert all(f.read_text() == NEW for f in sources)


def test_replace_reads_config(tmp_path):
    cfg = tmp_path / 'gmock.toml'
    cfg.write_text('add_override = true\n')
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', '--config', str(cfg), str(f)])
    assert result.exit_code == 0
    assert f.read_text() == "MOCK_METHOD(bool, Foo, (int), (override));\n"


def test_bad_config_is_usage_error(tmp_path):
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', '--config', str(tmp_path / 'missing.toml'), str(f)])
    assert result.exit_code == 2
    assert f.read_text() == OLD


def test_search_parallel_jobs(tmp_path):
    for name in ('a.h', 'b.h', 'c.h'):
        (tmp_path / name).write_text(OLD)
    (tmp_path / 'd.h').write_text(NEW)
    result = CliRunner().invoke(cli, ['search', '--count', '--jobs', '2', str(tmp_path)])
    assert result.exit_code == 0
    assert result.output.splitlines() == [f"{tmp_path / n}:1" for n in ('a.h', 'b.h', 'c.h')]


def test_replace_reads_each_file_once(tmp_path, monkeypatch):
    reads = []
    real_read = files.read_source

    def counting_read(path):
        reads.append(path)
        return real_read(path)

    monkeypatch.setattr(files, 'read_source', counting_read)
    empty = tmp_path / 'empty.h'
    empty.write_text('')
    f = tmp_path / 'mock.h'
    f.write_text(OLD)
    result = CliRunner().invoke(cli, ['replace', str(empty), str(f)])
    assert result.exit_code == 0
    assert reads == [empty, f]
    assert f.read_text() == NEW


def test_rewrite_file_skips_empty(tmp_path):
    empty = tmp_path / 'empty.h'
    empty.write_text('')
    assert files.rewrite_file(empty, ReplaceMode.SINGLE_LINE, RewriteOptions()) is None


class InlinePool:
    """Runs jobs in-process and records how the pool was set up."""
    created = []

    def __init__(self, max_workers, initializer, initargs):
        self.initializer = initializer
        self.initargs = initargs
        InlinePool.created.append(self)

    def __enter__(self):
        self.initializer(*self.initargs)
        return self

    def __exit__(self, *exc):
        return False

    def map(self, func, *iterables):
        return map(func, *iterables)


def test_workers_get_parent_log_level(tmp_path, monkeypatch):
    configured = []
    monkeypatch.setattr(files, 'ProcessPoolExecutor', InlinePool)
    monkeypatch.setattr(files.logging, 'basicConfig', lambda **kw: configured.append(kw))
    monkeypatch.setattr(logging.getLogger(), 'level', logging.DEBUG)
    paths = []
    for name in ('a.h', 'b.h'):
        p = tmp_path / name
        p.write_text(OLD)
        paths.append(p)
    results = files.rewrite_many(paths, ReplaceMode.SINGLE_LINE, RewriteOptions(), jobs=2)
    assert [r.suggestion for r in results] == [NEW, NEW]
    assert InlinePool.created[-1].initargs == (logging.DEBUG,)
    assert configured[-1]['level'] == logging.DEBUG
