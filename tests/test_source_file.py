"""
Unit tests for GoSourceFile: parsing, lookup, package renaming and saving.
"""

from pathlib import Path

import pytest

from gorun.exceptions import EmptyNameError, ParserError, SourceNotFoundError
from gorun.syntax import GoSourceFile, structurally_equal


SRC1_RENDERED = (
    "package testdata\n"
    "\n"
    'import "fmt"\n'
    "\n"
    "func test() {\n"
    '\tfmt.Println("test")\n'
    "}\n"
    "\n"
    "func test1() {\n"
    '\tfmt.Println("test1")\n'
    "}\n"
)


def parse(testdata: Path, name: str) -> GoSourceFile:
    return GoSourceFile.parse(testdata / name)


class TestParse:
    """Test parsing Go files into declarations."""

    def test_package_and_declarations(self, testdata):
        source = parse(testdata, "src3.go")
        assert source.package_name == "testdata"
        kinds = [d.kind for d in source.declarations]
        assert kinds == ["import", "type", "func", "method", "func", "func"]

    def test_declaration_order_preserved(self, testdata):
        source = parse(testdata, "src3.go")
        names = [d.name for d in source.declarations if d.kind in ("func", "method")]
        assert names == ["test", "more", "more", "other"]

    def test_missing_file(self, testdata):
        missing = str(testdata / "fileNotFound.go")
        with pytest.raises(SourceNotFoundError) as exc_info:
            GoSourceFile.parse(missing)
        assert str(exc_info.value) == f"open {missing}: no such file or directory"

    def test_missing_file_is_parser_error(self, testdata):
        with pytest.raises(ParserError):
            GoSourceFile.parse(testdata / "fileNotFound.go")

    def test_syntax_error(self, testdata):
        with pytest.raises(ParserError) as exc_info:
            parse(testdata, "broken.go")
        assert "syntax error at line" in str(exc_info.value)

    def test_missing_package_clause(self):
        with pytest.raises(ParserError):
            GoSourceFile.parse_bytes(b"func f() {}\n")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.go"
        path.write_bytes(b"package p\n\nfunc f() {\n\tprintln(\"\xff\xfe\")\n}\n")
        with pytest.raises(ParserError) as exc_info:
            GoSourceFile.parse(path)
        assert str(exc_info.value) == f"Failed to parse {path}: illegal UTF-8 encoding"

    def test_parameters_and_results(self, testdata):
        source = parse(testdata, "argsReturns.go")
        assert source.find_function("noArgsReturns").has_args_or_returns() is False
        assert len(source.find_function("hasArgs").params) == 2
        assert source.find_function("hasReturns").results == ["int"]
        decl = source.find_function("hasArgsAndReturns")
        assert decl.params == ["s ...string"]
        assert len(decl.results) == 2

    def test_empty_result_list_counts_as_results(self, testdata):
        decl = parse(testdata, "argsReturns.go").find_function("emptyResults")
        assert decl.results == []
        assert decl.has_result is True
        assert decl.has_args_or_returns() is True


class TestLookup:
    """Test find_function / contains_function."""

    @pytest.mark.parametrize(
        "fixture,fn,expected",
        [
            ("src1.go", "test", True),
            ("src1.go", "notContains", False),
            ("src1.go", "", False),
            ("empty.go", "test", False),
            ("inner.go", "inner", False),
            ("src1.go", "Test", False),
        ],
    )
    def test_contains_function(self, testdata, fixture, fn, expected):
        source = parse(testdata, fixture)
        assert source.contains_function(fn) is expected
        found = source.find_function(fn)
        if expected:
            assert found is not None and found.name == fn
        else:
            assert found is None

    def test_methods_are_not_funcs(self, testdata):
        source = parse(testdata, "src3.go")
        index = source.find_function_index("more")
        assert source.declarations[index].kind == "func"
        assert index == 4


class TestRenamePackage:
    """Test rename_package."""

    def test_rename(self, testdata):
        source = parse(testdata, "src1.go")
        source.rename_package("pkg")
        assert structurally_equal(parse(testdata, "src1pkg.go"), source)

    def test_rename_same_name_is_noop(self, testdata):
        source = parse(testdata, "src1.go")
        before = source.render()
        source.rename_package("testdata")
        assert source.render() == before

    def test_empty_name(self, testdata):
        source = parse(testdata, "src1.go")
        with pytest.raises(EmptyNameError) as exc_info:
            source.rename_package("")
        assert str(exc_info.value) == "package name must be not empty"
        assert source.package_name == "testdata"


class TestRender:
    """Test canonical rendering."""

    def test_render_src1(self, testdata):
        assert parse(testdata, "src1.go").render() == SRC1_RENDERED

    def test_str_is_render(self, testdata):
        source = parse(testdata, "src1.go")
        assert str(source) == source.render()

    def test_comments_and_blank_lines_ignored(self, testdata):
        plain = parse(testdata, "src1.go")
        noisy = parse(testdata, "src1comments.go")
        assert noisy.render() == plain.render()
        assert "//" not in noisy.render()
        assert "/*" not in noisy.render()

    def test_render_is_stable(self, testdata):
        first = parse(testdata, "syntax.go").render()
        second = GoSourceFile.parse_bytes(first.encode("utf8")).render()
        assert first == second

    def test_render_keeps_literals(self, testdata):
        rendered = parse(testdata, "syntax.go").render()
        assert "`raw\nstring`" in rendered
        assert 'fmt.Println("literal")' in rendered
        assert "m[names[i]]++" in rendered
        assert "'r'" in rendered

    def test_structurally_equal_none(self, testdata):
        source = parse(testdata, "src1.go")
        assert structurally_equal(None, None)
        assert not structurally_equal(source, None)
        assert not structurally_equal(None, source)


class TestSaveTemp:
    """Test writing rendered source to temp files."""

    def test_save_temp_creates_and_cleans(self, testdata):
        source = parse(testdata, "src1.go")
        path, cleaner = source.save_temp()
        try:
            assert path.name == "main.go"
            assert path.read_text() == SRC1_RENDERED
        finally:
            cleaner()
        assert not path.parent.exists()
        # Cleaner is safe to call again
        cleaner()

    def test_save_temp_into_given_dir(self, testdata, tmp_path):
        source = parse(testdata, "src1.go")
        path, cleaner = source.save_temp(dest_dir=tmp_path, filename="x.go")
        assert path == tmp_path / "x.go"
        assert path.exists()
        cleaner()
        cleaner()
        assert not path.exists()
        assert tmp_path.exists()

    def test_save_temp_failure_propagates(self, testdata, tmp_path):
        source = parse(testdata, "src1.go")
        with pytest.raises(OSError):
            source.save_temp(dest_dir=tmp_path / "missing")

    def test_temp_source_cleans_up_on_error(self, testdata):
        source = parse(testdata, "src1.go")
        with pytest.raises(RuntimeError):
            with source.temp_source() as path:
                saved = path
                raise RuntimeError("boom")
        assert not saved.exists()
        assert not saved.parent.exists()
