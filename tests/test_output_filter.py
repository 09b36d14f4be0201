"""
Unit tests for GoTestOutputFilter.
"""

import io
import subprocess
import sys

from gorun.runner.output_filter import GoTestOutputFilter


GO_TEST_OUTPUT = (
    b"=== RUN   TestMain\n"
    b"test1\n"
    b"ok  \texample.com/mod/hello\t0.005s\n"
)


class TestGoTestOutputFilter:
    """Test line filtering between go test and stdout."""

    def test_drops_summary_line(self):
        sink = io.StringIO()
        with GoTestOutputFilter(sink=sink) as output:
            output.write(GO_TEST_OUTPUT)
        assert sink.getvalue() == "=== RUN   TestMain\ntest1\n"

    def test_prefix_match_is_a_heuristic(self):
        sink = io.StringIO()
        with GoTestOutputFilter(sink=sink) as output:
            output.write(b"okay then\nnot ok\n")
        # Anything starting with "ok" is dropped, not just the summary line
        assert sink.getvalue() == "not ok\n"

    def test_custom_prefix(self):
        sink = io.StringIO()
        with GoTestOutputFilter(sink=sink, prefix="PASS") as output:
            output.write(b"PASS\nok  \tpkg\t0.1s\n")
        assert sink.getvalue() == "ok  \tpkg\t0.1s\n"

    def test_partial_writes_are_joined(self):
        sink = io.StringIO()
        with GoTestOutputFilter(sink=sink) as output:
            output.write(b"hel")
            output.write(b"lo\nwor")
            output.write(b"ld")
        assert sink.getvalue() == "hello\nworld\n"

    def test_write_reports_full_length(self):
        with GoTestOutputFilter(sink=io.StringIO()) as output:
            assert output.write(b"abc\n") == 4

    def test_crlf_stripped(self):
        sink = io.StringIO()
        with GoTestOutputFilter(sink=sink) as output:
            output.write(b"line\r\n")
        assert sink.getvalue() == "line\n"

    def test_close_is_idempotent(self):
        sink = io.StringIO()
        output = GoTestOutputFilter(sink=sink)
        output.write(b"x\n")
        output.close()
        output.close()
        assert sink.getvalue() == "x\n"

    def test_as_subprocess_stdout(self):
        sink = io.StringIO()
        script = "print('first'); print('ok  \\tpkg\\t0.1s'); print('last')"
        with GoTestOutputFilter(sink=sink) as output:
            subprocess.run([sys.executable, "-c", script], stdout=output, check=True)
        assert sink.getvalue() == "first\nlast\n"
