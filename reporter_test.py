from knight import parse_notation
from reporter import PathReporter, format_path


def path_of(*texts):
    return tuple(parse_notation(t) for t in texts)


class TestFormatPath:
    """Test rendering of a path in travel order"""

    def test_arrow_separated(self):
        assert format_path(path_of('A1', 'B3', 'D4')) == 'A1 -> B3 -> D4'

    def test_single_move(self):
        assert format_path(path_of('A1', 'C2')) == 'A1 -> C2'


class TestPathReporter:
    """Test the printing sink and its tally"""

    def test_report_counts_and_echoes(self):
        lines = []
        reporter = PathReporter(echo=lines.append)
        assert reporter.report(path_of('A1', 'B3')) == 'A1 -> B3'
        reporter.report(path_of('A1', 'C2', 'D4', 'B3'))
        assert reporter.count == 2
        assert lines == ['A1 -> B3', 'A1 -> C2 -> D4 -> B3']

    def test_summary_no_paths(self):
        lines = []
        reporter = PathReporter(echo=lines.append)
        message = reporter.summary()
        assert 'No moves found' in message
        assert lines == [message]

    def test_summary_with_count(self):
        reporter = PathReporter(echo=lambda _: None)
        reporter.report(path_of('A1', 'B3'))
        assert reporter.summary() == '# of paths found: 1'

    def test_summary_explicit_count(self):
        reporter = PathReporter(echo=lambda _: None)
        assert reporter.summary(7) == '# of paths found: 7'
        assert 'No moves found' in reporter.summary(0)

    def test_default_sink_is_click_echo(self, capsys):
        PathReporter().report(path_of('H8', 'G6'))
        assert capsys.readouterr().out == 'H8 -> G6\n'
