import click

from knight import format_notation

ARROW = ' -> '


def format_path(path):
    return ARROW.join(format_notation(square) for square in path)


class PathReporter:
    """Print found paths in travel order and keep a running tally."""

    def __init__(self, echo=click.echo):
        self.echo = echo
        self.count = 0

    def report(self, path):
        line = format_path(path)
        self.count += 1
        self.echo(line)
        return line

    def summary(self, count=None):
        if count is None:
            count = self.count
        if count == 0:
            message = 'No moves found! Try another number of moves.'
        else:
            message = f'# of paths found: {count}'
        self.echo(message)
        return message
