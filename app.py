from flask import Flask, request, jsonify
import click

from knight import InvalidNotation, parse_notation, format_notation, neighbours, search
from reporter import PathReporter

app = Flask(__name__)
app.config.from_mapping(
    MAX_MOVES_LIMIT=8, # 接口允许的最大步数
    MAX_PATHS_RETURNED=200, # 接口最多返回的路径条数
)
app.config.from_prefixed_env('KNIGHT')


def read_max_moves(value): # 接受正整数或数字字符串
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f'最大步数必须是正整数: {value!r}')
    return value


def error(message, status=400):
    return jsonify({
        'success': False,
        'message': message
    }), status


@app.route('/api/paths', methods=['POST'])
def find_paths(): # 枚举起点到终点的所有马步路径
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        source = parse_notation(data.get('source'))
        dest = parse_notation(data.get('dest'))
        max_moves = read_max_moves(data.get('max_moves'))
    except ValueError as e:
        app.logger.info('rejected path request %r: %s', data, e)
        return error(str(e))

    limit = app.config['MAX_MOVES_LIMIT']
    if max_moves > limit:
        return error(f'最大步数不能超过{limit}')

    count, paths = search(source, dest, max_moves)
    app.logger.info('%s -> %s within %d moves: %d paths',
                    data['source'], data['dest'], max_moves, count)

    shown = app.config['MAX_PATHS_RETURNED']
    return jsonify({
        'success': True,
        'count': count,
        'paths': [[format_notation(square) for square in path] for path in paths[:shown]],
        'truncated': count > shown,
        'message': f'共有{count}条路径' if count else '没有找到路径，请尝试其他步数'
    })


@app.route('/api/moves', methods=['GET'])
def knight_moves(): # 查询某格马可以跳到的位置
    try:
        square = parse_notation(request.args.get('square'))
    except InvalidNotation as e:
        return error(str(e))

    return jsonify({
        'success': True,
        'square': format_notation(square),
        'moves': [format_notation(v) for v in neighbours(square)]
    })


class NotationType(click.ParamType):
    name = 'square'

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        try:
            return parse_notation(value.strip().upper())
        except InvalidNotation:
            self.fail(f'{value!r} is not a valid chess notation, e.g. A1', param, ctx)


@app.cli.command('paths')
@click.option('--source', type=NotationType(),
              prompt='Please type the STARTING point as an algebraic chess notation')
@click.option('--dest', type=NotationType(),
              prompt='Please type the ENDING point as an algebraic chess notation')
@click.option('--max-moves', prompt='Please enter the maximum moves allowed',
              type=click.IntRange(min=1))
def paths_command(source, dest, max_moves):
    """Print every knight path from SOURCE to DEST within MAX_MOVES moves."""
    reporter = PathReporter()
    click.echo('\nMoves:\n')
    search(source, dest, max_moves, on_path=reporter.report)
    click.echo()
    reporter.summary()


if __name__ == '__main__':
    app.run(debug=True, port=5000)
