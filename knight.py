import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
FILES = 'ABCDEFGH'
RANKS = '87654321' # 第0行是第8横排

MOVES = [
    (2, -1), (2, 1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2)
] # 八种跳法，顺序决定路径输出顺序


class InvalidNotation(ValueError):
    pass


class Square(NamedTuple):
    row: int
    column: int

    def __add__(self, offset):
        return Square(self.row + offset[0], self.column + offset[1])

    def __str__(self):
        if not is_on_board(self):
            return repr(tuple(self))
        return format_notation(self)


def is_on_board(square) -> bool:
    return 0 <= square[0] < BOARD_SIZE and 0 <= square[1] < BOARD_SIZE


def parse_notation(text) -> Square:
    """Map algebraic notation such as ``"A1"`` to a board square.

    Only uppercase files ``A``-``H`` followed by a rank ``1``-``8`` are
    accepted; anything else raises :class:`InvalidNotation`.
    """
    if not isinstance(text, str) or len(text) != 2 \
            or text[0] not in FILES or text[1] not in RANKS:
        raise InvalidNotation(f'invalid chess notation: {text!r}')
    return Square(RANKS.index(text[1]), FILES.index(text[0]))


def format_notation(square) -> str:
    if not is_on_board(square):
        raise InvalidNotation(f'square off the board: {tuple(square)!r}')
    return FILES[square[1]] + RANKS[square[0]]


def neighbours(square):
    square = Square(*square)
    return [square + move for move in MOVES if is_on_board(square + move)]


class Branch(NamedTuple):
    """One search branch: the path so far and the squares it has visited."""
    path: tuple
    visited: frozenset

    @classmethod
    def root(cls, source):
        return cls((source,), frozenset((source,)))

    @property
    def current(self):
        return self.path[-1]

    def extend(self, square):
        # 复制后再扩展，兄弟分支互不影响
        return Branch(self.path + (square,), self.visited | {square})


def _check_square(square, name):
    if not isinstance(square, tuple) or len(square) != 2 \
            or not all(isinstance(v, int) for v in square) or not is_on_board(square):
        raise InvalidNotation(f'{name} is not a square on the board: {square!r}')
    return Square(*square)


def _check_max_moves(max_moves):
    if isinstance(max_moves, bool) or not isinstance(max_moves, int) or max_moves <= 0:
        raise ValueError(f'max_moves must be a positive integer, got {max_moves!r}')


class KnightPathSolver:
    def __init__(self, source, dest, max_moves, on_path=None):
        self.source = _check_square(source, 'source')
        self.dest = _check_square(dest, 'dest')
        _check_max_moves(max_moves)
        self.max_moves = max_moves
        self.on_path = on_path # 每找到一条路径时回调
        self.paths = [] # 已找到的路径
        self.counter = 0 # 统计路径条数

    def next_moves(self, branch):
        """Yield the unvisited on-board squares reachable from ``branch`` in offset order."""
        for move in MOVES:
            square = branch.current + move
            if is_on_board(square) and square not in branch.visited:
                yield square

    def iter_paths(self):
        """Depth-first enumeration driven by an explicit stack.

        Each stack item is either a finished path or a branch still to expand.
        Items are pushed in reverse offset order, so they pop in the same
        order a recursive search would visit them. Reaching the destination
        ends the branch: offsets after it in the table are not tried from
        that square.
        """
        stack = [Branch.root(self.source)]
        while stack:
            item = stack.pop()
            if not isinstance(item, Branch):
                yield item
                continue

            pending = []
            for square in self.next_moves(item):
                if square == self.dest:
                    pending.append(item.path + (square,))
                    break # 到达终点，此分支不再尝试其余跳法
                if len(item.path) < self.max_moves:
                    pending.append(item.extend(square))
            stack.extend(reversed(pending))

    def count(self):
        logger.debug('searching %s -> %s within %d moves',
                     self.source, self.dest, self.max_moves)
        self.paths = []
        self.counter = 0
        for path in self.iter_paths():
            self.counter += 1
            self.paths.append(path)
            if self.on_path is not None:
                self.on_path(path)
        logger.debug('found %d paths from %s to %s', self.counter, self.source, self.dest)
        return self.counter


def iter_paths(source, dest, max_moves):
    return KnightPathSolver(source, dest, max_moves).iter_paths()


def search(source, dest, max_moves, on_path=None):
    """Enumerate every knight path from ``source`` to ``dest`` using at most ``max_moves`` moves.

    Returns ``(count, paths)`` where each path is a tuple of squares from
    source to destination.
    """
    solver = KnightPathSolver(source, dest, max_moves, on_path=on_path)
    solver.count()
    return solver.counter, solver.paths
