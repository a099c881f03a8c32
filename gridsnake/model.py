"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
The tick scheduler, high-score store and analytics sink are handed in by
the controller; the model only talks to them through `reschedule`/`cancel`,
`get`/`set` and `log_event`.

Classes:
    Direction   — immutable (dx, dy) value object
    SnakeGame   — state machine, update step, food placement
"""

import logging
import random
import time

from .analytics import best_effort
from .config import (
    GRID_COUNT, START_LENGTH,
    INITIAL_SPEED, MIN_SPEED, SPEED_DECREASE, SPEED_STEP,
    SCORE_PER_FOOD, MILESTONE_EVERY,
    STATE_IDLE, STATE_RUNNING, STATE_OVER, STATE_WON,
    EVENT_START, EVENT_FOOD, EVENT_MILESTONE, EVENT_HIGH_SCORE, EVENT_OVER,
)

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    UP    = None  # filled below after class definition
    DOWN  = None
    LEFT  = None
    RIGHT = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
ALL_DIRS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


def tick_interval(score: int) -> int:
    """Milliseconds between ticks at the given score."""
    reduction = (score // SPEED_STEP) * SPEED_DECREASE
    return max(INITIAL_SPEED - reduction, MIN_SPEED)


def start_snake(grid_count: int = GRID_COUNT) -> list[Cell]:
    """Horizontal segment centred on the board, head on the right."""
    c = grid_count // 2
    return [(c - i, c) for i in range(START_LENGTH)]


# ─────────────────────────── SnakeGame ───────────────────────────
class SnakeGame:
    """
    Top-level model.  Owns all game state.

    The controller calls `request_start()` / `request_turn()` for input
    and `tick()` every time the scheduler fires.
    """

    def __init__(
        self,
        scheduler,
        store,
        sink,
        rng: random.Random | None = None,
        clock=time.monotonic,
        grid_count: int = GRID_COUNT,
    ):
        self.scheduler = scheduler
        self.store = store
        self.sink = sink
        self.rng = rng or random.Random()
        self.grid_count = grid_count
        self._clock = clock

        self.state: str = STATE_IDLE
        self.snake: list[Cell] = []
        self.dir: Direction = Direction.RIGHT
        self._next_dir: Direction = Direction.RIGHT
        self.food: Cell | None = None
        self.score: int = 0
        self.interval: int = INITIAL_SPEED
        self.started_at: float = 0.0
        self.high_score: int = self._load_high_score()
        self._best_at_start: int = self.high_score
        self._reset_entities()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def pending_direction(self) -> Direction:
        return self._next_dir

    @property
    def is_running(self) -> bool:
        return self.state == STATE_RUNNING

    @property
    def is_new_high_score(self) -> bool:
        """True once the current (or last) run beat the best it started with."""
        return self.score > self._best_at_start

    # ── Public API ───────────────────────────────────────────────
    def request_start(self) -> bool:
        """Begin a fresh run. Ignored while a run is in progress."""
        if self.state == STATE_RUNNING:
            return False
        self._reset_entities()
        self.state = STATE_RUNNING
        self.started_at = self._clock()
        self._best_at_start = self.high_score
        self._notify(EVENT_START, high_score=self.high_score)
        self.scheduler.reschedule(self.interval)
        logger.debug("Run started, tick every %d ms", self.interval)
        return True

    def request_turn(self, new_dir: Direction) -> bool:
        """
        Queue a direction change for the next tick.

        Outside a run this starts one instead (the run still begins
        facing right). Reversals are dropped. Returns True if the turn
        is now pending.
        """
        if self.state != STATE_RUNNING:
            self.request_start()
            return False
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def tick(self) -> None:
        """Advance the snake one cell. No-op unless running."""
        if self.state != STATE_RUNNING:
            return

        self.dir = self._next_dir
        hx, hy = self.head
        new_head = (hx + self.dir.x, hy + self.dir.y)

        if not self._in_bounds(new_head):
            self._finish(STATE_OVER)
            return

        if new_head in self.snake:
            self._finish(STATE_OVER)
            return

        self.snake.insert(0, new_head)
        ate = new_head == self.food
        if ate:
            self._eat()
        else:
            self.snake.pop()

        self._update_high_score()

        if ate and self.food is None:
            self._finish(STATE_WON)

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self.snake = start_snake(self.grid_count)
        self.dir = Direction.RIGHT
        self._next_dir = Direction.RIGHT
        self.score = 0
        self.interval = tick_interval(self.score)
        self.food = self._spawn_food()

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_count and 0 <= y < self.grid_count

    def _spawn_food(self) -> Cell | None:
        """Random free cell, or None once the snake covers the board."""
        occupied = set(self.snake)
        if len(occupied) >= self.grid_count * self.grid_count:
            return None
        while True:
            pos = (self.rng.randrange(self.grid_count), self.rng.randrange(self.grid_count))
            if pos not in occupied:
                return pos

    def _eat(self) -> None:
        self.score += SCORE_PER_FOOD
        self._notify(EVENT_FOOD, score=self.score, snake_length=len(self.snake))
        if self.score % MILESTONE_EVERY == 0:
            self._notify(EVENT_MILESTONE, milestone=self.score)

        self.food = self._spawn_food()
        if self.food is None:
            return

        self.interval = tick_interval(self.score)
        self.scheduler.reschedule(self.interval)

    def _update_high_score(self) -> None:
        if self.score <= self.high_score:
            return
        previous = self.high_score
        self.high_score = self.score
        best_effort(self.store.set, self.high_score)
        self._notify(
            EVENT_HIGH_SCORE,
            new_high_score=self.high_score,
            previous_high_score=previous,
            improvement=self.high_score - previous,
        )

    def _finish(self, state: str) -> None:
        self.scheduler.cancel()
        self.state = state
        duration_ms = int((self._clock() - self.started_at) * 1000)
        self._notify(
            EVENT_OVER,
            result="won" if state == STATE_WON else "lost",
            final_score=self.score,
            high_score=self.high_score,
            snake_length=len(self.snake),
            game_duration_ms=duration_ms,
            is_new_high_score=self.is_new_high_score,
        )
        logger.info("Run ended (%s) with score %d", state, self.score)

    def _load_high_score(self) -> int:
        value = best_effort(self.store.get)
        if isinstance(value, int) and value > 0:
            return value
        return 0

    def _notify(self, name: str, **params) -> None:
        best_effort(self.sink.log_event, name, params)
