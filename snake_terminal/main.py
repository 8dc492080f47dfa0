import argparse
import logging
import random
import sys
from typing import Dict, Iterator, List, Optional

from snake_terminal.config import Settings, load_settings, validate_settings
from snake_terminal.domain import (
    BORDER_CHAR,
    SNAKE_CHAR,
    FRUIT_CHAR,
    EMPTY_CHAR,
    READ_TIME_MS,
    INITIAL_LENGTH,
    WALL,
    SELF,
    Point,
    Direction,
    GameState,
    initialize_snake,
)
from snake_terminal.domain.constants import GAME_OVER_TEXT, MIN_WIDTH, MIN_HEIGHT
from snake_terminal.players import Player, KeyboardPlayer
from snake_terminal.services import TerminalAdapter

logger = logging.getLogger(__name__)

# Glyph blinked at the crash point for each death reason
CRASH_GLYPHS: Dict[str, str] = {
    WALL: BORDER_CHAR,
    SELF: SNAKE_CHAR,
}


class NoFreeCellError(RuntimeError):
    """Raised when the snake covers every interior cell and no fruit fits."""


class SnakeGame:
    """
    Manages:
      - Board (width, height), fixed at construction
      - The snake and its direction
      - The fruit
      - Score (derived from the snake length)
      - The tick loop and the game-over sequence

    Only the cells that change on a tick are redrawn: the new head, the vacated
    tail and the score line.
    """
    def __init__(
        self,
        terminal: TerminalAdapter,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        tick_ms: int = READ_TIME_MS
    ):
        width, raw_height = terminal.size()
        # The last row holds the score line
        height = raw_height - 1
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise ValueError(
                f"Terminal too small: need at least {MIN_WIDTH}x{MIN_HEIGHT + 1}, got {width}x{raw_height}"
            )

        self.terminal = terminal
        self.player = player if player is not None else KeyboardPlayer()
        self.rng = rng if rng is not None else random.Random()
        self.tick_ms = tick_ms
        self.width = width
        self.height = height

        self.snake = initialize_snake(width, height)
        self.fruit: Optional[Point] = None
        self.direction = Direction.UP
        self.tick = 0
        self.game_over = False
        self.crash_point: Optional[Point] = None

    @property
    def score(self) -> int:
        return len(self.snake) - INITIAL_LENGTH

    def run(self) -> None:
        """Play until the player quits, either mid-game or from the game-over screen."""
        self.init()
        while True:
            key = self.terminal.poll_input(self.tick_ms)
            if self.process_command(key):
                logger.info(f"Player quit at tick {self.tick} with score {self.score}")
                break

            if self.process_game():
                break

            self.terminal.flush()

        self.terminal.clear_all()

    def init(self) -> None:
        """Set up the terminal and draw the border, fruit, snake and score."""
        logger.info(f"Starting game on a {self.width}x{self.height} board")
        self.terminal.setup()
        self.draw_box()
        self.position_fruit()
        for point in self.snake:
            self.terminal.draw_at(point, SNAKE_CHAR)
        self.write_score()
        self.terminal.flush()

    def write_score(self) -> None:
        self.terminal.write_at(Point(0, self.height), f"Score: {self.score}")

    def process_command(self, key: Optional[str]) -> bool:
        """Apply the key read this tick. Returns True when the player asked to quit."""
        if self.player.wants_quit(key):
            return True

        direction = self.player.get_move(key)
        if direction is not None:
            self.change_direction(direction)
        return False

    def change_direction(self, new_direction: Direction) -> None:
        # Reversing would run the head straight into the neck
        if self.direction.is_opposite(new_direction):
            return
        if new_direction is not self.direction:
            logger.debug(f"Tick {self.tick}: direction {self.direction.name} -> {new_direction.name}")
        self.direction = new_direction

    def process_game(self) -> bool:
        """
        Advance the snake by one cell.

        Returns True when the snake crashed and the game-over sequence has
        finished, False otherwise.
        """
        head = self.get_next_snake_position()
        self.tick += 1

        reason = self.check_crash(head)
        if reason is not None:
            self.crash(head, reason)
            return True

        self.snake.push_head(head)
        self.terminal.draw_at(head, SNAKE_CHAR)
        if head == self.fruit:
            self.position_fruit()
        else:
            tail = self.snake.pop_tail()
            self.terminal.draw_at(tail, EMPTY_CHAR)

        self.write_score()
        return False

    def get_next_snake_position(self) -> Point:
        return self.snake.head.offset(self.direction)

    def check_crash(self, point: Point) -> Optional[str]:
        """Return the death reason if the head moving to `point` crashes, else None."""
        if self.is_border(point):
            return WALL
        if point in self.snake:
            return SELF
        return None

    def is_border(self, point: Point) -> bool:
        if point.x <= 0 or point.x >= self.width - 1:
            return True
        if point.y <= 0 or point.y >= self.height - 1:
            return True
        return False

    def crash(self, point: Point, reason: str) -> None:
        """
        Show the game-over banner and blink the crash point once per tick
        until the player quits.
        """
        self.snake.kill(reason, self.tick)
        self.game_over = True
        self.crash_point = point
        logger.info(f"Snake crashed ({reason}) at ({point.x}, {point.y}) on tick {self.tick}, score {self.score}")
        logger.debug(f"Final board:\n{self.get_current_state().print_board()}")

        self.write_score()
        self.terminal.write(GAME_OVER_TEXT)
        self.terminal.flush()

        blink_char = CRASH_GLYPHS[reason]
        current = EMPTY_CHAR
        while True:
            key = self.terminal.poll_input(self.tick_ms)
            if self.player.wants_quit(key):
                break
            self.terminal.draw_at(point, current)
            current = blink_char if current == EMPTY_CHAR else EMPTY_CHAR
            self.terminal.flush()

    def draw_box(self) -> None:
        for point in self.box_points():
            self.terminal.draw_at(point, BORDER_CHAR)

    def box_points(self) -> Iterator[Point]:
        """
        Walk the border: top row left to right, right column top to bottom,
        bottom row right to left, left column bottom to top.
        """
        for x in range(self.width):
            yield Point(x, 0)
        for y in range(self.height):
            yield Point(self.width - 1, y)
        for x in reversed(range(self.width)):
            yield Point(x, self.height - 1)
        for y in reversed(range(self.height)):
            yield Point(0, y)

    def position_fruit(self) -> None:
        """Place the fruit on a random interior cell the snake does not cover, and draw it."""
        interior_cells = (self.width - 2) * (self.height - 2)
        if len(self.snake) >= interior_cells:
            raise NoFreeCellError("No free cell left for the fruit")

        while True:
            point = Point(
                self.rng.randint(1, self.width - 2),
                self.rng.randint(1, self.height - 2),
            )
            if point not in self.snake:
                break

        self.terminal.draw_at(point, FRUIT_CHAR)
        self.fruit = point
        logger.debug(f"Tick {self.tick}: fruit placed at ({point.x}, {point.y})")

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        positions: List[Point] = list(self.snake)
        if self.crash_point is not None:
            positions.insert(0, self.crash_point)
        return GameState(
            tick=self.tick,
            snake_positions=positions,
            fruit=self.fruit,
            width=self.width,
            height=self.height,
            score=self.score,
            direction=self.direction,
            alive=self.snake.alive,
            death_reason=self.snake.death_reason
        )


def configure_logging(settings: Settings) -> None:
    """
    Log to a file when one is configured; otherwise nothing is logged, since
    stderr shares the screen with the game.
    """
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.getLogger('snake_terminal').addHandler(logging.NullHandler())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys or WASD steer, Esc quits."
    )
    parser.add_argument("--tick-ms", type=int, default=None,
                        help=f"Length of one tick in milliseconds (default {READ_TIME_MS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for fruit placement")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with any command line flags applied on top."""
    settings = load_settings()
    if args.tick_ms is not None:
        settings.tick_ms = args.tick_ms
    if args.seed is not None:
        settings.seed = args.seed
    if args.log_file is not None:
        settings.log_file = args.log_file
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()
    validate_settings(settings)
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValueError as e:
        print(f"snake-terminal: {e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    rng = random.Random(settings.seed)

    try:
        with TerminalAdapter() as terminal:
            game = SnakeGame(terminal, rng=rng, tick_ms=settings.tick_ms)
            game.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return 0
    except (OSError, RuntimeError, ValueError) as e:
        logger.exception("Game aborted")
        print(f"snake-terminal: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
