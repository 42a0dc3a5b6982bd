from cubegame.config import settings
from cubegame.console import ConsoleGraphics, ConsoleInput
from cubegame.game import Game
from cubegame.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    configure_logging()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info("settings", cube_size=settings.cube_size, shuffle_iterations=settings.shuffle_iterations)

    game = Game(ConsoleGraphics(), ConsoleInput(), settings)
    try:
        game.loop()
    except KeyboardInterrupt:
        logger.info("interrupted", turns=game.turns)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
