# piperush/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_ESCAPE, K_UP, K_DOWN, K_LEFT, K_RIGHT, K_r
from .config import WIDTH, HEIGHT, FPS, MOVE_STEP, SEED_DEFAULT
from .render import draw_frame
from .simulation import GameSimulation

log = logging.getLogger(__name__)

KEY_MOVES = {
    K_UP: (0.0, -MOVE_STEP),
    K_DOWN: (0.0, MOVE_STEP),
    K_LEFT: (-MOVE_STEP, 0.0),
    K_RIGHT: (MOVE_STEP, 0.0),
}


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="piperush")
    p.add_argument("--seed", type=int, default=None,
                   help="Pipe seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def resolve_seed(seed_arg):
    # None -> SEED_DEFAULT; -1 -> random
    if seed_arg is None:
        return SEED_DEFAULT
    if seed_arg == -1:
        return None
    return seed_arg


def handle_key(sim: GameSimulation, key: int) -> bool:
    """Apply one key press to the simulation. Returns False to quit."""
    if key == K_ESCAPE:
        return False
    if key in KEY_MOVES:
        sim.move_player(*KEY_MOVES[key])
    elif key == K_SPACE and sim.game_over:
        sim.restart()
    elif key == K_r:
        sim.restart()
    return True


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sim = GameSimulation(seed=resolve_seed(args.seed))
    log.info("starting with seed %s", sim.seed)

    pygame.init()
    pygame.display.set_caption("Pipe Rush")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(sim, event.key) and running

        sim.update()
        draw_frame(screen, sim.snapshot(), font, sim.cfg.pipe_height)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(run())
