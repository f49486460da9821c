import logging
import pygame, sys
from tetris import Game
from tetris_config import CONFIG
from tetris_events import EventQueue, Move, SoftDrop, Rotate, Restart, GravityTick, RandomTick, LEFT, RIGHT
from tetris_layout import compute_dims
from tetris_render import Renderer
from tetris_rng import RandomSequence
from tetris_state import initial_state

KEYMAP = {
    pygame.K_a: Move(LEFT), pygame.K_LEFT: Move(LEFT),
    pygame.K_d: Move(RIGHT), pygame.K_RIGHT: Move(RIGHT),
    pygame.K_s: SoftDrop(), pygame.K_DOWN: SoftDrop(),
    pygame.K_w: Rotate(), pygame.K_UP: Rotate(),
    pygame.K_r: Restart(),
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Bedrock Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    clock = pygame.time.Clock()

    rng = RandomSequence(CONFIG["SEED"])
    game = Game(initial_state(seed=rng.seed), Renderer(screen, dims, font, big_font), EventQueue())
    game.render()

    grav_acc = rand_acc = 0
    while True:
        dt = clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.stop()
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key in KEYMAP:
                game.post(KEYMAP[e.key])

        # tick sources pause while the game is over; only Restart gets through
        if game.running:
            grav_acc += dt
            rand_acc += dt
            while grav_acc >= CONFIG["TICK_RATE_MS"]:
                grav_acc -= CONFIG["TICK_RATE_MS"]
                game.post(GravityTick())
            while rand_acc >= CONFIG["RANDOM_TICK_MS"]:
                rand_acc -= CONFIG["RANDOM_TICK_MS"]
                game.post(RandomTick(rng.next_hash()))

        if game.pump():
            pygame.display.flip()


if __name__ == '__main__':
    main()
