"""
Main game engine - handles the game loop, input, and coordination.
"""
import pygame
from config import FIELD_WIDTH, FIELD_HEIGHT, FPS, GAME_TITLE, COLOR_SPACE, COLOR_UI, SIM_SEED
from game.graphics.asteroid_render import render_asteroids, screen_to_world
from game.graphics.vfx import VFXSystem
from game.geometry.shapes import lies_inside
from game.geometry.vector import FIELD
from game.sim.debug import debug_log
from game.sim.determinism import derive_seed, get_sim_seed, set_sim_seed
from game.systems import init, split, tick


class GameEngine:
    """Main game engine class."""

    def __init__(self, seed: int | None = None):
        pygame.init()
        pygame.font.init()

        # Every random draw threads through self.seed, so a given start seed replays exactly.
        set_sim_seed(SIM_SEED if seed is None else seed)
        self.seed = get_sim_seed()
        self.reseeds = 0

        self.screen = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 20)
        self.running = True
        self.paused = False

        self.bounds = FIELD
        self.dt = 1.0 / FPS
        self.vfx = VFXSystem(self.bounds)
        self.asteroids = []
        self.splits = 0
        self.new_field()

    def new_field(self):
        """Populate a fresh field from the current seed."""
        self.asteroids, self.seed = init(self.bounds).run(self.seed)
        self.vfx.clear()
        debug_log("engine", f"new field: {len(self.asteroids)} rocks, seed={self.seed}")

    def reseed(self):
        self.reseeds += 1
        self.seed = derive_seed(get_sim_seed(), f"reseed:{self.reseeds}")
        self.splits = 0
        self.new_field()

    def split_at(self, point):
        """Split the first rock containing `point`; returns True if one was hit."""
        for i, rock in enumerate(self.asteroids):
            if not lies_inside(point, rock, self.bounds):
                continue
            (children, debris), self.seed = split(rock).run(self.seed)
            self.asteroids = self.asteroids[:i] + self.asteroids[i + 1:] + children
            self.vfx.emit(debris)
            self.splits += 1
            return True
        return False

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_p:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.reseed()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.split_at(screen_to_world(self.bounds, *event.pos))

    def update(self):
        if self.paused:
            return
        self.asteroids = tick(self.dt, self.asteroids, self.bounds)
        self.vfx.update(self.dt)
        if not self.asteroids:
            self.new_field()

    def render(self):
        self.screen.fill(COLOR_SPACE)
        render_asteroids(self.screen, self.asteroids, self.bounds)
        self.vfx.render(self.screen)
        label = f"rocks {len(self.asteroids)}  splits {self.splits}  seed {get_sim_seed()}"
        if self.paused:
            label += "  [paused]"
        self.screen.blit(self.font.render(label, True, COLOR_UI), (8, 8))
        pygame.display.flip()

    def run(self):
        """Main game loop. Simulation uses a fixed dt; the clock only paces frames."""
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            self.update()
            self.render()
        pygame.quit()
