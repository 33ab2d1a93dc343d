"""
Game of Life viewer with Pygame.

Controls:
    SPACE       - Pause/Resume simulation
    N           - Single step while paused
    R           - Reseed with a random grid
    ESC         - Quit

Usage: python -m life.visual [cols] [rows] [cell_size]
"""
import sys

import pygame

from life.config import (BLACK, CELL_SIZE, COLS, DARK_GREEN, ROWS, TICK_SECONDS, WHITE,
                         WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH, YELLOW)
from life.grid import CellState, Grid
from life.stepper import step_numpy


class LifeViewer:
    def __init__(self, cols: int = COLS, rows: int = ROWS, cell_size: int = CELL_SIZE):
        pygame.init()  # init pygame modules

        self.cols = cols                 # grid width in cells
        self.rows = rows                 # grid height in cells
        self.cell_size = cell_size       # cell size in pixels

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))  # main window
        pygame.display.set_caption(WINDOW_TITLE)  # window title

        self.grid_surface = pygame.Surface((cols * cell_size, rows * cell_size))  # grid canvas

        self.grid = Grid.new_random(cols, rows)  # random start state

        self.running = True              # reference driver starts immediately
        self.generation = 0              # generation counter
        self.tick_rate = round(1 / TICK_SECONDS)  # sim steps per second

        self.clock = pygame.time.Clock()                 # frame timing
        self.font = pygame.font.Font(None, 22)           # UI font

    def reseed(self):
        self.grid = Grid.new_random(self.cols, self.rows)  # fresh Bernoulli field
        self.generation = 0  # reset counter

    def step(self):
        self.grid = step_numpy(self.grid)  # replace, never mutate
        self.generation += 1  # increment gen

    def draw_cell(self, coord, state):
        # row 0 is drawn at the bottom, as in a y-up world
        rect = pygame.Rect(
            coord.col * self.cell_size,
            (self.rows - 1 - coord.row) * self.cell_size,
            self.cell_size,
            self.cell_size
        )
        pygame.draw.rect(self.grid_surface, WHITE if state == CellState.ALIVE else BLACK, rect)

    def draw(self):
        self.grid.for_each_cell(self.draw_cell)

    def draw_ui(self):
        if not self.running:  # show status only when paused
            text = self.font.render(f"PAUSED  Gen: {self.generation}  Cells: {self.grid.alive_count()}",
                                    True, YELLOW)
            self.screen.blit(text, (5, 5))

    def handle_events(self) -> bool:
        for event in pygame.event.get():  # poll events
            if event.type == pygame.QUIT:
                return False  # close window

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False  # quit

                elif event.key == pygame.K_SPACE:
                    self.running = not self.running  # toggle run/pause

                elif event.key == pygame.K_r:
                    self.reseed()  # random reset

                elif event.key == pygame.K_n and not self.running:
                    self.step()  # single step

        return True  # keep running

    def run(self):
        while self.handle_events():  # main loop
            if self.running:
                self.step()  # advance simulation

            self.screen.fill(DARK_GREEN)  # clear window
            self.draw()  # draw grid surface
            offset_x = (WINDOW_WIDTH - self.grid_surface.get_width()) // 2   # center horizontally
            offset_y = (WINDOW_HEIGHT - self.grid_surface.get_height()) // 2  # center vertically
            self.screen.blit(self.grid_surface, (offset_x, offset_y))  # blit grid
            self.draw_ui()  # draw overlays

            pygame.display.flip()  # swap buffers

            self.clock.tick(self.tick_rate if self.running else 60)  # sim rate vs UI rate

        pygame.quit()  # clean exit


def main():
    cols = int(sys.argv[1]) if len(sys.argv) > 1 else COLS             # CLI width
    rows = int(sys.argv[2]) if len(sys.argv) > 2 else ROWS             # CLI height
    cell_size = int(sys.argv[3]) if len(sys.argv) > 3 else CELL_SIZE   # CLI zoom

    LifeViewer(cols, rows, cell_size).run()  # start app


if __name__ == "__main__":
    main()  # entry point
