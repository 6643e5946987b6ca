"""Windowed front end: draws the colonies and handles camera controls."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Any, Sequence

import numpy as np
import pygame

from antcolony import rng
from antcolony.environment import GRID_SIZE
from antcolony.simulation import (
    CELL_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Simulation,
    SimulationState,
)
from antcolony.verification import Verification
from antcolony.view import (
    INITIAL_DEFAULT_ZOOM_OUT,
    KEY_ZOOM_FACTOR,
    MOUSE_WHEEL_ZOOM_FACTOR,
    PAN_SPEED_FACTOR,
    Camera,
)

Color = tuple[int, int, int, int]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
MAGENTA = (255, 0, 255)
GOLD = (255, 215, 0)

PHEROMONE_VISIBLE_LEVEL = 0.01
HOME_ALPHA_SCALE = 2.5
FOOD_ALPHA_SCALE = 4.0
HOME_TINT = 50
FADE_LIFESPAN = 50
FADE_SCALE = 5.1
DEFAULT_FONT = "Vertiky.ttf"
FRAME_RATE = 60


def ant_color(ant: Any) -> Color:
    """RGBA colour of an ant: colony colour, green with food, fading near death."""
    r, g, b = GREEN if ant.has_food else tuple(ant.colony_color[:3])
    alpha = 255
    if ant.lifespan < FADE_LIFESPAN:
        fade = int(ant.lifespan * FADE_SCALE)
        darken = 255 - fade
        r, g, b = (max(0, c - darken) for c in (r, g, b))
        alpha = fade
    return (r, g, b, alpha)


def home_pheromone_color(base_color: Sequence[int], value: float) -> Color:
    """RGBA colour of a home-trail cell: the lightened colony colour."""
    r, g, b = (min(255, c + HOME_TINT) for c in base_color[:3])
    return (r, g, b, int(min(255.0, value * HOME_ALPHA_SCALE)))


def food_pheromone_color(value: float) -> Color:
    """RGBA colour of a food-trail cell: gold, more opaque the stronger it is."""
    return (*GOLD, int(min(255.0, value * FOOD_ALPHA_SCALE)))


def _grid_surface(rgb: Sequence[int], alpha: np.ndarray) -> pygame.Surface:
    pixels = np.empty((GRID_SIZE, GRID_SIZE, 4), dtype=np.uint8)
    pixels[..., :3] = rgb
    pixels[..., 3] = alpha.T
    return pygame.image.frombuffer(pixels.tobytes(), (GRID_SIZE, GRID_SIZE), "RGBA")


def _trail_surface(levels: np.ndarray, rgb: Sequence[int], scale: float) -> pygame.Surface:
    alpha = np.where(
        levels > PHEROMONE_VISIBLE_LEVEL,
        np.minimum(255.0, levels * scale),
        0.0,
    ).astype(np.uint8)
    return _grid_surface(rgb, alpha)


def _screen_rect(camera: Camera, wx: float, wy: float, w: float, h: float) -> pygame.Rect:
    x0, y0 = camera.world_to_screen(wx, wy)
    x1, y1 = camera.world_to_screen(wx + w, wy + h)
    return pygame.Rect(
        round(x0), round(y0), max(1, round(x1 - x0)), max(1, round(y1 - y0))
    )


def _blit_grid(target: pygame.Surface, camera: Camera, cell: float, layer: pygame.Surface) -> None:
    vx, vy, vw, vh = camera.viewport_pixels
    left, top = camera.screen_to_world(vx, vy)
    right, bottom = camera.screen_to_world(vx + vw, vy + vh)
    x0 = max(0, math.floor(left / cell))
    y0 = max(0, math.floor(top / cell))
    x1 = min(GRID_SIZE, math.ceil(right / cell))
    y1 = min(GRID_SIZE, math.ceil(bottom / cell))
    if x0 >= x1 or y0 >= y1:
        return
    part = layer.subsurface((x0, y0, x1 - x0, y1 - y0))
    rect = _screen_rect(camera, x0 * cell, y0 * cell, (x1 - x0) * cell, (y1 - y0) * cell)
    target.blit(pygame.transform.scale(part, rect.size), rect.topleft)


def _draw_world(screen: pygame.Surface, sim: Simulation, camera: Camera) -> None:
    cell = sim.cell_size
    vx, vy, vw, vh = camera.viewport_pixels
    screen.set_clip(pygame.Rect(round(vx), round(vy), round(vw), round(vh)))

    radius = cell * 1.5
    for colony in sim.colonies:
        cx = (colony.home_x + 0.5) * cell
        cy = (colony.home_y + 0.5) * cell
        rect = _screen_rect(camera, cx - radius, cy - radius, 2 * radius, 2 * radius)
        pygame.draw.ellipse(screen, colony.color, rect)

    for colony in sim.colonies:
        home_rgb = home_pheromone_color(colony.color, 0.0)[:3]
        _blit_grid(screen, camera, cell, _trail_surface(colony.home_pheromones, home_rgb, HOME_ALPHA_SCALE))
        _blit_grid(screen, camera, cell, _trail_surface(colony.food_pheromones, GOLD, FOOD_ALPHA_SCALE))

    for colony in sim.colonies:
        for ant in colony.ants:
            color = ant_color(ant)
            rect = _screen_rect(camera, ant.x * cell, ant.y * cell, cell, cell)
            if color[3] == 255:
                pygame.draw.rect(screen, color[:3], rect)
            else:
                patch = pygame.Surface(rect.size, pygame.SRCALPHA)
                patch.fill(color)
                screen.blit(patch, rect.topleft)

    food_alpha = np.where(sim.env.food_grid > 0, 255, 0).astype(np.uint8)
    _blit_grid(screen, camera, cell, _grid_surface(GREEN, food_alpha))
    screen.set_clip(None)


def _draw_ui(screen: pygame.Surface, sim: Simulation, font: pygame.font.Font, big_font: pygame.font.Font) -> None:
    stats = sim.stats()
    screen.blit(font.render(f"Total Live Ants: {stats.live_ants}", True, BLACK), (10, 10))
    screen.blit(
        font.render(f"Peak Population: {stats.peak_population}", True, BLACK),
        (10, 10 + font.get_linesize()),
    )
    screen.blit(font.render(f"Total Deaths: {stats.deaths}", True, RED), (10, 70))
    screen.blit(font.render(f"Food Sources: {stats.food_sources}", True, BLUE), (10, 110))
    if sim.state is SimulationState.WAITING_FOR_RESET:
        text = big_font.render(f"Restarting in {sim.reset_countdown}s", True, MAGENTA)
        screen.blit(text, (WINDOW_WIDTH / 2 - 150, WINDOW_HEIGHT / 2 - 20))


def _handle_key(key: int, sim: Simulation, camera: Camera) -> bool:
    """Apply a key press; return False when the program should quit."""
    pan_x = camera.size[0] * PAN_SPEED_FACTOR
    pan_y = camera.size[1] * PAN_SPEED_FACTOR
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_UP:
        camera.zoom(1.0 / KEY_ZOOM_FACTOR)
    elif key == pygame.K_DOWN:
        camera.zoom(KEY_ZOOM_FACTOR)
    elif key in (pygame.K_LEFT, pygame.K_a):
        camera.move(-pan_x, 0.0)
    elif key in (pygame.K_RIGHT, pygame.K_d):
        camera.move(pan_x, 0.0)
    elif key == pygame.K_w:
        camera.move(0.0, -pan_y)
    elif key == pygame.K_s:
        camera.move(0.0, pan_y)
    elif key == pygame.K_r:
        sim.reset()
        camera.reset()
        print("Simulation reset.")
    return True


def _run(font_path: str) -> int:
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Ant Colony Simulation")
    try:
        font = pygame.font.Font(font_path, 28)
        big_font = pygame.font.Font(font_path, 50)
    except (OSError, pygame.error):
        print("Error: Could not load font!", file=sys.stderr)
        return 1

    sim = Simulation(CELL_SIZE)
    camera = Camera(GRID_SIZE * CELL_SIZE, INITIAL_DEFAULT_ZOOM_OUT, WINDOW_WIDTH, WINDOW_HEIGHT)
    clock = pygame.time.Clock()
    panning = False
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                camera.resize(*event.size)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                panning = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                panning = False
            elif event.type == pygame.MOUSEMOTION and panning:
                camera.drag(*event.rel)
            elif event.type == pygame.MOUSEWHEEL:
                px, py = pygame.mouse.get_pos()
                if event.y > 0:
                    camera.zoom_at(1.0 / MOUSE_WHEEL_ZOOM_FACTOR, px, py)
                elif event.y < 0:
                    camera.zoom_at(MOUSE_WHEEL_ZOOM_FACTOR, px, py)
            elif event.type == pygame.KEYDOWN:
                running = _handle_key(event.key, sim, camera) and running

        was_waiting = sim.state is SimulationState.WAITING_FOR_RESET
        sim.advance(clock.tick(FRAME_RATE) / 1000.0)
        if was_waiting and sim.state is SimulationState.RUNNING:
            camera.reset()

        screen.fill(WHITE)
        _draw_world(screen, sim, camera)
        _draw_ui(screen, sim, font, big_font)
        pygame.display.flip()
    return 0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ant colony simulation.")
    parser.add_argument("--font", default=DEFAULT_FONT, help="path to the UI font file")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Verify the install, open the window and run the simulation until closed."""
    args = _parse_args(argv)
    if args.seed is not None:
        rng.seed(args.seed)

    verifier = Verification()
    print(f"Application verification hash: {verifier.stored_verification_hash()}")
    if verifier.verify_application_integrity():
        print("Application integrity verified!")
    else:
        print("Application integrity check failed!")

    pygame.init()
    try:
        return _run(args.font)
    finally:
        pygame.quit()