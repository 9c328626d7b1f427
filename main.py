from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import (
    BACKGROUND,
    CARD_ANCHORS,
    EVENT_COLOR,
    FRAME_RATE,
    GLOW_ALPHA,
    INDICATOR_COLORS,
    INDICATOR_GLOW_RADIUS,
    INDICATOR_RADIUS,
    MANA_TEXT_POS,
    MULTIPLIER_COLOR,
    MUTED_COLOR,
    ORBIT_ALPHA,
    ORBIT_STROKE,
    RATE_TEXT_POS,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TICKS_PER_SECOND,
    WINDOW_TITLE,
)
from manaclick import FixedStepClock, ManaSim
from manaclick.hud import mana_line, multiplier_line, producer_lines, rejection_line
from manaclick.layout import indicator_position, orbit_radius, producer_at, screen_center
from producer_catalog import producer_catalog

logger = logging.getLogger(__name__)

STATUS_FRAMES = 90
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def run_headless(ticks: int, auto_buy: bool) -> ManaSim:
    sim = ManaSim()
    purchases = 0
    for _ in range(ticks):
        sim.advance()
        if not auto_buy:
            continue
        index = sim.cheapest_affordable()
        while index is not None:
            sim.purchase(index)
            purchases += 1
            index = sim.cheapest_affordable()

    levels = ",".join(f"{p.key}={p.level}" for p in sim.producers)
    print(
        f"headless_done t={sim.elapsed_seconds:.1f}s mana={sim.mana:.2f} "
        f"rate={sim.total_multiplier:.2f}/sec purchases={purchases} "
        f"levels[{levels}]"
    )
    return sim


class GameUI:
    def __init__(self, sim: ManaSim):
        if pygame is None:
            raise RuntimeError("pygame is required for graphical mode. Relaunch with --headless.")
        pygame.init()
        pygame.display.init()
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")
        try:
            self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.SCALED | pygame.RESIZABLE)
        except pygame.error as exc:
            raise RuntimeError(f"Could not open a window ({exc}). Relaunch with --headless.") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self.sim = sim
        self.clock = pygame.time.Clock()
        self.stepper = FixedStepClock()
        self.overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        self.fonts = {
            "mana": pygame.font.SysFont(None, 42),
            "rate": pygame.font.SysFont(None, 32),
            "name": pygame.font.SysFont(None, 37),
            "body": pygame.font.SysFont(None, 27),
        }
        self.running = True
        self.status = ""
        self.status_frames = 0

    def handle_input(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                self.running = False
            # MOUSEBUTTONDOWN fires once per press, so a held button never repeats
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                self.click(*ev.pos)

    def click(self, x: int, y: int) -> None:
        index = producer_at(x, y, self.sim.definitions)
        if index is None:
            return
        result = self.sim.purchase(index)
        if not result:
            self.status = rejection_line(self.sim.snapshot().producers[index], result)
            self.status_frames = STATUS_FRAMES

    def _blit(self, text: str, font_key: str, color, pos) -> None:
        self.screen.blit(self.fonts[font_key].render(text, True, color), pos)

    def draw_cards(self, snapshot) -> None:
        for definition, view in zip(self.sim.definitions, snapshot.producers):
            x, y = CARD_ANCHORS[definition.anchor]
            name, cost, speed, multiplier = producer_lines(view)
            self._blit(name, "name", TEXT_COLOR, (x, y))
            self._blit(cost, "body", MUTED_COLOR, (x, y + 40))
            self._blit(speed, "body", MUTED_COLOR, (x, y + 70))
            self._blit(multiplier, "body", MULTIPLIER_COLOR, (x, y + 100))

    def draw_orbits(self, snapshot) -> None:
        self.overlay.fill((0, 0, 0, 0))
        cx, cy = screen_center()
        for index, view in enumerate(snapshot.producers):
            if view.level <= 0:
                continue
            color = INDICATOR_COLORS[index % len(INDICATOR_COLORS)]
            ix, iy = indicator_position(index, view.rotation_angle)
            pygame.draw.circle(self.overlay, (*color, ORBIT_ALPHA), (int(cx), int(cy)), orbit_radius(index), ORBIT_STROKE)
            pygame.draw.circle(self.overlay, (*color, GLOW_ALPHA), (int(ix), int(iy)), INDICATOR_GLOW_RADIUS)
            pygame.draw.circle(self.overlay, color, (int(ix), int(iy)), INDICATOR_RADIUS)
        self.screen.blit(self.overlay, (0, 0))

    def draw(self) -> None:
        snapshot = self.sim.snapshot()
        self.screen.fill(BACKGROUND)
        self._blit(mana_line(snapshot.mana), "mana", TEXT_COLOR, MANA_TEXT_POS)
        self._blit(multiplier_line(snapshot), "rate", TEXT_COLOR, RATE_TEXT_POS)
        self.draw_orbits(snapshot)
        self.draw_cards(snapshot)

        if self.status_frames > 0:
            self.status_frames -= 1
            self._blit(self.status, "body", EVENT_COLOR, (SCREEN_W // 2 - 200, 30))
        if self.sim.event_log:
            self._blit(self.sim.event_log[-1], "body", MUTED_COLOR, (SCREEN_W // 2 - 200, SCREEN_H - 40))

        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(FRAME_RATE) / 1000.0
            self.handle_input()
            self.sim.advance_many(self.stepper.consume(dt))
            self.draw()
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Magic Click mana generator")
    parser.add_argument("--headless", action="store_true", help="run simulation without graphics")
    parser.add_argument(
        "--ticks", type=int, default=TICKS_PER_SECOND * 60, help="headless ticks to run (60 per simulated second)"
    )
    parser.add_argument("--auto-buy", action="store_true", help="headless: buy the cheapest affordable producer")
    parser.add_argument("--list-producers", action="store_true", help="print the producer catalog and exit")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.list_producers:
        print(json.dumps(producer_catalog(), indent=2))
        return

    if args.ticks < 0:
        parser.error("--ticks must be non-negative")

    if args.headless:
        run_headless(args.ticks, args.auto_buy)
        return

    try:
        GameUI(ManaSim()).run()
    except RuntimeError as exc:
        logger.debug("graphical startup failed", exc_info=True)
        print(f"Startup error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
